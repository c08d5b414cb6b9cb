"""Tests for the backend HTTP client."""

import asyncio
import json
import socket
from http.client import BadStatusLine
from unittest.mock import patch
from urllib.error import URLError

import pytest

from apps.core.backend import BackendClient, BackendError, BackendResponse


class TestBackendResponse:
    """Tests for BackendResponse."""

    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_2xx_is_ok(self, status: int) -> None:
        assert BackendResponse(status=status).ok

    @pytest.mark.parametrize("status", [301, 400, 404, 500, 503])
    def test_other_statuses_are_not_ok(self, status: int) -> None:
        assert not BackendResponse(status=status).ok

    def test_json_decodes_body(self) -> None:
        assert BackendResponse(status=200, body=b'[{"a": 1}]').json() == [{"a": 1}]

    def test_json_raises_value_error_on_garbage(self) -> None:
        with pytest.raises(ValueError):
            BackendResponse(status=200, body=b"<html>").json()


class TestBackendClient:
    """Tests for BackendClient requests."""

    def test_trailing_slash_ignored(self) -> None:
        client = BackendClient("http://backend.test///")
        assert client.url("/projects") == "http://backend.test/projects"
        assert client.url("contact") == "http://backend.test/contact"

    def test_from_settings_uses_backend_url(self, settings) -> None:
        settings.BACKEND_URL = "https://api.example.com/"
        settings.BACKEND_TIMEOUT = 3.5
        client = BackendClient.from_settings()
        assert client.base_url == "https://api.example.com"
        assert client.timeout == 3.5

    def test_get_returns_response(self, backend, client_for_backend) -> None:
        backend.respond("/projects", data=[{"title": "X"}])
        response = asyncio.run(client_for_backend.get("/projects"))
        assert response.ok
        assert response.json() == [{"title": "X"}]
        req = backend.calls("/projects")[0]
        assert req.get_method() == "GET"
        assert req.get_header("Accept") == "application/json"

    def test_http_error_is_returned_not_raised(self, backend, client_for_backend) -> None:
        backend.respond("/articles", status=503, body=b"down")
        response = asyncio.run(client_for_backend.get("/articles"))
        assert response.status == 503
        assert not response.ok
        assert response.body == b"down"

    def test_post_json_sends_json_document(self, backend, client_for_backend) -> None:
        backend.respond("/contact", status=201)
        payload = {"name": "Ana", "phone": "", "email": "ana@test.com", "remarks": "Hi"}
        response = asyncio.run(client_for_backend.post_json("/contact", payload))
        assert response.ok
        req = backend.calls("/contact")[0]
        assert req.get_method() == "POST"
        assert req.get_header("Content-type") == "application/json"
        assert json.loads(req.data) == payload

    def test_connection_failure_raises_backend_error(self, backend, client_for_backend) -> None:
        backend.fail("/packages", URLError("Name or service not known"))
        with pytest.raises(BackendError, match="Name or service not known"):
            asyncio.run(client_for_backend.get("/packages"))

    def test_timeout_raises_backend_error(self, backend, client_for_backend) -> None:
        backend.fail("/contact", socket.timeout("timed out"))
        with pytest.raises(BackendError, match="timed out"):
            asyncio.run(client_for_backend.post_json("/contact", {}))

    def test_truncated_body_raises_backend_error(self, backend, client_for_backend) -> None:
        backend.truncate("/projects")
        with pytest.raises(BackendError, match="2 bytes read, 498 more expected"):
            asyncio.run(client_for_backend.get("/projects"))

    def test_bad_status_line_raises_backend_error(self, backend, client_for_backend) -> None:
        backend.fail("/contact", BadStatusLine("garbage"))
        with pytest.raises(BackendError, match="garbage"):
            asyncio.run(client_for_backend.post_json("/contact", {}))

    def test_response_is_closed(self, client_for_backend) -> None:
        with patch("apps.core.backend.urlopen") as urlopen:
            response = urlopen.return_value
            response.__enter__.return_value = response
            response.status = 200
            response.read.return_value = b"[]"

            asyncio.run(client_for_backend.get("/packages"))

        response.__exit__.assert_called_once()
