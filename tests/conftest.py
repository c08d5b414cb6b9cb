"""Pytest configuration for the portfolio tests."""

import io
import json
from http.client import IncompleteRead
from unittest.mock import MagicMock, patch
from urllib.error import HTTPError, URLError
from urllib.parse import urlsplit

import pytest

from apps.core.backend import BackendClient


class FakeBackend:
    """Stand-in for the remote backend, answering patched ``urlopen`` calls by path."""

    def __init__(self) -> None:
        self.routes: dict[str, object] = {}
        self.requests: list = []

    def respond(self, path: str, status: int = 200, data=None, *, body: bytes | None = None) -> None:
        if body is None:
            body = json.dumps(data).encode() if data is not None else b""
        self.routes[path] = (status, body)

    def fail(self, path: str, exc: Exception) -> None:
        self.routes[path] = exc

    def truncate(self, path: str) -> None:
        """Answer 200 but drop the connection partway through the body."""
        self.routes[path] = (200, IncompleteRead(b"[{", 498))

    def calls(self, path: str) -> list:
        return [req for req in self.requests if urlsplit(req.full_url).path == path]

    def __call__(self, req, timeout=None):
        self.requests.append(req)
        route = self.routes.get(urlsplit(req.full_url).path)
        if route is None:
            raise URLError("[Errno 111] Connection refused")
        if isinstance(route, Exception):
            raise route
        status, body = route
        if status >= 400:
            raise HTTPError(req.full_url, status, "error", None, io.BytesIO(body))
        response = MagicMock()
        response.__enter__.return_value = response
        response.status = status
        if isinstance(body, Exception):
            response.read.side_effect = body
        else:
            response.read.return_value = body
        return response


@pytest.fixture
def backend() -> FakeBackend:
    """Patch the backend client's transport with a routable fake."""
    fake = FakeBackend()
    with patch("apps.core.backend.urlopen", side_effect=fake):
        yield fake


@pytest.fixture
def client_for_backend() -> BackendClient:
    return BackendClient("http://backend.test/", timeout=1)
