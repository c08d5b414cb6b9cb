"""HTTP client for the portfolio backend service."""

import asyncio
import json
import logging
from dataclasses import dataclass
from http.client import HTTPException
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from django.conf import settings

logger = logging.getLogger(__name__)


class BackendError(RuntimeError):
    """Raised when the backend cannot be reached at all."""


@dataclass(frozen=True)
class BackendResponse:
    """Status and raw body of a completed backend request."""

    status: int
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self):
        """Decode the body as JSON. Raises ValueError on malformed content."""
        return json.loads(self.body)


class BackendClient:
    """
    Thin client for the backend origin serving /projects, /packages,
    /articles and /contact.

    The origin is always passed in explicitly; use ``from_settings`` to build
    one from ``BACKEND_URL`` and ``BACKEND_TIMEOUT``.
    """

    def __init__(self, base_url: str, timeout: float = 10.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_settings(cls) -> "BackendClient":
        return cls(
            getattr(settings, "BACKEND_URL", "http://localhost:8000"),
            timeout=getattr(settings, "BACKEND_TIMEOUT", 10.0),
        )

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(
        self,
        path: str,
        *,
        method: str = "GET",
        data: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> BackendResponse:
        """Synchronous backend request (for use in executors)."""
        req = Request(self.url(path), data=data, headers=headers or {}, method=method)  # noqa: S310
        try:
            with urlopen(req, timeout=self.timeout) as response:  # noqa: S310
                return BackendResponse(status=response.status, body=response.read())
        except HTTPError as exc:
            logger.debug("Backend %s %s returned HTTP %s", method, path, exc.code)
            with exc:
                return BackendResponse(status=exc.code, body=exc.read() or b"")
        except URLError as exc:
            raise BackendError(str(exc.reason)) from exc
        except (HTTPException, OSError) as exc:
            # Socket timeouts are OSError; truncated bodies and bad status lines are HTTPException
            raise BackendError(str(exc) or exc.__class__.__name__) from exc

    async def get(self, path: str) -> BackendResponse:
        """GET ``path`` on the backend origin."""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(
            None,
            lambda: self._request(path, headers={"Accept": "application/json"}),
        )

    async def post_json(self, path: str, payload: dict) -> BackendResponse:
        """POST ``payload`` as a JSON document to ``path``."""
        data = json.dumps(payload).encode()
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(
            None,
            lambda: self._request(
                path,
                method="POST",
                data=data,
                headers={"Content-Type": "application/json"},
            ),
        )
