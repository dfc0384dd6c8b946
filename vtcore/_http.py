"""Thin HTTP client wrapping requests.Session with the x-apikey header and error mapping."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

import requests

from ._exceptions import APIError, ErrorKind, InvalidApiKeyError, map_error_code

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestDescriptor:
    """One prepared call. ``path`` is relative to the base URL unless absolute."""

    method: str
    path: str
    params: dict[str, Any] | None = None
    json: Any = None
    data: dict[str, Any] | None = None
    files: dict[str, Any] | None = None


def _raise_for_status(resp: requests.Response, *, method: str = "", path: str = "") -> None:
    """Decode the ``{"error": {"code", "message"}}`` envelope and raise the mapped APIError."""
    message = resp.text or f"HTTP {resp.status_code}"
    kind = ErrorKind.GENERIC
    try:
        error_obj = resp.json()["error"]
        kind = map_error_code(error_obj.get("code"))
        message = error_obj.get("message") or message
    except (ValueError, KeyError, TypeError, AttributeError):
        logger.debug("Failed to parse error body: %s", resp.text[:200] if resp.text else "empty")

    resp.close()
    raise APIError(message, kind=kind, status_code=resp.status_code, method=method, path=path)


class HTTPClient:
    """Minimal HTTP client: one session, x-apikey auth, typed errors, no retry."""

    def __init__(self, api_key: str, base_url: str, timeout: float = 60):
        if not api_key or not api_key.strip():
            raise InvalidApiKeyError("Api key shouldn't be empty.")
        self._session = requests.Session()
        self._session.headers["x-apikey"] = api_key
        self._session.headers["Accept"] = "application/json"
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def _url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self._base_url}{path}"

    def execute(self, descriptor: RequestDescriptor, *, timeout: float | None = None) -> requests.Response:
        """Send the request; return the successful response or raise APIError."""
        url = self._url(descriptor.path)
        logger.debug("%s %s", descriptor.method, url)
        try:
            resp = self._session.request(
                descriptor.method,
                url,
                params=descriptor.params,
                json=descriptor.json,
                data=descriptor.data,
                files=descriptor.files,
                timeout=timeout if timeout is not None else self._timeout,
            )
        except requests.Timeout as e:
            raise APIError(
                str(e), kind=ErrorKind.TIMEOUT, method=descriptor.method, path=url
            ) from e
        except requests.RequestException as e:
            raise APIError(
                str(e), kind=ErrorKind.TRANSPORT, method=descriptor.method, path=url
            ) from e

        if not resp.ok:
            _raise_for_status(resp, method=descriptor.method, path=url)
        return resp

    def request(
        self, method: str, path: str, *, timeout: float | None = None, **kwargs: Any
    ) -> requests.Response:
        """Build a RequestDescriptor from keyword arguments and execute it."""
        return self.execute(RequestDescriptor(method, path, **kwargs), timeout=timeout)

    def close(self) -> None:
        self._session.close()
