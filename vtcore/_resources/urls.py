"""URLs resource — scan a URL and fetch its report."""

from __future__ import annotations

import base64
import logging
from typing import TYPE_CHECKING

from .._exceptions import APIError, ErrorKind
from .._types import AnalysisReport, AnalysisSubmission, URLAttributes
from ._utils import _data, _report

if TYPE_CHECKING:
    from .._http import HTTPClient

logger = logging.getLogger(__name__)


def url_id(url: str) -> str:
    """Identifier of a URL object: standard base64 of its UTF-8 bytes, padding kept."""
    return base64.b64encode(url.encode("utf-8")).decode("ascii")


class URLs:
    """client.urls — ``/urls``."""

    _path = "/urls"

    def __init__(self, http: HTTPClient):
        self._http = http

    def scan(self, url: str, *, timeout: float | None = None) -> AnalysisSubmission:
        """Submit ``url`` for scanning as a multipart form field."""
        resp = self._http.request(
            "POST", self._path, files={"url": (None, url)}, timeout=timeout
        )
        data = _data(resp)
        if not isinstance(data, dict) or not data.get("id"):
            raise APIError(
                f"Scan response has no analysis id: {resp.text[:200]}",
                kind=ErrorKind.GENERIC,
                status_code=resp.status_code,
                method="POST",
                path=self._path,
            )
        return AnalysisSubmission.from_dict(data)

    def get_report(
        self, url: str, *, timeout: float | None = None
    ) -> AnalysisReport[URLAttributes]:
        """Scan ``url``, then fetch its report.

        The report is addressed by url_id(url), not by the analysis id the
        scan returns; the service does not resolve the latter under /urls.
        """
        submission = self.scan(url, timeout=timeout)
        logger.debug("Scan of %s queued as %s", url, submission.id)
        resp = self._http.request("GET", f"{self._path}/{url_id(url)}", timeout=timeout)
        return _report(resp, URLAttributes.from_dict)
