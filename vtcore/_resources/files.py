"""Files resource — upload files for analysis and fetch reports by hash."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from .._exceptions import FileTooLargeError
from .._types import AnalysisReport, AnalysisSubmission, FileAttributes
from ._utils import _data, _report, _submission

if TYPE_CHECKING:
    from .._http import HTTPClient

logger = logging.getLogger(__name__)

# Direct uploads to /files are capped by the service; bigger files need get_upload_url().
MAX_DIRECT_UPLOAD_SIZE = 32 * 1024 * 1024


class Files:
    """client.files — ``/files``."""

    _path = "/files"

    def __init__(self, http: HTTPClient):
        self._http = http

    def get_upload_url(self, *, timeout: float | None = None) -> str:
        """Get a one-time URL for uploading a file larger than 32 MB."""
        resp = self._http.request("GET", f"{self._path}/upload_url", timeout=timeout)
        return _data(resp)

    def upload(
        self,
        path: str | os.PathLike[str],
        *,
        upload_url: str | None = None,
        timeout: float | None = None,
    ) -> AnalysisSubmission:
        """Submit a file for analysis.

        Returns the analysis handle, not the report: analysis runs
        asynchronously on the service. Files over 32 MB must go through
        ``upload_url`` (see get_upload_url); otherwise FileTooLargeError is
        raised before anything is sent.
        """
        size = os.path.getsize(path)
        if not upload_url and size > MAX_DIRECT_UPLOAD_SIZE:
            raise FileTooLargeError(
                f"{os.fspath(path)} is {size} bytes; files over "
                f"{MAX_DIRECT_UPLOAD_SIZE} bytes need an upload URL."
            )
        logger.debug("Uploading %s (%d bytes)", os.fspath(path), size)
        with open(path, "rb") as fh:
            resp = self._http.request(
                "POST",
                upload_url or self._path,
                files={"file": (os.path.basename(path), fh)},
                timeout=timeout,
            )
        return _submission(resp)

    def get_report(
        self, file_hash: str, *, timeout: float | None = None
    ) -> AnalysisReport[FileAttributes]:
        """Get the report for an MD5, SHA-1 or SHA-256 hash. Unknown hashes raise NOT_FOUND."""
        resp = self._http.request("GET", f"{self._path}/{file_hash}", timeout=timeout)
        return _report(resp, FileAttributes.from_dict)
