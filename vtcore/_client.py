"""VirusTotal v3 client entry point."""

from __future__ import annotations

import os

from ._exceptions import InvalidApiKeyError
from ._http import HTTPClient
from ._resources import Domains, Files, IPAddresses, URLs

DEFAULT_BASE_URL = "https://www.virustotal.com/api/v3"


class VirusTotal:
    """Client for the VirusTotal v3 API.

    Usage:
        with VirusTotal(api_key="...") as vt:
            report = vt.ip_addresses.get_report("8.8.8.8")
            print(report.attributes.last_analysis_stats.malicious)
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60,
    ):
        api_key = api_key if api_key is not None else os.environ.get("VT_API_KEY")
        if not api_key or not api_key.strip():
            raise InvalidApiKeyError(
                "Api key shouldn't be empty. Pass api_key= or set VT_API_KEY env var."
            )

        self._http = HTTPClient(api_key=api_key, base_url=base_url, timeout=timeout)
        self.files = Files(self._http)
        self.ip_addresses = IPAddresses(self._http)
        self.urls = URLs(self._http)
        self.domains = Domains(self._http)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> VirusTotal:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
