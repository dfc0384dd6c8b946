"""Domains resource — reports, comments and votes for an internet domain."""

from __future__ import annotations

from .._types import AnalysisReport, DomainAttributes
from ._community import CommunityResource
from ._utils import _report


class Domains(CommunityResource):
    """client.domains — ``/domains/{domain}``."""

    _path = "/domains"

    def get_report(
        self, domain: str, *, timeout: float | None = None
    ) -> AnalysisReport[DomainAttributes]:
        resp = self._http.request("GET", f"{self._path}/{domain}", timeout=timeout)
        return _report(resp, DomainAttributes.from_dict)
