"""IP addresses resource — reports, comments and votes for an IPv4/IPv6 address."""

from __future__ import annotations

from .._types import AnalysisReport, IPAddressAttributes
from ._community import CommunityResource
from ._utils import _report


class IPAddresses(CommunityResource):
    """client.ip_addresses — ``/ip_addresses/{ip}``.

    The address is not validated locally; the service answers NOT_FOUND for
    empty or malformed input.
    """

    _path = "/ip_addresses"

    def get_report(
        self, ip: str, *, timeout: float | None = None
    ) -> AnalysisReport[IPAddressAttributes]:
        resp = self._http.request("GET", f"{self._path}/{ip}", timeout=timeout)
        return _report(resp, IPAddressAttributes.from_dict)
