"""Dataclass models mirroring VirusTotal v3 response schemas.

Field lookup is case-insensitive: every ``from_dict`` lower-cases the keys of
its input before reading them.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _lower_keys(data: dict | None) -> dict:
    return {str(k).lower(): v for k, v in (data or {}).items()}


class Verdict(str, Enum):
    """Community verdict accepted by the votes endpoints."""

    HARMLESS = "harmless"
    MALICIOUS = "malicious"


@dataclass
class CursorPage(Generic[T]):
    """One page of a cursor-paginated listing (comments, votes)."""

    data: list[T]
    cursor: str | None = None
    count: int | None = None
    _fetch_next: Callable[..., CursorPage[T]] | None = field(
        default=None, repr=False, compare=False
    )

    @property
    def has_more(self) -> bool:
        return bool(self.cursor)

    def auto_paging_iter(self) -> Iterator[T]:
        """Yield items from this page and every following page."""
        page: CursorPage[T] = self
        while True:
            yield from page.data
            if not page.has_more or page._fetch_next is None:
                return
            page = page._fetch_next(cursor=page.cursor)


@dataclass
class AnalysisStats:
    """Per-verdict engine counts from the last analysis."""

    harmless: int = 0
    malicious: int = 0
    suspicious: int = 0
    undetected: int = 0
    timeout: int = 0

    @classmethod
    def from_dict(cls, data: dict | None) -> AnalysisStats:
        data = _lower_keys(data)
        return cls(
            harmless=data.get("harmless", 0),
            malicious=data.get("malicious", 0),
            suspicious=data.get("suspicious", 0),
            undetected=data.get("undetected", 0),
            timeout=data.get("timeout", 0),
        )


@dataclass
class VoteTotals:
    harmless: int = 0
    malicious: int = 0

    @classmethod
    def from_dict(cls, data: dict | None) -> VoteTotals:
        data = _lower_keys(data)
        return cls(harmless=data.get("harmless", 0), malicious=data.get("malicious", 0))


@dataclass
class IPAddressAttributes:
    """Attributes of an ``ip_address`` object."""

    as_owner: str | None
    asn: int | None
    country: str | None
    continent: str | None
    network: str | None
    regional_internet_registry: str | None
    reputation: int
    tags: list[str]
    last_analysis_date: int | None
    last_analysis_stats: AnalysisStats
    last_analysis_results: dict
    total_votes: VoteTotals
    whois: str | None

    @classmethod
    def from_dict(cls, data: dict) -> IPAddressAttributes:
        data = _lower_keys(data)
        return cls(
            as_owner=data.get("as_owner"),
            asn=data.get("asn"),
            country=data.get("country"),
            continent=data.get("continent"),
            network=data.get("network"),
            regional_internet_registry=data.get("regional_internet_registry"),
            reputation=data.get("reputation", 0),
            tags=data.get("tags", []),
            last_analysis_date=data.get("last_analysis_date"),
            last_analysis_stats=AnalysisStats.from_dict(data.get("last_analysis_stats")),
            last_analysis_results=data.get("last_analysis_results", {}),
            total_votes=VoteTotals.from_dict(data.get("total_votes")),
            whois=data.get("whois"),
        )


@dataclass
class DomainAttributes:
    """Attributes of a ``domain`` object."""

    registrar: str | None
    tld: str | None
    creation_date: int | None
    categories: dict[str, str]
    reputation: int
    tags: list[str]
    last_analysis_date: int | None
    last_analysis_stats: AnalysisStats
    last_analysis_results: dict
    total_votes: VoteTotals
    whois: str | None

    @classmethod
    def from_dict(cls, data: dict) -> DomainAttributes:
        data = _lower_keys(data)
        return cls(
            registrar=data.get("registrar"),
            tld=data.get("tld"),
            creation_date=data.get("creation_date"),
            categories=data.get("categories", {}),
            reputation=data.get("reputation", 0),
            tags=data.get("tags", []),
            last_analysis_date=data.get("last_analysis_date"),
            last_analysis_stats=AnalysisStats.from_dict(data.get("last_analysis_stats")),
            last_analysis_results=data.get("last_analysis_results", {}),
            total_votes=VoteTotals.from_dict(data.get("total_votes")),
            whois=data.get("whois"),
        )


@dataclass
class URLAttributes:
    """Attributes of a ``url`` object."""

    url: str | None
    final_url: str | None
    title: str | None
    categories: dict[str, str]
    reputation: int
    tags: list[str]
    times_submitted: int
    first_submission_date: int | None
    last_analysis_date: int | None
    last_analysis_stats: AnalysisStats
    last_analysis_results: dict
    last_http_response_code: int | None
    total_votes: VoteTotals

    @classmethod
    def from_dict(cls, data: dict) -> URLAttributes:
        data = _lower_keys(data)
        return cls(
            url=data.get("url"),
            final_url=data.get("last_final_url"),
            title=data.get("title"),
            categories=data.get("categories", {}),
            reputation=data.get("reputation", 0),
            tags=data.get("tags", []),
            times_submitted=data.get("times_submitted", 0),
            first_submission_date=data.get("first_submission_date"),
            last_analysis_date=data.get("last_analysis_date"),
            last_analysis_stats=AnalysisStats.from_dict(data.get("last_analysis_stats")),
            last_analysis_results=data.get("last_analysis_results", {}),
            last_http_response_code=data.get("last_http_response_code"),
            total_votes=VoteTotals.from_dict(data.get("total_votes")),
        )


@dataclass
class FileAttributes:
    """Attributes of a ``file`` object."""

    md5: str | None
    sha1: str | None
    sha256: str | None
    size: int | None
    type_description: str | None
    meaningful_name: str | None
    names: list[str]
    reputation: int
    tags: list[str]
    times_submitted: int
    last_analysis_date: int | None
    last_analysis_stats: AnalysisStats
    last_analysis_results: dict
    total_votes: VoteTotals

    @classmethod
    def from_dict(cls, data: dict) -> FileAttributes:
        data = _lower_keys(data)
        return cls(
            md5=data.get("md5"),
            sha1=data.get("sha1"),
            sha256=data.get("sha256"),
            size=data.get("size"),
            type_description=data.get("type_description"),
            meaningful_name=data.get("meaningful_name"),
            names=data.get("names", []),
            reputation=data.get("reputation", 0),
            tags=data.get("tags", []),
            times_submitted=data.get("times_submitted", 0),
            last_analysis_date=data.get("last_analysis_date"),
            last_analysis_stats=AnalysisStats.from_dict(data.get("last_analysis_stats")),
            last_analysis_results=data.get("last_analysis_results", {}),
            total_votes=VoteTotals.from_dict(data.get("total_votes")),
        )


@dataclass
class AnalysisReport(Generic[T]):
    """The ``data`` object of a report response: id, type and typed attributes."""

    id: str
    type: str
    attributes: T
    links: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict, attributes: Callable[[dict], T]) -> AnalysisReport[T]:
        data = _lower_keys(data)
        return cls(
            id=data["id"],
            type=data["type"],
            attributes=attributes(data.get("attributes") or {}),
            links=data.get("links") or {},
        )


@dataclass
class AnalysisSubmission:
    """Handle for a queued analysis. The report is produced asynchronously."""

    id: str
    type: str

    @classmethod
    def from_dict(cls, data: dict) -> AnalysisSubmission:
        data = _lower_keys(data)
        return cls(id=data["id"], type=data.get("type", "analysis"))


@dataclass
class Comment:
    """A community comment. ``tags`` are extracted by the service from #words."""

    id: str
    text: str
    date: int | None
    tags: list[str]
    html: str | None
    votes: dict[str, int]

    @classmethod
    def from_dict(cls, data: dict) -> Comment:
        data = _lower_keys(data)
        attrs = _lower_keys(data.get("attributes"))
        return cls(
            id=data["id"],
            text=attrs.get("text", ""),
            date=attrs.get("date"),
            tags=attrs.get("tags", []),
            html=attrs.get("html"),
            votes=attrs.get("votes", {}),
        )


@dataclass
class Vote:
    """A community vote on an object."""

    id: str
    verdict: str
    date: int | None
    value: int | None

    @classmethod
    def from_dict(cls, data: dict) -> Vote:
        data = _lower_keys(data)
        attrs = _lower_keys(data.get("attributes"))
        return cls(
            id=data["id"],
            verdict=attrs.get("verdict", ""),
            date=attrs.get("date"),
            value=attrs.get("value"),
        )


def comment_envelope(text: str) -> dict[str, Any]:
    return {"data": {"type": "comment", "attributes": {"text": text}}}


def vote_envelope(verdict: Verdict) -> dict[str, Any]:
    return {"data": {"type": "vote", "attributes": {"verdict": verdict.value}}}
