"""Comments and votes shared by IP address and domain resources."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .._types import Comment, CursorPage, Verdict, Vote, comment_envelope, vote_envelope
from ._utils import _build_params, _coerce_verdict, _page

if TYPE_CHECKING:
    from .._http import HTTPClient


class CommunityResource:
    """Base for resources that carry community comments and votes under ``/{id}``."""

    _path: str = ""

    def __init__(self, http: HTTPClient):
        self._http = http

    def get_comments(
        self,
        key: str,
        *,
        cursor: str | None = None,
        limit: int = 10,
        timeout: float | None = None,
    ) -> CursorPage[Comment]:
        """List comments, newest first. Pass a previous page's ``cursor`` to continue."""
        params = _build_params(limit=limit, cursor=cursor)
        resp = self._http.request(
            "GET", f"{self._path}/{key}/comments", params=params, timeout=timeout
        )

        def _fetch_next(**kw: object) -> CursorPage[Comment]:
            return self.get_comments(key, limit=limit, timeout=timeout, **kw)  # type: ignore[arg-type]

        return _page(resp, Comment.from_dict, _fetch_next)

    def add_comment(self, key: str, text: str, *, timeout: float | None = None) -> None:
        """Post a comment. Words starting with # become tags on the service side.

        Raises APIError with kind ALREADY_EXISTS for a duplicate comment and
        BAD_REQUEST for empty text.
        """
        self._http.request(
            "POST", f"{self._path}/{key}/comments", json=comment_envelope(text), timeout=timeout
        )

    def get_votes(
        self,
        key: str,
        *,
        cursor: str | None = None,
        limit: int | None = None,
        timeout: float | None = None,
    ) -> CursorPage[Vote]:
        """List community votes."""
        params = _build_params(limit=limit, cursor=cursor)
        resp = self._http.request(
            "GET", f"{self._path}/{key}/votes", params=params or None, timeout=timeout
        )

        def _fetch_next(**kw: object) -> CursorPage[Vote]:
            return self.get_votes(key, limit=limit, timeout=timeout, **kw)  # type: ignore[arg-type]

        return _page(resp, Vote.from_dict, _fetch_next)

    def add_vote(self, key: str, verdict: Verdict | str, *, timeout: float | None = None) -> None:
        """Vote harmless or malicious. Other verdicts raise InvalidVerdictError before sending."""
        envelope = vote_envelope(_coerce_verdict(verdict))
        self._http.request(
            "POST", f"{self._path}/{key}/votes", json=envelope, timeout=timeout
        )
