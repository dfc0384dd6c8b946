"""Shared helpers for resource modules."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import requests

from .._exceptions import APIError, ErrorKind, InvalidVerdictError
from .._types import AnalysisReport, AnalysisSubmission, CursorPage, Verdict, _lower_keys

T = TypeVar("T")


def _build_params(**kwargs: Any) -> dict:
    """Build query params dict, omitting None values."""
    return {k: v for k, v in kwargs.items() if v is not None}


def _decode(resp: requests.Response, decode: Callable[[Any], T]) -> T:
    """Run ``decode`` on the JSON body of a success response.

    A body that is not JSON or lacks the expected members raises a GENERIC
    APIError, the same as an unreadable error body.
    """
    try:
        return decode(resp.json())
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        raise APIError(
            f"Unexpected response body: {resp.text[:200]}",
            kind=ErrorKind.GENERIC,
            status_code=resp.status_code,
        ) from e


def _data(resp: requests.Response) -> Any:
    """Return the ``data`` member of a success envelope."""
    return _decode(resp, lambda body: _lower_keys(body)["data"])


def _report(resp: requests.Response, attributes: Callable[[dict], T]) -> AnalysisReport[T]:
    return _decode(resp, lambda body: AnalysisReport.from_dict(_lower_keys(body)["data"], attributes))


def _page(
    resp: requests.Response,
    item: Callable[[dict], T],
    fetch_next: Callable[..., CursorPage[T]],
) -> CursorPage[T]:
    def _build(raw: Any) -> CursorPage[T]:
        body = _lower_keys(raw)
        meta = _lower_keys(body.get("meta"))
        return CursorPage(
            data=[item(d) for d in body.get("data") or []],
            cursor=meta.get("cursor"),
            count=meta.get("count"),
            _fetch_next=fetch_next,
        )

    return _decode(resp, _build)

def _coerce_verdict(verdict: Verdict | str) -> Verdict:
    """Validate a verdict locally; nothing else is ever sent."""
    try:
        return Verdict(verdict.lower() if isinstance(verdict, str) else verdict)
    except ValueError:
        raise InvalidVerdictError(
            f"The verdict must be either harmless or malicious, got {verdict!r}."
        ) from None


def _submission(resp: requests.Response) -> AnalysisSubmission:
    return _decode(resp, lambda body: AnalysisSubmission.from_dict(_lower_keys(body)["data"]))
