"""
vtcore - typed Python client for the VirusTotal v3 API.

Files, URLs, IP addresses and domains: reports, comments and votes.
"""

__version__ = "0.1.0"

from ._client import VirusTotal
from ._exceptions import (
    APIError,
    ErrorKind,
    FileTooLargeError,
    InvalidApiKeyError,
    InvalidVerdictError,
    VirusTotalError,
    map_error_code,
)
from ._types import (
    AnalysisReport,
    AnalysisStats,
    AnalysisSubmission,
    Comment,
    CursorPage,
    DomainAttributes,
    FileAttributes,
    IPAddressAttributes,
    URLAttributes,
    Verdict,
    Vote,
    VoteTotals,
)

__all__ = [
    "APIError",
    "AnalysisReport",
    "AnalysisStats",
    "AnalysisSubmission",
    "Comment",
    "CursorPage",
    "DomainAttributes",
    "ErrorKind",
    "FileAttributes",
    "FileTooLargeError",
    "IPAddressAttributes",
    "InvalidApiKeyError",
    "InvalidVerdictError",
    "URLAttributes",
    "Verdict",
    "VirusTotal",
    "VirusTotalError",
    "Vote",
    "VoteTotals",
    "map_error_code",
]
