"""Error taxonomy for VirusTotal API failures and local precondition checks."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Tag for an API failure. Values are the remote error codes.

    https://docs.virustotal.com/reference/errors
    """

    AUTHENTICATION_REQUIRED = "AuthenticationRequiredError"
    BAD_REQUEST = "BadRequestError"
    INVALID_ARGUMENT = "InvalidArgumentError"
    NOT_AVAILABLE_YET = "NotAvailableYet"
    UNSELECTIVE_CONTENT_QUERY = "UnselectiveContentQueryError"
    UNSUPPORTED_CONTENT_QUERY = "UnsupportedContentQueryError"
    USER_NOT_ACTIVE = "UserNotActiveError"
    WRONG_CREDENTIALS = "WrongCredentialsError"
    FORBIDDEN = "ForbiddenError"
    ALREADY_EXISTS = "AlreadyExistsError"
    FAILED_DEPENDENCY = "FailedDependencyError"
    QUOTA_EXCEEDED = "QuotaExceededError"
    TOO_MANY_REQUESTS = "TooManyRequestsError"
    TRANSIENT = "TransientError"
    DEADLINE_EXCEEDED = "DeadlineExceededError"
    NOT_FOUND = "NotFoundError"
    # Not sent by the API: unknown codes, unreadable bodies, network failures.
    GENERIC = "Generic"
    TRANSPORT = "Transport"
    TIMEOUT = "Timeout"


# Codes the API can put in an error envelope. Local-only kinds are excluded
# so that a remote body claiming "Transport" still maps to GENERIC.
_REMOTE_CODES: dict[str, ErrorKind] = {
    kind.value: kind
    for kind in ErrorKind
    if kind not in (ErrorKind.GENERIC, ErrorKind.TRANSPORT, ErrorKind.TIMEOUT)
}


def map_error_code(code: object) -> ErrorKind:
    """Map an error envelope ``code`` to its ErrorKind. Never raises."""
    if not isinstance(code, str):
        return ErrorKind.GENERIC
    return _REMOTE_CODES.get(code, ErrorKind.GENERIC)


class VirusTotalError(Exception):
    """Base exception for all vtcore errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class APIError(VirusTotalError):
    """A failed call: remote error envelope, unreadable response or network failure."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.GENERIC,
        status_code: int | None = None,
        method: str | None = None,
        path: str | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code
        self.method = method
        self.path = path

    def __repr__(self) -> str:
        return f"APIError(kind={self.kind.name}, status_code={self.status_code}, message={self.message!r})"


class InvalidApiKeyError(VirusTotalError, ValueError):
    """Empty or whitespace-only API key."""


class InvalidVerdictError(VirusTotalError, ValueError):
    """Verdict other than harmless or malicious."""


class FileTooLargeError(VirusTotalError, ValueError):
    """File exceeds the direct upload limit and no upload URL was given."""
