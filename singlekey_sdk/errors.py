"""Error types raised by the SingleKey SDK."""

from enum import Enum
from typing import Any, Optional


class SingleKeyError(Exception):
    """Base class for all SingleKey SDK errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(SingleKeyError):
    """Client configuration is invalid."""


class AuthenticationError(SingleKeyError):
    """Invalid or missing API token (401)."""

    def __init__(self, message: str = "Invalid or missing API token"):
        super().__init__(message)


class ValidationError(SingleKeyError):
    """Request rejected by the API (400)."""

    def __init__(self, message: str, errors: Optional[list[str]] = None):
        super().__init__(message)
        self.errors = list(errors or [])


class NotFoundError(SingleKeyError):
    """Resource not found (404)."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)


class RateLimitError(SingleKeyError):
    """Rate limit exceeded (429)."""

    def __init__(self, message: str = "Rate limit exceeded. Please try again later."):
        super().__init__(message)


class ServerError(SingleKeyError):
    """Server-side failure (5xx) or network error."""

    def __init__(self, message: str = "Server error occurred", status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class APIError(SingleKeyError):
    """Any other non-2xx API response."""

    def __init__(self, message: str, status_code: int, response: Optional[Any] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class ReportTimeoutError(SingleKeyError):
    """Report did not complete within the polling budget."""


class WebhookErrorKind(str, Enum):
    """Reason a webhook delivery was rejected."""

    CONFIGURATION = "configuration"
    FORMAT = "format"
    STALENESS = "staleness"
    SIGNATURE_MISMATCH = "signature_mismatch"
    PAYLOAD_PARSE = "payload_parse"


class WebhookError(SingleKeyError):
    """
    Webhook verification or decoding failure.

    A single exception type for every webhook failure; callers branch on
    ``kind`` rather than on subclasses. ``errors`` holds per-field messages
    when a payload fails model validation.

    Attributes:
        kind: Which stage rejected the delivery
        errors: Structured detail, empty unless the payload failed validation
    """

    def __init__(
        self,
        kind: WebhookErrorKind,
        message: str,
        errors: Optional[list[str]] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.errors = list(errors or [])

    @property
    def http_status(self) -> int:
        """Recommended response status at an HTTP boundary."""
        if self.kind is WebhookErrorKind.PAYLOAD_PARSE:
            return 400
        return 401

    def __repr__(self) -> str:
        return f"WebhookError(kind={self.kind.value!r}, message={self.message!r})"
