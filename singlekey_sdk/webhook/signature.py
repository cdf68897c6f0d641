"""Webhook signature computation and verification."""

import hashlib
import hmac
import re
import time
from typing import Callable, NamedTuple, Optional, Union

from singlekey_sdk.errors import WebhookError, WebhookErrorKind

DEFAULT_TOLERANCE_SECONDS = 300

Payload = Union[str, bytes]

# Canonical Unix seconds: no sign, no leading zeros, bounded length
_TIMESTAMP_RE = re.compile(r"0|[1-9][0-9]{0,14}")


class SignedWebhook(NamedTuple):
    """Signature and timestamp header values for a payload."""

    signature: str
    timestamp: str


def _to_bytes(value: Payload) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8", errors="surrogatepass")


def compute_signature(payload: Payload, secret: Payload, timestamp: Union[str, int]) -> str:
    """
    Compute the hex HMAC-SHA256 signature of a webhook payload.

    The signed message is ``"{timestamp}.{payload}"`` using the payload bytes
    exactly as received.
    """
    message = str(timestamp).encode("utf-8") + b"." + _to_bytes(payload)
    return hmac.new(_to_bytes(secret), message, hashlib.sha256).hexdigest()


def construct_webhook_signature(
    payload: Payload,
    secret: Payload,
    timestamp: Optional[int] = None,
) -> SignedWebhook:
    """
    Build the signature headers SingleKey would send for a payload.

    Intended for test fixtures and local tooling.

    Args:
        payload: Raw webhook body
        secret: Webhook secret
        timestamp: Unix seconds (default: now)

    Returns:
        SignedWebhook with ``signature`` and ``timestamp`` strings
    """
    ts = int(time.time()) if timestamp is None else int(timestamp)
    return SignedWebhook(signature=compute_signature(payload, secret, ts), timestamp=str(ts))


class WebhookVerifier:
    """Verifies webhook signatures with replay protection."""

    def __init__(
        self,
        secret: Optional[Payload] = None,
        tolerance: int = DEFAULT_TOLERANCE_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize verifier.

        Args:
            secret: Webhook secret; verification fails with a configuration
                error when it is missing
            tolerance: Maximum allowed clock skew in seconds
            clock: Source of the current Unix time
        """
        if isinstance(tolerance, bool) or not isinstance(tolerance, int) or tolerance < 0:
            raise ValueError("tolerance must be a non-negative integer")
        self._secret = _to_bytes(secret) if secret else None
        self._tolerance = tolerance
        self._clock = clock

    @property
    def configured(self) -> bool:
        """Whether a secret is set."""
        return self._secret is not None

    @property
    def tolerance(self) -> int:
        """Tolerance window in seconds."""
        return self._tolerance

    def check_timestamp(self, timestamp: str) -> int:
        """Parse the timestamp header and enforce the tolerance window."""
        if not isinstance(timestamp, str) or not _TIMESTAMP_RE.fullmatch(timestamp):
            raise WebhookError(WebhookErrorKind.FORMAT, "Invalid timestamp format")

        sent_at = int(timestamp)
        now = int(self._clock())
        if abs(now - sent_at) > self._tolerance:
            raise WebhookError(
                WebhookErrorKind.STALENESS,
                "Webhook timestamp too old or from the future",
            )
        return sent_at

    def verify(self, payload: Payload, signature: str, timestamp: str) -> bool:
        """
        Verify a webhook signature.

        Args:
            payload: Raw request body, unmodified
            signature: X-SingleKey-Signature header value
            timestamp: X-SingleKey-Timestamp header value

        Returns:
            True if the signature matches, False otherwise

        Raises:
            WebhookError: No secret configured, malformed timestamp, or a
                timestamp outside the tolerance window
        """
        if self._secret is None:
            raise WebhookError(WebhookErrorKind.CONFIGURATION, "Webhook secret not configured")

        # Freshness before any secret-dependent work
        self.check_timestamp(timestamp)

        expected = compute_signature(payload, self._secret, timestamp)
        supplied = _to_bytes(signature or "")

        # Constant-time comparison
        return hmac.compare_digest(expected.encode("utf-8"), supplied)

    def __repr__(self) -> str:
        return f"WebhookVerifier(configured={self.configured}, tolerance={self._tolerance})"
