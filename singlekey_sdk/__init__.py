"""SingleKey Python SDK."""

import logging

__version__ = "0.1.0"

from singlekey_sdk import validation
from singlekey_sdk.client import SingleKeyClient, create_client
from singlekey_sdk.errors import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    NotFoundError,
    RateLimitError,
    ReportTimeoutError,
    ServerError,
    SingleKeyError,
    ValidationError,
    WebhookError,
    WebhookErrorKind,
)
from singlekey_sdk.webhook import (
    WebhookEvent,
    WebhookEventType,
    WebhookHandler,
    WebhookVerifier,
    construct_webhook_signature,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "APIError",
    "AuthenticationError",
    "ConfigurationError",
    "NotFoundError",
    "RateLimitError",
    "ReportTimeoutError",
    "ServerError",
    "SingleKeyClient",
    "SingleKeyError",
    "ValidationError",
    "WebhookError",
    "WebhookErrorKind",
    "WebhookEvent",
    "WebhookEventType",
    "WebhookHandler",
    "WebhookVerifier",
    "construct_webhook_signature",
    "create_client",
    "validation",
]
