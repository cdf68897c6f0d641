"""Webhook verification and event dispatch."""

from singlekey_sdk.webhook.events import (
    EVENT_MODELS,
    CommonWebhookData,
    FormOpenedEvent,
    InviteSentEvent,
    ScreeningCompletedEvent,
    ScreeningFailedEvent,
    ScreeningPaymentCapturedEvent,
    ScreeningSubmittedEvent,
    UnknownWebhookEvent,
    WebhookEvent,
    WebhookEventType,
)
from singlekey_sdk.webhook.handler import WebhookHandler
from singlekey_sdk.webhook.signature import (
    SignedWebhook,
    WebhookVerifier,
    compute_signature,
    construct_webhook_signature,
)

SIGNATURE_HEADER = "X-SingleKey-Signature"
TIMESTAMP_HEADER = "X-SingleKey-Timestamp"

__all__ = [
    "EVENT_MODELS",
    "SIGNATURE_HEADER",
    "TIMESTAMP_HEADER",
    "CommonWebhookData",
    "FormOpenedEvent",
    "InviteSentEvent",
    "ScreeningCompletedEvent",
    "ScreeningFailedEvent",
    "ScreeningPaymentCapturedEvent",
    "ScreeningSubmittedEvent",
    "SignedWebhook",
    "UnknownWebhookEvent",
    "WebhookEvent",
    "WebhookEventType",
    "WebhookHandler",
    "WebhookVerifier",
    "compute_signature",
    "construct_webhook_signature",
]
