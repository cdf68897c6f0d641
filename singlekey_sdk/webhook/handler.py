"""Webhook handler for receiving and processing SingleKey webhook events."""

import inspect
import json
import time
import warnings
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

import pydantic

from singlekey_sdk.errors import WebhookError, WebhookErrorKind
from singlekey_sdk.webhook.events import WebhookEvent, WebhookEventType, model_for
from singlekey_sdk.webhook.signature import (
    DEFAULT_TOLERANCE_SECONDS,
    Payload,
    WebhookVerifier,
)

EventHandler = Callable[[Any], Union[None, Awaitable[None]]]
UnknownEventHandler = Callable[[WebhookEvent], Union[None, Awaitable[None]]]
Observer = Callable[[str, dict], None]
Dispatcher = Callable[[WebhookEvent], Awaitable[None]]


def _format_validation_errors(exc: pydantic.ValidationError) -> list[str]:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "payload"
        messages.append(f"{location}: {error['msg']}")
    return messages


class WebhookHandler:
    """
    Verifies, decodes and dispatches SingleKey webhook deliveries.

    Usage::

        handler = WebhookHandler(secret=webhook_secret)
        event = handler.parse_webhook(raw_body, signature, timestamp)

        process = handler.on({
            "screening.completed": save_report,
            "screening.failed": notify_landlord,
        })
        await process(event)

    The handler keeps no state between deliveries and is safe to share across
    threads and tasks. It does not deduplicate redeliveries; use
    ``event.webhook_id`` for that.
    """

    def __init__(
        self,
        secret: Optional[Payload] = None,
        tolerance: int = DEFAULT_TOLERANCE_SECONDS,
        clock: Callable[[], float] = time.time,
        observer: Optional[Observer] = None,
        allow_unverified: bool = False,
    ):
        """
        Initialize webhook handler.

        Args:
            secret: Webhook secret used to verify signatures
            tolerance: Maximum webhook age in seconds (default: 300)
            clock: Source of the current Unix time
            observer: Optional callback receiving ``(event_name, details)``
                for each processing step
            allow_unverified: Parse payloads without verification when no
                secret is configured
        """
        self._verifier = WebhookVerifier(secret, tolerance=tolerance, clock=clock)
        self._observer = observer
        self._allow_unverified = allow_unverified and not self._verifier.configured

        if self._allow_unverified:
            warnings.warn(
                "WebhookHandler created without a secret: signatures will not be verified "
                "and any sender can forge webhook events.",
                UserWarning,
                stacklevel=2,
            )

    def _notify(self, name: str, **details) -> None:
        if self._observer is not None:
            self._observer(name, details)

    def verify_signature(self, payload: Payload, signature: str, timestamp: str) -> bool:
        """
        Verify webhook signature to ensure authenticity.

        Args:
            payload: Raw webhook payload
            signature: X-SingleKey-Signature header value
            timestamp: X-SingleKey-Timestamp header value

        Returns:
            True if signature is valid

        Raises:
            WebhookError: Secret not configured, invalid timestamp, or stale
                timestamp
        """
        try:
            valid = self._verifier.verify(payload, signature, timestamp)
        except WebhookError as e:
            self._notify("rejected", kind=e.kind.value, reason=e.message)
            raise

        if valid:
            self._notify("verified", timestamp=timestamp)
        else:
            self._notify("rejected", kind=WebhookErrorKind.SIGNATURE_MISMATCH.value)
        return valid

    def parse_webhook(self, raw_payload: Payload, signature: str, timestamp: str) -> WebhookEvent:
        """
        Verify and decode a webhook payload.

        Verification runs before parsing so unauthenticated senders never
        learn anything about how their body was parsed.

        Args:
            raw_payload: Raw webhook body, exactly as received
            signature: X-SingleKey-Signature header value
            timestamp: X-SingleKey-Timestamp header value

        Returns:
            Typed event for known tags, UnknownWebhookEvent otherwise

        Raises:
            WebhookError: Verification failed or the payload is malformed
        """
        if self._verifier.configured:
            if not self.verify_signature(raw_payload, signature, timestamp):
                raise WebhookError(
                    WebhookErrorKind.SIGNATURE_MISMATCH, "Invalid webhook signature"
                )
        elif not self._allow_unverified:
            raise WebhookError(WebhookErrorKind.CONFIGURATION, "Webhook secret not configured")

        event = self.decode(raw_payload)
        self._notify("decoded", event=event.event, webhook_id=event.webhook_id)
        return event

    def decode(self, raw_payload: Payload) -> WebhookEvent:
        """Parse a payload into an event without verifying it."""
        try:
            if isinstance(raw_payload, bytes):
                raw_payload = raw_payload.decode("utf-8")
            body = json.loads(raw_payload)
        except (ValueError, TypeError) as e:
            raise WebhookError(WebhookErrorKind.PAYLOAD_PARSE, "Invalid webhook payload JSON") from e

        if not isinstance(body, dict):
            raise WebhookError(
                WebhookErrorKind.PAYLOAD_PARSE, "Webhook payload must be a JSON object"
            )

        event_type = body.get("event")
        if not isinstance(event_type, str):
            raise WebhookError(
                WebhookErrorKind.PAYLOAD_PARSE,
                "Webhook payload is missing the event type",
                errors=["event: Field required"],
            )

        try:
            return model_for(event_type).model_validate(body)
        except pydantic.ValidationError as e:
            raise WebhookError(
                WebhookErrorKind.PAYLOAD_PARSE,
                f"Invalid {event_type} webhook payload",
                errors=_format_validation_errors(e),
            ) from e

    def on(
        self,
        handlers: Mapping[Union[WebhookEventType, str], EventHandler],
        on_unknown: Optional[UnknownEventHandler] = None,
    ) -> Dispatcher:
        """
        Create a dispatch function from per-event handlers.

        Each handler receives the event's ``data`` and may be a plain function
        or a coroutine function. Events without a registered handler are
        ignored. Events with an unrecognized tag go to ``on_unknown`` (called
        with the whole event) when given, and are ignored otherwise.

        Handler exceptions propagate to the caller of the dispatch function.

        Args:
            handlers: Mapping of event type to handler
            on_unknown: Optional handler for unrecognized event types

        Returns:
            Async function processing one event per call

        Raises:
            ValueError: A key is not a known event type
        """
        table: dict[str, EventHandler] = {}
        for key, func in handlers.items():
            try:
                event_type = WebhookEventType(key)
            except ValueError:
                raise ValueError(f"Unknown webhook event type: {key!r}") from None
            table[event_type.value] = func

        async def dispatch(event: WebhookEvent) -> None:
            if not event.is_known:
                if on_unknown is None:
                    self._notify("ignored", event=event.event, webhook_id=event.webhook_id)
                    return
                result = on_unknown(event)
            else:
                func = table.get(event.event)
                if func is None:
                    self._notify("ignored", event=event.event, webhook_id=event.webhook_id)
                    return
                result = func(event.data)

            if inspect.isawaitable(result):
                await result
            self._notify("dispatched", event=event.event, webhook_id=event.webhook_id)

        return dispatch

    def __repr__(self) -> str:
        return f"WebhookHandler(verifier={self._verifier!r})"
