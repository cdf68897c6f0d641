"""Webhook event payload models.

Every delivery shares one envelope (``event``, ``timestamp``, ``webhook_id``,
``api_version``, ``data``). The ``event`` tag selects the shape of ``data``.
Tags this SDK does not know decode as :class:`UnknownWebhookEvent` with an
untyped ``data`` dict so new server-side events never break a receiver.
"""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Type

from pydantic import BaseModel, ConfigDict, Field


class WebhookEventType(str, Enum):
    """Known webhook event tags."""

    SCREENING_COMPLETED = "screening.completed"
    SCREENING_SUBMITTED = "screening.submitted"
    SCREENING_PAYMENT_CAPTURED = "screening.payment_captured"
    SCREENING_FAILED = "screening.failed"
    FORM_OPENED = "form.opened"
    INVITE_SENT = "invite.sent"


Currency = Literal["CAD", "USD"]
Recommendation = Literal["approved", "conditional", "declined"]
PaymentMethodType = Literal["card", "invoice"]
CardBrand = Literal["visa", "mastercard", "amex", "discover", "unknown"]


class _Model(BaseModel):
    """Immutable model that keeps fields it does not declare."""

    model_config = ConfigDict(frozen=True, extra="allow")


# ============================================================================
# Nested Models
# ============================================================================


class WebhookTenant(_Model):
    """Tenant information."""

    email: str
    first_name: str
    last_name: str


class WebhookLandlord(_Model):
    """Landlord information."""

    email: str
    first_name: str
    last_name: str


class WebhookProperty(_Model):
    """Screened property."""

    address: str  # "Street, City, Province/State, Country, Postal/Zip"
    rent: float
    unit: Optional[str] = None


class WebhookResult(_Model):
    """Screening result."""

    status: Literal["completed"]
    singlekey_score: Optional[float]
    recommendation: Recommendation
    pdf_ready: bool


class WebhookCost(_Model):
    """Screening cost."""

    amount: float
    tax: float
    currency: Currency


class WebhookLinks(_Model):
    """Report links."""

    report: str
    pdf: str


class WebhookPaymentMethod(_Model):
    """Payment method used for a charge."""

    type: PaymentMethodType
    brand: CardBrand
    last_4: str


class WebhookPayment(_Model):
    """Captured payment."""

    amount: float
    tax: float
    total: float
    currency: Currency
    method: WebhookPaymentMethod
    paid_by: Literal["landlord", "tenant"]


# ============================================================================
# Event Data
# ============================================================================


class CommonWebhookData(_Model):
    """Fields present in every known event's data."""

    purchase_token: str
    external_customer_id: str
    external_tenant_id: str
    external_deal_id: Optional[str] = None
    external_listing_id: Optional[str] = None


class ScreeningCompletedData(CommonWebhookData):
    tenant: WebhookTenant
    landlord: WebhookLandlord
    property: WebhookProperty
    result: WebhookResult
    cost: WebhookCost
    links: WebhookLinks
    created_at: str
    completed_at: str


class ScreeningSubmittedData(CommonWebhookData):
    tenant: WebhookTenant
    status: Literal["processing"]
    submitted_at: str
    estimated_completion: str


class ScreeningPaymentCapturedData(CommonWebhookData):
    payment: WebhookPayment
    charged_at: str


class ScreeningFailedData(CommonWebhookData):
    status: Literal["failed"]
    reason: str
    errors: List[str] = Field(default_factory=list)


class FormOpenedData(CommonWebhookData):
    tenant_email: str


class InviteSentData(CommonWebhookData):
    tenant_email: str
    invite_type: str


# ============================================================================
# Events
# ============================================================================


class WebhookEvent(_Model):
    """Webhook envelope common to all events."""

    event: str
    timestamp: str  # ISO 8601, when the event occurred
    webhook_id: str  # delivery id, use for deduplication
    api_version: str
    data: Any = Field(default_factory=dict)

    @property
    def is_known(self) -> bool:
        """Whether ``event`` is one of the known tags."""
        return self.event in EVENT_MODELS


class UnknownWebhookEvent(WebhookEvent):
    """Event with a tag this SDK does not model."""

    data: Dict[str, Any] = Field(default_factory=dict)


class ScreeningCompletedEvent(WebhookEvent):
    event: Literal["screening.completed"]
    data: ScreeningCompletedData


class ScreeningSubmittedEvent(WebhookEvent):
    event: Literal["screening.submitted"]
    data: ScreeningSubmittedData


class ScreeningPaymentCapturedEvent(WebhookEvent):
    event: Literal["screening.payment_captured"]
    data: ScreeningPaymentCapturedData


class ScreeningFailedEvent(WebhookEvent):
    event: Literal["screening.failed"]
    data: ScreeningFailedData


class FormOpenedEvent(WebhookEvent):
    event: Literal["form.opened"]
    data: FormOpenedData


class InviteSentEvent(WebhookEvent):
    event: Literal["invite.sent"]
    data: InviteSentData


EVENT_MODELS: Dict[str, Type[WebhookEvent]] = {
    WebhookEventType.SCREENING_COMPLETED.value: ScreeningCompletedEvent,
    WebhookEventType.SCREENING_SUBMITTED.value: ScreeningSubmittedEvent,
    WebhookEventType.SCREENING_PAYMENT_CAPTURED.value: ScreeningPaymentCapturedEvent,
    WebhookEventType.SCREENING_FAILED.value: ScreeningFailedEvent,
    WebhookEventType.FORM_OPENED.value: FormOpenedEvent,
    WebhookEventType.INVITE_SENT.value: InviteSentEvent,
}


def model_for(event_type: str) -> Type[WebhookEvent]:
    """Model class for an event tag, falling back to the generic envelope."""
    return EVENT_MODELS.get(event_type, UnknownWebhookEvent)
