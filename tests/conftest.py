"""Pytest configuration and fixtures."""

import json

import pytest

from singlekey_sdk.webhook import WebhookHandler

WEBHOOK_SECRET = "whsec_test"
NOW = 1700000000

FAILED_PAYLOAD = (
    '{"event":"screening.failed","timestamp":"2024-01-01T00:00:00Z","webhook_id":"wh_1",'
    '"api_version":"1.0","data":{"purchase_token":"abc","external_customer_id":"c1",'
    '"external_tenant_id":"t1","status":"failed","reason":"no_response",'
    '"errors":["tenant_timeout"]}}'
)

COMMON_DATA = {
    "purchase_token": "a1b2c3d4e5f6a1b2c3d4e5f6a1b2c3d4",
    "external_customer_id": "landlord-123",
    "external_tenant_id": "tenant-456",
}

TENANT = {"email": "jane@example.com", "first_name": "Jane", "last_name": "Doe"}

EVENT_DATA = {
    "screening.completed": {
        **COMMON_DATA,
        "external_deal_id": "deal-9",
        "tenant": TENANT,
        "landlord": {"email": "john@example.com", "first_name": "John", "last_name": "Smith"},
        "property": {"address": "123 Main St, Toronto, ON, Canada, M5V 1A1", "rent": 2100},
        "result": {
            "status": "completed",
            "singlekey_score": 742,
            "recommendation": "approved",
            "pdf_ready": True,
        },
        "cost": {"amount": 24.99, "tax": 3.25, "currency": "CAD"},
        "links": {
            "report": "https://platform.singlekey.com/report/abc",
            "pdf": "https://platform.singlekey.com/api/report_pdf/abc",
        },
        "created_at": "2024-01-01T00:00:00Z",
        "completed_at": "2024-01-01T01:00:00Z",
    },
    "screening.submitted": {
        **COMMON_DATA,
        "tenant": TENANT,
        "status": "processing",
        "submitted_at": "2024-01-01T00:00:00Z",
        "estimated_completion": "2024-01-01T00:30:00Z",
    },
    "screening.payment_captured": {
        **COMMON_DATA,
        "payment": {
            "amount": 24.99,
            "tax": 3.25,
            "total": 28.24,
            "currency": "CAD",
            "method": {"type": "card", "brand": "visa", "last_4": "4242"},
            "paid_by": "landlord",
        },
        "charged_at": "2024-01-01T00:00:00Z",
    },
    "screening.failed": {
        **COMMON_DATA,
        "status": "failed",
        "reason": "identity_not_verified",
        "errors": ["sin_mismatch"],
    },
    "form.opened": {**COMMON_DATA, "tenant_email": "jane@example.com"},
    "invite.sent": {**COMMON_DATA, "tenant_email": "jane@example.com", "invite_type": "email"},
}


def make_payload(event: str, data=None, **envelope) -> str:
    """Serialize a webhook body for an event type."""
    body = {
        "event": event,
        "timestamp": "2024-01-01T00:00:00Z",
        "webhook_id": "wh_test",
        "api_version": "1.0",
        "data": EVENT_DATA.get(event, {}) if data is None else data,
    }
    body.update(envelope)
    return json.dumps(body)


@pytest.fixture
def clock():
    """Frozen clock at NOW."""
    return lambda: NOW


@pytest.fixture
def handler(clock):
    """Webhook handler with the test secret and a frozen clock."""
    return WebhookHandler(secret=WEBHOOK_SECRET, clock=clock)
