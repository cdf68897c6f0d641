"""Tests for the HTTP transport and error mapping."""

import logging
from unittest.mock import MagicMock

import pytest
import requests

from singlekey_sdk.errors import (
    APIError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ValidationError,
)
from singlekey_sdk.http import HttpClient


def make_response(status_code=200, body=None, headers=None, content=b""):
    """Build a fake requests response."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = "Error"
    response.headers = headers or {}
    response.content = content
    if body is None:
        response.json.side_effect = ValueError("No JSON")
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def session():
    """Mock requests session."""
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    return session


@pytest.fixture
def http(session):
    """HTTP client over the mock session."""
    return HttpClient("sk_test_token", "https://sandbox.singlekey.com/", timeout=5, session=session)


def test_auth_headers(http, session):
    """Test token auth and JSON content type are set on the session."""
    assert session.headers["Authorization"] == "Token sk_test_token"
    assert session.headers["Content-Type"] == "application/json"
    assert http.base_url == "https://sandbox.singlekey.com"


def test_get_returns_json(http, session):
    """Test GET builds the full URL and returns decoded JSON."""
    session.request.return_value = make_response(body={"success": True})

    assert http.get("/api/payments", params={"a": "1"}) == {"success": True}
    session.request.assert_called_once_with(
        "GET", "https://sandbox.singlekey.com/api/payments", timeout=5, params={"a": "1"}
    )


def test_post_sends_json(http, session):
    """Test POST sends the body as JSON."""
    session.request.return_value = make_response(body={"purchase_token": "abc"})

    http.post("/api/request", {"external_customer_id": "c1"})

    session.request.assert_called_once_with(
        "POST",
        "https://sandbox.singlekey.com/api/request",
        timeout=5,
        json={"external_customer_id": "c1"},
    )


@pytest.mark.parametrize(
    "status_code, error_class",
    [
        (400, ValidationError),
        (401, AuthenticationError),
        (404, NotFoundError),
        (429, RateLimitError),
        (500, ServerError),
        (502, ServerError),
        (503, ServerError),
        (504, ServerError),
        (403, APIError),
        (409, APIError),
    ],
)
def test_status_mapping(http, session, status_code, error_class):
    """Test each status maps to its SDK error with the API's detail."""
    session.request.return_value = make_response(status_code, {"success": False, "detail": "nope"})

    with pytest.raises(error_class) as exc_info:
        http.get("/api/report/abc")

    assert exc_info.value.message == "nope"


def test_validation_errors_carried(http, session):
    """Test 400 responses keep the per-field errors."""
    session.request.return_value = make_response(
        400, {"success": False, "detail": "Invalid request", "errors": ["ten_email is invalid"]}
    )

    with pytest.raises(ValidationError) as exc_info:
        http.post("/api/request", {})

    assert exc_info.value.errors == ["ten_email is invalid"]


def test_server_error_status(http, session):
    """Test server errors record the status code."""
    session.request.return_value = make_response(503, {"detail": "maintenance"})

    with pytest.raises(ServerError) as exc_info:
        http.get("/api/payments")

    assert exc_info.value.status_code == 503


def test_api_error_keeps_response(http, session):
    """Test unmapped statuses keep the decoded body."""
    body = {"success": False, "detail": "Forbidden"}
    session.request.return_value = make_response(403, body)

    with pytest.raises(APIError) as exc_info:
        http.get("/api/payments")

    assert exc_info.value.status_code == 403
    assert exc_info.value.response == body


def test_error_without_json_body(http, session):
    """Test non-JSON error bodies fall back to the status line."""
    session.request.return_value = make_response(404)

    with pytest.raises(NotFoundError, match="HTTP 404"):
        http.get("/api/report/missing")


def test_network_error(http, session):
    """Test connection failures become ServerError."""
    session.request.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(ServerError, match="Network error"):
        http.get("/api/payments")


def test_download(http, session):
    """Test downloads read filename and content type from headers."""
    session.request.return_value = make_response(
        headers={
            "Content-Disposition": 'attachment; filename="screening_abc.pdf"',
            "Content-Type": "application/pdf",
        },
        content=b"%PDF-1.4",
    )

    download = http.download("/api/report_pdf/abc")

    assert download.data == b"%PDF-1.4"
    assert download.filename == "screening_abc.pdf"
    assert download.content_type == "application/pdf"


def test_download_defaults(http, session):
    """Test download defaults when headers are missing."""
    session.request.return_value = make_response(content=b"%PDF")

    download = http.download("/api/report_pdf/abc")

    assert download.filename == "report.pdf"
    assert download.content_type == "application/pdf"


def test_debug_logging_omits_token(session, caplog):
    """Test debug mode logs requests without the API token."""
    http = HttpClient("sk_test_token", "https://sandbox.singlekey.com", debug=True, session=session)
    session.request.return_value = make_response(body={})

    with caplog.at_level(logging.DEBUG, logger="singlekey_sdk.http"):
        http.get("/api/payments")

    assert any("GET https://sandbox.singlekey.com/api/payments" in r.message for r in caplog.records)
    assert "sk_test_token" not in caplog.text


def test_no_logging_without_debug(http, session, caplog):
    """Test requests are not logged unless debug is enabled."""
    session.request.return_value = make_response(body={})

    with caplog.at_level(logging.DEBUG, logger="singlekey_sdk.http"):
        http.get("/api/payments")

    assert caplog.records == []
