"""Payment method operations."""

from typing import Any, Union

from singlekey_sdk.http import HttpClient


class PaymentService:
    """Service for managing payment methods and validating purchases."""

    def __init__(self, http: HttpClient):
        self.http = http

    def get_payment_methods(self) -> dict[str, Any]:
        """Get the saved payment method, if any."""
        return self.http.get("/api/payments")

    def add_payment_method(self, payment_data: dict) -> dict[str, Any]:
        """
        Add a new payment method.

        Args:
            payment_data: card_number, exp_month, exp_year, cvc, name
        """
        return self.http.post("/api/payments", payment_data)

    def validate_purchase(self, screening_id: Union[int, str]) -> dict[str, Any]:
        """Check screening data for errors before processing."""
        return self.http.post(f"/api/purchase_errors/{screening_id}")

    def has_payment_method(self) -> bool:
        """Check if a payment method is on file."""
        return bool(self.get_payment_methods().get("has_payment_method"))
