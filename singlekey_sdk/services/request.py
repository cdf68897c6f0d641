"""Screening request operations."""

from typing import Any

from singlekey_sdk.http import HttpClient


class RequestService:
    """Service for creating screening requests."""

    def __init__(self, http: HttpClient):
        self.http = http

    def create(self, data: dict) -> dict[str, Any]:
        """
        Create a screening request.

        Args:
            data: Request fields (external_customer_id, external_tenant_id,
                ll_*/ten_* contact fields, purchase_address, ...)

        Returns:
            Response with purchase_token and form URLs
        """
        return self.http.post("/api/request", data)

    def create_landlord_form(self, data: dict) -> dict[str, Any]:
        """Create a request completed by the landlord through the hosted form."""
        return self.create(data)

    def create_tenant_form(self, data: dict) -> dict[str, Any]:
        """Create a request completed by the tenant; send them to tenant_form_url."""
        return self.create({**data, "tenant_form": True})

    def create_direct(self, data: dict) -> dict[str, Any]:
        """Create a request with all tenant data upfront; screening starts immediately."""
        return self.create({**data, "run_now": True})
