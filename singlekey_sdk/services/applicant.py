"""Applicant information retrieval."""

from typing import Any

from singlekey_sdk.http import HttpClient


class ApplicantService:
    """Service for retrieving applicant (tenant) information."""

    def __init__(self, http: HttpClient):
        self.http = http

    def get(
        self,
        purchase_token: str,
        detailed: bool = False,
        show_credit_score: bool = False,
    ) -> dict[str, Any]:
        """
        Get applicant information by purchase token.

        Args:
            purchase_token: Purchase token from the screening request
            detailed: Include co-occupants and guarantors
            show_credit_score: Include the credit score

        Returns:
            Applicant contact, address, and employment information
        """
        params = {}
        if detailed:
            params["detailed"] = "true"
        if show_credit_score:
            params["show_credit_score"] = "true"
        return self.http.get(f"/api/applicant/{purchase_token}", params=params or None)

    def get_detailed(self, purchase_token: str) -> dict[str, Any]:
        return self.get(purchase_token, detailed=True)

    def get_with_score(self, purchase_token: str) -> dict[str, Any]:
        return self.get(purchase_token, show_credit_score=True)

    def get_complete(self, purchase_token: str) -> dict[str, Any]:
        return self.get(purchase_token, detailed=True, show_credit_score=True)
