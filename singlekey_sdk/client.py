"""SingleKey API client."""

import math
from typing import Any, Optional

from singlekey_sdk.errors import ConfigurationError
from singlekey_sdk.http import HttpClient
from singlekey_sdk.services import ApplicantService, PaymentService, ReportService, RequestService
from singlekey_sdk.settings import ENVIRONMENT_URLS, Settings, get_settings


class SingleKeyClient:
    """
    Client for the SingleKey Screening API.

    Example::

        client = SingleKeyClient(api_token="sk_test_...", environment="sandbox")
        request = client.request.create_tenant_form({
            "external_customer_id": "landlord-123",
            "external_tenant_id": "tenant-456",
            "ten_email": "tenant@example.com",
            "purchase_address": "123 Main St, Toronto, ON, Canada, M5V 1A1",
        })
        report = client.report.wait_for_completion(request["purchase_token"])
    """

    def __init__(
        self,
        api_token: str,
        environment: str = "production",
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        debug: bool = False,
    ):
        """
        Initialize client.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        self._validate_config(api_token, environment, timeout)
        self._config = {
            "api_token": api_token,
            "environment": environment,
            "base_url": base_url,
            "timeout": timeout,
            "debug": debug,
        }
        self.base_url = (base_url or ENVIRONMENT_URLS[environment]).rstrip("/")

        self.http = HttpClient(api_token, self.base_url, timeout=timeout, debug=debug)
        self.request = RequestService(self.http)
        self.report = ReportService(self.http)
        self.applicant = ApplicantService(self.http)
        self.payment = PaymentService(self.http)

    @staticmethod
    def _validate_config(api_token: Any, environment: str, timeout: Any) -> None:
        if not api_token:
            raise ConfigurationError("API token is required")
        if not isinstance(api_token, str) or not api_token.strip():
            raise ConfigurationError("API token must be a non-empty string")
        if environment not in ENVIRONMENT_URLS:
            raise ConfigurationError('Environment must be "sandbox" or "production"')
        if (
            isinstance(timeout, bool)
            or not isinstance(timeout, (int, float))
            or not math.isfinite(timeout)
            or timeout <= 0
        ):
            raise ConfigurationError("Timeout must be a positive number")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "SingleKeyClient":
        """Build a client from SINGLEKEY_* settings."""
        settings = settings or get_settings()
        return cls(
            api_token=settings.api_token,
            environment=settings.environment,
            base_url=settings.base_url,
            timeout=settings.timeout,
            debug=settings.debug,
        )

    def get_config(self) -> dict[str, Any]:
        """Get a copy of the current configuration."""
        return dict(self._config)

    def close(self) -> None:
        """Close the HTTP session."""
        self.http.close()

    def __enter__(self) -> "SingleKeyClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"SingleKeyClient(base_url={self.base_url!r})"


def create_client(api_token: str, **kwargs) -> SingleKeyClient:
    """Convenience constructor for SingleKeyClient."""
    return SingleKeyClient(api_token, **kwargs)
