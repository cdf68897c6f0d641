"""API services."""

from singlekey_sdk.services.applicant import ApplicantService
from singlekey_sdk.services.payment import PaymentService
from singlekey_sdk.services.report import ReportService
from singlekey_sdk.services.request import RequestService

__all__ = ["ApplicantService", "PaymentService", "ReportService", "RequestService"]
