"""Screening report operations."""

import logging
import time
from pathlib import Path
from typing import Any, Callable, Optional, Union

from singlekey_sdk.errors import ReportTimeoutError, SingleKeyError
from singlekey_sdk.http import Download, HttpClient

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 40
DEFAULT_INTERVAL_SECONDS = 10.0


def is_complete(report: dict) -> bool:
    """A report is complete once it carries a SingleKey score."""
    return bool(report.get("success")) and "singlekey_score" in report


class ReportService:
    """Service for retrieving screening reports and PDFs."""

    def __init__(self, http: HttpClient, sleep: Callable[[float], None] = time.sleep):
        self.http = http
        self._sleep = sleep

    def get(self, purchase_token: str) -> dict[str, Any]:
        """
        Get screening report by purchase token.

        The report may still be in progress; see ``is_complete``.
        """
        return self.http.get(f"/api/report/{purchase_token}")

    def wait_for_completion(
        self,
        purchase_token: str,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        interval: float = DEFAULT_INTERVAL_SECONDS,
    ) -> dict[str, Any]:
        """
        Poll until the screening report completes.

        Args:
            purchase_token: Purchase token to poll
            max_attempts: Maximum number of polls (default: 40)
            interval: Seconds between polls (default: 10)

        Returns:
            Completed report

        Raises:
            ReportTimeoutError: Report still incomplete after max_attempts
        """
        for attempt in range(max_attempts):
            report = self.get(purchase_token)
            if is_complete(report):
                return report

            logger.debug(
                f"Report {purchase_token} not ready (attempt {attempt + 1}/{max_attempts}): "
                f"{report.get('detail')}"
            )
            if attempt < max_attempts - 1:
                self._sleep(interval)

        raise ReportTimeoutError(
            f"Report did not complete after {max_attempts} attempts "
            f"({max_attempts * interval:g}s)"
        )

    def download_pdf(
        self,
        purchase_token: str,
        output_path: Optional[Union[str, Path]] = None,
        return_bytes: bool = False,
    ) -> Optional[Download]:
        """
        Download screening report PDF.

        Writes to ``output_path`` when given. Otherwise returns the download
        when ``return_bytes`` is set, or writes it to the current directory
        under the server-provided filename.
        """
        download = self.http.download(f"/api/report_pdf/{purchase_token}")

        if output_path is not None:
            Path(output_path).write_bytes(download.data)
            return None

        if return_bytes:
            return download

        Path(Path(download.filename).name).write_bytes(download.data)
        return None

    def is_ready(self, purchase_token: str) -> bool:
        """Check if report is complete and ready."""
        try:
            return is_complete(self.get(purchase_token))
        except SingleKeyError as e:
            logger.debug(f"Report {purchase_token} readiness check failed: {e}")
            return False

    def get_status(self, purchase_token: str) -> str:
        """Get human-readable report status message."""
        return self.get(purchase_token).get("detail") or "Unknown status"
