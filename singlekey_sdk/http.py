"""HTTP transport for the SingleKey API."""

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional

import requests

from singlekey_sdk.errors import (
    APIError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    ServerError,
    SingleKeyError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_FILENAME_RE = re.compile(r'filename="?([^";]+)"?')


@dataclass(frozen=True)
class Download:
    """Binary response body with its file metadata."""

    data: bytes
    filename: str
    content_type: str


class HttpClient:
    """Thin wrapper around a requests session with SDK error mapping."""

    def __init__(
        self,
        api_token: str,
        base_url: str,
        timeout: float = 30.0,
        debug: bool = False,
        session: Optional[requests.Session] = None,
    ):
        """Initialize client."""
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.debug = debug
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Content-Type": "application/json",
                "Authorization": f"Token {api_token}",
            }
        )

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}{path}"
        if self.debug:
            logger.debug(f"SingleKey request: {method} {url} params={kwargs.get('params')}")

        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            if self.debug:
                logger.debug(f"SingleKey network error: {method} {url}: {e}")
            raise ServerError(f"Network error: {e}") from e

        if self.debug:
            logger.debug(f"SingleKey response: {response.status_code} {method} {url}")

        if not response.ok:
            raise self._map_error(response)
        return response

    def _map_error(self, response: requests.Response) -> SingleKeyError:
        """Translate an error response into an SDK exception."""
        try:
            body = response.json()
        except ValueError:
            body = None

        detail = body.get("detail") if isinstance(body, dict) else None
        message = detail or f"HTTP {response.status_code}: {response.reason}"
        status = response.status_code

        if status == 400:
            errors = body.get("errors") if isinstance(body, dict) else None
            return ValidationError(message, errors or [])
        if status == 401:
            return AuthenticationError(message)
        if status == 404:
            return NotFoundError(message)
        if status == 429:
            return RateLimitError(message)
        if status in (500, 502, 503, 504):
            return ServerError(message, status)
        return APIError(message, status, body)

    def get(self, path: str, params: Optional[dict] = None) -> Any:
        """Make a GET request."""
        return self._request("GET", path, params=params).json()

    def post(self, path: str, data: Optional[dict] = None) -> Any:
        """Make a POST request."""
        return self._request("POST", path, json=data).json()

    def put(self, path: str, data: Optional[dict] = None) -> Any:
        """Make a PUT request."""
        return self._request("PUT", path, json=data).json()

    def delete(self, path: str) -> Any:
        """Make a DELETE request."""
        return self._request("DELETE", path).json()

    def download(self, path: str) -> Download:
        """Download binary data (for PDF downloads)."""
        response = self._request("GET", path)

        disposition = response.headers.get("Content-Disposition", "")
        match = _FILENAME_RE.search(disposition)
        filename = match.group(1) if match else "report.pdf"

        return Download(
            data=response.content,
            filename=filename,
            content_type=response.headers.get("Content-Type", "application/pdf"),
        )

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()
