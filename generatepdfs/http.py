"""
HTTP transport for the GeneratePDFs API.

Thin wrapper around httpx that attaches the bearer token, maps non-success
responses to GeneratePDFsRuntimeError and decodes JSON bodies.

Logging Guidelines:
- Logs method + host + path (no tokens/keys)
- On errors: status code + truncated response (max 500 chars)
- Never logs Authorization headers or API keys

Every call performs exactly one request; nothing is retried.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import urljoin, urlparse

import httpx

from .errors import GeneratePDFsRuntimeError, InvalidArgumentError

logger = logging.getLogger(__name__)

# Maximum response text length to include in log messages
MAX_ERROR_RESPONSE_LENGTH = 500


class HTTPClient:
    """
    Authenticated HTTP client for the GeneratePDFs API.

    Holds only immutable state (base URL, token, timeout) so a single
    instance can be shared between threads.
    """

    def __init__(self, base_url: str, api_token: str, timeout: float = 30.0):
        """
        Initialize HTTP client.

        Args:
            base_url: Base URL for relative request paths
            api_token: Bearer token sent with every request
            timeout: Request timeout in seconds
        """
        # Trailing slash keeps any path prefix of the base URL on urljoin
        self.base_url = base_url.rstrip('/') + '/'
        self.timeout = timeout
        self._api_token = api_token

    def _auth_headers(self) -> Dict[str, str]:
        return {'Authorization': f'Bearer {self._api_token}'}

    def _truncate_response(self, text: str) -> str:
        """
        Truncate response text for log messages.

        Args:
            text: Response text

        Returns:
            Truncated text (max MAX_ERROR_RESPONSE_LENGTH chars)
        """
        if len(text) > MAX_ERROR_RESPONSE_LENGTH:
            return text[:MAX_ERROR_RESPONSE_LENGTH] + "..."
        return text

    def build_url(self, path: str) -> str:
        """Build full URL from base URL and path. Absolute URLs pass through."""
        if urlparse(path).scheme:
            return path
        return urljoin(self.base_url, path.lstrip('/'))

    def _send(
        self,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """
        Perform a single request.

        Raises:
            GeneratePDFsRuntimeError: On connection errors and timeouts
        """
        url = self.build_url(path)
        parsed = urlparse(url)

        request_headers = self._auth_headers()
        if headers:
            request_headers.update(headers)

        logger.debug(f"{method} {parsed.scheme}://{parsed.netloc}{parsed.path}")

        try:
            with httpx.Client(timeout=self.timeout) as client:
                return client.request(
                    method=method,
                    url=url,
                    headers=request_headers,
                    json=json,
                )
        except httpx.HTTPError as e:
            logger.warning(f"{method} {parsed.netloc}{parsed.path} failed: {e}")
            raise GeneratePDFsRuntimeError(f"API request failed: {e}") from e

    def _log_failure(self, method: str, response: httpx.Response) -> None:
        logger.warning(
            f"{method} {response.request.url.path} returned HTTP {response.status_code}: "
            f"{self._truncate_response(response.text)}"
        )

    def request_json(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Make an API request and return the decoded JSON body.

        POST requests declare a JSON content type.

        Args:
            method: HTTP method (GET, POST)
            path: URL path relative to base_url
            json: Optional JSON body

        Returns:
            Decoded JSON body

        Raises:
            GeneratePDFsRuntimeError: On a non-success status
            InvalidArgumentError: If the body is not valid JSON
        """
        headers = {'Accept': 'application/json'}
        if method.upper() == 'POST':
            headers['Content-Type'] = 'application/json'

        response = self._send(method, path, headers=headers, json=json)

        if not response.is_success:
            self._log_failure(method, response)
            reason = response.reason_phrase or str(response.status_code)
            raise GeneratePDFsRuntimeError(
                f"API request failed: {response.status_code} {reason}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise InvalidArgumentError(f"Invalid API response: {e}") from e

    def request_bytes(self, url: str) -> bytes:
        """
        Download a resource and return the raw body.

        Args:
            url: Absolute URL or path relative to base_url

        Returns:
            Response content as bytes

        Raises:
            GeneratePDFsRuntimeError: On a non-success status
        """
        response = self._send('GET', url)

        if not response.is_success:
            self._log_failure('GET', response)
            raise GeneratePDFsRuntimeError(
                f"Failed to download PDF: {response.status_code}",
                status_code=response.status_code,
            )

        return response.content

    def get(self, path: str) -> Any:
        """Make GET request and return JSON response."""
        return self.request_json('GET', path)

    def post(self, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        """Make POST request and return JSON response."""
        return self.request_json('POST', path, json=json)
