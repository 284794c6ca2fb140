"""
GeneratePDFs API Client

High-level client for generating, retrieving and downloading PDFs.
"""

import logging
import os
from typing import Any, Iterable, Mapping, Optional, Union

from .config import Settings, get_settings
from .document import Document, extract_data
from .errors import InvalidArgumentError
from .http import HTTPClient
from .request_builder import ImageInput, build_html_payload, build_url_payload

logger = logging.getLogger(__name__)

GENERATE_PATH = '/pdfs/generate'


class GeneratePDFs:
    """
    Client for the GeneratePDFs API.

    Example:
        client = GeneratePDFs.connect('api-token')
        pdf = client.generate_from_url('https://example.com')
        while not pdf.is_ready():
            pdf = pdf.refresh()
        pdf.download_to_file('example.pdf')
    """

    def __init__(
        self,
        api_token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the client.

        Arguments left as None are taken from settings (environment
        variables prefixed with GENERATEPDFS_).

        Args:
            api_token: API token for authentication
            base_url: API base URL (default: https://api.generatepdfs.com)
            timeout: Request timeout in seconds
            settings: Optional preloaded settings

        Raises:
            InvalidArgumentError: If no API token is available
        """
        # The environment is only consulted when an argument is missing
        if settings is None and (api_token is None or not base_url or timeout is None):
            settings = get_settings()

        if api_token is None:
            api_token = settings.api_token
        if not api_token:
            raise InvalidArgumentError('API token is required')

        self.base_url = base_url or settings.base_url
        self.http = HTTPClient(
            base_url=self.base_url,
            api_token=api_token,
            timeout=timeout if timeout is not None else settings.timeout,
        )

    @classmethod
    def connect(cls, api_token: str, **kwargs) -> 'GeneratePDFs':
        """Create a client for the given API token."""
        return cls(api_token, **kwargs)

    def _to_document(self, body: Any) -> Document:
        return Document.from_dict(extract_data(body), self)

    def generate_from_html(
        self,
        html_path: Union[str, os.PathLike],
        css_path: Optional[Union[str, os.PathLike]] = None,
        images: Optional[Iterable[Union[ImageInput, Mapping[str, Any]]]] = None,
    ) -> Document:
        """
        Generate a PDF from an HTML file with optional CSS and images.

        Args:
            html_path: Path to the HTML file
            css_path: Optional path to the CSS file
            images: Optional ImageInput objects or dicts with name, path
                and optional mime_type

        Returns:
            Document describing the generation job

        Raises:
            InvalidArgumentError: If files are invalid or the response is malformed
            GeneratePDFsRuntimeError: If the API request fails
        """
        payload = build_html_payload(html_path, css_path, images)
        document = self._to_document(self.http.post(GENERATE_PATH, json=payload))
        logger.info(f"Generated PDF {document.id} from {html_path} (status: {document.status})")
        return document

    def generate_from_url(self, url: str) -> Document:
        """
        Generate a PDF from a URL.

        Raises:
            InvalidArgumentError: If the URL is invalid or the response is malformed
            GeneratePDFsRuntimeError: If the API request fails
        """
        payload = build_url_payload(url)
        document = self._to_document(self.http.post(GENERATE_PATH, json=payload))
        logger.info(f"Generated PDF {document.id} from {url} (status: {document.status})")
        return document

    def get_pdf(self, pdf_id: int) -> Document:
        """
        Get a PDF by its ID.

        Raises:
            InvalidArgumentError: If the ID is not positive or the response is malformed
            GeneratePDFsRuntimeError: If the API request fails
        """
        if pdf_id <= 0:
            raise InvalidArgumentError(f"Invalid PDF ID: {pdf_id}")

        document = self._to_document(self.http.get(f'/pdfs/{pdf_id}'))
        logger.debug(f"Retrieved PDF {document.id} (status: {document.status})")
        return document

    def download_pdf(self, download_url: str) -> bytes:
        """
        Download PDF content.

        Args:
            download_url: The download URL of a completed PDF

        Returns:
            PDF binary content

        Raises:
            GeneratePDFsRuntimeError: If the download fails
        """
        return self.http.request_bytes(download_url)
