"""
PDF document returned by the GeneratePDFs API.

A Document is an immutable snapshot of the server-side record at the time
it was fetched. Use refresh() to get a new snapshot.
"""

import logging
import re
import weakref
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, Mapping, Optional

from dateutil import parser as date_parser

from .errors import GeneratePDFsRuntimeError, InvalidArgumentError

logger = logging.getLogger(__name__)

STATUS_PENDING = 'pending'
STATUS_PROCESSING = 'processing'
STATUS_COMPLETED = 'completed'
STATUS_FAILED = 'failed'

REQUIRED_FIELDS = ('id', 'name', 'status', 'download_url', 'created_at')

_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])')


def normalize_key(key: Any) -> str:
    """
    Convert a response key to canonical snake_case.

    'downloadUrl', 'DOWNLOAD_URL', ':download_url' and 'download-url'
    all become 'download_url'.
    """
    text = str(key).strip().lstrip(':')
    text = _CAMEL_BOUNDARY.sub('_', text)
    return text.replace('-', '_').lower()


def normalize_keys(data: Mapping[Any, Any]) -> Dict[str, Any]:
    """Return a shallow copy of data with normalized keys."""
    return {normalize_key(key): value for key, value in data.items()}


def extract_data(body: Any) -> Dict[str, Any]:
    """
    Pull the `data` object out of a decoded API response.

    Raises:
        InvalidArgumentError: If the body has no data object
    """
    if not isinstance(body, Mapping):
        raise InvalidArgumentError('Invalid API response: missing data')

    data = normalize_keys(body).get('data')
    if data is None or not isinstance(data, Mapping):
        raise InvalidArgumentError('Invalid API response: missing data')

    return data


def parse_created_at(value: Any) -> datetime:
    """
    Parse the created_at timestamp.

    Raises:
        InvalidArgumentError: If the value is not a recognizable date-time
    """
    if isinstance(value, datetime):
        return value
    try:
        return date_parser.parse(str(value))
    except (ValueError, OverflowError) as e:
        raise InvalidArgumentError(f"Invalid created_at format: {value}") from e


@dataclass(frozen=True)
class Document:
    """
    A PDF generation job and its result.

    Holds a weak reference to the client that produced it; the client
    performs download() and refresh() and must outlive the document.
    """

    id: int
    name: str
    status: str
    download_url: str
    created_at: datetime
    _client_ref: Optional[Callable[[], Any]] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[Any, Any], client: Any) -> 'Document':
        """
        Create a Document from the `data` object of an API response.

        Args:
            data: Mapping with id, name, status, download_url, created_at
            client: GeneratePDFs client used for download/refresh

        Returns:
            New Document instance

        Raises:
            InvalidArgumentError: If a field is missing or malformed
        """
        normalized = normalize_keys(data)

        missing = [key for key in REQUIRED_FIELDS if key not in normalized]
        if missing:
            logger.debug(f"PDF data is missing fields: {', '.join(missing)}")
            raise InvalidArgumentError('Invalid PDF data structure')

        try:
            pdf_id = int(normalized['id'])
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError('Invalid PDF data structure') from e

        created_at = parse_created_at(normalized['created_at'])

        return cls(
            id=pdf_id,
            name=str(normalized['name']),
            status=str(normalized['status']),
            download_url=str(normalized['download_url']),
            created_at=created_at,
            _client_ref=weakref.ref(client) if client is not None else None,
        )

    @property
    def client(self) -> Any:
        """
        The client this document was obtained from.

        Raises:
            GeneratePDFsRuntimeError: If the client has been garbage collected
        """
        client = self._client_ref() if self._client_ref is not None else None
        if client is None:
            raise GeneratePDFsRuntimeError('GeneratePDFs client is no longer available')
        return client

    def is_ready(self) -> bool:
        """Check if the PDF is ready for download."""
        return self.status == STATUS_COMPLETED

    def download(self) -> bytes:
        """
        Download the PDF content.

        Returns:
            PDF binary content

        Raises:
            GeneratePDFsRuntimeError: If the PDF is not ready or download fails
        """
        if not self.is_ready():
            raise GeneratePDFsRuntimeError(
                f"PDF is not ready yet. Current status: {self.status}"
            )

        return self.client.download_pdf(self.download_url)

    def download_to_file(self, file_path) -> bool:
        """
        Download the PDF and save it to a file.

        Args:
            file_path: Destination path, overwritten if it exists

        Returns:
            True on success

        Raises:
            GeneratePDFsRuntimeError: If the PDF is not ready, the download
                fails or the file cannot be written
        """
        content = self.download()

        try:
            with open(file_path, 'wb') as fh:
                fh.write(content)
        except OSError as e:
            raise GeneratePDFsRuntimeError(
                f"Failed to write PDF to file: {file_path} - {e}"
            ) from e

        logger.info(f"Saved PDF {self.id} to {file_path}")
        return True

    def refresh(self) -> 'Document':
        """Fetch the current state of this PDF as a new Document."""
        return self.client.get_pdf(self.id)
