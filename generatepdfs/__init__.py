"""
GeneratePDFs client package.

Key Components:
- client.py: GeneratePDFs facade (generate, get, download)
- document.py: Document handle and response mapping
- request_builder.py: payload construction from HTML/CSS/images or a URL
- http.py: authenticated httpx transport
- errors.py: InvalidArgumentError and GeneratePDFsRuntimeError
"""

from .client import GeneratePDFs
from .config import Settings, get_settings
from .document import (
    Document,
    STATUS_PENDING,
    STATUS_PROCESSING,
    STATUS_COMPLETED,
    STATUS_FAILED,
)
from .errors import (
    GeneratePDFsError,
    InvalidArgumentError,
    GeneratePDFsRuntimeError,
)
from .request_builder import ImageInput

__version__ = '1.0.0'

__all__ = [
    # Exceptions
    'GeneratePDFsError',
    'InvalidArgumentError',
    'GeneratePDFsRuntimeError',
    # Classes
    'GeneratePDFs',
    'Document',
    'ImageInput',
    'Settings',
    'get_settings',
    # Statuses
    'STATUS_PENDING',
    'STATUS_PROCESSING',
    'STATUS_COMPLETED',
    'STATUS_FAILED',
]
