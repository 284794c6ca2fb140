"""
Exceptions raised by the GeneratePDFs client.

Two kinds are used throughout the package:
- InvalidArgumentError: caller input or server payload is malformed
- GeneratePDFsRuntimeError: an operation failed against external state
  (HTTP status, PDF not ready, local write failure)

Messages never include the API token.
"""

from typing import Optional


class GeneratePDFsError(Exception):
    """
    Base exception for all GeneratePDFs client errors.

    Allows consumers to catch every error raised by the library with a
    single except clause.
    """
    pass


class InvalidArgumentError(GeneratePDFsError, ValueError):
    """
    Raised when input is structurally or semantically wrong.

    Covers missing or unreadable local files, malformed URLs, non-positive
    PDF ids and incomplete or malformed API responses. Never retried.

    Example:
        HTML file not found or not readable: /tmp/missing.html
    """
    pass


class GeneratePDFsRuntimeError(GeneratePDFsError, RuntimeError):
    """
    Raised when an operation depending on external state fails.

    Typically a non-success HTTP status, a PDF that is not ready yet,
    or a failure writing the downloaded PDF to disk.

    Attributes:
        status_code: HTTP status code when the error came from a response
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        """
        Initialize runtime error.

        Args:
            message: Error message (no secrets!)
            status_code: Optional HTTP status code
        """
        super().__init__(message)
        self.status_code = status_code
