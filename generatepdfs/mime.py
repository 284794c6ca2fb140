"""MIME type detection for image attachments."""

import mimetypes
import os


DEFAULT_MIME_TYPE = "application/octet-stream"

# Used when the platform mimetypes table has no entry
FALLBACK_MIME_TYPES = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
    "svg": "image/svg+xml",
}


def detect_mime_type(file_path: str) -> str:
    """
    Guess the content type of a file from its name.

    Args:
        file_path: Path (or bare filename) of the file

    Returns:
        MIME type string, DEFAULT_MIME_TYPE when nothing matches
    """
    guessed, _encoding = mimetypes.guess_type(str(file_path))
    if guessed:
        return guessed

    extension = os.path.splitext(str(file_path))[1].lower().lstrip(".")
    return FALLBACK_MIME_TYPES.get(extension, DEFAULT_MIME_TYPE)
