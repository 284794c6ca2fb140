"""
Request payload construction for PDF generation.

Turns local HTML/CSS/image files or a URL into the JSON body expected by
POST /pdfs/generate. File contents are base64 encoded.
"""

import base64
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union
from urllib.parse import urlparse

from .errors import InvalidArgumentError
from .mime import detect_mime_type

logger = logging.getLogger(__name__)

ALLOWED_URL_SCHEMES = ('http', 'https')


@dataclass
class ImageInput:
    """
    Image file to embed in an HTML document.

    `name` is the filename the HTML refers to; `path` is where the file
    lives locally. `mime_type` overrides detection when set.
    """

    name: Optional[str]
    path: Optional[str]
    mime_type: Optional[str] = None

    @classmethod
    def coerce(cls, image: Union['ImageInput', Mapping[str, Any]]) -> 'ImageInput':
        """Accept either an ImageInput or a dict with name/path/mime_type keys."""
        if isinstance(image, cls):
            return image
        return cls(
            name=image.get('name'),
            path=image.get('path'),
            mime_type=image.get('mime_type') or image.get('mimeType'),
        )


def _is_readable_file(path: Union[str, os.PathLike]) -> bool:
    try:
        return os.path.isfile(path) and os.access(path, os.R_OK)
    except TypeError:
        # None or a value that is not a path
        return False


def encode_file(path: Union[str, os.PathLike]) -> str:
    """Read a whole file and return its content as a base64 string."""
    with open(path, 'rb') as fh:
        content = fh.read()
    return base64.b64encode(content).decode('ascii')


def process_images(images: Iterable[Union[ImageInput, Mapping[str, Any]]]) -> List[Dict[str, str]]:
    """
    Encode image files for the API.

    Images without a name or path, or whose file is missing or unreadable,
    are skipped so that a partial image set still produces a PDF.

    Args:
        images: ImageInput instances or dicts

    Returns:
        List of {name, content, mime_type} dictionaries
    """
    processed = []

    for raw in images:
        image = ImageInput.coerce(raw)

        if not image.path or not image.name:
            logger.debug("Skipping image without name or path")
            continue

        if not _is_readable_file(image.path):
            logger.debug(f"Skipping unreadable image: {image.path}")
            continue

        processed.append({
            'name': image.name,
            'content': encode_file(image.path),
            'mime_type': image.mime_type or detect_mime_type(image.path),
        })

    return processed


def build_html_payload(
    html_path: Union[str, os.PathLike],
    css_path: Optional[Union[str, os.PathLike]] = None,
    images: Optional[Iterable[Union[ImageInput, Mapping[str, Any]]]] = None,
) -> Dict[str, Any]:
    """
    Build the generation payload for an HTML document.

    Args:
        html_path: Path to the HTML file
        css_path: Optional path to a CSS file
        images: Optional images referenced by the HTML

    Returns:
        Payload dictionary with html, optional css and optional images

    Raises:
        InvalidArgumentError: If the HTML or CSS file is missing or unreadable
    """
    if not _is_readable_file(html_path):
        raise InvalidArgumentError(f"HTML file not found or not readable: {html_path}")

    payload: Dict[str, Any] = {
        'html': encode_file(html_path),
    }

    if css_path is not None:
        if not _is_readable_file(css_path):
            raise InvalidArgumentError(f"CSS file not found or not readable: {css_path}")
        payload['css'] = encode_file(css_path)

    processed = process_images(images or [])
    if processed:
        payload['images'] = processed

    return payload


def build_url_payload(url: str) -> Dict[str, str]:
    """
    Build the generation payload for a remote page.

    Raises:
        InvalidArgumentError: Unless url is an absolute http(s) URL
    """
    try:
        parsed = urlparse(url)
    except (AttributeError, TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Invalid URL: {url}") from e

    if parsed.scheme.lower() not in ALLOWED_URL_SCHEMES or not parsed.netloc:
        raise InvalidArgumentError(f"Invalid URL: {url}")

    return {'url': url}
