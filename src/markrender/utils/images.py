#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markrender/utils/images.py
"""Data URI image validation.

Embedded images declare a MIME type in their data URI. The helpers here sniff
the decoded payload's magic bytes and compare the detected format with the
declared one, so the HTML renderer can flag images whose content does not
match their declaration.

"""

from __future__ import annotations

import base64
import binascii
import enum
import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import unquote_to_bytes

logger = logging.getLogger(__name__)

# Common MIME aliases mapped to the canonical spelling
_MIME_ALIASES = {
    "image/jpg": "image/jpeg",
    "image/tif": "image/tiff",
    "image/ico": "image/x-icon",
    "image/vnd.microsoft.icon": "image/x-icon",
}

_FORMAT_TO_MIME = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "gif": "image/gif",
    "webp": "image/webp",
    "bmp": "image/bmp",
    "tiff": "image/tiff",
    "ico": "image/x-icon",
    "svg": "image/svg+xml",
}


class ImageValidationStatus(enum.Enum):
    """Outcome categories of :func:`validate_data_uri`."""

    VALID = "valid"
    MISMATCH = "mismatch"
    UNRECOGNIZED = "unrecognized"
    INVALID_DATA = "invalid_data"


@dataclass(frozen=True)
class ImageValidationResult:
    """Result of validating a data URI image.

    Parameters
    ----------
    status : ImageValidationStatus
        Outcome of the check
    declared_mime : str
        MIME type declared by the data URI (empty when it could not be parsed)
    detected_mime : str or None
        MIME type detected from the payload's magic bytes

    """

    status: ImageValidationStatus
    declared_mime: str = ""
    detected_mime: str | None = None

    @property
    def is_valid(self) -> bool:
        """Whether the payload matches its declaration."""
        return self.status is ImageValidationStatus.VALID


def is_data_uri(uri: str) -> bool:
    """Check if a string is a data URI.

    Parameters
    ----------
    uri : str
        String to check

    Returns
    -------
    bool
        True if string is a data URI

    Examples
    --------
        >>> is_data_uri("data:image/png;base64,...")
        True
        >>> is_data_uri("https://example.com/image.png")
        False

    """
    if not uri or not isinstance(uri, str):
        return False

    return uri[:5].lower() == "data:"


def normalize_mime(mime: str) -> str:
    """Lower-case a MIME type and map known aliases to their canonical form."""
    normalized = mime.strip().lower()
    return _MIME_ALIASES.get(normalized, normalized)


def parse_image_data_uri(data_uri: str) -> dict[str, Any] | None:
    """Parse a data URI into its MIME type and decoded payload.

    Parameters
    ----------
    data_uri : str
        Data URI string of the form ``data:[<mediatype>][;base64],<data>``

    Returns
    -------
    dict or None
        Dictionary with keys 'mime_type', 'encoding' and 'data' (bytes),
        or None if the URI is malformed or the payload cannot be decoded

    """
    if not is_data_uri(data_uri):
        return None

    comma_idx = data_uri.find(",", 5)
    if comma_idx == -1:
        return None

    metadata = data_uri[5:comma_idx]
    payload = data_uri[comma_idx + 1 :]

    parts = metadata.split(";")
    mime_type = parts[0].strip() or "text/plain"
    is_base64 = any(part.strip().lower() == "base64" for part in parts[1:])

    if is_base64:
        # Accept URL-safe alphabets and missing padding
        normalized = "".join(payload.split()).replace("-", "+").replace("_", "/")
        remainder = len(normalized) % 4
        if remainder:
            normalized += "=" * (4 - remainder)
        try:
            data = base64.b64decode(normalized, validate=True)
        except (ValueError, binascii.Error) as e:
            logger.debug(f"Invalid base64 payload in data URI ({type(e).__name__}: {e})")
            return None
        encoding = "base64"
    else:
        data = unquote_to_bytes(payload)
        encoding = "url"

    return {"mime_type": mime_type, "encoding": encoding, "data": data}


def detect_image_format_from_bytes(data: bytes) -> str | None:
    r"""Detect image format from content using magic bytes.

    Parameters
    ----------
    data : bytes
        Image content (the first 32 bytes are sufficient)

    Returns
    -------
    str or None
        Image format (lowercase extension without dot) or None if unrecognized

    Notes
    -----
    Supported signatures:

    - **PNG**: Starts with `\x89PNG\r\n\x1a\n`
    - **JPEG**: Starts with `\xff\xd8\xff`
    - **GIF**: Starts with `GIF87a` or `GIF89a`
    - **WebP**: `RIFF` header with `WEBP` at offset 8
    - **BMP**: Starts with `BM`
    - **TIFF**: Starts with `II*\x00` or `MM\x00*`
    - **ICO**: Starts with `\x00\x00\x01\x00`
    - **SVG**: Starts with `<svg` or `<?xml` (after whitespace)

    """
    if not data or len(data) < 4:
        return None

    if data.startswith(b"\x89PNG\r\n\x1a\n"):
        return "png"
    if data.startswith(b"\xff\xd8\xff"):
        return "jpg"
    if data.startswith((b"GIF87a", b"GIF89a")):
        return "gif"
    if len(data) >= 12 and data.startswith(b"RIFF") and data[8:12] == b"WEBP":
        return "webp"
    if data.startswith(b"BM"):
        return "bmp"
    if data.startswith((b"II*\x00", b"MM\x00*")):
        return "tiff"
    if data.startswith(b"\x00\x00\x01\x00"):
        return "ico"

    stripped = data.lstrip()
    if stripped.startswith((b"<svg", b"<?xml")):
        return "svg"

    return None


def validate_data_uri(data_uri: str) -> ImageValidationResult:
    """Check that a data URI's payload matches its declared MIME type.

    Parameters
    ----------
    data_uri : str
        Data URI to validate

    Returns
    -------
    ImageValidationResult
        ``VALID`` when the sniffed format equals the declared one,
        ``MISMATCH`` when they differ, ``UNRECOGNIZED`` when the payload has
        no known signature, and ``INVALID_DATA`` when the URI cannot be
        parsed or decoded.

    Examples
    --------
        >>> validate_data_uri("data:image/png;base64,R0lGODlhAQABAAAAACw=").status
        <ImageValidationStatus.MISMATCH: 'mismatch'>

    """
    parsed = parse_image_data_uri(data_uri)
    if parsed is None:
        return ImageValidationResult(ImageValidationStatus.INVALID_DATA)

    declared = parsed["mime_type"]
    detected_format = detect_image_format_from_bytes(parsed["data"])
    if detected_format is None:
        return ImageValidationResult(ImageValidationStatus.UNRECOGNIZED, declared_mime=declared)

    detected = _FORMAT_TO_MIME[detected_format]
    if normalize_mime(declared) == normalize_mime(detected):
        return ImageValidationResult(ImageValidationStatus.VALID, declared, detected)
    return ImageValidationResult(ImageValidationStatus.MISMATCH, declared, detected)


__all__ = [
    "ImageValidationResult",
    "ImageValidationStatus",
    "detect_image_format_from_bytes",
    "is_data_uri",
    "normalize_mime",
    "parse_image_data_uri",
    "validate_data_uri",
]
