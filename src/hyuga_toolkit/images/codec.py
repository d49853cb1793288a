"""
Module: images.codec

Purpose:
    Image decoding behind a small interface so the export pipeline can be
    tested without real pixel data, plus helpers for the two kinds of image
    reference an asset can hold: a filesystem path or a base64 payload
    (optionally a ``data:<mime>;base64,`` URL).

Key Classes:
    - ImageCodec: Abstract decoder (bytes -> width, height, handle)
    - PillowImageCodec: Pillow implementation
    - DecodedImage: Decoded image with its pixel size
    - ImageDecodeError: Reference or pixel data could not be decoded

Key Functions:
    - strip_data_url(): Remove a data-URL prefix
    - load_reference_bytes(): Resolve a reference to raw bytes
    - encode_file_as_data_url(): Build an inline payload from a file

Dependencies:
    - PIL: Decoding

Used By:
    - export.controller: Decoding asset images
    - export.wizard: Encoding picked files
"""

from __future__ import annotations

import base64
import binascii
import io
import logging
import mimetypes
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from PIL import Image, UnidentifiedImageError

from ..core.errors import HyugaError

logger = logging.getLogger(__name__)

DATA_URL_RE = re.compile(r"^data:(?P<mime>[-\w.+/]+)?(?:;charset=[\w-]+)?;base64,")


class ImageDecodeError(HyugaError):
    """Image reference or pixel data could not be decoded."""


@dataclass(frozen=True)
class DecodedImage:
    """
    Decoded image.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        image: Codec-specific handle passed through to the document writer
    """

    width: int
    height: int
    image: Any


class ImageCodec(ABC):
    """Abstract image decoder."""

    @abstractmethod
    def decode(self, data: bytes) -> DecodedImage:
        """
        Decode encoded image bytes.

        Raises:
            ImageDecodeError: If the bytes are not a supported image
        """


class PillowImageCodec(ImageCodec):
    """
    Decoder backed by Pillow.

    Images are fully loaded and converted to RGB (RGBA when they carry
    transparency) so the handle stays valid after the source buffer is gone.
    """

    def decode(self, data: bytes) -> DecodedImage:
        try:
            with Image.open(io.BytesIO(data)) as img:
                img.load()
                has_alpha = img.mode in ("RGBA", "LA") or "transparency" in img.info
                converted = img.convert("RGBA" if has_alpha else "RGB")
        except (UnidentifiedImageError, OSError, ValueError) as e:
            raise ImageDecodeError(f"Cannot decode image: {e}") from e
        return DecodedImage(converted.width, converted.height, converted)


def strip_data_url(payload: str) -> str:
    """Remove a leading ``data:<mime>;base64,`` marker, if any."""
    match = DATA_URL_RE.match(payload)
    if match:
        return payload[match.end():]
    return payload


def _as_existing_file(reference: str) -> Optional[Path]:
    if reference.startswith("data:"):
        return None
    try:
        path = Path(reference).expanduser()
        return path if path.is_file() else None
    except (OSError, ValueError):
        # Very long base64 strings can exceed the platform's name limit
        return None


def load_reference_bytes(reference: str) -> bytes:
    """
    Resolve an asset image reference to encoded image bytes.

    Args:
        reference: Existing file path or base64 payload (data URL allowed)

    Returns:
        Encoded image bytes

    Raises:
        ImageDecodeError: If the reference is empty or not valid base64
    """
    if not reference or not reference.strip():
        raise ImageDecodeError("Empty image reference")

    path = _as_existing_file(reference.strip())
    if path is not None:
        try:
            return path.read_bytes()
        except OSError as e:
            raise ImageDecodeError(f"Cannot read image file {path}: {e}") from e

    payload = "".join(strip_data_url(reference.strip()).split())
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageDecodeError(f"Invalid base64 image payload: {e}") from e


def encode_file_as_data_url(path: Path) -> str:
    """
    Read an image file and return it as a ``data:<mime>;base64,`` payload.

    Raises:
        OSError: If the file cannot be read
    """
    path = Path(path)
    mime, _ = mimetypes.guess_type(path.name)
    encoded = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{mime or 'application/octet-stream'};base64,{encoded}"
