"""
Module: images

Purpose:
    Image reference resolution and decoding.
"""

from .codec import (
    DecodedImage,
    ImageCodec,
    ImageDecodeError,
    PillowImageCodec,
    encode_file_as_data_url,
    load_reference_bytes,
    strip_data_url,
)

__all__ = [
    "DecodedImage",
    "ImageCodec",
    "ImageDecodeError",
    "PillowImageCodec",
    "encode_file_as_data_url",
    "load_reference_bytes",
    "strip_data_url",
]
