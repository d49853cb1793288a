"""
Content hashing for the model store.

Digests are SHA-256 rendered as lowercase hex. The digest doubles as the
filename stem of a stored image, so a stored reference can be mapped back
to its digest without re-reading the file.
"""

from __future__ import annotations

import hashlib
import string
from pathlib import Path
from typing import Optional, Union

DIGEST_HEX_LENGTH = 64

_HEX_DIGITS = frozenset(string.hexdigits)


def digest_bytes(data: bytes) -> str:
    """Return the SHA-256 hex digest of ``data``."""
    return hashlib.sha256(data).hexdigest()


def digest_from_reference(reference: Union[str, Path]) -> Optional[str]:
    """
    Recover the digest from a stored image reference.

    Accepts ``<digest>.ext`` and ``<digest>-anything.ext``; the first 64 hex
    characters of the file stem are the dedup key.

    Args:
        reference: Path (or path string) of a stored image

    Returns:
        Lowercase digest, or None when the stem is not a digest

    Example:
        >>> digest_from_reference("/m/images/" + "a" * 64 + "-copy.png") == "a" * 64
        True
    """
    stem = Path(str(reference)).stem
    if "-" in stem and stem.index("-") > 0:
        stem = stem[: stem.index("-")]
    if len(stem) != DIGEST_HEX_LENGTH:
        return None
    if not all(ch in _HEX_DIGITS for ch in stem):
        return None
    return stem.lower()
