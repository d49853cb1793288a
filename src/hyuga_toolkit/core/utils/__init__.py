"""
Utils Package

Hashing, atomic JSON I/O and serialization helpers.
"""

from .hashing import digest_bytes, digest_from_reference
from .jsonio import atomic_write_bytes, atomic_write_json, read_json
from .serialization import (
    serialize_project,
    deserialize_project,
    serialize_catalog,
    deserialize_catalog,
)

__all__ = [
    "digest_bytes",
    "digest_from_reference",
    "atomic_write_bytes",
    "atomic_write_json",
    "read_json",
    "serialize_project",
    "deserialize_project",
    "serialize_catalog",
    "deserialize_catalog",
]
