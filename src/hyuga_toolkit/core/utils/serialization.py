"""
Serialization Utilities

To/from JSON helpers for the on-disk documents:

- ``project.json``: one Project aggregate
- ``models.json``: ordered array of catalog entries

Structural problems (wrong JSON type, missing keys, invalid values) are
reported as CorruptDocument / CorruptCatalog so callers can tell them apart
from filesystem failures.
"""

from __future__ import annotations

from typing import Any

from ..errors import CorruptCatalog, CorruptDocument
from ..models import ModelCatalogEntry, Project


# ─────────────────────────────────────────────────────────────────────────────
# Project Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_project(project: Project) -> dict[str, Any]:
    """Serialize a Project to a JSON-ready dictionary."""
    return project.to_dict()


def deserialize_project(data: Any, *, path: str = "") -> Project:
    """
    Deserialize a Project from parsed JSON.

    Args:
        data: Parsed JSON value
        path: Source path, for error messages

    Returns:
        Project instance

    Raises:
        CorruptDocument: If data is not a valid project document
    """
    if not isinstance(data, dict):
        raise CorruptDocument(
            f"Project document must be an object, got {type(data).__name__}",
            path=path,
        )
    assets = data.get("assets")
    if assets is not None and not isinstance(assets, list):
        raise CorruptDocument("Project 'assets' must be an array", path=path)
    try:
        return Project.from_dict(data)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise CorruptDocument(f"Invalid project document: {e!r}", path=path) from e


# ─────────────────────────────────────────────────────────────────────────────
# Catalog Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_catalog(entries: list[ModelCatalogEntry]) -> list[dict[str, Any]]:
    """Serialize catalog entries, preserving order."""
    return [entry.to_dict() for entry in entries]


def deserialize_catalog(data: Any, *, path: str = "") -> list[ModelCatalogEntry]:
    """
    Deserialize catalog entries from parsed JSON.

    Raises:
        CorruptCatalog: If data is not an array of entry objects
    """
    if data is None:
        # Older catalogs store an empty list as `null`
        return []
    if not isinstance(data, list):
        raise CorruptCatalog(
            f"Catalog must be an array, got {type(data).__name__}",
            path=path,
        )
    entries = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise CorruptCatalog(f"Catalog entry {i} is not an object", path=path)
        try:
            entries.append(ModelCatalogEntry.from_dict(item))
        except KeyError as e:
            raise CorruptCatalog(f"Catalog entry {i} missing {e}", path=path) from e
    return entries
