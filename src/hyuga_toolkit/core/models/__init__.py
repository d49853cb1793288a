"""
Core Models Package

Immutable data models for projects, assets and the model catalog.
All models are frozen dataclasses with ``to_dict()`` / ``from_dict()``.
"""

from .assets import Asset, ImageRole
from .catalog import ModelCatalogEntry, SENTINEL_LABEL, SENTINEL_REFERENCE
from .projects import AppendResult, Project

__all__ = [
    "Asset",
    "ImageRole",
    "ModelCatalogEntry",
    "SENTINEL_LABEL",
    "SENTINEL_REFERENCE",
    "AppendResult",
    "Project",
]
