"""
Module: storage

Purpose:
    Local persistence: per-project JSON documents and the shared,
    content-addressed model catalog.

Key Classes:
    - ProjectRepository: Project aggregates and their assets
    - ModelStore: Deduplicated template images
"""

from .model_store import ImportReport, ModelStore
from .project_repository import ProjectRepository, RemovalPolicy

__all__ = [
    "ImportReport",
    "ModelStore",
    "ProjectRepository",
    "RemovalPolicy",
]
