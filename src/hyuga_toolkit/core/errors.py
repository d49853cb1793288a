"""
Module: core.errors

Purpose:
    Exception taxonomy shared by the storage, layout and export layers.

Key Classes:
    - HyugaError: Base class for every toolkit failure
    - InvalidArgument: Empty or malformed identifiers
    - NotFound: Missing project, asset or document
    - CorruptCatalog / CorruptDocument: Unparsable JSON on disk
    - StorageError: Filesystem failures (permissions, disk full, ...)

Used By:
    - storage.model_store, storage.project_repository
    - export.controller, cli
"""

from __future__ import annotations


class HyugaError(Exception):
    """Base class for all toolkit errors."""


class InvalidArgument(HyugaError, ValueError):
    """Identifier or argument is empty or malformed."""


class NotFound(HyugaError):
    """Requested project, asset or document does not exist."""


class CorruptDocument(HyugaError):
    """A project document exists but cannot be parsed."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class CorruptCatalog(CorruptDocument):
    """The model catalog exists but is not a valid JSON array of entries."""


class StorageError(HyugaError):
    """Filesystem operation failed."""
