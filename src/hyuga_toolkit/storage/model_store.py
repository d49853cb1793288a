"""
Module: storage.model_store

Purpose:
    Content-addressed catalog of reusable template images ("models").
    Uploaded images are deduplicated by SHA-256 digest: the bytes are stored
    once under images/<digest>.<ext> and any number of catalog entries
    (display labels) may point at the same stored file.

Key Classes:
    - ModelStore: Catalog operations (initialize, import, list)
    - ImportReport: Per-batch import outcome

Algorithm (import_images):
    1. Index the existing catalog: digest -> stored file, and the listed
       (label, reference) pairs
    2. For each input: read and digest
       - digest stored + same label listed -> true duplicate, skip
       - digest stored + new label         -> append entry pointing at the
                                              stored file
       - digest new -> write <digest><lower(ext)> if absent, append entry
    3. A read/write failure skips that input only
    4. Persist the whole catalog with one atomic write

Dependencies:
    - core.utils.hashing: Digests
    - core.utils.jsonio: Atomic writes

Used By:
    - export.wizard: Model import from picked files
    - cli: `models import` / `models list`
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Union

from ..core.errors import CorruptCatalog, StorageError
from ..core.models import ModelCatalogEntry
from ..core.utils import (
    atomic_write_bytes,
    atomic_write_json,
    deserialize_catalog,
    digest_bytes,
    digest_from_reference,
    read_json,
    serialize_catalog,
)

logger = logging.getLogger(__name__)

CATALOG_FILENAME = "models.json"
IMAGES_DIRNAME = "images"


@dataclass
class ImportReport:
    """
    Outcome of one import batch.

    Attributes:
        added: Entries appended with a newly stored image
        reused: Entries appended that point at an already stored image
        skipped_duplicates: Inputs whose stored reference was already listed
        failed: (path, reason) for inputs that could not be read or written
    """

    added: list[ModelCatalogEntry] = field(default_factory=list)
    reused: list[ModelCatalogEntry] = field(default_factory=list)
    skipped_duplicates: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, str]] = field(default_factory=list)

    @property
    def appended_count(self) -> int:
        return len(self.added) + len(self.reused)


class ModelStore:
    """
    Catalog of template images keyed by content digest.

    Attributes:
        models_dir: Root holding models.json and images/

    Example:
        >>> store = ModelStore(Path("~/.config/hyuga/models"))
        >>> report = store.import_images([Path("plantilla.png")])
        >>> [e.label for e in store.list()]
        ['Seleciona Machote', 'plantilla.png']
    """

    def __init__(self, models_dir: Path):
        self.models_dir = Path(models_dir)

    @property
    def catalog_path(self) -> Path:
        return self.models_dir / CATALOG_FILENAME

    @property
    def images_dir(self) -> Path:
        return self.models_dir / IMAGES_DIRNAME

    # ─────────────────────────────────────────────────────────────────────────
    # Catalog I/O
    # ─────────────────────────────────────────────────────────────────────────

    def initialize_catalog_if_absent(self) -> bool:
        """
        Write a catalog holding only the placeholder entry, if none exists.

        Returns:
            True if the catalog was created, False if it already existed

        Raises:
            StorageError: If the catalog cannot be written
        """
        if self.catalog_path.exists():
            return False
        self._write_catalog([ModelCatalogEntry.sentinel()])
        logger.info(f"Initialized model catalog at {self.catalog_path}")
        return True

    def list(self) -> list[ModelCatalogEntry]:
        """
        Read the catalog.

        Returns:
            Entries in catalog order; empty if the catalog does not exist

        Raises:
            CorruptCatalog: If the file is not a valid catalog
            StorageError: If the file cannot be read
        """
        try:
            data = read_json(self.catalog_path)
        except FileNotFoundError:
            return []
        except json.JSONDecodeError as e:
            raise CorruptCatalog(
                f"Model catalog is not valid JSON: {e}", path=str(self.catalog_path)
            ) from e
        except OSError as e:
            raise StorageError(f"Cannot read model catalog: {e}") from e
        return deserialize_catalog(data, path=str(self.catalog_path))

    def _write_catalog(self, entries: list[ModelCatalogEntry]) -> None:
        try:
            atomic_write_json(self.catalog_path, serialize_catalog(entries))
        except OSError as e:
            raise StorageError(f"Cannot write model catalog: {e}") from e

    # ─────────────────────────────────────────────────────────────────────────
    # Import
    # ─────────────────────────────────────────────────────────────────────────

    def import_images(self, paths: Iterable[Union[str, Path]]) -> ImportReport:
        """
        Import template images, deduplicating by content.

        Args:
            paths: Image files selected by the user

        Returns:
            ImportReport describing what happened to each input

        Raises:
            CorruptCatalog: If the existing catalog cannot be parsed
            StorageError: If the images directory or the catalog cannot be written
        """
        try:
            self.images_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create images directory: {e}") from e

        self.initialize_catalog_if_absent()
        entries = self.list()

        # digest -> reference of the file actually holding those bytes
        stored_references: dict[str, str] = {}
        listed: set[tuple[str, str]] = set()
        for entry in entries:
            digest = digest_from_reference(entry.reference)
            if digest and digest not in stored_references and Path(entry.reference).is_file():
                stored_references[digest] = entry.reference
            listed.add((entry.label, entry.reference))

        report = ImportReport()

        for raw_path in paths:
            path = Path(raw_path)
            try:
                data = path.read_bytes()
            except OSError as e:
                logger.warning(f"Could not read model image {path}: {e}")
                report.failed.append((path, str(e)))
                continue

            digest = digest_bytes(data)
            stored = stored_references.get(digest)

            if stored is not None:
                if (path.name, stored) in listed:
                    logger.debug(f"Skipping duplicate model {path.name}")
                    report.skipped_duplicates.append(path)
                    continue
                entry = ModelCatalogEntry(label=path.name, reference=stored)
                entries.append(entry)
                listed.add((entry.label, entry.reference))
                report.reused.append(entry)
                continue

            output_path = self.images_dir / f"{digest}{path.suffix.lower()}"
            if not output_path.exists():
                try:
                    atomic_write_bytes(output_path, data)
                except OSError as e:
                    logger.warning(f"Could not write model image {output_path}: {e}")
                    report.failed.append((path, str(e)))
                    continue

            entry = ModelCatalogEntry(label=path.name, reference=str(output_path))
            entries.append(entry)
            stored_references[digest] = entry.reference
            listed.add((entry.label, entry.reference))
            report.added.append(entry)

        self._write_catalog(entries)

        logger.info(
            f"Imported {report.appended_count} models "
            f"({len(report.added)} new, {len(report.reused)} reused, "
            f"{len(report.skipped_duplicates)} duplicates, {len(report.failed)} failed)"
        )
        return report
