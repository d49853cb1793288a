"""
Module: storage.project_repository

Purpose:
    Persistence for project aggregates. Each project lives in its own
    directory (project-<id>/) holding a single project.json document.
    Every mutation is a read-modify-write of the whole document finished by
    one atomic write; there is no locking, so two concurrent writers resolve
    as last-writer-wins.

Key Classes:
    - ProjectRepository: create/list/load/delete projects, append/remove assets
    - RemovalPolicy: How remove_asset closes the gap left by a removed asset

Dependencies:
    - core.models: Project, Asset, AppendResult
    - core.utils: Atomic JSON I/O, serialization
    - common.naming: Default display-name generator

Used By:
    - export.controller: Loading assets for export
    - export.wizard: Appending assets
    - cli
"""

from __future__ import annotations

import json
import logging
import shutil
import uuid
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from ..common.naming import generate_display_name
from ..core.errors import CorruptDocument, InvalidArgument, NotFound, StorageError
from ..core.models import AppendResult, Asset, Project
from ..core.utils import atomic_write_json, deserialize_project, read_json, serialize_project

logger = logging.getLogger(__name__)

PROJECT_DIR_PREFIX = "project-"
PROJECT_FILENAME = "project.json"
CREATED_AT_FORMAT = "%Y-%m-%d %H:%M:%S"


class RemovalPolicy(str, Enum):
    """
    Gap handling for remove_asset.

    PRESERVE_ORDER shifts later assets left (O(n)); SWAP_LAST moves the last
    asset into the vacated slot (O(1), reorders the former last asset).
    """

    PRESERVE_ORDER = "preserve_order"
    SWAP_LAST = "swap_last"


def _local_now() -> datetime:
    return datetime.now().astimezone()


class ProjectRepository:
    """
    JSON-backed repository of project aggregates.

    Attributes:
        projects_dir: Directory containing the project-<id> sub-directories
        removal_policy: Gap handling used by remove_asset

    Example:
        >>> repo = ProjectRepository(tmp_path / "projects")
        >>> project = repo.create()
        >>> repo.append_asset(project.id, Asset(id="a1", cutout="..."))
        <AppendResult.APPENDED: 'appended'>
    """

    def __init__(
        self,
        projects_dir: Path,
        *,
        name_generator: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
        removal_policy: RemovalPolicy = RemovalPolicy.PRESERVE_ORDER,
    ):
        self.projects_dir = Path(projects_dir)
        self.removal_policy = removal_policy
        self._name_generator = name_generator or generate_display_name
        self._clock = clock or _local_now
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))

    # ─────────────────────────────────────────────────────────────────────────
    # Paths
    # ─────────────────────────────────────────────────────────────────────────

    def project_dir(self, project_id: str) -> Path:
        """Directory of ``project_id``."""
        _require_id(project_id, "project id")
        return self.projects_dir / f"{PROJECT_DIR_PREFIX}{project_id}"

    def document_path(self, project_id: str) -> Path:
        """Path of the project.json document of ``project_id``."""
        return self.project_dir(project_id) / PROJECT_FILENAME

    # ─────────────────────────────────────────────────────────────────────────
    # Projects
    # ─────────────────────────────────────────────────────────────────────────

    def create(self) -> Project:
        """
        Create an empty project with a fresh id and generated name.

        Raises:
            StorageError: If the directory or document cannot be written
        """
        project = Project(
            id=self._id_factory(),
            name=self._name_generator(),
            created_at=self._clock().strftime(CREATED_AT_FORMAT),
            assets=(),
        )
        try:
            self.project_dir(project.id).mkdir(parents=True, exist_ok=False)
        except OSError as e:
            raise StorageError(f"Cannot create project directory: {e}") from e
        self._save(project)
        logger.info(f"Created project {project.name} ({project.id})")
        return project

    def list(self) -> list[Project]:
        """
        Load every readable project.

        Directories without a readable, parsable document are skipped.

        Returns:
            Projects ordered by directory name
        """
        if not self.projects_dir.is_dir():
            return []

        projects = []
        for entry in sorted(self.projects_dir.iterdir()):
            if not entry.is_dir() or not entry.name.startswith(PROJECT_DIR_PREFIX):
                continue
            doc = entry / PROJECT_FILENAME
            try:
                projects.append(self._read(doc))
            except (NotFound, CorruptDocument, StorageError) as e:
                logger.debug(f"Skipping project directory {entry.name}: {e}")
                continue
        return projects

    def load(self, project_id: str) -> Project:
        """
        Load a project.

        Raises:
            InvalidArgument: If project_id is empty
            NotFound: If the project document does not exist
            CorruptDocument: If the document cannot be parsed
            StorageError: If the document cannot be read
        """
        return self._read(self.document_path(project_id))

    def load_assets(self, project_id: str) -> list[Asset]:
        """Assets of ``project_id`` in stored order."""
        return list(self.load(project_id).assets)

    def delete(self, project_id: str) -> None:
        """
        Remove a project directory tree. Removing an absent project is a no-op.

        Raises:
            InvalidArgument: If project_id is empty
            StorageError: If removal fails
        """
        path = self.project_dir(project_id)
        if not path.exists():
            logger.debug(f"Project {project_id} already absent")
            return
        try:
            shutil.rmtree(path)
        except FileNotFoundError:
            return
        except OSError as e:
            raise StorageError(f"Cannot delete project {project_id}: {e}") from e
        logger.info(f"Deleted project {project_id}")

    # ─────────────────────────────────────────────────────────────────────────
    # Assets
    # ─────────────────────────────────────────────────────────────────────────

    def append_asset(self, project_id: str, asset: Asset) -> AppendResult:
        """
        Append ``asset`` to a project.

        A duplicate asset id is not an error: nothing is written and
        ``AppendResult.ALREADY_PRESENT`` is returned.

        Raises:
            InvalidArgument, NotFound, CorruptDocument, StorageError
        """
        project = self.load(project_id)
        updated, result = project.with_asset(asset)
        if result is AppendResult.ALREADY_PRESENT:
            logger.info(f"Asset {asset.id} already exists in project {project_id}")
            return result
        self._save(updated)
        logger.debug(f"Appended asset {asset.id} to project {project_id}")
        return result

    def remove_asset(self, project_id: str, asset_id: str) -> None:
        """
        Remove an asset from a project.

        Raises:
            InvalidArgument: If either id is empty
            NotFound: If the project or the asset does not exist
            CorruptDocument, StorageError
        """
        _require_id(asset_id, "asset id")
        project = self.load(project_id)
        updated = project.without_asset(
            asset_id,
            preserve_order=self.removal_policy is RemovalPolicy.PRESERVE_ORDER,
        )
        self._save(updated)
        logger.debug(f"Removed asset {asset_id} from project {project_id}")

    # ─────────────────────────────────────────────────────────────────────────
    # Document I/O
    # ─────────────────────────────────────────────────────────────────────────

    def _read(self, path: Path) -> Project:
        try:
            data = read_json(path)
        except FileNotFoundError as e:
            raise NotFound(f"Project document not found: {path}") from e
        except json.JSONDecodeError as e:
            raise CorruptDocument(f"Invalid project JSON: {e}", path=str(path)) from e
        except OSError as e:
            raise StorageError(f"Cannot read project document {path}: {e}") from e
        return deserialize_project(data, path=str(path))

    def _save(self, project: Project) -> None:
        try:
            atomic_write_json(self.document_path(project.id), serialize_project(project))
        except OSError as e:
            raise StorageError(f"Cannot write project {project.id}: {e}") from e


def _require_id(value: str, what: str) -> None:
    if not value or not value.strip():
        raise InvalidArgument(f"{what} is required")
