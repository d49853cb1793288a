"""
Filesystem locations for projects and the model catalog.

Layout under the base directory:

    <base>/projects/project-<id>/project.json
    <base>/models/images/<digest>.<ext>
    <base>/models/models.json

The base directory is resolved from (first match wins): an explicit
argument, the HYUGA_HOME environment variable, or the platform's generic
config location (e.g. ~/.config/hyuga on Linux).
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QStandardPaths

APP_DIR_NAME = "hyuga"
BASE_DIR_ENV = "HYUGA_HOME"


def get_base_dir(override: Optional[Union[str, Path]] = None) -> Path:
    """
    Get the per-user base configuration directory (created if missing).

    Args:
        override: Explicit base directory (e.g. from --base-dir)
    """
    if override:
        base = Path(override).expanduser()
    elif os.environ.get(BASE_DIR_ENV):
        base = Path(os.environ[BASE_DIR_ENV]).expanduser()
    else:
        config_root = QStandardPaths.writableLocation(
            QStandardPaths.StandardLocation.GenericConfigLocation
        )
        base = Path(config_root) / APP_DIR_NAME
    base.mkdir(parents=True, exist_ok=True)
    return base


def get_projects_dir(base: Optional[Union[str, Path]] = None) -> Path:
    """Directory holding one sub-directory per project."""
    return get_base_dir(base) / "projects"


def get_models_dir(base: Optional[Union[str, Path]] = None) -> Path:
    """Directory holding models.json and the images/ store."""
    return get_base_dir(base) / "models"


@dataclass(frozen=True)
class StorePaths:
    """
    Resolved data locations (immutable).

    Attributes:
        base_dir: Root holding projects/ and models/
    """

    base_dir: Path

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not str(self.base_dir).strip():
            raise ValueError("base_dir must be non-empty")
        if self.base_dir.exists() and not self.base_dir.is_dir():
            raise ValueError(f"base_dir is not a directory: {self.base_dir}")

    @classmethod
    def resolve(cls, override: Optional[Union[str, Path]] = None) -> StorePaths:
        """Resolve (and create) the base directory, see get_base_dir()."""
        return cls(get_base_dir(override))

    @property
    def projects_dir(self) -> Path:
        return self.base_dir / "projects"

    @property
    def models_dir(self) -> Path:
        return self.base_dir / "models"
