"""
Module: core.utils.jsonio

Purpose:
    Atomic file writes for project documents, the model catalog and stored
    images. Content goes to a temporary file in the target directory and is
    then moved over the target with ``Path.replace``; readers never observe a
    partially written file.

Key Functions:
    - atomic_write_bytes(): Write raw bytes atomically
    - atomic_write_json(): Serialize and write JSON atomically
    - read_json(): Read and parse a JSON file

Used By:
    - storage.model_store: Catalog and image writes
    - storage.project_repository: project.json writes
"""

from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """
    Write ``data`` to ``path`` atomically.

    Args:
        path: Target file
        data: Bytes to write

    Raises:
        OSError: If the temp file cannot be written or moved into place.
            The previous content of ``path`` is left untouched.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        mode="wb",
        prefix=f".{path.name}.",
        suffix=".tmp",
        dir=path.parent,
        delete=False,
    ) as f:
        temp_path = Path(f.name)
        try:
            f.write(data)
        except BaseException:
            f.close()
            temp_path.unlink(missing_ok=True)
            raise

    try:
        # replace() overwrites existing files on all platforms
        temp_path.replace(path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise


def atomic_write_json(path: Path, data: Any, *, indent: int = 2) -> None:
    """Serialize ``data`` as JSON and write it atomically."""
    payload = json.dumps(data, indent=indent, ensure_ascii=False)
    atomic_write_bytes(path, payload.encode("utf-8"))
    logger.debug(f"Wrote {path.name} ({len(payload)} chars)")


def read_json(path: Path) -> Any:
    """
    Read and parse a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the content is not valid JSON
        OSError: For other read failures
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
