"""
Module: assets

Purpose:
    Provides the Asset value object - one scrapbook entry inside a project.
    An asset pairs page/section labels with its image references (sheet,
    cutout and optionally a model template).

Key Classes:
    - Asset: Immutable asset metadata
    - ImageRole: Which image slot of an asset a reference fills

Dependencies:
    - dataclasses (std)
    - core.errors: InvalidArgument

Used By:
    - core.models.projects.Project
    - storage.project_repository
    - export.controller, export.wizard
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..errors import InvalidArgument


class ImageRole(str, Enum):
    """Image slot of an asset."""

    SHEET = "sheet"
    CUTOUT = "cutout"
    MODEL = "model"


@dataclass(frozen=True)
class Asset:
    """
    Asset metadata (immutable).

    Image references are either inline base64 payloads (optionally a
    ``data:<mime>;base64,`` URL) or filesystem paths, e.g. into the model
    store.

    Attributes:
        id: Identifier, unique within the owning project
        page_number: Free-form page label
        section: Free-form section label
        sheet: Sheet image reference
        cutout: Cutout image reference
        model: Model template reference ("" when none)

    Invariants:
        - id is non-empty

    Example:
        >>> asset = Asset(id="a1", page_number="12", section="B", sheet="...", cutout="...")
        >>> asset.has_model
        False
    """

    id: str
    page_number: str = ""
    section: str = ""
    sheet: str = ""
    cutout: str = ""
    model: str = ""

    def __post_init__(self) -> None:
        """Validate asset on construction."""
        if not self.id or not self.id.strip():
            raise InvalidArgument("Asset id must be non-empty")

    @property
    def has_model(self) -> bool:
        """True if a model reference is set (the catalog sentinel counts as none)."""
        return bool(self.model) and self.model != "empty"

    def reference(self, role: ImageRole) -> str:
        """Return the image reference stored in ``role``."""
        return getattr(self, role.value)

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to dictionary for JSON storage.

        Returns:
            Dict with camelCase keys; ``model`` only when set
        """
        d: dict[str, Any] = {
            "id": self.id,
            "pageNumber": self.page_number,
            "section": self.section,
            "sheet": self.sheet,
            "cutout": self.cutout,
        }
        if self.model:
            d["model"] = self.model
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Asset:
        """
        Deserialize from dictionary.

        Missing optional fields default to "" so documents written before a
        field existed still load.
        """
        return cls(
            id=data["id"],
            page_number=str(data.get("pageNumber", "")),
            section=str(data.get("section", "")),
            sheet=data.get("sheet", ""),
            cutout=data.get("cutout", ""),
            model=data.get("model", "") or "",
        )
