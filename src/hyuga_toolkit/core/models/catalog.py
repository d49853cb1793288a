"""
Module: catalog

Purpose:
    ModelCatalogEntry - one reusable template image in models.json.

Used By:
    - storage.model_store
    - export.wizard: Model selection
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

SENTINEL_LABEL = "Seleciona Machote"
SENTINEL_REFERENCE = "empty"


@dataclass(frozen=True)
class ModelCatalogEntry:
    """
    Catalog entry (immutable).

    Attributes:
        label: Display name (original file name)
        reference: Path to the deduplicated image, or "empty" for the placeholder
    """

    label: str
    reference: str

    @property
    def is_sentinel(self) -> bool:
        """True for the "select a model" placeholder entry."""
        return self.reference == SENTINEL_REFERENCE

    @classmethod
    def sentinel(cls) -> ModelCatalogEntry:
        return cls(label=SENTINEL_LABEL, reference=SENTINEL_REFERENCE)

    def to_dict(self) -> dict[str, Any]:
        # "value" is the on-disk key used by existing catalogs
        return {"label": self.label, "value": self.reference}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ModelCatalogEntry:
        reference = data.get("value", data.get("reference"))
        if reference is None:
            raise KeyError("reference")
        return cls(label=str(data.get("label", "")), reference=str(reference))
