"""
Module: projects

Purpose:
    Provides the Project aggregate root: identity, display name, creation
    time and the ordered list of assets. Mutations return new instances;
    the repository persists each one as a single atomic document write.

Key Classes:
    - Project: Immutable project aggregate
    - AppendResult: Outcome of adding an asset

Dependencies:
    - core.models.assets.Asset

Used By:
    - storage.project_repository
    - export.controller
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional

from ..errors import InvalidArgument, NotFound
from .assets import Asset


class AppendResult(str, Enum):
    """Outcome of appending an asset to a project."""

    APPENDED = "appended"
    ALREADY_PRESENT = "already_present"


@dataclass(frozen=True)
class Project:
    """
    Project aggregate (immutable).

    Attributes:
        id: Opaque unique identifier
        name: Generated human-readable name
        created_at: Local creation time, "YYYY-MM-DD HH:MM:SS"
        assets: Assets in insertion order

    Invariants:
        - id is non-empty
        - no two assets share an id
    """

    id: str
    name: str
    created_at: str
    assets: tuple[Asset, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate project on construction."""
        if not self.id:
            raise InvalidArgument("Project id must be non-empty")
        seen: set[str] = set()
        for asset in self.assets:
            if asset.id in seen:
                raise ValueError(f"Duplicate asset id in project {self.id}: {asset.id}")
            seen.add(asset.id)

    @property
    def asset_count(self) -> int:
        return len(self.assets)

    @property
    def asset_ids(self) -> list[str]:
        return [a.id for a in self.assets]

    def find_asset(self, asset_id: str) -> Optional[int]:
        """Index of the asset with ``asset_id`` (linear scan), or None."""
        for i, asset in enumerate(self.assets):
            if asset.id == asset_id:
                return i
        return None

    def with_asset(self, asset: Asset) -> tuple[Project, AppendResult]:
        """
        Return a project with ``asset`` appended.

        A duplicate id leaves the project unchanged and reports
        ``AppendResult.ALREADY_PRESENT``.
        """
        if self.find_asset(asset.id) is not None:
            return self, AppendResult.ALREADY_PRESENT
        return replace(self, assets=self.assets + (asset,)), AppendResult.APPENDED

    def without_asset(self, asset_id: str, *, preserve_order: bool = True) -> Project:
        """
        Return a project with ``asset_id`` removed.

        With ``preserve_order=False`` the last asset is moved into the vacated
        slot (swap-and-truncate), so only the former last asset changes position.

        Raises:
            NotFound: If no asset has ``asset_id``
        """
        index = self.find_asset(asset_id)
        if index is None:
            raise NotFound(f"Asset {asset_id} not found in project {self.id}")

        assets = list(self.assets)
        if preserve_order:
            del assets[index]
        else:
            assets[index] = assets[-1]
            assets.pop()
        return replace(self, assets=tuple(assets))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "createdAt": self.created_at,
            "assets": [a.to_dict() for a in self.assets],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Project:
        """Deserialize from dictionary; accepts the legacy ``created_at`` key."""
        created_at = data.get("createdAt", data.get("created_at", ""))
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            created_at=created_at,
            assets=tuple(Asset.from_dict(a) for a in data.get("assets") or []),
        )
