"""
Module: layout.models

Purpose:
    Data models for page layout.
    Immutable dataclasses for decoded asset images, draw instructions and
    pages.

Key Classes:
    - ImageSlot: One decoded image of an asset (size + opaque handle)
    - DecodedAsset: An asset's decoded images keyed by role
    - DrawImage: Draw instruction (image + placement)
    - PagePlan: Complete page layout
    - LayoutResult: Final layout output

Used By:
    - layout.paginator: Creates PagePlans
    - output.renderer: Consumes LayoutResult
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.models import ImageRole
from .geometry import Placement


@dataclass(frozen=True)
class ImageSlot:
    """
    Decoded image for one role of an asset.

    Attributes:
        role: Which asset image this is
        width: Width in pixels
        height: Height in pixels
        image: Codec-specific image handle (a PIL Image for the Pillow codec)
    """

    role: ImageRole
    width: int
    height: int
    image: Any = None


@dataclass(frozen=True)
class DecodedAsset:
    """
    An asset ready for layout.

    Attributes:
        asset_id: Source asset identifier
        slots: Decoded images keyed by role
    """

    asset_id: str
    slots: dict[ImageRole, ImageSlot] = field(default_factory=dict)

    def slot(self, role: ImageRole) -> Optional[ImageSlot]:
        return self.slots.get(role)


@dataclass(frozen=True)
class DrawImage:
    """Draw instruction: ``image`` at ``placement``."""

    asset_id: str
    role: ImageRole
    image: Any
    placement: Placement


@dataclass(frozen=True)
class PagePlan:
    """
    Complete layout plan for a single page.

    Attributes:
        index: Page number (0-indexed)
        draws: Draw instructions in paint order
    """

    index: int
    draws: tuple[DrawImage, ...]

    @property
    def draw_count(self) -> int:
        return len(self.draws)

    @property
    def is_empty(self) -> bool:
        return len(self.draws) == 0


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output with diagnostics.

    Attributes:
        pages: Page plans in document order
        warnings: Warning messages
        asset_page_map: Asset id -> page indices it appears on
    """

    pages: tuple[PagePlan, ...]
    warnings: list[str] = field(default_factory=list)
    asset_page_map: dict[str, list[int]] = field(default_factory=dict)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def total_draws(self) -> int:
        return sum(p.draw_count for p in self.pages)
