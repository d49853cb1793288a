"""
Module: layout.config

Purpose:
    Configuration for the page layout engine.
    Defines page dimensions, margins and the split-page geometry used by
    the sheet layout.

Key Classes:
    - LayoutConfig: Immutable layout configuration
    - LayoutPolicy: Which pages an asset produces

Dependencies:
    - reportlab.lib.pagesizes: A4 dimensions

Used By:
    - layout.paginator: Page arrangement
    - output.renderer: Page size
    - export.controller
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from reportlab.lib.pagesizes import A4

# A4 in PDF points (1/72 inch)
DEFAULT_PAGE_WIDTH_PT, DEFAULT_PAGE_HEIGHT_PT = A4
DEFAULT_MARGIN_PT = 36.0  # 0.5 inch


class LayoutPolicy(str, Enum):
    """
    Page layout policy for export.

    FULL_PAGE: one page per asset with the cutout fitted to the page.
    SHEET: per asset, a page with the sheet fitted to the page, then a page
        with the model above the cutout (cutout alone when there is no model).
    """

    FULL_PAGE = "full_page"
    SHEET = "sheet"


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for page layout (immutable).

    All lengths are in PDF points.

    Attributes:
        page_width: Page width
        page_height: Page height
        margin: Uniform margin on all sides
        gap: Vertical gap between the top and bottom regions of a split page
        top_fraction: Share of the content height given to the top region
        padding: Inner padding applied inside each region

    Example:
        >>> config = LayoutConfig()
        >>> round(config.content_width, 2)
        523.28
    """

    page_width: float = DEFAULT_PAGE_WIDTH_PT
    page_height: float = DEFAULT_PAGE_HEIGHT_PT
    margin: float = DEFAULT_MARGIN_PT
    gap: float = 18.0
    top_fraction: float = 0.5
    padding: float = 0.0

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.margin < 0:
            raise ValueError(f"margin must be non-negative: {self.margin}")
        if self.gap < 0:
            raise ValueError(f"gap must be non-negative: {self.gap}")
        if self.padding < 0:
            raise ValueError(f"padding must be non-negative: {self.padding}")
        if not 0 < self.top_fraction < 1:
            raise ValueError(f"top_fraction must be between 0 and 1: {self.top_fraction}")
        if self.content_width <= 0:
            raise ValueError("Margins exceed page width")
        if self.content_height <= self.gap:
            raise ValueError("Margins and gap exceed page height")

    @property
    def content_width(self) -> float:
        """Width available for content (excluding margins)."""
        return self.page_width - 2 * self.margin

    @property
    def content_height(self) -> float:
        """Height available for content (excluding margins)."""
        return self.page_height - 2 * self.margin
