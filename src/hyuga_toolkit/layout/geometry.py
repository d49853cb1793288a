"""
Module: layout.geometry

Purpose:
    Pure placement arithmetic. Images are scaled uniformly (never
    distorted) to the largest size that fits a region and centered in it.
    Coordinates use a top-left origin; the renderer flips them for PDF.

Key Functions:
    - fit_to_region(): Scale-to-fit inside a padded region
    - fit_to_page(): Scale-to-fit inside the page minus margins
    - split_page_vertically(): Top/bottom regions of the content area

Example:
    >>> fit_to_region(100, 50, Region(0, 0, 200, 200))
    Placement(x=0.0, y=50.0, width=200.0, height=100.0, scale=2.0)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Region:
    """Axis-aligned rectangle on a page (top-left origin)."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Region size must be non-negative: {self.width}x{self.height}")

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def inset(self, amount: float) -> Region:
        """Region shrunk by ``amount`` on every side."""
        width = self.width - 2 * amount
        height = self.height - 2 * amount
        if width < 0 or height < 0:
            raise ValueError(f"Padding {amount} exceeds region {self.width}x{self.height}")
        return Region(self.x + amount, self.y + amount, width, height)

    def contains(self, other: Region, tolerance: float = 1e-6) -> bool:
        """True if ``other`` lies entirely within this region."""
        return (
            other.x >= self.x - tolerance
            and other.y >= self.y - tolerance
            and other.right <= self.right + tolerance
            and other.bottom <= self.bottom + tolerance
        )


@dataclass(frozen=True)
class Placement:
    """
    Where a scaled image is drawn.

    Attributes:
        x, y: Top-left corner
        width, height: Drawn size
        scale: Uniform scale factor applied to the source pixels
    """

    x: float
    y: float
    width: float
    height: float
    scale: float

    @property
    def region(self) -> Region:
        return Region(self.x, self.y, self.width, self.height)


def fit_to_region(
    image_width: float,
    image_height: float,
    region: Region,
    padding: float = 0.0,
) -> Placement:
    """
    Largest uniform scale of the image that fits the padded region, centered.

    The scale is ``min(avail_w / image_width, avail_h / image_height)`` where
    avail is the region minus ``padding`` on each side. A degenerate image
    (non-positive width or height) gets the whole padded region at scale 1.0
    instead of a division by zero.

    Args:
        image_width: Source width in pixels
        image_height: Source height in pixels
        region: Target region
        padding: Inner padding on every side

    Returns:
        Placement centered within ``region``

    Raises:
        ValueError: If padding exceeds the region
    """
    inner = region.inset(padding)

    if image_width <= 0 or image_height <= 0:
        return Placement(inner.x, inner.y, inner.width, inner.height, 1.0)

    scale = min(inner.width / image_width, inner.height / image_height)
    width = image_width * scale
    height = image_height * scale

    x = region.x + (region.width - width) / 2.0
    y = region.y + (region.height - height) / 2.0
    return Placement(x, y, width, height, scale)


def fit_to_page(
    image_width: float,
    image_height: float,
    page_width: float,
    page_height: float,
    margin: float,
) -> Placement:
    """Fit an image inside the page with a uniform margin on all sides."""
    return fit_to_region(image_width, image_height, Region(0.0, 0.0, page_width, page_height), margin)


def split_page_vertically(
    page_width: float,
    page_height: float,
    margin: float,
    gap: float,
    top_fraction: float,
) -> tuple[Region, Region]:
    """
    Split the content area into a top and a bottom region.

    The top region takes ``top_fraction`` of the content height (page minus
    margins); the bottom region takes the remainder minus ``gap``.

    Returns:
        (top, bottom) regions

    Raises:
        ValueError: If top_fraction is outside (0, 1) or the bottom region
            would have negative height
    """
    if not 0 < top_fraction < 1:
        raise ValueError(f"top_fraction must be between 0 and 1: {top_fraction}")

    content_width = page_width - 2 * margin
    content_height = page_height - 2 * margin
    if content_width <= 0 or content_height <= 0:
        raise ValueError("Margins exceed page size")

    top_height = content_height * top_fraction
    bottom_height = content_height - top_height - gap
    if bottom_height < 0:
        raise ValueError(f"Gap {gap} leaves no room for the bottom region")

    top = Region(margin, margin, content_width, top_height)
    bottom = Region(margin, margin + top_height + gap, content_width, bottom_height)
    return top, bottom
