"""
Module: layout

Purpose:
    Page geometry and pagination for project export.

Key Functions:
    - fit_to_region(), fit_to_page(), split_page_vertically(): Placement math
    - paginate(): Arrange decoded assets onto pages

Key Classes:
    - LayoutConfig, LayoutPolicy
    - Region, Placement
    - DecodedAsset, ImageSlot, DrawImage, PagePlan, LayoutResult
"""

from .config import LayoutConfig, LayoutPolicy
from .geometry import Placement, Region, fit_to_page, fit_to_region, split_page_vertically
from .models import DecodedAsset, DrawImage, ImageSlot, LayoutResult, PagePlan
from .paginator import paginate

__all__ = [
    # Config
    "LayoutConfig",
    "LayoutPolicy",
    # Geometry
    "Region",
    "Placement",
    "fit_to_region",
    "fit_to_page",
    "split_page_vertically",
    # Models
    "DecodedAsset",
    "ImageSlot",
    "DrawImage",
    "PagePlan",
    "LayoutResult",
    # Functions
    "paginate",
]
