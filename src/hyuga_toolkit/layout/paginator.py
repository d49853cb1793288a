"""
Module: layout.paginator

Purpose:
    Turn decoded assets into page plans according to a layout policy.
    Pages follow asset order; each asset contributes one or more pages.

Key Functions:
    - paginate(): Main pagination function

Algorithm:
    FULL_PAGE: one page per asset, cutout fitted inside the margins
    SHEET:
      1. Sheet fitted to a full page (if the asset has a sheet)
      2. Model in the top region, cutout in the bottom region of a
         split page; cutout fitted to the full page when there is no model

Dependencies:
    - layout.geometry: fit_to_page, fit_to_region, split_page_vertically
    - layout.config: LayoutConfig, LayoutPolicy

Used By:
    - export.controller
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from ..core.models import ImageRole
from .config import LayoutConfig, LayoutPolicy
from .geometry import fit_to_page, fit_to_region, split_page_vertically
from .models import DecodedAsset, DrawImage, ImageSlot, LayoutResult, PagePlan

logger = logging.getLogger(__name__)


def paginate(
    assets: Sequence[DecodedAsset],
    config: LayoutConfig,
    policy: LayoutPolicy = LayoutPolicy.FULL_PAGE,
) -> LayoutResult:
    """
    Arrange decoded assets onto pages.

    Args:
        assets: Decoded assets in project order
        config: Layout configuration
        policy: Page layout policy

    Returns:
        LayoutResult with page plans
    """
    if not assets:
        return LayoutResult(pages=(), warnings=[])

    pages: List[PagePlan] = []
    warnings: List[str] = []
    asset_page_map: dict[str, list[int]] = {}

    for asset in assets:
        if policy is LayoutPolicy.SHEET:
            page_draws = _sheet_pages(asset, config)
        else:
            page_draws = _full_page(asset, config)

        if not page_draws:
            warnings.append(f"Asset {asset.asset_id} has no images to place")
            logger.warning(f"Asset {asset.asset_id} has no images to place")
            continue

        for draws in page_draws:
            index = len(pages)
            pages.append(PagePlan(index=index, draws=tuple(draws)))
            asset_page_map.setdefault(asset.asset_id, []).append(index)

    logger.info(f"Paginated {len(assets)} assets onto {len(pages)} pages")

    return LayoutResult(
        pages=tuple(pages),
        warnings=warnings,
        asset_page_map=asset_page_map,
    )


def _full_page(asset: DecodedAsset, config: LayoutConfig) -> List[List[DrawImage]]:
    cutout = asset.slot(ImageRole.CUTOUT)
    if cutout is None:
        return []
    return [[_draw_full(asset.asset_id, cutout, config)]]


def _sheet_pages(asset: DecodedAsset, config: LayoutConfig) -> List[List[DrawImage]]:
    pages: List[List[DrawImage]] = []

    sheet = asset.slot(ImageRole.SHEET)
    if sheet is not None:
        pages.append([_draw_full(asset.asset_id, sheet, config)])

    model = asset.slot(ImageRole.MODEL)
    cutout = asset.slot(ImageRole.CUTOUT)

    if model is not None and cutout is not None:
        top, bottom = split_page_vertically(
            config.page_width,
            config.page_height,
            config.margin,
            config.gap,
            config.top_fraction,
        )
        pages.append([
            DrawImage(
                asset.asset_id,
                model.role,
                model.image,
                fit_to_region(model.width, model.height, top, config.padding),
            ),
            DrawImage(
                asset.asset_id,
                cutout.role,
                cutout.image,
                fit_to_region(cutout.width, cutout.height, bottom, config.padding),
            ),
        ])
    elif cutout is not None:
        pages.append([_draw_full(asset.asset_id, cutout, config)])
    elif model is not None:
        pages.append([_draw_full(asset.asset_id, model, config)])

    return pages


def _draw_full(asset_id: str, slot: ImageSlot, config: LayoutConfig) -> DrawImage:
    placement = fit_to_page(
        slot.width,
        slot.height,
        config.page_width,
        config.page_height,
        config.margin + config.padding,
    )
    return DrawImage(asset_id, slot.role, slot.image, placement)
