"""
Tests for layout.paginator and layout.config

Test Coverage:
- FULL_PAGE: one page per asset, assets without cutout skipped with a warning
- SHEET: sheet page, split model/cutout page, fallbacks
- LayoutConfig validation
"""

import pytest

from hyuga_toolkit.core.models import ImageRole
from hyuga_toolkit.layout import (
    DecodedAsset,
    ImageSlot,
    LayoutConfig,
    LayoutPolicy,
    Region,
    paginate,
    split_page_vertically,
)


@pytest.fixture
def config() -> LayoutConfig:
    return LayoutConfig(page_width=600, page_height=800, margin=50, gap=20)


def _decoded(asset_id: str, *roles: ImageRole) -> DecodedAsset:
    return DecodedAsset(
        asset_id=asset_id,
        slots={role: ImageSlot(role=role, width=400, height=300, image=f"{asset_id}:{role.value}") for role in roles},
    )


class TestFullPage:

    def test_when_assets_then_one_page_each_in_order(self, config):
        assets = [_decoded("a", ImageRole.CUTOUT), _decoded("b", ImageRole.CUTOUT)]

        result = paginate(assets, config)

        assert result.page_count == 2
        assert [p.draws[0].asset_id for p in result.pages] == ["a", "b"]
        assert [p.index for p in result.pages] == [0, 1]
        assert result.asset_page_map == {"a": [0], "b": [1]}

    def test_when_full_page_then_cutout_fitted_inside_margins(self, config):
        result = paginate([_decoded("a", ImageRole.CUTOUT)], config)

        draw = result.pages[0].draws[0]
        assert draw.role is ImageRole.CUTOUT
        assert draw.image == "a:cutout"
        assert Region(50, 50, 500, 700).contains(draw.placement.region)
        assert draw.placement.width == pytest.approx(500)

    def test_when_cutout_missing_then_skipped_with_warning(self, config):
        result = paginate([_decoded("a", ImageRole.SHEET), _decoded("b", ImageRole.CUTOUT)], config)

        assert result.page_count == 1
        assert any("a" in w for w in result.warnings)

    def test_when_no_assets_then_no_pages(self, config):
        assert paginate([], config).page_count == 0


class TestSheetPolicy:

    def test_when_all_images_then_sheet_page_then_split_page(self, config):
        # Arrange
        asset = _decoded("a", ImageRole.SHEET, ImageRole.MODEL, ImageRole.CUTOUT)
        top, bottom = split_page_vertically(600, 800, 50, 20, 0.5)

        # Act
        result = paginate([asset], config, LayoutPolicy.SHEET)

        # Assert
        assert result.page_count == 2
        sheet_page, split_page = result.pages
        assert [d.role for d in sheet_page.draws] == [ImageRole.SHEET]
        assert [d.role for d in split_page.draws] == [ImageRole.MODEL, ImageRole.CUTOUT]
        assert top.contains(split_page.draws[0].placement.region)
        assert bottom.contains(split_page.draws[1].placement.region)

    def test_when_no_model_then_cutout_gets_full_page(self, config):
        result = paginate([_decoded("a", ImageRole.SHEET, ImageRole.CUTOUT)], config, LayoutPolicy.SHEET)

        assert result.page_count == 2
        assert result.pages[1].draws[0].role is ImageRole.CUTOUT
        assert result.pages[1].draw_count == 1

    def test_when_no_sheet_then_only_split_page(self, config):
        result = paginate([_decoded("a", ImageRole.MODEL, ImageRole.CUTOUT)], config, LayoutPolicy.SHEET)

        assert result.page_count == 1
        assert result.total_draws == 2

    def test_when_multiple_assets_then_page_map_tracks_each(self, config):
        assets = [
            _decoded("a", ImageRole.SHEET, ImageRole.CUTOUT),
            _decoded("b", ImageRole.CUTOUT),
        ]

        result = paginate(assets, config, LayoutPolicy.SHEET)

        assert result.asset_page_map == {"a": [0, 1], "b": [2]}


class TestLayoutConfig:

    def test_defaults_are_a4_with_half_inch_margin(self):
        config = LayoutConfig()

        assert config.page_width == pytest.approx(595.2756, abs=1e-3)
        assert config.page_height == pytest.approx(841.8898, abs=1e-3)
        assert config.margin == 36

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"page_width": 0},
            {"margin": -1},
            {"gap": -1},
            {"padding": -1},
            {"top_fraction": 1.0},
            {"margin": 400},
        ],
    )
    def test_when_invalid_then_raises(self, kwargs):
        with pytest.raises(ValueError):
            LayoutConfig(**kwargs)
