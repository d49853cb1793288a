"""
Tests for output.renderer

PDFs are inspected with pypdf: page count and page size.
"""

from pathlib import Path

import pytest
from PIL import Image
from pypdf import PdfReader

from hyuga_toolkit.core.models import ImageRole
from hyuga_toolkit.layout import DrawImage, LayoutResult, PagePlan, Placement
from hyuga_toolkit.output import ReportLabDocumentWriter
from hyuga_toolkit.output.renderer import _to_reader, _transform_y


def _layout(pages: int) -> LayoutResult:
    image = Image.new("RGB", (60, 30), color="blue")
    plans = tuple(
        PagePlan(
            index=i,
            draws=(DrawImage(f"a{i}", ImageRole.CUTOUT, image, Placement(36, 36, 120, 60, 2.0)),),
        )
        for i in range(pages)
    )
    return LayoutResult(pages=plans)


class TestReportLabDocumentWriter:

    def test_when_layout_written_then_one_pdf_page_per_plan(self, tmp_path: Path):
        output = tmp_path / "out" / "doc.pdf"

        ReportLabDocumentWriter().write(_layout(3), output)

        reader = PdfReader(str(output))
        assert len(reader.pages) == 3

    def test_when_default_size_then_a4(self, tmp_path: Path):
        output = tmp_path / "doc.pdf"

        ReportLabDocumentWriter().write(_layout(1), output)

        box = PdfReader(str(output)).pages[0].mediabox
        assert float(box.width) == pytest.approx(595.2756, abs=0.01)
        assert float(box.height) == pytest.approx(841.8898, abs=0.01)

    def test_when_footer_enabled_then_version_text_drawn(self, tmp_path: Path):
        output = tmp_path / "doc.pdf"

        ReportLabDocumentWriter(show_footer=True).write(_layout(1), output)

        text = PdfReader(str(output)).pages[0].extract_text()
        assert "Generated with Hyuga" in text


def test_transform_y_flips_to_bottom_origin():
    assert _transform_y(800, 50, 100) == 650


def test_to_reader_rejects_unknown_handles():
    with pytest.raises(TypeError):
        _to_reader("not an image")
