"""
Module: output.renderer

Purpose:
    Render LayoutResult to PDF using ReportLab.
    Each PagePlan becomes one PDF page with images drawn at their computed
    placements.

Key Classes:
    - DocumentWriter: Abstract document writer
    - ReportLabDocumentWriter: ReportLab implementation

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling

Used By:
    - export.controller: Pipeline orchestration
"""

from __future__ import annotations

import io
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from PIL import Image
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from ..layout.config import DEFAULT_PAGE_HEIGHT_PT, DEFAULT_PAGE_WIDTH_PT
from ..layout.models import DrawImage, LayoutResult, PagePlan

logger = logging.getLogger(__name__)

FOOTER_FONT_SIZE = 7


def _get_footer_text() -> str:
    """Get footer text with current version number."""
    from hyuga_toolkit import __version__
    return f"Generated with Hyuga v{__version__}"


class DocumentWriter(ABC):
    """Turns a layout into a document file."""

    @abstractmethod
    def write(self, layout: LayoutResult, output_path: Path) -> None:
        """
        Write ``layout`` to ``output_path``.

        Raises:
            OSError: If the document cannot be written
        """


class ReportLabDocumentWriter(DocumentWriter):
    """
    PDF writer backed by ReportLab's canvas.

    Attributes:
        page_width: Page width in points
        page_height: Page height in points
        show_footer: Draw a small version footer on each page

    Example:
        >>> writer = ReportLabDocumentWriter()
        >>> writer.write(layout, Path("output/project.pdf"))
    """

    def __init__(
        self,
        page_width: float = DEFAULT_PAGE_WIDTH_PT,
        page_height: float = DEFAULT_PAGE_HEIGHT_PT,
        *,
        show_footer: bool = False,
    ):
        self.page_width = page_width
        self.page_height = page_height
        self.show_footer = show_footer

    def write(self, layout: LayoutResult, output_path: Path) -> None:
        if layout.page_count == 0:
            logger.warning("Empty layout, creating empty PDF")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        c = canvas.Canvas(str(output_path), pagesize=(self.page_width, self.page_height))

        for page in layout.pages:
            self._render_page(c, page)
            c.showPage()

        c.save()

        logger.info(f"Rendered {layout.page_count} pages to {output_path}")

    def _render_page(self, c: canvas.Canvas, page: PagePlan) -> None:
        for draw in page.draws:
            self._draw_image(c, draw)
        if self.show_footer:
            self._draw_footer(c)

    def _draw_image(self, c: canvas.Canvas, draw: DrawImage) -> None:
        placement = draw.placement
        y_pt = _transform_y(self.page_height, placement.y, placement.height)
        c.drawImage(
            _to_reader(draw.image),
            placement.x,
            y_pt,
            width=placement.width,
            height=placement.height,
            mask="auto",
        )

    def _draw_footer(self, c: canvas.Canvas) -> None:
        footer_text = _get_footer_text()

        c.saveState()
        c.setFont("Helvetica", FOOTER_FONT_SIZE)
        c.setFillColorRGB(0.4, 0.4, 0.4)

        # Centered, 15pt from bottom of page
        text_width = c.stringWidth(footer_text, "Helvetica", FOOTER_FONT_SIZE)
        c.drawString((self.page_width - text_width) / 2, 15, footer_text)
        c.restoreState()


def _to_reader(image: Any) -> ImageReader:
    """
    Convert a PIL image (or encoded bytes) to a ReportLab ImageReader.

    Args:
        image: PIL Image object or encoded image bytes

    Returns:
        ImageReader for use with ReportLab
    """
    if isinstance(image, Image.Image):
        buf = io.BytesIO()
        image.save(buf, format="PNG")
        buf.seek(0)
        return ImageReader(buf)
    if isinstance(image, (bytes, bytearray)):
        return ImageReader(io.BytesIO(bytes(image)))
    raise TypeError(f"Unsupported image handle: {type(image).__name__}")


def _transform_y(page_height: float, y_top: float, height: float) -> float:
    """
    Convert a top-down Y coordinate to bottom-up PDF Y.

    Args:
        page_height: Page height in points
        y_top: Y position from top in points
        height: Height of element in points

    Returns:
        Y position from bottom in points
    """
    return page_height - y_top - height
