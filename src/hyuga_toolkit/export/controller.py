"""
Module: export.controller

Purpose:
    Orchestrate the complete project export pipeline.
    Load → Decode → Paginate → Render

Key Functions:
    - export_project(): Main entry point for exporting a project

Key Classes:
    - ExportConfig: Export configuration
    - ExportResult: Complete export result
    - ExportError: Exception for export failures

Design Note:
    Any image that fails to decode aborts the whole export before a page is
    written: a partially correct document is worse than none. Model import,
    by contrast, skips bad files individually.

Dependencies:
    - storage.project_repository: Loading the project
    - images.codec: Decoding asset images
    - layout: Pagination
    - output.renderer: PDF rendering

Used By:
    - gui.adapters.ExportWorker: Background export
    - cli: `export` command
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..core.errors import HyugaError
from ..core.models import Asset, ImageRole, Project
from ..images.codec import ImageCodec, ImageDecodeError, PillowImageCodec, load_reference_bytes
from ..layout import DecodedAsset, ImageSlot, LayoutConfig, LayoutPolicy, LayoutResult, paginate
from ..output.renderer import DocumentWriter, ReportLabDocumentWriter
from ..storage.project_repository import ProjectRepository

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_NAME = "output.pdf"

# Image roles decoded per policy
_POLICY_ROLES: dict[LayoutPolicy, tuple[ImageRole, ...]] = {
    LayoutPolicy.FULL_PAGE: (ImageRole.CUTOUT,),
    LayoutPolicy.SHEET: (ImageRole.SHEET, ImageRole.MODEL, ImageRole.CUTOUT),
}


class ExportError(HyugaError):
    """Error during export pipeline."""


@dataclass(frozen=True)
class ExportConfig:
    """
    Configuration for exporting a project (immutable).

    Attributes:
        output_path: Target PDF; defaults to <project dir>/output.pdf
        policy: Page layout policy
        layout: Page geometry
        show_footer: Draw a version footer on each page
    """

    output_path: Optional[Path] = None
    policy: LayoutPolicy = LayoutPolicy.FULL_PAGE
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    show_footer: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.output_path is not None and Path(self.output_path).suffix.lower() != ".pdf":
            raise ValueError(f"output_path must be a .pdf file: {self.output_path}")


@dataclass(frozen=True)
class ExportResult:
    """
    Complete export result (immutable).

    Attributes:
        output_path: Path of the written PDF
        page_count: Number of pages written
        asset_count: Number of assets exported
        warnings: Any warnings during export
    """

    output_path: Path
    page_count: int
    asset_count: int
    warnings: tuple[str, ...] = ()


def export_project(
    repository: ProjectRepository,
    project_id: str,
    config: Optional[ExportConfig] = None,
    *,
    codec: Optional[ImageCodec] = None,
    writer: Optional[DocumentWriter] = None,
) -> ExportResult:
    """
    Export a project to a paginated PDF.

    Pipeline:
    1. Load the project
    2. Decode every image the layout policy needs (fail fast)
    3. Paginate
    4. Render to a temporary file, then move it into place

    Args:
        repository: Project repository
        project_id: Project to export
        config: Export configuration (defaults to ExportConfig())
        codec: Image decoder (defaults to PillowImageCodec)
        writer: Document writer (defaults to ReportLabDocumentWriter)

    Returns:
        ExportResult with the output path and page count

    Raises:
        ExportError: If any step fails
    """
    config = config or ExportConfig()
    codec = codec or PillowImageCodec()
    writer = writer or ReportLabDocumentWriter(
        config.layout.page_width,
        config.layout.page_height,
        show_footer=config.show_footer,
    )
    start_time = time.perf_counter()

    # 1. Load project
    try:
        project = repository.load(project_id)
    except HyugaError as e:
        raise ExportError(f"Failed to load project {project_id}: {e}") from e

    if not project.assets:
        raise ExportError(f"Project {project.name} has no assets to export")

    logger.info(f"Exporting project {project.name} ({project.asset_count} assets)")

    # 2. Decode. All images are decoded before the first page is rendered and
    # stay in memory until the writer finishes, so peak memory grows with
    # the number of assets.
    decoded = [
        _decode_asset(asset, codec, _POLICY_ROLES[config.policy])
        for asset in project.assets
    ]

    # 3. Paginate
    layout = paginate(decoded, config.layout, config.policy)
    if layout.page_count == 0:
        raise ExportError(f"Project {project.name} produced no pages")

    # 4. Render
    output_path = _resolve_output_path(repository, project, config)
    _write_document(writer, layout, output_path)

    elapsed = time.perf_counter() - start_time
    logger.info(f"Exported {layout.page_count} pages to {output_path} in {elapsed:.2f}s")

    return ExportResult(
        output_path=output_path,
        page_count=layout.page_count,
        asset_count=project.asset_count,
        warnings=tuple(layout.warnings),
    )


def _decode_asset(
    asset: Asset,
    codec: ImageCodec,
    roles: tuple[ImageRole, ...],
) -> DecodedAsset:
    slots: dict[ImageRole, ImageSlot] = {}
    for role in roles:
        if role is ImageRole.MODEL and not asset.has_model:
            continue
        reference = asset.reference(role)
        if not reference and role is not ImageRole.CUTOUT:
            continue
        try:
            image = codec.decode(load_reference_bytes(reference))
        except ImageDecodeError as e:
            raise ExportError(f"Cannot decode {role.value} of asset {asset.id}: {e}") from e
        except Exception as e:
            raise ExportError(f"Image codec failed on {role.value} of asset {asset.id}: {e!r}") from e
        slots[role] = ImageSlot(role=role, width=image.width, height=image.height, image=image.image)
    return DecodedAsset(asset_id=asset.id, slots=slots)


def _resolve_output_path(
    repository: ProjectRepository,
    project: Project,
    config: ExportConfig,
) -> Path:
    if config.output_path is not None:
        return Path(config.output_path).expanduser()
    return repository.project_dir(project.id) / DEFAULT_OUTPUT_NAME


def _write_document(writer: DocumentWriter, layout: LayoutResult, output_path: Path) -> None:
    """Render to a sibling temp file and move it over ``output_path``."""
    temp_path = output_path.with_name(f".{output_path.name}.partial")
    try:
        writer.write(layout, temp_path)
        temp_path.replace(output_path)
    except OSError as e:
        temp_path.unlink(missing_ok=True)
        raise ExportError(f"Failed to write PDF {output_path}: {e}") from e
    except Exception as e:
        temp_path.unlink(missing_ok=True)
        raise ExportError(f"Failed to render PDF {output_path}: {e!r}") from e
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
