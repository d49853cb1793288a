"""
Module: export.wizard

Purpose:
    Guided asset creation. Picks a sheet and a cutout image, chooses a model
    template from the catalog, guesses page/section labels from the file
    names and appends the resulting asset to a project.

Key Classes:
    - ImagePicker: Abstract file picker (implemented by gui.adapters.QtImagePicker)
    - AssetWizard: The guided flow
    - WizardOutcome: Created asset plus append result

Key Functions:
    - guess_meta_from_filenames(): Page/section guess

Used By:
    - cli: `assets add`
    - gui: Menu action "Añadir Activo…"
"""

from __future__ import annotations

import logging
import re
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from ..core.errors import NotFound
from ..core.models import AppendResult, Asset, ModelCatalogEntry
from ..images.codec import encode_file_as_data_url
from ..storage.model_store import ImportReport, ModelStore
from ..storage.project_repository import ProjectRepository

logger = logging.getLogger(__name__)

SHEET_DIALOG_TITLE = "Seleccionar imagen de HOJA"
CUTOUT_DIALOG_TITLE = "Seleccionar imagen de NOTA"
MODELS_DIALOG_TITLE = "Seleccionar machotes"

_PAGE_RE = re.compile(r"p(?:ag|age)?[_\-]?(?P<pg>\d{1,4})", re.IGNORECASE)
_SECTION_RE = re.compile(r"sec(?:tion)?[_\-]?(?P<sec>[A-Za-z]{1,4})", re.IGNORECASE)


class ImagePicker(ABC):
    """Host capability for choosing image files."""

    @abstractmethod
    def pick_image(self, title: str) -> Optional[Path]:
        """Return one chosen image, or None if the user cancelled."""

    @abstractmethod
    def pick_images(self, title: str) -> list[Path]:
        """Return the chosen images (empty if the user cancelled)."""


@dataclass(frozen=True)
class WizardOutcome:
    """Asset built by the wizard and whether it was appended."""

    asset: Asset
    result: AppendResult
    model_label: str = ""


def guess_meta_from_filenames(*paths: Path) -> tuple[str, str]:
    """
    Guess page number and section from file names.

    Looks for "p12", "pag-12", "page_12" and "sec-B", "sectionAB"; the first
    match across the names wins for each field. Sections are upper-cased.

    Example:
        >>> guess_meta_from_filenames(Path("hoja_page_12.png"), Path("nota_sec-b.jpg"))
        ('12', 'B')
    """
    page = ""
    section = ""
    for path in paths:
        name = Path(path).name
        if not page:
            match = _PAGE_RE.search(name)
            if match:
                page = match.group("pg")
        if not section:
            match = _SECTION_RE.search(name)
            if match:
                section = match.group("sec").upper()
    return page, section


class AssetWizard:
    """
    Guided asset creation and model import.

    Attributes:
        repository: Project repository that receives new assets
        model_store: Catalog used for model selection and import
        picker: Host file picker
    """

    def __init__(
        self,
        repository: ProjectRepository,
        model_store: ModelStore,
        picker: ImagePicker,
        *,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self.repository = repository
        self.model_store = model_store
        self.picker = picker
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))

    def add_asset(
        self,
        project_id: str,
        *,
        model_label: Optional[str] = None,
        page_number: Optional[str] = None,
        section: Optional[str] = None,
    ) -> Optional[WizardOutcome]:
        """
        Run the wizard for ``project_id``.

        Args:
            project_id: Target project
            model_label: Catalog label to use; defaults to the first real model
            page_number: Overrides the guessed page number
            section: Overrides the guessed section

        Returns:
            WizardOutcome, or None if the user cancelled a picker

        Raises:
            OSError: If a picked file cannot be read
            HyugaError: From the repository or the catalog
        """
        sheet = self.picker.pick_image(SHEET_DIALOG_TITLE)
        if sheet is None:
            logger.debug("Sheet selection cancelled")
            return None
        cutout = self.picker.pick_image(CUTOUT_DIALOG_TITLE)
        if cutout is None:
            logger.debug("Cutout selection cancelled")
            return None

        model = self._choose_model(model_label)
        if model is None:
            logger.info("No models defined; asset will be created without a model")

        guessed_page, guessed_section = guess_meta_from_filenames(sheet, cutout)

        asset = Asset(
            id=self._id_factory(),
            page_number=page_number if page_number is not None else guessed_page,
            section=section if section is not None else guessed_section,
            sheet=encode_file_as_data_url(sheet),
            cutout=encode_file_as_data_url(cutout),
            model=model.reference if model else "",
        )
        result = self.repository.append_asset(project_id, asset)
        logger.info(
            f"Asset {asset.id} ({sheet.name} / {cutout.name}) -> project {project_id}: {result.value}"
        )
        return WizardOutcome(asset=asset, result=result, model_label=model.label if model else "")

    def import_models(self) -> ImportReport:
        """Pick template images and import them into the model store."""
        paths = self.picker.pick_images(MODELS_DIALOG_TITLE)
        if not paths:
            logger.debug("Model import cancelled")
            return ImportReport()
        return self.model_store.import_images(paths)

    def _choose_model(self, label: Optional[str]) -> Optional[ModelCatalogEntry]:
        models = [m for m in self.model_store.list() if not m.is_sentinel]
        if label:
            for model in models:
                if model.label == label:
                    return model
            raise NotFound(f"Model not found in catalog: {label}")
        return models[0] if models else None

