"""Tests for export.wizard."""

from pathlib import Path
from typing import Optional

import pytest

from hyuga_toolkit.core.errors import NotFound
from hyuga_toolkit.core.models import AppendResult
from hyuga_toolkit.export import AssetWizard, ImagePicker, guess_meta_from_filenames
from hyuga_toolkit.export.wizard import CUTOUT_DIALOG_TITLE, SHEET_DIALOG_TITLE
from hyuga_toolkit.images import load_reference_bytes
from hyuga_toolkit.storage import ModelStore, ProjectRepository


class FakePicker(ImagePicker):
    """Returns queued answers and records dialog titles."""

    def __init__(self, single=(), multiple=()):
        self.single = list(single)
        self.multiple = list(multiple)
        self.titles = []

    def pick_image(self, title: str) -> Optional[Path]:
        self.titles.append(title)
        return self.single.pop(0) if self.single else None

    def pick_images(self, title: str) -> list:
        self.titles.append(title)
        return self.multiple


@pytest.fixture
def repo(tmp_path: Path) -> ProjectRepository:
    return ProjectRepository(tmp_path / "projects")


@pytest.fixture
def store(tmp_path: Path) -> ModelStore:
    return ModelStore(tmp_path / "models")


class TestGuessMetaFromFilenames:

    @pytest.mark.parametrize(
        "names, expected",
        [
            (("hoja_page_12.png", "nota_sec-b.jpg"), ("12", "B")),
            (("p7_secAB.png", "x.png"), ("7", "AB")),
            (("pag-003.png", "section_c.png"), ("003", "C")),
            (("foto.png", "nota.png"), ("", "")),
        ],
    )
    def test_guesses(self, names, expected):
        assert guess_meta_from_filenames(*(Path(n) for n in names)) == expected

    def test_when_both_names_match_then_first_wins(self):
        assert guess_meta_from_filenames(Path("p1.png"), Path("p2.png"))[0] == "1"


class TestAddAsset:

    def test_when_files_picked_then_asset_appended_with_guesses(self, repo, store, image_factory):
        # Arrange
        project = repo.create()
        sheet = image_factory("hoja_p4.png")
        cutout = image_factory("nota_sec-d.png", color="blue")
        picker = FakePicker(single=[sheet, cutout])
        wizard = AssetWizard(repo, store, picker, id_factory=lambda: "asset-1")

        # Act
        outcome = wizard.add_asset(project.id)

        # Assert
        assert outcome.result is AppendResult.APPENDED
        assert picker.titles == [SHEET_DIALOG_TITLE, CUTOUT_DIALOG_TITLE]
        stored = repo.load_assets(project.id)[0]
        assert (stored.id, stored.page_number, stored.section) == ("asset-1", "4", "D")
        assert load_reference_bytes(stored.sheet) == sheet.read_bytes()
        assert load_reference_bytes(stored.cutout) == cutout.read_bytes()
        assert stored.model == ""

    def test_when_explicit_labels_then_override_guesses(self, repo, store, image_factory):
        project = repo.create()
        picker = FakePicker(single=[image_factory("p4.png"), image_factory("c.png")])
        wizard = AssetWizard(repo, store, picker)

        outcome = wizard.add_asset(project.id, page_number="99", section="Z")

        assert (outcome.asset.page_number, outcome.asset.section) == ("99", "Z")

    def test_when_sheet_cancelled_then_nothing_appended(self, repo, store):
        project = repo.create()
        wizard = AssetWizard(repo, store, FakePicker())

        assert wizard.add_asset(project.id) is None
        assert repo.load_assets(project.id) == []

    def test_when_cutout_cancelled_then_nothing_appended(self, repo, store, image_factory):
        project = repo.create()
        wizard = AssetWizard(repo, store, FakePicker(single=[image_factory("s.png")]))

        assert wizard.add_asset(project.id) is None
        assert repo.load_assets(project.id) == []

    def test_when_models_exist_then_first_real_model_used(self, repo, store, image_factory):
        store.import_images([image_factory("m1.png", color="red"), image_factory("m2.png", color="green")])
        project = repo.create()
        wizard = AssetWizard(repo, store, FakePicker(single=[image_factory("s.png"), image_factory("c.png")]))

        outcome = wizard.add_asset(project.id)

        assert outcome.model_label == "m1.png"
        assert outcome.asset.model == store.list()[1].reference

    def test_when_model_label_given_then_that_model_used(self, repo, store, image_factory):
        store.import_images([image_factory("m1.png", color="red"), image_factory("m2.png", color="green")])
        project = repo.create()
        wizard = AssetWizard(repo, store, FakePicker(single=[image_factory("s.png"), image_factory("c.png")]))

        outcome = wizard.add_asset(project.id, model_label="m2.png")

        assert outcome.asset.model == store.list()[2].reference

    def test_when_model_label_unknown_then_not_found(self, repo, store, image_factory):
        project = repo.create()
        wizard = AssetWizard(repo, store, FakePicker(single=[image_factory("s.png"), image_factory("c.png")]))

        with pytest.raises(NotFound):
            wizard.add_asset(project.id, model_label="Seleciona Machote")

    def test_when_same_id_twice_then_already_present(self, repo, store, image_factory):
        project = repo.create()
        files = [image_factory("s.png"), image_factory("c.png")]
        wizard = AssetWizard(repo, store, FakePicker(single=files * 2), id_factory=lambda: "fixed")

        wizard.add_asset(project.id)
        outcome = wizard.add_asset(project.id)

        assert outcome.result is AppendResult.ALREADY_PRESENT
        assert len(repo.load_assets(project.id)) == 1


class TestImportModels:

    def test_when_images_picked_then_imported(self, repo, store, image_factory):
        picker = FakePicker(multiple=[image_factory("a.png"), image_factory("b.png", color="blue")])

        report = AssetWizard(repo, store, picker).import_models()

        assert report.appended_count == 2
        assert [e.label for e in store.list()] == ["Seleciona Machote", "a.png", "b.png"]

    def test_when_cancelled_then_empty_report_and_no_catalog(self, repo, store):
        report = AssetWizard(repo, store, FakePicker()).import_models()

        assert report.appended_count == 0
        assert not store.catalog_path.exists()
