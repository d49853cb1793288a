"""Tests for core.utils.serialization."""

import pytest

from hyuga_toolkit.core.errors import CorruptCatalog, CorruptDocument
from hyuga_toolkit.core.models import Asset, ModelCatalogEntry, Project
from hyuga_toolkit.core.utils import (
    deserialize_catalog,
    deserialize_project,
    serialize_catalog,
    serialize_project,
)


class TestProjectSerialization:

    def test_when_project_serialized_and_parsed_then_equal(self):
        project = Project(
            id="p1",
            name="azul-rio",
            created_at="2024-01-02 03:04:05",
            assets=(Asset(id="a1", page_number="3", section="A", sheet="s", cutout="c", model="m"),),
        )

        assert deserialize_project(serialize_project(project)) == project

    @pytest.mark.parametrize("data", [[], "text", 3, None])
    def test_when_document_not_an_object_then_corrupt(self, data):
        with pytest.raises(CorruptDocument):
            deserialize_project(data, path="x/project.json")

    def test_when_assets_not_an_array_then_corrupt(self):
        with pytest.raises(CorruptDocument):
            deserialize_project({"id": "p", "assets": {"a": 1}})

    def test_when_asset_missing_id_then_corrupt(self):
        with pytest.raises(CorruptDocument) as exc_info:
            deserialize_project({"id": "p", "assets": [{"sheet": "s"}]}, path="doc.json")

        assert exc_info.value.path == "doc.json"

    def test_when_duplicate_asset_ids_then_corrupt(self):
        with pytest.raises(CorruptDocument):
            deserialize_project({"id": "p", "assets": [{"id": "a"}, {"id": "a"}]})


class TestCatalogSerialization:

    def test_when_catalog_serialized_then_order_kept(self):
        entries = [ModelCatalogEntry.sentinel(), ModelCatalogEntry("b.png", "/b"), ModelCatalogEntry("a.png", "/a")]

        data = serialize_catalog(entries)

        assert [d["label"] for d in data] == ["Seleciona Machote", "b.png", "a.png"]
        assert deserialize_catalog(data) == entries

    def test_when_catalog_null_then_empty(self):
        assert deserialize_catalog(None) == []

    def test_when_catalog_is_object_then_corrupt(self):
        with pytest.raises(CorruptCatalog):
            deserialize_catalog({"label": "x", "value": "y"})

    def test_when_entry_not_object_then_corrupt(self):
        with pytest.raises(CorruptCatalog):
            deserialize_catalog(["x"])

    def test_when_entry_missing_value_then_corrupt(self):
        with pytest.raises(CorruptCatalog):
            deserialize_catalog([{"label": "x"}])
