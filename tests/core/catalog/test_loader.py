"""Catalog loader tests"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from tierboard.config import DEFAULT_CATALOG_PATH
from tierboard.core.catalog.loader import catalog_from_dict, load_catalog
from tierboard.core.catalog.models import ImageEntry, TagMeta


class TestCatalogFromDict:
    def test_builds_packages_in_document_order(self) -> None:
        catalog = catalog_from_dict(
            {
                "packages": {
                    "b": {"displayName": "B", "images": [], "tags": {}},
                    "a": {"displayName": "A", "images": [], "tags": {}},
                }
            }
        )
        assert list(catalog.packages) == ["b", "a"]

    def test_image_and_tag_fields(self, catalog) -> None:
        animals = catalog.get("animals")
        assert animals is not None
        assert animals.display_name == "Animals"
        assert animals.images[0] == ImageEntry(
            filename="cat.png", label="Cat", tags=("mammal",)
        )
        assert animals.tags["mammal"] == TagMeta(
            title="Mammals", description="Warm-blooded", category="class"
        )

    def test_image_without_filename_is_skipped(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            catalog = catalog_from_dict(
                {
                    "packages": {
                        "p": {
                            "displayName": "P",
                            "images": [{"label": "No file"}, {"filename": "ok.png"}],
                            "tags": {},
                        }
                    }
                }
            )
        assert catalog.get("p").filenames == ["ok.png"]
        assert "Skipping image" in caplog.text

    def test_missing_optional_fields(self) -> None:
        catalog = catalog_from_dict(
            {"packages": {"p": {"images": [{"filename": "x.png"}], "tags": {"t": {}}}}}
        )
        package = catalog.get("p")
        assert package.display_name == "p"
        assert package.images[0].label == ""
        assert package.images[0].tags == ()
        assert package.tags["t"].title == ""

    def test_malformed_package_is_skipped(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            catalog = catalog_from_dict(
                {"packages": {"bad": "not a package", "good": {"displayName": "G"}}}
            )
        assert list(catalog.packages) == ["good"]
        assert "Failed to load package" in caplog.text

    def test_empty_document(self) -> None:
        assert len(catalog_from_dict({})) == 0

    def test_non_object_document(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            assert len(catalog_from_dict([{"packages": {}}])) == 0  # type: ignore[arg-type]
            assert len(catalog_from_dict("animals")) == 0  # type: ignore[arg-type]
        assert "Catalog document is not an object" in caplog.text

    def test_packages_not_an_object(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            catalog = catalog_from_dict({"packages": ["animals"]})
        assert len(catalog) == 0
        assert "Catalog packages is not an object" in caplog.text

    def test_array_document_on_disk(self, tmp_path: Path) -> None:
        path = tmp_path / "imageset.config.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert len(load_catalog(path)) == 0


class TestLoadCatalog:
    def test_load_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "imageset.config.json"
        path.write_text(
            json.dumps({"packages": {"p": {"displayName": "P", "images": [], "tags": {}}}}),
            encoding="utf-8",
        )
        assert list(load_catalog(path).packages) == ["p"]

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "missing.json")

    def test_bundled_catalog(self) -> None:
        catalog = load_catalog(DEFAULT_CATALOG_PATH)
        assert list(catalog.packages) == ["animals", "fruits"]
        assert catalog.get("fruits").find_image("pear.jpg").label == ""
