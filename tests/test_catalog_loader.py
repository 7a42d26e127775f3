"""Tests for catalog loading."""

import json

import pytest

from ibd_nutrition.adapters.catalog_loader import CatalogError, load_catalog
from ibd_nutrition.services.catalog import FoodCatalog


def test_bundled_catalog_loads_in_file_order() -> None:
    items = load_catalog()

    assert len(items) == 60
    assert items[0].name == "Eggs"
    assert items[-1].name == "Coffee"
    chicken = FoodCatalog(items).get("chicken breast")
    assert chicken is not None
    assert chicken.nutrients.calories == 165
    assert chicken.serving_size == "3 oz"


def test_infinite_and_text_values_are_sanitized(tmp_path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(
        '[{"name": "Broken", "category": "Test", "calories": Infinity,'
        ' "protein": "12", "fat": "n/a", "vitaminD": -1}]',
        encoding="utf-8",
    )

    (item,) = load_catalog(path)

    assert item.nutrients.calories == 0.0
    assert item.nutrients.protein == 12.0
    assert item.nutrients.fat == 0.0
    assert item.nutrients.vitamin_d == 0.0
    assert item.region == "Global"


def test_duplicate_names_are_rejected(tmp_path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Rice", "category": "Grains"},
                {"name": "rice", "category": "Grains"},
            ]
        ),
        encoding="utf-8",
    )

    with pytest.raises(CatalogError):
        load_catalog(path)


def test_invalid_json_is_rejected(tmp_path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(CatalogError):
        load_catalog(path)


def test_missing_file_is_rejected(tmp_path) -> None:
    with pytest.raises(CatalogError):
        load_catalog(tmp_path / "missing.json")


def test_rows_without_name_are_rejected(tmp_path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([{"category": "Grains"}]), encoding="utf-8")

    with pytest.raises(CatalogError):
        load_catalog(path)


def test_catalog_search_matches_region(catalog) -> None:
    bundled = FoodCatalog(load_catalog())

    names = [item.name for item in bundled.search("mexico")]

    assert "Black Beans" in names
    assert [item.name for item in catalog.search("grain")] == ["Pasta", "Rice"]
