"""Shared test fixtures."""

import pytest

from ibd_nutrition.config import Settings
from ibd_nutrition.containers import EngineContainer, build_container
from ibd_nutrition.domain.catalog import FoodItem
from ibd_nutrition.domain.nutrients import NutrientVector
from ibd_nutrition.services.catalog import FoodCatalog


def _food(name: str, category: str, **nutrients: float) -> FoodItem:
    return FoodItem(name=name, category=category, nutrients=NutrientVector(**nutrients))


@pytest.fixture
def catalog() -> FoodCatalog:
    return FoodCatalog(
        [
            _food(
                "Chicken Breast",
                "Protein",
                calories=165,
                protein=31,
                fat=3.6,
                iron=0.9,
                vitamin_b12=0.3,
                zinc=0.9,
            ),
            _food(
                "Pasta",
                "Grains",
                calories=131,
                protein=5,
                carbs=25,
                fiber=1.8,
                fat=1.1,
                iron=1.2,
            ),
            _food(
                "Salmon",
                "Protein",
                calories=206,
                protein=22,
                fat=12,
                vitamin_d=11.1,
                vitamin_b12=2.6,
                omega3=1.8,
            ),
            _food(
                "Spinach",
                "Vegetables",
                calories=23,
                protein=2.9,
                carbs=3.6,
                fiber=2.2,
                iron=2.7,
                calcium=99,
            ),
            _food("Rice", "Grains", calories=205, protein=4.3, carbs=45, fiber=0.6),
        ]
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture
def container(settings: Settings, catalog: FoodCatalog) -> EngineContainer:
    return build_container(settings, catalog=catalog)
