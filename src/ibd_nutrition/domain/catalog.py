"""Food catalog domain models."""

from dataclasses import dataclass

from ibd_nutrition.domain.nutrients import NutrientVector


@dataclass(frozen=True)
class FoodItem:
    """Reference food with per-serving nutrients."""

    name: str
    category: str
    nutrients: NutrientVector
    region: str = "Global"
    serving_size: str = "1 serving"

    @property
    def key(self) -> str:
        """Case-insensitive lookup key."""
        return self.name.lower()


@dataclass(frozen=True)
class DescriptionEstimate:
    """Foods detected in a free-text description and their scaled totals."""

    description: str
    detected_foods: tuple[str, ...]
    totals: NutrientVector
