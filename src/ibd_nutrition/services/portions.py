"""Portion scaling for matched foods."""

from collections.abc import Iterable
from dataclasses import dataclass

from ibd_nutrition.domain.nutrients import ZERO_VECTOR, NutrientVector, sum_vectors
from ibd_nutrition.services.catalog import FoodCatalog

TEEN_PORTION_MULTIPLIER = 1.5


@dataclass
class PortionScaler:
    """Scale catalog servings to the fixed teen portion size."""

    catalog: FoodCatalog
    multiplier: float = TEEN_PORTION_MULTIPLIER

    def scale(self, name: str) -> NutrientVector:
        """Return scaled nutrients for a food; unknown foods contribute nothing."""
        item = self.catalog.get(name)
        if item is None:
            return ZERO_VECTOR
        return item.nutrients.scaled(self.multiplier)

    def contributions(self, names: Iterable[str]) -> dict[str, NutrientVector]:
        """Return scaled nutrients per food name, in sorted name order."""
        return {name: self.scale(name) for name in sorted(set(names))}

    def scale_all(self, names: Iterable[str]) -> NutrientVector:
        """Return the summed scaled nutrients of several foods."""
        return sum_vectors(self.contributions(names).values())
