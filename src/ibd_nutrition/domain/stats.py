"""Domain models for aggregated intake."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType

from ibd_nutrition.domain.journal import MealType
from ibd_nutrition.domain.nutrients import ZERO_VECTOR, NutrientVector, finite_or_zero


@dataclass(frozen=True)
class DayTotals:
    """Nutrient totals for one journal entry, with a per-meal-type breakdown."""

    day: date
    totals: NutrientVector
    by_meal_type: Mapping[MealType, NutrientVector] = field(default_factory=dict)
    food_sources: Mapping[str, NutrientVector] = field(default_factory=dict)
    hydration_ml: float | None = None

    def __post_init__(self) -> None:
        for name in ("by_meal_type", "food_sources"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))


@dataclass(frozen=True)
class WeeklyNutritionTotals:
    """Totals over an N-day window.

    ``average`` divides by the number of logged entries in the window, not by
    the window length, so days without an entry neither read as zero intake
    nor dilute the average.
    """

    start: date
    end: date
    days: int
    entry_count: int
    totals: NutrientVector
    daily: tuple[DayTotals, ...] = ()

    @property
    def average(self) -> NutrientVector:
        return self.totals.divided(max(1, self.entry_count))

    @property
    def average_hydration_ml(self) -> float | None:
        """Mean fluid intake over entries that report it, or None if none do."""
        logged = [
            day.hydration_ml for day in self.daily if day.hydration_ml is not None
        ]
        if not logged:
            return None
        return finite_or_zero(sum(logged) / len(logged))

    @classmethod
    def empty(cls, start: date, end: date, days: int) -> "WeeklyNutritionTotals":
        return cls(start=start, end=end, days=days, entry_count=0, totals=ZERO_VECTOR)
