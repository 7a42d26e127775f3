"""Nutrient aggregation over meals, days and windows."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from ibd_nutrition.domain.journal import (
    DISTANT_PAST,
    JournalEntry,
    MealEntry,
    MealType,
)
from ibd_nutrition.domain.nutrients import (
    ZERO_VECTOR,
    NutrientVector,
    finite_or_zero,
    sum_vectors,
)
from ibd_nutrition.domain.profile import (
    DosageUnit,
    MicronutrientProfile,
    Supplement,
    SupplementCategory,
)
from ibd_nutrition.domain.requirements import (
    DailyMicronutrientIntake,
    NutrientRequirements,
)
from ibd_nutrition.domain.stats import DayTotals, WeeklyNutritionTotals
from ibd_nutrition.services.matching import FoodMatcher
from ibd_nutrition.services.portions import PortionScaler

_logger = logging.getLogger(__name__)

# Keyword -> nutrient, checked in order against the lowercased supplement name.
_SUPPLEMENT_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("vitamin d", "vitamin_d"),
    ("d3", "vitamin_d"),
    ("cholecalciferol", "vitamin_d"),
    ("b12", "vitamin_b12"),
    ("cobalamin", "vitamin_b12"),
    ("vitamin c", "vitamin_c"),
    ("ascorbic", "vitamin_c"),
    ("folate", "vitamin_b9"),
    ("folic acid", "vitamin_b9"),
    ("iron", "iron"),
    ("ferrous", "iron"),
    ("calcium", "calcium"),
    ("zinc", "zinc"),
    ("magnesium", "magnesium"),
    ("potassium", "potassium"),
    ("omega", "omega3"),
    ("fish oil", "omega3"),
)

_TARGET_UNITS = {
    "vitamin_d": "mcg",
    "vitamin_b12": "mcg",
    "vitamin_b9": "mcg",
    "vitamin_c": "mg",
    "iron": "mg",
    "calcium": "mg",
    "zinc": "mg",
    "magnesium": "mg",
    "potassium": "mg",
    "omega3": "g",
}

_MICROGRAMS_PER_UNIT = {
    DosageUnit.MCG: 1.0,
    DosageUnit.MG: 1_000.0,
    DosageUnit.G: 1_000_000.0,
}
_MICROGRAMS_PER_TARGET_UNIT = {"mcg": 1.0, "mg": 1_000.0, "g": 1_000_000.0}
VITAMIN_D_IU_PER_MCG = 40.0


def supplement_nutrient(supplement: Supplement) -> str | None:
    """Return the vector field a supplement contributes to, if known."""
    if supplement.category is SupplementCategory.OMEGA3:
        return "omega3"
    name = supplement.name.lower()
    for keyword, nutrient in _SUPPLEMENT_KEYWORDS:
        if keyword in name:
            return nutrient
    return None


def convert_dosage(amount: float, unit: DosageUnit, nutrient: str) -> float:
    """Convert a dose into the unit the vector stores for nutrient.

    IU is only convertible for vitamin D, and count or volume units such as
    capsules or ml carry no mass; both contribute zero.
    """
    amount = finite_or_zero(amount)
    if unit is not DosageUnit.IU and unit not in _MICROGRAMS_PER_UNIT:
        return 0.0
    if unit is DosageUnit.IU:
        if nutrient != "vitamin_d":
            return 0.0
        micrograms = amount / VITAMIN_D_IU_PER_MCG
    else:
        micrograms = amount * _MICROGRAMS_PER_UNIT[unit]
    target_unit = _TARGET_UNITS[nutrient]
    return finite_or_zero(micrograms / _MICROGRAMS_PER_TARGET_UNIT[target_unit])


def in_window(entry_date: date, start: date, end: date) -> bool:
    """Whether a calendar date falls in [start, end]."""
    return entry_date != DISTANT_PAST and start <= entry_date <= end


def _combine(meal: MealEntry, sources: dict[str, NutrientVector]) -> NutrientVector:
    derived = sum_vectors(sources.values())
    if meal.has_stored_macros:
        return derived.with_macros(meal.stored_macros)
    return derived


@dataclass
class NutritionAggregator:
    """Sum scaled nutrients per meal, per day and per window."""

    matcher: FoodMatcher
    scaler: PortionScaler
    debug: bool = False

    def meal_sources(self, meal: MealEntry) -> dict[str, NutrientVector]:
        """Return scaled nutrients per food detected in a meal."""
        return self.scaler.contributions(self.matcher.match(meal.description))

    def meal_totals(self, meal: MealEntry) -> NutrientVector:
        """Return a meal's nutrients.

        Stored macros win over derived ones when any is non-zero. Micronutrients
        always come from the description.
        """
        return _combine(meal, self.meal_sources(meal))

    def day_totals(self, entry: JournalEntry) -> DayTotals:
        """Return the totals of one journal entry with a per-meal-type breakdown."""
        by_meal_type: dict[MealType, NutrientVector] = {}
        food_sources: dict[str, NutrientVector] = {}
        totals = ZERO_VECTOR
        for meal in entry.meals:
            sources = self.meal_sources(meal)
            meal_vector = _combine(meal, sources)
            totals = totals.plus(meal_vector)
            by_meal_type[meal.meal_type] = by_meal_type.get(
                meal.meal_type, ZERO_VECTOR
            ).plus(meal_vector)
            for name, vector in sources.items():
                food_sources[name] = food_sources.get(name, ZERO_VECTOR).plus(vector)
        return DayTotals(
            day=entry.entry_date,
            totals=totals,
            by_meal_type=by_meal_type,
            food_sources=food_sources,
            hydration_ml=(
                None if entry.hydration is None else finite_or_zero(entry.hydration)
            ),
        )

    def window(
        self, entries: Iterable[JournalEntry], end: date, days: int = 7
    ) -> WeeklyNutritionTotals:
        """Return totals over the calendar window ending at end, inclusive."""
        days = max(1, days)
        start = end - timedelta(days=days - 1)
        selected = sorted(
            (entry for entry in entries if in_window(entry.entry_date, start, end)),
            key=lambda entry: entry.entry_date,
        )
        if not selected:
            return WeeklyNutritionTotals.empty(start, end, days)
        daily = tuple(self.day_totals(entry) for entry in selected)
        result = WeeklyNutritionTotals(
            start=start,
            end=end,
            days=days,
            entry_count=len(selected),
            totals=sum_vectors(day.totals for day in daily),
            daily=daily,
        )
        if self.debug:
            _logger.info(
                "Aggregated window: start=%s end=%s entries=%s calories=%s",
                start,
                end,
                result.entry_count,
                result.totals.calories,
            )
        return result

    def supplement_contribution(self, supplement: Supplement) -> NutrientVector:
        """Return the per-day contribution of an active supplement."""
        if not supplement.is_active:
            return ZERO_VECTOR
        nutrient = supplement_nutrient(supplement)
        if nutrient is None:
            _logger.debug("Unmapped supplement ignored: %s", supplement.name)
            return ZERO_VECTOR
        amount = convert_dosage(supplement.dosage, supplement.unit, nutrient)
        per_day = amount * supplement.frequency.doses_per_day
        return NutrientVector.from_mapping({nutrient: per_day})

    def daily_micronutrient_intake(  # noqa: PLR0913
        self,
        entries: Iterable[JournalEntry],
        profile: MicronutrientProfile,
        requirements: NutrientRequirements,
        end: date,
        days: int = 7,
    ) -> DailyMicronutrientIntake:
        """Return average daily intake over the window plus supplements."""
        window = self.window(entries, end, days)
        divisor = max(1, window.entry_count)
        food_sources: dict[str, NutrientVector] = {}
        for day in window.daily:
            for name, vector in day.food_sources.items():
                food_sources[name] = food_sources.get(name, ZERO_VECTOR).plus(vector)
        food_sources = {
            name: vector.divided(divisor)
            for name, vector in sorted(food_sources.items())
        }
        supplement_sources: dict[str, NutrientVector] = {}
        for supplement in profile.supplements:
            contribution = self.supplement_contribution(supplement)
            if contribution.is_zero:
                continue
            supplement_sources[supplement.name] = supplement_sources.get(
                supplement.name, ZERO_VECTOR
            ).plus(contribution)
        total = window.average.plus(sum_vectors(supplement_sources.values()))
        return DailyMicronutrientIntake(
            total_intake=total,
            requirements=requirements,
            food_sources=food_sources,
            supplement_sources=supplement_sources,
        )
