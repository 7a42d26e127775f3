"""Tests for nutrient aggregation."""

from datetime import date

import pytest

from ibd_nutrition.domain.journal import DISTANT_PAST, JournalEntry, MealEntry, MealType
from ibd_nutrition.domain.profile import (
    DEFAULT_PROFILE,
    DosageUnit,
    MicronutrientProfile,
    Supplement,
    SupplementCategory,
    SupplementFrequency,
)
from ibd_nutrition.services.aggregation import NutritionAggregator, convert_dosage
from ibd_nutrition.services.matching import FoodMatcher
from ibd_nutrition.services.portions import PortionScaler
from ibd_nutrition.services.requirements import RequirementProfileCalculator

END = date(2024, 3, 7)


def _aggregator(catalog) -> NutritionAggregator:
    return NutritionAggregator(FoodMatcher(catalog), PortionScaler(catalog))


def _entry(day: date, *descriptions: str) -> JournalEntry:
    return JournalEntry(
        entry_date=day,
        meals=tuple(MealEntry(description=text) for text in descriptions),
    )


def test_single_entry_week_averages_to_that_entry(catalog) -> None:
    aggregator = _aggregator(catalog)

    window = aggregator.window([_entry(date(2024, 3, 5), "chicken pasta")], END)

    assert window.entry_count == 1
    assert window.totals.calories == 444.0
    assert window.average == window.totals


def test_window_uses_calendar_dates(catalog) -> None:
    aggregator = _aggregator(catalog)
    entries = [
        _entry(date(2024, 3, 8), "salmon"),
        _entry(date(2024, 3, 7), "rice"),
        _entry(date(2024, 2, 29), "salmon"),
        _entry(date(2024, 3, 1), "rice"),
        _entry(DISTANT_PAST, "salmon"),
    ]

    window = aggregator.window(entries, END, days=7)

    assert window.start == date(2024, 3, 1)
    assert window.entry_count == 2
    assert [day.day for day in window.daily] == [date(2024, 3, 1), END]
    assert window.totals.calories == pytest.approx(205 * 1.5 * 2)
    assert window.average.calories == pytest.approx(205 * 1.5)


def test_empty_window_is_zero(catalog) -> None:
    window = _aggregator(catalog).window([], END)

    assert window.entry_count == 0
    assert window.totals.is_zero
    assert window.average.is_zero


def test_stored_macros_override_derived_macros(catalog) -> None:
    aggregator = _aggregator(catalog)
    meal = MealEntry(description="chicken", calories=500.0, protein=None)

    totals = aggregator.meal_totals(meal)

    assert totals.calories == 500.0
    assert totals.protein == 0.0
    assert totals.iron == pytest.approx(0.9 * 1.5)


def test_day_totals_breaks_down_by_meal_type(catalog) -> None:
    aggregator = _aggregator(catalog)
    entry = JournalEntry(
        entry_date=END,
        meals=(
            MealEntry(description="salmon", meal_type=MealType.DINNER),
            MealEntry(description="rice", meal_type=MealType.DINNER),
            MealEntry(description="spinach", meal_type=MealType.LUNCH),
        ),
    )

    day = aggregator.day_totals(entry)

    assert set(day.by_meal_type) == {MealType.DINNER, MealType.LUNCH}
    assert day.by_meal_type[MealType.DINNER].calories == pytest.approx(
        (206 + 205) * 1.5
    )
    assert set(day.food_sources) == {"Salmon", "Rice", "Spinach"}
    with pytest.raises(TypeError):
        day.food_sources["Salmon"] = day.totals


def test_window_averages_reported_hydration(catalog) -> None:
    aggregator = _aggregator(catalog)
    entries = [
        JournalEntry(entry_date=date(2024, 3, 5), hydration=1500),
        JournalEntry(entry_date=date(2024, 3, 6), hydration=2500),
        JournalEntry(entry_date=END),
    ]

    window = aggregator.window(entries, END)

    assert window.entry_count == 3
    assert window.average_hydration_ml == pytest.approx(2000.0)
    assert aggregator.window([_entry(END, "rice")], END).average_hydration_ml is None


def test_convert_dosage_to_vector_units() -> None:
    assert convert_dosage(1000, DosageUnit.IU, "vitamin_d") == pytest.approx(25.0)
    assert convert_dosage(1, DosageUnit.MG, "vitamin_b12") == pytest.approx(1000.0)
    assert convert_dosage(1000, DosageUnit.MG, "omega3") == pytest.approx(1.0)
    assert convert_dosage(0.5, DosageUnit.G, "calcium") == pytest.approx(500.0)
    assert convert_dosage(400, DosageUnit.IU, "iron") == 0.0


def test_convert_dosage_ignores_count_and_volume_units() -> None:
    for unit in (DosageUnit.CAPSULES, DosageUnit.DROPS, DosageUnit.ML):
        assert convert_dosage(2, unit, "vitamin_d") == 0.0
    assert convert_dosage(2, DosageUnit.UNKNOWN, "iron") == 0.0


def test_supplement_contribution_respects_frequency(catalog) -> None:
    aggregator = _aggregator(catalog)
    weekly_iron = Supplement(
        name="Ferrous Sulfate",
        category=SupplementCategory.MINERAL,
        dosage=70,
        unit=DosageUnit.MG,
        frequency=SupplementFrequency.WEEKLY,
    )
    inactive = Supplement(
        name="Zinc",
        category=SupplementCategory.MINERAL,
        dosage=15,
        unit=DosageUnit.MG,
        is_active=False,
    )
    unknown = Supplement(
        name="Probiotic Blend",
        category=SupplementCategory.OTHER,
        dosage=1,
        unit=DosageUnit.G,
    )

    assert aggregator.supplement_contribution(weekly_iron).iron == pytest.approx(10.0)
    assert aggregator.supplement_contribution(inactive).is_zero
    assert aggregator.supplement_contribution(unknown).is_zero


def test_daily_micronutrient_intake_adds_supplements(catalog) -> None:
    aggregator = _aggregator(catalog)
    profile = MicronutrientProfile(
        age=30,
        weight_kg=70.0,
        height_cm=170.0,
        supplements=(
            Supplement(
                name="Vitamin D3",
                category=SupplementCategory.VITAMIN,
                dosage=1000,
                unit=DosageUnit.IU,
            ),
        ),
    )
    entries = [_entry(date(2024, 3, 6), "salmon"), _entry(END, "salmon")]
    requirements = RequirementProfileCalculator().daily(profile)

    intake = aggregator.daily_micronutrient_intake(entries, profile, requirements, END)

    assert intake.requirements == requirements
    assert intake.food_sources["Salmon"].vitamin_d == pytest.approx(11.1 * 1.5)
    assert intake.supplement_sources["Vitamin D3"].vitamin_d == pytest.approx(25.0)
    assert intake.total_intake.vitamin_d == pytest.approx(11.1 * 1.5 + 25.0)


def test_daily_micronutrient_intake_without_entries(catalog) -> None:
    aggregator = _aggregator(catalog)
    requirements = RequirementProfileCalculator().daily(DEFAULT_PROFILE)

    intake = aggregator.daily_micronutrient_intake(
        [], DEFAULT_PROFILE, requirements, END
    )

    assert intake.total_intake.is_zero
    assert intake.food_sources == {}
    assert intake.supplement_sources == {}
    with pytest.raises(TypeError):
        intake.supplement_sources["Vitamin D3"] = intake.total_intake
