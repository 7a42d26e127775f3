"""Tests for the nutrition analysis facade."""

from datetime import date

import pytest

from ibd_nutrition.domain.analysis import DehydrationRisk, FiberIntakeLevel, Severity
from ibd_nutrition.domain.flare import FlareRiskLevel
from ibd_nutrition.domain.journal import JournalEntry, MealEntry, MealType
from ibd_nutrition.domain.profile import (
    DEFAULT_PROFILE,
    DosageUnit,
    MicronutrientProfile,
    Supplement,
    SupplementCategory,
)

END = date(2024, 3, 7)


def test_analyze_nutrition_with_no_entries(container) -> None:
    service = container.analysis_service

    analysis = service.analyze_nutrition([], None, END)

    assert analysis.entry_count == 0
    assert analysis.calories == 0
    assert analysis.avg_protein == 0.0
    assert 0 <= analysis.overall_score <= 100
    assert all(item.severity == Severity.CRITICAL for item in analysis.deficiencies)
    assert service.score_flare_risk([]).level == FlareRiskLevel.LOW


def test_analyze_nutrition_summarizes_window(container) -> None:
    service = container.analysis_service
    entries = [
        JournalEntry(
            entry_date=date(2024, 3, 5),
            meals=(
                MealEntry(description="chicken pasta", meal_type=MealType.DINNER),
            ),
        ),
        JournalEntry(
            entry_date=date(2024, 3, 6),
            meals=(MealEntry(description="rice", meal_type=MealType.LUNCH),),
        ),
    ]

    analysis = service.analyze_nutrition(entries, DEFAULT_PROFILE, END)

    assert analysis.start == date(2024, 3, 1)
    assert analysis.entry_count == 2
    assert analysis.calories == round(444.0 + 307.5)
    assert analysis.avg_calories == pytest.approx((444.0 + 307.5) / 2)
    assert analysis.recommendations
    assert len(set(analysis.recommendations)) == len(analysis.recommendations)


def test_weekly_trends_compare_with_weekly_targets(container) -> None:
    service = container.analysis_service

    analysis = service.analyze_nutrition([], DEFAULT_PROFILE, END)

    weekly = service.requirements_for(DEFAULT_PROFILE, days=7)
    trends = {trend.nutrient: trend for trend in analysis.weekly_trends}
    assert trends["protein"].recommended == pytest.approx(weekly.protein)
    assert trends["protein"].recommended == pytest.approx(
        container.requirements.daily(DEFAULT_PROFILE).protein * 7
    )
    assert trends["iron"].unit == "mg"


def test_analyze_micronutrients_includes_supplements(container) -> None:
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
    entries = [
        JournalEntry(entry_date=END, meals=(MealEntry(description="salmon"),))
    ]

    analysis = container.analysis_service.analyze_micronutrients(entries, profile, END)

    vitamin_d = analysis.ibd_specific_nutrients["vitamin_d"]
    assert vitamin_d.current_intake == pytest.approx(11.1 * 1.5 + 25.0)
    assert "vitamin_d" not in [item.nutrient for item in analysis.deficiencies]
    assert "Vitamin D3" in analysis.daily_intake.supplement_sources


def test_estimate_description(container) -> None:
    estimate = container.analysis_service.estimate_description("Chicken and pasta")

    assert estimate.detected_foods == ("Chicken Breast", "Pasta")
    assert estimate.totals.calories == 444.0


def test_analyze_nutrition_reports_fiber_and_hydration(container) -> None:
    service = container.analysis_service
    entries = [
        JournalEntry(entry_date=date(2024, 3, 5), hydration=1200),
        JournalEntry(entry_date=date(2024, 3, 6), hydration=1800),
        JournalEntry(entry_date=END),
    ]

    analysis = service.analyze_nutrition(entries, DEFAULT_PROFILE, END)

    assert analysis.fiber_analysis is not None
    assert analysis.fiber_analysis.level == FiberIntakeLevel.LOW
    assert analysis.hydration is not None
    assert analysis.hydration.current_intake == pytest.approx(1500.0)
    assert analysis.hydration.dehydration_risk == DehydrationRisk.MODERATE


def test_hydration_is_omitted_when_never_logged(container) -> None:
    entries = [JournalEntry(entry_date=END, meals=(MealEntry(description="rice"),))]

    analysis = container.analysis_service.analyze_nutrition(entries, None, END)

    assert analysis.hydration is None
    assert analysis.fiber_analysis is not None
