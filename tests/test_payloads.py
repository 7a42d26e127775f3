"""Tests for journal and profile payload parsing."""

from datetime import date

from ibd_nutrition.adapters.journal_payloads import (
    parse_journal_entries,
    parse_journal_entry,
)
from ibd_nutrition.adapters.profile_payloads import parse_profile
from ibd_nutrition.domain.journal import DISTANT_PAST, MealEntry, MealType
from ibd_nutrition.domain.profile import (
    DEFAULT_PROFILE,
    DiseaseActivity,
    DosageUnit,
    LabStatus,
    SupplementCategory,
    SupplementFrequency,
)


def test_flat_payload_with_text_numbers_matches_numeric_payload() -> None:
    flat = parse_journal_entry(
        {
            "entry_date": "2024-03-05",
            "breakfast": "chicken",
            "breakfast_calories": "300",
            "breakfast_protein": " 25 ",
            "lunch": "",
            "snacks": "rice",
            "snack_fiber": "",
        }
    )
    listed = parse_journal_entry(
        {
            "entry_date": "2024-03-05",
            "meals": [
                {
                    "description": "chicken",
                    "meal_type": "breakfast",
                    "calories": 300,
                    "protein": 25,
                },
                {"description": "rice", "meal_type": "snack"},
            ],
        }
    )

    assert flat == listed
    assert flat.meals[0] == MealEntry(
        description="chicken",
        meal_type=MealType.BREAKFAST,
        calories=300.0,
        protein=25.0,
    )
    assert flat.meals[1].meal_type == MealType.SNACK


def test_flat_payload_keeps_meals_with_only_macros() -> None:
    entry = parse_journal_entry({"entry_date": "2024-03-05", "dinner_calories": 650})

    (meal,) = entry.meals
    assert meal.description == ""
    assert meal.meal_type == MealType.DINNER
    assert meal.has_stored_macros


def test_entry_dates_are_parsed_or_sent_to_distant_past() -> None:
    entries = parse_journal_entries(
        [
            {"entry_date": "2024-03-05T22:15:00Z"},
            {"entry_date": "not a date"},
            {"date": "2024-03-06"},
            {},
            {"entry_date": 20240305},
        ]
    )

    assert [entry.entry_date for entry in entries] == [
        date(2024, 3, 5),
        DISTANT_PAST,
        date(2024, 3, 6),
        DISTANT_PAST,
        DISTANT_PAST,
    ]


def test_symptom_fields_accept_loose_values() -> None:
    entry = parse_journal_entry(
        {
            "entry_date": "2024-03-05",
            "blood_present": "yes",
            "mucus_present": 0,
            "pain_severity": "4",
            "urgency_level": "abc",
            "sleep_quality": 2.0,
            "hydration": "1.5",
        }
    )

    assert entry.blood_present is True
    assert entry.mucus_present is False
    assert entry.pain_severity == 4
    assert entry.urgency_level is None
    assert entry.sleep_quality == 2
    assert entry.hydration == 1.5


def test_meal_numbers_reject_garbage() -> None:
    entry = parse_journal_entry(
        {
            "entry_date": "2024-03-05",
            "meals": [{"description": "rice", "calories": "lots", "fat": "NaN"}],
        }
    )

    (meal,) = entry.meals
    assert meal.calories is None
    assert meal.fat is None
    assert meal.meal_type == MealType.SNACK


def test_missing_profile_is_default() -> None:
    assert parse_profile(None) is DEFAULT_PROFILE


def test_profile_accepts_camel_case_keys() -> None:
    profile = parse_profile(
        {
            "userId": "user-1",
            "age": "16",
            "weight": "55.5",
            "height": 160,
            "gender": "Female",
            "diseaseActivity": "Moderate",
            "labResults": [
                {
                    "nutrient": "Vitamin D",
                    "value": "12",
                    "unit": "ng/mL",
                    "status": "low",
                    "referenceRange": "30-100",
                }
            ],
            "supplements": [
                {
                    "name": "Vitamin D3",
                    "category": "vitamin",
                    "dosage": "1000",
                    "unit": "IU",
                    "frequency": "twice daily",
                    "isActive": "true",
                },
                {"name": "Mystery", "dosage": "lots", "unit": "scoops"},
            ],
        }
    )

    assert profile.user_id == "user-1"
    assert profile.age == 16
    assert profile.weight_kg == 55.5
    assert profile.height_cm == 160.0
    assert profile.disease_activity == DiseaseActivity.MODERATE
    (lab,) = profile.lab_results
    assert lab.status == LabStatus.LOW
    assert lab.value == 12.0
    assert lab.reference_range == "30-100"
    vitamin_d, mystery = profile.supplements
    assert vitamin_d.dosage == 1000.0
    assert vitamin_d.unit == DosageUnit.IU
    assert vitamin_d.frequency == SupplementFrequency.TWICE_DAILY
    assert vitamin_d.category == SupplementCategory.VITAMIN
    assert mystery.dosage == 0.0
    assert mystery.unit == DosageUnit.UNKNOWN
    assert mystery.category == SupplementCategory.OTHER


def test_profile_missing_measurements_fall_back_to_defaults() -> None:
    profile = parse_profile({"age": "", "weight": -4, "diseaseActivity": "unknown"})

    assert profile.age == DEFAULT_PROFILE.age
    assert profile.weight_kg == DEFAULT_PROFILE.weight_kg
    assert profile.height_cm == DEFAULT_PROFILE.height_cm
    assert profile.gender == "Unknown"
    assert profile.disease_activity == DiseaseActivity.REMISSION


def test_count_units_do_not_become_milligrams(container) -> None:
    profile = parse_profile(
        {
            "age": 16,
            "supplements": [
                {"name": "Vitamin D3", "dosage": "2", "unit": "capsules"},
                {"name": "Iron Drops", "dosage": "10", "unit": "drops"},
            ],
        }
    )

    vitamin_d, iron = profile.supplements
    assert vitamin_d.unit == DosageUnit.CAPSULES
    assert iron.unit == DosageUnit.DROPS

    analysis = container.analysis_service.analyze_micronutrients(
        [], profile, date(2024, 3, 7)
    )

    assert analysis.daily_intake.total_intake.vitamin_d == 0.0
    assert analysis.daily_intake.total_intake.iron == 0.0
    assert not analysis.excesses
