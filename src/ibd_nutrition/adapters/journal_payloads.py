"""Pydantic models for journal entry payloads."""

from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from ibd_nutrition.adapters.parsing import coerce_bool, coerce_int, coerce_number
from ibd_nutrition.domain.journal import (
    JournalEntry,
    MealEntry,
    MealType,
    parse_entry_date,
)

_MACRO_FIELDS = ("calories", "protein", "carbs", "fiber", "fat")
_FLAT_MEALS = (
    ("breakfast", "breakfast"),
    ("lunch", "lunch"),
    ("dinner", "dinner"),
    ("snacks", "snack"),
)
_LEVEL_FIELDS = (
    "pain_severity",
    "urgency_level",
    "stress_level",
    "fatigue_level",
    "sleep_quality",
    "bowel_frequency",
)


class MealPayload(BaseModel):
    """Meal row as stored by the journal."""

    model_config = ConfigDict(extra="ignore")

    description: str = ""
    meal_type: str | None = Field(
        default=None, validation_alias=AliasChoices("meal_type", "mealType", "type")
    )
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fiber: float | None = None
    fat: float | None = None

    @field_validator(*_MACRO_FIELDS, mode="before")
    @classmethod
    def _parse_number(cls, value: object) -> float | None:
        return coerce_number(value)

    @field_validator("description", mode="before")
    @classmethod
    def _parse_description(cls, value: object) -> str:
        return value if isinstance(value, str) else ""

    def to_domain(self) -> MealEntry:
        return MealEntry(
            description=self.description,
            meal_type=MealType.parse(self.meal_type),
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fiber=self.fiber,
            fat=self.fat,
        )


class JournalEntryPayload(BaseModel):
    """Journal entry with meals in list form or the flat per-meal column form."""

    model_config = ConfigDict(extra="ignore")

    entry_date: str | date | None = Field(
        default=None, validation_alias=AliasChoices("entry_date", "entryDate", "date")
    )
    meals: list[MealPayload] = Field(default_factory=list)
    blood_present: bool | None = None
    mucus_present: bool | None = None
    pain_severity: int | None = None
    urgency_level: int | None = None
    stress_level: int | None = None
    fatigue_level: int | None = None
    sleep_quality: int | None = None
    bowel_frequency: int | None = None
    hydration: float | None = None

    @model_validator(mode="before")
    @classmethod
    def _fold_flat_meals(cls, data: Any) -> Any:
        if not isinstance(data, Mapping) or data.get("meals"):
            return data
        meals = []
        for column, meal_type in _FLAT_MEALS:
            description = data.get(column)
            macros = {key: data.get(f"{meal_type}_{key}") for key in _MACRO_FIELDS}
            has_macros = any(coerce_number(value) for value in macros.values())
            has_description = isinstance(description, str) and bool(description.strip())
            if not has_description and not has_macros:
                continue
            meals.append(
                {"description": description, "meal_type": meal_type, **macros}
            )
        return {**data, "meals": meals}

    @field_validator("entry_date", mode="before")
    @classmethod
    def _parse_entry_date(cls, value: object) -> str | date | None:
        if isinstance(value, datetime):
            return value.date()
        return value if isinstance(value, str | date) else None

    @field_validator("blood_present", "mucus_present", mode="before")
    @classmethod
    def _parse_flag(cls, value: object) -> bool | None:
        return coerce_bool(value)

    @field_validator(*_LEVEL_FIELDS, mode="before")
    @classmethod
    def _parse_level(cls, value: object) -> int | None:
        return coerce_int(value)

    @field_validator("hydration", mode="before")
    @classmethod
    def _parse_hydration(cls, value: object) -> float | None:
        return coerce_number(value)

    def to_domain(self) -> JournalEntry:
        return JournalEntry(
            entry_date=parse_entry_date(self.entry_date),
            meals=tuple(meal.to_domain() for meal in self.meals),
            blood_present=self.blood_present,
            mucus_present=self.mucus_present,
            pain_severity=self.pain_severity,
            urgency_level=self.urgency_level,
            stress_level=self.stress_level,
            fatigue_level=self.fatigue_level,
            sleep_quality=self.sleep_quality,
            bowel_frequency=self.bowel_frequency,
            hydration=self.hydration,
        )


def parse_journal_entry(payload: Mapping[str, Any]) -> JournalEntry:
    """Parse one journal payload into a domain entry."""
    return JournalEntryPayload.model_validate(dict(payload)).to_domain()


def parse_journal_entries(payloads: Iterable[Mapping[str, Any]]) -> list[JournalEntry]:
    """Parse journal payloads in order."""
    return [parse_journal_entry(payload) for payload in payloads]
