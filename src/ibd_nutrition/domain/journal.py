"""Journal domain models consumed by the engine."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from ibd_nutrition.domain.nutrients import MACRO_KEYS, NutrientVector, finite_or_zero

DISTANT_PAST = date.min


class MealType(Enum):
    """Meal slot within a day."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"

    @classmethod
    def parse(cls, raw: object) -> "MealType":
        """Parse a meal type label, defaulting to snack."""
        text = str(raw or "").strip().lower()
        if text == "snacks":
            text = "snack"
        for member in cls:
            if member.value == text:
                return member
        return cls.SNACK


@dataclass(frozen=True)
class MealEntry:
    """A logged meal with optional stored macros."""

    description: str
    meal_type: MealType = MealType.SNACK
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fiber: float | None = None
    fat: float | None = None

    @property
    def stored_macros(self) -> NutrientVector:
        """Stored macro fields as a sanitized vector (absent -> 0)."""
        return NutrientVector.from_mapping(
            {key: getattr(self, key) for key in MACRO_KEYS}
        )

    @property
    def has_stored_macros(self) -> bool:
        """Whether any stored macro is present and non-zero."""
        return any(finite_or_zero(getattr(self, key)) > 0 for key in MACRO_KEYS)


@dataclass(frozen=True)
class JournalEntry:
    """One day of logged meals and symptoms for a user."""

    entry_date: date
    meals: tuple[MealEntry, ...] = field(default_factory=tuple)
    blood_present: bool | None = None
    mucus_present: bool | None = None
    pain_severity: int | None = None
    urgency_level: int | None = None
    stress_level: int | None = None
    fatigue_level: int | None = None
    sleep_quality: int | None = None
    bowel_frequency: int | None = None
    hydration: float | None = None


def parse_entry_date(raw: object) -> date:
    """Parse YYYY-MM-DD or ISO8601 input; unparsable values map to DISTANT_PAST."""
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str):
        return DISTANT_PAST
    text = raw.strip()
    if not text:
        return DISTANT_PAST
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return DISTANT_PAST
