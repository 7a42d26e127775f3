"""Nutrient requirement domain models."""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from types import MappingProxyType

from ibd_nutrition.domain.nutrients import NUTRIENT_UNITS, NutrientVector

TRACKED_MACROS: tuple[str, ...] = ("calories", "protein", "carbs", "fiber", "fat")
TRACKED_MICROS: tuple[str, ...] = (
    "vitamin_d",
    "vitamin_b12",
    "iron",
    "calcium",
    "zinc",
    "omega3",
)
TRACKED_NUTRIENTS: tuple[str, ...] = TRACKED_MACROS + TRACKED_MICROS


@dataclass(frozen=True)
class NutrientRequirement:
    """Required amount of one nutrient."""

    nutrient: str
    required_amount: float
    unit: str


@dataclass(frozen=True)
class NutrientRequirements:
    """Personalized targets for the tracked nutrients over one period."""

    calories: float
    protein: float
    carbs: float
    fiber: float
    fat: float
    vitamin_d: float
    vitamin_b12: float
    iron: float
    calcium: float
    zinc: float
    omega3: float
    period_days: int = 1

    def get(self, key: str) -> float:
        """Return the target for a nutrient; untracked nutrients have none."""
        if key not in TRACKED_NUTRIENTS:
            return 0.0
        return float(getattr(self, key))

    def as_dict(self) -> dict[str, float]:
        return {
            field.name: getattr(self, field.name)
            for field in fields(self)
            if field.name in TRACKED_NUTRIENTS
        }

    def rows(self) -> list[NutrientRequirement]:
        """Targets as individual requirement rows."""
        return [
            NutrientRequirement(
                nutrient=key, required_amount=self.get(key), unit=NUTRIENT_UNITS[key]
            )
            for key in TRACKED_NUTRIENTS
        ]

    def weekly(self) -> "NutrientRequirements":
        """Return daily targets multiplied by 7."""
        return self.scaled_to(7)

    def scaled_to(self, days: int) -> "NutrientRequirements":
        """Return targets for a period of days, from a daily record."""
        factor = max(days, 0) / max(self.period_days, 1)
        values = {key: value * factor for key, value in self.as_dict().items()}
        return NutrientRequirements(**values, period_days=max(days, 0))


@dataclass(frozen=True)
class DailyMicronutrientIntake:
    """Daily intake with its requirements and audit trail of sources."""

    total_intake: NutrientVector
    requirements: NutrientRequirements
    food_sources: Mapping[str, NutrientVector]
    supplement_sources: Mapping[str, NutrientVector]

    def __post_init__(self) -> None:
        for name in ("food_sources", "supplement_sources"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))
