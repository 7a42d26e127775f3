"""Nutrient vector domain model."""

import math
from collections.abc import Iterable
from dataclasses import dataclass, fields

MACRO_KEYS: tuple[str, ...] = ("calories", "protein", "carbs", "fiber", "fat")
MICRO_KEYS: tuple[str, ...] = (
    "vitamin_c",
    "iron",
    "potassium",
    "vitamin_b12",
    "vitamin_b9",
    "zinc",
    "calcium",
    "vitamin_d",
    "magnesium",
    "omega3",
)
NUTRIENT_KEYS: tuple[str, ...] = MACRO_KEYS + MICRO_KEYS

NUTRIENT_UNITS: dict[str, str] = {
    "calories": "kcal",
    "protein": "g",
    "carbs": "g",
    "fiber": "g",
    "fat": "g",
    "vitamin_c": "mg",
    "iron": "mg",
    "potassium": "mg",
    "vitamin_b12": "mcg",
    "vitamin_b9": "mcg",
    "zinc": "mg",
    "calcium": "mg",
    "vitamin_d": "mcg",
    "magnesium": "mg",
    "omega3": "g",
}

NUTRIENT_LABELS: dict[str, str] = {
    "calories": "Calories",
    "protein": "Protein",
    "carbs": "Carbohydrates",
    "fiber": "Fiber",
    "fat": "Fat",
    "vitamin_c": "Vitamin C",
    "iron": "Iron",
    "potassium": "Potassium",
    "vitamin_b12": "Vitamin B12",
    "vitamin_b9": "Folate",
    "zinc": "Zinc",
    "calcium": "Calcium",
    "vitamin_d": "Vitamin D",
    "magnesium": "Magnesium",
    "omega3": "Omega-3",
}


def finite_or_zero(value: object) -> float:
    """Return value as a non-negative finite float, or 0.0."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return 0.0
    number = float(value)
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


@dataclass(frozen=True)
class NutrientVector:
    """Per-serving or aggregated nutrient amounts.

    Units: kcal for calories, grams for macros and omega-3, milligrams for
    vitamin C, iron, potassium, zinc, calcium and magnesium, micrograms for
    vitamins B12, B9 and D.
    """

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fiber: float = 0.0
    fat: float = 0.0
    vitamin_c: float = 0.0
    iron: float = 0.0
    potassium: float = 0.0
    vitamin_b12: float = 0.0
    vitamin_b9: float = 0.0
    zinc: float = 0.0
    calcium: float = 0.0
    vitamin_d: float = 0.0
    magnesium: float = 0.0
    omega3: float = 0.0

    @classmethod
    def from_mapping(cls, values: dict[str, object]) -> "NutrientVector":
        """Build a sanitized vector from a mapping, ignoring unknown keys."""
        return cls(**{key: finite_or_zero(values.get(key)) for key in NUTRIENT_KEYS})

    def get(self, key: str) -> float:
        """Return the amount for a nutrient key."""
        return float(getattr(self, key))

    def as_dict(self) -> dict[str, float]:
        """Return the vector as a plain dict."""
        return {field.name: getattr(self, field.name) for field in fields(self)}

    def sanitized(self) -> "NutrientVector":
        """Return a copy with every non-finite or negative value set to 0."""
        return NutrientVector.from_mapping(self.as_dict())

    def scaled(self, factor: float) -> "NutrientVector":
        """Multiply every nutrient by factor, sanitizing before and after."""
        safe_factor = finite_or_zero(factor)
        source = self.sanitized()
        return NutrientVector.from_mapping(
            {key: source.get(key) * safe_factor for key in NUTRIENT_KEYS}
        )

    def plus(self, other: "NutrientVector") -> "NutrientVector":
        """Return the element-wise sum of two vectors."""
        return NutrientVector.from_mapping(
            {
                key: finite_or_zero(self.get(key)) + finite_or_zero(other.get(key))
                for key in NUTRIENT_KEYS
            }
        )

    def divided(self, denominator: float) -> "NutrientVector":
        """Divide every nutrient; a non-positive denominator yields zeros."""
        safe = finite_or_zero(denominator)
        if safe <= 0:
            return ZERO_VECTOR
        return NutrientVector.from_mapping(
            {key: self.get(key) / safe for key in NUTRIENT_KEYS}
        )

    def with_macros(self, macros: "NutrientVector") -> "NutrientVector":
        """Return a copy whose macro fields are taken from macros."""
        values = self.as_dict()
        for key in MACRO_KEYS:
            values[key] = macros.get(key)
        return NutrientVector.from_mapping(values)

    @property
    def is_zero(self) -> bool:
        """Whether every nutrient is zero."""
        return all(self.get(key) == 0 for key in NUTRIENT_KEYS)


ZERO_VECTOR = NutrientVector()


def sum_vectors(vectors: Iterable[NutrientVector]) -> NutrientVector:
    """Sum a sequence of vectors; an empty sequence yields the zero vector."""
    total = ZERO_VECTOR
    for vector in vectors:
        total = total.plus(vector)
    return total
