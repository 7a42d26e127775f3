"""Personalized daily and weekly nutrient targets."""

import logging
from dataclasses import dataclass

from ibd_nutrition.domain.nutrients import finite_or_zero
from ibd_nutrition.domain.profile import (
    DEFAULT_PROFILE,
    DiseaseActivity,
    MicronutrientProfile,
)
from ibd_nutrition.domain.requirements import NutrientRequirement, NutrientRequirements

_logger = logging.getLogger(__name__)

ACTIVITY_FACTOR = 1.4
CARB_ENERGY_SHARE = 0.5
FAT_ENERGY_SHARE = 0.3
KCAL_PER_G_CARB = 4.0
KCAL_PER_G_FAT = 9.0
FIBER_G_PER_1000_KCAL = 14.0

# Mifflin-St Jeor sex constant; unknown sits halfway between male and female.
BMR_SEX_OFFSET = {"male": 5.0, "female": -161.0, "unknown": -78.0}

ENERGY_MULTIPLIER = {
    DiseaseActivity.REMISSION: 1.0,
    DiseaseActivity.MILD: 1.05,
    DiseaseActivity.MODERATE: 1.1,
    DiseaseActivity.SEVERE: 1.2,
}
PROTEIN_G_PER_KG = {
    DiseaseActivity.REMISSION: 1.0,
    DiseaseActivity.MILD: 1.2,
    DiseaseActivity.MODERATE: 1.3,
    DiseaseActivity.SEVERE: 1.5,
}
FIBER_MULTIPLIER = {
    DiseaseActivity.REMISSION: 1.0,
    DiseaseActivity.MILD: 0.9,
    DiseaseActivity.MODERATE: 0.75,
    DiseaseActivity.SEVERE: 0.6,
}
MICRONUTRIENT_MULTIPLIER = {
    DiseaseActivity.REMISSION: 1.0,
    DiseaseActivity.MILD: 1.1,
    DiseaseActivity.MODERATE: 1.25,
    DiseaseActivity.SEVERE: 1.5,
}

_DRI_FIELDS = ("vitamin_d", "vitamin_b12", "iron", "calcium", "zinc", "omega3")

# Upper age bound -> sex -> (vitamin D mcg, B12 mcg, iron mg, calcium mg,
# zinc mg, omega-3 g).
DRI_BY_AGE_BAND: tuple[tuple[int, dict[str, tuple[float, ...]]], ...] = (
    (
        13,
        {
            "male": (15.0, 1.8, 8.0, 1300.0, 8.0, 1.2),
            "female": (15.0, 1.8, 8.0, 1300.0, 8.0, 1.0),
        },
    ),
    (
        18,
        {
            "male": (15.0, 2.4, 11.0, 1300.0, 11.0, 1.6),
            "female": (15.0, 2.4, 15.0, 1300.0, 9.0, 1.1),
        },
    ),
    (
        50,
        {
            "male": (15.0, 2.4, 8.0, 1000.0, 11.0, 1.6),
            "female": (15.0, 2.4, 18.0, 1000.0, 8.0, 1.1),
        },
    ),
    (
        70,
        {
            "male": (15.0, 2.4, 8.0, 1000.0, 11.0, 1.6),
            "female": (15.0, 2.4, 8.0, 1200.0, 8.0, 1.1),
        },
    ),
    (
        200,
        {
            "male": (20.0, 2.4, 8.0, 1200.0, 11.0, 1.6),
            "female": (20.0, 2.4, 8.0, 1200.0, 8.0, 1.1),
        },
    ),
)


def normalize_sex(gender: str) -> str:
    """Map a free-text gender label to male, female or unknown."""
    text = gender.strip().lower()
    if text in {"male", "m", "man", "boy"}:
        return "male"
    if text in {"female", "f", "woman", "girl"}:
        return "female"
    return "unknown"


def dri_baseline(age: int, gender: str) -> dict[str, float]:
    """Return baseline micronutrient DRIs for an age and gender.

    Unknown gender takes the higher of the male and female values.
    """
    sex = normalize_sex(gender)
    bands = DRI_BY_AGE_BAND[-1][1]
    for upper_age, by_sex in DRI_BY_AGE_BAND:
        if age <= upper_age:
            bands = by_sex
            break
    if sex == "unknown":
        values = tuple(
            max(male, female)
            for male, female in zip(bands["male"], bands["female"], strict=True)
        )
    else:
        values = bands[sex]
    return dict(zip(_DRI_FIELDS, values, strict=True))


def basal_metabolic_rate(profile: MicronutrientProfile) -> float:
    """Mifflin-St Jeor resting energy in kcal/day."""
    offset = BMR_SEX_OFFSET[normalize_sex(profile.gender)]
    bmr = (
        10.0 * finite_or_zero(profile.weight_kg)
        + 6.25 * finite_or_zero(profile.height_cm)
        - 5.0 * finite_or_zero(profile.age)
        + offset
    )
    return finite_or_zero(bmr)


@dataclass
class RequirementProfileCalculator:
    """Single source of daily and weekly targets for every consumer."""

    debug: bool = False

    def daily(
        self, profile: MicronutrientProfile | None = None
    ) -> NutrientRequirements:
        """Return daily targets; a missing profile uses DEFAULT_PROFILE."""
        if profile is None:
            _logger.debug("No profile supplied, using default profile")
            profile = DEFAULT_PROFILE
        activity = profile.disease_activity
        bmr = basal_metabolic_rate(profile)
        energy = bmr * ACTIVITY_FACTOR * ENERGY_MULTIPLIER[activity]
        micro_multiplier = MICRONUTRIENT_MULTIPLIER[activity]
        micros = {
            key: value * micro_multiplier
            for key, value in dri_baseline(profile.age, profile.gender).items()
        }
        requirements = NutrientRequirements(
            calories=energy,
            protein=PROTEIN_G_PER_KG[activity] * finite_or_zero(profile.weight_kg),
            carbs=energy * CARB_ENERGY_SHARE / KCAL_PER_G_CARB,
            fiber=FIBER_G_PER_1000_KCAL * energy / 1000.0 * FIBER_MULTIPLIER[activity],
            fat=energy * FAT_ENERGY_SHARE / KCAL_PER_G_FAT,
            **micros,
        )
        if self.debug:
            _logger.info(
                "Computed requirements: activity=%s calories=%.0f protein=%.1f",
                activity.value,
                requirements.calories,
                requirements.protein,
            )
        return requirements

    def weekly(
        self, profile: MicronutrientProfile | None = None
    ) -> NutrientRequirements:
        """Return daily targets multiplied by 7."""
        return self.daily(profile).weekly()

    def for_days(
        self, profile: MicronutrientProfile | None, days: int
    ) -> NutrientRequirements:
        return self.daily(profile).scaled_to(days)

    def rows(
        self, profile: MicronutrientProfile | None = None
    ) -> list[NutrientRequirement]:
        """Return daily targets as one row per nutrient."""
        return self.daily(profile).rows()
