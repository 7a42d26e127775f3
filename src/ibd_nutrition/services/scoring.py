"""Overall 0-100 nutrition score."""

from collections.abc import Iterable
from dataclasses import dataclass

from ibd_nutrition.domain.analysis import Deficiency, Severity
from ibd_nutrition.domain.nutrients import NutrientVector

SEVERITY_DEDUCTION = {
    Severity.MILD: 10,
    Severity.MODERATE: 20,
    Severity.SEVERE: 30,
    Severity.CRITICAL: 40,
}
GOOD_INTAKE_BONUS = 10


@dataclass
class NutritionScoreCalculator:
    """Deduct per deficiency and reward a solid daily average."""

    good_protein_g: float = 60.0
    good_fiber_g: float = 20.0
    good_calories_kcal: float = 1500.0

    def has_good_intake(self, average: NutrientVector) -> bool:
        return (
            average.protein >= self.good_protein_g
            and average.fiber >= self.good_fiber_g
            and average.calories >= self.good_calories_kcal
        )

    def score(self, deficiencies: Iterable[Deficiency], average: NutrientVector) -> int:
        """Return the score clamped to [0, 100]."""
        score = 100
        for deficiency in deficiencies:
            score -= SEVERITY_DEDUCTION[deficiency.severity]
        if self.has_good_intake(average):
            score += GOOD_INTAKE_BONUS
        return max(0, min(100, score))
