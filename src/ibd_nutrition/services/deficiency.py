"""Deficiency and excess classification against personalized targets."""

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass

from ibd_nutrition.domain.analysis import (
    Deficiency,
    DeficiencyReport,
    Excess,
    FoodRecommendation,
    IBDMicronutrientAnalysis,
    MicronutrientAction,
    MicronutrientRecommendations,
    MonitoringSuggestion,
    NutrientStatus,
    NutrientStatusLevel,
    Severity,
    SupplementSuggestion,
)
from ibd_nutrition.domain.nutrients import (
    NUTRIENT_LABELS,
    NUTRIENT_UNITS,
    NutrientVector,
    finite_or_zero,
)
from ibd_nutrition.domain.profile import LabResult, LabStatus
from ibd_nutrition.domain.requirements import (
    TRACKED_MICROS,
    TRACKED_NUTRIENTS,
    DailyMicronutrientIntake,
    NutrientRequirements,
)
from ibd_nutrition.services import guidance

_logger = logging.getLogger(__name__)

DEFICIENT_BELOW = 50.0
SUBOPTIMAL_BELOW = 80.0
OPTIMAL_RANGE = (90.0, 110.0)
EXCESSIVE_ABOVE = 150.0
MAX_IMMEDIATE_ACTIONS = 3
# Reported when intake / requirement overflows.
MAX_PERCENTAGE = 1e9

_DEFICIENCY_BANDS = (
    (70.0, Severity.MILD),
    (40.0, Severity.MODERATE),
    (20.0, Severity.SEVERE),
)
_EXCESS_BANDS = (
    (200.0, Severity.MILD),
    (300.0, Severity.MODERATE),
    (500.0, Severity.SEVERE),
)

_LAB_ABSORPTION_FACTOR = {
    LabStatus.CRITICAL: 0.5,
    LabStatus.LOW: 0.7,
    LabStatus.NORMAL: 1.0,
    LabStatus.HIGH: 1.2,
}


def intake_percentage(intake: float, requirement: float) -> float:
    """Intake as a percentage of requirement; callers skip zero requirements."""
    ratio = finite_or_zero(intake) / requirement * 100.0
    if math.isinf(ratio):
        return MAX_PERCENTAGE
    return min(MAX_PERCENTAGE, finite_or_zero(ratio))


def classify_status(percentage: float) -> NutrientStatusLevel:
    if percentage < DEFICIENT_BELOW:
        return NutrientStatusLevel.DEFICIENT
    if percentage < SUBOPTIMAL_BELOW:
        return NutrientStatusLevel.SUBOPTIMAL
    low, high = OPTIMAL_RANGE
    if low <= percentage <= high:
        return NutrientStatusLevel.OPTIMAL
    if percentage <= EXCESSIVE_ABOVE:
        return NutrientStatusLevel.ADEQUATE
    return NutrientStatusLevel.EXCESSIVE


def deficiency_severity(percentage: float) -> Severity:
    """Severity of a shortfall; lower percentages are never less severe."""
    for floor, severity in _DEFICIENCY_BANDS:
        if percentage >= floor:
            return severity
    return Severity.CRITICAL


def excess_severity(percentage: float) -> Severity:
    for ceiling, severity in _EXCESS_BANDS:
        if percentage <= ceiling:
            return severity
    return Severity.CRITICAL


def find_lab_result(
    nutrient: str, lab_results: Iterable[LabResult]
) -> LabResult | None:
    """Return the first lab result naming this nutrient."""
    aliases = guidance.LAB_ALIASES.get(nutrient)
    if not aliases:
        return None
    for lab in lab_results:
        label = lab.nutrient.lower()
        if any(alias in label for alias in aliases):
            return lab
    return None


def absorption_rate(nutrient: str, lab: LabResult | None) -> float:
    rate = guidance.ABSORPTION_BASE_RATES.get(
        nutrient, guidance.DEFAULT_ABSORPTION_RATE
    )
    if lab is not None:
        rate *= _LAB_ABSORPTION_FACTOR[lab.status]
    return min(rate, 1.0)


def ibd_factors(nutrient: str, lab: LabResult | None) -> tuple[str, ...]:
    factors = guidance.IBD_FACTORS.get(nutrient, ())
    if (
        nutrient == "vitamin_d"
        and lab is not None
        and lab.status in (LabStatus.LOW, LabStatus.CRITICAL)
    ):
        factors += ("Severe deficiency detected",)
    return factors


@dataclass
class DeficiencyAnalyzer:
    """Compare intake to requirements and build prioritized recommendations.

    Lab results only add context (absorption, monitoring, warnings); the
    numeric classification depends on intake and requirements alone.
    """

    debug: bool = False

    def analyze(
        self,
        intake: NutrientVector,
        requirements: NutrientRequirements,
        lab_results: Iterable[LabResult] = (),
        nutrients: Iterable[str] = TRACKED_NUTRIENTS,
    ) -> DeficiencyReport:
        """Classify each nutrient with a positive requirement."""
        labs = tuple(lab_results)
        deficiencies: list[Deficiency] = []
        excesses: list[Excess] = []
        statuses: dict[str, NutrientStatus] = {}
        for nutrient in nutrients:
            requirement = finite_or_zero(requirements.get(nutrient))
            if requirement <= 0:
                continue
            current = finite_or_zero(intake.get(nutrient))
            percentage = intake_percentage(current, requirement)
            status = classify_status(percentage)
            lab = find_lab_result(nutrient, labs)
            statuses[nutrient] = NutrientStatus(
                nutrient=nutrient,
                current_intake=current,
                required_intake=requirement,
                percentage=percentage,
                status=status,
                absorption_rate=absorption_rate(nutrient, lab),
                ibd_factors=ibd_factors(nutrient, lab),
            )
            if percentage < SUBOPTIMAL_BELOW:
                deficiencies.append(
                    self._deficiency(nutrient, current, requirement, percentage, lab)
                )
            elif percentage > EXCESSIVE_ABOVE:
                excesses.append(
                    self._excess(nutrient, current, requirement, percentage)
                )

        deficiencies.sort(key=lambda item: (-item.severity.rank, item.percentage))
        excesses.sort(key=lambda item: -item.percentage)
        report = DeficiencyReport(
            deficiencies=tuple(deficiencies),
            excesses=tuple(excesses),
            statuses=statuses,
            recommendations=self.recommend(deficiencies, labs),
        )
        if self.debug:
            _logger.info(
                "Deficiency analysis: deficiencies=%s excesses=%s",
                [item.nutrient for item in report.deficiencies],
                [item.nutrient for item in report.excesses],
            )
        return report

    def analyze_micronutrients(
        self,
        daily_intake: DailyMicronutrientIntake,
        lab_results: Iterable[LabResult] = (),
    ) -> IBDMicronutrientAnalysis:
        """Report on the IBD-relevant micronutrients of a daily intake."""
        report = self.analyze(
            daily_intake.total_intake,
            daily_intake.requirements,
            lab_results,
            nutrients=TRACKED_MICROS,
        )
        return IBDMicronutrientAnalysis(
            daily_intake=daily_intake,
            deficiencies=report.deficiencies,
            excesses=report.excesses,
            ibd_specific_nutrients=report.statuses,
            recommendations=report.recommendations,
        )

    def recommend(
        self, deficiencies: Iterable[Deficiency], lab_results: Iterable[LabResult] = ()
    ) -> MicronutrientRecommendations:
        """Build actions and suggestions from deficiencies ordered worst first."""
        ordered = sorted(
            deficiencies, key=lambda item: (-item.severity.rank, item.percentage)
        )
        actions = []
        for deficiency in ordered[:MAX_IMMEDIATE_ACTIONS]:
            priority = guidance.ACTION_PRIORITY[deficiency.severity]
            actions.append(
                MicronutrientAction(
                    nutrient=deficiency.nutrient,
                    action=(
                        deficiency.recommendations[0]
                        if deficiency.recommendations
                        else "Consult healthcare provider"
                    ),
                    priority=priority,
                    timeframe=guidance.ACTION_TIMEFRAME[priority],
                )
            )

        supplements = []
        foods = []
        for deficiency in ordered:
            label = NUTRIENT_LABELS.get(deficiency.nutrient, deficiency.nutrient)
            supplement = guidance.SUPPLEMENTS.get(deficiency.nutrient)
            if supplement is not None and deficiency.severity is not Severity.MILD:
                name, base_dose, unit = supplement
                multiplier = guidance.DOSE_MULTIPLIER[deficiency.severity]
                supplements.append(
                    SupplementSuggestion(
                        nutrient=deficiency.nutrient,
                        supplement_name=name,
                        dosage=base_dose * multiplier,
                        unit=unit,
                        frequency="Daily",
                        reasoning=f"Address {deficiency.severity.value} deficiency",
                        interactions=guidance.supplement_interactions(
                            deficiency.nutrient
                        ),
                    )
                )
            source = guidance.FOOD_SOURCES.get(deficiency.nutrient)
            if source is not None:
                food_name, serving_size, preparation = source
                foods.append(
                    FoodRecommendation(
                        nutrient=deficiency.nutrient,
                        food_name=food_name,
                        serving_size=serving_size,
                        frequency="2-3 times per week",
                        preparation=preparation,
                        reasoning=f"Natural source of {label}",
                    )
                )

        monitoring = [
            MonitoringSuggestion(
                nutrient=lab.nutrient,
                test_type="Blood test",
                frequency="Every 3 months",
                target_range=lab.reference_range,
                reasoning="Monitor improvement of deficiency",
            )
            for lab in lab_results
            if lab.status in (LabStatus.LOW, LabStatus.CRITICAL)
        ]
        return MicronutrientRecommendations(
            immediate_actions=tuple(actions),
            supplement_suggestions=tuple(supplements),
            food_recommendations=tuple(foods),
            monitoring_suggestions=tuple(monitoring),
        )

    def _deficiency(  # noqa: PLR0913
        self,
        nutrient: str,
        current: float,
        requirement: float,
        percentage: float,
        lab: LabResult | None,
    ) -> Deficiency:
        severity = deficiency_severity(percentage)
        recommendations = guidance.deficiency_recommendations(nutrient, severity)
        if (
            nutrient == "vitamin_d"
            and lab is not None
            and lab.status is LabStatus.CRITICAL
        ):
            recommendations += (guidance.CRITICAL_LAB_WARNING,)
        return Deficiency(
            nutrient=nutrient,
            current_level=current,
            recommended_level=requirement,
            percentage=percentage,
            severity=severity,
            unit=NUTRIENT_UNITS.get(nutrient, ""),
            symptoms=guidance.deficiency_symptoms(nutrient, severity),
            recommendations=recommendations,
        )

    def _excess(
        self, nutrient: str, current: float, requirement: float, percentage: float
    ) -> Excess:
        return Excess(
            nutrient=nutrient,
            current_level=current,
            recommended_level=requirement,
            percentage=percentage,
            severity=excess_severity(percentage),
            unit=NUTRIENT_UNITS.get(nutrient, ""),
            upper_limit=guidance.UPPER_LIMITS.get(nutrient),
            risks=guidance.excess_risks(nutrient),
            recommendations=guidance.excess_recommendations(nutrient),
        )
