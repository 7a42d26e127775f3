"""Report-level entry points composing the engine services."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from ibd_nutrition.domain.analysis import (
    IBDMicronutrientAnalysis,
    NutritionAnalysis,
    WeeklyTrend,
)
from ibd_nutrition.domain.catalog import DescriptionEstimate
from ibd_nutrition.domain.flare import FlareRiskScore
from ibd_nutrition.domain.journal import JournalEntry
from ibd_nutrition.domain.nutrients import NUTRIENT_UNITS
from ibd_nutrition.domain.profile import DEFAULT_PROFILE, MicronutrientProfile
from ibd_nutrition.domain.requirements import TRACKED_NUTRIENTS, NutrientRequirements
from ibd_nutrition.domain.stats import WeeklyNutritionTotals
from ibd_nutrition.services.aggregation import NutritionAggregator
from ibd_nutrition.services.deficiency import (
    DeficiencyAnalyzer,
    classify_status,
    intake_percentage,
)
from ibd_nutrition.services.flare_risk import FlareRiskScorer
from ibd_nutrition.services.ibd_insights import IBDInsightAnalyzer
from ibd_nutrition.services.matching import FoodMatcher
from ibd_nutrition.services.portions import PortionScaler
from ibd_nutrition.services.requirements import RequirementProfileCalculator
from ibd_nutrition.services.scoring import NutritionScoreCalculator

_logger = logging.getLogger(__name__)


@dataclass
class NutritionAnalysisService:
    """One call per report: nutrition, micronutrients, flare risk, estimates."""

    matcher: FoodMatcher
    scaler: PortionScaler
    aggregator: NutritionAggregator
    requirements: RequirementProfileCalculator
    deficiency_analyzer: DeficiencyAnalyzer
    flare_scorer: FlareRiskScorer
    score_calculator: NutritionScoreCalculator
    insight_analyzer: IBDInsightAnalyzer
    default_days: int = 7
    debug: bool = False

    def analyze_nutrition(
        self,
        entries: Iterable[JournalEntry],
        profile: MicronutrientProfile | None,
        end: date,
        days: int | None = None,
    ) -> NutritionAnalysis:
        """Summarize the window ending at end against personalized targets."""
        resolved = self._resolve_profile(profile)
        window = self.aggregator.window(entries, end, days or self.default_days)
        daily_targets = self.requirements.daily(resolved)
        average = window.average
        report = self.deficiency_analyzer.analyze(
            average, daily_targets, resolved.lab_results
        )
        recommendations: list[str] = []
        for deficiency in report.deficiencies:
            if deficiency.recommendations:
                text = deficiency.recommendations[0]
                if text not in recommendations:
                    recommendations.append(text)
        totals = window.totals
        hydration_ml = window.average_hydration_ml
        analysis = NutritionAnalysis(
            start=window.start,
            end=window.end,
            entry_count=window.entry_count,
            calories=round(totals.calories),
            protein=round(totals.protein),
            carbs=round(totals.carbs),
            fiber=round(totals.fiber),
            fat=round(totals.fat),
            avg_calories=average.calories,
            avg_protein=average.protein,
            avg_carbs=average.carbs,
            avg_fiber=average.fiber,
            avg_fat=average.fat,
            deficiencies=report.deficiencies,
            recommendations=tuple(recommendations),
            overall_score=self.score_calculator.score(report.deficiencies, average),
            weekly_trends=weekly_trends(
                window, daily_targets.scaled_to(window.days)
            ),
            fiber_analysis=self.insight_analyzer.analyze_fiber(average.fiber),
            hydration=(
                None
                if hydration_ml is None
                else self.insight_analyzer.analyze_hydration(hydration_ml)
            ),
        )
        if self.debug:
            _logger.info(
                "Nutrition analysis: end=%s entries=%s score=%s",
                end,
                analysis.entry_count,
                analysis.overall_score,
            )
        return analysis

    def analyze_micronutrients(
        self,
        entries: Iterable[JournalEntry],
        profile: MicronutrientProfile | None,
        end: date,
        days: int | None = None,
    ) -> IBDMicronutrientAnalysis:
        """Average daily micronutrient intake, supplements included."""
        resolved = self._resolve_profile(profile)
        daily_intake = self.aggregator.daily_micronutrient_intake(
            entries,
            resolved,
            self.requirements.daily(resolved),
            end,
            days or self.default_days,
        )
        return self.deficiency_analyzer.analyze_micronutrients(
            daily_intake, resolved.lab_results
        )

    def score_flare_risk(self, entries: Iterable[JournalEntry]) -> FlareRiskScore:
        return self.flare_scorer.score(entries)

    def estimate_description(self, description: str) -> DescriptionEstimate:
        """Detect foods in free text and return their teen-portion totals."""
        names = self.matcher.match(description)
        return DescriptionEstimate(
            description=description,
            detected_foods=tuple(sorted(names)),
            totals=self.scaler.scale_all(names),
        )

    def requirements_for(
        self, profile: MicronutrientProfile | None, days: int = 1
    ) -> NutrientRequirements:
        """Targets for a period, shared by every report and chart."""
        return self.requirements.for_days(profile, days)

    def _resolve_profile(
        self, profile: MicronutrientProfile | None
    ) -> MicronutrientProfile:
        if profile is None:
            _logger.debug("No profile supplied, using default profile")
            return DEFAULT_PROFILE
        return profile


def weekly_trends(
    window: WeeklyNutritionTotals, targets: NutrientRequirements
) -> tuple[WeeklyTrend, ...]:
    """Compare window totals with targets for the same number of days."""
    trends = []
    for nutrient in TRACKED_NUTRIENTS:
        recommended = targets.get(nutrient)
        if recommended <= 0:
            continue
        actual = window.totals.get(nutrient)
        percentage = intake_percentage(actual, recommended)
        trends.append(
            WeeklyTrend(
                nutrient=nutrient,
                actual=actual,
                recommended=recommended,
                unit=NUTRIENT_UNITS[nutrient],
                percentage=percentage,
                status=classify_status(percentage),
            )
        )
    return tuple(trends)
