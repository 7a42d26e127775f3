"""Dependency container wiring for the engine."""

from dataclasses import dataclass

from ibd_nutrition.adapters.catalog_loader import load_catalog
from ibd_nutrition.app_logging import configure_logging
from ibd_nutrition.config import Settings
from ibd_nutrition.services.aggregation import NutritionAggregator
from ibd_nutrition.services.analysis import NutritionAnalysisService
from ibd_nutrition.services.catalog import FoodCatalog
from ibd_nutrition.services.deficiency import DeficiencyAnalyzer
from ibd_nutrition.services.flare_risk import FlareRiskScorer
from ibd_nutrition.services.ibd_insights import IBDInsightAnalyzer
from ibd_nutrition.services.matching import FoodMatcher
from ibd_nutrition.services.portions import PortionScaler
from ibd_nutrition.services.requirements import RequirementProfileCalculator
from ibd_nutrition.services.scoring import NutritionScoreCalculator


@dataclass
class EngineContainer:
    """Holds engine-wide dependencies."""

    settings: Settings
    catalog: FoodCatalog
    matcher: FoodMatcher
    scaler: PortionScaler
    aggregator: NutritionAggregator
    requirements: RequirementProfileCalculator
    deficiency_analyzer: DeficiencyAnalyzer
    flare_scorer: FlareRiskScorer
    score_calculator: NutritionScoreCalculator
    insight_analyzer: IBDInsightAnalyzer
    analysis_service: NutritionAnalysisService


def build_container(
    settings: Settings | None = None, catalog: FoodCatalog | None = None
) -> EngineContainer:
    """Create the default dependency container.

    Raises CatalogError when the configured catalog file cannot be loaded.
    """
    resolved_settings = settings or Settings()
    resolved_catalog = catalog
    if resolved_catalog is None:
        resolved_catalog = FoodCatalog(load_catalog(resolved_settings.catalog_path))
    debug = resolved_settings.debug
    matcher = FoodMatcher(
        catalog=resolved_catalog,
        min_token_length=resolved_settings.min_token_length,
        debug=debug,
    )
    scaler = PortionScaler(
        catalog=resolved_catalog, multiplier=resolved_settings.portion_multiplier
    )
    aggregator = NutritionAggregator(matcher=matcher, scaler=scaler, debug=debug)
    requirements = RequirementProfileCalculator(debug=debug)
    deficiency_analyzer = DeficiencyAnalyzer(debug=debug)
    flare_scorer = FlareRiskScorer(
        window_entries=resolved_settings.flare_window_entries, debug=debug
    )
    score_calculator = NutritionScoreCalculator(
        good_protein_g=resolved_settings.good_protein_g,
        good_fiber_g=resolved_settings.good_fiber_g,
        good_calories_kcal=resolved_settings.good_calories_kcal,
    )
    insight_analyzer = IBDInsightAnalyzer(
        fiber_target_g=resolved_settings.ibd_fiber_target_g,
        hydration_target_ml=resolved_settings.hydration_target_ml,
        debug=debug,
    )
    analysis_service = NutritionAnalysisService(
        matcher=matcher,
        scaler=scaler,
        aggregator=aggregator,
        requirements=requirements,
        deficiency_analyzer=deficiency_analyzer,
        flare_scorer=flare_scorer,
        score_calculator=score_calculator,
        insight_analyzer=insight_analyzer,
        default_days=resolved_settings.analysis_window_days,
        debug=debug,
    )
    return EngineContainer(
        settings=resolved_settings,
        catalog=resolved_catalog,
        matcher=matcher,
        scaler=scaler,
        aggregator=aggregator,
        requirements=requirements,
        deficiency_analyzer=deficiency_analyzer,
        flare_scorer=flare_scorer,
        score_calculator=score_calculator,
        insight_analyzer=insight_analyzer,
        analysis_service=analysis_service,
    )


def create_engine(settings: Settings | None = None) -> EngineContainer:
    """Configure logging and build the container for an embedding host."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings)
    return build_container(resolved_settings)
