"""Domain models for deficiency, excess and report outputs."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from types import MappingProxyType

from ibd_nutrition.domain.requirements import DailyMicronutrientIntake


class Severity(Enum):
    """Ordinal severity of a deficiency or excess."""

    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    Severity.MILD: 1,
    Severity.MODERATE: 2,
    Severity.SEVERE: 3,
    Severity.CRITICAL: 4,
}


class NutrientStatusLevel(Enum):
    DEFICIENT = "deficient"
    SUBOPTIMAL = "suboptimal"
    ADEQUATE = "adequate"
    OPTIMAL = "optimal"
    EXCESSIVE = "excessive"


class ActionPriority(Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class Deficiency:
    """Nutrient below its target."""

    nutrient: str
    current_level: float
    recommended_level: float
    percentage: float
    severity: Severity
    unit: str = ""
    symptoms: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()


@dataclass(frozen=True)
class Excess:
    """Nutrient well above its target."""

    nutrient: str
    current_level: float
    recommended_level: float
    percentage: float
    severity: Severity
    unit: str = ""
    upper_limit: float | None = None
    risks: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()

    @property
    def above_upper_limit(self) -> bool:
        return self.upper_limit is not None and self.current_level > self.upper_limit


@dataclass(frozen=True)
class NutrientStatus:
    """Status of one IBD-relevant nutrient."""

    nutrient: str
    current_intake: float
    required_intake: float
    percentage: float
    status: NutrientStatusLevel
    absorption_rate: float
    ibd_factors: tuple[str, ...] = ()


@dataclass(frozen=True)
class MicronutrientAction:
    nutrient: str
    action: str
    priority: ActionPriority
    timeframe: str


@dataclass(frozen=True)
class SupplementSuggestion:
    nutrient: str
    supplement_name: str
    dosage: float
    unit: str
    frequency: str
    reasoning: str
    interactions: tuple[str, ...] = ()


@dataclass(frozen=True)
class FoodRecommendation:
    nutrient: str
    food_name: str
    serving_size: str
    frequency: str
    preparation: str
    reasoning: str


@dataclass(frozen=True)
class MonitoringSuggestion:
    nutrient: str
    test_type: str
    frequency: str
    target_range: str
    reasoning: str


@dataclass(frozen=True)
class MicronutrientRecommendations:
    immediate_actions: tuple[MicronutrientAction, ...] = ()
    supplement_suggestions: tuple[SupplementSuggestion, ...] = ()
    food_recommendations: tuple[FoodRecommendation, ...] = ()
    monitoring_suggestions: tuple[MonitoringSuggestion, ...] = ()


@dataclass(frozen=True)
class DeficiencyReport:
    """Classification of an intake against requirements."""

    deficiencies: tuple[Deficiency, ...]
    excesses: tuple[Excess, ...]
    statuses: Mapping[str, NutrientStatus]
    recommendations: MicronutrientRecommendations

    def __post_init__(self) -> None:
        object.__setattr__(self, "statuses", MappingProxyType(dict(self.statuses)))


@dataclass(frozen=True)
class IBDMicronutrientAnalysis:
    """Micronutrient report for the IBD-relevant nutrients."""

    daily_intake: DailyMicronutrientIntake
    deficiencies: tuple[Deficiency, ...]
    excesses: tuple[Excess, ...]
    ibd_specific_nutrients: Mapping[str, NutrientStatus]
    recommendations: MicronutrientRecommendations

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "ibd_specific_nutrients",
            MappingProxyType(dict(self.ibd_specific_nutrients)),
        )


@dataclass(frozen=True)
class WeeklyTrend:
    """Actual vs recommended amount for one nutrient over the window."""

    nutrient: str
    actual: float
    recommended: float
    unit: str
    percentage: float
    status: NutrientStatusLevel


class FiberIntakeLevel(Enum):
    LOW = "low"
    IN_RANGE = "in_range"
    HIGH = "high"


class DehydrationRisk(Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


@dataclass(frozen=True)
class FiberAnalysis:
    """Average daily fiber with an estimated soluble/insoluble split."""

    current_intake: float
    recommended_intake: float
    soluble_fiber: float
    insoluble_fiber: float
    level: FiberIntakeLevel
    recommendation: str
    ibd_considerations: str


@dataclass(frozen=True)
class HydrationAnalysis:
    current_intake: float
    recommended_intake: float
    dehydration_risk: DehydrationRisk
    electrolyte_balance: str
    recommendation: str


@dataclass(frozen=True)
class NutritionAnalysis:
    """Window nutrition report consumed by the dashboard."""

    start: date
    end: date
    entry_count: int
    calories: int
    protein: int
    carbs: int
    fiber: int
    fat: int
    avg_calories: float
    avg_protein: float
    avg_carbs: float
    avg_fiber: float
    avg_fat: float
    deficiencies: tuple[Deficiency, ...] = ()
    recommendations: tuple[str, ...] = ()
    overall_score: int = 0
    weekly_trends: tuple[WeeklyTrend, ...] = field(default_factory=tuple)
    fiber_analysis: FiberAnalysis | None = None
    # None when no entry in the window logged fluid intake.
    hydration: HydrationAnalysis | None = None
