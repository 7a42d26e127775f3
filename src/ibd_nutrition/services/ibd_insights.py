"""IBD-specific fiber and hydration insights."""

import logging
from dataclasses import dataclass

from ibd_nutrition.domain.analysis import (
    DehydrationRisk,
    FiberAnalysis,
    FiberIntakeLevel,
    HydrationAnalysis,
)
from ibd_nutrition.domain.nutrients import finite_or_zero

_logger = logging.getLogger(__name__)

FIBER_LOW_BELOW_G = 15.0
FIBER_HIGH_ABOVE_G = 35.0
# Estimated share of soluble fiber; the remainder is insoluble.
SOLUBLE_FIBER_SHARE = 0.3

HIGH_RISK_BELOW = 0.7
MODERATE_RISK_BELOW = 0.9

_FIBER_GUIDANCE = {
    FiberIntakeLevel.LOW: (
        "Gradually increase fiber intake with soluble fiber sources like "
        "bananas, applesauce, and oatmeal.",
        "Start with 5g/day and increase slowly. Focus on soluble fiber "
        "during flares.",
    ),
    FiberIntakeLevel.IN_RANGE: (
        "Maintain current fiber intake. Ensure good balance of soluble and "
        "insoluble fiber.",
        "Good fiber range for IBD. Continue monitoring symptoms.",
    ),
    FiberIntakeLevel.HIGH: (
        "Consider reducing fiber intake if experiencing symptoms. Focus on "
        "soluble fiber sources.",
        "High fiber may trigger symptoms in active flares. Monitor tolerance.",
    ),
}

_HYDRATION_GUIDANCE = {
    DehydrationRisk.HIGH: (
        "May be imbalanced",
        "Increase fluid intake to 8-10 cups daily. Include electrolyte-rich "
        "beverages.",
    ),
    DehydrationRisk.MODERATE: (
        "Generally balanced",
        "Slightly increase fluid intake. Monitor hydration during flares.",
    ),
    DehydrationRisk.LOW: (
        "Well balanced",
        "Maintain current hydration. Continue monitoring during flares.",
    ),
}


def fiber_level(grams: float) -> FiberIntakeLevel:
    """Band daily fiber; 15 g and 35 g themselves are in range."""
    if grams < FIBER_LOW_BELOW_G:
        return FiberIntakeLevel.LOW
    if grams > FIBER_HIGH_ABOVE_G:
        return FiberIntakeLevel.HIGH
    return FiberIntakeLevel.IN_RANGE


def dehydration_risk(current_ml: float, target_ml: float) -> DehydrationRisk:
    if current_ml < target_ml * HIGH_RISK_BELOW:
        return DehydrationRisk.HIGH
    if current_ml < target_ml * MODERATE_RISK_BELOW:
        return DehydrationRisk.MODERATE
    return DehydrationRisk.LOW


@dataclass
class IBDInsightAnalyzer:
    """Fiber tolerance and dehydration checks for an average logged day."""

    fiber_target_g: float = 25.0
    hydration_target_ml: float = 2000.0
    debug: bool = False

    def analyze_fiber(self, grams: float) -> FiberAnalysis:
        current = finite_or_zero(grams)
        level = fiber_level(current)
        recommendation, considerations = _FIBER_GUIDANCE[level]
        soluble = current * SOLUBLE_FIBER_SHARE
        return FiberAnalysis(
            current_intake=current,
            recommended_intake=self.fiber_target_g,
            soluble_fiber=soluble,
            insoluble_fiber=current - soluble,
            level=level,
            recommendation=recommendation,
            ibd_considerations=considerations,
        )

    def analyze_hydration(self, milliliters: float) -> HydrationAnalysis:
        current = finite_or_zero(milliliters)
        risk = dehydration_risk(current, self.hydration_target_ml)
        balance, recommendation = _HYDRATION_GUIDANCE[risk]
        if self.debug:
            _logger.info(
                "Hydration check: current=%s target=%s risk=%s",
                current,
                self.hydration_target_ml,
                risk.value,
            )
        return HydrationAnalysis(
            current_intake=current,
            recommended_intake=self.hydration_target_ml,
            dehydration_risk=risk,
            electrolyte_balance=balance,
            recommendation=recommendation,
        )
