"""Heuristic flare risk from recent symptom logs."""

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass

from ibd_nutrition.domain.flare import FlareRiskLevel, FlareRiskScore
from ibd_nutrition.domain.journal import JournalEntry

_logger = logging.getLogger(__name__)

MAX_SCORE = 100
HIGH_RISK_FROM = 70
MEDIUM_RISK_FROM = 40

# (threshold, points) pairs, highest threshold first.
_PAIN_POINTS = ((4, 30), (3, 15))
_URGENCY_POINTS = ((4, 25), (3, 10))
_STRESS_POINTS = ((4, 20), (3, 10))
_FATIGUE_POINTS = ((4, 15), (3, 5))
# Poor sleep scores; thresholds are upper bounds, lowest first.
_SLEEP_POINTS = ((2, 15), (3, 5))

BLOOD_POINTS = 40
MUCUS_POINTS = 20


def _at_least(value: int | None, table: tuple[tuple[int, int], ...]) -> int:
    if value is None:
        return 0
    for threshold, points in table:
        if value >= threshold:
            return points
    return 0


def _at_most(value: int | None, table: tuple[tuple[int, int], ...]) -> int:
    if value is None:
        return 0
    for threshold, points in table:
        if value <= threshold:
            return points
    return 0


def entry_points(entry: JournalEntry) -> int:
    """Return the additive symptom points of one entry."""
    points = 0
    if entry.blood_present:
        points += BLOOD_POINTS
    if entry.mucus_present:
        points += MUCUS_POINTS
    points += _at_least(entry.pain_severity, _PAIN_POINTS)
    points += _at_least(entry.urgency_level, _URGENCY_POINTS)
    points += _at_least(entry.stress_level, _STRESS_POINTS)
    points += _at_least(entry.fatigue_level, _FATIGUE_POINTS)
    points += _at_most(entry.sleep_quality, _SLEEP_POINTS)
    return points


def risk_level(score: int) -> FlareRiskLevel:
    if score >= HIGH_RISK_FROM:
        return FlareRiskLevel.HIGH
    if score >= MEDIUM_RISK_FROM:
        return FlareRiskLevel.MEDIUM
    return FlareRiskLevel.LOW


@dataclass
class FlareRiskScorer:
    """Average symptom points over the most recent entries."""

    window_entries: int = 7
    debug: bool = False

    def score(self, entries: Iterable[JournalEntry]) -> FlareRiskScore:
        recent = sorted(entries, key=lambda entry: entry.entry_date, reverse=True)
        recent = recent[: max(0, self.window_entries)]
        if not recent:
            return FlareRiskScore(score=0, level=FlareRiskLevel.LOW, entries_examined=0)
        average = sum(entry_points(entry) for entry in recent) / len(recent)
        # Halves round up: 42.5 scores 43.
        score = min(MAX_SCORE, math.floor(average + 0.5))
        result = FlareRiskScore(
            score=score, level=risk_level(score), entries_examined=len(recent)
        )
        if self.debug:
            _logger.info(
                "Flare risk: score=%s level=%s entries=%s",
                result.score,
                result.level.value,
                result.entries_examined,
            )
        return result
