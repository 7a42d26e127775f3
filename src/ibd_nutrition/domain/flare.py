"""Flare risk domain models."""

from dataclasses import dataclass
from enum import Enum


class FlareRiskLevel(Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass(frozen=True)
class FlareRiskScore:
    """Heuristic 0-100 flare risk over recent entries."""

    score: int
    level: FlareRiskLevel
    entries_examined: int = 0
