"""Health profile domain models."""

from dataclasses import dataclass, field
from enum import Enum


class DiseaseActivity(Enum):
    """Current IBD disease activity."""

    REMISSION = "remission"
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"

    @classmethod
    def parse(cls, raw: object) -> "DiseaseActivity":
        """Parse a label, defaulting to remission."""
        text = str(raw or "").strip().lower()
        for member in cls:
            if member.value == text:
                return member
        return cls.REMISSION


class LabStatus(Enum):
    """Lab result interpretation."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass(frozen=True)
class LabResult:
    """A lab measurement; informational only for classification."""

    nutrient: str
    value: float
    unit: str
    status: LabStatus
    reference_range: str = ""


class SupplementCategory(Enum):
    VITAMIN = "vitamin"
    MINERAL = "mineral"
    TRACE_ELEMENT = "trace_element"
    OMEGA3 = "omega3"
    OTHER = "other"


class DosageUnit(Enum):
    """Dose units; only mass units and vitamin D IU convert to nutrient amounts."""

    MG = "mg"
    MCG = "mcg"
    G = "g"
    IU = "IU"
    ML = "ml"
    CAPSULES = "capsules"
    TABLETS = "tablets"
    DROPS = "drops"
    TSP = "tsp"
    TBSP = "tbsp"
    UNKNOWN = "unknown"


class SupplementFrequency(Enum):
    """How often a supplement is taken, with its per-day weight."""

    DAILY = "daily"
    TWICE_DAILY = "twice_daily"
    WEEKLY = "weekly"
    AS_NEEDED = "as_needed"

    @property
    def doses_per_day(self) -> float:
        return _DOSES_PER_DAY[self]


_DOSES_PER_DAY = {
    SupplementFrequency.DAILY: 1.0,
    SupplementFrequency.TWICE_DAILY: 2.0,
    SupplementFrequency.WEEKLY: 1.0 / 7.0,
    # Unscheduled doses are not counted toward daily intake.
    SupplementFrequency.AS_NEEDED: 0.0,
}


@dataclass(frozen=True)
class Supplement:
    """A supplement the user takes."""

    name: str
    category: SupplementCategory
    dosage: float
    unit: DosageUnit
    frequency: SupplementFrequency = SupplementFrequency.DAILY
    is_active: bool = True


@dataclass(frozen=True)
class MicronutrientProfile:
    """Health profile used to personalize nutrient targets."""

    age: int
    weight_kg: float
    height_cm: float
    gender: str = "Unknown"
    disease_activity: DiseaseActivity = DiseaseActivity.REMISSION
    lab_results: tuple[LabResult, ...] = field(default_factory=tuple)
    supplements: tuple[Supplement, ...] = field(default_factory=tuple)
    user_id: str | None = None


# Used whenever a caller cannot supply a profile. Targets change materially with
# it (energy, protein and iron in particular), so results computed from it are
# population estimates, not personal ones.
DEFAULT_PROFILE = MicronutrientProfile(
    age=30,
    weight_kg=70.0,
    height_cm=170.0,
    gender="Unknown",
    disease_activity=DiseaseActivity.REMISSION,
)
