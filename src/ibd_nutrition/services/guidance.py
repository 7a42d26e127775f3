"""Reference guidance texts for deficiencies and excesses."""

from ibd_nutrition.domain.analysis import ActionPriority, Severity
from ibd_nutrition.domain.nutrients import NUTRIENT_LABELS

_SEVERITY_SYMPTOMS: dict[str, dict[Severity, tuple[str, ...]]] = {
    "vitamin_d": {
        Severity.MILD: ("Mild fatigue", "Slight muscle weakness"),
        Severity.MODERATE: ("Bone pain", "Muscle weakness", "Fatigue", "Mood changes"),
        Severity.SEVERE: (
            "Severe bone pain",
            "Muscle weakness",
            "Fatigue",
            "Depression",
            "Frequent infections",
        ),
        Severity.CRITICAL: (
            "Severe bone pain",
            "Muscle weakness",
            "Severe fatigue",
            "Depression",
            "Frequent infections",
            "Bone fractures",
        ),
    },
    "vitamin_b12": {
        Severity.MILD: ("Mild fatigue", "Slight memory issues"),
        Severity.MODERATE: ("Fatigue", "Weakness", "Memory problems", "Mood changes"),
        Severity.SEVERE: (
            "Severe fatigue",
            "Weakness",
            "Numbness",
            "Memory problems",
            "Depression",
        ),
        Severity.CRITICAL: (
            "Severe fatigue",
            "Weakness",
            "Numbness",
            "Severe memory problems",
            "Depression",
            "Neurological symptoms",
        ),
    },
    "iron": {
        Severity.MILD: ("Mild fatigue", "Slight weakness"),
        Severity.MODERATE: ("Fatigue", "Weakness", "Pale skin", "Shortness of breath"),
        Severity.SEVERE: (
            "Severe fatigue",
            "Weakness",
            "Pale skin",
            "Shortness of breath",
            "Heart palpitations",
        ),
        Severity.CRITICAL: (
            "Severe fatigue",
            "Weakness",
            "Very pale skin",
            "Severe shortness of breath",
            "Heart palpitations",
            "Dizziness",
        ),
    },
}

_SEVERITY_RECOMMENDATIONS: dict[str, dict[Severity, tuple[str, ...]]] = {
    "vitamin_d": {
        Severity.MILD: (
            "Increase sun exposure (15-30 minutes daily)",
            "Consider vitamin D3 supplement (1000-2000 IU)",
        ),
        Severity.MODERATE: (
            "Take vitamin D3 supplement (2000-4000 IU daily)",
            "Eat fatty fish (salmon, mackerel) 2-3 times per week",
            "Consider fortified foods",
        ),
        Severity.SEVERE: (
            "Take high-dose vitamin D3 supplement (4000-6000 IU daily)",
            "Eat fatty fish regularly",
            "Consider vitamin D testing every 3 months",
        ),
        Severity.CRITICAL: (
            "Immediate high-dose vitamin D3 supplement (6000+ IU daily)",
            "Consult healthcare provider for prescription vitamin D",
            "Monitor blood levels monthly",
            "Consider calcium and magnesium supplements",
        ),
    },
    "vitamin_b12": {
        Severity.MILD: (
            "Eat B12-rich foods (meat, fish, dairy)",
            "Consider B12 supplement (1000 mcg daily)",
        ),
        Severity.MODERATE: (
            "Take B12 supplement (1000-2000 mcg daily)",
            "Eat fortified foods",
            "Consider sublingual B12",
        ),
        Severity.SEVERE: (
            "Take high-dose B12 supplement (2000+ mcg daily)",
            "Consider B12 injections",
            "Monitor B12 levels every 3 months",
        ),
        Severity.CRITICAL: (
            "URGENT: Consider B12 injections",
            "High-dose oral B12 (5000+ mcg daily)",
            "Consult healthcare provider immediately",
            "Monitor neurological symptoms",
        ),
    },
    "iron": {
        Severity.MILD: (
            "Eat iron-rich foods (red meat, spinach)",
            "Consider iron supplement with vitamin C",
        ),
        Severity.MODERATE: (
            "Take iron supplement (18-27 mg daily)",
            "Take with vitamin C for better absorption",
            "Avoid coffee/tea with iron-rich meals",
        ),
        Severity.SEVERE: (
            "Take high-dose iron supplement (27-45 mg daily)",
            "Take with vitamin C",
            "Consider iron infusion if oral not effective",
        ),
        Severity.CRITICAL: (
            "URGENT: Consider iron infusion",
            "High-dose oral iron (45+ mg daily)",
            "Consult healthcare provider immediately",
            "Monitor for iron overload",
        ),
    },
}

_FIXED_SYMPTOMS: dict[str, tuple[str, ...]] = {
    "calcium": ("Bone pain", "Fractures", "Muscle cramps", "Numbness"),
    "zinc": (
        "Slow wound healing",
        "Frequent infections",
        "Loss of taste/smell",
        "Hair loss",
    ),
    "omega3": ("Inflammation", "Joint pain", "Depression", "Dry skin", "Poor memory"),
    "protein": ("Muscle loss", "Slow healing", "Fatigue"),
    "fiber": ("Irregular bowel movements", "Constipation"),
    "calories": ("Weight loss", "Fatigue", "Low energy"),
    "carbs": ("Low energy", "Fatigue"),
    "fat": ("Poor absorption of fat-soluble vitamins", "Dry skin"),
}

_FIXED_RECOMMENDATIONS: dict[str, tuple[str, ...]] = {
    "calcium": (
        "Increase dairy intake",
        "Consider calcium supplement",
        "Eat leafy greens",
        "Ensure adequate vitamin D",
    ),
    "zinc": (
        "Eat zinc-rich foods (oysters, beef, pumpkin seeds)",
        "Consider zinc supplement",
        "Avoid high-dose iron supplements",
    ),
    "omega3": (
        "Eat fatty fish 2-3 times per week",
        "Consider fish oil supplement",
        "Add flaxseeds, walnuts to diet",
    ),
    "protein": (
        "Increase protein intake to support healing and prevent muscle loss",
        "Add a lean protein source such as eggs, fish or Greek yogurt to each meal",
    ),
    "fiber": (
        "Gradually increase fiber with soluble sources like bananas and oatmeal",
        "Increase fiber only as tolerated during symptoms",
    ),
    "calories": (
        "Eat smaller, more frequent meals",
        "Add energy-dense foods such as avocado and nut butters",
    ),
    "carbs": ("Include easily digested grains such as rice and oatmeal",),
    "fat": ("Include healthy fats such as olive oil and avocado",),
}

CRITICAL_LAB_WARNING = (
    "URGENT: Critical deficiency detected - consult doctor immediately"
)

UPPER_LIMITS: dict[str, float] = {
    "vitamin_d": 100.0,
    "iron": 45.0,
    "zinc": 40.0,
    "calcium": 2500.0,
    "magnesium": 700.0,
}

_EXCESS_RISKS: dict[str, tuple[str, ...]] = {
    "vitamin_d": ("Hypercalcemia", "Kidney stones", "Nausea", "Vomiting", "Confusion"),
    "iron": ("Iron overload", "Liver damage", "Joint pain", "Heart problems"),
    "zinc": ("Copper deficiency", "Nausea", "Vomiting", "Immune suppression"),
    "calcium": ("Kidney stones", "Constipation"),
    "magnesium": ("Diarrhea",),
}

_EXCESS_RECOMMENDATIONS: dict[str, tuple[str, ...]] = {
    "vitamin_d": (
        "Reduce vitamin D supplement",
        "Monitor blood calcium levels",
        "Consult healthcare provider immediately",
    ),
    "iron": (
        "Reduce iron supplement",
        "Monitor ferritin levels",
        "Consider phlebotomy if severe",
    ),
    "zinc": (
        "Reduce zinc supplement",
        "Monitor copper levels",
        "Consider copper supplement",
    ),
    "calcium": ("Reduce calcium supplement", "Spread calcium intake across meals"),
    "magnesium": ("Reduce magnesium supplement",),
}

# nutrient -> (supplement name, base dose, unit)
SUPPLEMENTS: dict[str, tuple[str, float, str]] = {
    "vitamin_d": ("Vitamin D3", 2000.0, "IU"),
    "vitamin_b12": ("Methylcobalamin", 1000.0, "mcg"),
    "iron": ("Iron Bisglycinate", 18.0, "mg"),
    "calcium": ("Calcium Citrate", 600.0, "mg"),
    "zinc": ("Zinc Picolinate", 15.0, "mg"),
    "omega3": ("Fish Oil", 1000.0, "mg"),
}

DOSE_MULTIPLIER = {
    Severity.MILD: 1.0,
    Severity.MODERATE: 1.5,
    Severity.SEVERE: 2.0,
    Severity.CRITICAL: 3.0,
}

_SUPPLEMENT_INTERACTIONS: dict[str, tuple[str, ...]] = {
    "iron": ("Take with vitamin C", "Avoid with calcium", "Take on empty stomach"),
    "calcium": ("Take with vitamin D", "Avoid with iron", "Take with food"),
    "zinc": ("Avoid with iron", "Take with food", "Monitor copper levels"),
}

# nutrient -> (foods, serving size, preparation)
FOOD_SOURCES: dict[str, tuple[str, str, str]] = {
    "vitamin_d": ("Fatty fish (salmon, mackerel)", "3-4 oz", "Grilled or baked"),
    "vitamin_b12": (
        "Beef, fish, dairy products",
        "3-4 oz",
        "Grilled, baked, or steamed",
    ),
    "iron": (
        "Red meat, spinach, lentils",
        "1 cup cooked",
        "Lightly cooked to preserve nutrients",
    ),
    "calcium": ("Dairy products, leafy greens", "1 cup", "Raw or lightly cooked"),
    "zinc": ("Oysters, beef, pumpkin seeds", "1 oz", "Raw or lightly roasted"),
    "omega3": (
        "Fatty fish, flaxseeds, walnuts",
        "3-4 oz",
        "Grilled or baked (avoid frying)",
    ),
    "protein": ("Eggs, fish, Greek yogurt", "1 serving", "Baked, poached or steamed"),
    "fiber": ("Oatmeal, bananas, applesauce", "1 cup", "Cooked or peeled"),
}

ABSORPTION_BASE_RATES: dict[str, float] = {
    "vitamin_d": 0.7,
    "vitamin_b12": 0.6,
    "iron": 0.7,
    "calcium": 0.9,
    "zinc": 0.8,
    "omega3": 0.9,
}
DEFAULT_ABSORPTION_RATE = 0.8

IBD_FACTORS: dict[str, tuple[str, ...]] = {
    "vitamin_d": ("Reduced sun exposure", "Malabsorption"),
    "vitamin_b12": (
        "Ileal resection risk",
        "Medication interactions",
        "Intrinsic factor issues",
    ),
    "iron": (
        "Blood loss from inflammation",
        "Malabsorption",
        "Medication interactions",
    ),
    "calcium": ("Corticosteroid use", "Bone density concerns"),
    "zinc": ("Diarrhea losses", "Malabsorption"),
    "omega3": ("Anti-inflammatory needs", "Reduced fish intake"),
}

# Substrings that identify the lab result for a nutrient.
LAB_ALIASES: dict[str, tuple[str, ...]] = {
    "vitamin_d": ("vitamin d", "25-oh"),
    "vitamin_b12": ("b12", "cobalamin"),
    "vitamin_b9": ("folate", "folic"),
    "iron": ("iron", "ferritin"),
    "calcium": ("calcium",),
    "zinc": ("zinc",),
    "magnesium": ("magnesium",),
    "omega3": ("omega",),
}

ACTION_PRIORITY = {
    Severity.CRITICAL: ActionPriority.CRITICAL,
    Severity.SEVERE: ActionPriority.HIGH,
    Severity.MODERATE: ActionPriority.MEDIUM,
    Severity.MILD: ActionPriority.LOW,
}

ACTION_TIMEFRAME = {
    ActionPriority.CRITICAL: "Immediately",
    ActionPriority.HIGH: "Within 1 week",
    ActionPriority.MEDIUM: "Within 2 weeks",
    ActionPriority.LOW: "Within 1 month",
}


def deficiency_symptoms(nutrient: str, severity: Severity) -> tuple[str, ...]:
    if nutrient in _SEVERITY_SYMPTOMS:
        return _SEVERITY_SYMPTOMS[nutrient][severity]
    return _FIXED_SYMPTOMS.get(nutrient, ())


def deficiency_recommendations(nutrient: str, severity: Severity) -> tuple[str, ...]:
    if nutrient in _SEVERITY_RECOMMENDATIONS:
        return _SEVERITY_RECOMMENDATIONS[nutrient][severity]
    label = NUTRIENT_LABELS.get(nutrient, nutrient)
    return _FIXED_RECOMMENDATIONS.get(nutrient, (f"Increase {label.lower()} intake",))


def excess_risks(nutrient: str) -> tuple[str, ...]:
    return _EXCESS_RISKS.get(nutrient, ())


def excess_recommendations(nutrient: str) -> tuple[str, ...]:
    label = NUTRIENT_LABELS.get(nutrient, nutrient)
    return _EXCESS_RECOMMENDATIONS.get(
        nutrient, (f"Review portion sizes to reduce {label.lower()} intake",)
    )


def supplement_interactions(nutrient: str) -> tuple[str, ...]:
    return _SUPPLEMENT_INTERACTIONS.get(nutrient, ("Take with food",))
