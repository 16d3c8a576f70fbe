"""Constants and enums for the 16PF scoring engine.

This module defines the primary and global factor enums, the fixed
primary-to-global factor mapping, the Likert label table and every numeric
threshold and fallback constant used by the scoring pipeline.
"""

import re
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple


# ============================================================================
# CORE ENUMS
# ============================================================================

class PrimaryFactor(str, Enum):
    """The 16 primary personality factors, keyed by their category label."""

    A = "Factor A"
    B = "Factor B"
    C = "Factor C"
    E = "Factor E"
    F = "Factor F"
    G = "Factor G"
    H = "Factor H"
    I = "Factor I"
    L = "Factor L"
    M = "Factor M"
    N = "Factor N"
    O = "Factor O"
    Q1 = "Factor Q1"
    Q2 = "Factor Q2"
    Q3 = "Factor Q3"
    Q4 = "Factor Q4"

    @property
    def code(self) -> str:
        """Get the short factor code (A, B, ..., Q4)."""
        return self.name

    @property
    def name_full(self) -> str:
        """Get the trait name of the factor."""
        return PRIMARY_FACTOR_NAMES[self]

    @property
    def description(self) -> str:
        """Get the low-pole vs. high-pole description of the factor."""
        return PRIMARY_FACTOR_DESCRIPTIONS[self]

    @classmethod
    def get_all_labels(cls) -> List[str]:
        """Get all category labels as a list."""
        return [factor.value for factor in cls]

    @classmethod
    def from_label(cls, label: str) -> "PrimaryFactor":
        """Get a factor from any accepted category spelling.

        Accepted forms are "Factor A", "A" and "Warmth (A)", in any case.

        Args:
            label: Category label as stored with a question

        Returns:
            PrimaryFactor: Corresponding factor

        Raises:
            ValueError: If the label does not name a primary factor
        """
        factor = cls.parse(label)
        if factor is None:
            raise ValueError(f"Invalid primary factor label: {label!r}")
        return factor

    @classmethod
    def parse(cls, label: Optional[str]) -> Optional["PrimaryFactor"]:
        """Lenient variant of from_label that returns None for unknown labels."""
        if not isinstance(label, str):
            return None
        match = _FACTOR_LABEL_PATTERN.match(label.strip())
        if not match:
            return None
        code = (match.group("code") or match.group("paren") or "").upper()
        return cls.__members__.get(code)


class GlobalFactor(str, Enum):
    """The 5 higher-order Global Factors."""

    EXTRAVERSION = "Extraversion"
    ANXIETY = "Anxiety"
    TOUGH_MINDEDNESS = "Tough-mindedness"
    INDEPENDENCE = "Independence"
    SELF_CONTROL = "Self-Control"

    @property
    def description(self) -> str:
        """Get description of the global factor."""
        return GLOBAL_FACTOR_DESCRIPTIONS[self]

    @property
    def primary_factors(self) -> Tuple[PrimaryFactor, ...]:
        """Get the primary factors this global factor is computed from."""
        return GLOBAL_FACTOR_MAP[self]

    @classmethod
    def get_all_names(cls) -> List[str]:
        """Get all global factor names in canonical order."""
        return [factor.value for factor in cls]


class ScoreSource(str, Enum):
    """Which branch of the fallback chain produced a global factor score."""

    PRIMARY = "primary"
    CATEGORY_MEAN = "category_mean"
    BASELINE = "baseline"


class ReliabilityStatus(str, Enum):
    """Reliability verdicts for a completed attempt."""

    RELIABLE = "Reliable"
    INVALID = "Invalid"
    TOO_FAST = "Questionable - Too Fast"
    TOO_SLOW = "Questionable - Too Slow"
    PATTERN_RESPONDING = "Questionable - Pattern Responding"


_FACTOR_LABEL_PATTERN = re.compile(
    r"^(?:(?:factor\s+)?(?P<code>Q[1-4]|[ABCEFGHILMNO])"
    r"|[A-Za-z\- ]+\((?P<paren>Q[1-4]|[ABCEFGHILMNO])\))$",
    re.IGNORECASE,
)


# ============================================================================
# FACTOR MAPPINGS
# ============================================================================

PRIMARY_FACTOR_NAMES: Mapping[PrimaryFactor, str] = MappingProxyType({
    PrimaryFactor.A: "Warmth",
    PrimaryFactor.B: "Reasoning",
    PrimaryFactor.C: "Emotional Stability",
    PrimaryFactor.E: "Dominance",
    PrimaryFactor.F: "Liveliness",
    PrimaryFactor.G: "Rule-Consciousness",
    PrimaryFactor.H: "Social Boldness",
    PrimaryFactor.I: "Sensitivity",
    PrimaryFactor.L: "Vigilance",
    PrimaryFactor.M: "Abstractedness",
    PrimaryFactor.N: "Privateness",
    PrimaryFactor.O: "Apprehension",
    PrimaryFactor.Q1: "Openness to Change",
    PrimaryFactor.Q2: "Self-Reliance",
    PrimaryFactor.Q3: "Perfectionism",
    PrimaryFactor.Q4: "Tension",
})

PRIMARY_FACTOR_DESCRIPTIONS: Mapping[PrimaryFactor, str] = MappingProxyType({
    PrimaryFactor.A: "Reserved vs. Warm",
    PrimaryFactor.B: "Concrete vs. Abstract",
    PrimaryFactor.C: "Reactive vs. Emotionally Stable",
    PrimaryFactor.E: "Deferential vs. Dominant",
    PrimaryFactor.F: "Serious vs. Lively",
    PrimaryFactor.G: "Expedient vs. Rule-Conscious",
    PrimaryFactor.H: "Shy vs. Socially Bold",
    PrimaryFactor.I: "Utilitarian vs. Sensitive",
    PrimaryFactor.L: "Trusting vs. Vigilant",
    PrimaryFactor.M: "Practical vs. Abstract",
    PrimaryFactor.N: "Forthright vs. Private",
    PrimaryFactor.O: "Self-Assured vs. Apprehensive",
    PrimaryFactor.Q1: "Traditional vs. Open to Change",
    PrimaryFactor.Q2: "Group-Oriented vs. Self-Reliant",
    PrimaryFactor.Q3: "Tolerates Disorder vs. Perfectionist",
    PrimaryFactor.Q4: "Relaxed vs. Tense",
})

GLOBAL_FACTOR_MAP: Mapping[GlobalFactor, Tuple[PrimaryFactor, ...]] = MappingProxyType({
    GlobalFactor.EXTRAVERSION: (PrimaryFactor.A, PrimaryFactor.F, PrimaryFactor.H, PrimaryFactor.N),
    GlobalFactor.ANXIETY: (PrimaryFactor.C, PrimaryFactor.L, PrimaryFactor.O, PrimaryFactor.Q4),
    GlobalFactor.TOUGH_MINDEDNESS: (PrimaryFactor.A, PrimaryFactor.I, PrimaryFactor.M, PrimaryFactor.Q1),
    GlobalFactor.INDEPENDENCE: (PrimaryFactor.E, PrimaryFactor.L, PrimaryFactor.Q1),
    GlobalFactor.SELF_CONTROL: (PrimaryFactor.G, PrimaryFactor.Q3),
})

GLOBAL_FACTOR_DESCRIPTIONS: Mapping[GlobalFactor, str] = MappingProxyType({
    GlobalFactor.EXTRAVERSION: "Social orientation and assertiveness",
    GlobalFactor.ANXIETY: "Emotional stability and stress response",
    GlobalFactor.TOUGH_MINDEDNESS: "Practical vs sensitive approach",
    GlobalFactor.INDEPENDENCE: "Self-reliance and leadership",
    GlobalFactor.SELF_CONTROL: "Discipline and organization",
})


# ============================================================================
# LIKERT SCALE
# ============================================================================

# Keys are lower-cased with "_" and "-" folded to spaces before lookup.
LIKERT_LABELS: Mapping[str, int] = MappingProxyType({
    "strongly disagree": 1,
    "disagree": 2,
    "neutral": 3,
    "agree": 4,
    "strongly agree": 5,
    "never": 1,
    "rarely": 2,
    "sometimes": 3,
    "often": 4,
    "always": 5,
})


# ============================================================================
# SCORING CONSTANTS
# ============================================================================

class ScoringConstants:
    """Constants for response normalization and score aggregation."""

    LIKERT_MIN = 1
    LIKERT_MAX = 5
    # Unrecognized textual answers resolve to the midpoint of the scale
    NEUTRAL_LIKERT_VALUE = 3

    MIN_SCORE = 0.0
    MAX_SCORE = 100.0
    CATEGORY_SCORE_PRECISION = 1
    GLOBAL_SCORE_PRECISION = 1

    # Only used when the global factor map is empty and no raw score exists
    DEFAULT_OVERALL_SCORE = 75

    # Record fields, in priority order
    QUESTION_ID_FIELDS: Tuple[str, ...] = ("questionId", "question_id", "id")
    VALUE_FIELDS: Tuple[str, ...] = ("selectedValue", "selectedAnswer", "answer", "value")
    CONTAINER_FIELDS: Tuple[str, ...] = ("responses", "detailedAnswers")

    # Records already normalized by the engine (a report's exported responses)
    RAW_VALUE_FIELDS: Tuple[str, ...] = ("rawValue", "raw_value")
    POSITION_FIELD = "position"

    # Keyed answer objects such as {"q1": 5, "q2": 4}; qN sits at position N-1
    KEYED_RESPONSE_KEY = re.compile(r"^q(\d+)$", re.IGNORECASE)
    MAX_KEYED_POSITION = 1000


class InsightThresholds:
    """Score thresholds for strength and development-area rules.

    Strength branches use strict lower bounds: a score of exactly 70 is a
    moderate strength, not a strong one.
    """

    STRONG = 70.0
    MODERATE_STRENGTH = 60.0
    CONCERN = 40.0
    MODERATE_CONCERN = 50.0

    # Anxiety is inverted: low anxiety is the strength condition
    ANXIETY_STABLE = 40.0
    ANXIETY_MODERATE_STABLE = 50.0
    ANXIETY_CONCERN = 60.0
    ANXIETY_MODERATE_CONCERN = 50.0
    ANXIETY_RISK = 70.0

    LOW_OVERALL_RISK = 40.0


class FallbackConstants:
    """Named constants for the missing-data fallback chains.

    Ranges are (low, high). Global factor fallbacks apply the midpoint of the
    range so results stay deterministic; tests assert against the ranges.
    """

    # Demo-mode synthetic profile, one range per primary factor
    CATEGORY_BASELINE_RANGES: Mapping[PrimaryFactor, Tuple[float, float]] = MappingProxyType({
        PrimaryFactor.A: (55.0, 75.0),
        PrimaryFactor.B: (50.0, 70.0),
        PrimaryFactor.C: (55.0, 75.0),
        PrimaryFactor.E: (50.0, 70.0),
        PrimaryFactor.F: (50.0, 70.0),
        PrimaryFactor.G: (55.0, 75.0),
        PrimaryFactor.H: (45.0, 65.0),
        PrimaryFactor.I: (45.0, 65.0),
        PrimaryFactor.L: (40.0, 60.0),
        PrimaryFactor.M: (45.0, 65.0),
        PrimaryFactor.N: (45.0, 65.0),
        PrimaryFactor.O: (35.0, 55.0),
        PrimaryFactor.Q1: (50.0, 70.0),
        PrimaryFactor.Q2: (45.0, 65.0),
        PrimaryFactor.Q3: (55.0, 75.0),
        PrimaryFactor.Q4: (35.0, 55.0),
    })

    # Multiplier applied to the mean of all category scores when none of a
    # global factor's primary factors were scored
    GLOBAL_FACTOR_ADJUSTMENT_RANGES: Mapping[GlobalFactor, Tuple[float, float]] = MappingProxyType({
        GlobalFactor.EXTRAVERSION: (1.02, 1.08),
        GlobalFactor.ANXIETY: (0.80, 0.90),
        GlobalFactor.TOUGH_MINDEDNESS: (0.94, 1.00),
        GlobalFactor.INDEPENDENCE: (0.98, 1.04),
        GlobalFactor.SELF_CONTROL: (1.04, 1.12),
    })

    # Used when no category scores exist at all
    GLOBAL_FACTOR_BASELINE_RANGES: Mapping[GlobalFactor, Tuple[float, float]] = MappingProxyType({
        GlobalFactor.EXTRAVERSION: (55.0, 65.0),
        GlobalFactor.ANXIETY: (40.0, 50.0),
        GlobalFactor.TOUGH_MINDEDNESS: (50.0, 60.0),
        GlobalFactor.INDEPENDENCE: (52.0, 62.0),
        GlobalFactor.SELF_CONTROL: (58.0, 68.0),
    })

    DEFAULT_SYNTHETIC_SEED = 16


class ReliabilityConstants:
    """Defaults for response reliability checks (overridable via settings)."""

    MIN_SECONDS = 300
    MAX_SECONDS = 7200
    PATTERN_RUN_LIMIT = 10

    UNRELIABLE_PENALTY = 30
    TOO_FAST_PENALTY = 20
    TOO_SLOW_PENALTY = 15
    LOW_SCORE_PENALTY = 25
    LOW_SCORE_THRESHOLD = 20


def sten_to_percent(sten: float) -> float:
    """Position of a 1-10 sten value on the 0-100 scale."""
    return (sten - 1) / 9 * 100


class ProfileThresholds:
    """Thresholds for personality type, work style, leadership and hiring tiers.

    The factor rules are written on the 1-10 sten scale and converted once,
    so "above sten 6" reads as a category score above 55.6.
    """

    HIGH_FACTOR = round(sten_to_percent(6), 1)
    LEADERSHIP_HIGH = round(sten_to_percent(7), 1)
    LEADERSHIP_MODERATE = round(sten_to_percent(5), 1)

    HIRE_STRONG = 75
    HIRE_WITH_SUPPORT = 60

    # Percentile = (sten - 1) * PERCENTILE_STEP, clamped
    PERCENTILE_STEP = 11.11
    PERCENTILE_MIN = 1
    PERCENTILE_MAX = 99


# Upper bound (inclusive) of each level band on the 0-100 scale
PRIMARY_FACTOR_LEVELS: Tuple[Tuple[float, str], ...] = (
    (20.0, "Very Low"),
    (40.0, "Low"),
    (60.0, "Average"),
    (80.0, "High"),
    (100.0, "Very High"),
)

# Lower bound (inclusive) of each overall performance band
PERFORMANCE_LEVELS: Tuple[Tuple[float, str], ...] = (
    (90.0, "Exceptional"),
    (80.0, "Excellent"),
    (70.0, "Good"),
    (60.0, "Satisfactory"),
    (50.0, "Below Average"),
)
LOWEST_PERFORMANCE_LEVEL = "Poor"


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================

def get_primary_factor_level(score: float) -> str:
    """Get the level label for a primary factor score.

    Args:
        score: Category score on the 0-100 scale

    Returns:
        str: One of "Very Low", "Low", "Average", "High", "Very High"
    """
    for upper, label in PRIMARY_FACTOR_LEVELS:
        if score <= upper:
            return label
    return PRIMARY_FACTOR_LEVELS[-1][1]


def get_performance_level(score: float) -> str:
    """Get the performance label for an overall score."""
    for lower, label in PERFORMANCE_LEVELS:
        if score >= lower:
            return label
    return LOWEST_PERFORMANCE_LEVEL


def range_midpoint(bounds: Tuple[float, float]) -> float:
    """Midpoint of a (low, high) range."""
    low, high = bounds
    return (low + high) / 2


# Export all constants and enums
__all__ = [
    # Enums
    "PrimaryFactor",
    "GlobalFactor",
    "ScoreSource",
    "ReliabilityStatus",

    # Mappings
    "PRIMARY_FACTOR_NAMES",
    "PRIMARY_FACTOR_DESCRIPTIONS",
    "GLOBAL_FACTOR_MAP",
    "GLOBAL_FACTOR_DESCRIPTIONS",
    "LIKERT_LABELS",
    "PRIMARY_FACTOR_LEVELS",
    "PERFORMANCE_LEVELS",
    "LOWEST_PERFORMANCE_LEVEL",

    # Constants classes
    "ScoringConstants",
    "InsightThresholds",
    "FallbackConstants",
    "ReliabilityConstants",
    "ProfileThresholds",

    # Utility functions
    "get_primary_factor_level",
    "get_performance_level",
    "range_midpoint",
    "sten_to_percent",
]
