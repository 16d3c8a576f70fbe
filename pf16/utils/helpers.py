"""Helper utilities for the 16PF scoring engine.

Small numeric and ranking helpers shared by the pipeline stages.
"""

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pf16.utils.constants import GlobalFactor, ProfileThresholds, ScoringConstants


def utc_now() -> datetime:
    """Current timezone-aware UTC time."""
    return datetime.now(timezone.utc)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with halves going away from zero.

    Python's round() uses banker's rounding (round(72.5) == 72); report
    scores use the conventional rule instead (72.5 -> 73).

    Args:
        value: Number to round
        ndigits: Number of decimal places

    Returns:
        float: Rounded value
    """
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def clamp_score(value: float) -> float:
    """Clamp a score into the 0-100 range."""
    return max(ScoringConstants.MIN_SCORE, min(ScoringConstants.MAX_SCORE, value))


def mean_or_none(values: Iterable[float]) -> Optional[float]:
    """Arithmetic mean, or None for an empty iterable."""
    items = list(values)
    if not items:
        return None
    return sum(items) / len(items)


def coerce_question_id(value: Any) -> Optional[str]:
    """Normalize a question identifier for comparison.

    Stored ids arrive as ints or strings depending on the source; both sides
    of every lookup go through this function.

    Args:
        value: Raw identifier

    Returns:
        Optional[str]: Identifier as a string, or None when unset
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value).strip()
    return text or None


def rank_global_factors(global_factor_scores: Mapping[str, float]) -> List[Tuple[GlobalFactor, float]]:
    """Rank global factors by score, highest first.

    Ties keep the canonical factor order (Extraversion, Anxiety,
    Tough-mindedness, Independence, Self-Control).

    Args:
        global_factor_scores: Scores keyed by global factor name

    Returns:
        List[Tuple[GlobalFactor, float]]: Ranked factors with scores
    """
    present = [
        (factor, float(global_factor_scores[factor.value]))
        for factor in GlobalFactor
        if factor.value in global_factor_scores
    ]
    return sorted(present, key=lambda item: item[1], reverse=True)


def get_top_factors(
    global_factor_scores: Mapping[str, float],
    top_n: int = 3
) -> List[GlobalFactor]:
    """Get the top N global factors by score.

    Args:
        global_factor_scores: Scores keyed by global factor name
        top_n: Number of top factors to return

    Returns:
        List[GlobalFactor]: Top factors, highest first
    """
    return [factor for factor, _ in rank_global_factors(global_factor_scores)[:top_n]]


def ordered_scores(scores: Mapping[str, float], order: Iterable[str]) -> Dict[str, float]:
    """Copy scores into a dict following a canonical key order."""
    return {key: scores[key] for key in order if key in scores}


def calculate_percentile(score: float) -> int:
    """Approximate norm percentile of a 0-100 category score.

    The score is read on the 1-10 sten scale and each sten step above 1 is
    worth ProfileThresholds.PERCENTILE_STEP points, clamped to 1-99.

    Args:
        score: Category score on the 0-100 scale

    Returns:
        int: Percentile between 1 and 99
    """
    sten_steps = clamp_score(float(score)) / ScoringConstants.MAX_SCORE * 9
    percentile = int(round_half_up(sten_steps * ProfileThresholds.PERCENTILE_STEP))
    return max(ProfileThresholds.PERCENTILE_MIN, min(ProfileThresholds.PERCENTILE_MAX, percentile))
