"""Global Factor aggregation.

Each of the 5 Global Factors is the mean of its mapped primary factor
scores. When none of those were scored the factor falls back to the mean of
all category scores times a per-factor adjustment, and when there are no
category scores at all, to a fixed baseline. The result always holds
exactly the 5 factors.
"""

from typing import Dict, Mapping, Tuple

from pf16.utils.constants import FallbackConstants, GlobalFactor, ScoreSource, ScoringConstants, range_midpoint
from pf16.utils.helpers import clamp_score, mean_or_none
from pf16.utils.logger import get_component_logger

logger = get_component_logger("scoring")


def _score_factor(factor: GlobalFactor, category_scores: Mapping[str, float]) -> Tuple[float, ScoreSource]:
    mapped = [
        float(category_scores[primary.value])
        for primary in factor.primary_factors
        if primary.value in category_scores
    ]
    if mapped:
        return sum(mapped) / len(mapped), ScoreSource.PRIMARY

    overall = mean_or_none(float(v) for v in category_scores.values())
    if overall is not None:
        multiplier = range_midpoint(FallbackConstants.GLOBAL_FACTOR_ADJUSTMENT_RANGES[factor])
        return overall * multiplier, ScoreSource.CATEGORY_MEAN

    return range_midpoint(FallbackConstants.GLOBAL_FACTOR_BASELINE_RANGES[factor]), ScoreSource.BASELINE


def aggregate_global_factors(category_scores: Mapping[str, float]) -> Dict[str, float]:
    """Compute the 5 Global Factor scores.

    Args:
        category_scores: Category label to 0-100 score (may be empty)

    Returns:
        Dict[str, float]: All 5 Global Factors in canonical order, clamped to
        0-100 and rounded to one decimal
    """
    scores: Dict[str, float] = {}
    for factor in GlobalFactor:
        raw, source = _score_factor(factor, category_scores)
        if source is not ScoreSource.PRIMARY:
            logger.info(f"{factor.value} has no scored primary factors; using {source.value} fallback")
        scores[factor.value] = round(clamp_score(raw), ScoringConstants.GLOBAL_SCORE_PRECISION)
    return scores


def global_factor_sources(category_scores: Mapping[str, float]) -> Dict[str, str]:
    """Report which fallback branch produced each Global Factor score."""
    return {
        factor.value: _score_factor(factor, category_scores)[1].value
        for factor in GlobalFactor
    }


__all__ = ["aggregate_global_factors", "global_factor_sources"]
