"""Insight generation from Global Factor scores.

Strengths and development areas come from score thresholds, career
recommendations from pattern rules over the top ranked factors. All text is
looked up in pf16.utils.insight_tables.
"""

from typing import List, Mapping, Optional, Tuple

from pf16.models.report import CareerRecommendation, PersonalityInsights, ReliabilityAssessment
from pf16.utils.constants import GlobalFactor, InsightThresholds
from pf16.utils.helpers import get_top_factors
from pf16.utils.insight_tables import (
    CAREER_RULES,
    DEFAULT_CAREER_BUNDLE,
    DEVELOPMENT_STATEMENTS,
    GENERIC_DEVELOPMENT_AREAS,
    GENERIC_STRENGTHS,
    MODERATE_DEVELOPMENT_STATEMENTS,
    MODERATE_STRENGTH_STATEMENTS,
    STRENGTH_STATEMENTS,
    CareerBundle,
)
from pf16.utils.logger import get_component_logger

logger = get_component_logger("insights")

DEFAULT_TOP_N = 3


def _strengths_for(factor: GlobalFactor, score: float) -> Tuple[str, ...]:
    if factor is GlobalFactor.ANXIETY:
        if score < InsightThresholds.ANXIETY_STABLE:
            return STRENGTH_STATEMENTS[factor]
        if score < InsightThresholds.ANXIETY_MODERATE_STABLE:
            return (MODERATE_STRENGTH_STATEMENTS[factor],)
        return ()

    if score > InsightThresholds.STRONG:
        return STRENGTH_STATEMENTS[factor]
    if score > InsightThresholds.MODERATE_STRENGTH:
        return (MODERATE_STRENGTH_STATEMENTS[factor],)
    return ()


def _development_for(factor: GlobalFactor, score: float) -> Tuple[str, ...]:
    if factor is GlobalFactor.ANXIETY:
        if score > InsightThresholds.ANXIETY_CONCERN:
            return DEVELOPMENT_STATEMENTS[factor]
        if score > InsightThresholds.ANXIETY_MODERATE_CONCERN:
            return (MODERATE_DEVELOPMENT_STATEMENTS[factor],)
        return ()

    if score < InsightThresholds.CONCERN:
        return DEVELOPMENT_STATEMENTS[factor]
    if score < InsightThresholds.MODERATE_CONCERN:
        return (MODERATE_DEVELOPMENT_STATEMENTS[factor],)
    return ()


def _select_career_bundle(ranked: List[GlobalFactor]) -> CareerBundle:
    """Return the bundle of the first career rule matching the ranking."""
    top = set(ranked)
    for factors, bundle in CAREER_RULES:
        if len(factors) > 1:
            if top.issuperset(factors):
                return bundle
        elif ranked and ranked[0] is factors[0]:
            return bundle
    return DEFAULT_CAREER_BUNDLE


def recommend_careers(
    global_factor_scores: Mapping[str, float],
    top_n: int = DEFAULT_TOP_N
) -> Tuple[CareerRecommendation, ...]:
    """Recommend careers from the top ranked Global Factors.

    Args:
        global_factor_scores: Global Factor name to score
        top_n: Number of top factors considered by compound rules

    Returns:
        Tuple[CareerRecommendation, ...]: Bundle of the first matching rule
    """
    ranked = get_top_factors(global_factor_scores, top_n)
    bundle = _select_career_bundle(ranked)
    logger.debug(f"Top factors {[f.value for f in ranked]} selected bundle starting with {bundle[0][0]!r}")
    return tuple(CareerRecommendation(role=role, reason=reason) for role, reason in bundle)


def generate_insights(
    category_scores: Mapping[str, float],
    global_factor_scores: Mapping[str, float],
    top_n: int = DEFAULT_TOP_N
) -> PersonalityInsights:
    """Derive strengths, development areas and career recommendations.

    Factors are evaluated in canonical order, so the statement order is
    deterministic. Generic statements are used whenever no rule fires, so
    every list in the result is non-empty.

    Args:
        category_scores: Category scores (not used by the current rules)
        global_factor_scores: Global Factor name to 0-100 score
        top_n: Number of top factors considered for careers

    Returns:
        PersonalityInsights: Non-empty insights
    """
    strengths: List[str] = []
    development_areas: List[str] = []

    for factor in GlobalFactor:
        if factor.value not in global_factor_scores:
            continue
        score = float(global_factor_scores[factor.value])
        strengths.extend(_strengths_for(factor, score))
        development_areas.extend(_development_for(factor, score))

    if not strengths:
        logger.debug("No strength rule fired; using generic strengths")
        strengths.extend(GENERIC_STRENGTHS)
    if not development_areas:
        logger.debug("No development rule fired; using generic development areas")
        development_areas.extend(GENERIC_DEVELOPMENT_AREAS)

    return PersonalityInsights(
        strengths=tuple(strengths),
        development_areas=tuple(development_areas),
        career_recommendations=recommend_careers(global_factor_scores, top_n),
    )


def identify_risk_factors(
    global_factor_scores: Mapping[str, float],
    overall_score: float,
    reliability: Optional[ReliabilityAssessment] = None
) -> Tuple[str, ...]:
    """List risk factors a reviewer should look at before relying on the report.

    Args:
        global_factor_scores: Global Factor name to score
        overall_score: Overall report score
        reliability: Reliability assessment, if one was made

    Returns:
        Tuple[str, ...]: Risk descriptions, possibly empty
    """
    risks: List[str] = []

    if reliability is not None and not reliability.is_reliable:
        risks.append(f"Response reliability concerns ({reliability.status})")

    if overall_score < InsightThresholds.LOW_OVERALL_RISK:
        risks.append("Low overall assessment score")

    anxiety = global_factor_scores.get(GlobalFactor.ANXIETY.value)
    if anxiety is not None and anxiety > InsightThresholds.ANXIETY_RISK:
        risks.append("High anxiety levels may affect performance under pressure")

    return tuple(risks)


__all__ = ["generate_insights", "identify_risk_factors", "recommend_careers"]
