"""Personality profile and hiring recommendations.

Reads the primary factor scores as a whole: a personality type, the work
styles the candidate leans on, leadership potential, and the hiring,
development and placement suggestions that follow from the overall score.
All rules live in pf16.utils.insight_tables.
"""

from typing import Mapping, Optional, Tuple

from pf16.models.report import HiringRecommendations, PersonalityProfile
from pf16.utils.constants import PrimaryFactor, ProfileThresholds
from pf16.utils.helpers import clamp_score, round_half_up
from pf16.utils.insight_tables import (
    DEFAULT_PERSONALITY_TYPE,
    DEFAULT_WORK_STYLE,
    ENTRY_LEVEL_HIRING,
    HIGH_LEADERSHIP,
    HIRING_TIERS,
    INDIVIDUAL_CONTRIBUTOR,
    LEADERSHIP_DEVELOPMENT,
    LEADERSHIP_FACTORS,
    LEADERSHIP_PLACEMENT,
    MODERATE_LEADERSHIP,
    PERSONALITY_TYPE_RULES,
    STANDARD_DEVELOPMENT,
    WORK_STYLE_RULES,
)
from pf16.utils.logger import get_component_logger

logger = get_component_logger("insights")


def _factor_score(category_scores: Mapping[str, float], factor: PrimaryFactor) -> float:
    # Unscored factors count as 0
    return float(category_scores.get(factor.value, 0.0))


def _is_high(category_scores: Mapping[str, float], factor: PrimaryFactor) -> bool:
    return _factor_score(category_scores, factor) > ProfileThresholds.HIGH_FACTOR


def determine_personality_type(category_scores: Mapping[str, float]) -> str:
    """Name the personality type from the first matching rule.

    Args:
        category_scores: Category label to 0-100 score

    Returns:
        str: Personality type, "Balanced Professional" when no rule matches
    """
    for personality_type, factors in PERSONALITY_TYPE_RULES:
        if all(_is_high(category_scores, factor) for factor in factors):
            return personality_type
    return DEFAULT_PERSONALITY_TYPE


def determine_work_style(category_scores: Mapping[str, float]) -> Tuple[str, ...]:
    """Work styles for every high factor, in rule order."""
    styles = tuple(style for factor, style in WORK_STYLE_RULES if _is_high(category_scores, factor))
    return styles or DEFAULT_WORK_STYLE


def leadership_score(category_scores: Mapping[str, float]) -> float:
    """Mean of the leadership factors (E, C, A, B), one decimal."""
    total = sum(_factor_score(category_scores, factor) for factor in LEADERSHIP_FACTORS)
    return round_half_up(total / len(LEADERSHIP_FACTORS), 1)


def assess_leadership_potential(category_scores: Mapping[str, float]) -> str:
    """Leadership potential band.

    Args:
        category_scores: Category label to 0-100 score

    Returns:
        str: One of the three leadership bands
    """
    score = leadership_score(category_scores)
    if score >= ProfileThresholds.LEADERSHIP_HIGH:
        return HIGH_LEADERSHIP
    if score >= ProfileThresholds.LEADERSHIP_MODERATE:
        return MODERATE_LEADERSHIP
    return INDIVIDUAL_CONTRIBUTOR


def build_personality_profile(category_scores: Mapping[str, float]) -> Optional[PersonalityProfile]:
    """Build the personality profile, or None when no category was scored.

    Args:
        category_scores: Category label to 0-100 score

    Returns:
        Optional[PersonalityProfile]: Profile for a non-empty score map
    """
    if not category_scores:
        logger.debug("No category scores; skipping personality profile")
        return None

    profile = PersonalityProfile(
        personality_type=determine_personality_type(category_scores),
        work_style=determine_work_style(category_scores),
        leadership_potential=assess_leadership_potential(category_scores),
        leadership_score=leadership_score(category_scores),
    )
    logger.debug(f"Personality profile: {profile.personality_type}, {profile.leadership_potential}")
    return profile


def recommend_hiring(
    overall_score: float,
    profile: Optional[PersonalityProfile] = None
) -> HiringRecommendations:
    """Hiring, development and placement suggestions.

    Args:
        overall_score: Overall report score on 0-100
        profile: Personality profile, if the categories were scored

    Returns:
        HiringRecommendations: Suggestions; placement may be empty
    """
    overall = clamp_score(float(overall_score))
    hiring = ENTRY_LEVEL_HIRING
    for minimum, statements in HIRING_TIERS:
        if overall >= minimum:
            hiring = statements
            break

    development = []
    placement = []
    if profile is not None and profile.leadership_potential == HIGH_LEADERSHIP:
        development.append(LEADERSHIP_DEVELOPMENT)
        placement.append(LEADERSHIP_PLACEMENT)
    development.extend(STANDARD_DEVELOPMENT)

    return HiringRecommendations(
        hiring=hiring,
        development=tuple(development),
        placement=tuple(placement),
    )


__all__ = [
    "assess_leadership_potential",
    "build_personality_profile",
    "determine_personality_type",
    "determine_work_style",
    "leadership_score",
    "recommend_hiring",
]
