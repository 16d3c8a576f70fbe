"""Report assembly.

Combines the outputs of every pipeline stage into one immutable Report and
derives the overall score, performance level, risk factors and hiring
recommendations.
"""

from typing import Any, Mapping, Optional, Sequence, Tuple

from pf16.models.report import (
    CandidateInfo,
    NormalizedResponse,
    PersonalityInsights,
    PersonalityProfile,
    PrimaryFactorDetail,
    ReliabilityAssessment,
    Report,
)
from pf16.services.insight_generator import identify_risk_factors
from pf16.services.profile_analyzer import recommend_hiring
from pf16.utils.constants import GlobalFactor, ScoringConstants, get_performance_level
from pf16.utils.exceptions import ValidationError
from pf16.utils.helpers import clamp_score, ordered_scores, round_half_up
from pf16.utils.logger import get_component_logger
from pf16.utils.validators import validate_category_scores, validate_global_factor_scores, validate_score

logger = get_component_logger("report")


def calculate_overall_score(
    global_factor_scores: Mapping[str, float],
    raw_score: Optional[float] = None,
    default_score: int = ScoringConstants.DEFAULT_OVERALL_SCORE
) -> int:
    """Overall score as the rounded mean of the Global Factor scores.

    Falls back to the attempt's stored raw score, then to default_score,
    when there are no Global Factor scores.

    Args:
        global_factor_scores: Global Factor name to score
        raw_score: Score stored with the attempt, if any
        default_score: Last-resort score

    Returns:
        int: Overall score on 0-100, halves rounded up
    """
    if global_factor_scores:
        values = [float(v) for v in global_factor_scores.values()]
        return int(round_half_up(sum(values) / len(values)))

    if raw_score is not None and validate_score(raw_score, "raw_score").is_valid:
        logger.info("No global factor scores; using stored attempt score")
        return int(round_half_up(clamp_score(float(raw_score))))

    logger.info(f"No global factor scores or stored score; using default overall score {default_score}")
    return default_score


def assemble(
    candidate_info: CandidateInfo,
    category_scores: Mapping[str, float],
    global_factor_scores: Mapping[str, float],
    insights: PersonalityInsights,
    normalized_responses: Sequence[NormalizedResponse],
    *,
    raw_score: Optional[float] = None,
    default_overall_score: int = ScoringConstants.DEFAULT_OVERALL_SCORE,
    global_factor_sources: Optional[Mapping[str, str]] = None,
    primary_factors: Sequence[PrimaryFactorDetail] = (),
    reliability: Optional[ReliabilityAssessment] = None,
    personality_profile: Optional[PersonalityProfile] = None,
    is_synthetic: bool = False,
    insufficient_data: bool = False,
    **extras: Any
) -> Report:
    """Build the immutable report.

    Args:
        candidate_info: Candidate and attempt identity
        category_scores: Category label to score
        global_factor_scores: All 5 Global Factor scores, or empty
        insights: Output of the insight generator
        normalized_responses: Output of the response normalizer
        raw_score: Stored attempt score used when global_factor_scores is empty
        default_overall_score: Last-resort overall score
        global_factor_sources: Fallback branch per Global Factor
        primary_factors: Primary factor interpretations
        reliability: Reliability assessment
        personality_profile: Personality profile; hiring recommendations build on it
        is_synthetic: Whether the category profile was synthesized
        insufficient_data: Whether the responses could not be scored
        **extras: Further Report fields (e.g. generated_at)

    Returns:
        Report: Complete report

    Raises:
        ValidationError: If category_scores has an unknown label or a score
            outside 0-100, or if global_factor_scores is non-empty but not
            exactly the 5 Global Factors with 0-100 scores
    """
    category_check = validate_category_scores(category_scores)
    if not category_check.is_valid:
        raise ValidationError(
            "Invalid category scores",
            field="category_scores",
            value=dict(category_scores),
            validation_errors=category_check.errors,
        )

    if global_factor_scores:
        check = validate_global_factor_scores(global_factor_scores)
        if not check.is_valid:
            raise ValidationError(
                "Invalid global factor scores",
                field="global_factor_scores",
                value=dict(global_factor_scores),
                validation_errors=check.errors,
            )

    overall_score = calculate_overall_score(global_factor_scores, raw_score, default_overall_score)
    risk_factors: Tuple[str, ...] = identify_risk_factors(global_factor_scores, overall_score, reliability)

    report = Report(
        candidate=candidate_info,
        overall_score=overall_score,
        performance_level=get_performance_level(overall_score),
        category_scores=dict(category_scores),
        global_factor_scores=ordered_scores(global_factor_scores, GlobalFactor.get_all_names()),
        global_factor_sources=dict(global_factor_sources or {}),
        primary_factors=tuple(primary_factors),
        insights=insights,
        personality_profile=personality_profile,
        recommendations=recommend_hiring(overall_score, personality_profile),
        responses=tuple(normalized_responses),
        reliability=reliability,
        risk_factors=risk_factors,
        is_synthetic=is_synthetic,
        insufficient_data=insufficient_data,
        **extras,
    )

    logger.debug(f"Assembled report with overall score {overall_score} ({report.performance_level})")
    return report


__all__ = ["assemble", "calculate_overall_score"]
