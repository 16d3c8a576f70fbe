"""Category (primary factor) score aggregation.

Maps each normalized response to the category of its question and averages
the values per category. Also provides the primary factor interpretation
(level band, trait name and description) shown next to each category.
"""

import random
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from pf16.models.report import CategoryProfile, NormalizedResponse, PrimaryFactorDetail
from pf16.utils.constants import (
    FallbackConstants,
    PrimaryFactor,
    ScoringConstants,
    get_primary_factor_level,
)
from pf16.utils.helpers import calculate_percentile, coerce_question_id, ordered_scores
from pf16.utils.logger import get_component_logger

logger = get_component_logger("scoring")


def _question_field(question: Any, field: str) -> Any:
    if isinstance(question, Mapping):
        return question.get(field)
    return getattr(question, field, None)


def _canonical_category(question: Any) -> Optional[PrimaryFactor]:
    return PrimaryFactor.parse(_question_field(question, "category"))


def resolve_category_by_position(
    position: int,
    questions: Sequence[Any]
) -> Optional[PrimaryFactor]:
    """Resolve a category from the response's index in the question bank.

    Only used for legacy payloads where no response carries a question id.
    Position is fragile: it assumes responses were stored in bank order.

    Args:
        position: Index of the response in the raw payload
        questions: Question bank in its stored order

    Returns:
        Optional[PrimaryFactor]: Category, or None when out of range or unknown
    """
    if 0 <= position < len(questions):
        return _canonical_category(questions[position])
    return None


def _resolve_categories(
    normalized_responses: Sequence[NormalizedResponse],
    questions: Sequence[Any]
) -> Tuple[List[Tuple[PrimaryFactor, float]], int]:
    """Pair each response with its category.

    Returns:
        Tuple[List[Tuple[PrimaryFactor, float]], int]: Resolved pairs and the
        number of responses that could not be resolved
    """
    resolved: List[Tuple[PrimaryFactor, float]] = []
    skipped = 0
    by_position = all(r.question_id is None for r in normalized_responses)

    if by_position and normalized_responses:
        logger.info("No response carries a question id; resolving categories by position")

    lookup: Dict[str, Optional[PrimaryFactor]] = {}
    if not by_position:
        for question in questions:
            question_id = coerce_question_id(_question_field(question, "id"))
            if question_id is not None and question_id not in lookup:
                lookup[question_id] = _canonical_category(question)

    for response in normalized_responses:
        if by_position:
            category = resolve_category_by_position(response.position, questions)
        elif response.question_id is None:
            category = None
        else:
            category = lookup.get(response.question_id)

        if category is None:
            skipped += 1
            continue
        resolved.append((category, response.value))

    if skipped:
        logger.info(f"Skipped {skipped} responses with unknown question or category")

    return resolved, skipped


def _average_by_category(pairs: Iterable[Tuple[PrimaryFactor, float]]) -> Dict[str, float]:
    totals: Dict[PrimaryFactor, List[float]] = defaultdict(lambda: [0.0, 0])
    for category, value in pairs:
        totals[category][0] += value
        totals[category][1] += 1

    scores = {
        category.value: round(total / count, ScoringConstants.CATEGORY_SCORE_PRECISION)
        for category, (total, count) in totals.items()
    }
    return ordered_scores(scores, PrimaryFactor.get_all_labels())


def aggregate_categories(
    normalized_responses: Sequence[NormalizedResponse],
    questions: Sequence[Any]
) -> Dict[str, float]:
    """Average normalized responses per primary factor category.

    Categories without any backing response are absent from the result.

    Args:
        normalized_responses: Output of the response normalizer
        questions: Question bank (models or mappings with id and category)

    Returns:
        Dict[str, float]: Category label to 0-100 score, canonical order
    """
    pairs, _ = _resolve_categories(normalized_responses, list(questions or ()))
    return _average_by_category(pairs)


def synthesize_baseline_profile(seed: Optional[int] = None) -> Dict[str, float]:
    """Build a complete demo profile from the baseline category ranges.

    The same seed always yields the same profile.

    Args:
        seed: Random seed; defaults to FallbackConstants.DEFAULT_SYNTHETIC_SEED

    Returns:
        Dict[str, float]: Score for every one of the 16 categories
    """
    rng = random.Random(FallbackConstants.DEFAULT_SYNTHETIC_SEED if seed is None else seed)
    return {
        factor.value: round(rng.uniform(low, high), ScoringConstants.CATEGORY_SCORE_PRECISION)
        for factor, (low, high) in FallbackConstants.CATEGORY_BASELINE_RANGES.items()
    }


def build_category_profile(
    normalized_responses: Sequence[NormalizedResponse],
    questions: Sequence[Any],
    *,
    allow_synthetic: bool = False,
    seed: Optional[int] = None
) -> CategoryProfile:
    """Aggregate categories and apply the empty-data policy.

    When no category could be scored the profile is flagged as
    insufficient. In demo mode (allow_synthetic) it is additionally filled
    with a seeded synthetic profile and flagged as synthetic.

    Args:
        normalized_responses: Output of the response normalizer
        questions: Question bank
        allow_synthetic: Fill an empty profile with synthetic scores
        seed: Seed for the synthetic profile

    Returns:
        CategoryProfile: Scores with counts and data-sufficiency flags
    """
    pairs, skipped = _resolve_categories(normalized_responses, list(questions or ()))
    scores = _average_by_category(pairs)

    if scores:
        return CategoryProfile(
            scores=scores,
            response_count=len(pairs),
            skipped_count=skipped,
        )

    if allow_synthetic:
        logger.warning("No category could be scored; using synthetic demo profile")
        return CategoryProfile(
            scores=synthesize_baseline_profile(seed),
            response_count=0,
            skipped_count=skipped,
            insufficient_data=True,
            is_synthetic=True,
        )

    logger.warning("No category could be scored; report will be flagged as insufficient data")
    return CategoryProfile(skipped_count=skipped, insufficient_data=True)


def describe_primary_factors(category_scores: Mapping[str, float]) -> Tuple[PrimaryFactorDetail, ...]:
    """Interpret each scored category as a primary factor.

    Args:
        category_scores: Category label to 0-100 score

    Returns:
        Tuple[PrimaryFactorDetail, ...]: One entry per scored factor, canonical order
    """
    details = []
    for factor in PrimaryFactor:
        if factor.value not in category_scores:
            continue
        score = float(category_scores[factor.value])
        details.append(PrimaryFactorDetail(
            category=factor.value,
            name=factor.name_full,
            score=score,
            percentile=calculate_percentile(score),
            level=get_primary_factor_level(score),
            description=factor.description,
        ))
    return tuple(details)


__all__ = [
    "aggregate_categories",
    "build_category_profile",
    "describe_primary_factors",
    "resolve_category_by_position",
    "synthesize_baseline_profile",
]
