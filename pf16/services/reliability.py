"""Response reliability checks.

Flags attempts that were finished implausibly fast or slow, or whose answers
show a long run of identical values, and condenses the result into a
0-100 verification score.
"""

from typing import Any, Optional, Sequence

from pf16.models.report import NormalizedResponse, ReliabilityAssessment
from pf16.utils.constants import ReliabilityConstants, ReliabilityStatus
from pf16.utils.logger import get_component_logger

logger = get_component_logger("scoring")


def longest_identical_run(values: Sequence[Any]) -> int:
    """Length of the longest run of equal consecutive values."""
    longest = 0
    current = 0
    previous: Any = object()
    for value in values:
        current = current + 1 if value == previous else 1
        previous = value
        longest = max(longest, current)
    return longest


def assess_reliability(
    normalized_responses: Sequence[NormalizedResponse],
    time_spent: Optional[int],
    overall_score: Optional[float] = None,
    *,
    min_seconds: int = ReliabilityConstants.MIN_SECONDS,
    max_seconds: int = ReliabilityConstants.MAX_SECONDS,
    pattern_run_limit: int = ReliabilityConstants.PATTERN_RUN_LIMIT
) -> ReliabilityAssessment:
    """Assess how trustworthy a set of responses is.

    Timing checks are skipped when time_spent is unknown. The first failing
    check determines the status: no responses, too fast, too slow, then
    pattern responding.

    Args:
        normalized_responses: Output of the response normalizer
        time_spent: Seconds spent on the attempt, or None
        overall_score: Overall report score, used by the verification score
        min_seconds: Attempts faster than this are too fast
        max_seconds: Attempts slower than this are too slow
        pattern_run_limit: Longest allowed run of identical answers

    Returns:
        ReliabilityAssessment: Status, run length and verification score
    """
    run = longest_identical_run([r.raw_value for r in normalized_responses])
    too_fast = time_spent is not None and time_spent < min_seconds
    too_slow = time_spent is not None and time_spent > max_seconds

    if not normalized_responses:
        status = ReliabilityStatus.INVALID
    elif too_fast:
        status = ReliabilityStatus.TOO_FAST
    elif too_slow:
        status = ReliabilityStatus.TOO_SLOW
    elif run > pattern_run_limit:
        status = ReliabilityStatus.PATTERN_RESPONDING
    else:
        status = ReliabilityStatus.RELIABLE

    is_reliable = status is ReliabilityStatus.RELIABLE

    verification = 100
    if not is_reliable:
        verification -= ReliabilityConstants.UNRELIABLE_PENALTY
    if too_fast:
        verification -= ReliabilityConstants.TOO_FAST_PENALTY
    if too_slow:
        verification -= ReliabilityConstants.TOO_SLOW_PENALTY
    if overall_score is not None and overall_score < ReliabilityConstants.LOW_SCORE_THRESHOLD:
        verification -= ReliabilityConstants.LOW_SCORE_PENALTY

    if not is_reliable:
        logger.info(f"Attempt flagged as {status.value} (longest identical run {run}, time spent {time_spent})")

    return ReliabilityAssessment(
        status=status.value,
        is_reliable=is_reliable,
        longest_identical_run=run,
        verification_score=max(0, verification),
    )


__all__ = ["assess_reliability", "longest_identical_run"]
