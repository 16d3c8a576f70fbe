"""Response normalization for 16PF test attempts.

Raw responses come from storage in several shapes: a list of records, an
object wrapping the list under ``responses`` or ``detailedAnswers``, an
object keyed by question number (``{"q1": 5, "q2": 4}``), or any of those
JSON-encoded as a string. This module turns them into a tuple of
NormalizedResponse values on the 0-100 scale. Response records exported
from a report normalize back to the same values. It never raises on bad
input; malformed payloads normalize to an empty tuple.
"""

import json
import math
import re
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from pf16.models.report import NormalizedResponse
from pf16.utils.constants import LIKERT_LABELS, ScoringConstants
from pf16.utils.helpers import coerce_question_id
from pf16.utils.logger import get_component_logger

logger = get_component_logger("normalizer")

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LABEL_SEPARATORS = re.compile(r"[_\-\s]+")


def normalize(
    raw_responses: Any,
    questions: Optional[Iterable[Any]] = None
) -> Tuple[NormalizedResponse, ...]:
    """Normalize raw responses into canonical 0-100 values.

    Args:
        raw_responses: Responses in any supported shape, or None
        questions: Optional question bank, used only to log coverage

    Returns:
        Tuple[NormalizedResponse, ...]: Normalized responses in input order
    """
    records = _extract_records(raw_responses)
    normalized: List[NormalizedResponse] = []

    for position, record in enumerate(records):
        if isinstance(record, NormalizedResponse):
            normalized.append(record)
            continue

        response = _normalize_record(record, position)
        if response is not None:
            normalized.append(response)

    skipped = len(records) - len(normalized)
    if skipped:
        logger.debug(f"Skipped {skipped} response records without a value")

    if questions is not None:
        _log_coverage(normalized, questions)

    return tuple(normalized)


def _extract_records(raw_responses: Any) -> Sequence[Any]:
    """Unwrap the supported container shapes into a list of records."""
    payload = raw_responses

    if isinstance(payload, (bytes, bytearray)):
        payload = payload.decode("utf-8", errors="replace")

    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except ValueError:
            logger.warning("Raw responses are a string that is not valid JSON; treating as empty")
            return []

    if isinstance(payload, Mapping):
        for field in ScoringConstants.CONTAINER_FIELDS:
            inner = payload.get(field)
            if inner is not None:
                if isinstance(inner, (str, bytes, bytearray, Mapping)):
                    return _extract_records(inner)
                return _as_list(inner)

        keyed = _keyed_records(payload)
        if keyed is not None:
            return keyed

        logger.warning(
            f"Response object has none of the fields {ScoringConstants.CONTAINER_FIELDS} "
            f"and is not keyed by question number; treating as empty"
        )
        return []

    return _as_list(payload)


def _keyed_records(payload: Mapping[Any, Any]) -> Optional[List[Any]]:
    """Lay out a {"q1": 5, "q2": 4} object by question number.

    Answer qN lands at position N-1. Missing numbers leave empty slots that
    normalize to nothing, so later answers keep their positions.

    Returns:
        Optional[List[Any]]: Records by position, or None if any key is not qN
    """
    if not payload:
        return None

    by_position = {}
    for key, value in payload.items():
        match = ScoringConstants.KEYED_RESPONSE_KEY.match(str(key))
        if not match:
            return None
        number = int(match.group(1))
        if not 1 <= number <= ScoringConstants.MAX_KEYED_POSITION:
            logger.warning(f"Ignoring keyed answer {key!r}: question number out of range")
            continue
        by_position[number - 1] = value

    if not by_position:
        return []

    records: List[Any] = [None] * (max(by_position) + 1)
    for position, value in by_position.items():
        records[position] = value
    return records


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    logger.warning(f"Unsupported raw response shape {type(value).__name__}; treating as empty")
    return []


def _normalize_record(record: Any, position: int) -> Optional[NormalizedResponse]:
    """Normalize one record, or return None when it carries no value."""
    if _is_exported(record):
        # Re-derive from the answer as received; "value" is already on 0-100
        question_id = _first_present(record, ScoringConstants.QUESTION_ID_FIELDS)
        raw_value = _first_present(record, ScoringConstants.RAW_VALUE_FIELDS)
        position = record[ScoringConstants.POSITION_FIELD]
    elif isinstance(record, Mapping):
        question_id = _first_present(record, ScoringConstants.QUESTION_ID_FIELDS)
        raw_value = _first_present(record, ScoringConstants.VALUE_FIELDS)
    else:
        # A bare scalar is a value without an id
        question_id = None
        raw_value = record

    if raw_value is None or isinstance(raw_value, (list, tuple, dict)):
        return None

    likert, defaulted = _to_likert(raw_value, position)
    return NormalizedResponse(
        question_id=coerce_question_id(question_id),
        position=position,
        value=_rescale(likert),
        raw_value=raw_value,
        defaulted=defaulted,
    )


def _is_exported(record: Any) -> bool:
    """True for a response record as written by Report.to_dict()."""
    if not isinstance(record, Mapping):
        return False
    position = record.get(ScoringConstants.POSITION_FIELD)
    if isinstance(position, bool) or not isinstance(position, int) or position < 0:
        return False
    return any(field in record for field in ScoringConstants.RAW_VALUE_FIELDS)


def _first_present(record: Mapping[str, Any], fields: Sequence[str]) -> Any:
    for field in fields:
        value = record.get(field)
        if value is not None:
            return value
    return None


def _to_likert(raw_value: Any, position: int) -> Tuple[float, bool]:
    """Convert a raw answer to the 1-5 scale.

    Returns:
        Tuple[float, bool]: Likert value and whether it was defaulted
    """
    if isinstance(raw_value, bool):
        # Booleans are not numeric answers
        return float(ScoringConstants.NEUTRAL_LIKERT_VALUE), _log_default(raw_value, position)

    if isinstance(raw_value, (int, float)):
        number = float(raw_value)
        if math.isnan(number) or math.isinf(number):
            return float(ScoringConstants.NEUTRAL_LIKERT_VALUE), _log_default(raw_value, position)
        return _clamp_likert(number, position), False

    text = str(raw_value)
    label_key = _LABEL_SEPARATORS.sub(" ", text.strip().lower())
    if label_key in LIKERT_LABELS:
        return float(LIKERT_LABELS[label_key]), False

    match = _LEADING_INT.match(text)
    if match:
        return _clamp_likert(float(match.group(1)), position), False

    return float(ScoringConstants.NEUTRAL_LIKERT_VALUE), _log_default(raw_value, position)


def _log_default(raw_value: Any, position: int) -> bool:
    logger.warning(
        f"Unrecognized answer {raw_value!r} at position {position}; "
        f"using neutral value {ScoringConstants.NEUTRAL_LIKERT_VALUE}"
    )
    return True


def _clamp_likert(number: float, position: int) -> float:
    low, high = ScoringConstants.LIKERT_MIN, ScoringConstants.LIKERT_MAX
    if number < low or number > high:
        clamped = float(max(low, min(high, number)))
        logger.info(f"Answer {number:g} at position {position} outside {low}-{high}; clamped to {clamped:g}")
        return clamped
    return number


def _rescale(likert: float) -> float:
    span = ScoringConstants.LIKERT_MAX - ScoringConstants.LIKERT_MIN
    return (likert - ScoringConstants.LIKERT_MIN) / span * ScoringConstants.MAX_SCORE


def _log_coverage(normalized: Sequence[NormalizedResponse], questions: Iterable[Any]) -> None:
    question_ids = {
        coerce_question_id(getattr(q, "id", None) if not isinstance(q, Mapping) else q.get("id"))
        for q in questions
    }
    question_ids.discard(None)
    answered = {r.question_id for r in normalized if r.question_id is not None}
    logger.debug(
        f"Normalized {len(normalized)} responses covering "
        f"{len(answered & question_ids)}/{len(question_ids)} bank questions"
    )


__all__ = ["normalize"]
