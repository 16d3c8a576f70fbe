"""Validation utilities for the 16PF scoring engine.

These checks never raise; they return a ValidationResult the caller can
inspect, log or turn into a ValidationError.
"""

import math
from collections import Counter
from typing import Any, Iterable, List, Mapping, Optional, Union

from pydantic import BaseModel, Field

from pf16.utils.constants import GlobalFactor, PrimaryFactor, ScoringConstants


class ValidationResult(BaseModel):
    """Result of a validation operation."""

    is_valid: bool = Field(..., description="Whether validation passed")
    errors: List[str] = Field(default_factory=list, description="List of validation errors")
    warnings: List[str] = Field(default_factory=list, description="List of validation warnings")
    cleaned_value: Optional[Any] = Field(default=None, description="Cleaned/normalized value")

    def add_error(self, error: str) -> None:
        """Add a validation error."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        """Add a validation warning."""
        self.warnings.append(warning)

    @classmethod
    def success(cls, cleaned_value: Optional[Any] = None) -> "ValidationResult":
        """Create a successful validation result."""
        return cls(is_valid=True, cleaned_value=cleaned_value)

    @classmethod
    def failure(cls, errors: Union[str, List[str]]) -> "ValidationResult":
        """Create a failed validation result."""
        if isinstance(errors, str):
            errors = [errors]
        return cls(is_valid=False, errors=errors)


def validate_score(value: Any, name: str = "score") -> ValidationResult:
    """Validate that a value is a finite number within 0-100.

    Args:
        value: Value to check
        name: Name used in error messages

    Returns:
        ValidationResult: Validation result with the value as float
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return ValidationResult.failure(f"{name} must be a number")

    number = float(value)
    if math.isnan(number) or math.isinf(number):
        return ValidationResult.failure(f"{name} must be finite")

    if not ScoringConstants.MIN_SCORE <= number <= ScoringConstants.MAX_SCORE:
        return ValidationResult.failure(
            f"{name} must be between {ScoringConstants.MIN_SCORE:g} and {ScoringConstants.MAX_SCORE:g}"
        )

    return ValidationResult.success(number)


def validate_category_scores(scores: Mapping[str, Any]) -> ValidationResult:
    """Validate a category score map.

    Every key must be a canonical primary factor label and every value a
    0-100 score. Missing categories are allowed.

    Args:
        scores: Category label to score mapping

    Returns:
        ValidationResult: Validation result
    """
    result = ValidationResult.success(dict(scores))
    labels = set(PrimaryFactor.get_all_labels())

    for key, value in scores.items():
        if key not in labels:
            result.add_error(f"Unknown category: {key}")
            continue
        check = validate_score(value, name=key)
        for error in check.errors:
            result.add_error(error)

    return result


def validate_global_factor_scores(scores: Mapping[str, Any]) -> ValidationResult:
    """Validate that a global factor map holds exactly the 5 factors.

    Args:
        scores: Global factor name to score mapping

    Returns:
        ValidationResult: Validation result
    """
    result = ValidationResult.success(dict(scores))
    expected = set(GlobalFactor.get_all_names())
    actual = set(scores.keys())

    for missing in sorted(expected - actual):
        result.add_error(f"Missing global factor: {missing}")
    for unknown in sorted(actual - expected):
        result.add_error(f"Unknown global factor: {unknown}")

    for key in sorted(actual & expected):
        check = validate_score(scores[key], name=key)
        for error in check.errors:
            result.add_error(error)

    return result


def validate_question_bank(questions: Iterable[Any]) -> ValidationResult:
    """Check a question bank for problems that degrade scoring.

    Problems are reported as warnings because scoring tolerates them:
    duplicate ids, missing categories and category labels that do not name
    a primary factor.

    Args:
        questions: Question models (anything with id and category attributes)

    Returns:
        ValidationResult: Always valid; warnings describe the problems
    """
    result = ValidationResult.success()
    items = list(questions)

    id_counts = Counter(str(q.id) for q in items if getattr(q, "id", None) is not None)
    for question_id, count in sorted(id_counts.items()):
        if count > 1:
            result.add_warning(f"Duplicate question id {question_id} appears {count} times")

    for question in items:
        category = getattr(question, "category", None)
        if not category:
            result.add_warning(f"Question {question.id} has no category")
        elif PrimaryFactor.parse(category) is None:
            result.add_warning(f"Question {question.id} has unknown category {category!r}")

    result.cleaned_value = len(items)
    return result
