"""Input models for a psychometric test attempt and its question bank.

Both records are owned by an external store; the engine only reads the
fields declared here and ignores everything else.
"""

from datetime import datetime
from typing import Any, Optional, Union

from pydantic import AliasChoices, Field, field_validator

from pf16.models.base import InputModel


class Question(InputModel):
    """One item of a test's question bank."""

    id: Optional[Union[int, str]] = None
    category: Optional[str] = Field(default=None, description="Primary factor label, e.g. 'Factor A'")
    question_text: Optional[str] = None
    options: Optional[Any] = None
    order: Optional[int] = None

    @field_validator("category", mode="before")
    @classmethod
    def strip_category(cls, value: Any) -> Optional[str]:
        """Treat blank categories as missing."""
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value


class TestAttempt(InputModel):
    """A completed attempt as stored by the assessment platform."""

    __test__ = False  # not a pytest test class

    id: Optional[Union[int, str]] = None
    test_id: Optional[Union[int, str]] = None
    candidate_name: Optional[str] = None
    candidate_email: Optional[str] = None
    responses: Any = Field(default=None, description="Raw responses in any supported shape")
    score: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("score", "percentageScore", "percentage_score", "totalScore"),
        description="Stored raw score, used only when no global factor scores exist",
    )
    completed_at: Optional[datetime] = None
    time_spent: Optional[int] = Field(default=None, description="Seconds spent on the attempt")
