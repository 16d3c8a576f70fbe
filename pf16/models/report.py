"""Value objects produced by the scoring pipeline.

Every model here is frozen. The Report aggregates the outputs of all stages
and is handed to external renderers and exporters, which only read it.
"""

from datetime import datetime
from typing import Any, Optional, Tuple, Union

from pydantic import Field, field_validator

from pf16.models.base import ReadOnlyLabels, ReadOnlyScores, ValueObject
from pf16.utils.helpers import utc_now


class NormalizedResponse(ValueObject):
    """One response in canonical form."""

    question_id: Optional[str] = Field(default=None, description="Question id, None when the record had none")
    position: int = Field(..., ge=0, description="Index of the response in the raw payload")
    value: float = Field(..., ge=0, le=100, description="Answer rescaled to 0-100")
    raw_value: Any = Field(default=None, description="Answer as received")
    defaulted: bool = Field(default=False, description="True when an unrecognized answer fell back to the midpoint")


class CategoryProfile(ValueObject):
    """Category scores together with the data-sufficiency flags."""

    scores: ReadOnlyScores = Field(default_factory=dict, validate_default=True)
    response_count: int = Field(default=0, ge=0, description="Responses that contributed to a category")
    skipped_count: int = Field(default=0, ge=0, description="Responses whose category could not be resolved")
    insufficient_data: bool = False
    is_synthetic: bool = False


class PrimaryFactorDetail(ValueObject):
    """Interpretation of one primary factor score."""

    category: str
    name: str
    score: float = Field(..., ge=0, le=100)
    percentile: int = Field(..., ge=1, le=99)
    level: str
    description: str


class CareerRecommendation(ValueObject):
    """A suggested role and why it fits."""

    role: str = Field(..., min_length=1)
    reason: str = Field(..., min_length=1)


class PersonalityInsights(ValueObject):
    """Strengths, development areas and career recommendations."""

    strengths: Tuple[str, ...] = Field(..., min_length=1)
    development_areas: Tuple[str, ...] = Field(..., min_length=1)
    career_recommendations: Tuple[CareerRecommendation, ...] = Field(..., min_length=1)


class PersonalityProfile(ValueObject):
    """Personality type, work style and leadership potential read from the primary factors."""

    personality_type: str
    work_style: Tuple[str, ...] = Field(..., min_length=1)
    leadership_potential: str
    leadership_score: float = Field(..., ge=0, le=100, description="Mean of Factors E, C, A and B")


class HiringRecommendations(ValueObject):
    """Hiring, development and placement suggestions."""

    hiring: Tuple[str, ...] = Field(..., min_length=1)
    development: Tuple[str, ...] = Field(..., min_length=1)
    placement: Tuple[str, ...] = ()


class ReliabilityAssessment(ValueObject):
    """How trustworthy the response set looks."""

    status: str
    is_reliable: bool
    longest_identical_run: int = Field(default=0, ge=0)
    verification_score: int = Field(..., ge=0, le=100)


class CandidateInfo(ValueObject):
    """Identity of the candidate and the attempt being reported on."""

    name: str = "Unknown"
    email: str = "Unknown"
    attempt_id: Optional[Union[int, str]] = None
    test_id: Optional[Union[int, str]] = None
    test_name: Optional[str] = None
    completed_at: Optional[datetime] = None
    time_spent: Optional[int] = None

    @field_validator("name", "email", mode="before")
    @classmethod
    def default_unknown(cls, value: Any) -> Any:
        """Blank identity fields read as 'Unknown'."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return "Unknown"
        return value


class Report(ValueObject):
    """Complete assessment report for one (attempt, test) pair."""

    candidate: CandidateInfo
    overall_score: int = Field(..., ge=0, le=100)
    performance_level: str
    category_scores: ReadOnlyScores
    global_factor_scores: ReadOnlyScores
    global_factor_sources: ReadOnlyLabels = Field(default_factory=dict, validate_default=True)
    primary_factors: Tuple[PrimaryFactorDetail, ...] = ()
    insights: PersonalityInsights
    personality_profile: Optional[PersonalityProfile] = None
    recommendations: Optional[HiringRecommendations] = None
    responses: Tuple[NormalizedResponse, ...] = ()
    reliability: Optional[ReliabilityAssessment] = None
    risk_factors: Tuple[str, ...] = ()
    is_synthetic: bool = False
    insufficient_data: bool = False
    generated_at: datetime = Field(default_factory=utc_now)
