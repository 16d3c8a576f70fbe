"""Report service for 16PF assessments.

Runs the full pipeline for one test attempt and its question bank:
normalization, category scoring, Global Factor aggregation, insight and
personality profile generation, reliability checks and report assembly.
"""

from typing import Any, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from pf16.core.config import Settings, get_settings
from pf16.models.assessment import Question, TestAttempt
from pf16.models.report import CandidateInfo, Report
from pf16.services.category_scorer import build_category_profile, describe_primary_factors
from pf16.services.global_factor_scorer import aggregate_global_factors, global_factor_sources
from pf16.services.insight_generator import generate_insights
from pf16.services.profile_analyzer import build_personality_profile
from pf16.services.reliability import assess_reliability
from pf16.services.report_assembler import assemble, calculate_overall_score
from pf16.services.response_normalizer import normalize
from pf16.utils.exceptions import PF16Error, ScoringError, ValidationError
from pf16.utils.logger import PerformanceLogger, get_component_logger
from pf16.utils.validators import validate_question_bank

logger = get_component_logger("report")


class ReportService:
    """Service that turns a test attempt into a complete report."""

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize report service.

        Args:
            settings: Engine settings (defaults to the cached settings)
        """
        self.settings = settings or get_settings()

    def generate_report(
        self,
        attempt: Union[TestAttempt, Mapping[str, Any]],
        questions: Iterable[Union[Question, Mapping[str, Any]]],
        test_name: Optional[str] = None
    ) -> Report:
        """Generate the report for one attempt.

        Args:
            attempt: Test attempt model or its stored mapping
            questions: Question bank of the attempt's test
            test_name: Display name of the test

        Returns:
            Report: Complete, immutable report

        Raises:
            ValidationError: If the attempt or a question cannot be read
            ScoringError: If any pipeline stage fails unexpectedly
        """
        attempt = self._load_attempt(attempt)
        question_bank = self._load_questions(questions)
        stage = "normalize"

        with PerformanceLogger("generate_report", logger, extra={"attempt_id": str(attempt.id)}):
            try:
                bank_check = validate_question_bank(question_bank)
                for warning in bank_check.warnings:
                    logger.warning(f"Question bank: {warning}", extra={"attempt_id": str(attempt.id)})

                responses = normalize(attempt.responses, question_bank)

                stage = "category_scores"
                profile = build_category_profile(
                    responses,
                    question_bank,
                    allow_synthetic=self.settings.ALLOW_SYNTHETIC_PROFILE,
                    seed=self.settings.SYNTHETIC_PROFILE_SEED,
                )

                stage = "global_factors"
                global_scores = aggregate_global_factors(profile.scores)
                sources = global_factor_sources(profile.scores)

                stage = "insights"
                insights = generate_insights(profile.scores, global_scores, top_n=self.settings.CAREER_TOP_N)
                personality_profile = build_personality_profile(profile.scores)

                stage = "reliability"
                overall_score = calculate_overall_score(
                    global_scores, attempt.score, self.settings.DEFAULT_OVERALL_SCORE
                )
                reliability = assess_reliability(
                    responses,
                    attempt.time_spent,
                    overall_score,
                    min_seconds=self.settings.RELIABILITY_MIN_SECONDS,
                    max_seconds=self.settings.RELIABILITY_MAX_SECONDS,
                    pattern_run_limit=self.settings.PATTERN_RUN_LIMIT,
                )

                stage = "assemble"
                report = assemble(
                    self._candidate_info(attempt, test_name),
                    profile.scores,
                    global_scores,
                    insights,
                    responses,
                    raw_score=attempt.score,
                    default_overall_score=self.settings.DEFAULT_OVERALL_SCORE,
                    global_factor_sources=sources,
                    primary_factors=describe_primary_factors(profile.scores),
                    reliability=reliability,
                    personality_profile=personality_profile,
                    is_synthetic=profile.is_synthetic,
                    insufficient_data=profile.insufficient_data,
                )

            except PF16Error as e:
                logger.warning(
                    f"Report generation stopped at stage {stage}",
                    extra={"attempt_id": str(attempt.id), "stage": stage, "error": e.to_dict()},
                )
                raise
            except Exception as e:
                logger.error(
                    f"Report generation failed at stage {stage}",
                    extra={"attempt_id": str(attempt.id), "stage": stage, "error": str(e)},
                )
                raise ScoringError(
                    f"Report generation failed: {e}",
                    stage=stage,
                    attempt_id=attempt.id,
                    cause=e,
                ) from e

        logger.info(
            "Report generated",
            extra={
                "attempt_id": str(attempt.id),
                "overall_score": report.overall_score,
                "insufficient_data": report.insufficient_data,
                "is_synthetic": report.is_synthetic,
            },
        )
        return report

    def _load_attempt(self, attempt: Union[TestAttempt, Mapping[str, Any]]) -> TestAttempt:
        if isinstance(attempt, TestAttempt):
            return attempt
        try:
            return TestAttempt.model_validate(attempt)
        except PydanticValidationError as e:
            raise ValidationError(
                "Invalid test attempt",
                field="attempt",
                validation_errors=[err["msg"] for err in e.errors()],
                cause=e,
            ) from e

    def _load_questions(self, questions: Iterable[Union[Question, Mapping[str, Any]]]) -> List[Question]:
        bank: List[Question] = []
        for index, question in enumerate(questions or ()):
            if isinstance(question, Question):
                bank.append(question)
                continue
            try:
                bank.append(Question.model_validate(question))
            except PydanticValidationError as e:
                raise ValidationError(
                    f"Invalid question at index {index}",
                    field="questions",
                    validation_errors=[err["msg"] for err in e.errors()],
                    cause=e,
                ) from e
        return bank

    @staticmethod
    def _candidate_info(attempt: TestAttempt, test_name: Optional[str]) -> CandidateInfo:
        return CandidateInfo(
            name=attempt.candidate_name,
            email=attempt.candidate_email,
            attempt_id=attempt.id,
            test_id=attempt.test_id,
            test_name=test_name,
            completed_at=attempt.completed_at,
            time_spent=attempt.time_spent,
        )


def generate_report(
    attempt: Union[TestAttempt, Mapping[str, Any]],
    questions: Iterable[Union[Question, Mapping[str, Any]]],
    test_name: Optional[str] = None,
    settings: Optional[Settings] = None
) -> Report:
    """Generate a report with a default ReportService."""
    return ReportService(settings).generate_report(attempt, questions, test_name)


__all__ = ["ReportService", "generate_report"]
