"""16PF engine utilities package.

This package provides the factor constants, insight tables, exceptions,
logging, validators and helper functions shared by the scoring pipeline.
"""

from pf16.utils.constants import (
    FallbackConstants,
    GlobalFactor,
    InsightThresholds,
    PrimaryFactor,
    ReliabilityConstants,
    ReliabilityStatus,
    ScoreSource,
    ScoringConstants,
    get_performance_level,
    get_primary_factor_level,
)
from pf16.utils.exceptions import (
    PF16Error,
    ValidationError,
    ScoringError,
    ConfigurationError,
)
from pf16.utils.helpers import (
    clamp_score,
    coerce_question_id,
    get_top_factors,
    rank_global_factors,
    round_half_up,
    utc_now,
)
from pf16.utils.logger import (
    get_component_logger,
    setup_logging,
    PerformanceLogger,
)
from pf16.utils.validators import (
    validate_category_scores,
    validate_global_factor_scores,
    validate_question_bank,
    validate_score,
    ValidationResult,
)

# Export all utility functions and classes
__all__ = [
    # Constants and Enums
    "FallbackConstants",
    "GlobalFactor",
    "InsightThresholds",
    "PrimaryFactor",
    "ReliabilityConstants",
    "ReliabilityStatus",
    "ScoreSource",
    "ScoringConstants",
    "get_performance_level",
    "get_primary_factor_level",

    # Exception classes
    "PF16Error",
    "ValidationError",
    "ScoringError",
    "ConfigurationError",

    # Helper functions
    "clamp_score",
    "coerce_question_id",
    "get_top_factors",
    "rank_global_factors",
    "round_half_up",
    "utc_now",

    # Logger functions
    "get_component_logger",
    "setup_logging",
    "PerformanceLogger",

    # Validator functions
    "validate_category_scores",
    "validate_global_factor_scores",
    "validate_question_bank",
    "validate_score",
    "ValidationResult",
]
