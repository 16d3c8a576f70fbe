"""Configuration management for the 16PF scoring engine.

This module handles configuration loading and validation using Pydantic
Settings for type safety and environment variable support.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError as PydanticValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pf16.utils.constants import FallbackConstants, ReliabilityConstants, ScoringConstants
from pf16.utils.exceptions import ConfigurationError
from pf16.utils.logger import setup_logging


class Settings(BaseSettings):
    """Engine settings with validation and type hints."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application Settings
    APP_NAME: str = Field(default="pf16", description="Application name")
    APP_ENV: str = Field(
        default="development",
        description="Application environment",
        pattern="^(development|test|staging|production)$",
    )

    # Logging Configuration
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Log level",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    LOG_FORMAT: str = Field(
        default="text", description="Log format", pattern="^(json|text)$"
    )
    LOG_FILE_PATH: Optional[str] = Field(
        default=None, description="Rotating log file path (production only)"
    )

    # Missing-data policy
    ALLOW_SYNTHETIC_PROFILE: bool = Field(
        default=False,
        description="Fill an empty category profile with tagged synthetic scores (demo mode)",
    )
    SYNTHETIC_PROFILE_SEED: int = Field(
        default=FallbackConstants.DEFAULT_SYNTHETIC_SEED,
        description="Seed for the synthetic profile jitter",
    )
    DEFAULT_OVERALL_SCORE: int = Field(
        default=ScoringConstants.DEFAULT_OVERALL_SCORE,
        description="Overall score used when no global factor scores and no stored score exist",
        ge=0,
        le=100,
    )

    # Reliability checks
    RELIABILITY_MIN_SECONDS: int = Field(
        default=ReliabilityConstants.MIN_SECONDS,
        description="Attempts faster than this are flagged as too fast",
        ge=0,
    )
    RELIABILITY_MAX_SECONDS: int = Field(
        default=ReliabilityConstants.MAX_SECONDS,
        description="Attempts slower than this are flagged as too slow",
        ge=1,
    )
    PATTERN_RUN_LIMIT: int = Field(
        default=ReliabilityConstants.PATTERN_RUN_LIMIT,
        description="Longest allowed run of identical consecutive answers",
        ge=1,
    )

    # Career recommendations
    CAREER_TOP_N: int = Field(
        default=3, description="Number of top global factors matched against career rules", ge=1, le=5
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lower-case log levels from the environment."""
        return v.upper() if isinstance(v, str) else v

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Validate settings after all fields are set."""
        if self.RELIABILITY_MIN_SECONDS >= self.RELIABILITY_MAX_SECONDS:
            raise ValueError("RELIABILITY_MIN_SECONDS must be lower than RELIABILITY_MAX_SECONDS")

        if self.APP_ENV == "production" and self.ALLOW_SYNTHETIC_PROFILE:
            raise ValueError("ALLOW_SYNTHETIC_PROFILE cannot be enabled in production")

        return self

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.APP_ENV == "production"

    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.APP_ENV == "test"


def load_settings(**overrides) -> Settings:
    """Build settings, converting validation failures into ConfigurationError.

    Args:
        **overrides: Explicit setting values that take precedence over the environment

    Returns:
        Settings: Validated settings

    Raises:
        ConfigurationError: If any setting is invalid
    """
    try:
        return Settings(**overrides)
    except PydanticValidationError as e:
        errors = e.errors()
        config_key = ".".join(str(part) for part in errors[0]["loc"]) if errors and errors[0]["loc"] else None
        raise ConfigurationError(
            f"Invalid engine configuration: {errors[0]['msg'] if errors else e}",
            config_key=config_key,
            cause=e,
        ) from e


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Engine settings instance
    """
    settings = load_settings()

    # Setup logging based on settings
    setup_logging(
        environment=settings.APP_ENV,
        log_level=settings.LOG_LEVEL,
        log_format=settings.LOG_FORMAT,
        log_file=settings.LOG_FILE_PATH,
        application=settings.APP_NAME,
    )

    return settings
