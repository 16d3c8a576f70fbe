"""Custom exception classes for the 16PF scoring engine.

The scoring pipeline recovers from bad input through documented fallbacks,
so these exceptions cover the remaining failure modes: invalid data handed
directly to the report assembler, invalid configuration, and unexpected
failures while building a report.
"""

from typing import Any, Dict, List, Optional


class PF16Error(Exception):
    """Base exception class for all scoring engine errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize engine error.

        Args:
            message: Error message
            error_code: Application-specific error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary representation.

        Returns:
            Dict[str, Any]: Exception data
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        parts = [self.message]
        if self.error_code:
            parts.append(f"Code: {self.error_code}")
        if self.details:
            parts.append(f"Details: {self.details}")
        return " | ".join(parts)


class ValidationError(PF16Error):
    """Exception for invalid data passed into the engine."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        validation_errors: Optional[List[str]] = None,
        **kwargs
    ):
        """Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            value: Invalid value
            validation_errors: List of specific validation errors
            **kwargs: Additional arguments for parent class
        """
        details = kwargs.get("details", {})
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        if validation_errors:
            details["validation_errors"] = validation_errors

        kwargs["details"] = details
        kwargs.setdefault("error_code", "VALIDATION_ERROR")
        super().__init__(message, **kwargs)

        self.field = field
        self.value = value
        self.validation_errors = validation_errors or []


class ScoringError(PF16Error):
    """Exception for unexpected failures inside the scoring pipeline."""

    def __init__(
        self,
        message: str,
        stage: Optional[str] = None,
        attempt_id: Optional[Any] = None,
        **kwargs
    ):
        """Initialize scoring error.

        Args:
            message: Error message
            stage: Pipeline stage that failed
            attempt_id: ID of the test attempt being scored
            **kwargs: Additional arguments for parent class
        """
        details = kwargs.get("details", {})
        if stage:
            details["stage"] = stage
        if attempt_id is not None:
            details["attempt_id"] = str(attempt_id)

        kwargs["details"] = details
        kwargs.setdefault("error_code", "SCORING_ERROR")
        super().__init__(message, **kwargs)

        self.stage = stage
        self.attempt_id = attempt_id


class ConfigurationError(PF16Error):
    """Exception for configuration errors."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        **kwargs
    ):
        """Initialize configuration error.

        Args:
            message: Error message
            config_key: Configuration key
            config_value: Configuration value
            **kwargs: Additional arguments for parent class
        """
        details = kwargs.get("details", {})
        if config_key:
            details["config_key"] = config_key
        if config_value is not None:
            details["config_value"] = str(config_value)

        kwargs["details"] = details
        kwargs.setdefault("error_code", "CONFIGURATION_ERROR")
        super().__init__(message, **kwargs)

        self.config_key = config_key
        self.config_value = config_value


__all__ = [
    "PF16Error",
    "ValidationError",
    "ScoringError",
    "ConfigurationError",
]
