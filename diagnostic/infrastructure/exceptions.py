"""
Custom exception classes for the diagnostic scoring service.

The scoring core never raises these; it degrades to empty results instead.
They belong to the boundary: input validation, strict-mode checks, exports
and configuration.
"""

from __future__ import annotations

from typing import Any


class DiagnosticError(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        user_message: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.user_message = user_message or self._get_default_user_message()

    def _get_default_user_message(self) -> str:
        """Provide a user-friendly version of the error message."""
        return "An unexpected error occurred. Please try again."

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.message}"


class ValidationError(DiagnosticError):
    """Raised when input validation fails."""

    def __init__(
        self, field: str, message: str, value: Any = None, details: dict[str, Any] | None = None
    ):
        self.field = field
        self.value = value
        super().__init__(
            message=f"Validation failed for field '{field}': {message}",
            details=details or {"field": field, "value": value},
            user_message=f"Invalid {field.replace('_', ' ')}: {message}",
        )

    def _get_default_user_message(self) -> str:
        return f"Please check your input for {self.field.replace('_', ' ')} and try again."


class MultipleValidationError(DiagnosticError):
    """Raised when multiple validation errors occur."""

    def __init__(self, errors: list[ValidationError]):
        self.validation_errors = errors
        messages = [f"{e.field}: {e.message}" for e in errors]
        super().__init__(
            message=f"Multiple validation errors: {'; '.join(messages)}",
            details={
                "errors": [
                    {"field": e.field, "message": e.message, "value": e.value} for e in errors
                ]
            },
            user_message="Please correct the following errors and try again.",
        )


class ResponseError(DiagnosticError):
    """Raised when a participant response cannot be accepted."""

    def __init__(
        self,
        message: str,
        question_id: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.question_id = question_id
        super().__init__(
            message=message,
            details=details or {"question_id": question_id},
            user_message="One of the answers could not be processed. Please review it.",
        )


class InvalidResponseError(ResponseError):
    """Raised in strict mode when an answer is outside the 1-5 Likert range."""

    def __init__(self, question_id: str, value: Any):
        self.value = value
        super().__init__(
            message=f"Invalid response {value!r} for question {question_id}. Must be between 1-5",
            question_id=question_id,
            details={"question_id": question_id, "value": value},
        )

    def _get_default_user_message(self) -> str:
        return "Please answer every question with a value between 1 and 5."


class UnknownQuestionError(ResponseError):
    """Raised in strict mode when a response references no known question."""

    def __init__(self, question_id: str):
        super().__init__(
            message=f"Response given for unknown question {question_id}",
            question_id=question_id,
        )


class ConfigurationError(DiagnosticError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.config_key = config_key
        super().__init__(
            message=message,
            details=details or {"config_key": config_key},
            user_message="Configuration error. Please check your settings.",
        )


class ExportError(DiagnosticError):
    """Raised when a report export fails."""

    def __init__(
        self,
        message: str,
        export_format: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.export_format = export_format
        super().__init__(
            message=message,
            details=details or {"export_format": export_format},
            user_message="Export failed. Please try again or choose a different format.",
        )


def create_user_friendly_error_message(error: Exception) -> str:
    """
    Create a user-friendly error message from any exception.

    Example:
        >>> error = ValidationError("participant_name", "cannot be empty")
        >>> create_user_friendly_error_message(error)
        'Invalid participant name: cannot be empty'
    """
    if isinstance(error, DiagnosticError):
        return error.user_message

    error_type = type(error).__name__
    messages = {
        "ValueError": "Invalid input provided. Please check your data and try again.",
        "KeyError": "Required information is missing. Please check your input.",
        "TypeError": "Incorrect data type provided. Please check your input format.",
    }
    return messages.get(
        error_type, "An unexpected error occurred. Please try again or contact support."
    )


def log_error_details(error: Exception, context: dict[str, Any] | None = None) -> dict[str, Any]:
    """Create structured error details for logging."""
    details = {
        "error_type": type(error).__name__,
        "error_message": str(error),
        "context": context or {},
    }

    if isinstance(error, DiagnosticError):
        details.update({"user_message": error.user_message, "error_details": error.details})

    return details
