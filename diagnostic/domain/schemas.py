"""
Pydantic schemas for input validation at the edges of the scoring pipeline.

These schemas turn loosely typed payloads (HTTP bodies, JSON files, rows from
other services) into the frozen domain dataclasses. The domain functions
themselves never validate.
"""

from __future__ import annotations

import re
from html import unescape
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import MAX_SCORE, DimensionScore, Question


class BaseValidationSchema(BaseModel):
    """Base schema with common validation utilities."""

    model_config = ConfigDict(str_strip_whitespace=True, validate_assignment=True)

    @field_validator("*", mode="before")
    def sanitize_strings(cls, v):
        """Strip markup and control characters from free-text inputs."""
        if isinstance(v, str):
            cleaned = unescape(v.strip())
            cleaned = re.sub(
                r"<\s*script[^>]*>.*?<\s*/\s*script\s*>",
                "",
                cleaned,
                flags=re.IGNORECASE | re.DOTALL,
            )
            cleaned = re.sub(r"<[^>]+>", "", cleaned)
            cleaned = re.sub(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]", "", cleaned)
            return cleaned
        return v


class QuestionInput(BaseValidationSchema):
    """Validation schema for one questionnaire item."""

    id: str = Field(..., min_length=1, max_length=100)
    dimension: str = Field(..., min_length=1, max_length=255)
    dimension_order: int = Field(0, ge=0)
    question_order: int = Field(0, ge=0)
    question_text: str = Field("", max_length=2000)
    reverse_scored: bool = False

    @field_validator("dimension_order", "question_order", mode="before")
    def null_order_is_zero(cls, v):
        return 0 if v is None else v

    def to_domain(self) -> Question:
        return Question(
            id=self.id,
            dimension=self.dimension,
            dimension_order=self.dimension_order,
            question_order=self.question_order,
            question_text=self.question_text,
            reverse_scored=self.reverse_scored,
        )


class ResponseInput(BaseValidationSchema):
    """A single Likert answer as accepted in strict mode."""

    question_id: str = Field(..., min_length=1)
    score: int = Field(..., ge=1, le=MAX_SCORE)


class DimensionScoreInput(BaseValidationSchema):
    """
    A dimension score coming from storage or another service.

    ``dimension`` may be any spelling the normalizer understands; a missing or
    zero ``percentage`` is backfilled during normalization.
    """

    dimension: str = Field(..., min_length=1, max_length=255)
    dimension_order: int = Field(0, ge=0)
    score: float = Field(..., ge=0, le=MAX_SCORE)
    max_score: int = Field(MAX_SCORE, ge=1)
    percentage: float = Field(0.0, ge=0, le=100)

    @field_validator("dimension_order", mode="before")
    def null_order_is_zero(cls, v):
        return 0 if v is None else v

    def to_domain(self) -> DimensionScore:
        return DimensionScore(
            dimension=self.dimension,
            dimension_order=self.dimension_order,
            score=self.score,
            max_score=self.max_score,
            percentage=self.percentage,
        )


class ExecutiveSummaryInput(BaseValidationSchema):
    """Everything needed to compose a report; two dimensions at minimum."""

    participant_name: str = Field(..., min_length=1)
    total_score: float | None = Field(None, ge=0, le=MAX_SCORE)
    dimension_scores: list[DimensionScoreInput] = Field(..., min_length=2)

    @field_validator("participant_name")
    def validate_participant_name(cls, v):
        if not v or not v.strip():
            raise ValueError("Participant name cannot be empty")
        return v.strip()


class ValidationErrorDetail(BaseModel):
    """Schema for validation error details."""

    field: str
    message: str
    value: Any = None


class ValidationResponse(BaseModel):
    """Schema for validation responses."""

    success: bool
    errors: list[ValidationErrorDetail] = []
    data: dict[str, Any] | None = None


def validate_input(schema_class: type[BaseModel], data: dict[str, Any]) -> ValidationResponse:
    """
    Centralized validation function that returns structured validation results.

    Args:
        schema_class: Pydantic model class to use for validation
        data: Input data to validate

    Returns:
        ValidationResponse with success status and any errors

    Example:
        >>> result = validate_input(ResponseInput, {"question_id": "q1", "score": 4})
        >>> if result.success:
        ...     validated_data = result.data
        >>> else:
        ...     for error in result.errors:
        ...         print(f"Error in {error.field}: {error.message}")
    """
    try:
        validated = schema_class(**data)
        return ValidationResponse(success=True, data=validated.model_dump())
    except Exception as e:
        errors = []
        if hasattr(e, "errors"):  # Pydantic validation errors
            for error in e.errors():
                errors.append(
                    ValidationErrorDetail(
                        field=".".join(str(x) for x in error["loc"]),
                        message=error["msg"],
                        value=error.get("input"),
                    )
                )
        else:
            errors.append(ValidationErrorDetail(field="general", message=str(e)))

        return ValidationResponse(success=False, errors=errors)
