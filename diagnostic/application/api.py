"""
Application API layer for the diagnostic scoring pipeline.

This module is the boundary between loosely typed callers (HTTP handlers,
scripts, other services) and the pure scoring core. It validates input,
normalizes dimension names once, logs what it could not resolve and
composes the full participant report.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from ..domain.action_plan import generate_action_plan
from ..domain.dimensions import find_unresolved_dimensions, normalize_dimension_scores
from ..domain.disc import calculate_disc_scores
from ..domain.insights import get_cross_analysis_insights
from ..domain.models import (
    MAX_SCORE,
    DiagnosticReport,
    DiagnosticScores,
    DimensionScore,
    DiscScores,
    Question,
)
from ..domain.recommendations import get_recommendations_for_weak_dimensions
from ..domain.rounding import round_half_up
from ..domain.schemas import (
    DimensionScoreInput,
    QuestionInput,
    ResponseInput,
    validate_input,
)
from ..domain.services import (
    calculate_scores,
    get_score_level,
    get_score_level_badge,
    get_strongest_dimensions,
    get_weakest_dimensions,
)
from ..domain.summary import generate_executive_summary
from ..infrastructure.config import get_settings
from ..infrastructure.exceptions import (
    DiagnosticError,
    InvalidResponseError,
    MultipleValidationError,
    UnknownQuestionError,
    ValidationError,
    create_user_friendly_error_message,
    log_error_details,
)
from ..infrastructure.logging import get_logger, log_operation, set_context

logger = get_logger(__name__)

QuestionLike = Question | Mapping[str, Any]
DimensionScoreLike = DimensionScore | Mapping[str, Any]


def _validation_errors(result, prefix: str) -> list[ValidationError]:
    return [
        ValidationError(f"{prefix}.{error.field}", error.message, error.value)
        for error in result.errors
    ]


def coerce_questions(questions: Iterable[QuestionLike]) -> list[Question]:
    """
    Turn question payloads into ``Question`` objects.

    Raises:
        ValidationError: If more questions arrive than the configured limit
        MultipleValidationError: If any payload is malformed
    """
    items = list(questions)
    limit = get_settings().security.max_questions
    if len(items) > limit:
        raise ValidationError("questions", f"at most {limit} questions are accepted", len(items))

    coerced: list[Question] = []
    errors: list[ValidationError] = []
    for index, item in enumerate(items):
        if isinstance(item, Question):
            coerced.append(item)
            continue
        if isinstance(item, QuestionInput):
            coerced.append(item.to_domain())
            continue
        result = validate_input(QuestionInput, dict(item))
        if not result.success or result.data is None:
            errors.extend(_validation_errors(result, f"questions[{index}]"))
            continue
        coerced.append(QuestionInput(**result.data).to_domain())

    if errors:
        raise MultipleValidationError(errors)
    return coerced


def coerce_dimension_scores(scores: Iterable[DimensionScoreLike]) -> list[DimensionScore]:
    """Turn dimension score payloads into ``DimensionScore`` objects."""
    coerced: list[DimensionScore] = []
    errors: list[ValidationError] = []
    for index, item in enumerate(scores):
        if isinstance(item, DimensionScore):
            coerced.append(item)
            continue
        if isinstance(item, DimensionScoreInput):
            coerced.append(item.to_domain())
            continue
        result = validate_input(DimensionScoreInput, dict(item))
        if not result.success or result.data is None:
            errors.extend(_validation_errors(result, f"dimension_scores[{index}]"))
            continue
        coerced.append(DimensionScoreInput(**result.data).to_domain())

    if errors:
        raise MultipleValidationError(errors)
    return coerced


def check_responses(questions: Sequence[Question], responses: Mapping[str, int | None]) -> None:
    """
    Strict-mode response checks.

    Raises:
        UnknownQuestionError: If a response references no question
        InvalidResponseError: If an answer is outside the Likert range
    """
    known = {q.id for q in questions}
    for question_id, value in responses.items():
        if question_id not in known:
            raise UnknownQuestionError(question_id)
        if value is None:
            continue
        result = validate_input(ResponseInput, {"question_id": question_id, "score": value})
        if not result.success:
            raise InvalidResponseError(question_id, value)


def _prepare(
    questions: Iterable[QuestionLike], responses: Mapping[str, int | None]
) -> tuple[list[Question], dict[str, int]]:
    coerced = coerce_questions(questions)
    if get_settings().scoring.strict_responses:
        check_responses(coerced, responses)
    answered = {qid: value for qid, value in responses.items() if value is not None}
    return coerced, answered


@log_operation("score_diagnostic")
def score_diagnostic(
    questions: Iterable[QuestionLike], responses: Mapping[str, int | None]
) -> DiagnosticScores:
    """
    Score an IQ+IS questionnaire.

    Args:
        questions: ``Question`` objects or mappings with the same fields
        responses: Answers keyed by question id; ``None`` means unanswered

    Returns:
        DiagnosticScores with one entry per dimension present in ``questions``

    Raises:
        MultipleValidationError: If a question payload is malformed
        ResponseError: In strict mode, for unknown ids or out-of-range answers

    Example:
        >>> scores = score_diagnostic(questions, {"q1": 4, "q2": 5})
        >>> print(scores.total_score)
    """
    coerced, answered = _prepare(questions, responses)

    try:
        scores = calculate_scores(coerced, answered)
    except Exception as e:
        error_details = log_error_details(e, {"questions": len(coerced)})
        logger.error("Failed to score diagnostic", extra=error_details)
        raise DiagnosticError(
            f"Failed to score diagnostic: {str(e)}",
            details=error_details,
            user_message=create_user_friendly_error_message(e),
        ) from e

    logger.info(
        "Scored %d dimensions from %d answers, total %.2f",
        len(scores.dimension_scores),
        len(answered),
        scores.total_score,
    )
    return scores


@log_operation("score_disc")
def score_disc(
    questions: Iterable[QuestionLike], responses: Mapping[str, int | None]
) -> DiscScores:
    """Score a DISC questionnaire; question dimensions may be letters, labels or slugs."""
    coerced, answered = _prepare(questions, responses)

    try:
        scores = calculate_disc_scores(coerced, answered)
    except Exception as e:
        error_details = log_error_details(e, {"questions": len(coerced)})
        logger.error("Failed to score DISC profile", extra=error_details)
        raise DiagnosticError(
            f"Failed to score DISC profile: {str(e)}",
            details=error_details,
            user_message=create_user_friendly_error_message(e),
        ) from e

    logger.info(
        "Scored DISC profile %s%s", scores.profile.primary, scores.profile.secondary
    )
    return scores


@log_operation("build_diagnostic_report")
def build_diagnostic_report(
    participant_name: str,
    scores: DiagnosticScores | Iterable[DimensionScoreLike],
    total_score: float | None = None,
) -> DiagnosticReport:
    """
    Compose the complete report for one participant.

    Dimension names are normalized here, once, before any content lookup.
    Names that still do not resolve are logged and listed in
    ``unresolved_dimensions``; their lookups stay empty.

    Args:
        participant_name: Full name; the summary uses the first word
        scores: Output of ``score_diagnostic`` or stored dimension scores
        total_score: Overall score; defaults to the mean of the dimension scores

    Raises:
        ValidationError: If the name is blank or too long, or fewer than two dimensions are given

    Example:
        >>> report = build_diagnostic_report("Ana Souza", score_diagnostic(questions, responses))
        >>> print(report.badge.label)
    """
    if not participant_name or not participant_name.strip():
        raise ValidationError("participant_name", "cannot be empty", participant_name)
    max_name_length = get_settings().security.max_name_length
    if len(participant_name) > max_name_length:
        raise ValidationError(
            "participant_name", f"must be at most {max_name_length} characters", participant_name
        )

    total_percentage: float | None = None
    if isinstance(scores, DiagnosticScores):
        dimension_scores = list(scores.dimension_scores)
        if total_score is None:
            total_score = scores.total_score
            total_percentage = scores.total_percentage
    else:
        dimension_scores = coerce_dimension_scores(scores)

    if len(dimension_scores) < 2:
        raise ValidationError(
            "dimension_scores",
            "at least two dimension scores are required",
            len(dimension_scores),
        )

    set_context(participant=participant_name)

    normalized = normalize_dimension_scores(dimension_scores)
    unresolved = find_unresolved_dimensions(d.dimension for d in normalized)
    if unresolved and get_settings().scoring.warn_on_unresolved_dimensions:
        logger.warning(
            "Unresolved dimension names: %s",
            ", ".join(unresolved),
            extra={"unresolved_dimensions": unresolved},
        )

    # the percentage comes from the unrounded mean, as in calculate_scores
    if total_score is None:
        mean = sum(d.score for d in normalized) / len(normalized)
        total_score = round_half_up(mean, 2)
        total_percentage = round_half_up(mean / MAX_SCORE * 100, 1)
    elif total_percentage is None:
        total_percentage = round_half_up(total_score / MAX_SCORE * 100, 1)

    try:
        weakest = get_weakest_dimensions(normalized)
        report = DiagnosticReport(
            participant_name=participant_name,
            total_score=total_score,
            total_percentage=total_percentage,
            level=get_score_level(total_score),
            badge=get_score_level_badge(total_score),
            dimension_scores=normalized,
            weakest=weakest,
            strongest=get_strongest_dimensions(normalized),
            recommendations=get_recommendations_for_weak_dimensions(
                d.dimension for d in weakest
            ),
            insights=get_cross_analysis_insights(normalized),
            action_plan=generate_action_plan(normalized),
            executive_summary=generate_executive_summary(
                participant_name, total_score, normalized
            ),
            unresolved_dimensions=unresolved,
        )
    except DiagnosticError:
        raise
    except Exception as e:
        error_details = log_error_details(e, {"participant": participant_name})
        logger.error("Failed to build diagnostic report", extra=error_details)
        raise DiagnosticError(
            f"Failed to build report for {participant_name}: {str(e)}",
            details=error_details,
            user_message="Unable to build the diagnostic report. Please try again.",
        ) from e

    logger.info(
        "Built report with %d insights and %d plan weeks",
        len(report.insights),
        len(report.action_plan.weeks),
    )
    return report
