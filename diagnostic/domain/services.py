from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from .models import (
    MAX_SCORE,
    DiagnosticScores,
    DimensionScore,
    Question,
    ScoreBadge,
    ScoreLevel,
)
from .rounding import round_half_up

LEVEL_MEDIUM_THRESHOLD = 2.5
LEVEL_HIGH_THRESHOLD = 3.5


def adjusted_response(question: Question, response: int) -> int:
    return (MAX_SCORE + 1 - response) if question.reverse_scored else response


def average_responses(
    questions: Iterable[Question], responses: Mapping[str, int]
) -> float:
    """Unrounded mean of the reverse-adjusted answers; 0 when nothing was answered."""
    total = 0
    answered = 0
    for q in questions:
        response = responses.get(q.id)
        if response is None:
            continue
        total += adjusted_response(q, response)
        answered += 1
    return total / answered if answered else 0.0


def calculate_scores(
    questions: Sequence[Question], responses: Mapping[str, int]
) -> DiagnosticScores:
    """
    Per-dimension averages for one participant.

    - Unanswered questions are skipped; a dimension with no answers scores 0.
    - Reverse-scored items contribute ``6 - response``.
    - Dimensions are ordered by the ``dimension_order`` of their first question.
    - ``total_score`` is the mean of the already rounded dimension scores, so
      every dimension weighs the same regardless of its item count.

    Response values and ``dimension_order`` consistency are not validated.
    """
    groups: dict[str, list[Question]] = {}
    for q in questions:
        groups.setdefault(q.dimension, []).append(q)

    dimension_scores: list[DimensionScore] = []
    for dimension, dim_questions in groups.items():
        avg = average_responses(dim_questions, responses)
        dimension_scores.append(
            DimensionScore(
                dimension=dimension,
                dimension_order=dim_questions[0].dimension_order or 0,
                score=round_half_up(avg, 2),
                max_score=MAX_SCORE,
                percentage=round_half_up(avg / MAX_SCORE * 100, 1),
            )
        )

    dimension_scores.sort(key=lambda d: d.dimension_order)

    total = (
        sum(d.score for d in dimension_scores) / len(dimension_scores)
        if dimension_scores
        else 0.0
    )
    return DiagnosticScores(
        dimension_scores=dimension_scores,
        total_score=round_half_up(total, 2),
        total_percentage=round_half_up(total / MAX_SCORE * 100, 1),
    )


def get_score_level(score: float) -> ScoreLevel:
    if score < LEVEL_MEDIUM_THRESHOLD:
        return ScoreLevel("baixo", "Em desenvolvimento", "text-orange-500")
    if score < LEVEL_HIGH_THRESHOLD:
        return ScoreLevel("medio", "Moderado", "text-yellow-500")
    return ScoreLevel("alto", "Bem desenvolvido", "text-green-500")


def get_score_level_badge(score: float) -> ScoreBadge:
    # Badge bands are whole points, independent of get_score_level.
    if score >= 4:
        return ScoreBadge("excelente", "Excelente", "bg-green-100 text-green-800")
    if score >= 3:
        return ScoreBadge("bom", "Bom", "bg-blue-100 text-blue-800")
    if score >= 2:
        return ScoreBadge("moderado", "Moderado", "bg-yellow-100 text-yellow-800")
    return ScoreBadge("em_desenvolvimento", "Em desenvolvimento", "bg-orange-100 text-orange-800")


def get_weakest_dimensions(scores: Sequence[DimensionScore]) -> list[DimensionScore]:
    return sorted(scores, key=lambda d: d.score)[:2]


def get_strongest_dimensions(scores: Sequence[DimensionScore]) -> list[DimensionScore]:
    return sorted(scores, key=lambda d: d.score, reverse=True)[:2]
