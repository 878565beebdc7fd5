from __future__ import annotations

import pytest

from diagnostic.domain.models import DimensionScore, Question
from diagnostic.domain.rounding import round_half_up, to_fixed
from diagnostic.domain.services import (
    adjusted_response,
    average_responses,
    calculate_scores,
    get_score_level,
    get_score_level_badge,
    get_strongest_dimensions,
    get_weakest_dimensions,
)


def q(qid: str, dimension: str = "A", order: int = 1, reverse: bool = False) -> Question:
    return Question(
        id=qid,
        dimension=dimension,
        dimension_order=order,
        question_order=1,
        question_text="",
        reverse_scored=reverse,
    )


def ds(name: str, score: float, order: int = 0) -> DimensionScore:
    return DimensionScore(dimension=name, dimension_order=order, score=score)


class TestRounding:
    def test_half_rounds_up(self):
        assert round_half_up(3.125, 2) == 3.13
        assert round_half_up(62.25, 1) == 62.3

    def test_binary_representation_decides(self):
        # 2.675 is stored slightly below the half
        assert round_half_up(2.675, 2) == 2.67

    def test_to_fixed_pads(self):
        assert to_fixed(3, 1) == "3.0"
        assert to_fixed(3.25, 1) == "3.3"
        assert to_fixed(0.0, 2) == "0.00"


class TestCalculateScores:
    def test_no_questions(self):
        scores = calculate_scores([], {})
        assert scores.dimension_scores == []
        assert scores.total_score == 0
        assert scores.total_percentage == 0

    def test_reverse_scored_item(self):
        question = q("r1", reverse=True)
        assert adjusted_response(question, 1) == 5
        assert adjusted_response(question, 4) == 2
        scores = calculate_scores([question], {"r1": 1})
        assert scores.dimension_scores[0].score == 5.0

    def test_unanswered_questions_are_skipped(self):
        questions = [q("a1"), q("a2"), q("b1", "B", 2)]
        scores = calculate_scores(questions, {"a1": 4})
        a, b = scores.dimension_scores
        assert a.score == 4.0
        assert a.percentage == 80.0
        assert b.score == 0
        assert b.percentage == 0

    def test_average_with_half_cent(self):
        questions = [q(f"a{i}") for i in range(8)]
        responses = {f"a{i}": 3 for i in range(7)}
        responses["a7"] = 4
        assert average_responses(questions, responses) == 3.125

        dim = calculate_scores(questions, responses).dimension_scores[0]
        assert dim.score == 3.13
        assert dim.percentage == 62.5
        assert dim.max_score == 5

    def test_percentage_uses_unrounded_average(self):
        questions = [q("a1"), q("a2"), q("a3")]
        dim = calculate_scores(questions, {"a1": 1, "a2": 2, "a3": 2}).dimension_scores[0]
        assert dim.score == 1.67
        assert dim.percentage == 33.3

    def test_total_is_mean_of_rounded_scores(self):
        questions = [q("a1"), q("a2"), q("a3"), q("b1", "B", 2), q("b2", "B", 2), q("b3", "B", 2)]
        responses = {"a1": 1, "a2": 1, "a3": 2, "b1": 2, "b2": 2, "b3": 3}
        scores = calculate_scores(questions, responses)
        assert [d.score for d in scores.dimension_scores] == [1.33, 2.33]
        assert scores.total_score == 1.83
        # from the total 1.83, not from the unrounded 11/6
        assert scores.total_percentage == 36.6

    def test_ordered_by_dimension_order(self):
        questions = [q("c1", "C", 3), q("a1", "A", 1), q("b1", "B", 2)]
        scores = calculate_scores(questions, {"a1": 1, "b1": 2, "c1": 3})
        assert [d.dimension for d in scores.dimension_scores] == ["A", "B", "C"]

    def test_group_order_comes_from_first_question(self):
        questions = [q("a1", "A", 4), q("a2", "A", 1), q("b1", "B", 2)]
        scores = calculate_scores(questions, {"a1": 3, "a2": 3, "b1": 3})
        assert [(d.dimension, d.dimension_order) for d in scores.dimension_scores] == [
            ("B", 2),
            ("A", 4),
        ]

    def test_full_questionnaire(self, questions):
        responses = {question.id: 4 for question in questions}
        scores = calculate_scores(questions, responses)
        # three direct 4s and one reversed 4 (= 2) per dimension
        assert len(scores.dimension_scores) == 5
        assert all(d.score == 3.5 for d in scores.dimension_scores)
        assert scores.total_score == 3.5
        assert scores.total_percentage == 70.0


class TestScoreLevels:
    @pytest.mark.parametrize(
        "score,level",
        [(0, "baixo"), (2.49, "baixo"), (2.5, "medio"), (3.49, "medio"), (3.5, "alto"), (5, "alto")],
    )
    def test_level_bands(self, score, level):
        assert get_score_level(score).level == level

    def test_level_labels_and_colors(self):
        assert get_score_level(1).label == "Em desenvolvimento"
        assert get_score_level(1).color == "text-orange-500"
        assert get_score_level(3).label == "Moderado"
        assert get_score_level(4).color == "text-green-500"

    @pytest.mark.parametrize(
        "score,level",
        [(4, "excelente"), (3.99, "bom"), (3, "bom"), (2, "moderado"), (1.99, "em_desenvolvimento")],
    )
    def test_badge_bands(self, score, level):
        assert get_score_level_badge(score).level == level

    def test_badge_is_independent_of_level(self):
        # 3.2 is "medio" for the level but "bom" for the badge
        assert get_score_level(3.2).level == "medio"
        assert get_score_level_badge(3.2).label == "Bom"


class TestWeakestStrongest:
    def test_weakest_two_ascending(self):
        scores = [ds("A", 3), ds("B", 1), ds("C", 2), ds("D", 5)]
        assert [d.dimension for d in get_weakest_dimensions(scores)] == ["B", "C"]

    def test_strongest_two_descending(self):
        scores = [ds("A", 3), ds("B", 1), ds("C", 2), ds("D", 5)]
        assert [d.dimension for d in get_strongest_dimensions(scores)] == ["D", "A"]

    def test_ties_keep_input_order(self):
        scores = [ds("A", 2), ds("B", 2), ds("C", 2)]
        assert [d.dimension for d in get_weakest_dimensions(scores)] == ["A", "B"]
        assert [d.dimension for d in get_strongest_dimensions(scores)] == ["A", "B"]

    def test_input_untouched(self):
        scores = [ds("A", 3), ds("B", 1)]
        get_weakest_dimensions(scores)
        get_strongest_dimensions(scores)
        assert [d.dimension for d in scores] == ["A", "B"]

    def test_short_input(self):
        assert get_weakest_dimensions([]) == []
        assert len(get_strongest_dimensions([ds("A", 1)])) == 1
