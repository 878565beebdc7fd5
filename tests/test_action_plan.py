from __future__ import annotations

from diagnostic.domain.action_plan import DIMENSION_PLANS, generate_action_plan, get_dimension_plan
from diagnostic.domain.dimensions import DimensionId
from diagnostic.domain.models import DimensionScore

CI = "Consciência Interior"
CE = "Coerência Emocional"


def full_profile(**overrides: float) -> list[DimensionScore]:
    values = {
        CI: 1.0,
        CE: 2.0,
        "Conexão e Propósito": 3.0,
        "Relações e Compaixão": 4.0,
        "Transformação": 5.0,
    }
    values.update(overrides)
    return [DimensionScore(name, i, score) for i, (name, score) in enumerate(values.items(), 1)]


class TestCurricula:
    def test_four_weeks_per_dimension(self):
        assert set(DIMENSION_PLANS) == set(DimensionId)
        for weeks in DIMENSION_PLANS.values():
            assert [w.week for w in weeks] == [1, 2, 3, 4]
            for week in weeks:
                assert [p.time for p in week.practices] == ["Manhã", "Tarde", "Noite"]
                assert week.objective
                assert week.weekly_goal

    def test_lookup_by_canonical_name_only(self):
        assert get_dimension_plan(CI)[0].title == "Fundamentos da Presença"
        assert get_dimension_plan("consciencia_interior") == ()


class TestGenerateActionPlan:
    def test_alternates_the_two_weakest(self):
        plan = generate_action_plan(full_profile())
        assert plan.focus_dimensions == [CI, CE]
        assert [w.week for w in plan.weeks] == [1, 2, 3, 4]
        assert [w.title for w in plan.weeks] == [
            f"{CI} — Fundamentos da Presença",
            f"{CE} — Técnicas de Regulação",
            f"{CI} — Reconhecimento de Padrões",
            f"{CE} — Expressão Autêntica",
        ]

    def test_ties_keep_input_order(self):
        scores = full_profile(**{"Transformação": 1.0})
        assert generate_action_plan(scores).focus_dimensions == [CI, "Transformação"]

    def test_input_untouched(self):
        scores = list(reversed(full_profile()))
        before = [s.dimension for s in scores]
        generate_action_plan(scores)
        assert [s.dimension for s in scores] == before
        assert DIMENSION_PLANS[DimensionId.CONSCIENCIA_INTERIOR][0].title == "Fundamentos da Presença"

    def test_unknown_dimension_leaves_gaps(self):
        scores = [DimensionScore("Liderança", 0, 1.0), DimensionScore(CE, 0, 2.0)]
        plan = generate_action_plan(scores)
        assert plan.focus_dimensions == ["Liderança", CE]
        assert [w.week for w in plan.weeks] == [2, 4]

    def test_single_dimension(self):
        plan = generate_action_plan([DimensionScore(CE, 0, 2.0)])
        assert plan.focus_dimensions == [CE]
        assert [w.week for w in plan.weeks] == [1, 3]

    def test_empty_scores(self):
        plan = generate_action_plan([])
        assert plan.focus_dimensions == []
        assert plan.weeks == []
