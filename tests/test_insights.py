from __future__ import annotations

from diagnostic.domain.insights import CROSS_RULES, HIGH, LOW, get_cross_analysis_insights
from diagnostic.domain.models import DimensionScore

CI = "Consciência Interior"
CE = "Coerência Emocional"
CP = "Conexão e Propósito"
RC = "Relações e Compaixão"
TR = "Transformação"


def scores(**values: float) -> list[DimensionScore]:
    names = {"ci": CI, "ce": CE, "cp": CP, "rc": RC, "tr": TR}
    return [DimensionScore(names[key], 0, value) for key, value in values.items()]


def titles(result) -> list[str]:
    return [insight.title for insight in result]


class TestCrossRules:
    def test_ten_rules_with_distinct_thresholds(self):
        assert len(CROSS_RULES) == 10
        assert HIGH == 3.5
        assert LOW == 2.8

    def test_balanced_profile_has_no_insights(self):
        assert get_cross_analysis_insights(scores(ci=3, ce=3, cp=3, rc=3, tr=3)) == []

    def test_single_rule(self):
        result = get_cross_analysis_insights(scores(ci=4, ce=2, cp=3, rc=3, tr=3))
        assert titles(result) == ["Percepção sem regulação"]
        assert result[0].dimensions == (CI, CE)
        assert result[0].insight
        assert result[0].recommendation

    def test_boundaries(self):
        assert titles(get_cross_analysis_insights(scores(ci=3.5, ce=2.79))) == [
            "Percepção sem regulação"
        ]
        assert get_cross_analysis_insights(scores(ci=3.49, ce=2.0)) == []
        assert get_cross_analysis_insights(scores(ci=4.0, ce=2.8)) == []

    def test_low_threshold_is_not_the_level_band(self):
        # 2.6 is already "medio" for the interpreter but still low here
        assert titles(get_cross_analysis_insights(scores(cp=3.6, tr=2.6))) == ["Visão sem ação"]

    def test_all_matches_in_table_order(self):
        result = get_cross_analysis_insights(scores(ci=4, ce=2, cp=3, rc=2, tr=3))
        assert titles(result) == ["Percepção sem regulação", "Introspecção sem conexão"]

    def test_mirror_rules(self):
        assert titles(get_cross_analysis_insights(scores(ce=4.5, ci=1.0))) == [
            "Regulação sem raiz"
        ]
        assert titles(get_cross_analysis_insights(scores(tr=4, cp=2))) == [
            "Movimento sem direção"
        ]

    def test_missing_dimension_never_fires(self):
        assert get_cross_analysis_insights(scores(ci=5)) == []
        assert get_cross_analysis_insights([]) == []

    def test_later_duplicate_wins(self):
        data = scores(ci=4, ce=2) + [DimensionScore(CE, 0, 3.0)]
        assert get_cross_analysis_insights(data) == []

    def test_slugs_are_not_matched(self):
        data = [
            DimensionScore("consciencia_interior", 1, 4.0),
            DimensionScore("coerencia_emocional", 2, 2.0),
        ]
        assert get_cross_analysis_insights(data) == []

    def test_every_rule_can_fire(self):
        for rule in CROSS_RULES:
            data = [
                DimensionScore(rule.high.display_name, 0, 5.0),
                DimensionScore(rule.low.display_name, 0, 1.0),
            ]
            assert rule.title in titles(get_cross_analysis_insights(data))
