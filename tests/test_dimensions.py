from __future__ import annotations

import pytest

from diagnostic.domain.dimensions import (
    DIMENSION_ALIASES,
    DIMENSION_NAMES,
    DIMENSIONS,
    LIKERT_OPTIONS,
    DimensionId,
    find_unresolved_dimensions,
    get_dimension,
    is_canonical_dimension,
    normalize_dimension_name,
    normalize_dimension_scores,
)
from diagnostic.domain.models import DimensionScore


class TestRegistry:
    def test_five_dimensions_in_fixed_order(self):
        assert [d.id for d in DIMENSIONS] == [1, 2, 3, 4, 5]
        assert [d.name for d in DIMENSIONS] == list(DIMENSION_NAMES)
        assert DIMENSION_NAMES[2] == "Conexão e Propósito"

    def test_likert_options(self):
        assert [o.value for o in LIKERT_OPTIONS] == [1, 2, 3, 4, 5]
        assert LIKERT_OPTIONS[0].label == "Discordo totalmente"
        assert LIKERT_OPTIONS[2].label == "Neutro"
        assert LIKERT_OPTIONS[4].label == "Concordo totalmente"

    def test_from_name_is_exact(self):
        assert DimensionId.from_name("Transformação") is DimensionId.TRANSFORMACAO
        assert DimensionId.from_name("transformacao") is None
        assert DimensionId.from_name("Transformação e Crescimento") is None

    def test_get_dimension(self):
        dim = get_dimension("Relações e Compaixão")
        assert dim is not None
        assert dim.icon == "users"
        assert get_dimension("relacoes_compaixao") is None

    def test_display_name_round_trip(self):
        for dim_id in DimensionId:
            assert DimensionId.from_name(dim_id.display_name) is dim_id


class TestNormalizeDimensionName:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("conexao_proposito", "Conexão e Propósito"),
            ("conexao_e_proposito", "Conexão e Propósito"),
            ("consciencia_interior", "Consciência Interior"),
            ("relacoes_e_compaixao", "Relações e Compaixão"),
            ("transformacao_crescimento", "Transformação"),
            ("Coerência Emocional", "Coerência Emocional"),
        ],
    )
    def test_alias_table(self, raw, expected):
        assert normalize_dimension_name(raw) == expected

    def test_lowercased_and_trimmed(self):
        assert normalize_dimension_name("  TRANSFORMACAO ") == "Transformação"

    def test_accent_and_punctuation_insensitive(self):
        assert normalize_dimension_name("Conexao e Proposito") == "Conexão e Propósito"
        assert normalize_dimension_name("consciência-interior") == "Consciência Interior"
        assert normalize_dimension_name("Transformação e Crescimento") == "Transformação"

    def test_unknown_is_returned_unchanged(self):
        assert normalize_dimension_name("Liderança") == "Liderança"
        assert normalize_dimension_name("") == ""

    @pytest.mark.parametrize(
        "raw",
        list(DIMENSION_ALIASES) + ["Conexao e Proposito", "Liderança", "  transformacao  ", ""],
    )
    def test_idempotent(self, raw):
        once = normalize_dimension_name(raw)
        assert normalize_dimension_name(once) == once


class TestNormalizeDimensionScores:
    def test_names_normalized_and_input_untouched(self):
        scores = [DimensionScore("conexao_proposito", 3, 4.0, 5, 80.0)]
        normalized = normalize_dimension_scores(scores)
        assert normalized[0].dimension == "Conexão e Propósito"
        assert normalized[0].percentage == 80.0
        assert scores[0].dimension == "conexao_proposito"
        assert normalized is not scores

    def test_missing_percentage_is_backfilled(self):
        normalized = normalize_dimension_scores([DimensionScore("transformacao", 5, 4.0)])
        assert normalized[0].percentage == 80.0

    def test_zero_max_score_uses_five(self):
        normalized = normalize_dimension_scores([DimensionScore("A", 1, 2.5, 0, 0.0)])
        assert normalized[0].percentage == 50.0
        assert normalized[0].max_score == 0


class TestUnresolved:
    def test_canonical_names(self):
        assert is_canonical_dimension("Consciência Interior")
        assert not is_canonical_dimension("consciencia_interior")

    def test_unresolved_names_deduplicated_in_order(self):
        names = ["Liderança", "Transformação", "Foco", "Liderança"]
        assert find_unresolved_dimensions(names) == ["Liderança", "Foco"]
