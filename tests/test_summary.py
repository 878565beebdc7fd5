from __future__ import annotations

import pytest

from diagnostic.domain.dimensions import DimensionId
from diagnostic.domain.models import DimensionScore
from diagnostic.domain.schemas import ExecutiveSummaryInput
from diagnostic.domain.summary import (
    CLOSING,
    DIMENSION_DEVELOPMENT,
    DIMENSION_STRENGTHS,
    generate_executive_summary,
    generate_executive_summary_from_input,
)

CI = "Consciência Interior"
CE = "Coerência Emocional"
CP = "Conexão e Propósito"
RC = "Relações e Compaixão"
TR = "Transformação"


def profile() -> list[DimensionScore]:
    return [
        DimensionScore(CI, 1, 4.5),
        DimensionScore(CE, 2, 2.25),
        DimensionScore(CP, 3, 3.8),
        DimensionScore(RC, 4, 1.9),
        DimensionScore(TR, 5, 3.0),
    ]


class TestExecutiveSummary:
    def test_uses_first_name_and_badge(self):
        text = generate_executive_summary("Maria Clara Souza", 3.09, profile())
        assert text.startswith("O perfil de Maria revela uma base sólida")
        assert "3.1/5 (Bom)" in text

    def test_strengths_are_top_two_descending(self):
        text = generate_executive_summary("Ana", 3.09, profile())
        assert f"{CI} (4.5) e {CP} (3.8)" in text
        assert DIMENSION_STRENGTHS[DimensionId.CONSCIENCIA_INTERIOR] in text
        assert DIMENSION_STRENGTHS[DimensionId.CONEXAO_PROPOSITO] in text

    def test_development_is_lowest_first(self):
        text = generate_executive_summary("Ana", 3.09, profile())
        assert f"{RC} (1.9) e {CE} (2.3)" in text
        assert DIMENSION_DEVELOPMENT[DimensionId.RELACOES_COMPAIXAO] in text

    def test_parts_and_closing(self):
        text = generate_executive_summary("Ana", 3.09, profile())
        assert text.endswith(CLOSING)
        assert "  " not in text

    @pytest.mark.parametrize(
        "total,opening",
        [
            (4.2, "desenvolvimento consolidado"),
            (3.0, "base sólida"),
            (2.0, "estágio de desenvolvimento"),
            (1.5, "início de uma jornada"),
        ],
    )
    def test_opening_bands(self, total, opening):
        assert opening in generate_executive_summary("Ana", total, profile())

    def test_unknown_dimension_gets_empty_phrase(self):
        scores = [DimensionScore("Liderança", 0, 5.0), DimensionScore(CI, 0, 4.0)]
        text = generate_executive_summary("Ana", 4.5, scores)
        assert "Liderança (5.0)" in text
        assert "indicando  e " in text

    def test_requires_two_dimensions(self):
        with pytest.raises(IndexError):
            generate_executive_summary("Ana", 3.0, [DimensionScore(CI, 1, 3.0)])

    def test_accepts_validated_input(self):
        data = ExecutiveSummaryInput(
            participant_name="  João Pedro ",
            dimension_scores=[
                {"dimension": CI, "score": 4.0},
                {"dimension": CE, "score": 2.0},
            ],
        )
        text = generate_executive_summary_from_input(data)
        assert text.startswith("O perfil de João")
        assert "3.0/5 (Bom)" in text
