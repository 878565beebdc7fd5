from __future__ import annotations

from collections.abc import Sequence

from .dimensions import DimensionId
from .models import DimensionScore
from .rounding import round_half_up, to_fixed
from .schemas import ExecutiveSummaryInput
from .services import get_score_level_badge

DIMENSION_STRENGTHS: dict[DimensionId, str] = {
    DimensionId.CONSCIENCIA_INTERIOR: "forte capacidade de auto-observação e presença consciente",
    DimensionId.COERENCIA_EMOCIONAL: "maturidade na identificação e regulação das emoções",
    DimensionId.CONEXAO_PROPOSITO: "clareza de valores e alinhamento com seu senso de direção",
    DimensionId.RELACOES_COMPAIXAO: "empatia genuína e conexão significativa com os outros",
    DimensionId.TRANSFORMACAO: "abertura para mudança e mentalidade de crescimento",
}

DIMENSION_DEVELOPMENT: dict[DimensionId, str] = {
    DimensionId.CONSCIENCIA_INTERIOR: (
        "a auto-observação e atenção plena, que são a base para todo desenvolvimento pessoal"
    ),
    DimensionId.COERENCIA_EMOCIONAL: (
        "a regulação emocional e expressão autêntica, fundamentais para decisões equilibradas"
    ),
    DimensionId.CONEXAO_PROPOSITO: (
        "o alinhamento entre valores e ações, essencial para motivação sustentável"
    ),
    DimensionId.RELACOES_COMPAIXAO: (
        "a empatia e autocompaixão, pilares de relacionamentos saudáveis"
    ),
    DimensionId.TRANSFORMACAO: (
        "a flexibilidade e coragem para mudança, essenciais em um mundo em constante evolução"
    ),
}

CLOSING = (
    "O fortalecimento dessas áreas pode criar um efeito multiplicador, potencializando as "
    "competências já desenvolvidas e ampliando a capacidade de influência positiva em todas as "
    "dimensões da vida pessoal e profissional."
)


def _phrase(table: dict[DimensionId, str], dimension: str) -> str:
    dim_id = DimensionId.from_name(dimension)
    return table.get(dim_id, "") if dim_id is not None else ""


def _opening(first_name: str, total_score: float) -> str:
    score_text = f"{to_fixed(total_score, 1)}/5 ({get_score_level_badge(total_score).label})"
    if total_score >= 4:
        return (
            f"O perfil de {first_name} revela um desenvolvimento consolidado e robusto em "
            f"inteligência emocional e espiritual, com score geral de {score_text}."
        )
    if total_score >= 3:
        return (
            f"O perfil de {first_name} revela uma base sólida de inteligência emocional e "
            f"espiritual, com score geral de {score_text}."
        )
    if total_score >= 2:
        return (
            f"O perfil de {first_name} indica um estágio de desenvolvimento com fundamentos "
            f"presentes e oportunidades claras de crescimento, com score geral de {score_text}."
        )
    return (
        f"O perfil de {first_name} revela o início de uma jornada significativa de "
        f"autoconhecimento, com score geral de {score_text}."
    )


def generate_executive_summary(
    participant_name: str, total_score: float, dimension_scores: Sequence[DimensionScore]
) -> str:
    """
    Compose the narrative summary paragraph.

    Requires at least two dimension scores; fewer raises ``IndexError``.
    """
    first_name = participant_name.split(" ")[0]

    ordered = sorted(dimension_scores, key=lambda d: d.score, reverse=True)
    top = ordered[:2]
    bottom = list(reversed(ordered[-2:]))

    strengths = (
        f"Suas maiores forças residem em {top[0].dimension} ({to_fixed(top[0].score, 1)}) e "
        f"{top[1].dimension} ({to_fixed(top[1].score, 1)}), indicando "
        f"{_phrase(DIMENSION_STRENGTHS, top[0].dimension)} e "
        f"{_phrase(DIMENSION_STRENGTHS, top[1].dimension)}."
    )
    development = (
        f"As áreas que mais se beneficiariam de atenção intencional são {bottom[0].dimension} "
        f"({to_fixed(bottom[0].score, 1)}) e {bottom[1].dimension} "
        f"({to_fixed(bottom[1].score, 1)}), onde há potencial significativo de crescimento — "
        f"especificamente em {_phrase(DIMENSION_DEVELOPMENT, bottom[0].dimension)} e "
        f"{_phrase(DIMENSION_DEVELOPMENT, bottom[1].dimension)}."
    )

    return " ".join([_opening(first_name, total_score), strengths, development, CLOSING])


def generate_executive_summary_from_input(data: ExecutiveSummaryInput) -> str:
    """Summary for a validated payload; a missing total is the mean of its dimension scores."""
    dimension_scores = [d.to_domain() for d in data.dimension_scores]
    total_score = data.total_score
    if total_score is None:
        total_score = round_half_up(
            sum(d.score for d in dimension_scores) / len(dimension_scores), 2
        )
    return generate_executive_summary(data.participant_name, total_score, dimension_scores)
