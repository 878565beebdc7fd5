"""
DISC behavioural profile scoring.

Same averaging rules as the IQ+IS calculator, over the four fixed letters
D, I, S and C, plus the two-letter profile lookup.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Mapping, Sequence

from .models import (
    MAX_SCORE,
    DiscDimensionScore,
    DiscProfile,
    DiscRecommendation,
    DiscScoreLevel,
    DiscScores,
    DiscWeeklyPlan,
    Question,
)
from .disc_descriptions import DISC_DIMENSIONS, GENERIC_PROFILE_DESCRIPTION
from .rounding import round_half_up
from .services import average_responses

DISC_ORDER: tuple[str, ...] = ("D", "I", "S", "C")

DISC_LABELS: dict[str, str] = {letter: info.name for letter, info in DISC_DIMENSIONS.items()}

DISC_COLORS: dict[str, str] = {letter: info.color for letter, info in DISC_DIMENSIONS.items()}

DEFAULT_COLOR = "#6B7280"

DISC_SLUGS: dict[str, str] = {
    "dominancia": "D",
    "influencia": "I",
    "estabilidade": "S",
    "conformidade": "C",
}

_NON_LETTERS = re.compile(r"[^a-z]")

DISC_PROFILES: dict[str, tuple[str, str]] = {
    "DI": (
        "Dominante Influente",
        "Orientado a resultados e atento ao relacionamento com as pessoas. Une assertividade e "
        "entusiasmo, liderando com energia e motivando equipes.",
    ),
    "DC": (
        "Dominante Cauteloso",
        "Une a busca por resultados à atenção aos detalhes. Decide rápido, mas com fundamento, "
        "e mantém altos padrões de qualidade.",
    ),
    "DS": (
        "Dominante Estável",
        "Determinado e ao mesmo tempo valoriza a estabilidade. Combina foco em resultados com "
        "paciência e persistência, liderando de forma consistente.",
    ),
    "ID": (
        "Influente Dominante",
        "Carismático e orientado à ação. Habilidades sociais marcantes somadas à determinação "
        "para inspirar e mobilizar pessoas em torno de objetivos.",
    ),
    "IS": (
        "Influente Estável",
        "Caloroso e acolhedor, valoriza relacionamentos profundos. Une entusiasmo e paciência, "
        "criando ambientes harmoniosos e colaborativos.",
    ),
    "IC": (
        "Influente Cauteloso",
        "Combina habilidades sociais com pensamento analítico: comunica bem sem perder a "
        "atenção aos detalhes e à qualidade.",
    ),
    "SD": (
        "Estável Dominante",
        "Confiável e persistente, sabe ser assertivo quando necessário. Um pilar de consistência "
        "com determinação.",
    ),
    "SI": (
        "Estável Influente",
        "Paciente e sociável, valoriza harmonia e relacionamentos. Leal e simpático, é um ótimo "
        "mediador e colaborador.",
    ),
    "SC": (
        "Estável Cauteloso",
        "Metódico e confiável, valoriza precisão e consistência. Excelente em tarefas que "
        "exigem cuidado.",
    ),
    "CD": (
        "Cauteloso Dominante",
        "Une pensamento analítico à orientação a resultados, buscando excelência com "
        "planejamento cuidadoso e execução determinada.",
    ),
    "CI": (
        "Cauteloso Influente",
        "Alia análise detalhada a boa comunicação, apresentando dados e ideias de forma "
        "envolvente e persuasiva.",
    ),
    "CS": (
        "Cauteloso Estável",
        "Analítico e paciente, valoriza precisão e estabilidade. Excelente em trabalhos que "
        "exigem rigor.",
    ),
    "DD": (
        "Dominante",
        "Altamente orientado a resultados, assertivo e direto. Gosta de desafios, decide rápido "
        "e busca eficiência em tudo.",
    ),
    "II": (
        "Influente",
        "Altamente sociável, entusiasta e otimista. Persuasivo, cria ambientes positivos ao seu "
        "redor.",
    ),
    "SS": (
        "Estável",
        "Altamente confiável, paciente e leal. Valoriza harmonia, consistência e "
        "relacionamentos duradouros.",
    ),
    "CC": (
        "Cauteloso",
        "Altamente analítico, preciso e detalhista. Valoriza qualidade, procedimentos claros e "
        "decisões baseadas em dados.",
    ),
}


def normalize_disc_dimension_key(dimension: str) -> str:
    """Map a DISC dimension label or slug to its letter; unknown input is returned as is."""
    if dimension in DISC_LABELS:
        return dimension

    # accents are folded, not dropped: "Influência" must still read as "influencia"
    decomposed = unicodedata.normalize("NFD", dimension.lower())
    slug = _NON_LETTERS.sub("", "".join(ch for ch in decomposed if not unicodedata.combining(ch)))
    if slug in DISC_SLUGS:
        return DISC_SLUGS[slug]

    if "domin" in slug:
        return "D"
    if "influen" in slug:
        return "I"
    if "estabil" in slug:
        return "S"
    if "conform" in slug or "cautela" in slug or "conscien" in slug:
        return "C"

    return dimension


def calculate_disc_scores(
    questions: Sequence[Question], responses: Mapping[str, int]
) -> DiscScores:
    groups: dict[str, list[Question]] = {}
    for q in questions:
        groups.setdefault(normalize_disc_dimension_key(q.dimension), []).append(q)

    dimension_scores: list[DiscDimensionScore] = []
    for letter in DISC_ORDER:
        avg = average_responses(groups.get(letter, []), responses)
        dimension_scores.append(
            DiscDimensionScore(
                dimension=letter,
                dimension_label=DISC_LABELS[letter],
                score=round_half_up(avg, 2),
                max_score=MAX_SCORE,
                percentage=round_half_up(avg / MAX_SCORE * 100, 1),
                color=DISC_COLORS[letter],
            )
        )

    ordered = sorted(dimension_scores, key=lambda d: d.score, reverse=True)
    primary = ordered[0].dimension if ordered else "S"
    secondary = ordered[1].dimension if len(ordered) > 1 else "I"

    total = sum(d.score for d in dimension_scores) / len(dimension_scores)
    return DiscScores(
        dimension_scores=dimension_scores,
        total_score=round_half_up(total, 2),
        profile=get_disc_profile(primary, secondary),
    )


def get_disc_profile(primary: str, secondary: str) -> DiscProfile:
    key = f"{primary}{secondary}"
    entry = DISC_PROFILES.get(key) or DISC_PROFILES.get(f"{primary}{primary}")
    if entry is None:
        entry = (DISC_LABELS.get(primary, primary), GENERIC_PROFILE_DESCRIPTION)
    label, description = entry
    return DiscProfile(primary=primary, secondary=secondary, label=label, description=description)


def get_disc_score_level(percentage: float) -> DiscScoreLevel:
    if percentage < 30:
        return DiscScoreLevel("baixo", "Baixo")
    if percentage < 50:
        return DiscScoreLevel("moderado", "Moderado")
    if percentage < 75:
        return DiscScoreLevel("alto", "Alto")
    return DiscScoreLevel("muito_alto", "Muito Alto")


def get_disc_dimension_color(dimension: str) -> str:
    return DISC_COLORS.get(normalize_disc_dimension_key(dimension), DEFAULT_COLOR)


def get_disc_dimension_label(dimension: str) -> str:
    return DISC_LABELS.get(normalize_disc_dimension_key(dimension), dimension)


DISC_DEVELOPMENT_PRACTICES: dict[str, tuple[DiscRecommendation, DiscRecommendation]] = {
    "D": (
        DiscRecommendation(
            "Assertividade",
            "Exercício de posicionamento",
            "Expresse sua opinião de forma clara e direta em reuniões, começando por situações "
            "de baixo risco.",
            "3x por semana",
        ),
        DiscRecommendation(
            "Tomada de decisão",
            "Decisões cronometradas",
            "Defina um limite de tempo para decisões do dia a dia e ganhe confiança para "
            "decidir com agilidade.",
            "Diariamente",
        ),
    ),
    "I": (
        DiscRecommendation(
            "Comunicação social",
            "Networking intencional",
            "Reserve tempo para conhecer pessoas novas, iniciar conversas e praticar escuta "
            "ativa com interesse genuíno.",
            "2x por semana",
        ),
        DiscRecommendation(
            "Expressão emocional",
            "Diário de gratidão compartilhado",
            "Compartilhe algo positivo com alguém todos os dias: um elogio, um agradecimento ou "
            "uma observação.",
            "Diariamente",
        ),
    ),
    "S": (
        DiscRecommendation(
            "Adaptabilidade",
            "Micro-mudanças diárias",
            "Introduza pequenas mudanças na rotina, como um caminho diferente ou uma nova "
            "abordagem para uma tarefa.",
            "Diariamente",
        ),
        DiscRecommendation(
            "Paciência ativa",
            "Escuta profunda",
            "Em conversas importantes, ouça por 2 minutos sem interromper e resuma o que ouviu "
            "antes de responder.",
            "3x por semana",
        ),
    ),
    "C": (
        DiscRecommendation(
            "Pensamento analítico",
            "Análise estruturada",
            "Antes de decisões importantes, liste prós e contras e busque dados que fundamentem "
            "a escolha.",
            "Semanalmente",
        ),
        DiscRecommendation(
            "Organização",
            "Revisão de processos",
            "Documente procedimentos e crie checklists para as tarefas recorrentes.",
            "Semanalmente",
        ),
    ),
}


def get_disc_recommendations(
    primary: str, dimension_scores: Sequence[DiscDimensionScore]
) -> list[DiscRecommendation]:
    """Two practices for each of the two lowest letters by percentage, then a profile reflection."""
    recommendations: list[DiscRecommendation] = []
    for dim in sorted(dimension_scores, key=lambda d: d.percentage)[:2]:
        if dim.dimension not in DISC_DIMENSIONS:
            continue
        recommendations.extend(DISC_DEVELOPMENT_PRACTICES.get(dim.dimension, ()))

    primary_name = DISC_LABELS.get(primary, primary)
    recommendations.append(
        DiscRecommendation(
            "Autoconhecimento",
            "Reflexão DISC semanal",
            f"Reserve 15 minutos por semana para refletir sobre situações em que suas "
            f"características de {primary_name} se manifestaram, nos momentos de força e nos de "
            f"desafio.",
            "Semanalmente",
        )
    )
    return recommendations


def get_disc_action_plan(primary: str, secondary: str) -> list[DiscWeeklyPlan]:
    p = DISC_LABELS.get(primary, primary)
    s = DISC_LABELS.get(secondary, secondary)
    return [
        DiscWeeklyPlan(
            1,
            "Autoconhecimento",
            (
                f"Identifique 3 situações recentes em que seu perfil {p} se manifestou",
                "Peça a 2 pessoas próximas um retorno sobre seu estilo comportamental",
                "Anote seus padrões de reação em situações de pressão",
                "Identifique seus 3 principais gatilhos de estresse",
            ),
            "Ter clareza sobre seu perfil e como ele impacta suas interações",
        ),
        DiscWeeklyPlan(
            2,
            "Fortalecendo suas qualidades",
            (
                f"Aplique conscientemente suas forças de {p} em uma situação profissional",
                f"Pratique uma habilidade ligada à {s} que complementa seu perfil",
                "Use seu estilo natural para ajudar alguém",
                "Registre os resultados positivos das suas interações",
            ),
            "Potencializar suas forças naturais de forma intencional",
        ),
        DiscWeeklyPlan(
            3,
            "Desenvolvendo áreas de crescimento",
            (
                f"Identifique uma situação em que seu perfil {p} pode criar desafios",
                "Pratique um comportamento fora da sua zona de conforto",
                "Peça um retorno sobre como você está se comunicando",
                "Experimente uma abordagem diferente em uma situação recorrente",
            ),
            "Expandir seu repertório comportamental além do estilo natural",
        ),
        DiscWeeklyPlan(
            4,
            "Integração e próximos passos",
            (
                "Revise o diário das últimas 3 semanas e identifique padrões",
                "Defina 3 metas de desenvolvimento comportamental para os próximos 3 meses",
                "Compartilhe seu perfil DISC com sua equipe ou pessoas próximas",
                "Agende uma conversa com seu facilitador sobre o seu progresso",
            ),
            "Consolidar os aprendizados em um plano de desenvolvimento contínuo",
        ),
    ]
