"""
Dimension registry and name normalization for the IQ+IS diagnostic.

Dimension identity travels between subsystems as free text: persisted scores
may carry slugs (``conexao_proposito``) while the content tables use accented
display names (``Conexão e Propósito``). Content tables are keyed by
``DimensionId``; ``DimensionId.from_name`` is the only place a display name is
translated into a key, and ``normalize_dimension_name`` is what callers run on
externally sourced names before they reach it.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable
from dataclasses import replace
from enum import IntEnum

from .models import MAX_SCORE, Dimension, DimensionScore, LikertOption


class DimensionId(IntEnum):
    CONSCIENCIA_INTERIOR = 1
    COERENCIA_EMOCIONAL = 2
    CONEXAO_PROPOSITO = 3
    RELACOES_COMPAIXAO = 4
    TRANSFORMACAO = 5

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> DimensionId | None:
        """Exact canonical display-name lookup; ``None`` for anything else."""
        return _IDS_BY_NAME.get(name)


_DISPLAY_NAMES: dict[DimensionId, str] = {
    DimensionId.CONSCIENCIA_INTERIOR: "Consciência Interior",
    DimensionId.COERENCIA_EMOCIONAL: "Coerência Emocional",
    DimensionId.CONEXAO_PROPOSITO: "Conexão e Propósito",
    DimensionId.RELACOES_COMPAIXAO: "Relações e Compaixão",
    DimensionId.TRANSFORMACAO: "Transformação",
}
_IDS_BY_NAME: dict[str, DimensionId] = {name: dim for dim, name in _DISPLAY_NAMES.items()}

DIMENSION_NAMES: tuple[str, ...] = tuple(_DISPLAY_NAMES[d] for d in DimensionId)

DIMENSIONS: list[Dimension] = [
    Dimension(
        id=DimensionId.CONSCIENCIA_INTERIOR,
        name="Consciência Interior",
        description=(
            "Capacidade de observar pensamentos e emoções, praticar atenção plena "
            "e reconhecer padrões internos."
        ),
        icon="brain",
    ),
    Dimension(
        id=DimensionId.COERENCIA_EMOCIONAL,
        name="Coerência Emocional",
        description=(
            "Habilidade de nomear, regular e expressar emoções de forma equilibrada "
            "e construtiva."
        ),
        icon="heart",
    ),
    Dimension(
        id=DimensionId.CONEXAO_PROPOSITO,
        name="Conexão e Propósito",
        description=(
            "Alinhamento entre valores, ações e senso de significado e direção na vida."
        ),
        icon="compass",
    ),
    Dimension(
        id=DimensionId.RELACOES_COMPAIXAO,
        name="Relações e Compaixão",
        description=(
            "Capacidade de empatia, conexão genuína, perdão e autocompaixão nos "
            "relacionamentos."
        ),
        icon="users",
    ),
    Dimension(
        id=DimensionId.TRANSFORMACAO,
        name="Transformação",
        description="Abertura para mudança, aprendizado contínuo e crescimento pessoal.",
        icon="sparkles",
    ),
]

LIKERT_OPTIONS: list[LikertOption] = [
    LikertOption(1, "Discordo totalmente"),
    LikertOption(2, "Discordo"),
    LikertOption(3, "Neutro"),
    LikertOption(4, "Concordo"),
    LikertOption(5, "Concordo totalmente"),
]

# Slugs seen in storage plus the canonical names (identity entries keep
# normalization idempotent). Order matters for the fuzzy pass: first hit wins.
DIMENSION_ALIASES: dict[str, str] = {
    "conexao_proposito": "Conexão e Propósito",
    "conexao_e_proposito": "Conexão e Propósito",
    "consciencia_interior": "Consciência Interior",
    "coerencia_emocional": "Coerência Emocional",
    "relacoes_compaixao": "Relações e Compaixão",
    "relacoes_e_compaixao": "Relações e Compaixão",
    "transformacao_crescimento": "Transformação",
    "transformacao_e_crescimento": "Transformação",
    "transformacao": "Transformação",
    "Conexão e Propósito": "Conexão e Propósito",
    "Consciência Interior": "Consciência Interior",
    "Coerência Emocional": "Coerência Emocional",
    "Relações e Compaixão": "Relações e Compaixão",
    "Transformação": "Transformação",
}

_NON_LETTERS = re.compile(r"[^a-z]")


def _strip_accents(value: str) -> str:
    decomposed = unicodedata.normalize("NFD", value)
    bare = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _NON_LETTERS.sub("", bare.lower())


_FUZZY_KEYS: list[tuple[str, str]] = [
    (_strip_accents(key), canonical) for key, canonical in DIMENSION_ALIASES.items()
]


def get_dimension(name: str) -> Dimension | None:
    dim_id = DimensionId.from_name(name)
    if dim_id is None:
        return None
    return DIMENSIONS[dim_id - 1]


def is_canonical_dimension(name: str) -> bool:
    return DimensionId.from_name(name) is not None


def normalize_dimension_name(name: str) -> str:
    """
    Map any known spelling of a dimension to its canonical display name.

    Matching order: exact alias, lowercased/trimmed alias, then accent- and
    punctuation-insensitive comparison against every alias. Unknown names are
    returned unchanged; downstream content lookups will then miss.

    Example:
        >>> normalize_dimension_name("conexao_proposito")
        'Conexão e Propósito'
        >>> normalize_dimension_name("Transformação e Crescimento")
        'Transformação'
    """
    if name in DIMENSION_ALIASES:
        return DIMENSION_ALIASES[name]

    lowered = name.lower().strip()
    if lowered in DIMENSION_ALIASES:
        return DIMENSION_ALIASES[lowered]

    stripped = _strip_accents(name)
    for key, canonical in _FUZZY_KEYS:
        if key == stripped:
            return canonical

    return name


def normalize_dimension_scores(scores: Iterable[DimensionScore]) -> list[DimensionScore]:
    """Normalize names and backfill percentage for producers that only send a score."""
    normalized: list[DimensionScore] = []
    for s in scores:
        percentage = s.percentage
        if percentage <= 0:
            percentage = (s.score / (s.max_score or MAX_SCORE)) * 100
        normalized.append(
            replace(s, dimension=normalize_dimension_name(s.dimension), percentage=percentage)
        )
    return normalized


def find_unresolved_dimensions(names: Iterable[str]) -> list[str]:
    """Names that are still not canonical, in first-seen order without repeats."""
    unresolved: list[str] = []
    for name in names:
        if not is_canonical_dimension(name) and name not in unresolved:
            unresolved.append(name)
    return unresolved
