"""
Cross-dimension insights.

Each rule pairs a strong dimension with a weak one. Rules are evaluated in a
single pass, independently of each other, and every match is returned in
table order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .dimensions import DimensionId
from .models import CrossInsight, DimensionScore

# LOW is not the interpreter's 2.5 band edge.
HIGH = 3.5
LOW = 2.8


@dataclass(frozen=True, slots=True)
class CrossRule:
    high: DimensionId
    low: DimensionId
    title: str
    insight: str
    recommendation: str

    def matches(self, score_map: dict[str, float]) -> bool:
        high_score = score_map.get(self.high.display_name)
        low_score = score_map.get(self.low.display_name)
        if high_score is None or low_score is None:
            return False
        return high_score >= HIGH and low_score < LOW

    def to_insight(self) -> CrossInsight:
        return CrossInsight(
            title=self.title,
            dimensions=(self.high.display_name, self.low.display_name),
            insight=self.insight,
            recommendation=self.recommendation,
        )


_CI = DimensionId.CONSCIENCIA_INTERIOR
_CE = DimensionId.COERENCIA_EMOCIONAL
_CP = DimensionId.CONEXAO_PROPOSITO
_RC = DimensionId.RELACOES_COMPAIXAO
_TR = DimensionId.TRANSFORMACAO

CROSS_RULES: tuple[CrossRule, ...] = (
    CrossRule(
        _CI,
        _CE,
        "Percepção sem regulação",
        "Você percebe bem o que sente e o que acontece por dentro, mas pode ter dificuldade em "
        "modular essas emoções depois de identificá-las. É um radar emocional sensível sem os "
        "controles de ajuste: você nota que está reagindo de forma exagerada no exato momento, "
        "mas não consegue frear a reação.",
        "Aproveite sua consciência apurada para aprender técnicas de regulação: respiração "
        "4-7-8, reavaliação cognitiva e comunicação não-violenta podem transformar percepção em "
        "regulação efetiva.",
    ),
    CrossRule(
        _CE,
        _CI,
        "Regulação sem raiz",
        "Você lida bem com as emoções na superfície, mas pode estar regulando de forma reativa, "
        "controlando emoções já intensas em vez de percebê-las no início. Isso funciona no dia a "
        "dia, mas tende a falhar sob pressão extrema.",
        "Práticas de mindfulness e auto-observação dão profundidade à sua regulação, permitindo "
        "notar as emoções muito antes de se tornarem avassaladoras.",
    ),
    CrossRule(
        _CP,
        _TR,
        "Visão sem ação",
        "Você tem clareza sobre seus valores e sobre a direção que deseja, mas encontra "
        "dificuldade em implementar as mudanças concretas para vivê-los. O desafio não é saber "
        "para onde ir, e sim dar o primeiro passo e sustentá-lo, o que pode gerar frustração ou "
        "sensação de estagnação.",
        "Comece com micro-mudanças alinhadas aos seus valores, celebre o progresso em vez da "
        "perfeição e use sua clareza de propósito como combustível para sustentar a mudança.",
    ),
    CrossRule(
        _TR,
        _CP,
        "Movimento sem direção",
        "Você tem forte disposição para mudar e crescer, mas sem uma bússola clara de valores "
        "essa energia pode se dispersar em várias direções. Há muito movimento, mas não "
        "necessariamente progresso coerente, e pode surgir a busca compulsiva por novidades.",
        "Clarificar seus valores e definir um propósito canaliza sua energia transformadora. "
        "Perguntar 'para que estou mudando?' dá foco e profundidade ao seu crescimento.",
    ),
    CrossRule(
        _RC,
        _CI,
        "Empatia sem auto-observação",
        "Sua empatia e capacidade de conexão são recursos valiosos, mas sem auto-observação "
        "suficiente podem levar ao esgotamento. Conectar-se ao sofrimento alheio sem perceber o "
        "impacto em si mesmo abre caminho para a fadiga de compaixão.",
        "O escaneamento corporal e a atenção aos próprios limites emocionais protegem sua "
        "empatia, permitindo que você continue se conectando sem se perder no processo.",
    ),
    CrossRule(
        _CI,
        _RC,
        "Introspecção sem conexão",
        "Sua auto-observação é forte, mas pode estar voltada quase só para dentro, sem se "
        "expandir para a conexão com os outros. Introspecção sem empatia pode virar uma forma "
        "sofisticada de isolamento emocional.",
        "Meditação de bondade amorosa, escuta ativa profunda e autocompaixão são pontes "
        "naturais entre sua consciência interior e conexões mais profundas.",
    ),
    CrossRule(
        _CE,
        _RC,
        "Regulação sem vulnerabilidade",
        "Você gerencia bem suas emoções, mas pode estar usando essa habilidade mais como escudo "
        "do que como ponte. Uma regulação muito orientada ao controle dificulta a "
        "vulnerabilidade que as conexões profundas exigem.",
        "Experimente a vulnerabilidade dosada: compartilhe aos poucos sentimentos e necessidades "
        "em relacionamentos seguros. Tratar-se com gentileza abre espaço para tratar os outros "
        "da mesma forma.",
    ),
    CrossRule(
        _RC,
        _CE,
        "Coração aberto sem proteção",
        "Sua capacidade empática é admirável, mas sem regulação emocional robusta você pode "
        "absorver as emoções alheias de forma desgastante, como uma esponja emocional que não "
        "distingue o que é seu do que é do outro.",
        "Técnicas de regulação, como reconhecer limites e modular a intensidade da experiência "
        "empática, protegem sua saúde emocional sem fechar seu coração.",
    ),
    CrossRule(
        _CP,
        _CE,
        "Propósito com turbulência emocional",
        "Você sabe o que importa e aonde quer chegar, mas a instabilidade emocional pode sabotar "
        "a jornada. É ter um ótimo mapa e dirigir durante uma tempestade: frustrações mal "
        "reguladas levam a decisões impulsivas que afastam do propósito.",
        "Fortalecer a regulação emocional com respiração consciente, reavaliação cognitiva e "
        "diário emocional ajuda a manter o rumo mesmo em momentos de tempestade interna.",
    ),
    CrossRule(
        _TR,
        _CI,
        "Mudança sem autoconhecimento",
        "Sua disposição para mudar é notável, mas sem consciência interior robusta você corre o "
        "risco de mudar por reação a pressões externas, e não por necessidades internas. O "
        "resultado costuma ser uma sequência de mudanças que não se aprofundam.",
        "Atenção plena e auto-observação dão direção à sua energia transformadora, garantindo "
        "que as mudanças buscadas sejam genuínas e sustentáveis.",
    ),
)


def build_score_map(scores: Iterable[DimensionScore]) -> dict[str, float]:
    score_map: dict[str, float] = {}
    for s in scores:
        score_map[s.dimension] = s.score
    return score_map


def get_cross_analysis_insights(scores: Iterable[DimensionScore]) -> list[CrossInsight]:
    score_map = build_score_map(scores)
    return [rule.to_insight() for rule in CROSS_RULES if rule.matches(score_map)]
