from __future__ import annotations

from collections.abc import Iterable

from .dimensions import DimensionId
from .models import Recommendation

RECOMMENDATIONS: dict[DimensionId, Recommendation] = {
    DimensionId.CONSCIENCIA_INTERIOR: Recommendation(
        title="Desenvolva sua Consciência Interior",
        description=(
            "Fortaleça sua capacidade de auto-observação e presença no momento atual. A "
            "consciência interior é treinável como um músculo: cada prática de atenção plena "
            "torna a presença e a auto-observação mais estáveis."
        ),
        practices=(
            "Pratique 10 minutos diários de meditação mindfulness, começando pela respiração e "
            "ampliando aos poucos para a consciência aberta",
            "Faça 3 pausas conscientes de 60 segundos ao longo do dia: pare, respire, observe o "
            "que sente e pensa, e retome a atividade",
            "Mantenha um diário reflexivo noturno com 3 padrões que notou em si mesmo durante o "
            "dia",
            "Escolha atividades rotineiras (lavar as mãos, abrir uma porta) como gatilhos de "
            "presença para voltar ao momento atual",
        ),
        resources=(
            "Livro: 'Atenção Plena' — Mark Williams e Danny Penman",
            "Livro: 'Aonde Quer que Você Vá, É Você que Está Lá' — Jon Kabat-Zinn",
            "Técnica: MBSR (Mindfulness-Based Stress Reduction)",
        ),
        expected_benefits=(
            "Em 4 a 8 semanas de prática: mais capacidade de notar pensamentos e emoções antes "
            "de reagir, menos estresse e maior sensação de presença no cotidiano."
        ),
    ),
    DimensionId.COERENCIA_EMOCIONAL: Recommendation(
        title="Desenvolva sua Coerência Emocional",
        description=(
            "Aprimore sua capacidade de reconhecer, nomear e regular emoções de forma "
            "equilibrada. Saber identificar com precisão o que sente é o primeiro passo para a "
            "regulação e para decisões e relacionamentos mais saudáveis."
        ),
        practices=(
            "Nomeie suas emoções com granularidade: em vez de 'estou mal', identifique se é "
            "frustração, tristeza, decepção, ansiedade ou ressentimento",
            "Use a respiração 4-7-8 em momentos de ativação emocional: inspire por 4 segundos, "
            "segure por 7, expire por 8, por 3 ciclos",
            "Monte um mapa de gatilhos com 5 situações que ativam reações intensas e planeje uma "
            "resposta alternativa para cada uma",
            "Pratique a comunicação não-violenta: observe sem avaliar, identifique o sentimento, "
            "conecte com a necessidade e faça um pedido claro",
        ),
        resources=(
            "Livro: 'Permission to Feel' — Marc Brackett",
            "Livro: 'Comunicação Não-Violenta' — Marshall Rosenberg",
            "Conceito: 'Janela de Tolerância' — Dan Siegel",
        ),
        expected_benefits=(
            "Em 4 a 8 semanas de prática: emoções nomeadas com mais precisão, menos reações "
            "impulsivas e mais equilíbrio em situações desafiadoras."
        ),
    ),
    DimensionId.CONEXAO_PROPOSITO: Recommendation(
        title="Fortaleça sua Conexão e Propósito",
        description=(
            "Aprofunde o alinhamento entre seus valores autênticos e suas ações cotidianas. O "
            "propósito funciona como uma bússola interna que pode ser calibrada com reflexão "
            "intencional e ação alinhada."
        ),
        practices=(
            "Escreva uma carta do seu eu futuro descrevendo um dia típico daqui a 5 anos: que "
            "valores estão presentes e que impacto você gera?",
            "Identifique seus 5 valores essenciais por eliminação, partindo de uma lista de 20",
            "Faça uma auditoria semanal de alinhamento comparando como gastou seu tempo com seus "
            "5 valores",
            "Reserve 2 horas por semana para uma atividade que nutra seu senso de propósito, "
            "como voluntariado, mentoria ou criação",
        ),
        resources=(
            "Livro: 'Em Busca de Sentido' — Viktor Frankl",
            "Livro: 'Comece pelo Porquê' — Simon Sinek",
            "Conceito: Ikigai",
        ),
        expected_benefits=(
            "Em 4 a 8 semanas de prática: mais clareza sobre o que importa, decisões mais firmes "
            "e motivação intrínseca crescente."
        ),
    ),
    DimensionId.RELACOES_COMPAIXAO: Recommendation(
        title="Cultive Relações e Compaixão",
        description=(
            "Desenvolva empatia genuína, conexão profunda e autocompaixão. A compaixão é uma "
            "habilidade treinável que gera resiliência emocional, e a autocompaixão motiva mais "
            "do que a autocrítica."
        ),
        practices=(
            "Pratique a escuta ativa profunda em conversas importantes: ouça para entender, não "
            "para responder",
            "Diante de um erro, use os 3 passos da autocompaixão: reconheça o sofrimento, lembre "
            "que errar é humano e fale consigo como falaria com um amigo querido",
            "Expresse gratidão específica a uma pessoa importante toda semana, descrevendo o "
            "impacto que ela tem na sua vida",
            "Pratique a meditação de bondade amorosa (Metta) por 10 minutos, 3 vezes por semana",
        ),
        resources=(
            "Livro: 'Autocompaixão' — Kristin Neff",
            "Livro: 'A Coragem de Ser Imperfeito' — Brené Brown",
            "Técnica: Metta Bhavana",
        ),
        expected_benefits=(
            "Em 4 a 8 semanas de prática: menos autocrítica destrutiva, mais abertura em "
            "relacionamentos seguros e conexões de melhor qualidade."
        ),
    ),
    DimensionId.TRANSFORMACAO: Recommendation(
        title="Abrace a Transformação",
        description=(
            "Desenvolva flexibilidade, coragem para mudar e uma mentalidade de crescimento. A "
            "transformação se constrói em pequenas escolhas diárias de sair da zona de conforto "
            "e tratar erros como aprendizado."
        ),
        practices=(
            "Desafie-se toda semana com algo fora da zona de conforto: uma conversa difícil, uma "
            "habilidade nova ou uma atividade desconhecida",
            "Mantenha um diário de aprendizados com 3 erros ou dificuldades da semana e o que "
            "cada um ensinou",
            "Peça a 3 pessoas de confiança uma força e uma área de desenvolvimento sua e monte "
            "um plano a partir do que ouviu",
            "Quando pensar 'não consigo', acrescente 'ainda' e observe como a perspectiva muda",
        ),
        resources=(
            "Livro: 'Mindset: A Nova Psicologia do Sucesso' — Carol Dweck",
            "Livro: 'Antifrágil' — Nassim Nicholas Taleb",
            "Conceito: Zona de Desenvolvimento Proximal",
        ),
        expected_benefits=(
            "Em 4 a 8 semanas de prática: mais disposição para enfrentar desafios, menos medo de "
            "falhar e uma sensação crescente de agência."
        ),
    ),
}


def get_recommendation(dimension: str) -> Recommendation | None:
    dim_id = DimensionId.from_name(dimension)
    return RECOMMENDATIONS.get(dim_id) if dim_id is not None else None


def get_recommendations_for_weak_dimensions(dimensions: Iterable[str]) -> list[Recommendation]:
    """Recommendations in input order; names without an exact canonical entry are dropped."""
    found = (get_recommendation(name) for name in dimensions)
    return [rec for rec in found if rec is not None]
