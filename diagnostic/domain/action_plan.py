from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from .dimensions import DimensionId
from .models import ActionPlan, DimensionScore, Practice, WeekPlan

PLAN_WEEKS = 4


def _week(
    week: int, title: str, objective: str, morning: str, afternoon: str, night: str, goal: str
) -> WeekPlan:
    return WeekPlan(
        week=week,
        title=title,
        objective=objective,
        practices=(
            Practice("Manhã", morning),
            Practice("Tarde", afternoon),
            Practice("Noite", night),
        ),
        weekly_goal=goal,
    )


DIMENSION_PLANS: dict[DimensionId, tuple[WeekPlan, ...]] = {
    DimensionId.CONSCIENCIA_INTERIOR: (
        _week(
            1,
            "Fundamentos da Presença",
            "Estabelecer o hábito de pausa consciente e auto-observação básica",
            "5 minutos de respiração consciente ao acordar, observando a respiração natural sem "
            "tentar mudá-la",
            "3 pausas de 1 minuto para perguntar 'o que estou sentindo agora?' e 'onde está minha "
            "atenção?'",
            "Registro escrito de 3 padrões que notou em si mesmo durante o dia",
            "Completar o registro noturno em pelo menos 5 dos 7 dias",
        ),
        _week(
            2,
            "Aprofundamento Sensorial",
            "Expandir a percepção consciente para o corpo e os sentidos",
            "10 minutos de escaneamento corporal, da cabeça aos pés, notando sensações sem "
            "julgamento",
            "Uma refeição sem telas, percebendo sabores, texturas e sinais de fome e saciedade",
            "Registrar a emoção predominante do dia, onde ela apareceu no corpo e o que a provocou",
            "Identificar pelo menos 3 gatilhos de piloto automático e uma forma de interrompê-los",
        ),
        _week(
            3,
            "Reconhecimento de Padrões",
            "Identificar padrões recorrentes de pensamento e comportamento",
            "10 minutos de meditação observando os pensamentos como nuvens passando",
            "3 respirações conscientes antes de reagir a qualquer situação estressante",
            "Revisar o diário da semana em busca de pensamentos e reações que se repetem",
            "Documentar 2 padrões automáticos recorrentes e uma alternativa consciente para cada",
        ),
        _week(
            4,
            "Consolidação e Integração",
            "Integrar a consciência interior nas atividades cotidianas",
            "15 minutos da prática contemplativa que mais ressoou nas semanas anteriores",
            "Usar 3 atividades rotineiras como gatilhos de presença ao longo do dia",
            "Comparar o nível de auto-observação atual com o início da semana 1",
            "Definir uma rotina sustentável de prática para as próximas semanas",
        ),
    ),
    DimensionId.COERENCIA_EMOCIONAL: (
        _week(
            1,
            "Vocabulário Emocional",
            "Desenvolver a capacidade de nomear emoções com precisão",
            "Check-in emocional: nomear com precisão o que está sentindo ao acordar",
            "3 registros ao dia da emoção presente, sua intensidade de 1 a 10 e o que a provocou",
            "Revisar os registros buscando conexões entre situações e emoções",
            "Usar pelo menos 10 palavras diferentes para nomear emoções durante a semana",
        ),
        _week(
            2,
            "Técnicas de Regulação",
            "Aprender e praticar técnicas concretas de regulação emocional",
            "4 ciclos de respiração 4-7-8, mesmo sem estresse, para criar memória muscular",
            "Diante de ativação emocional, escrever 2 ou 3 interpretações alternativas da situação",
            "Rever o momento de maior intensidade do dia e o que faria diferente",
            "Usar a respiração 4-7-8 em pelo menos 3 situações reais de ativação",
        ),
        _week(
            3,
            "Mapa de Gatilhos",
            "Criar consciência antecipada dos gatilhos emocionais",
            "Antecipar 1 ou 2 situações do dia que podem gerar ativação e planejar a resposta",
            "Praticar comunicação não-violenta em uma interação",
            "Atualizar o mapa de gatilhos com as situações que geraram reações intensas",
            "Completar um mapa de 5 gatilhos principais com uma estratégia para cada",
        ),
        _week(
            4,
            "Expressão Autêntica",
            "Integrar regulação com expressão emocional genuína",
            "Definir uma intenção emocional para o dia",
            "Expressar uma emoção genuína a alguém de confiança com o modelo 'quando, sinto, "
            "preciso'",
            "Comparar a relação com as emoções no início do mês e agora",
            "Definir as 3 práticas de regulação que vai manter",
        ),
    ),
    DimensionId.CONEXAO_PROPOSITO: (
        _week(
            1,
            "Mapeamento de Valores",
            "Identificar valores autênticos e distingui-los de valores herdados",
            "15 minutos escrevendo sobre 3 momentos em que se sentiu plenamente vivo",
            "Observar quais escolhas do dia refletem seus valores e quais parecem impostas",
            "Listar 10 coisas importantes para você, sem censura",
            "Definir 5 valores essenciais por eliminação progressiva",
        ),
        _week(
            2,
            "Auditoria de Alinhamento",
            "Avaliar a coerência entre valores e vida cotidiana",
            "Planejar o dia indicando a que valor serve cada atividade prioritária",
            "Identificar uma atividade desconectada dos valores e como ressignificá-la",
            "Comparar a distribuição do tempo na semana com os 5 valores",
            "Identificar 3 desalinhamentos e um ajuste concreto para cada",
        ),
        _week(
            3,
            "Propósito em Ação",
            "Conectar ações cotidianas a um significado maior",
            "Responder por escrito: que contribuição quero dar ao mundo?",
            "30 minutos em uma atividade que nutra o senso de propósito",
            "Registrar 3 momentos do dia de conexão com algo significativo",
            "Escrever um rascunho de declaração de propósito em 2 ou 3 frases",
        ),
        _week(
            4,
            "Integração e Sustentabilidade",
            "Criar estruturas que sustentem o alinhamento no longo prazo",
            "Revisar e ajustar a declaração de propósito",
            "Planejar as próximas 4 semanas usando os valores como critério de prioridade",
            "Refletir sobre o que aprendeu sobre si neste mês",
            "Criar um ritual semanal de revisão de alinhamento",
        ),
    ),
    DimensionId.RELACOES_COMPAIXAO: (
        _week(
            1,
            "Autocompaixão Fundacional",
            "Desenvolver uma relação mais gentil consigo mesmo",
            "Mão no peito e a intenção: 'que eu possa ser gentil comigo hoje'",
            "Diante da autocrítica, aplicar os 3 passos da autocompaixão",
            "Escrever uma carta compassiva para si sobre algo que incomodou no dia",
            "Interromper o padrão de autocrítica pelo menos 3 vezes na semana",
        ),
        _week(
            2,
            "Escuta Profunda",
            "Aprimorar a capacidade de ouvir com presença e empatia",
            "Definir a intenção de ouvir para compreender, não para responder",
            "Em uma conversa importante, não interromper e refletir o que ouviu antes de responder",
            "Notar em quais conversas ouviu de verdade e em quais estava formulando respostas",
            "Ter 3 conversas com escuta profunda genuína",
        ),
        _week(
            3,
            "Empatia Expandida",
            "Ampliar a empatia para além do círculo próximo",
            "10 minutos de meditação de bondade amorosa (Metta)",
            "Reescrever um conflito recente do ponto de vista da outra pessoa",
            "Expressar gratidão específica a alguém",
            "Enviar 3 mensagens de gratidão e praticar Metta pelo menos 4 vezes",
        ),
        _week(
            4,
            "Vulnerabilidade e Limites",
            "Equilibrar abertura emocional com limites saudáveis",
            "Refletir sobre em quais relações se permite ser vulnerável",
            "Estabelecer um limite saudável com gentileza, sem culpa",
            "Avaliar como mudou a relação consigo e com os outros no mês",
            "Definir práticas sustentáveis de autocompaixão e conexão",
        ),
    ),
    DimensionId.TRANSFORMACAO: (
        _week(
            1,
            "Mentalidade de Crescimento",
            "Reconhecer e começar a transformar crenças limitantes",
            "Anotar uma crença limitante e 3 evidências que a contradizem",
            "Trocar 'não consigo' por 'não consigo ainda'",
            "Registrar um erro do dia e o que aprendeu com ele",
            "Criar contra-evidências para as 3 crenças limitantes mais ativas",
        ),
        _week(
            2,
            "Zona de Expansão",
            "Praticar a saída gradual da zona de conforto",
            "Escolher um micro-desafio fora da zona de conforto",
            "Permanecer 2 minutos com o desconforto, respirando, em vez de fugir",
            "Registrar o micro-desafio e celebrar o esforço",
            "Completar 5 micro-desafios em 7 dias",
        ),
        _week(
            3,
            "Feedback como Nutriente",
            "Transformar a relação com feedback e crítica construtiva",
            "Pedir a alguém de confiança uma força e uma área de desenvolvimento, sem se defender",
            "Perguntar 'o que ainda posso aprender aqui?' em uma situação em que se sente "
            "competente",
            "Escolher uma ação concreta a partir do feedback recebido",
            "Solicitar e integrar feedback de pelo menos 2 pessoas",
        ),
        _week(
            4,
            "Plano de Crescimento Contínuo",
            "Criar estrutura sustentável para o desenvolvimento contínuo",
            "Descrever a versão de si que quer construir nos próximos 6 meses",
            "Definir 3 metas de processo para os próximos 3 meses",
            "Comparar a mentalidade do início do mês com a atual",
            "Montar o plano de crescimento dos próximos 3 meses",
        ),
    ),
}


def get_dimension_plan(dimension: str) -> tuple[WeekPlan, ...]:
    dim_id = DimensionId.from_name(dimension)
    if dim_id is None:
        return ()
    return DIMENSION_PLANS.get(dim_id, ())


def generate_action_plan(dimension_scores: Sequence[DimensionScore]) -> ActionPlan:
    """
    Four-week plan alternating the curricula of the two weakest dimensions.

    Weeks 1 and 3 come from the weakest dimension, weeks 2 and 4 from the
    second weakest. A dimension without a curriculum leaves its weeks out, so
    callers must not assume four entries.
    """
    ordered = sorted(dimension_scores, key=lambda d: d.score)
    focus_dimensions = [d.dimension for d in ordered[:2]]

    plans = [get_dimension_plan(name) for name in focus_dimensions]
    weeks: list[WeekPlan] = []
    for i in range(PLAN_WEEKS):
        source = i % 2
        if source >= len(plans) or i >= len(plans[source]):
            continue
        week = plans[source][i]
        weeks.append(replace(week, title=f"{focus_dimensions[source]} — {week.title}"))

    return ActionPlan(focus_dimensions=focus_dimensions, weeks=weeks)
