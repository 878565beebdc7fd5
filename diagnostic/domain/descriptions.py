from __future__ import annotations

from .dimensions import DimensionId
from .models import DimensionDescription
from .services import LEVEL_HIGH_THRESHOLD, LEVEL_MEDIUM_THRESHOLD

DIAGNOSTIC_INTRO = (
    "O Diagnóstico IQ+IS é uma ferramenta de autoconhecimento que avalia cinco dimensões "
    "fundamentais da inteligência emocional e espiritual. Ele oferece um mapa do seu momento "
    "atual, identificando pontos fortes e áreas de desenvolvimento para orientar sua jornada "
    "de crescimento pessoal e profissional."
)

DIMENSION_DESCRIPTIONS: dict[DimensionId, DimensionDescription] = {
    DimensionId.CONSCIENCIA_INTERIOR: DimensionDescription(
        about=(
            "Esta dimensão avalia sua capacidade de pausar e observar seus próprios pensamentos, "
            "emoções e reações sem julgamento. Inclui atenção plena, auto-observação e o "
            "reconhecimento de padrões automáticos de comportamento."
        ),
        low_interpretation=(
            'Você pode estar operando no "piloto automático" com frequência, reagindo a '
            "situações sem perceber seus padrões internos. É um convite para criar momentos de "
            "pausa e auto-observação no dia a dia."
        ),
        mid_interpretation=(
            "Você já consegue se observar em alguns momentos, mas pode aprofundar essa prática "
            "para que ela se torne mais consistente e natural no cotidiano."
        ),
        high_interpretation=(
            "Você tem forte capacidade de se observar internamente, reconhecendo pensamentos e "
            "emoções com clareza. Essa é uma base sólida para seu desenvolvimento pessoal e "
            "profissional."
        ),
        why_it_matters=(
            "A consciência interior é o alicerce de todo desenvolvimento pessoal. Sem perceber "
            "nossos padrões, não conseguimos transformá-los."
        ),
    ),
    DimensionId.COERENCIA_EMOCIONAL: DimensionDescription(
        about=(
            "Esta dimensão mede sua habilidade de nomear, regular e expressar emoções de forma "
            "equilibrada e construtiva: reconhecer o que sente, entender de onde vem e escolher "
            "como responder."
        ),
        low_interpretation=(
            "Pode haver dificuldade em identificar ou expressar o que sente, ou uma tendência a "
            "reagir por impulso. Vocabulário emocional e técnicas de regulação podem trazer mais "
            "equilíbrio."
        ),
        mid_interpretation=(
            "Você lida bem com suas emoções em muitas situações, mas momentos de pressão ainda "
            "podem gerar reações automáticas. Há espaço para fortalecer a regulação emocional."
        ),
        high_interpretation=(
            "Você demonstra maturidade emocional significativa, nomeando e regulando emoções "
            "mesmo em situações desafiadoras, o que favorece relacionamentos mais saudáveis."
        ),
        why_it_matters=(
            "A coerência emocional permite decisões mais conscientes e relacionamentos baseados "
            "em autenticidade e equilíbrio."
        ),
    ),
    DimensionId.CONEXAO_PROPOSITO: DimensionDescription(
        about=(
            "Esta dimensão avalia o quanto suas ações estão alinhadas com seus valores e a "
            "clareza que você sente sobre direção e significado na vida, incluindo a conexão com "
            "algo maior que si mesmo."
        ),
        low_interpretation=(
            "Pode haver uma sensação de desconexão entre o que você faz e o que realmente "
            "importa. Refletir sobre seus valores essenciais ajuda a encontrar mais sentido nas "
            "atividades."
        ),
        mid_interpretation=(
            "Você tem alguma clareza sobre valores e propósito, mas certas áreas da vida ainda "
            "parecem desalinhadas. Aprofundar essa reflexão pode trazer mais coerência."
        ),
        high_interpretation=(
            "Você demonstra forte alinhamento entre valores, ações e propósito, um recurso "
            "poderoso para enfrentar desafios e tomar decisões significativas."
        ),
        why_it_matters=(
            "Quem vive conectado ao próprio propósito encontra mais resiliência, motivação e "
            "satisfação, mesmo diante de adversidades."
        ),
    ),
    DimensionId.RELACOES_COMPAIXAO: DimensionDescription(
        about=(
            "Esta dimensão avalia empatia, conexão genuína, perdão e autocompaixão nos "
            "relacionamentos: colocar-se no lugar do outro e tratar a si mesmo com gentileza."
        ),
        low_interpretation=(
            "Pode haver desafios em se conectar genuinamente com os outros ou em praticar "
            "autocompaixão, o que aparece como julgamento excessivo, dificuldade de perdoar ou "
            "isolamento emocional."
        ),
        mid_interpretation=(
            "Você se conecta bem em muitos contextos, mas em algumas situações a empatia ou a "
            "autocompaixão ficam em segundo plano. Há espaço para expandir essa habilidade."
        ),
        high_interpretation=(
            "Você demonstra forte capacidade empática e compassiva, com os outros e consigo "
            "mesmo, fortalecendo vínculos e criando um ambiente acolhedor."
        ),
        why_it_matters=(
            "Relações saudáveis e compaixão sustentam o bem-estar emocional e a capacidade de "
            "liderar e influenciar positivamente."
        ),
    ),
    DimensionId.TRANSFORMACAO: DimensionDescription(
        about=(
            "Esta dimensão mede sua abertura para mudança, aprendizado contínuo e crescimento "
            "pessoal, e o quanto você encara desafios como oportunidades."
        ),
        low_interpretation=(
            "Pode haver resistência à mudança ou tendência a permanecer na zona de conforto. "
            "Uma mentalidade de crescimento pode abrir novas possibilidades."
        ),
        mid_interpretation=(
            "Você se dispõe a crescer em algumas áreas, mas em outras a mudança parece mais "
            "difícil. Desafiar-se gradualmente fortalece esta dimensão."
        ),
        high_interpretation=(
            "Você tem uma mentalidade de crescimento bem desenvolvida e abraça desafios e "
            "aprendizados com naturalidade, um diferencial para sua evolução contínua."
        ),
        why_it_matters=(
            "Transformar-se continuamente é essencial em um mundo em constante mudança, "
            "permitindo adaptação e evolução pessoal e profissional."
        ),
    ),
}


def _description(dimension: str) -> DimensionDescription | None:
    dim_id = DimensionId.from_name(dimension)
    return DIMENSION_DESCRIPTIONS.get(dim_id) if dim_id is not None else None


def get_interpretation(dimension: str, score: float) -> str:
    desc = _description(dimension)
    if desc is None:
        return ""
    if score < LEVEL_MEDIUM_THRESHOLD:
        return desc.low_interpretation
    if score < LEVEL_HIGH_THRESHOLD:
        return desc.mid_interpretation
    return desc.high_interpretation


def get_dimension_about(dimension: str) -> str:
    desc = _description(dimension)
    return desc.about if desc else ""


def get_dimension_why_it_matters(dimension: str) -> str:
    desc = _description(dimension)
    return desc.why_it_matters if desc else ""


def get_overall_score_message(score: float) -> str:
    if score >= 4:
        return (
            "Seu resultado indica um alto nível de desenvolvimento nas dimensões avaliadas, com "
            "consistência em autoconhecimento, regulação emocional e conexão com propósito. "
            "Continue cultivando essas habilidades e inspire as pessoas ao seu redor."
        )
    if score >= 3:
        return (
            "Seu resultado mostra um bom nível de desenvolvimento, com bases sólidas em várias "
            "dimensões. Há oportunidades claras de crescimento que podem elevar sua inteligência "
            "emocional e espiritual."
        )
    if score >= 2:
        return (
            "Seu resultado indica um estágio moderado de desenvolvimento. Este diagnóstico é um "
            "ponto de partida valioso: pequenas mudanças de hábito nas áreas apontadas podem "
            "gerar grandes transformações."
        )
    return (
        "Seu resultado mostra que você está no início de uma jornada importante de "
        "autoconhecimento. Cada dimensão avaliada é uma oportunidade de crescimento, e o "
        "primeiro passo já foi dado."
    )
