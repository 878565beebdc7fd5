"""
Descriptive DISC content: the per-letter catalog and the two-letter profile details.
"""

from __future__ import annotations

from .models import DiscDimensionInfo, DiscProfileDetail

DISC_DIMENSIONS: dict[str, DiscDimensionInfo] = {
    "D": DiscDimensionInfo(
        letter="D",
        name="Dominância",
        color="#DC2626",
        icon="🔴",
        tagline="Orientado a resultados, direto e decisivo",
        about=(
            "A dimensão Dominância mostra como você enfrenta problemas e desafios. Pessoas com "
            "D alto são assertivas, orientadas a resultados e gostam de assumir o controle. "
            "Desafios as motivam, buscam eficiência e preferem ir direto ao ponto."
        ),
        strengths=(
            "Tomada de decisão rápida e assertiva",
            "Foco em resultados e eficiência",
            "Capacidade de liderança e iniciativa",
            "Determinação diante de obstáculos",
            "Habilidade para resolver problemas complexos",
        ),
        challenges=(
            "Pode parecer impaciente ou insensível",
            "Tendência a ser direto demais",
            "Dificuldade em delegar e confiar nos outros",
            "Pode ignorar detalhes em busca de velocidade",
            "Resistência a seguir processos estabelecidos",
        ),
        communication=(
            "Comunica-se de forma direta, concisa e orientada à ação. Prefere conversas "
            "objetivas e pode se impacientar com detalhes em excesso ou reuniões sem propósito."
        ),
        ideal_environment=(
            "Ambientes dinâmicos, com autonomia para decidir, desafios constantes e metas "
            "claras. Rende mais quando tem autoridade para agir."
        ),
        under_pressure=(
            "Sob pressão fica mais autoritário e impaciente. Pode decidir de forma precipitada, "
            "ignorar outras opiniões e parecer intimidador."
        ),
        motivators=(
            "Desafios e competição",
            "Autonomia e controle",
            "Resultados tangíveis",
            "Reconhecimento por conquistas",
            "Oportunidades de liderança",
        ),
        fears=(
            "Perder o controle",
            "Ser visto como vulnerável",
            "Fracasso ou ineficiência",
            "Rotina e monotonia",
        ),
    ),
    "I": DiscDimensionInfo(
        letter="I",
        name="Influência",
        color="#F59E0B",
        icon="🟡",
        tagline="Entusiasta, otimista e colaborativo",
        about=(
            "A dimensão Influência mostra como você se relaciona e influencia as pessoas. "
            "Pessoas com I alto são sociáveis, entusiastas e otimistas, gostam de trabalhar em "
            "equipe e criam ambientes positivos à sua volta."
        ),
        strengths=(
            "Comunicação e persuasão",
            "Capacidade de motivar e inspirar pessoas",
            "Criatividade e pensamento inovador",
            "Facilidade para networking e relacionamentos",
            "Otimismo e energia contagiante",
        ),
        challenges=(
            "Pode ser desorganizado e pouco atento a detalhes",
            "Tendência a prometer mais do que entrega",
            "Dificuldade com conflitos diretos",
            "Pode evitar tarefas rotineiras ou analíticas",
            "Necessidade excessiva de aprovação social",
        ),
        communication=(
            "Comunica-se de forma entusiasta e expressiva, com histórias e humor. Prefere "
            "conversas informais e pode ter dificuldade com comunicação muito técnica."
        ),
        ideal_environment=(
            "Ambientes colaborativos e criativos, com interação, reconhecimento e clima "
            "descontraído."
        ),
        under_pressure=(
            "Sob pressão fica mais desorganizado e emocional. Pode buscar aprovação em excesso, "
            "evitar confrontos necessários e reagir de forma impulsiva."
        ),
        motivators=(
            "Reconhecimento e aprovação social",
            "Interação com pessoas",
            "Liberdade criativa",
            "Ambiente positivo e divertido",
            "Oportunidades de expressão",
        ),
        fears=(
            "Rejeição social",
            "Perda de influência",
            "Ambientes rígidos e isolados",
            "Ser ignorado ou desvalorizado",
        ),
    ),
    "S": DiscDimensionInfo(
        letter="S",
        name="Estabilidade",
        color="#16A34A",
        icon="🟢",
        tagline="Paciente, confiável e colaborativo",
        about=(
            "A dimensão Estabilidade mostra como você lida com ritmo e consistência. Pessoas "
            "com S alto são pacientes, confiáveis e valorizam harmonia e previsibilidade. "
            "Costumam ser ótimas ouvintes e mediadoras de conflitos."
        ),
        strengths=(
            "Lealdade e confiabilidade",
            "Escuta ativa",
            "Paciência e persistência",
            "Habilidade para mediar conflitos",
            "Consistência e dedicação ao trabalho",
        ),
        challenges=(
            "Resistência a mudanças e situações novas",
            "Dificuldade em dizer 'não' e estabelecer limites",
            "Tendência a evitar conflitos necessários",
            "Pode ser passivo quando a situação pede ação",
            "Lentidão na tomada de decisões",
        ),
        communication=(
            "Comunica-se de forma calma, paciente e empática. Escuta bem, evita confrontos e "
            "pode ter dificuldade em expressar discordância."
        ),
        ideal_environment=(
            "Ambientes estáveis e harmoniosos, com expectativas claras, tempo adequado para as "
            "tarefas e clima de cooperação."
        ),
        under_pressure=(
            "Sob pressão se retrai e evita confrontos. Pode concordar para manter a paz, "
            "acumular ressentimento e resistir em silêncio a mudanças impostas."
        ),
        motivators=(
            "Estabilidade e segurança",
            "Harmonia nos relacionamentos",
            "Reconhecimento pela lealdade",
            "Tempo para processar mudanças",
            "Ambiente cooperativo",
        ),
        fears=(
            "Mudanças repentinas",
            "Conflitos e confrontos",
            "Perda de segurança",
            "Pressão por decisões rápidas",
        ),
    ),
    "C": DiscDimensionInfo(
        letter="C",
        name="Conformidade",
        color="#2563EB",
        icon="🔵",
        tagline="Analítico, preciso e orientado à qualidade",
        about=(
            "A dimensão Conformidade mostra como você lida com regras e procedimentos. Pessoas "
            "com C alto são analíticas, detalhistas e valorizam precisão. Decidem com base em "
            "dados e trabalham de forma sistemática."
        ),
        strengths=(
            "Pensamento analítico e crítico",
            "Atenção aos detalhes",
            "Planejamento e organização",
            "Decisões baseadas em dados",
            "Altos padrões de qualidade",
        ),
        challenges=(
            "Tendência ao perfeccionismo",
            "Pode ser crítico demais consigo e com os outros",
            "Dificuldade com ambiguidade",
            "Paralisia por excesso de análise",
            "Pode parecer frio ou distante",
        ),
        communication=(
            "Comunica-se de forma precisa e lógica, apoiada em fatos. Valoriza clareza e "
            "estrutura e pode ter dificuldade com conversas muito emocionais ou vagas."
        ),
        ideal_environment=(
            "Ambientes organizados, com processos claros, acesso a informação e tempo para "
            "análise."
        ),
        under_pressure=(
            "Sob pressão fica mais crítico e perfeccionista. Pode se isolar, adiar decisões "
            "por medo de errar e se prender a regras."
        ),
        motivators=(
            "Qualidade e excelência",
            "Dados e informações claras",
            "Processos bem definidos",
            "Reconhecimento pela precisão",
            "Autonomia para garantir padrões",
        ),
        fears=(
            "Cometer erros",
            "Críticas ao seu trabalho",
            "Ambientes caóticos",
            "Falta de informação para decidir",
        ),
    ),
}

GENERIC_DETAIL_TITLE = "Perfil DISC"
GENERIC_PROFILE_DESCRIPTION = (
    "Seu perfil reflete uma combinação única de características comportamentais."
)

PROFILE_DETAILS: dict[str, DiscProfileDetail] = {
    "DI": DiscProfileDetail(
        title="O Inspirador",
        summary=(
            "Você une a orientação a resultados da Dominância ao entusiasmo da Influência: "
            "lidera com energia e alcança metas ambiciosas por meio das pessoas."
        ),
        how_you_work=(
            "Trabalha em ritmo acelerado, envolvendo a equipe e buscando resultados rápidos. "
            "Processos lentos ou burocráticos o frustram."
        ),
        how_you_lead=(
            "Lidera com carisma e foco em resultados, mas precisa cuidar para não atropelar "
            "quem é mais analítico ou cauteloso."
        ),
        how_you_relate=(
            "É direto e sociável, gosta de interações dinâmicas e pode se impacientar com "
            "pessoas mais reservadas."
        ),
        growth_tips=(
            "Pratique a escuta ativa: nem tudo pede ação imediata",
            "Abra espaço para as ideias dos outros",
            "Desenvolva paciência com processos e detalhes",
            "Equilibre velocidade e qualidade nas decisões",
        ),
    ),
    "DC": DiscProfileDetail(
        title="O Estrategista",
        summary=(
            "Você une a orientação a resultados da Dominância à precisão da Conformidade e "
            "busca excelência com planejamento e execução determinada."
        ),
        how_you_work=(
            "Trabalha de forma focada e metódica, com visão estratégica e atenção aos detalhes. "
            "Padrões baixos o frustram."
        ),
        how_you_lead=(
            "Estabelece padrões altos e é respeitado pela competência técnica e pela entrega."
        ),
        how_you_relate=(
            "É reservado e respeitoso, valoriza profissionalismo e pode parecer exigente demais."
        ),
        growth_tips=(
            "Desenvolva empatia e conexão emocional",
            "Aceite que nem tudo precisa ser perfeito",
            "Delegue com confiança",
            "Equilibre análise e intuição",
        ),
    ),
    "DS": DiscProfileDetail(
        title="O Persistente",
        summary=(
            "Você une a determinação da Dominância à Estabilidade e busca resultados com "
            "constância, sem perder a calma."
        ),
        how_you_work=(
            "Trabalha de forma determinada e constante, com paciência e método. Gosta de "
            "autonomia, mas respeita processos estabelecidos."
        ),
        how_you_lead=(
            "É firme e justo, define expectativas claras e apoia a equipe com consistência."
        ),
        how_you_relate="É leal e direto e pode ser teimoso quando acredita estar certo.",
        growth_tips=(
            "Abra-se a novas abordagens",
            "Flexibilize sua comunicação",
            "Pratique expressar emoções",
            "Busque feedback com regularidade",
        ),
    ),
    "ID": DiscProfileDetail(
        title="O Motivador",
        summary=(
            "Você une o entusiasmo da Influência à assertividade da Dominância: mobiliza "
            "pessoas e entrega resultados."
        ),
        how_you_work=(
            "Trabalha com energia, envolvendo pessoas. Rotinas e trabalho solitário o frustram."
        ),
        how_you_lead=(
            "Inspira com visão e entusiasmo, mas precisa cuidar da organização e do "
            "acompanhamento."
        ),
        how_you_relate="É caloroso e direto e pode dominar conversas sem perceber.",
        growth_tips=(
            "Desenvolva organização e acompanhamento",
            "Ouça mais e fale menos",
            "Equilibre entusiasmo e análise crítica",
            "Receba feedback negativo de forma construtiva",
        ),
    ),
    "IS": DiscProfileDetail(
        title="O Harmonizador",
        summary=(
            "Você une o entusiasmo da Influência à paciência da Estabilidade e cria ambientes "
            "acolhedores e colaborativos."
        ),
        how_you_work=(
            "Trabalha de forma colaborativa e paciente. Prazos apertados e competição o "
            "desgastam."
        ),
        how_you_lead=(
            "É acessível e empático, mas pode ter dificuldade com decisões duras e feedback "
            "negativo."
        ),
        how_you_relate="É caloroso e leal e pode evitar conflitos necessários.",
        growth_tips=(
            "Desenvolva assertividade para expressar suas necessidades",
            "Pratique dizer 'não'",
            "Cuide de si tanto quanto cuida dos outros",
            "Aceite que conflitos podem ser construtivos",
        ),
    ),
    "IC": DiscProfileDetail(
        title="O Comunicador Analítico",
        summary=(
            "Você une a sociabilidade da Influência ao pensamento analítico da Conformidade e "
            "apresenta dados e ideias de forma envolvente."
        ),
        how_you_work=(
            "Alterna pesquisa aprofundada e comunicação clara, entre momentos sociais e "
            "analíticos."
        ),
        how_you_lead="Decide com base em dados e sabe apresentá-los de forma persuasiva.",
        how_you_relate="É sociável mas seletivo e pode ser crítico de forma sutil.",
        growth_tips=(
            "Equilibre análise e ação",
            "Tenha paciência com pessoas menos analíticas",
            "Decida mais rápido",
            "Compartilhe antes que esteja perfeito",
        ),
    ),
    "SD": DiscProfileDetail(
        title="O Executor Confiável",
        summary=(
            "Você une a Estabilidade à determinação da Dominância: é confiável e sabe ser "
            "assertivo quando precisa."
        ),
        how_you_work=(
            "Trabalha com consistência e foco em resultados, com processos claros e autonomia."
        ),
        how_you_lead="É firme e previsível; a equipe sabe o que esperar de você.",
        how_you_relate="É leal e direto; reservado no início, abre-se com o tempo.",
        growth_tips=(
            "Seja mais flexível diante de mudanças",
            "Comunique-se de forma mais expressiva",
            "Abra-se a novas ideias",
            "Equilibre estabilidade e inovação",
        ),
    ),
    "SI": DiscProfileDetail(
        title="O Conselheiro",
        summary=(
            "Você une a paciência da Estabilidade à sociabilidade da Influência e constrói "
            "relações profundas e duradouras."
        ),
        how_you_work=(
            "Trabalha de forma colaborativa, ajudando os outros. Pressão e competição o "
            "desgastam."
        ),
        how_you_lead="Cria um ambiente de confiança em que as pessoas se sentem ouvidas.",
        how_you_relate="É um ótimo ouvinte e pode absorver os problemas dos outros.",
        growth_tips=(
            "Proteja seus limites com assertividade",
            "Decida com mais agilidade",
            "Equilibre o cuidado com os outros e consigo",
            "Veja oportunidades nas mudanças",
        ),
    ),
    "SC": DiscProfileDetail(
        title="O Especialista",
        summary=(
            "Você une a Estabilidade à precisão da Conformidade e valoriza qualidade e "
            "consistência."
        ),
        how_you_work=(
            "Trabalha de forma metódica e cuidadosa. Mudanças repentinas e falta de padrões o "
            "frustram."
        ),
        how_you_lead=(
            "É organizado e justo, mantém padrões de qualidade e hesita diante de decisões "
            "rápidas ou ambíguas."
        ),
        how_you_relate="É leal e reservado; demora a se abrir, mas é muito confiável.",
        growth_tips=(
            "Ganhe conforto com ambiguidade",
            "Comunique-se de forma mais direta",
            "Equilibre perfeição e pragmatismo",
            "Saia da zona de conforto",
        ),
    ),
    "CD": DiscProfileDetail(
        title="O Perfeccionista Estratégico",
        summary=(
            "Você une o pensamento analítico da Conformidade à orientação a resultados da "
            "Dominância e busca excelência com planejamento rigoroso."
        ),
        how_you_work=(
            "Trabalha de forma analítica e determinada. Incompetência e falta de padrões o "
            "frustram."
        ),
        how_you_lead="Espera excelência e pode parecer exigente demais.",
        how_you_relate="É reservado e seletivo e pode parecer frio.",
        growth_tips=(
            "Tenha mais empatia e paciência",
            "Aceite que 'bom o suficiente' às vezes basta",
            "Pratique a vulnerabilidade",
            "Equilibre crítica e reconhecimento",
        ),
    ),
    "CI": DiscProfileDetail(
        title="O Analista Comunicativo",
        summary=(
            "Você une a precisão da Conformidade às habilidades sociais da Influência e "
            "comunica análises profundas de forma acessível."
        ),
        how_you_work="Pesquisa e entende antes de agir, e depois compartilha com clareza.",
        how_you_lead="Decide com dados e engaja a equipe com clareza e entusiasmo.",
        how_you_relate="É sociável mas criterioso e prefere conversas baseadas em fatos.",
        growth_tips=(
            "Equilibre análise e ação prática",
            "Tolere mais a ambiguidade",
            "Decida mais rápido",
            "Nem todos precisam de dados para se convencer",
        ),
    ),
    "CS": DiscProfileDetail(
        title="O Metódico",
        summary=(
            "Você une a precisão da Conformidade à paciência da Estabilidade e valoriza "
            "processos bem definidos."
        ),
        how_you_work=(
            "Trabalha de forma organizada e consistente. Pressa e falta de informação o "
            "frustram."
        ),
        how_you_lead="É organizado, justo e detalhista, com padrões elevados.",
        how_you_relate="É reservado, leal e confiável; demora a se abrir.",
        growth_tips=(
            "Aceite riscos calculados",
            "Comunique-se com mais assertividade",
            "Equilibre análise e intuição",
            "Busque oportunidades de liderar",
        ),
    ),
}


def get_disc_dimension_info(letter: str) -> DiscDimensionInfo | None:
    return DISC_DIMENSIONS.get(letter)


def _pure_profile_detail(info: DiscDimensionInfo) -> DiscProfileDetail:
    strengths = ", ".join(info.strengths[:3]).lower()
    return DiscProfileDetail(
        title=f"O {info.name} Puro",
        summary=f"Você tem forte predominância na dimensão {info.name}. {info.about}",
        how_you_work=(
            f"Você trabalha de forma muito alinhada à {info.name}. Suas forças naturais "
            f"incluem {strengths}."
        ),
        how_you_lead=(
            f"Como líder, você expressa fortemente a {info.name}; sua equipe reconhece sua "
            f"{info.strengths[0].lower()}."
        ),
        how_you_relate=info.communication,
        growth_tips=tuple(f"Trabalhe para superar: {c.lower()}" for c in info.challenges),
    )


def get_disc_profile_detail(primary: str, secondary: str) -> DiscProfileDetail:
    """
    Narrative detail for a primary/secondary letter pair.

    - Unknown letters get the generic "Perfil DISC" detail with empty sections.
    - A doubled letter (``DD``) is composed from that letter's catalog entry.
    """
    p = DISC_DIMENSIONS.get(primary)
    s = DISC_DIMENSIONS.get(secondary)
    if p is None or s is None:
        return DiscProfileDetail(
            GENERIC_DETAIL_TITLE, GENERIC_PROFILE_DESCRIPTION
        )

    if primary == secondary:
        return _pure_profile_detail(p)

    return PROFILE_DETAILS.get(primary + secondary) or DiscProfileDetail(
        GENERIC_DETAIL_TITLE, f"Você combina características de {p.name} e {s.name}."
    )
