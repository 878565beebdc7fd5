from __future__ import annotations

from dataclasses import dataclass, field

MAX_SCORE = 5


@dataclass(frozen=True, slots=True)
class Dimension:
    id: int  # 1..5, stable ordering key
    name: str
    description: str
    icon: str


@dataclass(frozen=True, slots=True)
class LikertOption:
    value: int  # 1..5
    label: str  # e.g. "Discordo totalmente"


@dataclass(frozen=True, slots=True)
class Question:
    id: str
    dimension: str
    dimension_order: int
    question_order: int
    question_text: str
    reverse_scored: bool = False


@dataclass(frozen=True, slots=True)
class DimensionScore:
    dimension: str
    dimension_order: int
    score: float  # average, 2 decimals
    max_score: int = MAX_SCORE
    percentage: float = 0.0  # 1 decimal


@dataclass(frozen=True, slots=True)
class DiagnosticScores:
    dimension_scores: list[DimensionScore]
    total_score: float
    total_percentage: float


@dataclass(frozen=True, slots=True)
class ScoreLevel:
    level: str  # "baixo" | "medio" | "alto"
    label: str
    color: str


@dataclass(frozen=True, slots=True)
class ScoreBadge:
    level: str  # "excelente" | "bom" | "moderado" | "em_desenvolvimento"
    label: str
    class_name: str


@dataclass(frozen=True, slots=True)
class CrossInsight:
    title: str
    dimensions: tuple[str, str]  # (primary, secondary)
    insight: str
    recommendation: str


@dataclass(frozen=True, slots=True)
class Practice:
    time: str  # "Manhã" | "Tarde" | "Noite"
    activity: str


@dataclass(frozen=True, slots=True)
class WeekPlan:
    week: int
    title: str
    objective: str
    practices: tuple[Practice, ...]
    weekly_goal: str


@dataclass(frozen=True, slots=True)
class ActionPlan:
    focus_dimensions: list[str]
    weeks: list[WeekPlan]


@dataclass(frozen=True, slots=True)
class Recommendation:
    title: str
    description: str
    practices: tuple[str, ...]
    resources: tuple[str, ...] = ()
    expected_benefits: str = ""


@dataclass(frozen=True, slots=True)
class DimensionDescription:
    about: str
    low_interpretation: str
    mid_interpretation: str
    high_interpretation: str
    why_it_matters: str


@dataclass(frozen=True, slots=True)
class DiscDimensionScore:
    dimension: str  # "D" | "I" | "S" | "C"
    dimension_label: str
    score: float
    max_score: int
    percentage: float
    color: str


@dataclass(frozen=True, slots=True)
class DiscProfile:
    primary: str
    secondary: str
    label: str
    description: str


@dataclass(frozen=True, slots=True)
class DiscScores:
    dimension_scores: list[DiscDimensionScore]
    total_score: float
    profile: DiscProfile


@dataclass(frozen=True, slots=True)
class DiscScoreLevel:
    level: str  # "baixo" | "moderado" | "alto" | "muito_alto"
    label: str


@dataclass(frozen=True, slots=True)
class DiscRecommendation:
    area: str
    practice: str
    description: str
    frequency: str


@dataclass(frozen=True, slots=True)
class DiscWeeklyPlan:
    week: int
    theme: str
    activities: tuple[str, ...]
    goal: str


@dataclass(frozen=True, slots=True)
class DiscDimensionInfo:
    letter: str
    name: str
    color: str
    icon: str
    tagline: str
    about: str
    strengths: tuple[str, ...]
    challenges: tuple[str, ...]
    communication: str
    ideal_environment: str
    under_pressure: str
    motivators: tuple[str, ...]
    fears: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class DiscProfileDetail:
    title: str
    summary: str
    how_you_work: str = ""
    how_you_lead: str = ""
    how_you_relate: str = ""
    growth_tips: tuple[str, ...] = ()


@dataclass(slots=True)
class DiagnosticReport:
    participant_name: str
    total_score: float
    total_percentage: float
    level: ScoreLevel
    badge: ScoreBadge
    dimension_scores: list[DimensionScore]
    weakest: list[DimensionScore]
    strongest: list[DimensionScore]
    recommendations: list[Recommendation]
    insights: list[CrossInsight]
    action_plan: ActionPlan
    executive_summary: str
    unresolved_dimensions: list[str] = field(default_factory=list)
