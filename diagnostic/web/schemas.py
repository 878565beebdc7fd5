from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from diagnostic.domain.schemas import QuestionInput


class ORMModel(BaseModel):
    """Response models built from the domain dataclasses by attribute access."""

    model_config = ConfigDict(from_attributes=True)


class Dimension(ORMModel):
    id: int
    name: str
    description: str
    icon: str
    about: Optional[str] = None
    why_it_matters: Optional[str] = None


class LikertOption(ORMModel):
    value: int
    label: str


class DimensionsResponse(BaseModel):
    dimensions: list[Dimension]
    likert_options: list[LikertOption]
    introduction: str


class ScoringRequest(BaseModel):
    questions: list[QuestionInput] = Field(..., min_length=1)
    responses: dict[str, Optional[int]] = Field(default_factory=dict)


class DimensionScore(ORMModel):
    dimension: str
    dimension_order: int
    score: float
    max_score: int
    percentage: float


class DiagnosticScores(ORMModel):
    dimension_scores: list[DimensionScore]
    total_score: float
    total_percentage: float


class ScoreLevel(ORMModel):
    level: str
    label: str
    color: str


class ScoreBadge(ORMModel):
    level: str
    label: str
    class_name: str


class Recommendation(ORMModel):
    title: str
    description: str
    practices: list[str]
    resources: list[str] = Field(default_factory=list)
    expected_benefits: str = ""


class CrossInsight(ORMModel):
    title: str
    dimensions: list[str]
    insight: str
    recommendation: str


class Practice(ORMModel):
    time: str
    activity: str


class WeekPlan(ORMModel):
    week: int
    title: str
    objective: str
    practices: list[Practice]
    weekly_goal: str


class ActionPlan(ORMModel):
    focus_dimensions: list[str]
    weeks: list[WeekPlan]


class DiagnosticReport(ORMModel):
    participant_name: str
    total_score: float
    total_percentage: float
    level: ScoreLevel
    badge: ScoreBadge
    overall_message: Optional[str] = None
    dimension_scores: list[DimensionScore]
    weakest: list[DimensionScore]
    strongest: list[DimensionScore]
    recommendations: list[Recommendation]
    insights: list[CrossInsight]
    action_plan: ActionPlan
    executive_summary: str
    unresolved_dimensions: list[str] = Field(default_factory=list)


class DiscProfile(ORMModel):
    primary: str
    secondary: str
    label: str
    description: str


class DiscDimensionScore(ORMModel):
    dimension: str
    dimension_label: str
    score: float
    max_score: int
    percentage: float
    color: str
    level: Optional[str] = None
    level_label: Optional[str] = None


class DiscRecommendation(ORMModel):
    area: str
    practice: str
    description: str
    frequency: str


class DiscWeeklyPlan(ORMModel):
    week: int
    theme: str
    activities: list[str]
    goal: str


class DiscDimensionInfo(ORMModel):
    letter: str
    name: str
    color: str
    icon: str
    tagline: str
    about: str
    strengths: list[str]
    challenges: list[str]
    communication: str
    ideal_environment: str
    under_pressure: str
    motivators: list[str]
    fears: list[str]


class DiscProfileDetail(ORMModel):
    title: str
    summary: str
    how_you_work: str
    how_you_lead: str
    how_you_relate: str
    growth_tips: list[str]


class DiscProfileLookup(DiscProfile):
    detail: DiscProfileDetail


class DiscResult(BaseModel):
    dimension_scores: list[DiscDimensionScore]
    total_score: float
    profile: DiscProfile
    profile_detail: DiscProfileDetail
    recommendations: list[DiscRecommendation]
    action_plan: list[DiscWeeklyPlan]
