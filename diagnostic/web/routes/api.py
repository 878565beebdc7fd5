from __future__ import annotations

import io
import json
import logging
from typing import Literal

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import JSONResponse, StreamingResponse

from diagnostic.application import api as app_api
from diagnostic.domain.descriptions import (
    DIAGNOSTIC_INTRO,
    get_dimension_about,
    get_dimension_why_it_matters,
    get_overall_score_message,
)
from diagnostic.domain.dimensions import DIMENSIONS, LIKERT_OPTIONS
from diagnostic.domain.disc import (
    DISC_ORDER,
    get_disc_action_plan,
    get_disc_profile,
    get_disc_recommendations,
    get_disc_score_level,
    normalize_disc_dimension_key,
)
from diagnostic.domain.disc_descriptions import DISC_DIMENSIONS, get_disc_profile_detail
from diagnostic.domain.schemas import ExecutiveSummaryInput
from diagnostic.infrastructure.config import get_settings
from diagnostic.utils.exports import make_json_export_payload, make_xlsx_export_bytes
from diagnostic.web.schemas import (
    DiagnosticReport,
    DiagnosticScores,
    Dimension,
    DimensionsResponse,
    DiscDimensionInfo,
    DiscDimensionScore,
    DiscProfile,
    DiscProfileDetail,
    DiscProfileLookup,
    DiscRecommendation,
    DiscResult,
    DiscWeeklyPlan,
    LikertOption,
    ScoringRequest,
)

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _disc_key(value: str) -> str:
    return normalize_disc_dimension_key(value.upper() if len(value) == 1 else value)


def _build_report(payload: ExecutiveSummaryInput):
    return app_api.build_diagnostic_report(
        payload.participant_name,
        payload.dimension_scores,
        total_score=payload.total_score,
    )


@router.get("/health")
def health() -> dict[str, str]:
    settings = get_settings()
    return {"status": "ok", "version": settings.app.version}


@router.get("/dimensions", response_model=DimensionsResponse)
def list_dimensions() -> DimensionsResponse:
    dimensions = [
        Dimension(
            id=d.id,
            name=d.name,
            description=d.description,
            icon=d.icon,
            about=get_dimension_about(d.name),
            why_it_matters=get_dimension_why_it_matters(d.name),
        )
        for d in DIMENSIONS
    ]
    return DimensionsResponse(
        dimensions=dimensions,
        likert_options=[LikertOption.model_validate(o) for o in LIKERT_OPTIONS],
        introduction=DIAGNOSTIC_INTRO,
    )


@router.post("/diagnostic/scores", response_model=DiagnosticScores)
def score_diagnostic(payload: ScoringRequest) -> DiagnosticScores:
    scores = app_api.score_diagnostic(payload.questions, payload.responses)
    return DiagnosticScores.model_validate(scores)


@router.post("/diagnostic/report", response_model=DiagnosticReport)
def build_report(payload: ExecutiveSummaryInput) -> DiagnosticReport:
    report = _build_report(payload)
    response = DiagnosticReport.model_validate(report)
    response.overall_message = get_overall_score_message(report.total_score)
    return response


@router.post("/diagnostic/report/export")
def export_report(
    payload: ExecutiveSummaryInput,
    format: Literal["json", "xlsx"] = Query("json"),
):
    report = _build_report(payload)

    if format == "json":
        return JSONResponse(content=json.loads(make_json_export_payload(report)))

    if not get_settings().app.enable_xlsx_export:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="XLSX export is disabled")

    xlsx_bytes = make_xlsx_export_bytes(report)
    first_name = report.participant_name.split(" ")[0] or "participante"
    filename = f"diagnostico_{first_name.lower()}.xlsx"
    stream = io.BytesIO(xlsx_bytes)
    stream.seek(0)
    headers = {"Content-Disposition": f"attachment; filename={filename}"}
    logger.info("Exported report for %s as xlsx", first_name)
    return StreamingResponse(stream, media_type=XLSX_MEDIA_TYPE, headers=headers)


@router.post("/disc/scores", response_model=DiscResult)
def score_disc(payload: ScoringRequest) -> DiscResult:
    scores = app_api.score_disc(payload.questions, payload.responses)

    dimension_scores = []
    for d in scores.dimension_scores:
        item = DiscDimensionScore.model_validate(d)
        level = get_disc_score_level(d.percentage)
        item.level = level.level
        item.level_label = level.label
        dimension_scores.append(item)

    profile = scores.profile
    return DiscResult(
        dimension_scores=dimension_scores,
        total_score=scores.total_score,
        profile=DiscProfile.model_validate(profile),
        profile_detail=DiscProfileDetail.model_validate(
            get_disc_profile_detail(profile.primary, profile.secondary)
        ),
        recommendations=[
            DiscRecommendation.model_validate(r)
            for r in get_disc_recommendations(profile.primary, scores.dimension_scores)
        ],
        action_plan=[
            DiscWeeklyPlan.model_validate(w)
            for w in get_disc_action_plan(profile.primary, profile.secondary)
        ],
    )


@router.get("/disc/dimensions", response_model=list[DiscDimensionInfo])
def list_disc_dimensions() -> list[DiscDimensionInfo]:
    return [DiscDimensionInfo.model_validate(DISC_DIMENSIONS[letter]) for letter in DISC_ORDER]


@router.get("/disc/profiles/{primary}/{secondary}", response_model=DiscProfileLookup)
def get_profile(primary: str, secondary: str) -> DiscProfileLookup:
    primary, secondary = _disc_key(primary), _disc_key(secondary)
    profile = get_disc_profile(primary, secondary)
    return DiscProfileLookup(
        primary=profile.primary,
        secondary=profile.secondary,
        label=profile.label,
        description=profile.description,
        detail=DiscProfileDetail.model_validate(get_disc_profile_detail(primary, secondary)),
    )
