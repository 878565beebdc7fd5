from __future__ import annotations

import io
import json
from dataclasses import asdict

import pandas as pd

from ..domain.models import DiagnosticReport
from ..domain.services import get_score_level
from ..infrastructure.exceptions import ExportError

DIMENSION_COLUMNS = ["Dimension", "Order", "Score", "MaxScore", "Percentage", "Level"]
PLAN_COLUMNS = ["Week", "Title", "Objective", "Time", "Activity", "WeeklyGoal"]


def make_json_export_payload(report: DiagnosticReport) -> str:
    return json.dumps(asdict(report), indent=2, ensure_ascii=False)


def dimensions_frame(report: DiagnosticReport) -> pd.DataFrame:
    rows = [
        {
            "Dimension": d.dimension,
            "Order": d.dimension_order,
            "Score": d.score,
            "MaxScore": d.max_score,
            "Percentage": round(d.percentage, 1),
            "Level": get_score_level(d.score).label,
        }
        for d in report.dimension_scores
    ]
    return pd.DataFrame(rows, columns=DIMENSION_COLUMNS)


def action_plan_frame(report: DiagnosticReport) -> pd.DataFrame:
    # One row per practice so the sheet filters cleanly by week or time of day
    rows = [
        {
            "Week": week.week,
            "Title": week.title,
            "Objective": week.objective,
            "Time": practice.time,
            "Activity": practice.activity,
            "WeeklyGoal": week.weekly_goal,
        }
        for week in report.action_plan.weeks
        for practice in week.practices
    ]
    return pd.DataFrame(rows, columns=PLAN_COLUMNS)


def summary_frame(report: DiagnosticReport) -> pd.DataFrame:
    rows = [
        ("Participant", report.participant_name),
        ("TotalScore", report.total_score),
        ("TotalPercentage", report.total_percentage),
        ("Level", report.level.label),
        ("Badge", report.badge.label),
        ("Insights", "; ".join(i.title for i in report.insights)),
        ("ExecutiveSummary", report.executive_summary),
    ]
    return pd.DataFrame(rows, columns=["Field", "Value"])


def make_xlsx_export_bytes(report: DiagnosticReport) -> bytes:
    """Create an Excel workbook with the dimension table, the summary and the action plan."""
    try:
        bio = io.BytesIO()
        with pd.ExcelWriter(bio, engine="xlsxwriter") as writer:
            dimensions_frame(report).to_excel(writer, index=False, sheet_name="Dimensions")
            summary_frame(report).to_excel(writer, index=False, sheet_name="Summary")
            action_plan_frame(report).to_excel(writer, index=False, sheet_name="Action Plan")
        return bio.getvalue()
    except Exception as e:
        raise ExportError(f"Failed to build XLSX export: {str(e)}", export_format="xlsx") from e
