"""
Presentation - View models for each dashboard panel.

Each render_* function is pure: given fixed input it returns the same
panel, so panels can be tested without a running app. render_dashboard
fans out to all of them.
"""
from datetime import date as Date
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel

from fitlog.models.workout import GoalConfig, WorkoutRecord
from fitlog.services.analytics import (
    Totals,
    WeeklyProgress,
    group_by_type,
    last_n_days,
    series_by_day,
    streak_of,
    totals_of,
    weekly_progress,
)
from fitlog.services.presentation.charts import activity_chart, distribution_chart

EMPTY_LOG_MESSAGE = "No workouts logged yet. Start tracking your fitness journey!"
EMPTY_CHART_MESSAGE = "No data available. Log workouts to see distribution."


# ========================================
# Panel Models
# ========================================

class StatsPanel(BaseModel):
    """All-time totals."""
    totalCalories: str
    totalTime: str
    totalWorkouts: int
    currentStreak: int


class ProgressBar(BaseModel):
    """One weekly goal bar. percentLabel and width are None when the target is unset."""
    text: str
    actual: int
    target: Optional[int]
    percent: Optional[float]
    percentLabel: Optional[str]
    width: Optional[str]


class ProgressPanel(BaseModel):
    weekStart: Date
    time: ProgressBar
    calories: ProgressBar


class LogItem(BaseModel):
    id: int
    type: str
    duration: int
    calories: int
    date: Date
    displayDate: str


class LogPanel(BaseModel):
    items: List[LogItem]
    emptyMessage: Optional[str] = None


class ChartPanel(BaseModel):
    activity: Dict[str, Any]
    distribution: Optional[Dict[str, Any]]
    distributionEmptyMessage: Optional[str] = None


class Dashboard(BaseModel):
    currentDate: str
    stats: StatsPanel
    progress: ProgressPanel
    log: LogPanel
    charts: ChartPanel


# ========================================
# Renderers
# ========================================

def _grouped(value: int) -> str:
    return f"{value:,}"


def render_header(today: Date) -> str:
    """Long date, e.g. 'Monday, October 19, 2026'."""
    return f"{today.strftime('%A, %B')} {today.day}, {today.year}"


def render_stats(totals: Totals, streak: int) -> StatsPanel:
    return StatsPanel(
        totalCalories=_grouped(totals.total_calories),
        totalTime=_grouped(totals.total_duration),
        totalWorkouts=totals.count,
        currentStreak=streak,
    )


def _progress_bar(actual: int, target: Optional[int], percent: Optional[float], unit: str) -> ProgressBar:
    target_text = target if target is not None else "-"

    if percent is None:
        return ProgressBar(
            text=f"{actual} / {target_text} {unit}",
            actual=actual,
            target=target,
            percent=None,
            percentLabel=None,
            width=None,
        )

    return ProgressBar(
        text=f"{actual} / {target_text} {unit}",
        actual=actual,
        target=target,
        percent=percent,
        percentLabel=f"{round(percent)}%",
        width=f"{percent:g}%",
    )


def render_progress(progress: WeeklyProgress) -> ProgressPanel:
    return ProgressPanel(
        weekStart=progress.week_start,
        time=_progress_bar(
            progress.weekly_time, progress.time_target, progress.time_percent, "minutes"
        ),
        calories=_progress_bar(
            progress.weekly_calories, progress.calorie_target, progress.calorie_percent, "calories"
        ),
    )


def render_log(records: Sequence[WorkoutRecord], limit: int = 10) -> LogPanel:
    """The most recently entered workouts, newest first."""
    if not records:
        return LogPanel(items=[], emptyMessage=EMPTY_LOG_MESSAGE)

    recent = list(records)[-limit:]
    recent.reverse()

    return LogPanel(
        items=[
            LogItem(
                id=r.id,
                type=r.type,
                duration=r.duration,
                calories=r.calories,
                date=r.date,
                displayDate=f"{r.date.month}/{r.date.day}/{r.date.year}",
            )
            for r in recent
        ]
    )


def render_charts(records: Sequence[WorkoutRecord], today: Date, days: int = 7) -> ChartPanel:
    chart_days = last_n_days(today, days)
    distribution = distribution_chart(group_by_type(records))

    return ChartPanel(
        activity=activity_chart(chart_days, series_by_day(records, chart_days)),
        distribution=distribution,
        distributionEmptyMessage=EMPTY_CHART_MESSAGE if distribution is None else None,
    )


def render_dashboard(
    records: Sequence[WorkoutRecord],
    goals: GoalConfig,
    today: Date,
    log_limit: int = 10,
    chart_days: int = 7,
) -> Dashboard:
    """Recompute every aggregate and render all panels."""
    return Dashboard(
        currentDate=render_header(today),
        stats=render_stats(totals_of(records), streak_of(records, today)),
        progress=render_progress(weekly_progress(records, goals, today)),
        log=render_log(records, log_limit),
        charts=render_charts(records, today, chart_days),
    )
