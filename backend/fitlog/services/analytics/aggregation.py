"""
Aggregation Engine - Pure functions over the workout list.

Every function takes the full record list (and goals / today where needed)
and recomputes from scratch. Nothing here touches storage or the clock.
"""
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

from fitlog.models.workout import GoalConfig, WorkoutRecord


@dataclass(frozen=True)
class Totals:
    """All-time totals."""
    total_calories: int = 0
    total_duration: int = 0
    count: int = 0


@dataclass(frozen=True)
class WeeklyProgress:
    """
    Sums for the current week against the goal targets.

    A percent is None when its target is zero or unset.
    """
    week_start: date
    weekly_time: int
    weekly_calories: int
    time_target: Optional[int]
    calorie_target: Optional[int]
    time_percent: Optional[float]
    calorie_percent: Optional[float]


def totals_of(records: Sequence[WorkoutRecord]) -> Totals:
    """Sum calories and durations across all records."""
    return Totals(
        total_calories=sum(r.calories for r in records),
        total_duration=sum(r.duration for r in records),
        count=len(records),
    )


def streak_of(records: Iterable[WorkoutRecord], today: date) -> int:
    """
    Count consecutive days with a workout, walking back from today.

    Dates after today have a negative distance and are skipped.
    """
    dates = sorted({r.date for r in records}, reverse=True)
    streak = 0

    for day in dates:
        days_diff = (today - day).days

        if days_diff == streak:
            streak += 1
        elif days_diff > streak:
            break

    return streak


def week_start(today: date) -> date:
    """Monday of the week containing today."""
    return today - timedelta(days=today.weekday())


def _percent_of(actual: int, target: Optional[int]) -> Optional[float]:
    if not target or target <= 0:
        return None
    return max(0.0, min(100.0, actual / target * 100))


def weekly_progress(
    records: Iterable[WorkoutRecord],
    goal: GoalConfig,
    today: date,
) -> WeeklyProgress:
    """Sum this week's minutes and calories and compare them with the goals."""
    start = week_start(today)
    week_records = [r for r in records if r.date >= start]

    weekly_time = sum(r.duration for r in week_records)
    weekly_calories = sum(r.calories for r in week_records)

    return WeeklyProgress(
        week_start=start,
        weekly_time=weekly_time,
        weekly_calories=weekly_calories,
        time_target=goal.weekly_time_target,
        calorie_target=goal.weekly_calorie_target,
        time_percent=_percent_of(weekly_time, goal.weekly_time_target),
        calorie_percent=_percent_of(weekly_calories, goal.weekly_calorie_target),
    )


def series_by_day(records: Iterable[WorkoutRecord], days: Sequence[date]) -> List[int]:
    """Summed minutes for each day in days, 0 where nothing was logged."""
    minutes: Dict[date, int] = {}
    for r in records:
        minutes[r.date] = minutes.get(r.date, 0) + r.duration

    return [minutes.get(day, 0) for day in days]


def group_by_type(records: Iterable[WorkoutRecord]) -> Dict[str, int]:
    """Summed minutes per exercise type."""
    by_type: Dict[str, int] = {}
    for r in records:
        by_type[r.type] = by_type.get(r.type, 0) + r.duration
    return by_type


def last_n_days(today: date, n: int = 7) -> List[date]:
    """The n days ending at today, oldest first."""
    return [today - timedelta(days=i) for i in range(n - 1, -1, -1)]
