"""
Analytics module - Aggregates computed from the workout list.

This module provides:
- All-time totals and the daily streak
- Weekly goal progress
- Per-day and per-type series for the charts
"""
from fitlog.services.analytics.aggregation import (
    Totals,
    WeeklyProgress,
    totals_of,
    streak_of,
    week_start,
    weekly_progress,
    series_by_day,
    group_by_type,
    last_n_days,
)

__all__ = [
    # Data structures
    "Totals",
    "WeeklyProgress",
    # Aggregates
    "totals_of",
    "streak_of",
    "week_start",
    "weekly_progress",
    # Chart series
    "series_by_day",
    "group_by_type",
    "last_n_days",
]
