"""
Presentation module - Dashboard view models and chart configurations.
"""
from fitlog.services.presentation.charts import activity_chart, distribution_chart
from fitlog.services.presentation.views import (
    ChartPanel,
    Dashboard,
    LogItem,
    LogPanel,
    ProgressBar,
    ProgressPanel,
    StatsPanel,
    render_charts,
    render_dashboard,
    render_header,
    render_log,
    render_progress,
    render_stats,
)

__all__ = [
    # Panels
    "ChartPanel",
    "Dashboard",
    "LogItem",
    "LogPanel",
    "ProgressBar",
    "ProgressPanel",
    "StatsPanel",
    # Renderers
    "render_charts",
    "render_dashboard",
    "render_header",
    "render_log",
    "render_progress",
    "render_stats",
    # Charts
    "activity_chart",
    "distribution_chart",
]
