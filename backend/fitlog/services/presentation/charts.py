"""
Chart Adapter - Chart.js configurations built from aggregated series.

The returned dicts are complete `new Chart(ctx, config)` arguments; the
client only supplies the canvas.
"""
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Sequence

PRIMARY_COLOR = "#3498db"
TOOLTIP_BACKGROUND = "#2c3e50"

DISTRIBUTION_PALETTE = [
    "#3498db", "#e74c3c", "#27ae60", "#f39c12",
    "#9b59b6", "#1abc9c", "#34495e", "#e67e22",
]


def short_day_label(day: date) -> str:
    """'Oct 5' style label."""
    return f"{day.strftime('%b')} {day.day}"


def activity_chart(days: Sequence[date], minutes: Sequence[int]) -> Dict[str, Any]:
    """Line chart of workout minutes per day."""
    return {
        "type": "line",
        "data": {
            "labels": [short_day_label(d) for d in days],
            "datasets": [{
                "label": "Workout Minutes",
                "data": list(minutes),
                "borderColor": PRIMARY_COLOR,
                "backgroundColor": "rgba(52, 152, 219, 0.1)",
                "tension": 0.4,
                "fill": True,
                "borderWidth": 3,
                "pointRadius": 5,
                "pointBackgroundColor": PRIMARY_COLOR,
                "pointBorderColor": "#fff",
                "pointBorderWidth": 2,
            }],
        },
        "options": {
            "responsive": True,
            "maintainAspectRatio": False,
            "plugins": {
                "legend": {"display": False},
                "tooltip": {
                    "backgroundColor": TOOLTIP_BACKGROUND,
                    "padding": 12,
                    "titleFont": {"size": 14},
                    "bodyFont": {"size": 13},
                },
            },
            "scales": {
                "y": {
                    "beginAtZero": True,
                    "grid": {"color": "rgba(0, 0, 0, 0.05)"},
                },
                "x": {
                    "grid": {"display": False},
                },
            },
        },
    }


def distribution_chart(by_type: Mapping[str, int]) -> Optional[Dict[str, Any]]:
    """
    Doughnut chart of minutes per exercise type.

    Returns None when nothing has been logged; a mapping whose entries are
    all zero still gets a chart.
    """
    if not by_type:
        return None

    labels: List[str] = list(by_type.keys())

    return {
        "type": "doughnut",
        "data": {
            "labels": labels,
            "datasets": [{
                "data": [by_type[label] for label in labels],
                "backgroundColor": list(DISTRIBUTION_PALETTE),
                "borderWidth": 0,
            }],
        },
        "options": {
            "responsive": True,
            "maintainAspectRatio": False,
            "plugins": {
                "legend": {
                    "position": "right",
                    "labels": {
                        "padding": 15,
                        "font": {"size": 12},
                        "usePointStyle": True,
                    },
                },
                "tooltip": {
                    "backgroundColor": TOOLTIP_BACKGROUND,
                    "padding": 12,
                    # Suffix appended to each tooltip value by the client
                    "valueSuffix": " min",
                },
            },
        },
    }
