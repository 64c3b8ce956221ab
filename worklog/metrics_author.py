from __future__ import annotations

from typing import Any, Dict, Optional

from worklog.aggregations import (
    activity_distribution,
    aggregate_day_wise_activity,
    daily_totals,
    require_author,
)
from worklog.charts import count_bar_chart, distribution_pie_chart, to_vega_spec, trend_line_chart
from worklog.data import parse_count
from worklog.models import WorklogReport


def activity_fill_color(report: WorklogReport, label: str) -> str:
    return report.fill_color_for(label)


def compute_author(report: WorklogReport, name: Optional[str]) -> Dict[str, Any]:
    """Payload for the per-author section of the dashboard.

    Raises ``NoSelection`` when ``name`` is not an author in the report.
    """
    author = require_author(report.rows, name)

    tiles = [
        {"name": a.name, "value": parse_count(a.value), "fill_color": activity_fill_color(report, a.name)}
        for a in author.total_activity
    ]
    distribution = activity_distribution(author.total_activity)
    trend = daily_totals(author.day_wise_activity)
    aggregated = aggregate_day_wise_activity(author.day_wise_activity)

    pie_colors = [activity_fill_color(report, d["label"]) for d in distribution]
    charts = {
        "distribution": to_vega_spec(
            distribution_pie_chart(distribution, title="Total Activities Distribution", colors=pie_colors)
        ),
        "daily_trend": to_vega_spec(trend_line_chart(trend, title="Daily Activities Trend", series_label="Activity Count")),
        "aggregated_activities": to_vega_spec(
            count_bar_chart(aggregated, title="Aggregated Activities", series_label="Activity Count")
        ),
    }

    return {
        "author": author.name,
        "tiles": tiles,
        "distribution": distribution,
        "daily_totals": trend,
        "aggregated_activities": [{"label": label, "value": value} for label, value in aggregated.items()],
        "charts": charts,
    }
