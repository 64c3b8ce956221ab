from __future__ import annotations

from typing import Any, Dict

from worklog.aggregations import aggregate_total_activities
from worklog.charts import count_bar_chart, to_vega_spec
from worklog.models import WorklogReport

TOTALS_TITLE = "Total Activities for All Users"


def compute_overview(report: WorklogReport) -> Dict[str, Any]:
    totals = aggregate_total_activities(report.rows)
    authors = list(dict.fromkeys(report.author_names))

    chart = count_bar_chart(totals, title=TOTALS_TITLE, series_label="Total Activity Count", border_width=3)
    return {
        "authors": authors,
        "default_author": authors[0] if authors else None,
        "total_activities": [{"name": name, "value": value} for name, value in totals.items()],
        "charts": {"total_activities": to_vega_spec(chart)},
    }
