from __future__ import annotations

from typing import Any, Dict, List, Optional

import altair as alt
import pandas as pd

alt.data_transformers.disable_max_rows()

BAR_FILL = [
    "rgba(255, 99, 132, 0.2)",
    "rgba(54, 162, 235, 0.2)",
    "rgba(255, 206, 86, 0.2)",
    "rgba(75, 192, 192, 0.2)",
    "rgba(153, 102, 255, 0.2)",
    "rgba(255, 159, 64, 0.2)",
]
BAR_BORDER = [
    "rgba(255, 99, 132, 1)",
    "rgba(54, 162, 235, 1)",
    "rgba(255, 206, 86, 1)",
    "rgba(75, 192, 192, 1)",
    "rgba(153, 102, 255, 1)",
    "rgba(255, 159, 64, 1)",
]


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()


def count_bar_chart(counts: Dict[str, int], *, title: str, series_label: str, border_width: int = 1) -> alt.Chart:
    df = pd.DataFrame({"activity": list(counts.keys()), "count": list(counts.values())}, columns=["activity", "count"])
    return (
        alt.Chart(df, title=title)
        .mark_bar(strokeWidth=border_width)
        .encode(
            x=alt.X("activity:N", title="Activity", sort=None),
            y=alt.Y("count:Q", title=series_label, axis=alt.Axis(format="d")),
            color=alt.Color("activity:N", scale=alt.Scale(range=BAR_FILL), legend=None),
            stroke=alt.Stroke("activity:N", scale=alt.Scale(range=BAR_BORDER), legend=None),
            tooltip=[alt.Tooltip("activity:N", title="Activity"), alt.Tooltip("count:Q", title=series_label, format=",")],
        )
    )


def distribution_pie_chart(distribution: List[Dict[str, Any]], *, title: str, colors: Optional[List[str]] = None) -> alt.Chart:
    df = pd.DataFrame(distribution, columns=["label", "value"])
    scale = alt.Undefined
    if colors:
        color_by_label = dict(zip(df["label"].tolist(), colors))
        domain = list(dict.fromkeys(df["label"].tolist()))
        scale = alt.Scale(domain=domain, range=[color_by_label[label] for label in domain])
    return (
        alt.Chart(df, title=title)
        .mark_arc()
        .encode(
            theta=alt.Theta("value:Q"),
            color=alt.Color("label:N", title="Activity", sort=None, scale=scale, legend=alt.Legend(orient="bottom")),
            tooltip=[alt.Tooltip("label:N", title="Activity"), alt.Tooltip("value:Q", title="Count", format=",")],
        )
    )


def trend_line_chart(series: List[Dict[str, Any]], *, title: str, series_label: str) -> alt.Chart:
    df = pd.DataFrame(series, columns=["date", "total"])
    return (
        alt.Chart(df, title=alt.TitleParams(title, anchor="start"))
        .mark_line(interpolate="monotone", point=True)
        .encode(
            x=alt.X("date:T", title="Date"),
            y=alt.Y("total:Q", title=series_label, axis=alt.Axis(format="d")),
            tooltip=[alt.Tooltip("date:N", title="Date"), alt.Tooltip("total:Q", title=series_label, format=",")],
        )
    )
