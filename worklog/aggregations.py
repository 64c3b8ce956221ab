from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from worklog.data import parse_count
from worklog.errors import NoSelection
from worklog.models import ActivityTotal, AuthorRow, DayBucket


def _sum_by_label(records: List[Dict[str, Any]]) -> Dict[str, int]:
    # groupby(sort=False) keeps labels in first-seen order
    if not records:
        return {}
    # object dtype sums Python ints, so totals past int64 do not wrap
    df = pd.DataFrame.from_records(records, columns=["label", "count"]).astype({"count": object})
    grouped = df.groupby("label", sort=False)["count"].sum()
    return {str(label): int(total) for label, total in grouped.items()}


def aggregate_total_activities(rows: Sequence[AuthorRow]) -> Dict[str, int]:
    """Totals per activity kind across every author."""
    records = [
        {"label": activity.name, "count": parse_count(activity.value)}
        for row in rows
        for activity in row.total_activity
    ]
    return _sum_by_label(records)


def aggregate_day_wise_activity(days: Sequence[DayBucket]) -> Dict[str, int]:
    """Totals per item label summed across all days (the day axis is collapsed)."""
    records = [
        {"label": item.label, "count": parse_count(item.count)}
        for day in days
        for item in day.children
    ]
    return _sum_by_label(records)


def daily_totals(days: Sequence[DayBucket]) -> List[Dict[str, Any]]:
    return [{"date": day.date, "total": sum(parse_count(item.count) for item in day.children)} for day in days]


def activity_distribution(total_activity: Sequence[ActivityTotal]) -> List[Dict[str, Any]]:
    return [{"label": activity.name, "value": parse_count(activity.value)} for activity in total_activity]


def select_author(rows: Sequence[AuthorRow], name: Optional[str]) -> Optional[AuthorRow]:
    for row in rows:
        if row.name == name:
            return row
    return None


def require_author(rows: Sequence[AuthorRow], name: Optional[str]) -> AuthorRow:
    author = select_author(rows, name)
    if author is None:
        raise NoSelection(name)
    return author
