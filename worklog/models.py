from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

DEFAULT_FILL_COLOR = "#f5f5f5"


@dataclass(frozen=True)
class ActivityMeta:
    label: str
    fill_color: str = DEFAULT_FILL_COLOR


@dataclass(frozen=True)
class ActivityTotal:
    name: str
    value: Any = None


@dataclass(frozen=True)
class DayItem:
    label: str
    count: Any = None


@dataclass(frozen=True)
class DayBucket:
    date: str
    children: Tuple[DayItem, ...] = ()


@dataclass(frozen=True)
class AuthorRow:
    name: str
    total_activity: Tuple[ActivityTotal, ...] = ()
    day_wise_activity: Tuple[DayBucket, ...] = ()


@dataclass(frozen=True)
class WorklogReport:
    activity_meta: Tuple[ActivityMeta, ...] = ()
    rows: Tuple[AuthorRow, ...] = ()

    @property
    def author_names(self) -> List[str]:
        return [row.name for row in self.rows]

    def fill_color_for(self, label: str, default: str = DEFAULT_FILL_COLOR) -> str:
        for meta in self.activity_meta:
            if meta.label == label:
                return meta.fill_color or default
        return default

    @classmethod
    def from_payload(cls, worklog: Dict[str, Any]) -> "WorklogReport":
        """Build a report from the ``AuthorWorklog`` object of the JSON document.

        Missing lists are read as empty. Raises ``ValueError`` when the
        document has the wrong structure (e.g. a row that is not an object).
        """
        if not isinstance(worklog, dict):
            raise ValueError("AuthorWorklog must be an object")
        meta = tuple(
            ActivityMeta(label=_text(m.get("label")), fill_color=_text(m.get("fillColor")) or DEFAULT_FILL_COLOR)
            for m in _objects(worklog.get("activityMeta"), "activityMeta")
        )
        rows = tuple(_author_row(r) for r in _objects(worklog.get("rows"), "rows"))
        return cls(activity_meta=meta, rows=rows)


def _text(value: object) -> str:
    if value is None:
        return ""
    return str(value)


def _objects(values: Optional[Iterable[object]], where: str) -> List[Dict[str, Any]]:
    if values is None:
        return []
    if not isinstance(values, list):
        raise ValueError(f"{where} must be a list, got {type(values).__name__}")
    out: List[Dict[str, Any]] = []
    for v in values:
        if not isinstance(v, dict):
            raise ValueError(f"{where} entries must be objects, got {type(v).__name__}")
        out.append(v)
    return out


def _day_bucket(raw: Dict[str, Any]) -> DayBucket:
    items = raw.get("items") or {}
    if not isinstance(items, dict):
        raise ValueError("dayWiseActivity.items must be an object")
    children = tuple(
        DayItem(label=_text(c.get("label")), count=c.get("count"))
        for c in _objects(items.get("children"), "items.children")
    )
    return DayBucket(date=_text(raw.get("date")), children=children)


def _author_row(raw: Dict[str, Any]) -> AuthorRow:
    totals = tuple(
        ActivityTotal(name=_text(a.get("name")), value=a.get("value"))
        for a in _objects(raw.get("totalActivity"), "totalActivity")
    )
    days = tuple(_day_bucket(d) for d in _objects(raw.get("dayWiseActivity"), "dayWiseActivity"))
    return AuthorRow(name=_text(raw.get("name")), total_activity=totals, day_wise_activity=days)
