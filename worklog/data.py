from __future__ import annotations

import json
import logging
import math
import re
from collections import Counter
from pathlib import Path
from typing import Any, List, Optional, Sequence

import requests

from worklog.config import DashboardConfig
from worklog.errors import EmptyReport, FetchError
from worklog.models import AuthorRow, WorklogReport

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_count(value: object) -> int:
    """Parse a decimal count string the way the report producer encodes it.

    Leading digits win and trailing text is ignored ("12abc" -> 12, "3.9" -> 3).
    Anything without leading digits ("abc", "", None) counts as 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    return int(match.group(1))


def duplicate_author_names(rows: Sequence[AuthorRow]) -> List[str]:
    counts = Counter(row.name for row in rows)
    return [name for name, n in counts.items() if n > 1]


def parse_payload(payload: Any) -> WorklogReport:
    """Turn the decoded ``{"data": {...}}`` document into a report.

    Raises ``FetchError`` when the document is not shaped like a report
    response and ``EmptyReport`` when it carries no ``AuthorWorklog.rows``.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), dict):
        raise FetchError("Response body has no 'data' object")

    worklog = payload["data"].get("AuthorWorklog")
    if not isinstance(worklog, dict) or not worklog.get("rows"):
        raise EmptyReport("Response has no AuthorWorklog.rows")

    try:
        report = WorklogReport.from_payload(worklog)
    except ValueError as exc:
        raise FetchError(f"Malformed worklog report: {exc}") from exc

    dupes = duplicate_author_names(report.rows)
    if dupes:
        logger.warning("Duplicate author names in report, first match wins: %s", ", ".join(dupes))
    logger.info("Loaded worklog report: %d authors, %d activity kinds", len(report.rows), len(report.activity_meta))
    return report


def _get_json(url: str, session: Optional[requests.Session]) -> Any:
    if session is None:
        with requests.Session() as owned:
            return _get_json(url, owned)
    response = session.get(url, headers={"Accept": "application/json"})
    response.raise_for_status()
    return response.json()


def load_report(url: Optional[str] = None, *, session: Optional[requests.Session] = None) -> WorklogReport:
    url = (url or DashboardConfig.from_env().report_url).strip()
    try:
        payload = _get_json(url, session)
    except (requests.RequestException, ValueError) as exc:
        logger.exception("Error fetching the data from %s", url)
        raise FetchError(f"Error fetching the data from {url}: {exc}") from exc
    return parse_payload(payload)


def load_report_file(path: str | Path) -> WorklogReport:
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.exception("Error reading report file %s", path)
        raise FetchError(f"Error reading {path}: {exc}") from exc
    return parse_payload(payload)
