"""Immutable session state for one dashboard page load.

Transitions::

    idle -> loading -> ready(report, selection) | failed(error)
    ready(report, selection) -> ready(report, new_selection)

Every transition returns a new ``SessionState``; nothing is mutated in place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Literal, Optional

from worklog.aggregations import select_author
from worklog.data import load_report
from worklog.errors import NoSelection, WorklogError
from worklog.models import AuthorRow, WorklogReport

logger = logging.getLogger(__name__)

SessionStatus = Literal["idle", "loading", "ready", "failed"]

LOADING_MESSAGE = "Loading..."


@dataclass(frozen=True)
class SessionState:
    status: SessionStatus = "idle"
    report: Optional[WorklogReport] = None
    selection: Optional[str] = None
    error: Optional[WorklogError] = None

    def start_loading(self) -> "SessionState":
        if self.status != "idle":
            raise ValueError(f"Cannot start loading from {self.status!r}")
        return replace(self, status="loading")

    def resolve(self, report: WorklogReport) -> "SessionState":
        if self.status != "loading":
            raise ValueError(f"Cannot resolve a report from {self.status!r}")
        names = report.author_names
        return SessionState(status="ready", report=report, selection=names[0] if names else None)

    def fail(self, error: WorklogError) -> "SessionState":
        if self.status != "loading":
            raise ValueError(f"Cannot fail from {self.status!r}")
        return SessionState(status="failed", error=error)

    def select(self, name: Optional[str]) -> "SessionState":
        if self.status != "ready":
            logger.debug("Ignoring selection %r while session is %s", name, self.status)
            return self
        if name == self.selection:
            return self
        return replace(self, selection=name)

    @property
    def selected_author(self) -> Optional[AuthorRow]:
        if self.report is None:
            return None
        return select_author(self.report.rows, self.selection)

    @property
    def message(self) -> Optional[str]:
        """Static user-facing message for the current state, or None when there is data to show."""
        if self.status in ("idle", "loading"):
            return LOADING_MESSAGE
        if self.status == "failed":
            return self.error.user_message if self.error is not None else WorklogError.user_message
        if self.selected_author is None:
            return NoSelection.user_message
        return None


def load_session(loader: Callable[[], WorklogReport] = load_report) -> SessionState:
    state = SessionState().start_loading()
    try:
        report = loader()
    except WorklogError as exc:
        logger.warning("Report load failed: %s", exc)
        return state.fail(exc)
    return state.resolve(report)
