from __future__ import annotations


class WorklogError(RuntimeError):
    """Base class for conditions that end the current render pass."""

    user_message = "Something went wrong"


class FetchError(WorklogError):
    """The report request failed in transport or could not be parsed."""

    user_message = "Error fetching the data"


class EmptyReport(WorklogError):
    """The response was well-formed but carried no ``AuthorWorklog.rows``."""

    user_message = "No data available"


class NoSelection(WorklogError):
    """The selected author is not present in the report."""

    user_message = "No data available for the selected user"

    def __init__(self, name: object) -> None:
        super().__init__(f"No author named {name!r} in the report")
        self.name = name
