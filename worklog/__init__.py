"""Core (UI-agnostic) worklog dashboard logic.

This package contains:
- report loading (HTTP JSON -> typed report)
- aggregation passes over the report
- page compute functions (JSON-serializable payloads)
- chart helpers (Altair -> Vega-Lite spec dict)
- the immutable session state driving the page
"""
