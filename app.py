import html
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import streamlit as st

from worklog.errors import NoSelection
from worklog.metrics_author import compute_author
from worklog.metrics_overview import compute_overview
from worklog.session import SessionState, load_session

SESSION_KEY = "worklog_session"


# ---------- UI / layout helpers ----------
def inject_base_styles():
    if st.session_state.get("_base_css_injected"):
        return
    st.markdown(
        """
        <style>
        .card {border: 1px solid #e5e7eb;border-radius: 12px;padding: 16px;background: #ffffff;
               box-shadow: 0 1px 2px rgba(0,0,0,0.04); margin-bottom: 12px;}
        .card-header {display: flex;justify-content: space-between;align-items: center;margin-bottom: 8px;}
        .card-title {font-weight: 600;font-size: 1.0rem;color: #111827;}
        .card-subtitle {font-size: 0.9rem;color: #6b7280;}
        .tile-row {display: flex;flex-wrap: wrap;gap: 12px;margin-top: 6px;}
        .tile {border-radius: 12px;padding: 12px 16px;min-width: 140px;color: #ffffff;}
        .tile .tile-name {font-weight: 600;font-size: 0.95rem;}
        .tile .tile-value {font-weight: 700;font-size: 1.3rem;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.session_state["_base_css_injected"] = True


@contextmanager
def card(title: str, subtitle: Optional[str] = None):
    container = st.container()
    container.markdown(
        f"""
        <div class="card">
          <div class="card-header">
            <div class="card-title">{html.escape(title)}</div>
            <div class="card-subtitle">{html.escape(subtitle or "")}</div>
          </div>
        """,
        unsafe_allow_html=True,
    )
    body = container.container()
    with body:
        yield body
    container.markdown("</div>", unsafe_allow_html=True)


def render_tiles(tiles: List[Dict[str, Any]]):
    if not tiles:
        st.info("No activity totals recorded for this user.")
        return
    cells = "".join(
        f"<div class='tile' style='background:{html.escape(t['fill_color'])};'>"
        f"<div class='tile-name'>{html.escape(t['name'])}</div>"
        f"<div class='tile-value'>{t['value']:,}</div></div>"
        for t in tiles
    )
    st.markdown(f"<div class='tile-row'>{cells}</div>", unsafe_allow_html=True)


def get_session() -> SessionState:
    state = st.session_state.get(SESSION_KEY)
    if state is None:
        with st.spinner(SessionState().message):
            state = load_session()
        st.session_state[SESSION_KEY] = state
    return state


# ---------- UI setup ----------
st.set_page_config(page_title="Activity Tracker", layout="wide")
inject_base_styles()
title_col, action_col = st.columns([8, 2])
title_col.title("Activity Tracker")
if action_col.button("Reload data"):
    st.session_state.pop(SESSION_KEY, None)
    st.rerun()

session = get_session()
if session.status == "failed":
    st.error(session.message)
    st.stop()

overview = compute_overview(session.report)
with card("Total Activities for All Users"):
    st.vega_lite_chart(overview["charts"]["total_activities"], use_container_width=True)

st.subheader("See activities by user")
authors = overview["authors"]
current = session.selection if session.selection in authors else overview["default_author"]
choice = st.selectbox("Select User", options=authors, index=authors.index(current) if current in authors else 0)
session = session.select(choice)
st.session_state[SESSION_KEY] = session

try:
    detail = compute_author(session.report, session.selection)
except NoSelection:
    st.info(NoSelection.user_message)
    st.stop()

left, right = st.columns(2)
with left:
    with card(detail["author"], "Total Activities"):
        render_tiles(detail["tiles"])
with right:
    with card(detail["author"], "Total Activities Distribution"):
        if detail["distribution"]:
            st.vega_lite_chart(detail["charts"]["distribution"], use_container_width=True)
        else:
            st.info("No activity totals recorded for this user.")

with card(detail["author"], "Total Activities Trend"):
    if detail["daily_totals"]:
        st.vega_lite_chart(detail["charts"]["daily_trend"], use_container_width=True)
    else:
        st.info("No day-wise activity recorded for this user.")

with card(detail["author"], "Aggregated Activities"):
    if detail["aggregated_activities"]:
        st.vega_lite_chart(detail["charts"]["aggregated_activities"], use_container_width=True)
    else:
        st.info("No day-wise activity recorded for this user.")
