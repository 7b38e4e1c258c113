import logging

import streamlit as st

from dashboard.components.create_goal_dialog import open_goal_dialog, render_create_goal_dialog
from dashboard.data import loaders, repositories
from dashboard.metrics import completed_count, completion_percentage, is_overdue, parse_date
from dashboard.state import session_slices

logger = logging.getLogger(__name__)


def _load_goals(ctx, refresh=False):
    if ctx.user is None:
        return []
    return session_slices.load_once(
        "goals",
        ctx.user.id,
        lambda: loaders.load_recent_goals(ctx.client, ctx.user.id),
        refresh=refresh,
    )


def refresh_goals(ctx):
    _load_goals(ctx, refresh=True)


def _toggle_goal(ctx, goal):
    result = repositories.set_goal_completed(ctx.client, goal["id"], not goal.get("is_completed"))
    if result.error:
        logger.error("Error updating goal: %s", result.error)
        return
    refresh_goals(ctx)


def _render_goal(ctx, goal):
    completed = bool(goal.get("is_completed"))
    with st.container(border=True):
        check_col, body_col = st.columns([1, 9])
        check_col.button(
            "✅" if completed else "⭕",
            key=f"goals.toggle.{goal['id']}",
            on_click=_toggle_goal,
            args=(ctx, goal),
            help="Mark as incomplete" if completed else "Mark as complete",
        )
        with body_col:
            title = goal.get("title") or ""
            st.markdown(f"~~{title}~~" if completed else f"**{title}**")
            if goal.get("description"):
                st.caption(goal["description"])
            target = parse_date(goal.get("target_date"))
            if target is not None:
                due = f"📅 Due: {target.strftime('%b %d, %Y')}"
                if is_overdue(goal):
                    due += " :red[**Overdue**]"
                st.caption(due)


def render_goals_overview(ctx):
    goals = _load_goals(ctx)

    with st.container(border=True):
        header_col, action_col = st.columns([3, 1])
        with header_col:
            st.markdown("#### 🎯 Goals Overview")
            st.caption("Track your mental health and wellness goals")
        if action_col.button("➕ Add Goal", key="goals.add", on_click=open_goal_dialog):
            render_create_goal_dialog(ctx, lambda: refresh_goals(ctx))

        if not goals:
            st.caption("No goals yet. Create your first goal!")
            return

        percentage = completion_percentage(goals)
        progress_col, value_col = st.columns([4, 1])
        progress_col.markdown("Overall Progress")
        value_col.markdown(f"{percentage}%")
        st.progress(percentage / 100)
        st.caption(f"{completed_count(goals)} of {len(goals)} goals completed")

        for goal in goals:
            _render_goal(ctx, goal)
