import streamlit as st

from dashboard.components.goals_overview import render_goals_overview
from dashboard.components.mood_tracker import render_mood_tracker
from dashboard.components.quick_journal import render_quick_journal
from dashboard.components.recent_activity import render_recent_activity
from dashboard.data import loaders
from dashboard.header import render_footer, render_header
from dashboard.metrics import build_dashboard_summary
from dashboard.state import session_slices
from dashboard.visualizations import mood_trend_chart


def _load_profile(ctx):
    return session_slices.load_once(
        "dashboard.profile",
        ctx.user.id,
        lambda: loaders.load_profile(ctx.client, ctx.user),
    )


def _load_recent_moods(ctx, refresh=False):
    return session_slices.load_once(
        "dashboard.moods",
        ctx.user.id,
        lambda: loaders.load_recent_mood_entries(ctx.client, ctx.user.id),
        refresh=refresh,
    )


def refresh_recent_moods(ctx):
    _load_recent_moods(ctx, refresh=True)


def _render_quick_stats(summary):
    cols = st.columns(4)
    with cols[0].container(border=True):
        st.metric(f"Current Mood {summary.mood_icon}", f"{summary.average_mood}/10")
        st.caption("7-day average")
    with cols[1].container(border=True):
        st.metric("Entries 📅", summary.entries_this_week)
        st.caption("This week")
    with cols[2].container(border=True):
        st.metric("Streak 📈", summary.streak_days)
        st.caption("Day streak")
    with cols[3].container(border=True):
        st.metric("Goals 🎯", summary.active_goals)
        st.caption("Active goals")


def render_dashboard(ctx):
    profile = _load_profile(ctx)
    recent_moods = _load_recent_moods(ctx)
    summary = build_dashboard_summary(profile, recent_moods)

    render_header(ctx, summary)
    _render_quick_stats(summary)

    mood_df = loaders.normalize_mood_df(recent_moods)
    if not mood_df.empty:
        st.plotly_chart(mood_trend_chart(mood_df), use_container_width=True)

    left_col, right_col = st.columns(2)
    with left_col:
        render_mood_tracker(ctx, on_logged=lambda: refresh_recent_moods(ctx))
        render_quick_journal(ctx)
    with right_col:
        render_goals_overview(ctx)
        render_recent_activity(ctx)

    render_footer()
