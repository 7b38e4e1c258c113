import html

import streamlit as st

from dashboard.activity import build_activity_feed, format_time_ago, mood_badge_color
from dashboard.data import loaders
from dashboard.state import session_slices

KIND_ICONS = {
    "mood": "❤️",
    "journal": "📖",
    "goal": "🎯",
}


def _load_feed(ctx):
    if ctx.user is None:
        return []

    def _fetch():
        moods, journals, goals = loaders.load_activity_sources(ctx.client, ctx.user.id)
        return build_activity_feed(moods, journals, goals)

    return session_slices.load_once("activity", ctx.user.id, _fetch)


def _badge(text, color):
    return (
        f"<span style='background:{color};color:white;border-radius:6px;"
        f"padding:1px 6px;font-size:11px;'>{html.escape(text)}</span>"
    )


def render_recent_activity(ctx):
    activities = _load_feed(ctx)

    with st.container(border=True):
        st.markdown("#### 📈 Recent Activity")
        st.caption("Your latest mood entries, journal posts, and goal updates")

        if not activities:
            st.caption("📅 No recent activity. Start by logging your mood!")
            return

        for item in activities:
            badges = []
            if item.kind == "mood" and item.mood_score:
                badges.append(_badge(f"{item.mood_score}/10", mood_badge_color(item.mood_score)))
            if item.kind == "goal" and item.is_completed:
                badges.append(_badge("Completed", "#16A34A"))
            badges.append(f"<span style='font-size:11px;opacity:0.7;'>{format_time_ago(item.timestamp)}</span>")
            st.markdown(
                f"{KIND_ICONS.get(item.kind, '•')} **{html.escape(item.title)}** &nbsp; {' '.join(badges)}",
                unsafe_allow_html=True,
            )
            if item.description:
                st.caption(item.description)
            st.divider()
