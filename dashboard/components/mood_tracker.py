import streamlit as st

from dashboard.components.notices import show_notice
from dashboard.constants import EMOTION_OPTIONS, MOOD_LABELS, MOOD_LEVELS
from dashboard.forms import MoodForm
from dashboard.state import session_slices


def _form():
    return session_slices.get_or_create("mood", "form", MoodForm)


def _select_mood(score):
    _form().select_mood(score)


def _toggle_emotion(emotion):
    _form().toggle_emotion(emotion)


def _submit_mood(ctx, on_logged):
    form = _form()
    form.notes = st.session_state.get("mood.notes", "")
    notice = form.submit(ctx.client, ctx.user, on_logged=on_logged)
    if notice is not None and not notice.is_error:
        st.session_state["mood.notes"] = ""
    show_notice(notice)


def render_mood_tracker(ctx, on_logged=None):
    form = _form()

    with st.container(border=True):
        st.markdown("#### ❤️ How are you feeling?")
        st.caption("Track your mood to better understand your mental health patterns")

        st.markdown("**Select your mood (1-10)**")
        for row_start in (0, 5):
            cols = st.columns(5)
            for col, (value, _, icon) in zip(cols, MOOD_LEVELS[row_start : row_start + 5]):
                col.button(
                    f"{icon} {value}",
                    key=f"mood.level.{value}",
                    type="primary" if form.mood_score == value else "secondary",
                    on_click=_select_mood,
                    args=(value,),
                    use_container_width=True,
                )
        if form.mood_score:
            st.caption(f"Selected: {MOOD_LABELS[form.mood_score]}")

        st.markdown("**What emotions are you experiencing? (optional)**")
        emotion_cols = st.columns(4)
        for idx, emotion in enumerate(EMOTION_OPTIONS):
            emotion_cols[idx % 4].button(
                emotion,
                key=f"mood.emotion.{emotion}",
                type="primary" if emotion in form.emotions else "secondary",
                on_click=_toggle_emotion,
                args=(emotion,),
                use_container_width=True,
            )

        st.text_area(
            "Additional notes (optional)",
            key="mood.notes",
            placeholder="How was your day? What influenced your mood?",
            height=90,
        )

        st.button(
            "Logging mood..." if form.is_submitting else "Log Mood",
            key="mood.submit",
            type="primary",
            disabled=not form.can_submit,
            on_click=_submit_mood,
            args=(ctx, on_logged),
            use_container_width=True,
        )
