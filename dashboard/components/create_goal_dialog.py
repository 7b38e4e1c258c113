import streamlit as st

from dashboard.components.notices import show_notice
from dashboard.forms import GoalForm
from dashboard.state import session_slices


def goal_form():
    return session_slices.get_or_create("goal", "form", GoalForm)


def open_goal_dialog():
    goal_form().is_open = True


def _cancel():
    goal_form().is_open = False


def _submit_goal(ctx, on_created):
    form = goal_form()
    form.title = st.session_state.get("goal.title", "")
    form.description = st.session_state.get("goal.description", "")
    form.target_date = st.session_state.get("goal.target_date")
    notice = form.submit(ctx.client, ctx.user, on_created=on_created)
    if notice is not None and not notice.is_error:
        st.session_state["goal.title"] = ""
        st.session_state["goal.description"] = ""
        st.session_state["goal.target_date"] = None
    show_notice(notice)


@st.dialog("Create New Goal")
def render_create_goal_dialog(ctx, on_created):
    form = goal_form()
    if not form.is_open:
        st.rerun()

    st.caption("Set a new goal to help track your mental health progress.")
    title = st.text_input("Goal Title *", key="goal.title", placeholder="e.g., Meditate for 10 minutes daily")
    st.text_area(
        "Description (optional)",
        key="goal.description",
        placeholder="Add more details about your goal...",
        height=90,
    )
    st.date_input(
        "Target Date (optional)",
        key="goal.target_date",
        value=None,
        min_value=GoalForm.min_target_date(),
    )

    cancel_col, create_col = st.columns(2)
    cancel_col.button("Cancel", key="goal.cancel", on_click=_cancel, use_container_width=True)
    create_col.button(
        "Creating..." if form.is_submitting else "Create Goal",
        key="goal.create",
        type="primary",
        disabled=not title.strip() or form.is_submitting,
        on_click=_submit_goal,
        args=(ctx, on_created),
        use_container_width=True,
    )
