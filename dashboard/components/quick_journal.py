import streamlit as st

from dashboard.components.notices import show_notice
from dashboard.constants import SUGGESTED_TAGS
from dashboard.forms import JournalForm
from dashboard.state import session_slices


def _form():
    return session_slices.get_or_create("journal", "form", JournalForm)


def _toggle_tag(tag):
    _form().toggle_tag(tag)


def _remove_tag(tag):
    _form().remove_tag(tag)


def _add_custom_tag():
    form = _form()
    form.custom_tag = st.session_state.get("journal.custom_tag", "")
    form.add_custom_tag()
    st.session_state["journal.custom_tag"] = form.custom_tag


def _submit_entry(ctx):
    form = _form()
    form.title = st.session_state.get("journal.title", "")
    form.content = st.session_state.get("journal.content", "")
    notice = form.submit(ctx.client, ctx.user)
    if notice is not None and not notice.is_error:
        st.session_state["journal.title"] = ""
        st.session_state["journal.content"] = ""
        st.session_state["journal.custom_tag"] = ""
    show_notice(notice)


def render_quick_journal(ctx):
    form = _form()

    with st.container(border=True):
        st.markdown("#### 📖 Quick Journal")
        st.caption("Express your thoughts and feelings in writing")

        form.title = st.text_input("Title", key="journal.title", placeholder="What's on your mind today?")
        form.content = st.text_area(
            "Your thoughts",
            key="journal.content",
            placeholder="Write about your day, feelings, thoughts, or anything that comes to mind...",
            height=120,
        )

        st.markdown("**Tags (optional)**")
        tag_cols = st.columns(5)
        for idx, tag in enumerate(SUGGESTED_TAGS):
            tag_cols[idx % 5].button(
                tag,
                key=f"journal.tag.{tag}",
                type="primary" if tag in form.tags else "secondary",
                on_click=_toggle_tag,
                args=(tag,),
                use_container_width=True,
            )

        input_col, add_col = st.columns([4, 1])
        custom_tag = input_col.text_input(
            "Custom tag",
            key="journal.custom_tag",
            placeholder="Add custom tag",
            label_visibility="collapsed",
        )
        add_col.button(
            "➕",
            key="journal.add_tag",
            disabled=not custom_tag.strip(),
            on_click=_add_custom_tag,
            use_container_width=True,
        )

        if form.tags:
            selected_cols = st.columns(min(len(form.tags), 5))
            for idx, tag in enumerate(form.tags):
                selected_cols[idx % len(selected_cols)].button(
                    f"{tag} ✕",
                    key=f"journal.selected.{tag}",
                    on_click=_remove_tag,
                    args=(tag,),
                )

        st.button(
            "Saving entry..." if form.is_submitting else "Save Entry",
            key="journal.submit",
            type="primary",
            disabled=not form.can_submit,
            on_click=_submit_entry,
            args=(ctx,),
            use_container_width=True,
        )
