import streamlit as st


def show_notice(notice):
    if notice is None:
        return
    message = notice.title if not notice.description else f"**{notice.title}**  \n{notice.description}"
    st.toast(message, icon="⚠️" if notice.is_error else "✅")
