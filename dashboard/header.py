from datetime import date

import streamlit as st

from dashboard.constants import APP_NAME


def render_header(ctx, summary):
    title_col, action_col = st.columns([5, 1])
    with title_col:
        st.markdown(f"## 🧠 {APP_NAME}")
        st.markdown(f"Welcome back, {summary.display_name}! How are you feeling today?")
    with action_col:
        if st.button("↪ Sign Out", key="header.sign_out", use_container_width=True):
            ctx.sign_out()


def render_footer():
    st.divider()
    st.caption(f"© {date.today().year} {APP_NAME}. All rights reserved.")
