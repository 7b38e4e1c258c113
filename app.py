import streamlit as st

from dashboard import auth
from dashboard.constants import APP_NAME
from dashboard.context import DashboardContext
from dashboard.data import api_client
from dashboard.data.tables import TableClient
from dashboard.home import render_dashboard
from dashboard.logging_config import configure_logging

st.set_page_config(page_title=APP_NAME, page_icon="🧠", layout="wide")

auth.load_local_env()
configure_logging(auth.get_secret(("app", "log_level")))

auth.enforce_google_login()
api_client.configure(auth.get_secret, auth.current_user_email)

if not api_client.is_enabled():
    st.error("API_BASE_URL and BACKEND_SESSION_SECRET must be configured to reach the table service.")
    st.stop()

user = auth.get_current_user()
if user is None:
    st.error("Could not determine the signed-in account.")
    st.stop()

context = DashboardContext(
    user=user,
    client=TableClient(),
    sign_out=auth.sign_out,
)

render_dashboard(context)
