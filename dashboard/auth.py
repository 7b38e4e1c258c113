from __future__ import annotations

import os
from urllib.parse import urlparse

import streamlit as st
from streamlit.errors import StreamlitSecretNotFoundError

from dashboard.context import AuthUser
from dashboard.state import session_slices

ENV_PATH = os.path.join(os.path.dirname(__file__), "..", ".env")

ENV_FALLBACK_KEYS = {
    ("auth", "redirect_uri"): "AUTH_REDIRECT_URI",
    ("auth", "cookie_secret"): "AUTH_COOKIE_SECRET",
    ("auth", "google", "client_id"): "GOOGLE_CLIENT_ID",
    ("auth", "google", "client_secret"): "GOOGLE_CLIENT_SECRET",
    ("auth", "google", "server_metadata_url"): "GOOGLE_SERVER_METADATA_URL",
    ("app", "allowed_emails"): "ALLOWED_EMAILS",
    ("app", "API_BASE_URL"): "API_BASE_URL",
    ("app", "BACKEND_SESSION_SECRET"): "BACKEND_SESSION_SECRET",
    ("app", "log_level"): "DASHBOARD_LOG_LEVEL",
}


def load_local_env():
    if not os.path.exists(ENV_PATH):
        return
    with open(ENV_PATH, "r", encoding="utf-8") as env_file:
        for raw_line in env_file:
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


def get_secret(path, default=None):
    env_key = ENV_FALLBACK_KEYS.get(tuple(path))
    if env_key:
        env_value = os.getenv(env_key)
        if env_value:
            return env_value
    try:
        current = st.secrets
        for key in path:
            if key not in current:
                return default
            current = current[key]
    except (FileNotFoundError, KeyError, StreamlitSecretNotFoundError):
        return default
    return current


def allowed_emails():
    raw = get_secret(("app", "allowed_emails")) or ""
    return {email.strip().lower() for email in str(raw).split(",") if email.strip()}


def auth_configured():
    return bool(
        get_secret(("auth", "redirect_uri"))
        and get_secret(("auth", "cookie_secret"))
        and get_secret(("auth", "google", "client_id"))
        and get_secret(("auth", "google", "client_secret"))
    )


def enforce_google_login():
    if not auth_configured():
        st.markdown("### Google Login Setup Required")
        st.markdown("Configure Google OAuth in your Streamlit secrets before using the app.")
        st.code(
            "[auth]\n"
            "redirect_uri = \"http://localhost:8501/oauth2callback\"\n"
            "cookie_secret = \"LONG_RANDOM_SECRET\"\n\n"
            "[auth.google]\n"
            "client_id = \"YOUR_CLIENT_ID\"\n"
            "client_secret = \"YOUR_CLIENT_SECRET\"\n"
            "server_metadata_url = \"https://accounts.google.com/.well-known/openid-configuration\"\n",
            language="toml",
        )
        st.stop()

    redirect_uri = (get_secret(("auth", "redirect_uri")) or "").strip()
    if urlparse(redirect_uri).path != "/oauth2callback":
        st.error("Invalid auth.redirect_uri. For Streamlit st.login it must end with /oauth2callback.")
        st.stop()

    if not st.user.is_logged_in:
        st.markdown("### Login Required")
        st.markdown("Sign in to start tracking your mood, journal and goals.")
        if st.button("Login with Google", key="auth.login"):
            st.login("google")
        st.stop()

    allowed = allowed_emails()
    if allowed and current_user_email() not in allowed:
        st.error("Access denied for this account.")
        if st.button("Logout", key="auth.logout_denied"):
            st.logout()
        st.stop()


def current_user_email():
    return str(getattr(st.user, "email", "") or "").strip().lower()


def _user_claim(name):
    return str(getattr(st.user, name, "") or "").strip()


def get_current_user():
    email = current_user_email()
    if not email:
        return None
    first_name = _user_claim("given_name")
    last_name = _user_claim("family_name")
    if not first_name:
        first_name, _, rest = _user_claim("name").partition(" ")
        last_name = last_name or rest.strip()
    return AuthUser(id=email, email=email, first_name=first_name, last_name=last_name)


def sign_out():
    session_slices.clear_all()
    st.logout()
