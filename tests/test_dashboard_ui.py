"""End-to-end dashboard renders through Streamlit's AppTest, backed by the table service."""

import pytest
from streamlit.testing.v1 import AppTest

from dashboard.context import DashboardContext
from dashboard.data import repositories
from dashboard.data.api_client import ApiError


def _dashboard_script():
    import streamlit as st

    from dashboard.home import render_dashboard

    render_dashboard(st.session_state["test.context"])


def _app(client, user, sign_outs):
    at = AppTest.from_function(_dashboard_script, default_timeout=30)
    at.session_state["test.context"] = DashboardContext(
        user=user,
        client=client,
        sign_out=lambda: sign_outs.append(True),
    )
    return at.run()


def _metric(at, prefix):
    return next(metric for metric in at.metric if metric.label.startswith(prefix))


def _toasts(at):
    return " ".join(toast.value for toast in at.toast)


@pytest.fixture()
def sign_outs():
    return []


@pytest.fixture()
def app(service_client, user, sign_outs):
    return _app(service_client, user, sign_outs)


def test_first_render_greets_by_profile_name(app):
    assert not app.exception
    assert any("Welcome back, Tess!" in block.value for block in app.markdown)
    assert _metric(app, "Current Mood").value == "0/10"
    assert _metric(app, "Entries").value == "0"


def test_logging_a_mood_refreshes_the_stats(app):
    app.button(key="mood.level.8").click().run()
    app.text_area(key="mood.notes").input("slept well").run()
    app.button(key="mood.submit").click().run()

    assert not app.exception
    assert "Mood logged successfully!" in _toasts(app)
    assert _metric(app, "Current Mood").value == "8/10"
    assert _metric(app, "Entries").value == "1"
    assert app.text_area(key="mood.notes").value == ""


def test_saving_a_journal_entry_clears_the_form(app, service_client):
    app.text_input(key="journal.title").input("Evening")
    app.text_area(key="journal.content").input("Long walk by the river.")
    app.run()
    app.button(key="journal.tag.Work").click().run()
    app.button(key="journal.submit").click().run()

    assert not app.exception
    assert "Journal entry saved!" in _toasts(app)
    assert app.text_input(key="journal.title").value == ""
    assert app.text_area(key="journal.content").value == ""
    rows = service_client.table("journal_entries").select(["title", "tags"]).execute().data
    assert rows == [{"title": "Evening", "tags": ["Work"]}]


def test_toggling_a_goal_refetches_the_overview(service_client, user, sign_outs):
    goal = repositories.insert_goal(service_client, user.id, "Meditate 10 min").data[0]
    at = _app(service_client, user, sign_outs)
    toggle_key = f"goals.toggle.{goal['id']}"
    assert at.button(key=toggle_key).label == "⭕"

    at.button(key=toggle_key).click().run()

    assert not at.exception
    assert at.button(key=toggle_key).label == "✅"
    assert any(caption.value == "1 of 1 goals completed" for caption in at.caption)


def test_sign_out_button_calls_context(app, sign_outs):
    app.button(key="header.sign_out").click().run()
    assert sign_outs == [True]


def test_failed_mood_submit_keeps_the_form(table_client, transport, user, sign_outs):
    at = _app(table_client, user, sign_outs)
    transport.error = ApiError(503, "Service Unavailable", "down")

    at.button(key="mood.level.3").click().run()
    at.text_area(key="mood.notes").input("rough day").run()
    at.button(key="mood.submit").click().run()

    assert not at.exception
    assert "Failed to log mood" in _toasts(at)
    assert at.text_area(key="mood.notes").value == "rough day"
    assert at.session_state["slice.mood"]["form"].mood_score == 3
