from __future__ import annotations

import logging

import pandas as pd

from dashboard.constants import RECENT_PER_KIND_LIMIT
from dashboard.data import repositories

logger = logging.getLogger(__name__)

MOOD_FRAME_COLUMNS = ["id", "mood_score", "created_at"]
PROFILE_COLUMNS = ("first_name", "last_name")


def _rows_or_empty(result, label):
    if result.error:
        logger.error("Error fetching %s: %s", label, result.error)
        return []
    data = result.data or []
    return [row for row in data if isinstance(row, dict)]


def load_recent_goals(client, user_id):
    return _rows_or_empty(repositories.list_recent_goals(client, user_id), "goals")


def load_recent_mood_entries(client, user_id):
    return _rows_or_empty(repositories.list_recent_mood_entries(client, user_id), "mood entries")


def load_profile(client, user):
    """Fetch the user's profile, seeding it from the sign-in identity on first visit."""
    result = repositories.get_profile(client, user.id)
    if result.error:
        logger.error("Error fetching profile: %s", result.error)
        return {}
    if isinstance(result.data, dict):
        return result.data
    if not (user.first_name or user.last_name):
        return {}

    created = repositories.upsert_profile(client, user.id, user.first_name, user.last_name)
    if created.error:
        logger.error("Error creating profile: %s", created.error)
        return {}
    rows = [row for row in created.data or [] if isinstance(row, dict)]
    if not rows:
        return {}
    return {column: rows[0].get(column) for column in PROFILE_COLUMNS}


def load_activity_sources(client, user_id):
    moods = _rows_or_empty(
        repositories.list_recent_mood_entries(
            client,
            user_id,
            limit=RECENT_PER_KIND_LIMIT,
            columns=("id", "mood_score", "notes", "created_at"),
        ),
        "recent mood entries",
    )
    journals = _rows_or_empty(repositories.list_recent_journal_entries(client, user_id), "recent journal entries")
    goals = _rows_or_empty(repositories.list_recently_updated_goals(client, user_id), "recent goals")
    return moods, journals, goals


def normalize_mood_df(entries) -> pd.DataFrame:
    df = pd.DataFrame(list(entries or []), columns=MOOD_FRAME_COLUMNS)
    if df.empty:
        return df
    df["created_at"] = pd.to_datetime(df["created_at"], utc=True, format="ISO8601")
    df["mood_score"] = df["mood_score"].astype(int)
    df = df.sort_values("created_at").reset_index(drop=True)
    df["date_str"] = df["created_at"].dt.strftime("%b %d %H:%M:%S")
    return df
