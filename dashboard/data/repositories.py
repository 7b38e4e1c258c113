from datetime import date, datetime, timezone

from dashboard.constants import (
    GOALS_TABLE,
    GOALS_OVERVIEW_LIMIT,
    JOURNAL_ENTRIES_TABLE,
    MOOD_ENTRIES_TABLE,
    PROFILES_TABLE,
    RECENT_MOOD_LIMIT,
    RECENT_PER_KIND_LIMIT,
)


def _now_iso(now=None):
    return (now or datetime.now(timezone.utc)).isoformat()


def insert_mood_entry(client, user_id, mood_score, emotions, notes=None):
    return client.table(MOOD_ENTRIES_TABLE).insert(
        {
            "user_id": user_id,
            "mood_score": int(mood_score),
            "emotions": list(emotions or []),
            "notes": notes,
        }
    ).execute()


def insert_journal_entry(client, user_id, title, content, tags=None):
    return client.table(JOURNAL_ENTRIES_TABLE).insert(
        {
            "user_id": user_id,
            "title": title,
            "content": content,
            "tags": list(tags) if tags else None,
        }
    ).execute()


def insert_goal(client, user_id, title, description=None, target_date=None):
    if isinstance(target_date, date):
        target_date = target_date.isoformat()
    return client.table(GOALS_TABLE).insert(
        {
            "user_id": user_id,
            "title": title,
            "description": description,
            "target_date": target_date or None,
        }
    ).execute()


def set_goal_completed(client, goal_id, is_completed, now=None):
    return client.table(GOALS_TABLE).update(
        {
            "is_completed": bool(is_completed),
            "completed_at": _now_iso(now) if is_completed else None,
        }
    ).eq("id", goal_id).execute()


def list_recent_goals(client, user_id, limit=GOALS_OVERVIEW_LIMIT):
    return (
        client.table(GOALS_TABLE)
        .select("*")
        .eq("user_id", user_id)
        .order("created_at", ascending=False)
        .limit(limit)
        .execute()
    )


def list_recently_updated_goals(client, user_id, limit=RECENT_PER_KIND_LIMIT):
    return (
        client.table(GOALS_TABLE)
        .select(["id", "title", "is_completed", "created_at", "completed_at"])
        .eq("user_id", user_id)
        .order("updated_at", ascending=False)
        .limit(limit)
        .execute()
    )


def list_recent_mood_entries(client, user_id, limit=RECENT_MOOD_LIMIT, columns=("id", "mood_score", "created_at")):
    return (
        client.table(MOOD_ENTRIES_TABLE)
        .select(list(columns))
        .eq("user_id", user_id)
        .order("created_at", ascending=False)
        .limit(limit)
        .execute()
    )


def list_recent_journal_entries(client, user_id, limit=RECENT_PER_KIND_LIMIT):
    return (
        client.table(JOURNAL_ENTRIES_TABLE)
        .select(["id", "title", "content", "created_at"])
        .eq("user_id", user_id)
        .order("created_at", ascending=False)
        .limit(limit)
        .execute()
    )


def get_profile(client, user_id):
    return (
        client.table(PROFILES_TABLE)
        .select(["first_name", "last_name"])
        .eq("user_id", user_id)
        .single()
        .execute()
    )


def upsert_profile(client, user_id, first_name=None, last_name=None):
    return client.table(PROFILES_TABLE).insert(
        {
            "user_id": user_id,
            "first_name": first_name or None,
            "last_name": last_name or None,
        }
    ).execute()
