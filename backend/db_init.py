from __future__ import annotations

from sqlalchemy import text as sql_text

from backend.db import get_engine


MOOD_ENTRIES_TABLE = "mood_entries"
JOURNAL_ENTRIES_TABLE = "journal_entries"
GOALS_TABLE = "goals"
PROFILES_TABLE = "profiles"


async def init_db():
    engine = get_engine()
    async with engine.begin() as conn:
        await conn.execute(
            sql_text(
                f"""
                CREATE TABLE IF NOT EXISTS {MOOD_ENTRIES_TABLE} (
                    id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    mood_score INTEGER NOT NULL CHECK (mood_score BETWEEN 1 AND 10),
                    emotions TEXT,
                    notes TEXT,
                    created_at TEXT NOT NULL
                )
                """
            )
        )
        await conn.execute(
            sql_text(
                f"""
                CREATE TABLE IF NOT EXISTS {JOURNAL_ENTRIES_TABLE} (
                    id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    title TEXT NOT NULL,
                    content TEXT NOT NULL,
                    tags TEXT,
                    created_at TEXT NOT NULL
                )
                """
            )
        )
        await conn.execute(
            sql_text(
                f"""
                CREATE TABLE IF NOT EXISTS {GOALS_TABLE} (
                    id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    title TEXT NOT NULL,
                    description TEXT,
                    target_date TEXT,
                    is_completed INTEGER DEFAULT 0,
                    completed_at TEXT,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
                """
            )
        )
        await conn.execute(
            sql_text(
                f"""
                CREATE TABLE IF NOT EXISTS {PROFILES_TABLE} (
                    user_id TEXT PRIMARY KEY,
                    first_name TEXT,
                    last_name TEXT,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
                """
            )
        )
        for table_name in (MOOD_ENTRIES_TABLE, JOURNAL_ENTRIES_TABLE, GOALS_TABLE):
            await conn.execute(
                sql_text(
                    f"CREATE INDEX IF NOT EXISTS idx_{table_name}_user_created "
                    f"ON {table_name} (user_id, created_at)"
                )
            )
        await conn.execute(
            sql_text(
                f"CREATE INDEX IF NOT EXISTS idx_{GOALS_TABLE}_user_updated "
                f"ON {GOALS_TABLE} (user_id, updated_at)"
            )
        )
