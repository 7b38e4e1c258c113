from __future__ import annotations

import json
from datetime import date, datetime, timezone
from uuid import uuid4

from sqlalchemy import text as sql_text, bindparam

from backend.db import get_sessionmaker
from backend.db_init import (
    GOALS_TABLE,
    JOURNAL_ENTRIES_TABLE,
    MOOD_ENTRIES_TABLE,
    PROFILES_TABLE,
)

TABLE_COLUMNS = {
    MOOD_ENTRIES_TABLE: ["id", "user_id", "mood_score", "emotions", "notes", "created_at"],
    JOURNAL_ENTRIES_TABLE: ["id", "user_id", "title", "content", "tags", "created_at"],
    GOALS_TABLE: [
        "id",
        "user_id",
        "title",
        "description",
        "target_date",
        "is_completed",
        "completed_at",
        "created_at",
        "updated_at",
    ],
    PROFILES_TABLE: ["user_id", "first_name", "last_name", "created_at", "updated_at"],
}

KEY_COLUMNS = {PROFILES_TABLE: "user_id"}
JSON_COLUMNS = {"emotions", "tags"}
BOOL_COLUMNS = {"is_completed"}
INT_COLUMNS = {"mood_score"}
READ_ONLY_COLUMNS = {"id", "user_id", "created_at", "updated_at"}
TOUCHED_TABLES = {GOALS_TABLE, PROFILES_TABLE}


def _new_id() -> str:
    return uuid4().hex


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _key_column(table: str) -> str:
    return KEY_COLUMNS.get(table, "id")


def _check_columns(table: str, names) -> None:
    allowed = TABLE_COLUMNS[table]
    for name in names:
        if name not in allowed:
            raise ValueError(f"Unknown column for {table}: {name}")


def _encode_value(column: str, value):
    if value is None:
        return None
    if column in JSON_COLUMNS:
        return json.dumps(list(value), ensure_ascii=False)
    if column in BOOL_COLUMNS:
        return int(bool(value))
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def _coerce_filter(column: str, raw):
    if column in BOOL_COLUMNS:
        if isinstance(raw, bool):
            return int(raw)
        text = str(raw).strip().lower()
        if text in {"true", "1"}:
            return 1
        if text in {"false", "0"}:
            return 0
        raise ValueError(f"Invalid boolean filter for {column}")
    if column in INT_COLUMNS:
        try:
            return int(raw)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid integer filter for {column}") from exc
    return raw


def _normalize_row(row) -> dict:
    payload = dict(row)
    for column in JSON_COLUMNS & payload.keys():
        raw = payload.get(column)
        if raw is None:
            continue
        try:
            decoded = json.loads(raw)
        except (TypeError, ValueError):
            decoded = []
        payload[column] = decoded if isinstance(decoded, list) else []
    for column in BOOL_COLUMNS & payload.keys():
        payload[column] = bool(payload.get(column))
    return payload


def _where_clause(user_id: str, filters: dict, params: dict) -> str:
    clauses = ["user_id = :user_id"]
    params["user_id"] = user_id
    for idx, (column, value) in enumerate(filters.items()):
        key = f"f_{idx}"
        clauses.append(f"{column} = :{key}")
        params[key] = _coerce_filter(column, value)
    return " AND ".join(clauses)


async def select_rows(
    user_id: str,
    table: str,
    columns: list[str] | None = None,
    filters: dict | None = None,
    order: str | None = None,
    ascending: bool = False,
    limit: int | None = None,
) -> list[dict]:
    selected = list(columns or TABLE_COLUMNS[table])
    clean_filters = dict(filters or {})
    _check_columns(table, selected)
    _check_columns(table, clean_filters.keys())
    if order:
        _check_columns(table, [order])
    params: dict = {}
    sql = f"SELECT {', '.join(selected)} FROM {table} WHERE {_where_clause(user_id, clean_filters, params)}"
    if order:
        sql += f" ORDER BY {order} {'ASC' if ascending else 'DESC'}"
    if limit is not None:
        sql += " LIMIT :limit"
        params["limit"] = int(limit)
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        rows = (await session.execute(sql_text(sql), params)).mappings().all()
    return [_normalize_row(row) for row in rows]


async def _select_by_keys(user_id: str, table: str, keys: list[str]) -> list[dict]:
    if not keys:
        return []
    key_column = _key_column(table)
    stmt = sql_text(
        f"""
        SELECT {', '.join(TABLE_COLUMNS[table])}
        FROM {table}
        WHERE user_id = :user_id AND {key_column} IN :keys
        ORDER BY created_at DESC
        """
    ).bindparams(bindparam("keys", expanding=True))
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        rows = (await session.execute(stmt, {"user_id": user_id, "keys": keys})).mappings().all()
    return [_normalize_row(row) for row in rows]


async def insert_row(user_id: str, table: str, values: dict) -> dict:
    _check_columns(table, values.keys())
    now = _now_iso()
    record = {column: _encode_value(column, value) for column, value in values.items()}
    record["user_id"] = user_id
    record["created_at"] = now
    if table in TOUCHED_TABLES:
        record["updated_at"] = now
    if table == PROFILES_TABLE:
        await _upsert_profile(record)
        return (await _select_by_keys(user_id, table, [user_id]))[0]

    record["id"] = _new_id()
    if table == GOALS_TABLE:
        record.setdefault("is_completed", 0)
    columns = list(record.keys())
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        await session.execute(
            sql_text(
                f"INSERT INTO {table} ({', '.join(columns)}) "
                f"VALUES ({', '.join(f':{col}' for col in columns)})"
            ),
            record,
        )
        await session.commit()
    return (await _select_by_keys(user_id, table, [record["id"]]))[0]


async def _upsert_profile(record: dict) -> None:
    columns = list(record.keys())
    updates = ", ".join(
        f"{col}=EXCLUDED.{col}" for col in columns if col not in {"user_id", "created_at"}
    )
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        await session.execute(
            sql_text(
                f"""
                INSERT INTO {PROFILES_TABLE} ({', '.join(columns)})
                VALUES ({', '.join(f':{col}' for col in columns)})
                ON CONFLICT(user_id) DO UPDATE SET {updates}
                """
            ),
            record,
        )
        await session.commit()


async def update_rows(user_id: str, table: str, filters: dict, values: dict) -> list[dict]:
    if not filters:
        raise ValueError("At least one filter is required")
    if not values:
        raise ValueError("No changes provided")
    _check_columns(table, values.keys())
    blocked = READ_ONLY_COLUMNS & set(values.keys())
    if blocked:
        raise ValueError(f"Read-only column: {sorted(blocked)[0]}")
    patch = {column: _encode_value(column, value) for column, value in values.items()}
    if table in TOUCHED_TABLES:
        patch["updated_at"] = _now_iso()

    key_column = _key_column(table)
    matched = await select_rows(user_id, table, columns=[key_column], filters=filters)
    if not matched:
        return []
    params = {f"set_{column}": value for column, value in patch.items()}
    assignments = ", ".join(f"{column} = :set_{column}" for column in patch.keys())
    where = _where_clause(user_id, dict(filters or {}), params)
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        await session.execute(sql_text(f"UPDATE {table} SET {assignments} WHERE {where}"), params)
        await session.commit()
    return await _select_by_keys(user_id, table, [row[key_column] for row in matched])


async def delete_rows(user_id: str, table: str, filters: dict) -> list[dict]:
    if not filters:
        raise ValueError("At least one filter is required")
    matched = await select_rows(user_id, table, filters=filters)
    if not matched:
        return []
    params: dict = {}
    where = _where_clause(user_id, dict(filters), params)
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        await session.execute(sql_text(f"DELETE FROM {table} WHERE {where}"), params)
        await session.commit()
    return matched
