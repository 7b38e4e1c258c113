from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import ValidationError

from backend.auth import require_user_id
from backend import repositories
from backend.db_init import GOALS_TABLE, JOURNAL_ENTRIES_TABLE, MOOD_ENTRIES_TABLE, PROFILES_TABLE
from backend.schemas import (
    GoalCreate,
    GoalPatch,
    JournalEntryCreate,
    MoodEntryCreate,
    ProfileUpsert,
    RowValues,
)

router = APIRouter()

RESERVED_PARAMS = {"columns", "order", "ascending", "limit", "single"}

CREATE_SCHEMAS = {
    MOOD_ENTRIES_TABLE: MoodEntryCreate,
    JOURNAL_ENTRIES_TABLE: JournalEntryCreate,
    GOALS_TABLE: GoalCreate,
    PROFILES_TABLE: ProfileUpsert,
}

# Mood and journal entries are immutable once written; profiles are owned by sign-up.
PATCH_SCHEMAS = {
    GOALS_TABLE: GoalPatch,
}

DELETABLE_TABLES = {MOOD_ENTRIES_TABLE, JOURNAL_ENTRIES_TABLE, GOALS_TABLE}


def _require_table(table: str) -> str:
    if table not in repositories.TABLE_COLUMNS:
        raise HTTPException(status_code=404, detail=f"Unknown table: {table}")
    return table


def _check_owner(value, user_id: str) -> None:
    if value is not None and str(value).strip().lower() != user_id:
        raise HTTPException(status_code=403, detail="Rows must belong to the authenticated user")


def _filters_from_query(request: Request, user_id: str) -> dict:
    filters = {key: value for key, value in request.query_params.items() if key not in RESERVED_PARAMS}
    _check_owner(filters.pop("user_id", None), user_id)
    return filters


def _validated_values(schema, values: dict, user_id: str) -> dict:
    clean = dict(values or {})
    _check_owner(clean.pop("user_id", None), user_id)
    try:
        model = schema.model_validate(clean)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False, include_input=False),
        ) from exc
    return model.model_dump(exclude_unset=True)


@router.get("/v1/tables/{table}")
async def select_rows(
    request: Request,
    table: str = Depends(_require_table),
    columns: str | None = Query(None),
    order: str | None = Query(None),
    ascending: bool = Query(False),
    limit: int | None = Query(None, ge=1, le=100),
    single: bool = Query(False),
    user_id: str = Depends(require_user_id),
):
    filters = _filters_from_query(request, user_id)
    selected = [item.strip() for item in columns.split(",") if item.strip()] if columns else None
    try:
        rows = await repositories.select_rows(
            user_id,
            table,
            columns=selected,
            filters=filters,
            order=order,
            ascending=ascending,
            limit=1 if single else limit,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if single:
        return {"data": rows[0] if rows else None}
    return {"data": rows}


@router.post("/v1/tables/{table}", status_code=201)
async def insert_row(
    payload: RowValues,
    table: str = Depends(_require_table),
    user_id: str = Depends(require_user_id),
):
    values = _validated_values(CREATE_SCHEMAS[table], payload.values, user_id)
    try:
        row = await repositories.insert_row(user_id, table, values)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"data": [row]}


@router.patch("/v1/tables/{table}")
async def update_rows(
    request: Request,
    payload: RowValues,
    table: str = Depends(_require_table),
    user_id: str = Depends(require_user_id),
):
    schema = PATCH_SCHEMAS.get(table)
    if schema is None:
        raise HTTPException(status_code=405, detail=f"Rows in {table} cannot be updated")
    filters = _filters_from_query(request, user_id)
    values = _validated_values(schema, payload.values, user_id)
    try:
        rows = await repositories.update_rows(user_id, table, filters, values)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"data": rows}


@router.delete("/v1/tables/{table}")
async def delete_rows(
    request: Request,
    table: str = Depends(_require_table),
    user_id: str = Depends(require_user_id),
):
    if table not in DELETABLE_TABLES:
        raise HTTPException(status_code=405, detail=f"Rows in {table} cannot be deleted")
    filters = _filters_from_query(request, user_id)
    try:
        rows = await repositories.delete_rows(user_id, table, filters)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"data": rows}
