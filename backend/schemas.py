from __future__ import annotations

from datetime import date, datetime
from typing import Optional, List, Dict, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _clean_labels(values):
    if values is None:
        return None
    clean = []
    for value in values:
        label = " ".join(str(value or "").split())
        if label and label not in clean:
            clean.append(label)
    return clean


class MoodEntryCreate(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    mood_score: int = Field(..., ge=1, le=10)
    emotions: List[str] = Field(default_factory=list)
    notes: Optional[str] = None

    @field_validator("emotions", mode="before")
    @classmethod
    def _dedupe_emotions(cls, value):
        return _clean_labels(value) or []


class JournalEntryCreate(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    tags: Optional[List[str]] = None

    @field_validator("tags", mode="before")
    @classmethod
    def _dedupe_tags(cls, value):
        return _clean_labels(value) or None


class GoalCreate(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    target_date: Optional[date] = None


class GoalPatch(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    target_date: Optional[date] = None
    is_completed: Optional[bool] = None
    completed_at: Optional[datetime] = None

    @field_validator("title", "is_completed", mode="before")
    @classmethod
    def _reject_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class ProfileUpsert(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    first_name: Optional[str] = None
    last_name: Optional[str] = None


class RowValues(BaseModel):
    values: Dict[str, Any] = Field(default_factory=dict)
