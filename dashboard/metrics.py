from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timezone

from dashboard.constants import (
    DEFAULT_DISPLAY_NAME,
    PLACEHOLDER_ACTIVE_GOALS,
    PLACEHOLDER_STREAK_DAYS,
)


def round_half_up(value):
    return int(math.floor(value + 0.5))


def parse_timestamp(value):
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    else:
        try:
            parsed = datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_date(value):
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        return None


def completed_count(goals):
    return sum(1 for goal in goals if goal.get("is_completed"))


def completion_percentage(goals):
    if not goals:
        return 0
    return round_half_up(100 * completed_count(goals) / len(goals))


def is_overdue(goal, now=None):
    """A goal is overdue while incomplete and its target date (midnight UTC) has passed."""
    if goal.get("is_completed"):
        return False
    target = parse_date(goal.get("target_date"))
    if target is None:
        return False
    now = now or datetime.now(timezone.utc)
    return datetime.combine(target, time.min, tzinfo=timezone.utc) < now


def average_mood(entries):
    scores = [int(entry["mood_score"]) for entry in entries if entry.get("mood_score") is not None]
    if not scores:
        return 0
    return round_half_up(sum(scores) / len(scores))


def mood_icon(score):
    if score >= 7:
        return "🙂"
    if score >= 4:
        return "😐"
    return "🙁"


def display_name(profile):
    first_name = str((profile or {}).get("first_name") or "").strip()
    return first_name or DEFAULT_DISPLAY_NAME


@dataclass
class DashboardSummary:
    display_name: str
    average_mood: int
    mood_icon: str
    entries_this_week: int
    streak_days: int = PLACEHOLDER_STREAK_DAYS
    active_goals: int = PLACEHOLDER_ACTIVE_GOALS


def build_dashboard_summary(profile, recent_mood_entries):
    # "7-day average" covers the last seven entries, not a seven-day window.
    average = average_mood(recent_mood_entries)
    return DashboardSummary(
        display_name=display_name(profile),
        average_mood=average,
        mood_icon=mood_icon(average),
        entries_this_week=len(recent_mood_entries),
    )
