"""Recent-activity feed: three independent record sets merged into one timeline."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from dashboard.constants import ACTIVITY_FEED_LIMIT, DESCRIPTION_MAX_CHARS, MOOD_BADGE_COLORS
from dashboard.metrics import parse_timestamp

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


@dataclass
class ActivityItem:
    id: str
    kind: str
    title: str
    timestamp: str
    description: str | None = None
    mood_score: int | None = None
    is_completed: bool | None = None

    @property
    def key(self):
        return f"{self.kind}-{self.id}"

    @property
    def sort_time(self):
        return parse_timestamp(self.timestamp) or _OLDEST


def truncate_description(content, max_chars=DESCRIPTION_MAX_CHARS):
    content = content or ""
    if len(content) > max_chars:
        return content[:max_chars] + "..."
    return content


def mood_activity(entry):
    score = entry.get("mood_score")
    return ActivityItem(
        id=str(entry.get("id")),
        kind="mood",
        title=f"Logged mood: {score}/10",
        description=entry.get("notes") or None,
        timestamp=entry.get("created_at"),
        mood_score=score,
    )


def journal_activity(entry):
    return ActivityItem(
        id=str(entry.get("id")),
        kind="journal",
        title=entry.get("title") or "",
        description=truncate_description(entry.get("content")),
        timestamp=entry.get("created_at"),
    )


def goal_activity(entry):
    completed = bool(entry.get("is_completed"))
    title = entry.get("title") or ""
    if completed:
        return ActivityItem(
            id=str(entry.get("id")),
            kind="goal",
            title=f"Completed: {title}",
            timestamp=entry.get("completed_at") or entry.get("created_at"),
            is_completed=True,
        )
    return ActivityItem(
        id=str(entry.get("id")),
        kind="goal",
        title=f"Created: {title}",
        timestamp=entry.get("created_at"),
        is_completed=False,
    )


def build_activity_feed(mood_entries, journal_entries, goals, limit=ACTIVITY_FEED_LIMIT):
    items = [mood_activity(entry) for entry in mood_entries or []]
    items += [journal_activity(entry) for entry in journal_entries or []]
    items += [goal_activity(entry) for entry in goals or []]
    items.sort(key=lambda item: item.sort_time, reverse=True)
    return items[:limit]


def format_time_ago(timestamp, now=None):
    moment = parse_timestamp(timestamp)
    if moment is None:
        return ""
    now = now or datetime.now(timezone.utc)
    minutes = int((now - moment).total_seconds() // 60)
    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    days = hours // 24
    if days < 7:
        return f"{days}d ago"
    return moment.strftime("%b %d, %Y")


def mood_badge_color(score):
    if not score:
        return MOOD_BADGE_COLORS["none"]
    if score >= 8:
        return MOOD_BADGE_COLORS["great"]
    if score >= 6:
        return MOOD_BADGE_COLORS["good"]
    if score >= 4:
        return MOOD_BADGE_COLORS["okay"]
    return MOOD_BADGE_COLORS["low"]
