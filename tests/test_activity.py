from datetime import datetime, timedelta, timezone

from dashboard import activity
from dashboard.constants import MOOD_BADGE_COLORS

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def _ts(minutes_ago):
    return (NOW - timedelta(minutes=minutes_ago)).isoformat()


def test_feed_is_merged_newest_first_and_capped():
    moods = [{"id": f"m{i}", "mood_score": 5, "created_at": _ts(i * 10)} for i in range(4)]
    journals = [{"id": f"j{i}", "title": "t", "content": "c", "created_at": _ts(i * 10 + 3)} for i in range(4)]
    goals = [{"id": f"g{i}", "title": "g", "is_completed": False, "created_at": _ts(i * 10 + 6)} for i in range(4)]

    feed = activity.build_activity_feed(moods, journals, goals)

    assert len(feed) == 10
    times = [item.sort_time for item in feed]
    assert times == sorted(times, reverse=True)
    assert feed[0].key == "mood-m0"


def test_empty_sources_give_empty_feed():
    assert activity.build_activity_feed([], [], []) == []


def test_mood_item():
    item = activity.mood_activity({"id": 1, "mood_score": 7, "notes": "", "created_at": _ts(5)})
    assert item.title == "Logged mood: 7/10"
    assert item.description is None
    assert item.mood_score == 7
    assert item.key == "mood-1"


def test_journal_description_is_truncated():
    content = "x" * 150
    item = activity.journal_activity({"id": "j", "title": "Long", "content": content, "created_at": _ts(1)})
    assert item.description == "x" * 100 + "..."
    assert activity.truncate_description("x" * 100) == "x" * 100


def test_completed_goal_uses_completion_time():
    item = activity.goal_activity(
        {"id": "g", "title": "Walk", "is_completed": True, "created_at": _ts(600), "completed_at": _ts(5)}
    )
    assert item.title == "Completed: Walk"
    assert item.timestamp == _ts(5)
    assert item.is_completed


def test_completed_goal_without_completion_time_falls_back_to_creation():
    item = activity.goal_activity(
        {"id": "g", "title": "Walk", "is_completed": True, "created_at": _ts(600), "completed_at": None}
    )
    assert item.timestamp == _ts(600)


def test_open_goal():
    item = activity.goal_activity({"id": "g", "title": "Read", "is_completed": False, "created_at": _ts(1)})
    assert item.title == "Created: Read"
    assert item.is_completed is False


def test_format_time_ago():
    assert activity.format_time_ago(_ts(0), now=NOW) == "Just now"
    assert activity.format_time_ago(_ts(45), now=NOW) == "45m ago"
    assert activity.format_time_ago(_ts(60 * 5), now=NOW) == "5h ago"
    assert activity.format_time_ago(_ts(60 * 24 * 3), now=NOW) == "3d ago"
    assert activity.format_time_ago(_ts(60 * 24 * 30), now=NOW) == "Sep 19, 2026"


def test_mood_badge_color():
    assert activity.mood_badge_color(9) == MOOD_BADGE_COLORS["great"]
    assert activity.mood_badge_color(6) == MOOD_BADGE_COLORS["good"]
    assert activity.mood_badge_color(4) == MOOD_BADGE_COLORS["okay"]
    assert activity.mood_badge_color(2) == MOOD_BADGE_COLORS["low"]
    assert activity.mood_badge_color(None) == MOOD_BADGE_COLORS["none"]
