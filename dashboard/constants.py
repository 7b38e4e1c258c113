APP_NAME = "MindfulSpace"

MOOD_ENTRIES_TABLE = "mood_entries"
JOURNAL_ENTRIES_TABLE = "journal_entries"
GOALS_TABLE = "goals"
PROFILES_TABLE = "profiles"

MOOD_LEVELS = [
    (1, "Terrible", "🌧️"),
    (2, "Bad", "☹️"),
    (3, "Poor", "☁️"),
    (4, "Below Average", "😐"),
    (5, "Average", "😐"),
    (6, "Above Average", "🙂"),
    (7, "Good", "☀️"),
    (8, "Great", "❤️"),
    (9, "Amazing", "⚡"),
    (10, "Perfect", "🌞"),
]
MOOD_LABELS = {value: label for value, label, _ in MOOD_LEVELS}
MIN_MOOD_SCORE = 1
MAX_MOOD_SCORE = 10

EMOTION_OPTIONS = [
    "Happy",
    "Sad",
    "Anxious",
    "Calm",
    "Excited",
    "Worried",
    "Content",
    "Frustrated",
    "Hopeful",
    "Tired",
    "Energetic",
    "Peaceful",
]

SUGGESTED_TAGS = [
    "Gratitude",
    "Reflection",
    "Goals",
    "Anxiety",
    "Happiness",
    "Work",
    "Relationships",
    "Health",
    "Personal Growth",
    "Challenges",
]

GOALS_OVERVIEW_LIMIT = 5
RECENT_PER_KIND_LIMIT = 3
ACTIVITY_FEED_LIMIT = 10
RECENT_MOOD_LIMIT = 7
DESCRIPTION_MAX_CHARS = 100

# Shown on the dashboard until real aggregation queries exist.
PLACEHOLDER_STREAK_DAYS = 7
PLACEHOLDER_ACTIVE_GOALS = 3

DEFAULT_DISPLAY_NAME = "Friend"

MOOD_BADGE_COLORS = {
    "great": "#22C55E",
    "good": "#3B82F6",
    "okay": "#EAB308",
    "low": "#F97316",
    "none": "#6B7280",
}
