from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from dashboard.constants import MAX_MOOD_SCORE, MIN_MOOD_SCORE
from dashboard.data import repositories


@dataclass
class Notice:
    level: str
    title: str
    description: str = ""

    @property
    def is_error(self):
        return self.level == "error"


def toggle_label(selected, label):
    if label in selected:
        return [item for item in selected if item != label]
    return [*selected, label]


@dataclass
class MoodForm:
    mood_score: int | None = None
    emotions: list[str] = field(default_factory=list)
    notes: str = ""
    is_submitting: bool = False

    def select_mood(self, score):
        score = int(score)
        if not MIN_MOOD_SCORE <= score <= MAX_MOOD_SCORE:
            raise ValueError(f"Mood score must be between {MIN_MOOD_SCORE} and {MAX_MOOD_SCORE}")
        self.mood_score = score

    def toggle_emotion(self, emotion):
        self.emotions = toggle_label(self.emotions, emotion)

    @property
    def can_submit(self):
        return self.mood_score is not None and not self.is_submitting

    def reset(self):
        self.mood_score = None
        self.emotions = []
        self.notes = ""

    def submit(self, client, user, on_logged=None):
        if self.is_submitting:
            return None
        if user is None or not self.mood_score:
            return Notice("error", "Please select a mood")

        self.is_submitting = True
        try:
            result = repositories.insert_mood_entry(
                client,
                user.id,
                self.mood_score,
                self.emotions,
                self.notes.strip() or None,
            )
        finally:
            self.is_submitting = False
        if result.error:
            return Notice("error", "Failed to log mood", "Please try again.")

        self.reset()
        if on_logged is not None:
            on_logged()
        return Notice("success", "Mood logged successfully!", "Your mood has been recorded.")


@dataclass
class JournalForm:
    title: str = ""
    content: str = ""
    tags: list[str] = field(default_factory=list)
    custom_tag: str = ""
    is_submitting: bool = False

    def toggle_tag(self, tag):
        self.tags = toggle_label(self.tags, tag)

    def add_custom_tag(self):
        tag = self.custom_tag.strip()
        if tag and tag not in self.tags:
            self.tags = [*self.tags, tag]
            self.custom_tag = ""

    def remove_tag(self, tag):
        self.tags = [item for item in self.tags if item != tag]

    @property
    def can_submit(self):
        return bool(self.title.strip() and self.content.strip()) and not self.is_submitting

    def reset(self):
        self.title = ""
        self.content = ""
        self.tags = []
        self.custom_tag = ""

    def submit(self, client, user):
        if self.is_submitting:
            return None
        if user is None or not self.title.strip() or not self.content.strip():
            return Notice("error", "Please fill in all required fields")

        self.is_submitting = True
        try:
            result = repositories.insert_journal_entry(
                client,
                user.id,
                self.title.strip(),
                self.content.strip(),
                self.tags or None,
            )
        finally:
            self.is_submitting = False
        if result.error:
            return Notice("error", "Failed to save entry", "Please try again.")

        self.reset()
        return Notice("success", "Journal entry saved!", "Your thoughts have been recorded.")


@dataclass
class GoalForm:
    title: str = ""
    description: str = ""
    target_date: date | None = None
    is_open: bool = False
    is_submitting: bool = False

    @staticmethod
    def min_target_date(today=None):
        # Bound for the date picker only; the table service accepts any date.
        return today or date.today()

    @property
    def can_submit(self):
        return bool(self.title.strip()) and not self.is_submitting

    def reset(self):
        self.title = ""
        self.description = ""
        self.target_date = None

    def submit(self, client, user, on_created=None):
        if self.is_submitting:
            return None
        if user is None or not self.title.strip():
            return Notice("error", "Please enter a goal title")

        self.is_submitting = True
        try:
            result = repositories.insert_goal(
                client,
                user.id,
                self.title.strip(),
                self.description.strip() or None,
                self.target_date,
            )
        finally:
            self.is_submitting = False
        if result.error:
            return Notice("error", "Failed to create goal", "Please try again.")

        self.reset()
        self.is_open = False
        if on_created is not None:
            on_created()
        return Notice("success", "Goal created successfully!", "Your new goal has been added.")
