"""Learner progress — learned characters, quiz history, streaks.

``ProgressTracker`` listens to quiz sessions and is the only place that
writes progress to disk; sessions themselves never touch storage.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import date, datetime, timedelta
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from katakana_quiz.katakana_data import CHARACTERS
from katakana_quiz.quiz_models import QuestionResponse, QuizResult
from katakana_quiz.session import QuizSession, accuracy_percent

logger = logging.getLogger(__name__)

# Default progress storage directory (override with PROGRESS_DIR env var)
PROGRESS_DIR = Path(
    os.environ.get("PROGRESS_DIR", Path(__file__).parent.parent.parent / "progress")
)

MAX_ACTIVITIES = 50


class Activity(BaseModel):
    text: str
    timestamp: datetime = Field(default_factory=datetime.now)


class ProgressState(BaseModel):
    """Everything the app remembers about one learner."""

    learned: list[str] = Field(default_factory=list)
    bookmarked: list[str] = Field(default_factory=list)
    studied_cards: list[str] = Field(default_factory=list)
    known_cards: list[str] = Field(default_factory=list)
    need_study_cards: list[str] = Field(default_factory=list)
    quiz_scores: list[int] = Field(default_factory=list)  # accuracy percentages
    practice_seconds: int = 0
    study_streak: int = 0
    last_study_date: date | None = None
    activities: list[Activity] = Field(default_factory=list)

    @property
    def mastered_count(self) -> int:
        return len(self.learned)

    @property
    def average_quiz_score(self) -> int:
        if not self.quiz_scores:
            return 0
        return accuracy_percent(sum(self.quiz_scores), len(self.quiz_scores) * 100)

    @property
    def overall_progress(self) -> int:
        return accuracy_percent(len(self.learned), len(CHARACTERS))

    def mark_learned(self, glyph: str) -> bool:
        if glyph in self.learned:
            return False
        self.learned.append(glyph)
        return True

    def unmark_learned(self, glyph: str) -> bool:
        if glyph not in self.learned:
            return False
        self.learned.remove(glyph)
        return True

    def set_bookmark(self, glyph: str, bookmarked: bool) -> None:
        if bookmarked and glyph not in self.bookmarked:
            self.bookmarked.append(glyph)
        elif not bookmarked and glyph in self.bookmarked:
            self.bookmarked.remove(glyph)

    def register_visit(self, today: date | None = None) -> int:
        """Update the daily study streak for a visit on ``today``."""
        today = today or date.today()
        if self.last_study_date == today:
            return self.study_streak
        if self.last_study_date == today - timedelta(days=1):
            self.study_streak += 1
        elif self.last_study_date is not None:
            self.study_streak = 1
        self.last_study_date = today
        return self.study_streak

    def log_activity(self, text: str) -> None:
        self.activities.append(Activity(text=text))
        if len(self.activities) > MAX_ACTIVITIES:
            del self.activities[: len(self.activities) - MAX_ACTIVITIES]

    def summary(self) -> dict:
        return {
            "mastered": self.mastered_count,
            "total_characters": len(CHARACTERS),
            "overall_progress": self.overall_progress,
            "average_quiz_score": self.average_quiz_score,
            "practice_minutes": self.practice_seconds // 60,
            "study_streak": self.study_streak,
            "bookmarked": list(self.bookmarked),
            "recent_activity": [a.text for a in reversed(self.activities[-10:])],
        }


class ProgressStore:
    """JSON file-based progress storage, one file per learner."""

    def __init__(self, directory: Path = PROGRESS_DIR) -> None:
        self.directory = directory
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, learner_id: str) -> Path:
        return self.directory / f"{learner_id}.json"

    def load(self, learner_id: str = "default") -> ProgressState:
        path = self._path(learner_id)
        if not path.exists():
            return ProgressState()
        try:
            return ProgressState.model_validate_json(path.read_text())
        except ValidationError as e:
            logger.warning("Discarding unreadable progress file %s: %s", path, e)
            return ProgressState()

    def save(self, state: ProgressState, learner_id: str = "default") -> ProgressState:
        path = self._path(learner_id)
        path.write_text(
            json.dumps(state.model_dump(mode="json"), indent=2, ensure_ascii=False)
        )
        return state

    def reset(self, learner_id: str = "default") -> None:
        path = self._path(learner_id)
        if path.exists():
            path.unlink()


class ProgressTracker:
    """Session listener that folds quiz results into a learner's progress."""

    def __init__(
        self,
        store: ProgressStore | None = None,
        learner_id: str = "default",
    ) -> None:
        self.store = store
        self.learner_id = learner_id
        self.state = store.load(learner_id) if store else ProgressState()

    def mastered_count(self) -> int:
        return self.state.mastered_count

    def save(self) -> None:
        if self.store:
            self.store.save(self.state, self.learner_id)

    def reset(self) -> None:
        self.state = ProgressState()
        if self.store:
            self.store.reset(self.learner_id)

    def register_visit(self, today: date | None = None) -> int:
        streak = self.state.register_visit(today)
        self.save()
        return streak

    def mark_learned(self, glyph: str, source: str = "") -> bool:
        added = self.state.mark_learned(glyph)
        if added:
            self.state.log_activity(f"Learned {glyph}{f' ({source})' if source else ''}")
            self.save()
        return added

    def unmark_learned(self, glyph: str) -> bool:
        removed = self.state.unmark_learned(glyph)
        if removed:
            self.save()
        return removed

    def set_bookmark(self, glyph: str, bookmarked: bool) -> None:
        self.state.set_bookmark(glyph, bookmarked)
        self.save()

    def log_activity(self, text: str) -> None:
        self.state.log_activity(text)
        self.save()

    # --- SessionListener ---

    def on_question_answered(
        self, session: QuizSession, response: QuestionResponse
    ) -> None:
        pass

    def on_session_completed(self, session: QuizSession, result: QuizResult) -> None:
        if result.total_questions == 0:
            return
        self.state.quiz_scores.append(result.accuracy_percent)
        self.state.practice_seconds += result.elapsed_seconds
        self.state.log_activity(
            f"Completed {result.mode.value} quiz: {result.accuracy_percent}%"
        )
        self.save()
