"""Tests for learner progress storage and tracking."""

from datetime import date

import pytest

from katakana_quiz.bank import QuestionBank
from katakana_quiz.progress import (
    MAX_ACTIVITIES,
    ProgressState,
    ProgressStore,
    ProgressTracker,
)
from katakana_quiz.quiz_engine import QuestionGenerator
from katakana_quiz.random_source import RandomSource
from katakana_quiz.session import QuizSession


@pytest.fixture
def store(tmp_path):
    return ProgressStore(tmp_path / "progress")


@pytest.fixture
def tracker(store):
    return ProgressTracker(store)


class TestProgressState:
    def test_mark_learned_once(self):
        state = ProgressState()
        assert state.mark_learned("ア")
        assert not state.mark_learned("ア")
        assert state.mastered_count == 1
        assert state.unmark_learned("ア")
        assert not state.unmark_learned("ア")
        assert state.mastered_count == 0

    def test_bookmarks(self):
        state = ProgressState()
        state.set_bookmark("カ", True)
        state.set_bookmark("カ", True)
        assert state.bookmarked == ["カ"]
        state.set_bookmark("カ", False)
        assert state.bookmarked == []

    def test_streak(self):
        state = ProgressState()
        assert state.register_visit(date(2024, 3, 1)) == 0
        assert state.register_visit(date(2024, 3, 1)) == 0
        assert state.register_visit(date(2024, 3, 2)) == 1
        assert state.register_visit(date(2024, 3, 3)) == 2
        assert state.register_visit(date(2024, 3, 3)) == 2
        assert state.register_visit(date(2024, 3, 7)) == 1
        assert state.last_study_date == date(2024, 3, 7)

    def test_activity_log_is_capped(self):
        state = ProgressState()
        for i in range(MAX_ACTIVITIES + 10):
            state.log_activity(f"event {i}")
        assert len(state.activities) == MAX_ACTIVITIES
        assert state.activities[0].text == "event 10"
        assert state.activities[-1].text == f"event {MAX_ACTIVITIES + 9}"

    def test_averages(self):
        state = ProgressState(quiz_scores=[100, 50], learned=["ア", "イ", "ウ"])
        assert state.average_quiz_score == 75
        assert state.overall_progress == 7
        assert ProgressState().average_quiz_score == 0

    def test_summary(self):
        state = ProgressState(practice_seconds=185)
        state.log_activity("first")
        state.log_activity("second")
        summary = state.summary()
        assert summary["practice_minutes"] == 3
        assert summary["total_characters"] == 46
        assert summary["recent_activity"] == ["second", "first"]


class TestProgressStore:
    def test_missing_file_gives_fresh_state(self, store):
        assert store.load("nobody") == ProgressState()

    def test_round_trip(self, store):
        state = ProgressState(learned=["ア", "ン"], quiz_scores=[80])
        state.log_activity("Learned ア")
        store.save(state, "alice")
        loaded = store.load("alice")
        assert loaded.learned == ["ア", "ン"]
        assert loaded.quiz_scores == [80]
        assert loaded.activities[0].text == "Learned ア"

    def test_corrupt_file_is_discarded(self, store):
        (store.directory / "broken.json").write_text("{not json")
        assert store.load("broken") == ProgressState()

    def test_reset(self, store):
        store.save(ProgressState(learned=["ア"]), "bob")
        store.reset("bob")
        assert store.load("bob").learned == []
        store.reset("bob")


class TestProgressTracker:
    def test_mark_learned_persists(self, store, tracker):
        assert tracker.mark_learned("キ", source="flashcards")
        assert tracker.state.activities[-1].text == "Learned キ (flashcards)"
        assert ProgressTracker(store).mastered_count() == 1

    def test_reset(self, store, tracker):
        tracker.mark_learned("キ")
        tracker.reset()
        assert tracker.mastered_count() == 0
        assert ProgressTracker(store).mastered_count() == 0

    def test_without_store(self):
        tracker = ProgressTracker()
        tracker.mark_learned("ア")
        tracker.save()
        assert tracker.mastered_count() == 1

    def test_records_completed_sessions(self, store, tracker, generator, clock):
        session = QuizSession(generator, clock=clock, listeners=[tracker])
        session.start("multiple-choice", 4)
        clock.advance(90_000)
        for _ in range(4):
            session.submit(session.current_question().answer)
            session.advance()

        assert tracker.state.quiz_scores == [100]
        assert tracker.state.practice_seconds == 90
        assert tracker.state.activities[-1].text == "Completed multiple-choice quiz: 100%"
        assert ProgressTracker(store).state.quiz_scores == [100]

    def test_empty_sessions_are_not_recorded(self, tracker, clock):
        gen = QuestionGenerator(QuestionBank(words=[]), RandomSource(seed=1))
        session = QuizSession(gen, clock=clock, listeners=[tracker])
        session.start("fill-blanks", 3)
        assert session.get_result().total_questions == 0
        assert tracker.state.quiz_scores == []
        assert tracker.state.activities == []

    def test_abandoned_sessions_are_not_recorded(self, tracker, generator, clock):
        session = QuizSession(generator, clock=clock, listeners=[tracker])
        session.start("multiple-choice", 4)
        session.abandon()
        assert tracker.state.quiz_scores == []

    def test_mastery_drives_progressive_tier(self, tracker, generator, clock):
        for char in generator.bank.list_characters()[:12]:
            tracker.mark_learned(char.glyph)
        session = QuizSession(
            generator, clock=clock, mastery_provider=tracker.mastered_count
        )
        questions = session.start("progressive")
        assert len(questions) == 8
        assert all(q.level == 2 for q in questions)
