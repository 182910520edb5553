"""Quiz session runner — walks a generated quiz and keeps score.

A session moves NotStarted -> Active -> Completed. Each question is answered
once with ``submit`` and left with ``advance``; advancing past the last
question finalises the result and notifies listeners. ``abandon`` drops the
run from any state without recording anything.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable, Iterable
from typing import Any, Protocol

from katakana_quiz.errors import (
    InvalidArgumentError,
    InvalidModeError,
    NoActiveSessionError,
    QuestionAlreadyAnsweredError,
    QuestionIndexExhaustedError,
    QuestionNotAnsweredError,
    SessionAlreadyActiveError,
    SessionNotCompleteError,
)
from katakana_quiz.quiz_engine import QuestionGenerator, parse_mode
from katakana_quiz.quiz_models import (
    AnswerFeedback,
    ChoiceQuestion,
    FillBlanksQuestion,
    MatchingQuestion,
    MatchOutcome,
    MatchSide,
    MatchStatus,
    Question,
    QuestionResponse,
    QuizMode,
    QuizResult,
    SessionState,
)

logger = logging.getLogger(__name__)

# How long a mismatched pair stays unselectable
MATCH_COOLDOWN_MS = 1000


class SessionListener(Protocol):
    def on_question_answered(
        self, session: QuizSession, response: QuestionResponse
    ) -> None: ...

    def on_session_completed(self, session: QuizSession, result: QuizResult) -> None: ...


def wall_clock_ms() -> float:
    return time.time() * 1000


def accuracy_percent(score: int, total: int) -> int:
    """Percentage of correct answers, rounded half up; 0 for an empty quiz."""
    if total <= 0:
        return 0
    return (score * 200 + total) // (total * 2)


def format_duration(seconds: int) -> str:
    if seconds < 60:
        return f"{seconds}s"
    if seconds < 3600:
        return f"{seconds // 60}m {seconds % 60}s"
    return f"{seconds // 3600}h {(seconds % 3600) // 60}m"


class QuizSession:
    """One learner's run through a quiz. Single-writer, no locking."""

    def __init__(
        self,
        generator: QuestionGenerator | None = None,
        clock: Callable[[], float] = wall_clock_ms,
        mastery_provider: Callable[[], int] | None = None,
        listeners: Iterable[SessionListener] = (),
        session_id: str | None = None,
        match_cooldown_ms: int = MATCH_COOLDOWN_MS,
    ) -> None:
        self.id = session_id or uuid.uuid4().hex[:12]
        self.generator = generator or QuestionGenerator()
        self.clock = clock
        self.mastery_provider = mastery_provider
        self.listeners: list[SessionListener] = list(listeners)
        self.match_cooldown_ms = match_cooldown_ms

        self.mode: QuizMode | None = None
        self.requested_count: int | None = None
        self._reset()

    def _reset(self) -> None:
        self.state = SessionState.not_started
        self.questions: list[Question] = []
        self.cursor = 0
        self.score = 0
        self.started_at: float | None = None
        self.responses: list[QuestionResponse] = []
        self.result: QuizResult | None = None
        self._pending: dict[MatchSide, str] = {}
        self._cooldowns: dict[tuple[MatchSide, str], float] = {}

    def add_listener(self, listener: SessionListener) -> None:
        self.listeners.append(listener)

    # --- Lifecycle ---

    def start(self, mode: QuizMode | str, count: int | None = None) -> list[Question]:
        if self.state == SessionState.active:
            raise SessionAlreadyActiveError(
                f"Session {self.id} is already running a {self.mode.value} quiz"
            )
        mode = parse_mode(mode)
        mastery = self.mastery_provider() if self.mastery_provider else 0
        questions = self.generator.generate(mode, count, mastery)

        self._reset()
        self.mode = mode
        self.requested_count = count
        self.questions = questions
        self.state = SessionState.active
        self.started_at = self.clock()
        logger.info(
            "Session %s started %s quiz with %d question(s)",
            self.id,
            mode.value,
            len(questions),
        )

        if not questions:
            self._complete()
        return questions

    def retake(self) -> list[Question]:
        """Start again with the previous mode and count."""
        if self.mode is None:
            raise NoActiveSessionError("No quiz has been started yet")
        mode, count = self.mode, self.requested_count
        self.abandon()
        return self.start(mode, count)

    def abandon(self) -> None:
        if self.state == SessionState.active:
            logger.info("Session %s abandoned at question %d", self.id, self.cursor)
        self._reset()

    # --- Progress ---

    def current_question(self) -> Question | None:
        if self.state == SessionState.active and self.cursor < len(self.questions):
            return self.questions[self.cursor]
        return None

    def progress(self) -> tuple[int, int]:
        """(1-based position, total) for display."""
        total = len(self.questions)
        return min(self.cursor + 1, total), total

    def is_answered(self) -> bool:
        return bool(self.responses) and self.responses[-1].question_index == self.cursor

    def _require_question(self) -> Question:
        if self.state == SessionState.not_started:
            raise NoActiveSessionError("No active quiz session")
        if self.cursor >= len(self.questions):
            raise QuestionIndexExhaustedError(
                f"All {len(self.questions)} question(s) have been answered"
            )
        return self.questions[self.cursor]

    # --- Answering ---

    def submit(self, answer: Any = None) -> AnswerFeedback:
        """Record an answer to the current question.

        Choice questions take a string, fill-blanks an ordered list of
        characters (a string is split per character). Matching ignores
        ``answer`` and reports whether every pair was matched.
        """
        question = self._require_question()
        if self.is_answered():
            raise QuestionAlreadyAnsweredError(
                f"Question {self.cursor} has already been answered"
            )

        if isinstance(question, ChoiceQuestion):
            submitted = answer if isinstance(answer, str) else None
            correct = submitted == question.answer
        elif isinstance(question, FillBlanksQuestion):
            # Anything but a string or a sequence of characters scores as wrong
            if isinstance(answer, (str, list, tuple)):
                submitted = [str(ch) for ch in answer]
            else:
                submitted = []
            correct = submitted == question.answer
        else:
            submitted = dict(question.matches)
            correct = question.completed

        response = QuestionResponse(
            question_index=self.cursor,
            kind=question.kind,
            submitted=submitted,
            correct=correct,
        )
        self.responses.append(response)
        if correct:
            self.score += 1
        logger.debug(
            "Session %s question %d answered %s",
            self.id,
            self.cursor,
            "correctly" if correct else "incorrectly",
        )

        for listener in self.listeners:
            listener.on_question_answered(self, response)

        correct_answer = None if isinstance(question, MatchingQuestion) else question.answer
        return AnswerFeedback(
            correct=correct,
            explanation=question.explanation,
            correct_answer=correct_answer,
        )

    def advance(self) -> Question | None:
        """Move past an answered question; returns the next one, if any."""
        self._require_question()
        if not self.is_answered():
            raise QuestionNotAnsweredError(
                f"Question {self.cursor} must be answered before moving on"
            )
        self.cursor += 1
        self._pending.clear()
        if self.cursor >= len(self.questions):
            self._complete()
            return None
        return self.questions[self.cursor]

    def _complete(self) -> None:
        now = self.clock()
        elapsed = int((now - (self.started_at or now)) // 1000)
        total = len(self.questions)
        self.result = QuizResult(
            mode=self.mode,
            score=self.score,
            total_questions=total,
            accuracy_percent=accuracy_percent(self.score, total),
            elapsed_seconds=max(0, elapsed),
        )
        self.state = SessionState.completed
        logger.info(
            "Session %s completed: %d/%d (%d%%) in %s",
            self.id,
            self.score,
            total,
            self.result.accuracy_percent,
            format_duration(self.result.elapsed_seconds),
        )
        for listener in self.listeners:
            listener.on_session_completed(self, self.result)

    def get_result(self) -> QuizResult:
        if self.state == SessionState.not_started:
            raise NoActiveSessionError("No active quiz session")
        if self.state != SessionState.completed or self.result is None:
            raise SessionNotCompleteError(f"Session {self.id} has not completed")
        return self.result

    # --- Matching ---

    def propose_match(self, side: MatchSide | str, value: str) -> MatchOutcome:
        """Select one item of the matching board.

        At most one item is pending per side; selecting the pending item
        again deselects it. Once both sides hold a selection the pair is
        checked: a correct pair is matched for good, a wrong one is released
        and cools down for ``match_cooldown_ms``. The board is frozen once the
        question has been submitted.
        """
        question = self._require_question()
        if not isinstance(question, MatchingQuestion):
            raise InvalidModeError(f"Question {self.cursor} is not a matching question")
        try:
            side = MatchSide(side)
        except ValueError:
            raise InvalidArgumentError(f"Unknown matching side: {side!r}") from None
        now = self.clock()

        if (
            question.completed
            or self.is_answered()
            or not self._on_board(question, side, value)
            or self._is_matched(question, side, value)
            or self._cooldowns.get((side, value), 0) > now
        ):
            return MatchOutcome(status=MatchStatus.ignored, completed=question.completed)

        if self._pending.get(side) == value:
            del self._pending[side]
            return self._pending_outcome()

        self._pending[side] = value
        if len(self._pending) < 2:
            return self._pending_outcome()

        glyph = self._pending.pop(MatchSide.katakana)
        romanization = self._pending.pop(MatchSide.romanji)
        char = next(c for c in question.characters if c.glyph == glyph)

        if char.romanization == romanization:
            question.matches[glyph] = romanization
            question.completed = len(question.matches) == len(question.characters)
            return MatchOutcome(
                status=MatchStatus.matched,
                glyph=glyph,
                romanization=romanization,
                completed=question.completed,
            )

        until = now + self.match_cooldown_ms
        self._cooldowns[(MatchSide.katakana, glyph)] = until
        self._cooldowns[(MatchSide.romanji, romanization)] = until
        return MatchOutcome(
            status=MatchStatus.mismatched,
            glyph=glyph,
            romanization=romanization,
            retry_after_ms=self.match_cooldown_ms,
        )

    def _pending_outcome(self) -> MatchOutcome:
        return MatchOutcome(
            status=MatchStatus.pending,
            glyph=self._pending.get(MatchSide.katakana),
            romanization=self._pending.get(MatchSide.romanji),
        )

    @staticmethod
    def _on_board(question: MatchingQuestion, side: MatchSide, value: str) -> bool:
        if side == MatchSide.katakana:
            return any(c.glyph == value for c in question.characters)
        return value in question.romanizations

    @staticmethod
    def _is_matched(question: MatchingQuestion, side: MatchSide, value: str) -> bool:
        if side == MatchSide.katakana:
            return value in question.matches
        return value in question.matches.values()

    # --- Serialization ---

    def snapshot(self) -> dict[str, Any]:
        """Session state as plain data, for the HTTP layer."""
        position, total = self.progress()
        current = self.current_question()
        return {
            "id": self.id,
            "state": self.state.value,
            "mode": self.mode.value if self.mode else None,
            "position": position,
            "total": total,
            "score": self.score,
            "answered": self.is_answered(),
            "question": current.model_dump() if current else None,
            "result": self.result.model_dump() if self.result else None,
        }
