"""Quiz data models — generated questions, responses and results."""

from __future__ import annotations

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, Field

from katakana_quiz.models import CharacterEntry


class QuizMode(str, Enum):
    """Which kind of quiz to generate."""

    name_conversion = "name-conversion"
    multiple_choice = "multiple-choice"
    matching = "matching"
    fill_blanks = "fill-blanks"
    progressive = "progressive"


class PromptDirection(str, Enum):
    glyph_to_romanization = "glyph-to-romanization"
    romanization_to_glyph = "romanization-to-glyph"
    name_to_glyph = "name-to-glyph"


class SessionState(str, Enum):
    not_started = "not-started"
    active = "active"
    completed = "completed"


class MatchSide(str, Enum):
    katakana = "katakana"
    romanji = "romanji"


class MatchStatus(str, Enum):
    pending = "pending"  # Waiting for a selection on the other side
    matched = "matched"
    mismatched = "mismatched"
    ignored = "ignored"  # Already matched or cooling down


class ChoiceQuestion(BaseModel):
    """Pick-one question (multiple-choice, name-conversion, progressive)."""

    kind: Literal["multiple-choice", "name-conversion", "progressive"]
    index: int = 0
    prompt: str
    explanation: str = ""
    answer: str
    options: list[str]
    direction: PromptDirection = PromptDirection.glyph_to_romanization
    glyph: str | None = None  # Source character, when there is one
    level: int | None = None  # Progressive tier


class FillBlanksQuestion(BaseModel):
    """A word with blanked characters to be filled in order."""

    kind: Literal["fill-blanks"] = "fill-blanks"
    index: int = 0
    prompt: str
    explanation: str = ""
    word: str
    blanked_word: str
    blanks: list[int]
    hint: str = ""
    answer: list[str]
    options: list[str]


class MatchingQuestion(BaseModel):
    """One aggregate round pairing katakana with their romanization."""

    kind: Literal["matching"] = "matching"
    index: int = 0
    prompt: str
    explanation: str = ""
    characters: list[CharacterEntry]
    romanizations: list[str]  # Right-hand column, shuffled
    matches: dict[str, str] = Field(default_factory=dict)  # glyph -> romanization
    completed: bool = False


Question = Union[ChoiceQuestion, FillBlanksQuestion, MatchingQuestion]


class QuestionResponse(BaseModel):
    """A learner's recorded answer to one question."""

    question_index: int
    kind: str
    submitted: str | list[str] | dict[str, str] | None = None
    correct: bool


class AnswerFeedback(BaseModel):
    correct: bool
    explanation: str = ""
    correct_answer: str | list[str] | None = None


class MatchOutcome(BaseModel):
    status: MatchStatus
    glyph: str | None = None
    romanization: str | None = None
    completed: bool = False
    retry_after_ms: int = 0


class QuizResult(BaseModel):
    """Summary of a completed session."""

    mode: QuizMode
    score: int
    total_questions: int
    accuracy_percent: int
    elapsed_seconds: int
