"""Shared fixtures for the katakana quiz tests."""

import os
import tempfile

import pytest

# Keep the API's progress file out of the source tree
os.environ.setdefault("PROGRESS_DIR", tempfile.mkdtemp(prefix="katakana-progress-"))

from katakana_quiz.bank import QuestionBank  # noqa: E402
from katakana_quiz.quiz_engine import QuestionGenerator  # noqa: E402
from katakana_quiz.random_source import RandomSource  # noqa: E402


class ScriptedRandom(RandomSource):
    """Deterministic stand-in: takes the first k items, reverses on shuffle."""

    def shuffled(self, items):
        return list(reversed(list(items)))

    def sample(self, items, k):
        return list(items)[: max(0, k)]

    def chance(self, p=0.5):
        return True


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def bank():
    return QuestionBank()


@pytest.fixture
def generator(bank):
    return QuestionGenerator(bank, RandomSource(seed=1234))


@pytest.fixture
def scripted_generator(bank):
    return QuestionGenerator(bank, ScriptedRandom())


@pytest.fixture
def clock():
    return FakeClock()
