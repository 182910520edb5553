"""Quiz engine — question generation for every quiz mode."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from katakana_quiz.bank import QuestionBank
from katakana_quiz.difficulty import select_tier
from katakana_quiz.errors import InvalidModeError
from katakana_quiz.models import CharacterEntry, WordEntry
from katakana_quiz.quiz_models import (
    ChoiceQuestion,
    FillBlanksQuestion,
    MatchingQuestion,
    PromptDirection,
    Question,
    QuizMode,
)
from katakana_quiz.random_source import RandomSource

logger = logging.getLogger(__name__)

# Question counts used when the caller does not ask for a specific number
DEFAULT_COUNTS = {
    QuizMode.name_conversion: 10,
    QuizMode.multiple_choice: 15,
    QuizMode.fill_blanks: 8,
}

DISTRACTOR_COUNT = 3
FILL_BLANK_DISTRACTORS = 6
MATCHING_SIZE = 8
BLANK = "_"


def parse_mode(mode: QuizMode | str) -> QuizMode:
    if isinstance(mode, QuizMode):
        return mode
    try:
        return QuizMode(mode)
    except ValueError:
        raise InvalidModeError(f"Unknown quiz mode: {mode!r}") from None


class QuestionGenerator:
    """Builds self-contained question sequences from a question bank."""

    def __init__(
        self,
        bank: QuestionBank | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.bank = bank or QuestionBank()
        self.rng = rng or RandomSource()

    def generate(
        self,
        mode: QuizMode | str,
        count: int | None = None,
        mastery: int = 0,
    ) -> list[Question]:
        """Generate the questions for one quiz.

        ``count`` is ignored for matching (always one aggregate question)
        and for progressive, where the difficulty tier picked from
        ``mastery`` decides. Asking for more questions than the bank holds
        returns a shorter list.
        """
        mode = parse_mode(mode)
        if count is None:
            count = DEFAULT_COUNTS.get(mode, 0)

        if mode == QuizMode.name_conversion:
            questions = self._name_conversion(count)
        elif mode == QuizMode.multiple_choice:
            questions = self._multiple_choice(count)
        elif mode == QuizMode.matching:
            questions = [self.build_matching()]
        elif mode == QuizMode.fill_blanks:
            words = self.rng.sample(self.bank.list_words(), count)
            questions = [self.build_fill_blanks(w) for w in words]
        else:
            questions = self._progressive(mastery)

        for i, q in enumerate(questions):
            q.index = i

        logger.info("Generated %d %s question(s)", len(questions), mode.value)
        return questions

    # --- Option pools ---

    def choice_options(self, correct: str, pool: Sequence[str]) -> list[str]:
        """Correct answer plus up to three distinct distractors, shuffled."""
        others = [a for a in dict.fromkeys(pool) if a != correct]
        distractors = self.rng.sample(others, DISTRACTOR_COUNT)
        return self.rng.shuffled([correct, *distractors])

    def _romanizations(self) -> list[str]:
        return [c.romanization for c in self.bank.list_characters()]

    def _glyphs(self) -> list[str]:
        return [c.glyph for c in self.bank.list_characters()]

    # --- Per-mode builders ---

    def _name_conversion(self, count: int) -> list[Question]:
        names = self.bank.list_names()
        pool = [n.katakana for n in names]
        return [
            ChoiceQuestion(
                kind="name-conversion",
                prompt=f'Convert "{n.english}" to Katakana:',
                answer=n.katakana,
                options=self.choice_options(n.katakana, pool),
                direction=PromptDirection.name_to_glyph,
                explanation=f"{n.english} → {n.katakana} ({n.romanization})",
            )
            for n in self.rng.sample(names, count)
        ]

    def _multiple_choice(self, count: int) -> list[Question]:
        chars = self.rng.sample(self.bank.list_characters(), count)
        questions: list[Question] = []
        for char in chars:
            if self.rng.chance(0.5):
                questions.append(self.glyph_to_romanization(char, "multiple-choice"))
            else:
                questions.append(
                    ChoiceQuestion(
                        kind="multiple-choice",
                        prompt=f'What is the katakana for "{char.romanization}"?',
                        answer=char.glyph,
                        options=self.choice_options(char.glyph, self._glyphs()),
                        direction=PromptDirection.romanization_to_glyph,
                        glyph=char.glyph,
                        explanation=f"{char.romanization} → {char.glyph}",
                    )
                )
        return questions

    def glyph_to_romanization(
        self,
        char: CharacterEntry,
        kind: str,
        level: int | None = None,
    ) -> ChoiceQuestion:
        return ChoiceQuestion(
            kind=kind,
            prompt=f'What is the romanji for "{char.glyph}"?',
            answer=char.romanization,
            options=self.choice_options(char.romanization, self._romanizations()),
            direction=PromptDirection.glyph_to_romanization,
            glyph=char.glyph,
            level=level,
            explanation=f"{char.glyph} → {char.romanization}",
        )

    def _progressive(self, mastery: int) -> list[Question]:
        tier = select_tier(mastery)
        eligible = [
            c for c in self.bank.list_characters() if c.category in tier.categories
        ]
        logger.debug(
            "Progressive tier %d (%s): %d eligible characters",
            tier.level,
            tier.name,
            len(eligible),
        )
        return [
            self.glyph_to_romanization(char, "progressive", level=tier.level)
            for char in self.rng.sample(eligible, tier.question_count)
        ]

    def build_fill_blanks(self, entry: WordEntry) -> FillBlanksQuestion:
        chars = list(entry.word)
        blanks = sorted(entry.blanks)
        blanked = "".join(BLANK if i in blanks else ch for i, ch in enumerate(chars))
        missing = [chars[i] for i in blanks]

        others = [g for g in dict.fromkeys(self._glyphs()) if g not in missing]
        distractors = self.rng.sample(others, FILL_BLANK_DISTRACTORS)

        return FillBlanksQuestion(
            prompt=f"Complete the word: {blanked}",
            word=entry.word,
            blanked_word=blanked,
            blanks=blanks,
            hint=f"Meaning: {entry.meaning}",
            answer=missing,
            options=self.rng.shuffled([*missing, *distractors]),
            explanation=f"{entry.word} ({entry.romanization}) means {entry.meaning}",
        )

    def build_matching(self) -> MatchingQuestion:
        chars = self.rng.sample(self.bank.list_characters(), MATCHING_SIZE)
        left = [c.romanization for c in chars]
        right = self.rng.shuffled(left)
        # The right column must not line up with the left one
        if len(set(left)) > 1 and right == left:
            right = right[1:] + right[:1]

        return MatchingQuestion(
            prompt="Match the katakana characters with their romanji:",
            characters=chars,
            romanizations=right,
            explanation=", ".join(f"{c.glyph} → {c.romanization}" for c in chars),
        )
