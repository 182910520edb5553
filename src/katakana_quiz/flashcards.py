"""Flashcard deck over the character table."""

from __future__ import annotations

import logging
from enum import Enum

from katakana_quiz.bank import QuestionBank
from katakana_quiz.models import CharacterEntry
from katakana_quiz.progress import ProgressTracker
from katakana_quiz.random_source import RandomSource
from katakana_quiz.session import accuracy_percent

logger = logging.getLogger(__name__)


class CardMode(str, Enum):
    katakana_to_romanji = "katakana-to-romanji"
    romanji_to_katakana = "romanji-to-katakana"
    mixed = "mixed"


class CardFilter(str, Enum):
    all = "all"
    known = "known"
    unknown = "unknown"
    need_study = "need-study"
    not_studied = "not-studied"


class FlashcardDeck:
    """A shuffled deck of character cards with known/need-study tracking.

    Card status lives in the tracker's progress state so it survives
    restarts; marking a card known also marks the character learned.
    """

    def __init__(
        self,
        bank: QuestionBank | None = None,
        tracker: ProgressTracker | None = None,
        rng: RandomSource | None = None,
        mode: CardMode | str = CardMode.katakana_to_romanji,
    ) -> None:
        self.bank = bank or QuestionBank()
        self.tracker = tracker or ProgressTracker()
        self.rng = rng or RandomSource()
        self.mode = CardMode(mode)
        self.index = 0
        self.flipped = False
        self.cards: list[CharacterEntry] = []
        self.shuffle()

    @property
    def _progress(self):
        return self.tracker.state

    def shuffle(self) -> None:
        """Reshuffle the full deck, need-study cards first."""
        need_study = set(self._progress.need_study_cards)
        cards = self.rng.shuffled(self.bank.list_characters())
        if need_study:
            first = [c for c in cards if c.glyph in need_study]
            rest = [c for c in cards if c.glyph not in need_study]
            cards = self.rng.shuffled(first) + self.rng.shuffled(rest)
        self.cards = cards
        self.index = 0
        self.flipped = False

    def filter(self, criteria: CardFilter | str) -> list[CharacterEntry]:
        criteria = CardFilter(criteria)
        state = self._progress
        cards = self.bank.list_characters()
        if criteria == CardFilter.known:
            cards = [c for c in cards if c.glyph in state.known_cards]
        elif criteria == CardFilter.unknown:
            cards = [c for c in cards if c.glyph not in state.known_cards]
        elif criteria == CardFilter.need_study:
            cards = [c for c in cards if c.glyph in state.need_study_cards]
        elif criteria == CardFilter.not_studied:
            cards = [c for c in cards if c.glyph not in state.studied_cards]
        self.cards = self.rng.shuffled(cards)
        self.index = 0
        self.flipped = False
        return self.cards

    def current(self) -> CharacterEntry | None:
        if not self.cards:
            return None
        return self.cards[self.index]

    def card_faces(self) -> tuple[str, str]:
        """(front, back) text of the current card for the active mode."""
        card = self.current()
        if card is None:
            return "", ""
        forward = (card.glyph, card.romanization)
        if self.mode == CardMode.romanji_to_katakana:
            return forward[::-1]
        if self.mode == CardMode.mixed and not self.rng.chance(0.5):
            return forward[::-1]
        return forward

    def flip(self) -> bool:
        self.flipped = not self.flipped
        card = self.current()
        if self.flipped and card and card.glyph not in self._progress.studied_cards:
            self._progress.studied_cards.append(card.glyph)
            self.tracker.save()
        return self.flipped

    def next(self) -> CharacterEntry | None:
        if self.cards:
            self.index = (self.index + 1) % len(self.cards)
        self.flipped = False
        return self.current()

    def previous(self) -> CharacterEntry | None:
        if self.cards:
            self.index = (self.index - 1) % len(self.cards)
        self.flipped = False
        return self.current()

    def mark_known(self) -> CharacterEntry | None:
        card = self.current()
        if card is None:
            return None
        state = self._progress
        _add(state.known_cards, card.glyph)
        _add(state.studied_cards, card.glyph)
        _discard(state.need_study_cards, card.glyph)
        if not self.tracker.mark_learned(card.glyph, source="flashcards"):
            self.tracker.save()
        logger.debug("Marked %s as known", card.glyph)
        return self.next()

    def mark_for_study(self) -> CharacterEntry | None:
        card = self.current()
        if card is None:
            return None
        state = self._progress
        _add(state.need_study_cards, card.glyph)
        _add(state.studied_cards, card.glyph)
        _discard(state.known_cards, card.glyph)
        self.tracker.log_activity(f"Marked {card.glyph} for more study")
        return self.next()

    def stats(self) -> dict[str, int]:
        state = self._progress
        total = len(self.bank.list_characters())
        return {
            "total": total,
            "studied": len(state.studied_cards),
            "known": len(state.known_cards),
            "need_study": len(state.need_study_cards),
            "study_progress": accuracy_percent(len(state.studied_cards), total),
            "known_progress": accuracy_percent(len(state.known_cards), total),
        }

    def reset(self) -> None:
        state = self._progress
        state.studied_cards.clear()
        state.known_cards.clear()
        state.need_study_cards.clear()
        self.tracker.save()


def _add(items: list[str], value: str) -> None:
    if value not in items:
        items.append(value)


def _discard(items: list[str], value: str) -> None:
    if value in items:
        items.remove(value)
