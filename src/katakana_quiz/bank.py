"""Question bank — read-only access to the katakana vocabulary tables."""

from __future__ import annotations

from collections.abc import Sequence

from katakana_quiz.katakana_data import CATEGORIES, CHARACTERS, NAMES, WORDS
from katakana_quiz.models import CategoryInfo, CharacterEntry, NameEntry, WordEntry


class QuestionBank:
    """In-memory vocabulary tables queried by the quiz engine.

    Defaults to the built-in tables; pass custom sequences to quiz over a
    different (or reduced) vocabulary.
    """

    def __init__(
        self,
        characters: Sequence[CharacterEntry] = CHARACTERS,
        names: Sequence[NameEntry] = NAMES,
        words: Sequence[WordEntry] = WORDS,
        categories: Sequence[CategoryInfo] = CATEGORIES,
    ) -> None:
        self._characters = tuple(characters)
        self._names = tuple(names)
        self._words = tuple(words)
        self._categories = tuple(categories)
        self._by_glyph = {c.glyph: c for c in self._characters}

    def list_characters(self) -> list[CharacterEntry]:
        return list(self._characters)

    def list_by_category(self, tag: str) -> list[CharacterEntry]:
        return [c for c in self._characters if c.category == tag]

    def list_names(self) -> list[NameEntry]:
        return list(self._names)

    def list_words(self) -> list[WordEntry]:
        return list(self._words)

    def list_categories(self) -> list[CategoryInfo]:
        return list(self._categories)

    def get_character(self, glyph: str) -> CharacterEntry | None:
        return self._by_glyph.get(glyph)

    def search(self, query: str = "", category: str | None = None) -> list[CharacterEntry]:
        """Filter the reference table by glyph/romanization substring and category.

        Matching is case-insensitive; an empty query matches everything.
        Results keep table order.
        """
        needle = query.strip().lower()
        results = []
        for c in self._characters:
            if category and c.category != category:
                continue
            if needle and needle not in c.romanization and needle not in c.glyph:
                continue
            results.append(c)
        return results
