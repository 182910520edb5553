"""Vocabulary records backing the question bank."""

from pydantic import BaseModel, ConfigDict

Stroke = tuple[int, int, int, int]


class CharacterEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    glyph: str
    romanization: str
    category: str
    strokes: tuple[Stroke, ...] = ()


class NameEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    english: str
    katakana: str
    romanization: str


class WordEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str
    romanization: str
    meaning: str
    blanks: tuple[int, ...]


class CategoryInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    tag: str
    name: str
    description: str = ""


class DifficultyTier(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: int
    name: str
    categories: tuple[str, ...]
    question_count: int
