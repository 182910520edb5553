"""Tests for quiz models and question generation."""

import pytest

from katakana_quiz.bank import QuestionBank
from katakana_quiz.errors import InvalidModeError
from katakana_quiz.models import WordEntry
from katakana_quiz.quiz_engine import QuestionGenerator, parse_mode
from katakana_quiz.quiz_models import (
    ChoiceQuestion,
    FillBlanksQuestion,
    MatchingQuestion,
    PromptDirection,
    QuizMode,
)
from katakana_quiz.random_source import RandomSource

from conftest import ScriptedRandom

CHOICE_MODES = ["name-conversion", "multiple-choice", "progressive"]


def assert_valid_options(q: ChoiceQuestion):
    assert len(q.options) == len(set(q.options))
    assert q.options.count(q.answer) == 1
    assert len(q.options) == 4


# --- Model tests ---


class TestQuizModes:
    def test_parse_mode_from_string(self):
        assert parse_mode("fill-blanks") == QuizMode.fill_blanks
        assert parse_mode(QuizMode.matching) == QuizMode.matching

    def test_unknown_mode_raises(self, generator):
        with pytest.raises(InvalidModeError, match="Unknown quiz mode"):
            generator.generate("speed-round", 5)


# --- Choice questions ---


class TestChoiceQuestions:
    @pytest.mark.parametrize("mode", CHOICE_MODES)
    def test_options_contain_answer_once(self, mode):
        gen = QuestionGenerator(rng=RandomSource(seed=7))
        for _ in range(20):
            for q in gen.generate(mode, 10, mastery=45):
                assert_valid_options(q)

    def test_multiple_choice_length_and_uniqueness(self, generator):
        questions = generator.generate("multiple-choice", 10)
        assert len(questions) == 10
        glyphs = [q.glyph for q in questions]
        assert len(set(glyphs)) == 10
        assert [q.index for q in questions] == list(range(10))

    def test_multiple_choice_uses_both_directions(self, generator):
        questions = generator.generate("multiple-choice", 40)
        directions = {q.direction for q in questions}
        assert directions == {
            PromptDirection.glyph_to_romanization,
            PromptDirection.romanization_to_glyph,
        }
        for q in questions:
            char = generator.bank.get_character(q.glyph)
            if q.direction == PromptDirection.glyph_to_romanization:
                assert q.answer == char.romanization
            else:
                assert q.answer == char.glyph

    def test_default_counts(self, generator):
        assert len(generator.generate("multiple-choice")) == 15
        assert len(generator.generate("name-conversion")) == 10
        assert len(generator.generate("fill-blanks")) == 8

    def test_count_beyond_bank_is_truncated(self, generator):
        assert len(generator.generate("name-conversion", 50)) == 15
        assert len(generator.generate("multiple-choice", 100)) == 46

    def test_name_conversion_options_are_names(self, generator):
        transliterations = {n.katakana for n in generator.bank.list_names()}
        for q in generator.generate("name-conversion", 10):
            assert q.direction == PromptDirection.name_to_glyph
            assert set(q.options) <= transliterations
            assert q.answer in q.explanation

    def test_scripted_option_order(self, scripted_generator):
        q0, q1 = scripted_generator.generate("multiple-choice", 2)
        assert q0.prompt == 'What is the romanji for "ア"?'
        assert q0.answer == "a"
        assert q0.options == ["e", "u", "i", "a"]
        assert q1.options == ["e", "u", "a", "i"]
        assert q0.explanation == "ア → a"

    def test_scripted_name_conversion(self, scripted_generator):
        q = scripted_generator.generate("name-conversion", 1)[0]
        assert q.prompt == 'Convert "Michael" to Katakana:'
        assert q.options == ["ファデル", "ヒズキア", "イズル", "マイケル"]

    def test_fewer_alternatives_fewer_distractors(self):
        gen = QuestionGenerator(rng=ScriptedRandom())
        assert gen.choice_options("a", ["a", "b"]) == ["b", "a"]
        assert gen.choice_options("a", ["a"]) == ["a"]

    def test_distractors_are_deduplicated(self):
        gen = QuestionGenerator(rng=RandomSource(seed=3))
        options = gen.choice_options("a", ["a", "b", "b", "b", "c"])
        assert sorted(options) == ["a", "b", "c"]

    def test_same_seed_same_quiz(self, bank):
        first = QuestionGenerator(bank, RandomSource(seed=99)).generate("multiple-choice", 10)
        second = QuestionGenerator(bank, RandomSource(seed=99)).generate("multiple-choice", 10)
        assert [q.model_dump() for q in first] == [q.model_dump() for q in second]


# --- Progressive ---


class TestProgressive:
    def test_beginner_tier(self, generator):
        questions = generator.generate("progressive", 99, mastery=0)
        assert len(questions) == 5
        assert {q.glyph for q in questions} == {"ア", "イ", "ウ", "エ", "オ"}
        assert all(q.level == 1 for q in questions)
        assert all(q.kind == "progressive" for q in questions)

    def test_advanced_tier_skips_vowels(self, generator):
        questions = generator.generate("progressive", mastery=35)
        assert len(questions) == 12
        basic = {c.glyph for c in generator.bank.list_by_category("basic")}
        assert not basic & {q.glyph for q in questions}
        assert all(q.level == 4 for q in questions)

    def test_expert_tier(self, generator):
        questions = generator.generate("progressive", mastery=46)
        assert len(questions) == 15
        assert all(q.level == 5 for q in questions)


# --- Fill in the blanks ---


class TestFillBlanks:
    def test_terebi(self):
        word = WordEntry(word="テレビ", romanization="terebi", meaning="television", blanks=(1,))
        gen = QuestionGenerator(rng=ScriptedRandom())
        q = gen.build_fill_blanks(word)
        assert isinstance(q, FillBlanksQuestion)
        assert q.blanked_word == "テ_ビ"
        assert q.prompt == "Complete the word: テ_ビ"
        assert q.answer == ["レ"]
        assert q.hint == "Meaning: television"
        assert q.options == ["カ", "オ", "エ", "ウ", "イ", "ア", "レ"]

    def test_multiple_blanks_in_index_order(self):
        word = WordEntry(word="レストラン", romanization="resutoran", meaning="restaurant", blanks=(4, 1))
        q = QuestionGenerator(rng=RandomSource(seed=5)).build_fill_blanks(word)
        assert q.answer == ["ス", "ン"]
        assert q.blanked_word == "レ_トラ_"
        assert len(q.options) == 8
        for ch in q.answer:
            assert ch in q.options

    def test_distractors_exclude_answer(self, generator):
        for q in generator.generate("fill-blanks", 10):
            assert len(q.options) == len(q.answer) + 6
            extras = list(q.options)
            for ch in q.answer:
                extras.remove(ch)
            assert not set(extras) & set(q.answer)


# --- Matching ---


class TestMatching:
    def test_single_aggregate_question(self, generator):
        questions = generator.generate("matching", 20)
        assert len(questions) == 1
        q = questions[0]
        assert isinstance(q, MatchingQuestion)
        assert len(q.characters) == 8
        assert len({c.glyph for c in q.characters}) == 8
        assert q.matches == {}
        assert not q.completed

    def test_right_column_is_a_permutation(self, generator):
        for _ in range(20):
            q = generator.build_matching()
            left = [c.romanization for c in q.characters]
            assert sorted(q.romanizations) == sorted(left)
            assert q.romanizations != left

    def test_right_column_never_identity(self):
        class IdentityRandom(ScriptedRandom):
            def shuffled(self, items):
                return list(items)

        q = QuestionGenerator(rng=IdentityRandom()).build_matching()
        left = [c.romanization for c in q.characters]
        assert q.romanizations != left
        assert sorted(q.romanizations) == sorted(left)


class TestSmallBanks:
    def test_empty_word_bank(self):
        gen = QuestionGenerator(QuestionBank(words=[]), RandomSource(seed=1))
        assert gen.generate("fill-blanks", 5) == []
