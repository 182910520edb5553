"""Tests for progressive difficulty selection."""

import pytest

from katakana_quiz.difficulty import select_tier


class TestSelectTier:
    @pytest.mark.parametrize(
        "mastered,level",
        [(0, 1), (9, 1), (10, 2), (19, 2), (20, 3), (29, 3), (30, 4), (39, 4), (40, 5), (46, 5)],
    )
    def test_boundaries(self, mastered, level):
        assert select_tier(mastered).level == level

    def test_question_counts(self):
        assert [select_tier(n).question_count for n in (0, 10, 20, 30, 40)] == [5, 8, 10, 12, 15]

    def test_tier_categories(self):
        assert select_tier(0).categories == ("basic",)
        assert select_tier(15).categories == ("basic", "k-sounds", "s-sounds")
        assert "t-sounds" in select_tier(25).categories
        assert "basic" not in select_tier(35).categories
        assert len(select_tier(40).categories) == 11

    def test_negative_count_is_beginner(self):
        assert select_tier(-3).level == 1
