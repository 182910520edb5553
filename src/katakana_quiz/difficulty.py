"""Difficulty selection for progressive quizzes."""

from __future__ import annotations

from katakana_quiz.katakana_data import DIFFICULTY_TIERS
from katakana_quiz.models import DifficultyTier

# Minimum mastered-character count for each tier, highest first
TIER_THRESHOLDS = ((40, 5), (30, 4), (20, 3), (10, 2))


def select_tier(mastered_count: int) -> DifficultyTier:
    """Map the number of learned characters to a difficulty tier."""
    level = 1
    for minimum, tier_level in TIER_THRESHOLDS:
        if mastered_count >= minimum:
            level = tier_level
            break
    return DIFFICULTY_TIERS[level - 1]
