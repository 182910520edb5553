"""Single seedable source of randomness for question generation."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


class RandomSource:
    """Uniform shuffle/sample primitives over one ``random.Random``.

    Seed it to get reproducible option orderings and distractor picks.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def shuffled(self, items: Sequence[T]) -> list[T]:
        result = list(items)
        self._rng.shuffle(result)
        return result

    def sample(self, items: Sequence[T], k: int) -> list[T]:
        """Draw up to ``k`` distinct elements without replacement."""
        k = max(0, min(k, len(items)))
        return self._rng.sample(list(items), k)

    def chance(self, p: float = 0.5) -> bool:
        return self._rng.random() < p
