# src/mathquest/random_source.py
"""Injectable random source used by every question archetype.

Archetypes never touch the global ``random`` module. They receive a
RandomSource, so tests can seed generation and threads never share state.
"""

from __future__ import annotations

import random
import threading
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_local = threading.local()


class RandomSource:
    """Uniform integer and ordering helpers over a private ``random.Random``."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._random = random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        """Return a uniformly distributed integer in ``[low, high]``.

        Raises:
            ValueError: If ``low > high``
        """
        if low > high:
            raise ValueError(f"Empty range: low ({low}) is greater than high ({high})")
        return self._random.randint(low, high)

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Return a new list with the items in uniformly random order.

        Uses Fisher-Yates (``random.Random.shuffle``) on a copy; the input
        sequence is left untouched.
        """
        shuffled = list(items)
        self._random.shuffle(shuffled)
        return shuffled

    def choice(self, items: Sequence[T]) -> T:
        """Pick one item uniformly."""
        if not items:
            raise ValueError("Cannot choose from an empty sequence")
        return items[self.randint(0, len(items) - 1)]

    def sample(self, items: Sequence[T], k: int) -> list[T]:
        """Pick ``k`` distinct positions uniformly."""
        return self._random.sample(list(items), k)

    def chance(self, probability: float = 0.5) -> bool:
        """Return True with the given probability."""
        return self._random.random() < probability


def get_default_source() -> RandomSource:
    """Return the calling thread's default RandomSource (created lazily)."""
    source = getattr(_local, "source", None)
    if source is None:
        source = RandomSource()
        _local.source = source
    return source
