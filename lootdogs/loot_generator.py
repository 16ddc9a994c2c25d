"""Generator deciding how much loot appears on a map."""

from __future__ import annotations

import math
from datetime import timedelta
from typing import Callable, Optional


def _default_generator() -> float:
    return 1.0


class LootGenerator:
    """Produces loot so that, over time, every looter tends to have one item.

    ``base_interval`` is a positive time span, ``probability`` the chance of
    loot appearing within it, and ``random_generator`` yields numbers in [0, 1].
    """

    def __init__(
        self,
        base_interval: timedelta,
        probability: float,
        random_generator: Optional[Callable[[], float]] = None,
    ) -> None:
        if base_interval <= timedelta(0):
            raise ValueError("base interval must be positive")
        self._base_interval = base_interval
        self._probability = probability
        self._random_generator = random_generator or _default_generator
        self._time_without_loot = timedelta(0)

    @property
    def period(self) -> timedelta:
        return self._base_interval

    def generate(
        self, time_delta: timedelta, loot_count: int, looter_count: int
    ) -> int:
        """Return how many items appear after ``time_delta``; never more than the shortage."""
        self._time_without_loot += time_delta
        shortage = max(looter_count - loot_count, 0)
        ratio = self._time_without_loot / self._base_interval
        chance = (1.0 - (1.0 - self._probability) ** ratio) * self._random_generator()
        chance = min(max(chance, 0.0), 1.0)
        generated = math.floor(shortage * chance + 0.5)
        if generated > 0:
            self._time_without_loot = timedelta(0)
        return generated