"""Shared pseudo-random number source."""

from __future__ import annotations

import random
from typing import ClassVar


class RandomGenerator:
    """Mersenne Twister seeded from system entropy, shared engine-wide."""

    _rng: ClassVar[random.Random] = random.Random(random.SystemRandom().getrandbits(64))

    @classmethod
    def range(cls, low: float, high: float) -> float:
        """Return a uniform float in ``[low, high)``."""
        return low + (high - low) * cls._rng.random()

    @classmethod
    def seed(cls, value: int) -> None:
        """Reseed the shared generator."""
        cls._rng.seed(value)