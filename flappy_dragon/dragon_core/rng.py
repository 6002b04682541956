"""
RNG - Gap Placement
===================

Supplies the uniform random values used to place obstacle gaps.
Seeded for reproducible runs.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol


class UniformSource(Protocol):
    """Anything that can draw a uniform value in [low, high]."""

    def uniform(self, low: float, high: float) -> float:
        ...


class GapRandom:
    """
    Seeded uniform source for obstacle gap centers.

    Exactly one draw is made per obstacle, so the gap sequence of a run
    depends only on the seed.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize the source.

        Args:
            seed: Random seed for reproducibility. Random if None.
        """
        self._seed = seed
        self._rng = random.Random(seed)
        self._draws: int = 0

    @property
    def seed(self) -> Optional[int]:
        """Seed this source was last (re)initialized with."""
        return self._seed

    @property
    def draws(self) -> int:
        """Number of values drawn since the last reset."""
        return self._draws

    def uniform(self, low: float, high: float) -> float:
        """Draw a value uniformly from [low, high]."""
        self._draws += 1
        return self._rng.uniform(low, high)

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Reset the source with optional new seed.

        Args:
            seed: New random seed. Keeps current if None.
        """
        if seed is not None:
            self._seed = seed
        self._rng = random.Random(self._seed)
        self._draws = 0
