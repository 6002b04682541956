"""
Scoring System
==============

One point per obstacle that scrolls past the dragon.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoreEvent:
    """Record of a scoring event."""
    points: int
    total: int
    frame: int

    def __repr__(self) -> str:
        return f"ScoreEvent(+{self.points} -> {self.total} @ frame {self.frame})"


class ScoreTracker:
    """
    Tracks game score.

    The score also drives difficulty: each new obstacle reads it at creation.
    """

    POINTS_PER_OBSTACLE = 1

    def __init__(self):
        self._score: int = 0

    @property
    def score(self) -> int:
        """Current total score."""
        return self._score

    def apply_pass(self, frame: int = 0) -> ScoreEvent:
        """
        Award the points for an obstacle that scrolled off the left edge.

        Args:
            frame: Logical frame the obstacle was passed on.

        Returns:
            ScoreEvent describing the points awarded.
        """
        self._score += self.POINTS_PER_OBSTACLE
        return ScoreEvent(
            points=self.POINTS_PER_OBSTACLE,
            total=self._score,
            frame=frame
        )

    def reset(self) -> None:
        """Reset score to zero."""
        self._score = 0
