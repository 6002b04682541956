"""
Obstacle
========

A scrolling wall with a single passable gap. The score at creation fixes
both the gap height and the scroll speed for the obstacle's lifetime.
"""

from __future__ import annotations

import math
from typing import List, Optional, TYPE_CHECKING

from flappy_dragon.dragon_core.config_loader import GameConfig, get_config
from flappy_dragon.dragon_core.rng import UniformSource

if TYPE_CHECKING:
    from flappy_dragon.dragon_core.player import Player


class Obstacle:
    """
    One wall column scrolling left.

    Attributes:
        x: Horizontal position, decreases every logical frame.
        gap_y: Vertical center of the gap.
        size: Full height of the gap, never below the configured minimum.
        score: Score when this obstacle was created.
        collided: True if the last collision check hit the dragon.
    """

    def __init__(
        self,
        x: float,
        gap_y: float,
        size: float,
        score: int = 0,
        config: Optional[GameConfig] = None
    ):
        if config is None:
            config = get_config()

        self.x = float(x)
        self.gap_y = float(gap_y)
        self.size = float(size)
        self.score = score
        self.collided = False

        self._config = config

    @classmethod
    def spawn(
        cls,
        x: float,
        score: int,
        rng: UniformSource,
        config: Optional[GameConfig] = None
    ) -> "Obstacle":
        """
        Generate an obstacle for the given score.

        Draws exactly one gap center from the RNG. The gap narrows by one
        cell per point of score down to the configured minimum.

        Args:
            x: Spawn position (normally the right edge of the screen).
            score: Current score, used for difficulty scaling.
            rng: Uniform source for the gap center.
            config: Game configuration. Uses default if None.

        Returns:
            The new obstacle.
        """
        if config is None:
            config = get_config()

        low, high = config.obstacle.gap_center_range
        gap_y = rng.uniform(low, high)
        size = config.gap_size_for_score(score)
        return cls(x, gap_y, size, score, config)

    @property
    def half_size(self) -> float:
        """Half-extent of the gap around its center."""
        return self.size / 2.0

    @property
    def gap_top(self) -> float:
        return self.gap_y - self.half_size

    @property
    def gap_bottom(self) -> float:
        return self.gap_y + self.half_size

    def vel(self) -> float:
        """Horizontal delta per frame, from the creation score."""
        return self._config.obstacle_velocity_for_score(self.score)

    def move_velocity(self) -> None:
        self.x += self.vel()

    def is_outside_gap(self, y: float) -> bool:
        """True if y is strictly above or below the gap band. Edges are safe."""
        return y < self.gap_top or y > self.gap_bottom

    def will_cross(self, x: float) -> bool:
        """True if this frame's movement carries the wall across column x."""
        return self.x >= x and self.x + self.vel() <= x

    def check_collision_and_move(self, player: "Player") -> bool:
        """
        Test this frame's crossing against the dragon, then move.

        On a hit the obstacle stays put so the impact frame shows the
        dragon against the wall.

        Returns:
            True if the dragon was hit.
        """
        will_collide = self.will_cross(player.x) and self.is_outside_gap(player.y)
        self.collided = will_collide
        if not will_collide:
            self.move_velocity()
        return will_collide

    def wall_rows(self, screen_height: int) -> List[int]:
        """Rows of this obstacle's column that are drawn as wall."""
        top = math.floor(self.gap_top)
        bottom = math.floor(self.gap_bottom)
        return list(range(0, max(0, top))) + list(range(bottom, screen_height + 1))

    def __repr__(self) -> str:
        return (
            f"Obstacle(x={self.x:.2f}, gap_y={self.gap_y:.2f}, size={self.size:.1f}, "
            f"score={self.score}, collided={self.collided})"
        )
