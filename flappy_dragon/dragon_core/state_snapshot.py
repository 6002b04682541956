"""
State Snapshot
==============

Read-only view of the game for renderers, and numpy packing for
Gymnasium observations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, TYPE_CHECKING

import numpy as np

from flappy_dragon.dragon_core.config_loader import GameConfig

if TYPE_CHECKING:
    from flappy_dragon.dragon_core.obstacle import Obstacle
    from flappy_dragon.dragon_core.player import Player
    from flappy_dragon.dragon_core.rules import GameMode


@dataclass(frozen=True)
class GameSnapshot:
    """
    Everything a renderer or agent may read about one frame.
    """
    mode: str
    score: int

    # Dragon
    player_x: float
    player_y: float
    player_velocity: float

    # Active obstacle
    obstacle_x: float
    gap_y: float
    gap_half_size: float
    obstacle_velocity: float
    collided: bool

    # Screen (for normalization)
    screen_width: float
    screen_height: float

    @property
    def distance_to_obstacle(self) -> float:
        """Horizontal distance from the dragon to the wall (negative once passed)."""
        return self.obstacle_x - self.player_x

    @property
    def offset_from_gap(self) -> float:
        """Vertical offset of the dragon from the gap center (positive = below)."""
        return self.player_y - self.gap_y

    def to_obs_dict(self) -> Dict[str, np.ndarray]:
        """Convert to Gymnasium observation dictionary."""
        return {
            "player_y": np.array(self.player_y, dtype=np.float32),
            "player_velocity": np.array(self.player_velocity, dtype=np.float32),
            "obstacle_x": np.array(self.obstacle_x, dtype=np.float32),
            "gap_y": np.array(self.gap_y, dtype=np.float32),
            "gap_half_size": np.array(self.gap_half_size, dtype=np.float32),
            "obstacle_velocity": np.array(self.obstacle_velocity, dtype=np.float32),
            "distance_to_obstacle": np.array(self.distance_to_obstacle, dtype=np.float32),
            "offset_from_gap": np.array(self.offset_from_gap, dtype=np.float32),
            "score": np.array(self.score, dtype=np.int64),
        }


class SnapshotBuilder:
    """Builds GameSnapshot objects from live game state."""

    def __init__(self, config: GameConfig):
        self._screen_width = float(config.screen.width)
        self._screen_height = float(config.screen.height)

    def build(
        self,
        mode: "GameMode",
        score: int,
        player: "Player",
        obstacle: "Obstacle"
    ) -> GameSnapshot:
        return GameSnapshot(
            mode=mode.value,
            score=score,
            player_x=player.x,
            player_y=player.y,
            player_velocity=player.velocity,
            obstacle_x=obstacle.x,
            gap_y=obstacle.gap_y,
            gap_half_size=obstacle.half_size,
            obstacle_velocity=obstacle.vel(),
            collided=obstacle.collided,
            screen_width=self._screen_width,
            screen_height=self._screen_height
        )
