"""
Player
======

The dragon: a fixed column with vertical velocity under gravity.
Negative velocity is upward; y grows downward from the top of the screen.
"""

from __future__ import annotations

from typing import Optional, Tuple

from flappy_dragon.dragon_core.config_loader import GameConfig, get_config


class Player:
    """
    Vertical physics for the dragon.

    - Velocity is capped at terminal velocity, never below it (a flap
      sets it directly).
    - y is clamped at 0 so the dragon cannot leave through the top. The
      velocity is kept when pinned, so gravity keeps accumulating.
    """

    def __init__(
        self,
        x: float,
        y: float,
        velocity: float = 0.0,
        config: Optional[GameConfig] = None
    ):
        if config is None:
            config = get_config()

        self._x = float(x)
        self.y = float(y)
        self.velocity = float(velocity)

        self._gravity = config.player.gravity
        self._terminal_velocity = config.player.terminal_velocity
        self._flap_velocity = config.player.flap_velocity

    @classmethod
    def spawn(cls, config: Optional[GameConfig] = None) -> "Player":
        """Create the dragon at the configured start position, at rest."""
        if config is None:
            config = get_config()
        return cls(config.player.start_x, config.player.start_y, 0.0, config)

    @property
    def x(self) -> float:
        """Fixed horizontal position."""
        return self._x

    @property
    def position(self) -> Tuple[float, float]:
        """(x, y) position."""
        return (self._x, self.y)

    def set_velocity(self, velocity: float) -> None:
        """Set velocity, capped at terminal velocity."""
        self.velocity = min(velocity, self._terminal_velocity)

    def apply_gravity(self) -> None:
        self.set_velocity(self.velocity + self._gravity)

    def apply_flap(self) -> None:
        self.set_velocity(self._flap_velocity)

    def move_velocity(self) -> None:
        """Move one frame along the current velocity, pinning at the top edge."""
        new_y = self.y + self.velocity
        if new_y < 0.0:
            self.y = 0.0
        else:
            self.y = new_y

    def __repr__(self) -> str:
        return f"Player(x={self._x:.2f}, y={self.y:.2f}, velocity={self.velocity:.2f})"
