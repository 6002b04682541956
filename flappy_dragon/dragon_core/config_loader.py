"""
Configuration Loader
====================

Loads and validates game_config.yaml, providing typed access to all parameters.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import yaml


@dataclass(frozen=True)
class ScreenConfig:
    """Console geometry."""
    width: int                   # Right boundary, obstacles spawn here
    height: int                  # Falling below this row is out of bounds


@dataclass(frozen=True)
class TimingConfig:
    """Fixed logical tick settings."""
    frame_duration_ms: float     # Real milliseconds accumulated per physics step


@dataclass(frozen=True)
class PlayerConfig:
    """Dragon start position and vertical physics."""
    start_x: float
    start_y: float
    gravity: float
    terminal_velocity: float
    flap_velocity: float

    @property
    def start_position(self) -> Tuple[float, float]:
        return (self.start_x, self.start_y)


@dataclass(frozen=True)
class ObstacleConfig:
    """Obstacle generation and difficulty scaling."""
    base_velocity: float         # Horizontal delta per frame at score 0 (negative)
    speed_scale: float           # Added leftward speed per point of score
    base_gap: float              # Gap height at score 0
    min_gap: float               # Floor for the gap height
    gap_center_min: float
    gap_center_max: float

    @property
    def gap_center_range(self) -> Tuple[float, float]:
        return (self.gap_center_min, self.gap_center_max)


@dataclass(frozen=True)
class GameConfig:
    """
    Complete game configuration loaded from YAML.

    All values are immutable to prevent accidental modification during runtime.
    """
    screen: ScreenConfig
    timing: TimingConfig
    player: PlayerConfig
    obstacle: ObstacleConfig

    def gap_size_for_score(self, score: int) -> float:
        """Gap height for an obstacle created at the given score."""
        return max(self.obstacle.min_gap, self.obstacle.base_gap - score)

    def obstacle_velocity_for_score(self, score: int) -> float:
        """Per-frame horizontal delta for an obstacle created at the given score."""
        return self.obstacle.base_velocity - score * self.obstacle.speed_scale


def _validate_config(config: GameConfig) -> None:
    """Validate configuration consistency."""
    screen = config.screen
    if screen.width <= 0 or screen.height <= 0:
        raise ValueError(f"Screen size must be positive, got {screen.width}x{screen.height}")

    if config.timing.frame_duration_ms <= 0:
        raise ValueError(
            f"frame_duration_ms must be positive, got {config.timing.frame_duration_ms}"
        )

    player = config.player
    if player.gravity <= 0:
        raise ValueError(f"gravity must be positive, got {player.gravity}")
    if player.flap_velocity >= 0:
        raise ValueError(f"flap_velocity must be negative (upward), got {player.flap_velocity}")
    if player.flap_velocity > player.terminal_velocity:
        raise ValueError(
            f"flap_velocity ({player.flap_velocity}) exceeds "
            f"terminal_velocity ({player.terminal_velocity})"
        )
    if not (0 <= player.start_y <= screen.height):
        raise ValueError(f"start_y ({player.start_y}) must lie on screen [0, {screen.height}]")

    obstacle = config.obstacle
    if obstacle.base_velocity >= 0:
        raise ValueError(
            f"base_velocity must be negative (leftward), got {obstacle.base_velocity}"
        )
    if obstacle.speed_scale < 0:
        raise ValueError(f"speed_scale must not be negative, got {obstacle.speed_scale}")
    if obstacle.min_gap <= 0:
        raise ValueError(f"min_gap must be positive, got {obstacle.min_gap}")
    if obstacle.min_gap > obstacle.base_gap:
        raise ValueError(
            f"min_gap ({obstacle.min_gap}) exceeds base_gap ({obstacle.base_gap})"
        )
    if obstacle.gap_center_min >= obstacle.gap_center_max:
        raise ValueError(
            f"gap center range is empty: [{obstacle.gap_center_min}, {obstacle.gap_center_max}]"
        )
    if obstacle.gap_center_min < 0 or obstacle.gap_center_max > screen.height:
        raise ValueError(
            f"gap center range [{obstacle.gap_center_min}, {obstacle.gap_center_max}] "
            f"must lie on screen [0, {screen.height}]"
        )


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load and validate game configuration from YAML.

    Args:
        config_path: Path to game_config.yaml. If None, uses default location.

    Returns:
        Validated GameConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "game_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f)

    screen_data = raw["screen"]
    screen = ScreenConfig(
        width=int(screen_data["width"]),
        height=int(screen_data["height"])
    )

    timing_data = raw.get("timing", {})
    timing = TimingConfig(
        frame_duration_ms=float(timing_data.get("frame_duration_ms", 20.0))
    )

    player_data = raw["player"]
    player = PlayerConfig(
        start_x=float(player_data["start_x"]),
        start_y=float(player_data["start_y"]),
        gravity=float(player_data["gravity"]),
        terminal_velocity=float(player_data["terminal_velocity"]),
        flap_velocity=float(player_data["flap_velocity"])
    )

    obstacle_data = raw["obstacle"]
    obstacle = ObstacleConfig(
        base_velocity=float(obstacle_data["base_velocity"]),
        speed_scale=float(obstacle_data.get("speed_scale", 0.25)),
        base_gap=float(obstacle_data["base_gap"]),
        min_gap=float(obstacle_data["min_gap"]),
        gap_center_min=float(obstacle_data.get("gap_center_min", 10.0)),
        gap_center_max=float(obstacle_data.get("gap_center_max", 40.0))
    )

    config = GameConfig(
        screen=screen,
        timing=timing,
        player=player,
        obstacle=obstacle
    )

    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the cached game configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> GameConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
