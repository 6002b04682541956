"""
Gymnasium Environment Wrapper
=============================

Provides a standard Gymnasium interface to Flappy Dragon.
One environment step is one logical frame.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Union

import numpy as np

import gymnasium as gym
from gymnasium import spaces

from flappy_dragon.dragon_core.config_loader import GameConfig, load_config
from flappy_dragon.dragon_core.game import CoreGame


class FlappyDragonEnv(gym.Env):
    """
    Flappy Dragon as a Gymnasium environment.

    Action Space:
        Discrete(2): 0 = do nothing, 1 = flap before this frame's physics.

    Observation Space:
        Dict of float32 scalars describing the dragon and the active obstacle.

    Reward:
        Points scored this frame (1.0 when an obstacle is passed).

    Info:
        Contains score, frames, terminated_reason, gap_size, obstacle_velocity.
    """

    metadata = {
        "render_modes": [],
        "render_fps": 50,
    }

    def __init__(
        self,
        config_path: Optional[str] = None,
        max_frames: Optional[int] = None,
        debug: bool = False,
    ):
        """
        Initialize Flappy Dragon environment.

        Args:
            config_path: Path to game_config.yaml. Uses default if None.
            max_frames: Truncate episodes after this many frames. Unlimited if None.
            debug: If True, enables verbose debug output for agent development.
        """
        super().__init__()

        self._config = load_config(config_path)
        self._max_frames = max_frames
        self._debug = debug

        self._game = CoreGame(config=self._config, debug=debug)

        self.action_space = spaces.Discrete(2)
        self.observation_space = self._build_observation_space()

        if self._debug:
            print(f"[DEBUG] FlappyDragonEnv initialized")
            print(f"[DEBUG]   Screen: {self._config.screen.width}x{self._config.screen.height}")
            print(f"[DEBUG]   Max frames: {self._max_frames}")

    def _build_observation_space(self) -> spaces.Dict:
        """Build the observation space definition."""
        screen = self._config.screen

        return spaces.Dict({
            "player_y": spaces.Box(low=0, high=np.inf, shape=(), dtype=np.float32),
            "player_velocity": spaces.Box(low=-np.inf, high=np.inf, shape=(), dtype=np.float32),
            "obstacle_x": spaces.Box(low=-np.inf, high=screen.width, shape=(), dtype=np.float32),
            "gap_y": spaces.Box(low=0, high=screen.height, shape=(), dtype=np.float32),
            "gap_half_size": spaces.Box(low=0, high=screen.height, shape=(), dtype=np.float32),
            "obstacle_velocity": spaces.Box(low=-np.inf, high=0, shape=(), dtype=np.float32),
            "distance_to_obstacle": spaces.Box(low=-np.inf, high=np.inf, shape=(), dtype=np.float32),
            "offset_from_gap": spaces.Box(low=-np.inf, high=np.inf, shape=(), dtype=np.float32),
            "score": spaces.Box(low=0, high=np.iinfo(np.int64).max, shape=(), dtype=np.int64),
        })

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None
    ) -> Tuple[Dict[str, np.ndarray], Dict[str, Any]]:
        """
        Reset the environment straight into a running game.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            (observation, info) tuple.
        """
        super().reset(seed=seed)

        snapshot = self._game.reset(seed=seed)

        obs = snapshot.to_obs_dict()
        info = self._game.get_info()
        info["delta_score"] = 0

        return obs, info

    def step(
        self,
        action: Union[int, np.ndarray]
    ) -> Tuple[Dict[str, np.ndarray], float, bool, bool, Dict[str, Any]]:
        """
        Execute one logical frame.

        Args:
            action: 1 to flap, 0 to glide.

        Returns:
            (observation, reward, terminated, truncated, info) tuple.
        """
        if isinstance(action, np.ndarray):
            action = int(action.item() if action.ndim == 0 else action[0])

        score_before = self._game.score
        if action:
            self._game.flap()
        self._game.tick_physics()
        delta_score = self._game.score - score_before

        obs = self._game.snapshot().to_obs_dict()
        terminated = self._game.is_over
        truncated = (
            not terminated
            and self._max_frames is not None
            and self._game.frames >= self._max_frames
        )

        info = self._game.get_info()
        info["delta_score"] = delta_score

        if self._debug and terminated:
            print(f"[DEBUG] TERMINATED: {info.get('terminated_reason', 'unknown')}")

        return obs, float(delta_score), terminated, truncated, info

    @property
    def game(self) -> CoreGame:
        """Access to underlying game (for debugging/tools)."""
        return self._game

    @property
    def config(self) -> GameConfig:
        """Game configuration."""
        return self._config
