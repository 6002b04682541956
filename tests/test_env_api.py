"""
Tests for Gymnasium environment API.
"""

import pytest
import numpy as np

from flappy_dragon.dragon_core.env_gym import FlappyDragonEnv
from flappy_dragon.dragon_core.rules import GameMode


@pytest.fixture
def env():
    return FlappyDragonEnv()


class TestFlappyDragonEnv:
    """Test single environment API."""

    def test_reset_returns_obs_and_info(self, env):
        """Reset should return (observation, info) tuple."""
        result = env.reset(seed=42)

        assert isinstance(result, tuple)
        assert len(result) == 2

        obs, info = result
        assert isinstance(obs, dict)
        assert isinstance(info, dict)
        assert info["mode"] == GameMode.PLAYING.value
        assert info["delta_score"] == 0

    def test_observation_structure(self, env):
        """Observation should match the declared space."""
        obs, _ = env.reset(seed=42)

        assert set(obs) == set(env.observation_space.spaces)
        assert obs["player_y"].dtype == np.float32
        assert obs["score"].dtype == np.int64
        assert env.observation_space.contains(obs)

    def test_step_returns_five_values(self, env):
        """Step should return (obs, reward, terminated, truncated, info)."""
        env.reset(seed=42)

        result = env.step(0)

        assert isinstance(result, tuple)
        assert len(result) == 5

        obs, reward, terminated, truncated, info = result
        assert isinstance(obs, dict)
        assert isinstance(reward, float)
        assert isinstance(terminated, bool)
        assert isinstance(truncated, bool)
        assert isinstance(info, dict)

    def test_step_is_one_frame(self, env):
        env.reset(seed=42)
        env.step(0)
        env.step(0)
        assert env.game.frames == 2

    def test_flap_action(self, env):
        env.reset(seed=42)
        obs, _, _, _, _ = env.step(1)
        flap = env.config.player.flap_velocity
        gravity = env.config.player.gravity
        assert float(obs["player_velocity"]) == pytest.approx(flap + gravity)

    def test_numpy_action(self, env):
        env.reset(seed=42)
        env.step(np.array(1))
        assert env.game.player.velocity < 0

    def test_idle_falls_to_game_over(self, env):
        """Never flapping ends the episode by falling out of the screen or hitting a wall."""
        env.reset(seed=42)

        terminated = False
        for _ in range(200):
            _, _, terminated, _, info = env.step(0)
            if terminated:
                break

        assert terminated
        assert info["terminated_reason"] in ("out_of_bounds", "collision")

    def test_reward_matches_score_delta(self, env):
        env.reset(seed=42)
        total = 0.0
        for _ in range(300):
            # Flap when sinking below the gap center
            game = env.game
            action = 1 if game.player.y > game.obstacle.gap_y + 1 else 0
            _, reward, terminated, _, info = env.step(action)
            total += reward
            assert reward == info["delta_score"]
            if terminated:
                break
        assert total == env.game.score

    def test_truncation(self):
        env = FlappyDragonEnv(max_frames=3)
        env.reset(seed=42)
        truncated = False
        for _ in range(3):
            _, _, terminated, truncated, _ = env.step(0)
        assert not terminated
        assert truncated

    def test_reset_is_reproducible(self, env):
        obs1, _ = env.reset(seed=7)
        obs2, _ = env.reset(seed=7)
        assert obs1["gap_y"] == obs2["gap_y"]
