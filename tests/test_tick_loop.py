"""
Tests for the fixed-frame accumulator and input handling in the driver.
"""

import pytest

from flappy_dragon.dragon_core.config_loader import load_config
from flappy_dragon.dragon_core.game import CoreGame
from flappy_dragon.dragon_core.rules import GameMode, KeyEvent


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def game(config):
    game = CoreGame(config=config, seed=42)
    game.tick(0.0, KeyEvent.FLAP)
    return game


class TestAccumulator:
    """Test real-time accumulation into logical frames."""

    def test_accumulates_below_threshold(self, game):
        result = game.tick(10.0)
        assert not result.stepped
        assert game.frame_time == 10.0
        assert game.frames == 0

    def test_exactly_one_frame_duration_does_not_step(self, game, config):
        """The threshold must be exceeded, not merely reached."""
        game.tick(config.timing.frame_duration_ms / 2)
        result = game.tick(config.timing.frame_duration_ms / 2)
        assert not result.stepped
        assert game.frame_time == config.timing.frame_duration_ms

    def test_steps_once_threshold_exceeded(self, game, config):
        game.tick(config.timing.frame_duration_ms)
        result = game.tick(1.0)
        assert result.stepped
        assert game.frames == 1
        assert game.frame_time == 0.0

    def test_large_elapsed_runs_single_step(self, game, config):
        """No catch-up: several frame durations at once still run one step."""
        result = game.tick(config.timing.frame_duration_ms * 10)
        assert result.stepped
        assert game.frames == 1
        assert game.frame_time == 0.0

    def test_step_applies_gravity_and_moves(self, game, config):
        y0 = game.player.y
        x0 = game.obstacle.x
        game.tick(config.timing.frame_duration_ms + 1.0)

        assert game.player.velocity == pytest.approx(config.player.gravity)
        assert game.player.y == pytest.approx(y0 + config.player.gravity)
        assert game.obstacle.x == pytest.approx(x0 + config.obstacle.base_velocity)

    def test_negative_elapsed_is_ignored(self, game):
        game.tick(5.0)
        game.tick(-50.0)
        assert game.frame_time == 5.0


class TestFlapInput:
    """Test that flaps bypass the accumulator."""

    def test_flap_applies_without_step(self, game, config):
        y0 = game.player.y
        result = game.tick(1.0, KeyEvent.FLAP)

        assert not result.stepped
        assert game.player.velocity == config.player.flap_velocity
        assert game.player.y == y0

    def test_flap_applies_after_step_in_same_call(self, game, config):
        y0 = game.player.y
        result = game.tick(config.timing.frame_duration_ms + 1.0, KeyEvent.FLAP)

        assert result.stepped
        assert game.player.y == pytest.approx(y0 + config.player.gravity)
        assert game.player.velocity == config.player.flap_velocity

    def test_one_flap_per_event(self, game, config):
        """Calls without a key event do not repeat the flap."""
        game.tick(1.0, KeyEvent.FLAP)
        game.tick(config.timing.frame_duration_ms + 1.0)
        assert game.player.velocity == pytest.approx(
            config.player.flap_velocity + config.player.gravity
        )

    def test_flapping_keeps_dragon_alive(self, game, config):
        """Flapping whenever the dragon sinks below the gap center keeps it in play for a while."""
        for _ in range(60):
            key = KeyEvent.FLAP if game.player.y > game.obstacle.gap_y else None
            game.tick(config.timing.frame_duration_ms + 1.0, key)
        assert game.mode is GameMode.PLAYING
        assert game.player.y <= config.screen.height


class TestReset:
    """Test reset and seeding."""

    def test_reset_with_seed_is_reproducible(self, config):
        a = CoreGame(config=config)
        b = CoreGame(config=config)
        a.reset(seed=123)
        b.reset(seed=123)
        assert a.obstacle.gap_y == b.obstacle.gap_y

    def test_successive_games_draw_new_gaps(self, config):
        game = CoreGame(config=config, seed=5)
        gaps = set()
        for _ in range(5):
            game.reset()
            gaps.add(game.obstacle.gap_y)
        assert len(gaps) > 1

    def test_snapshot_reflects_state(self, game):
        snapshot = game.snapshot()
        assert snapshot.mode == GameMode.PLAYING.value
        assert snapshot.player_y == game.player.y
        assert snapshot.obstacle_x == game.obstacle.x
        assert snapshot.gap_half_size == game.obstacle.half_size
        assert snapshot.distance_to_obstacle == game.obstacle.x - game.player.x

    def test_render_data_keys(self, game):
        data = game.get_render_data()
        for key in ("player_x", "player_y", "player_velocity", "obstacle_x",
                    "gap_y", "gap_half_size", "wall_rows", "score", "mode"):
            assert key in data
