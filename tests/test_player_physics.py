"""
Tests for dragon physics.
"""

import pytest

from flappy_dragon.dragon_core.config_loader import load_config
from flappy_dragon.dragon_core.player import Player


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def player(config):
    return Player.spawn(config)


class TestSpawn:
    """Test the starting dragon."""

    def test_starts_at_configured_position(self, player, config):
        assert player.position == (config.player.start_x, config.player.start_y)

    def test_starts_at_rest(self, player):
        assert player.velocity == 0.0


class TestGravity:
    """Test gravity and terminal velocity."""

    def test_gravity_adds_to_velocity(self, player, config):
        player.apply_gravity()
        assert player.velocity == pytest.approx(config.player.gravity)

    @pytest.mark.parametrize("start_velocity", [-2.0, -0.5, 0.0, 1.0, 1.9, 2.0])
    def test_converges_to_terminal_velocity(self, config, start_velocity):
        """Repeated gravity reaches terminal velocity and never exceeds it."""
        player = Player(5.0, 25.0, start_velocity, config)
        terminal = config.player.terminal_velocity

        for _ in range(100):
            player.apply_gravity()
            assert player.velocity <= terminal

        assert player.velocity == terminal

    def test_no_lower_clamp(self, config):
        """Gravity only caps from above; strongly upward velocity is kept."""
        player = Player(5.0, 25.0, -10.0, config)
        player.apply_gravity()
        assert player.velocity == pytest.approx(-10.0 + config.player.gravity)


class TestFlap:
    """Test flapping."""

    @pytest.mark.parametrize("start_velocity", [-5.0, -2.0, 0.0, 1.3, 2.0])
    def test_flap_sets_exact_velocity(self, config, start_velocity):
        player = Player(5.0, 25.0, start_velocity, config)
        player.apply_flap()
        assert player.velocity == config.player.flap_velocity

    def test_flap_does_not_move(self, player, config):
        player.apply_flap()
        assert player.y == config.player.start_y


class TestMovement:
    """Test vertical movement and the top clamp."""

    def test_moves_by_velocity(self, config):
        player = Player(5.0, 25.0, 1.5, config)
        player.move_velocity()
        assert player.y == pytest.approx(26.5)

    def test_moves_up_with_negative_velocity(self, config):
        player = Player(5.0, 25.0, -2.0, config)
        player.move_velocity()
        assert player.y == pytest.approx(23.0)

    @pytest.mark.parametrize("y,velocity", [
        (0.0, -2.0),
        (1.0, -2.0),
        (0.5, -0.6),
        (3.0, -100.0),
        (0.0, 0.0),
        (10.0, 2.0),
    ])
    def test_never_goes_above_top(self, config, y, velocity):
        player = Player(5.0, y, velocity, config)
        player.move_velocity()
        assert player.y >= 0.0

    def test_clamps_to_exactly_zero(self, config):
        player = Player(5.0, 1.0, -2.0, config)
        player.move_velocity()
        assert player.y == 0.0

    def test_velocity_kept_when_pinned_at_top(self, config):
        """Pinning at the ceiling does not zero velocity; gravity keeps accumulating."""
        player = Player(5.0, 0.0, -2.0, config)
        player.move_velocity()
        assert player.velocity == -2.0

        player.apply_gravity()
        player.move_velocity()
        assert player.y == 0.0
        assert player.velocity == pytest.approx(-2.0 + config.player.gravity)

    def test_x_never_changes(self, player, config):
        for _ in range(20):
            player.apply_gravity()
            player.move_velocity()
        player.apply_flap()
        player.move_velocity()
        assert player.x == config.player.start_x
