"""
Core Game
=========

Main game orchestrator combining the dragon, the obstacle, scoring and rules
behind a fixed logical tick.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from flappy_dragon.dragon_core.config_loader import GameConfig, get_config
from flappy_dragon.dragon_core.obstacle import Obstacle
from flappy_dragon.dragon_core.player import Player
from flappy_dragon.dragon_core.rng import GapRandom, UniformSource
from flappy_dragon.dragon_core.rules import GameMode, GameRules, KeyEvent
from flappy_dragon.dragon_core.scoring import ScoreTracker
from flappy_dragon.dragon_core.state_snapshot import GameSnapshot, SnapshotBuilder


@dataclass
class TickResult:
    """Result of one driver call."""
    mode: GameMode
    stepped: bool
    terminated: bool
    termination_reason: str
    delta_score: int
    quit_requested: bool


class CoreGame:
    """
    Main game simulation class.

    Orchestrates:
    - Mode state machine (Menu, Playing, GameOver)
    - Frame accumulator
    - Dragon physics
    - Obstacle generation, collision and respawn
    - Scoring

    The driver calls tick() once per rendered frame with the elapsed real
    time. At most one physics step runs per call, once more than one frame
    duration has accumulated; leftover time is dropped. Flaps apply on the
    call they arrive, independent of the accumulator.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[UniformSource] = None,
        seed: Optional[int] = None,
        debug: bool = False
    ):
        """
        Initialize game in the menu.

        Args:
            config: Game configuration. Uses default if None.
            rng: Uniform source for gap placement. Seeded GapRandom if None.
            seed: Seed for the default RNG.
            debug: If True, print mode changes and score events.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._rng = rng if rng is not None else GapRandom(seed)
        self._debug = debug

        self._rules = GameRules(config)
        self._scorer = ScoreTracker()
        self._snapshot_builder = SnapshotBuilder(config)

        self._frame_duration = config.timing.frame_duration_ms
        self._spawn_x = float(config.screen.width)

        self._mode = GameMode.MENU
        self._player = Player.spawn(config)
        self._obstacle = Obstacle.spawn(self._spawn_x, 0, self._rng, config)
        self._frame_time: float = 0.0
        self._frames: int = 0
        self._quit_requested = False
        self._termination_reason = ""

    @property
    def config(self) -> GameConfig:
        """Game configuration."""
        return self._config

    @property
    def mode(self) -> GameMode:
        """Active game mode."""
        return self._mode

    @property
    def player(self) -> Player:
        """The dragon."""
        return self._player

    @property
    def obstacle(self) -> Obstacle:
        """The active obstacle."""
        return self._obstacle

    @property
    def score(self) -> int:
        """Current score."""
        return self._scorer.score

    @property
    def frame_time(self) -> float:
        """Milliseconds accumulated toward the next physics step."""
        return self._frame_time

    @property
    def frames(self) -> int:
        """Physics steps run since the last reset."""
        return self._frames

    @property
    def quit_requested(self) -> bool:
        """True once a quit key was pressed in the menu or game-over screen."""
        return self._quit_requested

    @property
    def termination_reason(self) -> str:
        """Reason for the last game over, or empty string."""
        return self._termination_reason

    @property
    def is_over(self) -> bool:
        return self._mode is GameMode.GAME_OVER

    def reset(self, seed: Optional[int] = None) -> GameSnapshot:
        """
        Start a fresh game.

        Replaces the dragon and the obstacle, zeroes the score and the
        accumulator, and enters Playing.

        Args:
            seed: New seed for the default RNG. Keeps the sequence running if None.

        Returns:
            Initial game snapshot.
        """
        if seed is not None and isinstance(self._rng, GapRandom):
            self._rng.reset(seed)

        self._scorer.reset()
        self._player = Player.spawn(self._config)
        self._obstacle = Obstacle.spawn(self._spawn_x, 0, self._rng, self._config)
        self._frame_time = 0.0
        self._frames = 0
        self._termination_reason = ""
        self._set_mode(GameMode.PLAYING)

        return self.snapshot()

    def tick(self, elapsed_ms: float, key: Optional[KeyEvent] = None) -> TickResult:
        """
        Advance the game by one rendered frame.

        Args:
            elapsed_ms: Real milliseconds since the previous call.
            key: Key pressed this frame, or None.

        Returns:
            TickResult describing what happened.
        """
        score_before = self._scorer.score
        stepped = False

        if self._mode is GameMode.PLAYING:
            self._frame_time += max(0.0, elapsed_ms)
            if self._frame_time > self._frame_duration:
                self.tick_physics()
                self._frame_time = 0.0
                stepped = True

            if key is KeyEvent.FLAP and self._mode is GameMode.PLAYING:
                self._player.apply_flap()
        else:
            transition = self._rules.modes.transition(self._mode, key)
            if transition.quit:
                self._quit_requested = True
                if self._debug:
                    print(f"[DEBUG] Quit requested from {self._mode.value}")
            if transition.reset:
                self.reset()

        return TickResult(
            mode=self._mode,
            stepped=stepped,
            terminated=self.is_over,
            termination_reason=self._termination_reason,
            delta_score=self._scorer.score - score_before,
            quit_requested=self._quit_requested
        )

    def tick_physics(self) -> bool:
        """
        Run exactly one logical frame.

        Gravity, dragon movement, obstacle collision and movement, end
        check on the post-update state, then respawn and score if the
        obstacle has scrolled off.

        Returns:
            True if the game ended this frame.
        """
        if self._mode is not GameMode.PLAYING:
            return False

        self._frames += 1
        self._player.apply_gravity()
        self._player.move_velocity()
        self._obstacle.check_collision_and_move(self._player)

        result = self._rules.termination.check_termination(self._player, self._obstacle)
        if result.terminated:
            self._termination_reason = result.reason
            self._set_mode(GameMode.GAME_OVER)

        if self._obstacle.x <= 0.0:
            event = self._scorer.apply_pass(self._frames)
            self._obstacle = Obstacle.spawn(
                self._spawn_x, self._scorer.score, self._rng, self._config
            )
            if self._debug:
                print(f"[DEBUG] {event}, next gap size={self._obstacle.size:.1f}")

        return result.terminated

    def flap(self) -> None:
        """Flap now, if playing."""
        if self._mode is GameMode.PLAYING:
            self._player.apply_flap()

    def _set_mode(self, mode: GameMode) -> None:
        if self._debug and mode is not self._mode:
            reason = f" ({self._termination_reason})" if self._termination_reason else ""
            print(f"[DEBUG] Mode: {self._mode.value} -> {mode.value}{reason}")
        self._mode = mode

    def snapshot(self) -> GameSnapshot:
        """Build current game state snapshot."""
        return self._snapshot_builder.build(
            mode=self._mode,
            score=self._scorer.score,
            player=self._player,
            obstacle=self._obstacle
        )

    def get_info(self) -> Dict[str, Any]:
        """Get additional info dict for Gymnasium."""
        return {
            "score": self._scorer.score,
            "mode": self._mode.value,
            "frames": self._frames,
            "terminated_reason": self._termination_reason,
            "gap_size": self._obstacle.size,
            "obstacle_velocity": self._obstacle.vel(),
        }

    def get_render_data(self) -> Dict[str, Any]:
        """
        Get data needed for rendering.

        Returns:
            Dict with dragon, obstacle, score and mode.
        """
        screen_height = self._config.screen.height
        return {
            "screen_width": self._config.screen.width,
            "screen_height": screen_height,
            "mode": self._mode.value,
            "score": self._scorer.score,
            "player_x": self._player.x,
            "player_y": self._player.y,
            "player_velocity": self._player.velocity,
            "obstacle_x": self._obstacle.x,
            "gap_y": self._obstacle.gap_y,
            "gap_half_size": self._obstacle.half_size,
            "wall_rows": self._obstacle.wall_rows(screen_height),
            "collided": self._obstacle.collided,
        }
