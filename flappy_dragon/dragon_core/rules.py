"""
Game Rules
==========

Handles game modes, input transitions and termination conditions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

from flappy_dragon.dragon_core.config_loader import GameConfig, get_config

if TYPE_CHECKING:
    from flappy_dragon.dragon_core.obstacle import Obstacle
    from flappy_dragon.dragon_core.player import Player


class GameMode(Enum):
    """Top-level game state. Exactly one is active."""
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class KeyEvent(Enum):
    """Discrete key presses (edge-triggered, one per press)."""
    FLAP = "flap"
    QUIT = "quit"


@dataclass
class Transition:
    """Outcome of feeding one key event to the mode table."""
    mode: GameMode
    reset: bool = False
    quit: bool = False


@dataclass
class TerminationResult:
    """Result of termination check."""
    terminated: bool
    reason: str

    @staticmethod
    def none() -> "TerminationResult":
        return TerminationResult(False, "")

    @staticmethod
    def game_over(reason: str) -> "TerminationResult":
        return TerminationResult(True, reason)


class ModeRules:
    """
    Input-driven transitions.

    - Menu / GameOver + Flap: start a new game (full reset)
    - Menu / GameOver + Quit: request termination
    - Playing: input never changes the mode; flaps go to the dragon
    """

    def transition(self, mode: GameMode, key: Optional[KeyEvent]) -> Transition:
        """
        Look up the transition for a key event in a mode.

        Args:
            mode: Current mode.
            key: Key pressed this frame, or None.

        Returns:
            Transition with the resulting mode and any side effect to apply.
        """
        if mode is GameMode.PLAYING or key is None:
            return Transition(mode)

        if key is KeyEvent.FLAP:
            return Transition(GameMode.PLAYING, reset=True)
        if key is KeyEvent.QUIT:
            return Transition(mode, quit=True)
        return Transition(mode)


class TerminationRules:
    """
    Handles game termination conditions.

    - Out of bounds: dragon fell below the bottom of the screen
    - Collision: active obstacle reported a hit this frame
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize termination rules.

        Args:
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._screen_height = config.screen.height

    def check_termination(
        self,
        player: "Player",
        obstacle: "Obstacle"
    ) -> TerminationResult:
        """
        Check all termination conditions against post-update state.

        Args:
            player: The dragon after this frame's movement.
            obstacle: The obstacle after this frame's collision check.

        Returns:
            TerminationResult indicating game state.
        """
        if player.y > self._screen_height:
            return TerminationResult.game_over("out_of_bounds")

        if obstacle.collided:
            return TerminationResult.game_over("collision")

        return TerminationResult.none()


class GameRules:
    """
    Combined interface for all game rules.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize game rules.

        Args:
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self.modes = ModeRules()
        self.termination = TerminationRules(config)
