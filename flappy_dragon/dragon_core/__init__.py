"""
Dragon Core - The heart of the game.

This module provides the core game simulation, the Gymnasium environment
wrapper, and all supporting systems (physics, obstacles, scoring, rules, RNG).

Main exports:
- CoreGame: Fixed-tick game simulation and mode state machine
- FlappyDragonEnv: Gymnasium environment for agents
- GameMode / KeyEvent: States and input events
- GameConfig: Configuration loaded from game_config.yaml
"""

from flappy_dragon.dragon_core.config_loader import GameConfig, load_config
from flappy_dragon.dragon_core.rng import GapRandom
from flappy_dragon.dragon_core.player import Player
from flappy_dragon.dragon_core.obstacle import Obstacle
from flappy_dragon.dragon_core.rules import GameMode, KeyEvent
from flappy_dragon.dragon_core.state_snapshot import GameSnapshot
from flappy_dragon.dragon_core.game import CoreGame, TickResult
from flappy_dragon.dragon_core.env_gym import FlappyDragonEnv

__all__ = [
    "GameConfig",
    "load_config",
    "GapRandom",
    "Player",
    "Obstacle",
    "GameMode",
    "KeyEvent",
    "GameSnapshot",
    "CoreGame",
    "TickResult",
    "FlappyDragonEnv",
]
