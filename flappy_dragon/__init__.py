"""
Flappy Dragon Package
=====================

This package contains the simulation core of Flappy Dragon: the dragon's
physics, obstacle generation, collision detection, scoring and the game-mode
state machine driven by a fixed logical tick.

- Gravity, flap and terminal velocity
- Obstacle gap placement and difficulty scaling
- Collision and termination conditions
- Menu / Playing / GameOver transitions

All tunable parameters are in game_config.yaml.
"""
