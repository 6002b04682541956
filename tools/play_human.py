"""
Human Play Mode
================

Play Flappy Dragon in a pygame window drawn as an 80x50 cell console.

Controls:
    - Space: Start / flap / play again
    - ESC: Quit (from the menu or the game-over screen)

Usage:
    python -m tools.play_human [--seed SEED] [--scale PIXELS] [--fps FPS] [--debug]
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

from flappy_dragon.dragon_core.config_loader import load_config, GameConfig
from flappy_dragon.dragon_core.game import CoreGame
from flappy_dragon.dragon_core.rules import GameMode, KeyEvent


NAVY = (0, 0, 128)
BLACK = (0, 0, 0)
GRAY = (128, 128, 128)
GREEN = (0, 255, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)


class ConsoleRenderer:
    """
    Draws the game as a grid of glyph cells.
    Text goes on a background layer, the dragon and walls on top.
    """

    def __init__(self, config: GameConfig, cell_size: int):
        """Initialize renderer for the configured console size."""
        self._config = config
        self._cell = cell_size
        self._cols = config.screen.width
        self._rows = config.screen.height

        pygame.font.init()
        self._font = pygame.font.Font(None, int(cell_size * 1.4))
        self._glyph_font = pygame.font.Font(None, int(cell_size * 2.2))

        self._dragon_glyph = self._glyph_font.render("@", True, GREEN)
        self._wall_glyph = self._font.render("|", True, BLACK)

    @property
    def window_size(self) -> tuple:
        # One extra row so the bottom wall row at y == height is visible
        return (self._cols * self._cell, (self._rows + 1) * self._cell)

    def render(self, screen: pygame.Surface, render_data: dict) -> None:
        """Render the complete scene for the current mode."""
        mode = render_data["mode"]
        if mode == GameMode.MENU.value:
            self._draw_menu(screen)
        elif mode == GameMode.GAME_OVER.value:
            self._draw_game_over(screen, render_data["score"])
        else:
            self._draw_playing(screen, render_data)

    def _print(self, screen: pygame.Surface, col: int, row: int, text: str, color=WHITE) -> None:
        surface = self._font.render(text, True, color)
        screen.blit(surface, (col * self._cell, row * self._cell))

    def _print_centered(self, screen: pygame.Surface, row: int, text: str, color=WHITE) -> None:
        surface = self._font.render(text, True, color)
        x = (screen.get_width() - surface.get_width()) // 2
        screen.blit(surface, (x, row * self._cell))

    def _draw_menu(self, screen: pygame.Surface) -> None:
        screen.fill(BLACK)
        self._print_centered(screen, 5, "Welcome to Flappy Dragon!", YELLOW)
        self._print_centered(screen, 6, "Press [Space] to start.")
        self._print_centered(screen, 7, "Press [Esc] to quit.")

    def _draw_game_over(self, screen: pygame.Surface, score: int) -> None:
        screen.fill(BLACK)
        self._print_centered(screen, 5, "You Died!", YELLOW)
        self._print_centered(screen, 6, f"Score: {score}")
        self._print_centered(screen, 7, "Press [Space] to play again.")
        self._print_centered(screen, 8, "Press [Esc] to quit.")

    def _draw_playing(self, screen: pygame.Surface, render_data: dict) -> None:
        screen.fill(NAVY)
        self._print(screen, 0, 0, "Press [Space] to flap.")
        self._print(screen, 0, 1, f"Score: {render_data['score']}")

        self._draw_walls(screen, render_data)
        self._draw_dragon(screen, render_data)

    def _draw_walls(self, screen: pygame.Surface, render_data: dict) -> None:
        x_px = int(render_data["obstacle_x"] * self._cell)
        for row in render_data["wall_rows"]:
            cell_rect = pygame.Rect(x_px, row * self._cell, self._cell * 2, self._cell)
            pygame.draw.rect(screen, GRAY, cell_rect)
            screen.blit(self._wall_glyph, self._wall_glyph.get_rect(center=cell_rect.center))

    def _draw_dragon(self, screen: pygame.Surface, render_data: dict) -> None:
        # Tilt follows velocity: nose down when falling, up when flapping
        angle = -render_data["player_velocity"] * 10.0
        glyph = pygame.transform.rotate(self._dragon_glyph, angle)
        center = (
            int((render_data["player_x"] + 0.5) * self._cell),
            int((render_data["player_y"] + 0.5) * self._cell),
        )
        screen.blit(glyph, glyph.get_rect(center=center))


class HumanPlayer:
    """
    Interactive game shell: polls keys, feeds the core one tick per
    rendered frame and draws the result.
    """

    def __init__(
        self,
        config: GameConfig,
        seed: Optional[int] = None,
        cell_size: int = 12,
        target_fps: int = 60,
        debug: bool = False
    ):
        if not PYGAME_AVAILABLE:
            raise ImportError("pygame is required for human play mode")

        self._config = config
        self._target_fps = target_fps

        self._game = CoreGame(config=config, seed=seed, debug=debug)

        pygame.init()
        self._renderer = ConsoleRenderer(config, cell_size)
        self._screen = pygame.display.set_mode(self._renderer.window_size)
        pygame.display.set_caption("Flappy Dragon")
        self._clock = pygame.time.Clock()

        self._running = True
        self._best_score = 0

    def run(self) -> int:
        """Run the game loop. Returns best score of the session."""
        print("=== Flappy Dragon ===")
        print("Space to flap, ESC to quit from the menu")
        print()

        while self._running:
            elapsed_ms = self._clock.tick(self._target_fps)
            key = self._poll_key()

            result = self._game.tick(float(elapsed_ms), key)

            if result.delta_score > 0:
                print(f"  +{result.delta_score} (Total: {self._game.score})")
            if result.terminated and self._game.score >= self._best_score:
                self._best_score = self._game.score
            if result.quit_requested:
                self._running = False
                break

            self._renderer.render(self._screen, self._game.get_render_data())
            pygame.display.flip()

        pygame.quit()
        return self._best_score

    def _poll_key(self) -> Optional[KeyEvent]:
        """First key press of this frame, edge-triggered."""
        key = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.KEYDOWN and key is None:
                if event.key == pygame.K_SPACE:
                    key = KeyEvent.FLAP
                elif event.key == pygame.K_ESCAPE:
                    key = KeyEvent.QUIT
        return key


def main():
    parser = argparse.ArgumentParser(description="Play Flappy Dragon interactively")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--scale", type=int, default=12, help="Pixels per console cell (default: 12)")
    parser.add_argument("--fps", type=int, default=60, help="Target FPS")
    parser.add_argument("--debug", action="store_true", help="Print mode changes and score events")

    args = parser.parse_args()

    try:
        config = load_config()
        player = HumanPlayer(
            config=config,
            seed=args.seed,
            cell_size=args.scale,
            target_fps=args.fps,
            debug=args.debug
        )
        score = player.run()
        print(f"\nBest Score: {score}")
        return 0
    except ImportError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
