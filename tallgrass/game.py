"""Game loop.

Each frame: gather key events, feed them to the simulation, run turns until
the player needs more input, then draw what the player can see.
"""

from __future__ import annotations

import logging

import pygame

from tallgrass.config import FPS
from tallgrass.input.handler import InputHandler
from tallgrass.rendering.frame import build_frame
from tallgrass.rendering.renderer import Renderer
from tallgrass.simulation.state import GameState
from tallgrass.simulation.tick import advance_tick

logger = logging.getLogger(__name__)


class Game:
    """Main game controller. Owns the game state, input, and rendering."""

    def __init__(self, screen: pygame.Surface, seed: int) -> None:
        self._screen = screen
        self._clock = pygame.time.Clock()
        self._state = GameState(seed=seed)
        self._renderer = Renderer(screen)
        self._input = InputHandler()
        logger.info("New game, seed=%d, %d entities",
                    seed, len(self._state.board.get_entities()))

    def run(self) -> None:
        """Main game loop. Returns when the window is closed or Esc is hit."""
        running = True
        while running:
            events = pygame.event.get()
            for event in events:
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                    pygame.display.toggle_fullscreen()

            if not running:
                break

            self._state.inputs.extend(self._input.process_events(events))
            player = self._state.player
            if player is None or player.removed:
                logger.info("Player left the board, quitting")
                break
            advance_tick(self._state)

            frame = build_frame(self._state.board, player)
            self._renderer.draw(frame, status=f"FPS: {self._clock.get_fps():.2f}")
            self._clock.tick(FPS)
