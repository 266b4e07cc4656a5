"""Game renderer — draws a glyph frame and a status line with PyGame."""

from __future__ import annotations

import pygame

from tallgrass.config import (
    CELL_HEIGHT,
    CELL_WIDTH,
    COLOR_BG,
    COLOR_TEXT,
    FONT_NAME,
    FONT_SIZE,
)
from tallgrass.simulation.geometry import Grid
from tallgrass.simulation.tiles import Glyph


class Renderer:
    """Draws glyph frames to the screen, centred."""

    def __init__(self, screen: pygame.Surface) -> None:
        self._screen = screen
        self._font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        # Rendered characters, keyed by (ch, fg)
        self._glyph_cache: dict[tuple[str, tuple[int, int, int]], pygame.Surface] = {}

    def draw(self, frame: Grid[Glyph], status: str = "") -> None:
        self._screen.fill(COLOR_BG)
        ox = (self._screen.get_width() - frame.width * CELL_WIDTH) // 2
        oy = (self._screen.get_height() - frame.height * CELL_HEIGHT) // 2

        for p in frame.points():
            glyph = frame.get(p)
            px = ox + p.x * CELL_WIDTH
            py = oy + p.y * CELL_HEIGHT
            if glyph.bg is not None:
                pygame.draw.rect(self._screen, glyph.bg,
                                 (px, py, CELL_WIDTH, CELL_HEIGHT))
            if glyph.ch == " ":
                continue
            self._screen.blit(self._render_char(glyph), (px, py))

        if status:
            text = self._font.render(status, True, COLOR_TEXT)
            self._screen.blit(text, (
                self._screen.get_width() - text.get_width() - 8,
                self._screen.get_height() - text.get_height() - 4,
            ))

        pygame.display.flip()

    def _render_char(self, glyph: Glyph) -> pygame.Surface:
        fg = glyph.fg if glyph.fg is not None else COLOR_TEXT
        key = (glyph.ch, fg)
        surface = self._glyph_cache.get(key)
        if surface is None:
            surface = self._font.render(glyph.ch, True, fg)
            self._glyph_cache[key] = surface
        return surface
