"""Frame builder — samples the board into a grid of glyphs.

Pure and PyGame-free so it can be tested headless. Cells the viewer cannot
currently see are left blank; stale terrain is never shown.
"""

from __future__ import annotations

from tallgrass.simulation.board import Board
from tallgrass.simulation.entity import Entity
from tallgrass.simulation.geometry import Grid
from tallgrass.simulation.tiles import EMPTY_GLYPH, Glyph


def build_frame(board: Board, viewer: Entity | None) -> Grid[Glyph]:
    """Render the board as seen by viewer (or everything, if None)."""
    size = board.get_size()
    frame: Grid[Glyph] = Grid(size, EMPTY_GLYPH, default=EMPTY_GLYPH)
    vision = board.get_vision(viewer) if viewer is not None else None

    for p in frame.points():
        if vision is not None and not board.can_see(vision, p):
            continue
        frame.set(p, board.get_tile(p).glyph)

    for entity in board.get_entities():
        if vision is not None and not board.can_see(vision, entity.pos):
            continue
        frame.set(entity.pos, entity.glyph)

    return frame
