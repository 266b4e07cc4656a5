"""Terrain tiles.

Tiles are interned by their type character: every terrain cell holding tall
grass references the same Tile object, so identity comparisons are valid.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag

from tallgrass.config import COLOR_TALL_GRASS, COLOR_TREE

Color = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class Glyph:
    """A displayable cell: one character plus optional colors."""
    ch: str
    fg: Color | None = None
    bg: Color | None = None


EMPTY_GLYPH = Glyph(" ")


class TileFlags(IntFlag):
    NONE = 0
    BLOCKED = 1   # stops movement and sight
    OBSCURE = 2   # drains the vision budget of rays passing through


@dataclass(frozen=True, slots=True)
class Tile:
    glyph: Glyph
    flags: TileFlags
    description: str

    @property
    def blocked(self) -> bool:
        return bool(self.flags & TileFlags.BLOCKED)

    @property
    def obscure(self) -> bool:
        return bool(self.flags & TileFlags.OBSCURE)


_TILE_TYPES: dict[str, Tile] = {
    ".": Tile(Glyph("."), TileFlags.NONE, "grass"),
    '"': Tile(Glyph('"', COLOR_TALL_GRASS), TileFlags.OBSCURE, "tall grass"),
    "#": Tile(Glyph("#", COLOR_TREE), TileFlags.BLOCKED, "a tree"),
}


def tile_type(ch: str) -> Tile:
    """Look up the shared Tile for a type character. Raises KeyError."""
    return _TILE_TYPES[ch]
