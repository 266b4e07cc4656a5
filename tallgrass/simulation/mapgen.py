"""Procedural world generation.

Deterministic: all randomness comes from GameState.next_random(), so the
same seed always produces the same terrain and spawns.

Terrain is built from two independent cellular-automata layers, one for
trees and one for tall grass, and written to the board with set_tile only.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tallgrass.config import (
    AUTOMATA_FILL_PCT,
    AUTOMATA_ITERATIONS,
    AUTOMATA_SPARSE_ITERATIONS,
    MAX_SPAWN_ATTEMPTS,
    PLAYER_NAME,
    STARTER_SPECIES,
    WILD_POKEMON_COUNT,
)
from tallgrass.simulation.actions import DIRECTIONS
from tallgrass.simulation.board import Board, Status
from tallgrass.simulation.entity import SPECIES, make_pokemon, make_trainer
from tallgrass.simulation.geometry import Grid, Point
from tallgrass.simulation.tiles import tile_type

if TYPE_CHECKING:
    from tallgrass.simulation.state import GameState

logger = logging.getLogger(__name__)


def populate_world(state: GameState) -> None:
    """Generate terrain, place the player and starter, spawn wildlife.

    Terrain is regenerated until the centre cell and one of its neighbours
    are free.
    """
    board = state.board
    size = board.get_size()
    start = Point(size.x // 2, size.y // 2)

    attempts = 0
    while True:
        attempts += 1
        board.clear_all_tiles()
        generate_terrain(board, state.next_random)
        if (board.get_status(start) == Status.FREE
                and _free_neighbour(board, start) is not None):
            break
    logger.info("Generated %dx%d map in %d attempt(s)", size.x, size.y, attempts)

    player = make_trainer(start, name=PLAYER_NAME, player=True)
    board.add_entity(player)
    state.player = player
    starter = make_pokemon(STARTER_SPECIES, _free_neighbour(board, start))
    board.add_entity(starter)
    board.set_trainer(starter, player)

    species = sorted(SPECIES)
    for _ in range(WILD_POKEMON_COUNT):
        pos = _random_free_cell(board, state.next_random)
        if pos is None:
            logger.warning("No free cell found for a wild Pokemon")
            break
        name = species[state.next_random(len(species))]
        board.add_entity(make_pokemon(name, pos))
        logger.debug("Spawned %s at (%d, %d)", name, pos.x, pos.y)


def generate_terrain(board: Board, next_random) -> None:
    """Write trees and tall grass onto the board.

    Args:
        board: Board to populate (cells are only ever overwritten).
        next_random: Callable returning a value in [0, bound).
    """
    walls = cellular_automata(board.get_size(), next_random)
    grass = cellular_automata(board.get_size(), next_random)
    tree = tile_type("#")
    tall_grass = tile_type('"')
    for p in walls.points():
        if walls.get(p):
            board.set_tile(p, tree)
        elif grass.get(p):
            board.set_tile(p, tall_grass)


def cellular_automata(size: Point, next_random) -> Grid[bool]:
    """Cave-like blob layer: True cells form organic clusters.

    Rule per interior cell: filled if >= 5 filled cells within distance 1,
    or (early iterations only) if <= 1 filled cell within distance 2.
    The border is always filled.
    """
    result: Grid[bool] = Grid(size, False, default=False)
    for x in range(size.x):
        result.set(Point(x, 0), True)
        result.set(Point(x, size.y - 1), True)
    for y in range(size.y):
        result.set(Point(0, y), True)
        result.set(Point(size.x - 1, y), True)

    for p in result.points():
        if next_random(100) < AUTOMATA_FILL_PCT:
            result.set(p, True)

    for i in range(AUTOMATA_ITERATIONS):
        after: Grid[bool] = Grid(size, False, default=False)
        for p in result.points():
            if result.get(p) and not _is_interior(p, size):
                after.set(p, True)
        for y in range(1, size.y - 1):
            for x in range(1, size.x - 1):
                adj1 = 0
                adj2 = 0
                for dy in range(-2, 3):
                    for dx in range(-2, 3):
                        if dx == 0 and dy == 0:
                            continue
                        # skip the corners of the 5x5 neighbourhood
                        if min(abs(dx), abs(dy)) == 2:
                            continue
                        if not result.get(Point(x + dx, y + dy)):
                            continue
                        distance = max(abs(dx), abs(dy))
                        if distance <= 1:
                            adj1 += 1
                        adj2 += 1
                filled = adj1 >= 5 or (i < AUTOMATA_SPARSE_ITERATIONS and adj2 <= 1)
                after.set(Point(x, y), filled)
        result = after

    return result


def _free_neighbour(board: Board, p: Point) -> Point | None:
    for step in DIRECTIONS:
        if board.get_status(p + step) == Status.FREE:
            return p + step
    return None


def _is_interior(p: Point, size: Point) -> bool:
    return 0 < p.x < size.x - 1 and 0 < p.y < size.y - 1


def _random_free_cell(board: Board, next_random) -> Point | None:
    size = board.get_size()
    for _ in range(MAX_SPAWN_ATTEMPTS):
        p = Point(next_random(size.x), next_random(size.y))
        if board.get_status(p) == Status.FREE:
            return p
    return None
