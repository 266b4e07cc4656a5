"""Game state: the board, the player, and pending player input.

DETERMINISM RULES:
- The PRNG is part of the state; all simulation randomness (world
  generation, random walks) goes through GameState.next_random().
- Never use Python's random module in simulation code.
"""

from __future__ import annotations

from collections import deque

from tallgrass.config import MAP_SIZE
from tallgrass.simulation.actions import Action
from tallgrass.simulation.board import Board
from tallgrass.simulation.entity import Entity
from tallgrass.simulation.geometry import Point


class GameState:
    """Complete simulation state.

    Attributes:
        board: Terrain, entities, and turn order.
        player: The entity driven by input, or None.
        input: The player's next action, already translated from inputs.
        inputs: Raw input event names not yet consumed.
        rng_state: Deterministic PRNG state (LCG).
    """

    def __init__(self, seed: int = 0, board: Board | None = None) -> None:
        self.rng_state: int = seed & 0xFFFFFFFF
        self.player: Entity | None = None
        self.input: Action | None = None
        self.inputs: deque[str] = deque()
        if board is None:
            from tallgrass.simulation.mapgen import populate_world

            self.board = Board(Point(MAP_SIZE, MAP_SIZE))
            populate_world(self)
        else:
            self.board = board

    def next_random(self, bound: int) -> int:
        """Deterministic PRNG (LCG). Returns a value in [0, bound)."""
        # LCG parameters (Numerical Recipes)
        self.rng_state = (self.rng_state * 1664525 + 1013904223) & 0xFFFFFFFF
        return (self.rng_state >> 16) % bound
