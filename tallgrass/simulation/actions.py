"""Actions: what an entity intends to do on its turn, and whether it worked.

Actions are immutable and comparable. Expected failures (walking into a
tree, waiting on input that has not arrived) are reported as
Result(success=False), never raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tallgrass.simulation.board import Status
from tallgrass.simulation.entity import Entity
from tallgrass.simulation.geometry import ORIGIN, Point

if TYPE_CHECKING:
    from tallgrass.simulation.state import GameState


@dataclass(frozen=True, slots=True)
class IdleAction:
    pass


@dataclass(frozen=True, slots=True)
class MoveAction:
    step: Point


@dataclass(frozen=True, slots=True)
class WaitForInputAction:
    pass


Action = IdleAction | MoveAction | WaitForInputAction


@dataclass(frozen=True, slots=True)
class Result:
    """Outcome of an action. moves/turns are the energy it costs."""
    success: bool
    moves: int = 0
    turns: int = 0


# 8 compass directions, clockwise from north
DIRECTIONS: tuple[Point, ...] = (
    Point(0, -1),
    Point(1, -1),
    Point(1, 0),
    Point(1, 1),
    Point(0, 1),
    Point(-1, 1),
    Point(-1, 0),
    Point(-1, -1),
)

_INPUT_ACTIONS: dict[str, Action] = {
    "h": MoveAction(Point(-1, 0)),
    "j": MoveAction(Point(0, 1)),
    "k": MoveAction(Point(0, -1)),
    "l": MoveAction(Point(1, 0)),
    "y": MoveAction(Point(-1, -1)),
    "u": MoveAction(Point(1, -1)),
    "b": MoveAction(Point(-1, 1)),
    "n": MoveAction(Point(1, 1)),
    "Left": MoveAction(Point(-1, 0)),
    "Down": MoveAction(Point(0, 1)),
    "Up": MoveAction(Point(0, -1)),
    "Right": MoveAction(Point(1, 0)),
    ".": IdleAction(),
}


def action_for_input(key: str) -> Action | None:
    """Translate an input event name into a player action, if it has one."""
    return _INPUT_ACTIONS.get(key)


def plan(state: GameState, entity: Entity) -> Action:
    """Choose an entity's next action.

    The player uses (and consumes) its queued input, or waits for some.
    Everything else walks in a uniformly random direction.
    """
    if entity is state.player:
        action = state.input
        if action is None:
            return WaitForInputAction()
        state.input = None
        return action
    return MoveAction(DIRECTIONS[state.next_random(len(DIRECTIONS))])


def act(state: GameState, entity: Entity, action: Action) -> Result:
    """Execute an action against the board."""
    if isinstance(action, IdleAction):
        return Result(success=True, turns=1)
    if isinstance(action, MoveAction):
        if action.step == ORIGIN:
            return Result(success=False)
        target = entity.pos + action.step
        if state.board.get_status(target) != Status.FREE:
            return Result(success=False)
        state.board.move_entity(entity, target)
        return Result(success=True, moves=1, turns=1)
    if isinstance(action, WaitForInputAction):
        return Result(success=False)
    raise TypeError(f"Unknown action: {action!r}")
