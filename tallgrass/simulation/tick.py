"""Turn engine — decides who acts next and applies the consequences.

Entities take turns in fixed round-robin (insertion) order. An entity keeps
the turn while its turn_timer is <= 0, paying for each action it takes.
Once the timer is positive it is charged TURN_TIMER * speed and the turn
passes on, so fast entities act more often than slow ones. Ties always go
to the entity added first.

The loop is cooperative and single-threaded. It runs engine-controlled
entities to completion and stops when the player has no action to take,
leaving the scheduling index on the player so the next tick resumes there.
"""

from __future__ import annotations

import logging

from tallgrass.config import FAILED_ACTION_TURNS, MOVE_TIMER, TURN_TIMER
from tallgrass.simulation.actions import Result, act, action_for_input, plan
from tallgrass.simulation.entity import Entity
from tallgrass.simulation.state import GameState

logger = logging.getLogger(__name__)


def advance_tick(state: GameState) -> None:
    """Run turns until the player needs more input.

    Feeds at most as many queued inputs as it takes to produce one player
    action; the rest stay queued for later ticks.
    """
    assert state.player is not None and not state.player.removed, (
        "advance_tick needs a player on the board"
    )
    _consume_input(state)
    while take_turn(state):
        pass


def take_turn(state: GameState) -> bool:
    """Visit the active entity once.

    An unready entity is charged and the turn passes on. A ready entity acts
    and keeps the turn, so the next visit finds it again.

    Returns False when the player failed to act and the loop should halt;
    the scheduling index is left on the player in that case.
    """
    board = state.board
    entity = board.get_active_entity()

    if entity.turn_timer > 0:
        board.advance_entity()
        return True

    result = act(state, entity, plan(state, entity))
    if not result.success:
        if entity is state.player:
            logger.debug("Turn loop halted on player #%d", entity.entity_id)
            return False
        entity.turn_timer += TURN_TIMER * FAILED_ACTION_TURNS
    else:
        _wait(entity, result)
    return True


def _wait(entity: Entity, result: Result) -> None:
    """Pay for a successful action."""
    entity.move_timer += MOVE_TIMER * result.moves
    entity.turn_timer += TURN_TIMER * result.turns


def _consume_input(state: GameState) -> None:
    while state.input is None and state.inputs:
        key = state.inputs.popleft()
        state.input = action_for_input(key)
        if state.input is None:
            logger.debug("Ignoring unmapped input %r", key)
