"""Shared test fixtures for Tallgrass."""

from __future__ import annotations

import pytest

from tallgrass.simulation.board import Board
from tallgrass.simulation.geometry import Point
from tallgrass.simulation.state import GameState


@pytest.fixture
def open_board() -> Board:
    """An 11x11 all-grass board with a radius-5 field of vision."""
    return Board(Point(11, 11), fov_radius=5)


@pytest.fixture
def game_state() -> GameState:
    """A freshly generated world with seed 42."""
    return GameState(seed=42)
