"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import random

import pytest

from loa.core.board import Board
from loa.core.mutable_board import MutableBoard
from loa.core.notation import board_from_text
from loa.engine.simulation_search import SimulationSearchEngine

# Black to move; c1-b2 connects black at once.
IMMEDIATE_WIN_TEXT = """
- - - - - - - w
- - - - - - - -
- - - - - - - w
- - - - - - - -
- - - - - - - -
- - - - - - - -
- - - - - - - -
b - b - - - - -
"""

# Black to move; no move connects at once, but a1-c1 then c1-d2 does.
FORCED_WIN_TEXT = """
- - - - - - - w
- - - - - - - -
- - - - - - - w
- - - - - - - -
- - - - - - - -
- - - - - - - -
- - - - - - - -
b - - - b - - -
"""

# As FORCED_WIN_TEXT with white's lower piece on h5, where h5-h7 connects white.
OPPONENT_CONNECTS_TEXT = """
- - - - - - - w
- - - - - - - -
- - - - - - - -
- - - - - - - w
- - - - - - - -
- - - - - - - -
- - - - - - - -
b - - - b - - -
"""

# Black to move; both black pieces are boxed in by white.
NO_MOVES_TEXT = """
- - - - - - - w
- - - - - - - -
- - - - - - - -
- - - - - - - -
- - - - - - - -
- - - - - - - -
w w - - - - w w
b w - - - - w b
"""


@pytest.fixture
def start_board() -> MutableBoard:
    return MutableBoard()


@pytest.fixture
def immediate_win_board() -> Board:
    return board_from_text(IMMEDIATE_WIN_TEXT)


@pytest.fixture
def no_moves_board() -> Board:
    return board_from_text(NO_MOVES_TEXT)


@pytest.fixture
def seeded_engine() -> SimulationSearchEngine:
    return SimulationSearchEngine(random.Random(1234))


@pytest.fixture
def forced_win_board() -> Board:
    return board_from_text(FORCED_WIN_TEXT)


@pytest.fixture
def opponent_connects_board() -> Board:
    return board_from_text(OPPONENT_CONNECTS_TEXT)
