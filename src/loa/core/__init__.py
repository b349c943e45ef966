"""Core domain layer - pure Lines of Action logic with zero external dependencies.

Quick start::

    from loa.core import MutableBoard

    board = MutableBoard()
    for move in board.legal_moves():
        print(move)
"""

from loa.core.board import INITIAL_PIECES, Board
from loa.core.enums import GameEndReason, GameResult, Side
from loa.core.move import Move
from loa.core.mutable_board import MutableBoard
from loa.core.notation import (
    board_from_text,
    board_to_text,
    move_to_text,
    parse_move,
)
from loa.core.piece import Piece
from loa.core.types import (
    DIRECTIONS,
    Coord,
    column_index,
    parse_square,
    row_index,
    square_name,
)

__all__ = [
    # Enums
    "GameEndReason",
    "GameResult",
    "Side",
    # Types / helpers
    "Coord",
    "DIRECTIONS",
    "column_index",
    "parse_square",
    "row_index",
    "square_name",
    # Domain objects
    "Board",
    "INITIAL_PIECES",
    "Move",
    "MutableBoard",
    "Piece",
    # Notation
    "board_from_text",
    "board_to_text",
    "move_to_text",
    "parse_move",
]
