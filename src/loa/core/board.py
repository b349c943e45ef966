"""Board - an immutable Lines of Action position (cells + side to move)."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

from loa.core.enums import Side
from loa.core.move import Move
from loa.core.piece import Piece
from loa.core.types import (
    BOARD_SIZE,
    DIRECTIONS,
    GRID_SIZE,
    Coord,
    direction_between,
    is_border,
    is_on_board,
)

_LOGGER = logging.getLogger(__name__)

_B = Piece.BLACK
_W = Piece.WHITE
_E = Piece.EMPTY
_X = Piece.BUFFER

# INITIAL_PIECES[row][col]; row 0 and 9, column 0 and 9 form the border.
INITIAL_PIECES: tuple[tuple[Piece, ...], ...] = (
    (_X, _X, _X, _X, _X, _X, _X, _X, _X, _X),
    (_X, _E, _B, _B, _B, _B, _B, _B, _E, _X),
    (_X, _W, _E, _E, _E, _E, _E, _E, _W, _X),
    (_X, _W, _E, _E, _E, _E, _E, _E, _W, _X),
    (_X, _W, _E, _E, _E, _E, _E, _E, _W, _X),
    (_X, _W, _E, _E, _E, _E, _E, _E, _W, _X),
    (_X, _W, _E, _E, _E, _E, _E, _E, _W, _X),
    (_X, _W, _E, _E, _E, _E, _E, _E, _W, _X),
    (_X, _E, _B, _B, _B, _B, _B, _B, _E, _X),
    (_X, _X, _X, _X, _X, _X, _X, _X, _X, _X),
)

_BoardT = TypeVar("_BoardT", bound="Board")


class Board:
    """Read-only 10x10 grid (8x8 playing area plus border) and side to move.

    ``get(col, row) == contents[row][col]`` for the *contents* given at
    construction.  :class:`~loa.core.mutable_board.MutableBoard` adds move
    application and undo.
    """

    __slots__ = ("_squares", "_turn")

    def __init__(
        self,
        contents: Sequence[Sequence[Piece]] | None = None,
        turn: Side = Side.BLACK,
    ) -> None:
        squares = _flatten(INITIAL_PIECES if contents is None else contents)
        _check_turn(turn)
        self._init(squares, turn)

    def _init(self, squares: list[Piece], turn: Side) -> None:
        self._squares = squares
        self._turn = turn

    @classmethod
    def from_board(cls: type[_BoardT], board: Board, turn: Side | None = None) -> _BoardT:
        """Independent copy of *board*, optionally handing the move to *turn*."""
        if turn is None:
            turn = board._turn
        else:
            _check_turn(turn)
        new = cls.__new__(cls)
        new._init(board._squares.copy(), turn)
        return new

    def copy(self: _BoardT) -> _BoardT:
        return type(self).from_board(self)

    # -- Element access -----------------------------------------------------

    def get(self, col: int, row: int) -> Piece:
        """Occupant of column *col*, row *row* (border cells included)."""
        return self._squares[row * GRID_SIZE + col]

    @property
    def turn(self) -> Side:
        """Side that is next to move."""
        return self._turn

    def rows(self) -> tuple[tuple[Piece, ...], ...]:
        """Full 10x10 contents, indexed ``[row][col]``."""
        return tuple(
            tuple(self._squares[r * GRID_SIZE : (r + 1) * GRID_SIZE])
            for r in range(GRID_SIZE)
        )

    def pieces(self, side: Side) -> list[Coord]:
        """Coordinates of *side*'s pieces, scanned row by row."""
        stone = Piece.for_side(side)
        return [
            (col, row)
            for row in range(1, BOARD_SIZE + 1)
            for col in range(1, BOARD_SIZE + 1)
            if self._squares[row * GRID_SIZE + col] is stone
        ]

    def piece_count(self, side: Side) -> int:
        return self._squares.count(Piece.for_side(side))

    # -- Lines of action ----------------------------------------------------

    def line_pieces(
        self, col: int, row: int, direction: int
    ) -> tuple[list[Piece], list[Piece]]:
        """Occupants along the line through ``(col, row)``.

        The first list starts at the origin itself and walks along
        ``DIRECTIONS[direction]``; the second starts next to the origin and
        walks the opposite way.  Both stop at the border and include empty
        cells.
        """
        dc, dr = DIRECTIONS[direction]
        squares = self._squares
        forward = [squares[row * GRID_SIZE + col]]
        c, r = col + dc, row + dr
        while (piece := squares[r * GRID_SIZE + c]) is not Piece.BUFFER:
            forward.append(piece)
            c, r = c + dc, r + dr
        backward: list[Piece] = []
        c, r = col - dc, row - dr
        while (piece := squares[r * GRID_SIZE + c]) is not Piece.BUFFER:
            backward.append(piece)
            c, r = c - dc, r - dr
        return forward, backward

    def line_count(self, col: int, row: int, direction: int) -> int:
        """Number of pieces (either side) on the whole line through a cell."""
        forward, backward = self.line_pieces(col, row, direction)
        return sum(p is not Piece.EMPTY for p in forward) + sum(
            p is not Piece.EMPTY for p in backward
        )

    # -- Legality -----------------------------------------------------------

    def is_legal(self, move: Move) -> bool:
        """Whether *move* is legal for the side to move.

        A piece travels along one of the 8 compass directions exactly as
        many cells as there are pieces on its whole line.  It may jump its
        own pieces but not the opponent's, and may land on an opponent piece
        but not on its own.
        """
        if not (
            is_on_board(move.col0, move.row0) and is_on_board(move.col1, move.row1)
        ):
            _LOGGER.debug("Move %s illegal: off the board", move)
            return False

        direction = direction_between(move.col0, move.row0, move.col1, move.row1)
        if direction is None:
            _LOGGER.debug("Move %s illegal: not along a line of action", move)
            return False

        me = self._turn
        if self.get(move.col0, move.row0).side is not me:
            _LOGGER.debug("Move %s illegal: origin is not a %s piece", move, me)
            return False

        opponent = me.opponent
        length = move.length
        forward, backward = self.line_pieces(move.col0, move.row0, direction)
        count = 0
        for dist, piece in enumerate(forward):
            side = piece.side
            if dist < length and side is opponent:
                _LOGGER.debug("Move %s illegal: jumps an opponent piece", move)
                return False
            if dist == length and side is me:
                _LOGGER.debug("Move %s illegal: lands on a friendly piece", move)
                return False
            if side is not None:
                count += 1
        count += sum(p is not Piece.EMPTY for p in backward)

        if count != length:
            _LOGGER.debug(
                "Move %s illegal: length %d but %d pieces on the line",
                move,
                length,
                count,
            )
            return False
        return True

    def legal_moves(self) -> list[Move]:
        """All legal moves for the side to move.

        Pieces are visited row by row, directions in compass order
        N, NE, E, SE, S, SW, W, NW.
        """
        legal: list[Move] = []
        append_legal = legal.append
        for col, row in self.pieces(self._turn):
            for direction, (dc, dr) in enumerate(DIRECTIONS):
                distance = self.line_count(col, row, direction)
                move = Move(col, row, col + dc * distance, row + dr * distance)
                if self.is_legal(move):
                    append_legal(move)
        _LOGGER.debug("Legal moves for %s: %s", self._turn, legal)
        return legal

    # -- Win condition ------------------------------------------------------

    def game_over(self) -> bool:
        """True once either side has all its pieces contiguous."""
        return self.pieces_contiguous(Side.BLACK) or self.pieces_contiguous(
            Side.WHITE
        )

    def pieces_contiguous(self, side: Side) -> bool:
        """Whether *side*'s pieces form a single 8-connected group."""
        remaining = self.pieces(side)
        if len(remaining) <= 1:
            return True

        grouped = [remaining.pop(0)]
        while remaining:
            for index, piece in enumerate(remaining):
                if _touches(grouped, piece):
                    grouped.append(remaining.pop(index))
                    break
            else:
                _LOGGER.debug(
                    "%s has %d pieces outside the main group", side, len(remaining)
                )
                return False
        return True

    def winner(self) -> Side | None:
        """Side whose pieces are contiguous, checking the side that just moved first."""
        just_moved = self._turn.opponent
        if self.pieces_contiguous(just_moved):
            return just_moved
        if self.pieces_contiguous(self._turn):
            return self._turn
        return None

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._turn == other._turn and self._squares == other._squares

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        lines: list[str] = []
        for row in range(BOARD_SIZE, 0, -1):
            cells = " ".join(str(self.get(col, row)) for col in range(1, BOARD_SIZE + 1))
            lines.append(f"{row} {cells}")
        lines.append("  a b c d e f g h")
        lines.append(f"{self._turn} to move")
        return "\n".join(lines)


def _touches(group: list[Coord], piece: Coord) -> bool:
    col, row = piece
    return any(abs(col - c) <= 1 and abs(row - r) <= 1 for c, r in group)


def _check_turn(turn: Side) -> None:
    if turn not in (Side.BLACK, Side.WHITE):
        raise ValueError(f"Side to move must be black or white, not {turn!r}")


def _flatten(contents: Sequence[Sequence[Piece]]) -> list[Piece]:
    if len(contents) != GRID_SIZE or any(len(row) != GRID_SIZE for row in contents):
        raise ValueError(f"Board contents must be {GRID_SIZE}x{GRID_SIZE}")
    squares: list[Piece] = []
    for row, cells in enumerate(contents):
        for col, piece in enumerate(cells):
            if is_border(col, row) != (piece is Piece.BUFFER):
                raise ValueError(
                    f"Cell ({col}, {row}) holds {piece!r}; "
                    "only the border ring may hold buffer pieces"
                )
            squares.append(piece)
    return squares
