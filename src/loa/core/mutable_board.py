"""MutableBoard - a Board that can make and retract moves."""

from __future__ import annotations

from loa.core.board import Board
from loa.core.enums import Side
from loa.core.move import Move
from loa.core.piece import Piece
from loa.core.types import GRID_SIZE


class MutableBoard(Board):
    """Board that supports :meth:`make_move` / :meth:`retract`.

    Every applied move is pushed onto a history stack owned by this instance
    (copies start with an empty history), so each move can be undone exactly.
    """

    __slots__ = ("_history",)

    def _init(self, squares: list[Piece], turn: Side) -> None:
        super()._init(squares, turn)
        self._history: list[Move] = []

    # ── Core move operations ─────────────────────────────────────────────

    def make_move(self, move: Move) -> Move:
        """Apply *move* for the side to move and return the recorded move.

        The caller is responsible for ``is_legal(move)``.  The recorded move
        carries ``capture=True`` when the destination held an opponent piece.
        """
        me = self._turn
        squares = self._squares
        origin = move.row0 * GRID_SIZE + move.col0
        target = move.row1 * GRID_SIZE + move.col1
        mover = Piece.for_side(me)
        if squares[origin] is not mover:
            raise ValueError(f"No {me} piece at the origin of {move}")

        recorded = move.with_capture(squares[target].side is me.opponent)
        self._history.append(recorded)

        squares[target] = mover
        squares[origin] = Piece.EMPTY
        self._turn = me.opponent
        return recorded

    def retract(self) -> Move:
        """Undo the last :meth:`make_move` and return the retracted move."""
        if not self._history:
            raise ValueError("No moves to retract")
        move = self._history.pop()

        me = self._turn.opponent
        squares = self._squares
        squares[move.row1 * GRID_SIZE + move.col1] = (
            Piece.for_side(me.opponent) if move.capture else Piece.EMPTY
        )
        squares[move.row0 * GRID_SIZE + move.col0] = Piece.for_side(me)
        self._turn = me
        return move

    # ── History ──────────────────────────────────────────────────────────

    @property
    def moves_made(self) -> int:
        """Number of moves made and not retracted."""
        return len(self._history)

    def move_at(self, k: int) -> Move:
        """Move number *k* (0-based) used to reach the current position."""
        if not 0 <= k < len(self._history):
            raise IndexError(f"No move #{k}; {len(self._history)} moves made")
        return self._history[k]

    @property
    def last_move(self) -> Move | None:
        return self._history[-1] if self._history else None

    @property
    def history(self) -> tuple[Move, ...]:
        return tuple(self._history)

    def freeze(self) -> Board:
        """Immutable snapshot of the current cells and side to move."""
        return Board.from_board(self)
