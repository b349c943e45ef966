"""Property-based tests for legality and make/retract."""

from hypothesis import given, settings
from hypothesis import strategies as st

from loa.core.board import Board
from loa.core.enums import Side
from loa.core.move import Move
from loa.core.mutable_board import MutableBoard
from loa.core.piece import Piece
from loa.core.types import BOARD_SIZE, GRID_SIZE, direction_between, is_border

_cells = st.lists(
    st.sampled_from([Piece.BLACK, Piece.WHITE, Piece.EMPTY, Piece.EMPTY]),
    min_size=BOARD_SIZE * BOARD_SIZE,
    max_size=BOARD_SIZE * BOARD_SIZE,
)
_sides = st.sampled_from([Side.BLACK, Side.WHITE])
_coords = st.integers(min_value=1, max_value=BOARD_SIZE)


def _board(cells: list[Piece], turn: Side) -> Board:
    playing = iter(cells)
    contents = [
        [Piece.BUFFER if is_border(col, row) else next(playing) for col in range(GRID_SIZE)]
        for row in range(GRID_SIZE)
    ]
    return Board(contents, turn)


boards = st.builds(_board, _cells, _sides)


class TestLegalityProperties:
    @given(boards, _coords, _coords, _coords, _coords)
    def test_rejects_every_non_line_move(
        self, board: Board, c0: int, r0: int, c1: int, r1: int
    ) -> None:
        move = Move(c0, r0, c1, r1)
        if direction_between(c0, r0, c1, r1) is None:
            assert not board.is_legal(move)

    @settings(max_examples=50)
    @given(boards)
    def test_length_equals_pieces_on_line(self, board: Board) -> None:
        for move in board.legal_moves():
            direction = direction_between(move.col0, move.row0, move.col1, move.row1)
            assert direction is not None
            assert move.length == board.line_count(move.col0, move.row0, direction)
            assert board.get(move.col1, move.row1).side is not board.turn

    @settings(max_examples=50)
    @given(boards)
    def test_make_then_retract_restores(self, board: Board) -> None:
        mutable = MutableBoard.from_board(board)
        for move in board.legal_moves():
            recorded = mutable.make_move(move)
            assert mutable.turn == board.turn.opponent
            assert recorded.capture == (board.get(*move.destination).side is not None)
            mutable.retract()
            assert mutable == board
        assert mutable.moves_made == 0
