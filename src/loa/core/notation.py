"""Text notation: ``c0r0-c1r1`` moves and the plain-text board."""

from __future__ import annotations

import re

from loa.core.board import Board
from loa.core.enums import Side
from loa.core.move import Move
from loa.core.piece import Piece
from loa.core.types import BOARD_SIZE, GRID_SIZE, is_border, parse_square, square_name

MOVE_PATTERN = re.compile(r"([a-h][1-8])-([a-h][1-8])")


def parse_move(text: str) -> Move:
    """Parse move text such as ``'b1-b3'``."""
    match = MOVE_PATTERN.fullmatch(text.strip())
    if match is None:
        raise ValueError(f"Invalid move text: {text!r}")
    col0, row0 = parse_square(match.group(1))
    col1, row1 = parse_square(match.group(2))
    return Move(col0, row0, col1, row1)


def move_to_text(move: Move) -> str:
    """Inverse of :func:`parse_move`."""
    return f"{square_name(move.col0, move.row0)}-{square_name(move.col1, move.row1)}"


def board_to_text(board: Board, moves_made: int = 0) -> str:
    """Render *board* as rows 8..1 of ``b``/``w``/``-`` plus turn and move count."""
    lines = ["==="]
    for row in range(BOARD_SIZE, 0, -1):
        lines.append(
            " ".join(board.get(col, row).text_name for col in range(1, BOARD_SIZE + 1))
        )
    lines.append(f"Next move: {board.turn}")
    lines.append(f"Moves: {moves_made}")
    lines.append("===")
    return "\n".join(lines)


def board_from_text(text: str, turn: Side = Side.BLACK) -> Board:
    """Build a :class:`Board` from 8 lines of cells, row 8 first.

    Cells may be separated by whitespace or written contiguously, e.g.
    ``"- b b b b b b -"`` or ``"-bbbbbb-"``.  Lines that start with ``===``
    or ``Next move``/``Moves`` (as produced by :func:`board_to_text`) are
    skipped.
    """
    grid_rows: list[str] = []
    for raw in text.strip().splitlines():
        line = raw.strip()
        if not line or line.startswith(("===", "Next move", "Moves")):
            continue
        grid_rows.append("".join(line.split()))
    if len(grid_rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in grid_rows):
        raise ValueError(f"Board text must have {BOARD_SIZE} rows of {BOARD_SIZE} cells")

    contents: list[list[Piece]] = [
        [Piece.BUFFER if is_border(col, row) else Piece.EMPTY for col in range(GRID_SIZE)]
        for row in range(GRID_SIZE)
    ]
    for offset, cells in enumerate(grid_rows):
        row = BOARD_SIZE - offset
        for col, char in enumerate(cells, start=1):
            piece = Piece.from_char(char)
            if piece is Piece.BUFFER:
                raise ValueError("Buffer pieces cannot appear inside the board")
            contents[row][col] = piece
    return Board(contents, turn)
