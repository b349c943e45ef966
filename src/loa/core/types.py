"""Coordinate model and helpers.

Cells are addressed by 1-indexed ``(column, row)`` pairs.  The 8x8 playing
area spans 1-8 on both axes; index 0 and 9 hold the border ring::

    column 1 = 'a', ..., column 8 = 'h'
    row 1 = '1',    ..., row 8 = '8'
"""

from __future__ import annotations

from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]  # (column, row)

BOARD_SIZE = 8
GRID_SIZE = BOARD_SIZE + 2
COLUMN_LETTERS = "abcdefgh"
ROW_DIGITS = "12345678"

# Compass unit vectors (column delta, row delta), clockwise from north.
DIRECTIONS: tuple[Coord, ...] = (
    (0, 1),  # N
    (1, 1),  # NE
    (1, 0),  # E
    (1, -1),  # SE
    (0, -1),  # S
    (-1, -1),  # SW
    (-1, 0),  # W
    (-1, 1),  # NW
)


def is_on_board(col: int, row: int) -> bool:
    """Whether ``(col, row)`` lies inside the playing area."""
    return 1 <= col <= BOARD_SIZE and 1 <= row <= BOARD_SIZE


def is_border(col: int, row: int) -> bool:
    """Whether ``(col, row)`` is a cell of the sentinel ring."""
    return col in (0, GRID_SIZE - 1) or row in (0, GRID_SIZE - 1)


def column_index(letter: str) -> int:
    """Column number 1-8 for *letter* ``'a'``-``'h'``."""
    if len(letter) != 1 or letter not in COLUMN_LETTERS:
        raise ValueError(f"Invalid column letter: {letter!r}")
    return COLUMN_LETTERS.index(letter) + 1


def row_index(digit: str) -> int:
    """Row number 1-8 for *digit* ``'1'``-``'8'``."""
    if len(digit) != 1 or digit not in ROW_DIGITS:
        raise ValueError(f"Invalid row digit: {digit!r}")
    return int(digit)


def square_name(col: int, row: int) -> str:
    """Human-readable name, e.g. ``(2, 1)`` -> ``'b1'``."""
    if not is_on_board(col, row):
        raise ValueError(f"Cell off the board: ({col}, {row})")
    return COLUMN_LETTERS[col - 1] + str(row)


def parse_square(name: str) -> Coord:
    """Parse a square name, e.g. ``'b1'`` -> ``(2, 1)``."""
    if len(name) != 2:
        raise ValueError(f"Invalid square name: {name!r}")
    return column_index(name[0]), row_index(name[1])


def direction_between(col0: int, row0: int, col1: int, row1: int) -> int | None:
    """Index into :data:`DIRECTIONS` pointing from the first cell to the second.

    ``None`` when the cells coincide or do not share a row, column or
    diagonal.
    """
    dc = col1 - col0
    dr = row1 - row0
    if dc == 0 and dr == 0:
        return None
    if dc != 0 and dr != 0 and abs(dc) != abs(dr):
        return None
    unit = ((dc > 0) - (dc < 0), (dr > 0) - (dr < 0))
    return DIRECTIONS.index(unit)
