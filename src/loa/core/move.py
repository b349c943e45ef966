"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from loa.core.types import is_on_board, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """A piece moving from ``(col0, row0)`` to ``(col1, row1)``.

    ``capture`` stays ``False`` until the move is applied; the board records
    a copy with the flag set when the destination held an opponent piece.
    """

    col0: int
    row0: int
    col1: int
    row1: int
    capture: bool = False

    @property
    def origin(self) -> tuple[int, int]:
        return self.col0, self.row0

    @property
    def destination(self) -> tuple[int, int]:
        return self.col1, self.row1

    @property
    def length(self) -> int:
        """Number of cells travelled (Chebyshev distance)."""
        return max(abs(self.col1 - self.col0), abs(self.row1 - self.row0))

    def with_capture(self, capture: bool = True) -> Move:
        return replace(self, capture=capture)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{_cell(self.col0, self.row0)}-{_cell(self.col1, self.row1)}"


def _cell(col: int, row: int) -> str:
    if is_on_board(col, row):
        return square_name(col, row)
    return f"({col},{row})"
