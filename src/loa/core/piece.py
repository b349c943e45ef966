"""Piece (square occupant) value object."""

from __future__ import annotations

from enum import Enum

from loa.core.enums import Side


class Piece(Enum):
    """Contents of a single cell, including the border sentinel."""

    BLACK = "b"
    WHITE = "w"
    EMPTY = "-"
    BUFFER = "*"

    @property
    def side(self) -> Side | None:
        """Owning side, or ``None`` for an empty cell."""
        return _PIECE_SIDES[self]

    @property
    def text_name(self) -> str:
        """One-character denotation used by the text board."""
        return self.value

    @classmethod
    def for_side(cls, side: Side) -> Piece:
        """The stone played by *side*."""
        if side == Side.BLACK:
            return cls.BLACK
        if side == Side.WHITE:
            return cls.WHITE
        raise ValueError(f"Side {side!r} has no playing piece")

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create a piece from its text character, e.g. ``'b'``."""
        try:
            return cls(char)
        except ValueError:
            raise ValueError(f"Invalid piece character: {char!r}") from None

    def __str__(self) -> str:
        return self.value


_PIECE_SIDES: dict[Piece, Side | None] = {
    Piece.BLACK: Side.BLACK,
    Piece.WHITE: Side.WHITE,
    Piece.EMPTY: None,
    Piece.BUFFER: Side.BUFFER,
}
