"""Core enumerations for the Lines of Action domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Side(IntEnum):
    """Side owning a piece.

    ``BUFFER`` owns the sentinel ring around the playing area and never moves.
    """

    BLACK = 0
    WHITE = 1
    BUFFER = 2

    @property
    def opponent(self) -> Side:
        if self is Side.BUFFER:
            raise ValueError("The buffer side has no opponent")
        return Side(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    BLACK_WINS = 1
    WHITE_WINS = 2

    @classmethod
    def win_for(cls, side: Side) -> GameResult:
        if side == Side.BLACK:
            return cls.BLACK_WINS
        if side == Side.WHITE:
            return cls.WHITE_WINS
        raise ValueError(f"No result for side {side!r}")


class GameEndReason(IntEnum):
    """Why a finished game ended."""

    NONE = 0
    CONTIGUOUS = auto()
    NO_LEGAL_MOVES = auto()
    TIME_FORFEIT = auto()
