"""Interfaces for the game layer.

The controller depends on these protocols, not on concrete player or clock
classes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING, Protocol

from loa.core.enums import Side

if TYPE_CHECKING:
    from loa.core.board import Board
    from loa.core.move import Move


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # machine player is searching
    GAME_OVER = auto()


# ── Time control ─────────────────────────────────────────────────────────────


class TimeControl:
    """Total thinking time per side, in seconds."""

    __slots__ = ("initial_seconds",)

    def __init__(self, initial_seconds: float) -> None:
        if initial_seconds < 0:
            raise ValueError("Time limit must be >= 0 seconds")
        self.initial_seconds = initial_seconds

    @classmethod
    def unlimited(cls) -> TimeControl:
        """No time limit."""
        return cls(float("inf"))

    @property
    def is_unlimited(self) -> bool:
        return self.initial_seconds == float("inf")

    def __repr__(self) -> str:
        if self.is_unlimited:
            return "TimeControl(unlimited)"
        return f"TimeControl({self.initial_seconds:g}s)"


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(Protocol):
    """A game participant (human or machine)."""

    @property
    def side(self) -> Side: ...

    @property
    def name(self) -> str: ...

    @property
    def is_human(self) -> bool: ...

    def choose_move(
        self, board: Board, opponent_time_remaining: int | None = None
    ) -> Move | None:
        """Return the next move for ``board.turn``, or ``None`` if there is none.

        *opponent_time_remaining* is in whole seconds, ``None`` when the game
        has no time limit.
        """
        ...


class IClock(ABC):
    """Interface for a clock that charges each side per completed move."""

    @abstractmethod
    def start_turn(self, side: Side) -> None:
        """Begin timing *side*'s turn."""

    @abstractmethod
    def end_turn(self, side: Side) -> int:
        """Charge *side* for its finished turn and return the seconds charged."""

    @abstractmethod
    def stop(self) -> None:
        """Drop the turn being timed without charging it."""

    @abstractmethod
    def refund(self, side: Side, seconds: int) -> None:
        """Give back *seconds* charged to *side* (undo)."""

    @abstractmethod
    def remaining(self, side: Side) -> int:
        """Whole seconds left for *side* after its finished moves."""

    @abstractmethod
    def is_flag_fallen(self, side: Side) -> bool:
        """Has *side* run out of time?"""
