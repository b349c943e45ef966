"""Shared engine search models and protocol."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from loa.core.board import Board
    from loa.core.move import Move

CancelCheck = Callable[[], bool]

DEFAULT_TURN_BUDGET = 10
MOVE_TO_TIME_FACTOR = 100
DEFAULT_MAX_NODES = 2_000


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation.

    ``turn_budget`` bounds the depth of each forced-win simulation in own
    turns; ``max_nodes`` and ``time_limit_ms`` bound the total work of one
    decision.
    """

    turn_budget: int = DEFAULT_TURN_BUDGET
    max_nodes: int | None = DEFAULT_MAX_NODES
    time_limit_ms: int | None = None

    @classmethod
    def for_opponent_time(
        cls,
        opponent_time_remaining: float | None,
        *,
        max_nodes: int | None = DEFAULT_MAX_NODES,
        time_limit_ms: int | None = None,
    ) -> SearchLimits:
        """Limits whose turn budget scales with the opponent's remaining time.

        ``None`` means the opponent plays without a time limit.
        """
        if opponent_time_remaining is None:
            turns = DEFAULT_TURN_BUDGET
        else:
            turns = int(opponent_time_remaining * MOVE_TO_TIME_FACTOR)
        return cls(turn_budget=turns, max_nodes=max_nodes, time_limit_ms=time_limit_ms)


class SearchOutcome(IntEnum):
    """How the engine arrived at its move."""

    NO_LEGAL_MOVES = auto()
    IMMEDIATE_WIN = auto()
    FORCED_WIN = auto()
    RANDOM = auto()


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move | None
    outcome: SearchOutcome
    nodes: int


class IEngine(Protocol):
    """Protocol for engines used by the game layer."""

    def search(
        self,
        board: Board,
        limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult: ...
