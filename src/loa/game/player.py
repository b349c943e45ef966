"""Concrete player implementations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from loa.core.enums import Side
from loa.engine.search import DEFAULT_MAX_NODES, IEngine, SearchLimits, SearchResult
from loa.engine.simulation_search import SimulationSearchEngine
from loa.game.interfaces import IPlayer

if TYPE_CHECKING:
    from loa.core.board import Board
    from loa.core.move import Move

_LOGGER = logging.getLogger(__name__)

MoveSource = Callable[["Board"], "Move | None"]


class HumanPlayer(IPlayer):
    """A human participant whose moves come from an external *move_source*.

    The source (e.g. the text session) is handed the current board and must
    return a legal move, or ``None`` when the side has no legal moves.
    """

    __slots__ = ("_side", "_name", "_move_source")

    def __init__(
        self,
        side: Side,
        name: str = "",
        move_source: MoveSource | None = None,
    ) -> None:
        self._side = side
        self._name = name or f"Player ({side})"
        self._move_source = move_source

    @property
    def side(self) -> Side:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def choose_move(
        self, board: Board, opponent_time_remaining: int | None = None
    ) -> Move | None:
        if self._move_source is None:
            raise RuntimeError(f"{self._name} has no move source")
        return self._move_source(board)


class MachinePlayer(IPlayer):
    """An automated participant backed by a search engine.

    Args:
        side: Side the machine plays.
        name: Display name.
        engine: Search engine; a fresh :class:`SimulationSearchEngine` when
            omitted.
        max_nodes: Work cap per decision passed to the engine.
        time_limit_ms: Optional wall-clock cap per decision.
    """

    __slots__ = ("_side", "_name", "_engine", "_max_nodes", "_time_limit_ms", "last_result")

    def __init__(
        self,
        side: Side,
        name: str = "Machine",
        engine: IEngine | None = None,
        *,
        max_nodes: int | None = DEFAULT_MAX_NODES,
        time_limit_ms: int | None = None,
    ) -> None:
        self._side = side
        self._name = name
        self._engine = engine if engine is not None else SimulationSearchEngine()
        self._max_nodes = max_nodes
        self._time_limit_ms = time_limit_ms
        self.last_result: SearchResult | None = None

    @property
    def side(self) -> Side:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def engine(self) -> IEngine:
        return self._engine

    def choose_move(
        self, board: Board, opponent_time_remaining: int | None = None
    ) -> Move | None:
        if board.turn != self._side:
            raise ValueError(f"{self._name} plays {self._side}, not {board.turn}")
        limits = SearchLimits.for_opponent_time(
            opponent_time_remaining,
            max_nodes=self._max_nodes,
            time_limit_ms=self._time_limit_ms,
        )
        result = self._engine.search(board, limits)
        self.last_result = result
        _LOGGER.debug(
            "%s chose %s (%s, %d nodes)",
            self._name,
            result.best_move,
            result.outcome.name,
            result.nodes,
        )
        return result.best_move
