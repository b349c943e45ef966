"""Simulation search: immediate wins first, then randomized forced-win probes."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from time import perf_counter

from loa.core.board import Board
from loa.core.enums import Side
from loa.core.move import Move
from loa.core.mutable_board import MutableBoard
from loa.engine.search import (
    CancelCheck,
    IEngine,
    SearchLimits,
    SearchOutcome,
    SearchResult,
)

_LOGGER = logging.getLogger(__name__)


def _never_cancelled() -> bool:
    return False


@dataclass(slots=True, frozen=True)
class _Frame:
    """One pending simulated ply: play *move* from *board* with *turns* left."""

    board: Board
    move: Move
    turns: int


class SimulationSearchEngine(IEngine):
    """Engine that looks for a win the opponent cannot stop by chance.

    Own moves are explored exhaustively; each opponent reply is a single
    uniformly random legal move.  This is an OR-search over own replies,
    not minimax: a "forced win" only holds against the sampled replies.

    All randomness is drawn from one ``random.Random`` so a seeded engine
    repeats its decisions.
    """

    __slots__ = ("_rng", "_nodes", "_deadline", "_max_nodes", "_cancel_check")

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._nodes = 0
        self._deadline: float | None = None
        self._max_nodes: int | None = None
        self._cancel_check: CancelCheck = _never_cancelled

    @property
    def rng(self) -> random.Random:
        return self._rng

    def search(
        self,
        board: Board,
        limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult:
        """Choose a move for ``board.turn``.

        A :class:`MutableBoard` is probed in place (every probe is retracted
        before returning); any other board is copied first.
        """
        self._nodes = 0
        self._max_nodes = limits.max_nodes
        self._cancel_check = is_cancelled or _never_cancelled
        self._deadline = None
        if limits.time_limit_ms is not None:
            ms = max(limits.time_limit_ms, 1)
            self._deadline = perf_counter() + (ms / 1000.0)

        me = board.turn
        legal = board.legal_moves()
        if not legal:
            _LOGGER.info("%s has no legal moves", me)
            return SearchResult(None, SearchOutcome.NO_LEGAL_MOVES, 0)

        default = self._rng.choice(legal)
        candidates = legal.copy()
        self._rng.shuffle(candidates)

        probe = board if isinstance(board, MutableBoard) else MutableBoard.from_board(board)
        winning = self._find_immediate_win(probe, candidates, me)
        if winning is not None:
            _LOGGER.info("%s plays immediate win %s", me, winning)
            return SearchResult(winning, SearchOutcome.IMMEDIATE_WIN, self._nodes)

        snapshot = Board.from_board(board)
        for move in candidates:
            if self._should_stop():
                _LOGGER.debug("Search budget spent after %d nodes", self._nodes)
                break
            if self._simulate(snapshot, move, limits.turn_budget):
                _LOGGER.info("%s found forced win starting with %s", me, move)
                return SearchResult(move, SearchOutcome.FORCED_WIN, self._nodes)
            _LOGGER.debug("No forced win starting with %s", move)

        _LOGGER.info("%s falls back to random move %s", me, default)
        return SearchResult(default, SearchOutcome.RANDOM, self._nodes)

    # ── Phases ───────────────────────────────────────────────────────────

    def _find_immediate_win(
        self, board: MutableBoard, candidates: list[Move], me: Side
    ) -> Move | None:
        """Last move in *candidates* that connects *me*'s pieces at once."""
        winning: Move | None = None
        for move in candidates:
            self._nodes += 1
            board.make_move(move)
            try:
                if board.pieces_contiguous(me):
                    winning = move
            finally:
                board.retract()
        return winning

    def _simulate(self, board: Board, first_move: Move, turns: int) -> bool:
        """Whether *first_move* leads to a win within *turns* own turns.

        Depth-first over an explicit stack; children are pushed in reverse
        so they are visited in legal-move order.
        """
        me = board.turn
        opponent = me.opponent
        stack = [_Frame(board, first_move, turns)]
        while stack:
            if self._should_stop():
                return False
            frame = stack.pop()
            if frame.turns <= 0:
                continue
            self._nodes += 1

            sim = MutableBoard.from_board(frame.board, turn=me)
            sim.make_move(frame.move)
            if sim.pieces_contiguous(me):
                return True

            replies = sim.legal_moves()
            if replies:
                sim.make_move(self._rng.choice(replies))
            if sim.pieces_contiguous(opponent):
                continue

            position = Board.from_board(sim, turn=me)
            own_moves = position.legal_moves()
            stack.extend(
                _Frame(position, move, frame.turns - 1) for move in reversed(own_moves)
            )
        return False

    # ── Budget ───────────────────────────────────────────────────────────

    def _should_stop(self) -> bool:
        if self._cancel_check():
            return True
        if self._max_nodes is not None and self._nodes >= self._max_nodes:
            return True
        return self._deadline is not None and perf_counter() >= self._deadline
