"""Tests for the simulation search engine."""

import random

import pytest

from loa.core.board import Board
from loa.core.move import Move
from loa.core.mutable_board import MutableBoard
from loa.core.notation import parse_move
from loa.engine import DefaultEngine, SearchLimits, SearchOutcome, SimulationSearchEngine
from loa.engine.search import DEFAULT_TURN_BUDGET, MOVE_TO_TIME_FACTOR


class _FirstChoiceRandom(random.Random):
    """Generator that keeps candidate order and always picks the first option."""

    def choice(self, seq):  # type: ignore[override]
        return seq[0]

    def shuffle(self, x, *args) -> None:  # type: ignore[override]
        pass


def _first_choice_engine() -> SimulationSearchEngine:
    return SimulationSearchEngine(_FirstChoiceRandom())


class TestSearchLimits:
    def test_defaults(self) -> None:
        limits = SearchLimits()
        assert limits.turn_budget == DEFAULT_TURN_BUDGET
        assert limits.time_limit_ms is None

    def test_unlimited_opponent_uses_default_budget(self) -> None:
        assert SearchLimits.for_opponent_time(None).turn_budget == DEFAULT_TURN_BUDGET

    def test_budget_scales_with_opponent_time(self) -> None:
        assert SearchLimits.for_opponent_time(2.5).turn_budget == int(2.5 * MOVE_TO_TIME_FACTOR)
        assert SearchLimits.for_opponent_time(0).turn_budget == 0

    def test_passes_through_caps(self) -> None:
        limits = SearchLimits.for_opponent_time(None, max_nodes=7, time_limit_ms=30)
        assert limits.max_nodes == 7
        assert limits.time_limit_ms == 30


class TestSimulationSearchEngine:
    def test_default_engine(self) -> None:
        assert DefaultEngine is SimulationSearchEngine

    def test_finds_immediate_win(
        self, seeded_engine: SimulationSearchEngine, immediate_win_board: Board
    ) -> None:
        result = seeded_engine.search(immediate_win_board, SearchLimits())
        assert result.outcome == SearchOutcome.IMMEDIATE_WIN
        assert result.best_move == Move(3, 1, 2, 2)

    def test_no_legal_moves(
        self, seeded_engine: SimulationSearchEngine, no_moves_board: Board
    ) -> None:
        result = seeded_engine.search(no_moves_board, SearchLimits())
        assert result.best_move is None
        assert result.outcome == SearchOutcome.NO_LEGAL_MOVES
        assert result.nodes == 0

    def test_returns_legal_move_from_start(
        self, seeded_engine: SimulationSearchEngine
    ) -> None:
        board = Board()
        result = seeded_engine.search(board, SearchLimits(max_nodes=300))
        assert result.best_move in board.legal_moves()
        assert result.outcome in (SearchOutcome.FORCED_WIN, SearchOutcome.RANDOM)

    def test_leaves_mutable_board_unchanged(
        self, seeded_engine: SimulationSearchEngine, start_board: MutableBoard
    ) -> None:
        seeded_engine.search(start_board, SearchLimits(max_nodes=300))
        assert start_board == Board()
        assert start_board.moves_made == 0

    def test_leaves_board_unchanged_after_win(
        self, seeded_engine: SimulationSearchEngine, immediate_win_board: Board
    ) -> None:
        board = MutableBoard.from_board(immediate_win_board)
        seeded_engine.search(board, SearchLimits())
        assert board == immediate_win_board
        assert board.moves_made == 0

    def test_same_seed_same_choice(self) -> None:
        limits = SearchLimits(max_nodes=400)
        first = SimulationSearchEngine(random.Random(99)).search(Board(), limits)
        second = SimulationSearchEngine(random.Random(99)).search(Board(), limits)
        assert first == second

    def test_zero_budget_plays_seeded_random_move(self) -> None:
        board = Board()
        legal = board.legal_moves()
        result = SimulationSearchEngine(random.Random(7)).search(
            board, SearchLimits(turn_budget=0)
        )
        assert result.outcome == SearchOutcome.RANDOM
        assert result.best_move == random.Random(7).choice(legal)
        assert result.nodes == len(legal)

    def test_single_turn_budget_finds_nothing_beyond_immediate(
        self, seeded_engine: SimulationSearchEngine
    ) -> None:
        result = seeded_engine.search(Board(), SearchLimits(turn_budget=1))
        assert result.outcome == SearchOutcome.RANDOM

    @pytest.mark.parametrize("max_nodes", [1, 50, 500])
    def test_respects_node_budget(
        self, seeded_engine: SimulationSearchEngine, max_nodes: int
    ) -> None:
        board = Board()
        result = seeded_engine.search(board, SearchLimits(max_nodes=max_nodes))
        assert result.nodes <= max(max_nodes, len(board.legal_moves()))
        assert result.best_move in board.legal_moves()

    def test_cancel_stops_forced_win_phase(
        self, seeded_engine: SimulationSearchEngine
    ) -> None:
        board = Board()
        result = seeded_engine.search(
            board, SearchLimits(max_nodes=None), is_cancelled=lambda: True
        )
        assert result.outcome == SearchOutcome.RANDOM
        assert result.nodes == len(board.legal_moves())

    def test_time_limit_bounds_search(
        self, seeded_engine: SimulationSearchEngine
    ) -> None:
        board = Board()
        result = seeded_engine.search(
            board, SearchLimits(max_nodes=None, time_limit_ms=20)
        )
        assert result.best_move in board.legal_moves()


class TestForcedWin:
    def test_finds_two_turn_win(self, forced_win_board: Board) -> None:
        # a1-a2 and a1-c3 come first in move order and lead nowhere.
        result = _first_choice_engine().search(
            forced_win_board, SearchLimits(turn_budget=2, max_nodes=None)
        )
        assert result.outcome == SearchOutcome.FORCED_WIN
        assert result.best_move == parse_move("a1-c1")

    def test_single_turn_budget_misses_two_turn_win(
        self, forced_win_board: Board
    ) -> None:
        result = _first_choice_engine().search(
            forced_win_board, SearchLimits(turn_budget=1, max_nodes=None)
        )
        assert result.outcome == SearchOutcome.RANDOM
        assert result.best_move == forced_win_board.legal_moves()[0]

    def test_connecting_reply_prunes_branch(
        self, opponent_connects_board: Board
    ) -> None:
        # White's first reply is always h5-h7, which joins h8.
        board = opponent_connects_board
        result = _first_choice_engine().search(
            board, SearchLimits(turn_budget=2, max_nodes=None)
        )
        assert result.outcome == SearchOutcome.RANDOM
        assert result.best_move == board.legal_moves()[0]
        # One immediate-win check and one simulated ply per candidate.
        assert result.nodes == 2 * len(board.legal_moves())

    def test_no_immediate_win_in_forced_position(
        self, seeded_engine: SimulationSearchEngine, forced_win_board: Board
    ) -> None:
        result = seeded_engine.search(forced_win_board, SearchLimits(turn_budget=1))
        assert result.outcome == SearchOutcome.RANDOM
        assert result.best_move in forced_win_board.legal_moves()
