"""GameController - the synchronous driving loop of a game.

Coordinates: players, clock, the authoritative MutableBoard.
Emits events via simple callbacks so the text session / tests can subscribe.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from loa.core.board import Board
from loa.core.enums import GameEndReason, GameResult, Side
from loa.core.move import Move
from loa.core.mutable_board import MutableBoard
from loa.game.clock import Clock, Timer
from loa.game.interfaces import GamePhase, IPlayer, TimeControl

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, MutableBoard], None]  # recorded move, board after
GameOverCallback = Callable[[GameResult, GameEndReason], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Runs one game: asks players for moves, applies them, detects the end.

    A side loses when it has no legal move on its turn or its time runs out.
    After each move the mover wins if its pieces are contiguous; otherwise
    the opponent wins if *its* pieces became contiguous (e.g. by capture).
    """

    __slots__ = (
        "_board",
        "_players",
        "_clock",
        "_charges",
        "_timer",
        "_phase",
        "_result",
        "_end_reason",
        "events",
    )

    def __init__(self, timer: Timer = time.monotonic) -> None:
        self._board = MutableBoard()
        self._players: dict[Side, IPlayer] = {}
        self._clock: Clock | None = None
        self._charges: list[int] = []  # seconds charged per applied move
        self._timer = timer
        self._phase = GamePhase.NOT_STARTED
        self._result = GameResult.IN_PROGRESS
        self._end_reason = GameEndReason.NONE
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> MutableBoard:
        return self._board

    @property
    def clock(self) -> Clock | None:
        return self._clock

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def end_reason(self) -> GameEndReason:
        return self._end_reason

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    @property
    def has_time_limit(self) -> bool:
        return self._clock is not None

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._board.turn)

    def player(self, side: Side) -> IPlayer | None:
        return self._players.get(side)

    def time_remaining(self, side: Side) -> int | None:
        """Whole seconds left for *side*, or ``None`` without a time limit."""
        if self._clock is None:
            return None
        return self._clock.remaining(side)

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(
        self,
        black: IPlayer,
        white: IPlayer,
        time_control: TimeControl | None = None,
        board: Board | None = None,
    ) -> None:
        """Set up a new game, from the standard start unless *board* is given."""
        if black.side != Side.BLACK or white.side != Side.WHITE:
            raise ValueError("Players must be given as (black, white)")
        self._players = {Side.BLACK: black, Side.WHITE: white}

        if time_control is not None and not time_control.is_unlimited:
            self._clock = Clock(time_control, self._timer)
        else:
            self._clock = None
        self._charges = []

        self._board = MutableBoard() if board is None else MutableBoard.from_board(board)
        self._result = GameResult.IN_PROGRESS
        self._end_reason = GameEndReason.NONE
        _LOGGER.info(
            "New game: %s (black) vs %s (white), %s",
            black.name,
            white.name,
            time_control or TimeControl.unlimited(),
        )
        self._set_phase(GamePhase.AWAITING_MOVE)

    def replace_player(self, player: IPlayer) -> None:
        """Seat *player* for its side (e.g. hand a human's side to a machine)."""
        self._players[player.side] = player

    def play(self) -> GameResult:
        """Play turns until the game ends."""
        while self.play_turn():
            pass
        return self._result

    def play_turn(self) -> bool:
        """Ask the player to move for one turn.

        Returns ``True`` while the game goes on afterwards.
        """
        if self.is_game_over:
            return False
        side = self._board.turn
        player = self._players.get(side)
        if player is None:
            raise RuntimeError(f"No player seated for {side}")

        if not self._board.legal_moves():
            _LOGGER.info("%s has no legal moves", side)
            self._finish(GameResult.win_for(side.opponent), GameEndReason.NO_LEGAL_MOVES)
            return False

        self._set_phase(GamePhase.AWAITING_MOVE if player.is_human else GamePhase.THINKING)
        if self._clock is not None and self._clock.active_side != side:
            self._clock.start_turn(side)

        move = player.choose_move(self._board, self.time_remaining(side.opponent))
        if move is None:
            self._finish(GameResult.win_for(side.opponent), GameEndReason.NO_LEGAL_MOVES)
            return False
        if not self.submit_move(move) and not self.is_game_over:
            raise ValueError(f"{player.name} proposed illegal move {move}")
        return not self.is_game_over

    def submit_move(self, move: Move) -> bool:
        """Apply *move* for the side to move. Returns True if legal and applied."""
        if self.is_game_over or self._phase == GamePhase.NOT_STARTED:
            return False
        if not self._board.is_legal(move):
            _LOGGER.debug("Rejected illegal move %s", move)
            return False

        side = self._board.turn
        if self._clock is not None:
            charged = self._clock.end_turn(side)
            if self._clock.is_flag_fallen(side):
                _LOGGER.info("%s has run out of time", side)
                self._finish(GameResult.win_for(side.opponent), GameEndReason.TIME_FORFEIT)
                return False
            self._charges.append(charged)
            _LOGGER.debug(
                "%s charged %ds, %ds left", side, charged, self._clock.remaining(side)
            )

        recorded = self._board.make_move(move)
        _LOGGER.info("%s plays %s", side, recorded)
        for cb in self.events.on_move:
            cb(recorded, self._board)

        winner = self._board.winner()
        if winner is not None:
            self._finish(GameResult.win_for(winner), GameEndReason.CONTIGUOUS)
            return True

        self._set_phase(GamePhase.AWAITING_MOVE)
        return True

    def undo_move(self) -> bool:
        """Retract the last move and refund the time it was charged."""
        if self.is_game_over or self._board.moves_made == 0:
            return False
        move = self._board.retract()
        if self._clock is not None:
            self._clock.stop()
            if self._charges:
                self._clock.refund(self._board.turn, self._charges.pop())
        _LOGGER.info("Retracted %s", move)
        self._set_phase(GamePhase.AWAITING_MOVE)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _finish(self, result: GameResult, reason: GameEndReason) -> None:
        if self._clock is not None:
            self._clock.stop()
        self._result = result
        self._end_reason = reason
        _LOGGER.info("Game over: %s (%s)", result.name, reason.name)
        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result, reason)

    def _set_phase(self, phase: GamePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
