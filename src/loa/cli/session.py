"""Interactive text session.

Reads moves and commands from a text stream and drives a
:class:`~loa.game.controller.GameController`. Input lines are either a move
(``b1-b3``, anything after it is commentary) or a command selected by the
first character:

    s   show the board
    p   start the configured machine players
    q   quit
    t   show the remaining time of the side to move
"""

from __future__ import annotations

import logging
import re
import sys
from typing import TextIO

from loa.config import GameConfig
from loa.core.board import Board
from loa.core.enums import GameEndReason, GameResult, Side
from loa.core.move import Move
from loa.core.mutable_board import MutableBoard
from loa.core.notation import board_to_text, parse_move
from loa.engine.search import IEngine
from loa.engine.simulation_search import SimulationSearchEngine
from loa.game.controller import GameController
from loa.game.player import HumanPlayer, MachinePlayer

_LOGGER = logging.getLogger(__name__)

_MOVE_LINE = re.compile(r"\s*([a-h][1-8]-[a-h][1-8])")


class _QuitRequested(Exception):
    """Raised from the prompt to unwind the game loop on ``q``."""


class TextSession:
    """One game played over a pair of text streams."""

    __slots__ = (
        "_config",
        "_in",
        "_out",
        "_engine",
        "_controller",
        "_machines_active",
    )

    def __init__(
        self,
        config: GameConfig | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        engine: IEngine | None = None,
    ) -> None:
        self._config = config if config is not None else GameConfig()
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._engine = (
            engine if engine is not None else SimulationSearchEngine(self._config.rng())
        )
        self._controller = GameController()
        self._controller.events.on_move.append(self._on_move)
        self._controller.events.on_game_over.append(self._on_game_over)
        self._machines_active = False

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def machines_active(self) -> bool:
        return self._machines_active

    def run(self, board: Board | None = None) -> GameResult | None:
        """Play a game to the end. Returns ``None`` when the user quits."""
        _LOGGER.info("Starting session: %s", self._config)
        self._machines_active = False
        self._controller.new_game(
            black=HumanPlayer(Side.BLACK, move_source=self._read_move),
            white=HumanPlayer(Side.WHITE, move_source=self._read_move),
            time_control=self._config.time_control(),
            board=board,
        )
        try:
            return self._controller.play()
        except _QuitRequested:
            self._write("Game terminated.")
            return None

    # -- Input ---------------------------------------------------------------

    def _read_move(self, board: Board) -> Move | None:
        """Prompt until a legal move is entered or a machine supplies one."""
        while True:
            line = self._prompt(board.turn)
            match = _MOVE_LINE.match(line)
            if match is not None:
                move = parse_move(match.group(1))
                if board.is_legal(move):
                    return move
                self._write("Illegal move. Try again.")
                continue

            command = line.strip()[:1]
            if not command:
                continue
            if command == "s":
                moves_made = board.moves_made if isinstance(board, MutableBoard) else 0
                self._write(board_to_text(board, moves_made))
            elif command == "p":
                machine = self._activate_machines()
                if machine is not None:
                    return machine.choose_move(
                        board, self._controller.time_remaining(board.turn.opponent)
                    )
            elif command == "q":
                raise _QuitRequested
            elif command == "t":
                self._show_time(board.turn)
            else:
                _LOGGER.debug("Ignoring unknown command %r", line)

    def _prompt(self, side: Side) -> str:
        self._out.write(f"{side}'s command > ")
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise _QuitRequested
        _LOGGER.debug("Received input: %r", line)
        return line.rstrip("\n")

    # -- Commands ------------------------------------------------------------

    def _activate_machines(self) -> MachinePlayer | None:
        """Seat machine players; return the one to move now, if any."""
        if not self._machines_active:
            self._machines_active = True
            for side in self._config.machine_sides():
                self._controller.replace_player(
                    MachinePlayer(
                        side,
                        f"Machine ({side})",
                        self._engine,
                        max_nodes=self._config.max_nodes,
                    )
                )
            _LOGGER.info("Machine players started for %s", self._config.machine_sides())
        current = self._controller.current_player
        if isinstance(current, MachinePlayer):
            return current
        return None

    def _show_time(self, side: Side) -> None:
        remaining = self._controller.time_remaining(side)
        if remaining is None:
            self._write("No time limit was set.")
        else:
            self._write(f"{side} has {remaining} seconds left")

    # -- Output --------------------------------------------------------------

    def _write(self, text: str) -> None:
        self._out.write(text + "\n")
        self._out.flush()

    def _on_move(self, move: Move, board: MutableBoard) -> None:
        mover = self._controller.player(board.turn.opponent)
        if mover is not None and not mover.is_human:
            self._write(f"{_title(board.turn.opponent)} moves {move}.")

    def _on_game_over(self, result: GameResult, reason: GameEndReason) -> None:
        winner = Side.BLACK if result == GameResult.BLACK_WINS else Side.WHITE
        loser = winner.opponent
        if reason == GameEndReason.NO_LEGAL_MOVES:
            self._write(f"Player {loser} has no legal moves.")
        elif reason == GameEndReason.TIME_FORFEIT:
            self._write(f"{_title(loser)} has run out of time.")
        self._write(f"{_title(winner)} wins.")


def _title(side: Side) -> str:
    return str(side).capitalize()
