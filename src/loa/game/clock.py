"""Per-side game clock, charged in whole seconds per completed move."""

from __future__ import annotations

import time
from collections.abc import Callable

from loa.core.enums import Side
from loa.game.interfaces import IClock, TimeControl

Timer = Callable[[], float]


class Clock(IClock):
    """Total thinking time per side, spent one finished move at a time.

    A turn is timed from :meth:`start_turn` to :meth:`end_turn`; the elapsed
    time is truncated to whole seconds and added to the mover's account.
    :meth:`remaining` only reflects finished moves, so it does not tick while
    a side is still thinking.
    """

    __slots__ = ("_limit", "_used", "_timer", "_turn_side", "_turn_started")

    def __init__(self, time_control: TimeControl, timer: Timer = time.monotonic) -> None:
        if time_control.is_unlimited:
            raise ValueError("An unlimited time control needs no clock")
        self._limit = int(time_control.initial_seconds)
        self._used: dict[Side, int] = {Side.BLACK: 0, Side.WHITE: 0}
        self._timer = timer
        self._turn_side: Side | None = None
        self._turn_started = 0.0

    # ── IClock implementation ────────────────────────────────────────────

    def start_turn(self, side: Side) -> None:
        self._turn_side = side
        self._turn_started = self._timer()

    def end_turn(self, side: Side) -> int:
        """Charge *side* for the turn it just finished; returns the seconds charged.

        A move made while no turn is being timed for *side* costs nothing.
        """
        seconds = 0
        if self._turn_side == side:
            seconds = int(self._timer() - self._turn_started)
        self._turn_side = None
        self._used[side] += seconds
        return seconds

    def stop(self) -> None:
        self._turn_side = None

    def refund(self, side: Side, seconds: int) -> None:
        self._used[side] = max(0, self._used[side] - seconds)

    def remaining(self, side: Side) -> int:
        return max(0, self._limit - self._used[side])

    def is_flag_fallen(self, side: Side) -> bool:
        return self.remaining(side) <= 0

    # ── Extra helpers ────────────────────────────────────────────────────

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def is_running(self) -> bool:
        return self._turn_side is not None

    @property
    def active_side(self) -> Side | None:
        return self._turn_side

    def used(self, side: Side) -> int:
        return self._used[side]
