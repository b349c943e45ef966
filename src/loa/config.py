"""Game configuration built from command-line arguments."""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass

from loa.core.enums import Side
from loa.engine.search import DEFAULT_MAX_NODES
from loa.game.interfaces import TimeControl

_DEBUG_LEVELS = (logging.WARNING, logging.INFO)


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Parameters of one text-session game.

    Attributes:
        num_human: Number of human players (0-2).
        human_side: Side played by the first human ("you").
        seed: Random seed; 0 means an unseeded generator.
        time_limit: Seconds per side for the whole game; 0 means unlimited.
        debug: Verbosity, mapped onto logging levels by :meth:`log_level`.
        max_nodes: Simulated plies per machine decision.
    """

    num_human: int = 1
    human_side: Side = Side.BLACK
    seed: int = 0
    time_limit: float = 0
    debug: int = 0
    max_nodes: int = DEFAULT_MAX_NODES

    def __post_init__(self) -> None:
        if not 0 <= self.num_human <= 2:
            raise ValueError("Number of human players must be between 0 and 2")
        if self.human_side not in (Side.BLACK, Side.WHITE):
            raise ValueError(f"Invalid side: {self.human_side!r}")
        if self.seed < 0:
            raise ValueError("Seed must be >= 0")
        if self.time_limit < 0:
            raise ValueError("Time limit must be >= 0")
        if self.debug < 0:
            raise ValueError("Debug level must be >= 0")
        if self.max_nodes < 1:
            raise ValueError("Node budget must be >= 1")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> GameConfig:
        return cls(
            num_human=2 - args.ai,
            human_side=Side.WHITE if args.white else Side.BLACK,
            seed=args.seed,
            time_limit=args.time,
            debug=args.debug,
            max_nodes=args.nodes,
        )

    # -- Derived values ------------------------------------------------------

    @property
    def log_level(self) -> int:
        if self.debug < len(_DEBUG_LEVELS):
            return _DEBUG_LEVELS[self.debug]
        return logging.DEBUG

    def rng(self) -> random.Random:
        """A generator seeded with :attr:`seed`, or from OS entropy when 0."""
        if self.seed == 0:
            return random.Random()
        return random.Random(self.seed)

    def time_control(self) -> TimeControl:
        if self.time_limit == 0:
            return TimeControl.unlimited()
        return TimeControl(self.time_limit)

    def machine_sides(self) -> tuple[Side, ...]:
        """Sides handed to machine players once they are started."""
        if self.num_human == 0:
            return (Side.BLACK, Side.WHITE)
        if self.num_human == 1:
            return (self.human_side.opponent,)
        return ()
