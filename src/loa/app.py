"""Application entry point."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from loa.cli.session import TextSession
from loa.config import GameConfig
from loa.engine.search import DEFAULT_MAX_NODES

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loa",
        description="Play Lines of Action against humans or the machine.",
        epilog=(
            "In game, enter a move such as b1-b3 (anything after it is "
            "ignored), or one of: s (show board), p (start machine players), "
            "q (quit), t (time left)."
        ),
    )
    parser.add_argument(
        "--white",
        action="store_true",
        help="Play white (default: black)",
    )
    parser.add_argument(
        "--ai",
        type=int,
        choices=[0, 1, 2],
        default=1,
        help="Number of machine players",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Random seed, >= 0 (0: unseeded)",
    )
    parser.add_argument(
        "--time",
        type=int,
        default=0,
        help="Total seconds per side, >= 0 (0: no limit)",
    )
    parser.add_argument(
        "--debug",
        type=int,
        default=0,
        help="Verbosity, >= 0",
    )
    parser.add_argument(
        "--nodes",
        type=int,
        default=DEFAULT_MAX_NODES,
        help="Simulated plies per machine decision, >= 1",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one game from the command line."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = GameConfig.from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    _LOGGER.info("Configuration: %s", config)

    TextSession(config).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
