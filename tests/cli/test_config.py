"""Tests for GameConfig."""

import logging

import pytest

from loa.app import build_parser
from loa.config import GameConfig
from loa.core.enums import Side


class TestGameConfig:
    def test_defaults(self) -> None:
        config = GameConfig()
        assert config.num_human == 1
        assert config.human_side == Side.BLACK
        assert config.time_control().is_unlimited

    def test_from_args(self) -> None:
        args = build_parser().parse_args(
            ["--white", "--ai", "2", "--seed", "5", "--time", "30"]
            + ["--debug", "1", "--nodes", "50"]
        )
        config = GameConfig.from_args(args)
        assert config == GameConfig(
            num_human=0,
            human_side=Side.WHITE,
            seed=5,
            time_limit=30,
            debug=1,
            max_nodes=50,
        )

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"num_human": 3},
            {"num_human": -1},
            {"seed": -1},
            {"time_limit": -5},
            {"debug": -1},
            {"human_side": Side.BUFFER},
            {"max_nodes": 0},
        ],
    )
    def test_invalid_values(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            GameConfig(**kwargs)

    def test_human_count_message(self) -> None:
        with pytest.raises(ValueError, match="human players"):
            GameConfig(num_human=3)

    def test_log_levels(self) -> None:
        assert GameConfig(debug=0).log_level == logging.WARNING
        assert GameConfig(debug=1).log_level == logging.INFO
        assert GameConfig(debug=2).log_level == logging.DEBUG
        assert GameConfig(debug=9).log_level == logging.DEBUG

    def test_seeded_rng_repeats(self) -> None:
        first = GameConfig(seed=17).rng()
        second = GameConfig(seed=17).rng()
        assert [first.random() for _ in range(3)] == [second.random() for _ in range(3)]

    def test_time_control(self) -> None:
        assert GameConfig(time_limit=90).time_control().initial_seconds == 90

    def test_machine_sides(self) -> None:
        assert GameConfig(num_human=2).machine_sides() == ()
        assert GameConfig(num_human=1).machine_sides() == (Side.WHITE,)
        assert GameConfig(num_human=1, human_side=Side.WHITE).machine_sides() == (Side.BLACK,)
        assert GameConfig(num_human=0).machine_sides() == (Side.BLACK, Side.WHITE)
