"""Tests for the command-line entry point."""

import io

import pytest

from loa.app import build_parser, main
from loa.engine.search import DEFAULT_MAX_NODES


class TestParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert not args.white
        assert args.ai == 1
        assert args.seed == 0
        assert args.time == 0
        assert args.debug == 0
        assert args.nodes == DEFAULT_MAX_NODES


class TestMain:
    @pytest.mark.parametrize(
        "argv",
        [
            ["--ai", "3"],
            ["--seed", "-1"],
            ["--time", "-2"],
            ["--debug", "-1"],
            ["--nodes", "0"],
            ["--bogus"],
        ],
    )
    def test_invalid_arguments_exit_with_usage(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 2

    def test_quit_immediately(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
        assert main(["--seed", "3"]) == 0
        assert "Game terminated." in capsys.readouterr().out

    def test_play_a_move_as_white(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("b1-b3\na2-c2\nq\n"))
        assert main(["--white", "--ai", "0"]) == 0
        output = capsys.readouterr().out
        assert "white's command > " in output
        assert "Illegal move" not in output
