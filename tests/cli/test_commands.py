"""Unit tests for the command line: src/cli/commands.py and src/cli/main.py"""

from typing import Iterator

import pytest

from src.cli.board_renderer import render_board
from src.cli.commands import CommandDispatcher
from src.cli.main import main, parse_args
from src.core.config import GameSettings
from src.core.shared_types import GameStatus, Orientation
from src.quoridor.game import Game
from src.quoridor.position import Position
from src.quoridor.wall import Wall


@pytest.fixture
def dispatcher() -> CommandDispatcher:
    return CommandDispatcher(Game.new_game())


@pytest.fixture
def small_dispatcher() -> CommandDispatcher:
    return CommandDispatcher(Game.new_game(board_size=3, walls_per_player=2))


# -- Dispatching --
def test_empty_line(dispatcher: CommandDispatcher) -> None:
    assert dispatcher.dispatch("   ") == ""


def test_help(dispatcher: CommandDispatcher) -> None:
    output = dispatcher.dispatch("help")
    assert output.startswith("Available commands:")
    for syntax in ["move <row> <col>", "m <u/d/l/r>", "wall <row> <col> <h/v>", "quit"]:
        assert syntax in output


def test_unknown_command(dispatcher: CommandDispatcher) -> None:
    assert (
        dispatcher.dispatch("castle")
        == 'Unknown command: castle\nType "help" to see available commands'
    )


def test_move_shows_board(dispatcher: CommandDispatcher) -> None:
    output = dispatcher.dispatch("move 1 4")
    assert dispatcher.game.board.pawn_position(1) == Position.create(1, 4)
    assert output == render_board(dispatcher.game.board)


def test_step(dispatcher: CommandDispatcher) -> None:
    dispatcher.dispatch("m d")
    dispatcher.dispatch("M U")
    assert dispatcher.game.board.pawn_position(1) == Position.create(1, 4)
    assert dispatcher.game.board.pawn_position(2) == Position.create(7, 4)


def test_wall(dispatcher: CommandDispatcher) -> None:
    output = dispatcher.dispatch("wall 4 4 h")
    assert dispatcher.game.board.walls() == [
        Wall(Position.create(4, 4), Orientation.HORIZONTAL)
    ]
    assert "===" in output
    assert dispatcher.game.remaining_walls()[1] == 9


def test_undo_redo(dispatcher: CommandDispatcher) -> None:
    dispatcher.dispatch("wall 4 4 v")
    dispatcher.dispatch("undo")
    assert dispatcher.game.board.walls() == []
    dispatcher.dispatch("redo")
    assert len(dispatcher.game.board.walls()) == 1


# -- Errors --
def test_error_with_usage(dispatcher: CommandDispatcher) -> None:
    assert dispatcher.dispatch("undo") == "Error: No moves to undo\nUsage: undo"


@pytest.mark.parametrize(
    "line, usage",
    [
        ("move 1", "move <row> <col>"),  # missing argument
        ("move a b", "move <row> <col>"),  # not a number
        ("move 2 4", "move <row> <col>"),  # too far
        ("move 9 4", "move <row> <col>"),  # off the board
        ("m x", "m <u/d/l/r>"),
        ("m u", "m <u/d/l/r>"),  # off the top edge
        ("wall 4 4", "wall <row> <col> <h/v>"),
        ("wall 4 4 d", "wall <row> <col> <h/v>"),
        ("wall 4 8 h", "wall <row> <col> <h/v>"),
        ("status now", "status"),
    ],
)
def test_invalid_input(dispatcher: CommandDispatcher, line: str, usage: str) -> None:
    before = dispatcher.game.to_model()
    output = dispatcher.dispatch(line)
    assert output.startswith("Error: ")
    assert output.endswith(f"\nUsage: {usage}")
    assert dispatcher.game.to_model() == before


# -- Information --
def test_status(dispatcher: CommandDispatcher) -> None:
    dispatcher.dispatch("wall 4 4 h")
    assert dispatcher.dispatch("status") == "\n".join(
        [
            "Game Status:",
            "-----------",
            "Current turn: Player 2",
            "Remaining Walls:",
            "Player 1: 9",
            "Player 2: 10",
        ]
    )


def test_moves(dispatcher: CommandDispatcher) -> None:
    assert dispatcher.dispatch("moves") == "Possible moves: (1,4) (0,3) (0,5)"


def test_winning_shows_status(small_dispatcher: CommandDispatcher) -> None:
    small_dispatcher.dispatch("m d")
    small_dispatcher.dispatch("m l")
    output = small_dispatcher.dispatch("m d")

    assert small_dispatcher.game.game_state().status == GameStatus.PLAYER_1_WON
    assert "Game Status: Player 1 Won!" in output
    assert output.startswith(render_board(small_dispatcher.game.board))


def test_no_usage_after_game_ended(small_dispatcher: CommandDispatcher) -> None:
    for line in ["m d", "m l", "m d"]:
        small_dispatcher.dispatch(line)
    output = small_dispatcher.dispatch("m r")
    assert output.startswith("Error: Game is not in progress")
    assert "Usage" not in output


# -- Console entry point --
def test_parse_args() -> None:
    settings = parse_args(
        ["--size", "5", "--walls", "3", "--log-level", "debug"], GameSettings()
    )
    assert settings == GameSettings(board_size=5, walls_per_player=3, log_level="DEBUG")


def test_parse_args_defaults() -> None:
    defaults = GameSettings(board_size=7)
    assert parse_args([], defaults) == defaults


@pytest.mark.parametrize(
    "argv",
    [
        ["--size", "4"],
        ["--walls", "-1"],
        ["--log-level", "chatty"],
    ],
)
def test_parse_args_invalid_settings(
    argv: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    """Reported as a usage error, not a traceback"""
    with pytest.raises(SystemExit) as exit_info:
        _ = parse_args(argv, GameSettings())
    assert exit_info.value.code == 2
    assert "error:" in capsys.readouterr().err


def feed(lines: list[str]) -> Iterator[str]:
    yield from lines
    raise EOFError


def test_main_loop(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    inputs = feed(["m d", "status", "quit", "never read"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(inputs))
    main(["--size", "3"])

    output = capsys.readouterr().out
    assert "Welcome to Quoridor!" in output
    assert "Current turn: Player 2" in output
    assert output.rstrip().endswith("Thanks for playing!")


def test_main_stops_at_end_of_input(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    inputs = feed([])
    monkeypatch.setattr("builtins.input", lambda prompt: next(inputs))
    main(["--size", "3"])
    assert "Thanks for playing!" in capsys.readouterr().out
