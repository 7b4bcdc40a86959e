"""Unit tests for src/cli/board_renderer.py"""

from src.cli.board_renderer import render_board
from src.core.shared_types import Orientation
from src.quoridor.board import Board
from src.quoridor.position import Position
from src.quoridor.wall import Wall


def test_render_empty_board() -> None:
    expected = "\n".join(
        [
            "    0   1   2",
            "  +---+---+---+",
            "0 |   |   |   |",
            "  +---+---+---+",
            "1 |   |   |   |",
            "  +---+---+---+",
            "2 |   |   |   |",
            "  +---+---+---+",
        ]
    )
    assert render_board(Board(3)) == expected


def test_render_pawns_and_walls() -> None:
    board = Board.from_walls(
        {1: Position.create(0, 1, 3), 2: Position.create(2, 1, 3)},
        [
            Wall(Position.create(0, 0, 3), Orientation.HORIZONTAL),
            Wall(Position.create(1, 1, 3), Orientation.VERTICAL),
        ],
        3,
    )
    expected = "\n".join(
        [
            "    0   1   2",
            "  +---+---+---+",
            "0 |   | 1 |   |",
            "  +===+===+---+",
            "1 |   |   #   |",
            "  +---+---+---+",
            "2 |   | 2 #   |",
            "  +---+---+---+",
        ]
    )
    assert render_board(board) == expected


def test_render_standard_board_size() -> None:
    lines = render_board(Board(9)).splitlines()
    # header, top edge, and a row + grid line per board row
    assert len(lines) == 2 + 2 * 9
    assert lines[0].split() == [str(col) for col in range(9)]
