"""
Plain-text drawing of a Board.

Only uses what the board exposes to the outside (size, pawn positions, blocked boundaries),
so it knows nothing about how walls are stored.

    0   1   2
  +---+---+---+
0 | 1 |   |   |
  +===+===+---+
1 |   |   #   |
  ...
"""

from src.core.shared_types import PLAYER_1, PLAYER_2
from src.quoridor.board import Board
from src.quoridor.position import Position

CORNER = "+"
OPEN_HORIZONTAL = "---"
WALL_HORIZONTAL = "==="
OPEN_VERTICAL = "|"
WALL_VERTICAL = "#"
EMPTY_CELL = "   "


def render_board(board: Board) -> str:
    size = board.board_size
    lines = [_column_header(size), _grid_line(board, row=None)]
    for row in range(size):
        lines.append(_board_row(board, row))
        lines.append(_grid_line(board, row))
    return "\n".join(lines)


def _column_header(size: int) -> str:
    return "   " + "".join(f"{col:^4}" for col in range(size)).rstrip()


def _grid_line(board: Board, row: int | None) -> str:
    """Line underneath `row` (None: the top edge). The bottom edge and top edge are never walls."""
    size = board.board_size
    segments: list[str] = []
    for col in range(size):
        blocked = (
            row is not None
            and row < size - 1
            and board.is_wall_between(
                Position(row, col, size), Position(row + 1, col, size)
            )
        )
        segments.append(WALL_HORIZONTAL if blocked else OPEN_HORIZONTAL)
    return "  " + CORNER + CORNER.join(segments) + CORNER


def _board_row(board: Board, row: int) -> str:
    size = board.board_size
    parts = [f"{row:<2}", OPEN_VERTICAL]
    for col in range(size):
        parts.append(_cell(board, Position(row, col, size)))
        if col < size - 1 and board.is_wall_between(
            Position(row, col, size), Position(row, col + 1, size)
        ):
            parts.append(WALL_VERTICAL)
        else:
            parts.append(OPEN_VERTICAL)
    return "".join(parts)


def _cell(board: Board, position: Position) -> str:
    for player_id in (PLAYER_1, PLAYER_2):
        if board.pawn_position(player_id) == position:
            return f" {player_id} "
    return EMPTY_CELL
