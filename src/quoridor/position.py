"""
A position on the board: one of the N x N intersections a pawn can stand on.

(placed in its own module as every other domain module needs to import it)
(0, 0) is the top-left corner. Rows grow downwards, columns grow to the right.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from src.core.exceptions import EdgeError, InvalidPositionError
from src.core.shared_types import DEFAULT_BOARD_SIZE

Vector = tuple[int, int]


class Direction(Enum):
    """The four orthogonal directions. Values are (row, col) steps."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


@dataclass(frozen=True)
class Position:
    row: int
    col: int
    # NOTE: size is carried along to catch positions of different boards being mixed, but plays no part in equality
    size: int = field(default=DEFAULT_BOARD_SIZE, compare=False)

    def __post_init__(self) -> None:
        # bool is an int subclass, but True is not a coordinate
        for value in (self.row, self.col, self.size):
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidPositionError(
                    f"Coordinates and size must be integers, got {value!r}"
                )
        if self.size <= 0:
            raise InvalidPositionError(f"Invalid board size: {self.size}")
        if not (0 <= self.row < self.size and 0 <= self.col < self.size):
            raise InvalidPositionError(
                f"Invalid position: row {self.row}, col {self.col} must be between 0 and {self.size - 1}"
            )

    @classmethod
    def create(cls, row: int, col: int, size: int = DEFAULT_BOARD_SIZE) -> Position:
        """Validating factory. Raises InvalidPositionError if the coordinate is off the board."""
        return cls(row, col, size)

    def has_neighbor(self, direction: Direction) -> bool:
        d_row, d_col = direction.value
        return (0 <= self.row + d_row < self.size) and (
            0 <= self.col + d_col < self.size
        )

    def neighbor(self, direction: Direction) -> Position:
        if not self.has_neighbor(direction):
            raise EdgeError(
                f"No {direction.name.lower()} from position {self}: it is on the edge of the board"
            )
        d_row, d_col = direction.value
        return Position(self.row + d_row, self.col + d_col, self.size)

    # -- convenience wrappers, read nicer at the call site --
    def has_up(self) -> bool:
        return self.has_neighbor(Direction.UP)

    def has_down(self) -> bool:
        return self.has_neighbor(Direction.DOWN)

    def has_left(self) -> bool:
        return self.has_neighbor(Direction.LEFT)

    def has_right(self) -> bool:
        return self.has_neighbor(Direction.RIGHT)

    def up(self) -> Position:
        return self.neighbor(Direction.UP)

    def down(self) -> Position:
        return self.neighbor(Direction.DOWN)

    def left(self) -> Position:
        return self.neighbor(Direction.LEFT)

    def right(self) -> Position:
        return self.neighbor(Direction.RIGHT)

    def key(self) -> str:
        """Stable string key, e.g. for logging or lookups by text"""
        return f"{self.row},{self.col}"

    def __str__(self) -> str:
        return f"({self.row},{self.col})"
