"""
A wall sits in the groove between intersections and is two cells long.

The anchor is the cell the wall is keyed by. The wall extends to:
* (row, col + 1) if horizontal --> blocks moving between rows `row` and `row + 1`
* (row + 1, col) if vertical --> blocks moving between columns `col` and `col + 1`
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.shared_types import Orientation
from src.quoridor.position import Position

SHORTHAND: dict[Orientation, str] = {
    Orientation.HORIZONTAL: "h",
    Orientation.VERTICAL: "v",
}


@dataclass(frozen=True)
class Wall:
    anchor: Position
    orientation: Orientation

    @property
    def is_horizontal(self) -> bool:
        return self.orientation == Orientation.HORIZONTAL

    def occupies(self) -> tuple[Position, Position]:
        """The two cells spanned by the wall. Raises EdgeError if the second one would be off the board."""
        second = self.anchor.right() if self.is_horizontal else self.anchor.down()
        return self.anchor, second

    def key(self) -> str:
        return f"{self.anchor.key()},{SHORTHAND[self.orientation]}"

    def __str__(self) -> str:
        return f"{self.orientation} wall at {self.anchor}"
