"""The Board implements all rules that concern the pawns and walls on it (but not whose turn it is, or who won)"""

from typing import Iterable, Mapping, Optional, Self

from src.core.exceptions import (
    InvalidMoveError,
    InvalidPositionError,
    InvalidWallPlacementError,
)
from src.core.shared_types import DEFAULT_BOARD_SIZE, PlayerID
from src.quoridor.position import Direction, Position
from src.quoridor.wall import Wall


class Board:
    """
    (0,0) is the top left.
    - Pawns move on the N x N intersections
    - Walls are placed in between them, and are stored in the order they were placed.
    The list of walls only ever grows, except for taking back the most recent one (rollback of an illegal placement).
    """

    def __init__(self, size: int = DEFAULT_BOARD_SIZE) -> None:
        if size <= 0:
            raise InvalidPositionError(f"Invalid board size: {size}")
        self._size = size
        self._pawns: dict[PlayerID, Position] = {}
        self._walls: list[Wall] = []

    @classmethod
    def with_pawns(
        cls, pawns: Mapping[PlayerID, Position], size: int = DEFAULT_BOARD_SIZE
    ) -> Self:
        """Create a board with pawns already standing on their (initial) positions"""
        board = cls(size)
        for player_id, position in pawns.items():
            board._assert_same_size(position, f"Position for player {player_id}")
            board._pawns[player_id] = position
        return board

    @classmethod
    def from_walls(
        cls,
        pawns: Mapping[PlayerID, Position],
        walls: Iterable[Wall],
        size: int = DEFAULT_BOARD_SIZE,
    ) -> Self:
        """Rebuild a board by replaying the walls one by one (each placement is validated again)"""
        board = cls.with_pawns(pawns, size)
        for wall in walls:
            board.place_wall(wall)
        return board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._size == other._size
            and self._pawns == other._pawns
            and self._walls == other._walls
        )

    def __repr__(self) -> str:
        return f"Board(size={self._size}, pawns={self._pawns}, walls={self._walls})"

    # --- QUERIES ---
    @property
    def board_size(self) -> int:
        return self._size

    def pawn_position(self, player_id: PlayerID) -> Optional[Position]:
        return self._pawns.get(player_id)

    def pawns(self) -> dict[PlayerID, Position]:
        """Copy, so callers cannot move pawns around behind the board's back"""
        return dict(self._pawns)

    def walls(self) -> list[Wall]:
        return list(self._walls)

    def is_occupied(self, position: Position) -> bool:
        return position in self._pawns.values()

    def is_wall_between(self, pos1: Position, pos2: Position) -> bool:
        """
        Is the boundary between two adjacent positions blocked?
        ---

        * Vertically adjacent (same column): blocked by a horizontal wall anchored on the upper row that spans the column.
        * Horizontally adjacent (same row): blocked by a vertical wall anchored on the left column that spans the row.

        NOTE any other pair (not adjacent) is never blocked.
        """
        self._assert_same_size(pos1, "First position")
        self._assert_same_size(pos2, "Second position")

        if pos1.col == pos2.col and abs(pos1.row - pos2.row) == 1:
            upper_row = min(pos1.row, pos2.row)
            return any(
                wall.anchor.row == upper_row
                and any(cell.col == pos1.col for cell in wall.occupies())
                for wall in self._horizontal_walls()
            )

        if pos1.row == pos2.row and abs(pos1.col - pos2.col) == 1:
            left_col = min(pos1.col, pos2.col)
            return any(
                pos1.row in (wall.anchor.row, wall.anchor.row + 1)
                and wall.anchor.col == left_col
                for wall in self._vertical_walls()
            )

        return False

    # --- WALLS ---
    def place_wall(self, wall: Wall) -> None:
        """Add the wall to the board, if allowed"""
        self._assert_same_size(wall.anchor, f"Anchor of {wall}")
        if not self._is_valid_wall_placement(wall):
            raise InvalidWallPlacementError(f"Invalid wall placement: {wall}")
        self._walls.append(wall)

    def remove_last_wall(self) -> Wall:
        """Take back the most recently placed wall. Only meant for rolling back a placement."""
        if not self._walls:
            raise InvalidWallPlacementError("No wall to remove: the board has no walls")
        return self._walls.pop()

    def _horizontal_walls(self) -> list[Wall]:
        return [wall for wall in self._walls if wall.is_horizontal]

    def _vertical_walls(self) -> list[Wall]:
        return [wall for wall in self._walls if not wall.is_horizontal]

    def _is_valid_wall_placement(self, wall: Wall) -> bool:
        """
        A wall can be placed if
        ---

        1. It does not stick out of the board.
        2. It does not overlap with a wall of the same orientation.
        3. Its anchor does not sit on the second cell of a wall of the other orientation (they would cross).

        NOTE: the crossing check in 3. is one-sided. The second cell of the new wall is not compared with existing anchors.
        """
        # 1. second cell must be on the board
        if wall.is_horizontal and wall.anchor.col >= self._size - 1:
            return False
        if not wall.is_horizontal and wall.anchor.row >= self._size - 1:
            return False

        new_cells = set(wall.occupies())
        for existing in self._walls:
            # 2. overlap
            if existing.orientation == wall.orientation:
                if new_cells & set(existing.occupies()):
                    return False
            # 3. crossing
            else:
                _, existing_second = existing.occupies()
                if wall.anchor == existing_second:
                    return False
        return True

    # --- PAWNS ---
    def move_pawn(self, player_id: PlayerID, target: Position) -> None:
        """Move a pawn one step, or jump over the opponent's pawn. Raises InvalidMoveError otherwise."""
        current = self.pawn_position(player_id)
        if current is None:
            raise InvalidMoveError(f"No pawn found for player {player_id}")
        self._assert_same_size(target, "Target position")

        if not (
            self._is_valid_step(player_id, target)
            or self._is_valid_jump(player_id, target)
        ):
            raise InvalidMoveError(f"Invalid move from {current} to {target}")
        self._pawns[player_id] = target

    def legal_pawn_targets(self, player_id: PlayerID) -> list[Position]:
        """All positions the pawn could move to. Steps first, then jumps."""
        current = self.pawn_position(player_id)
        if current is None:
            raise InvalidMoveError(f"No pawn found for player {player_id}")

        steps: list[Position] = []
        jumps: list[Position] = []
        for direction in Direction:
            if not current.has_neighbor(direction):
                continue
            neighbor = current.neighbor(direction)
            if self._is_valid_step(player_id, neighbor):
                steps.append(neighbor)
            elif neighbor.has_neighbor(direction):
                beyond = neighbor.neighbor(direction)
                if self._is_valid_jump(player_id, beyond):
                    jumps.append(beyond)
        return steps + jumps

    def _is_occupied_by_opponent(self, player_id: PlayerID, position: Position) -> bool:
        return any(
            pid != player_id and pos == position for pid, pos in self._pawns.items()
        )

    def _is_valid_step(self, player_id: PlayerID, target: Position) -> bool:
        """One orthogonal step onto a free cell, without a wall in between"""
        current = self._pawns[player_id]
        if self._is_occupied_by_opponent(player_id, target):
            return False

        return any(
            current.has_neighbor(direction)
            and current.neighbor(direction) == target
            and not self.is_wall_between(current, target)
            for direction in Direction
        )

    def _is_valid_jump(self, player_id: PlayerID, target: Position) -> bool:
        """
        Jump straight over the opponent's pawn
        ---

        * The opponent stands right next to you
        * The target is the cell right behind the opponent (same direction), and it is free
        * No wall between you and the opponent, and no wall between the opponent and the target

        NOTE: no diagonal jumps when the straight jump is blocked.
        """
        current = self._pawns[player_id]
        if self._is_occupied_by_opponent(player_id, target):
            return False

        for direction in Direction:
            if not current.has_neighbor(direction):
                continue
            jumped_over = current.neighbor(direction)
            if not self._is_occupied_by_opponent(player_id, jumped_over):
                continue
            if not jumped_over.has_neighbor(direction):
                continue
            if (
                jumped_over.neighbor(direction) == target
                and not self.is_wall_between(current, jumped_over)
                and not self.is_wall_between(jumped_over, target)
            ):
                return True
        return False

    # -- helpers --
    def _assert_same_size(self, position: Position, description: str) -> None:
        if position.size != self._size:
            raise InvalidPositionError(
                f"{description} {position} was created for a board of size {position.size}, not {self._size}"
            )
