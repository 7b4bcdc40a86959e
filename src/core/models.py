"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The shape is the same as a snapshot of a Game (the one undo/redo works with),
but only uses plain python types so it can be handed to any layer.
"""

from dataclasses import dataclass

# Type aliases to make GameModel easier to read
PlayerID = int
Coordinate = tuple[int, int]
WallRecord = tuple[int, int, str]  # row, col, orientation


@dataclass
class GameModel:
    """Transport-safe representation of a Quoridor game used between API, Service, and Game layers."""

    board_size: int
    pawns: dict[PlayerID, Coordinate]
    walls: list[WallRecord]
    current_turn: PlayerID
    status: str
    remaining_walls: dict[PlayerID, int]
