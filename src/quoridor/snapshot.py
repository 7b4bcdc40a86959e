"""
Contract for undo / redo.

A GameSnapshot is everything needed to put a Game back into an earlier state.
Positions and Walls are immutable, so copying the containers is enough to make the snapshot independent.
"""

from dataclasses import dataclass, field

from src.core.shared_types import GameStatus, PlayerID
from src.quoridor.position import Position
from src.quoridor.wall import Wall


@dataclass(frozen=True)
class GameState:
    current_turn: PlayerID
    status: GameStatus


@dataclass(frozen=True)
class GameSnapshot:
    board_size: int
    pawns: dict[PlayerID, Position] = field(hash=False)
    walls: tuple[Wall, ...]
    state: GameState
    remaining_walls: dict[PlayerID, int] = field(hash=False)
