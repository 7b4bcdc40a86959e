"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import GameStatus, Orientation

PlayerID = int
DIRECTION_NAMES = {"u": "up", "d": "down", "l": "left", "r": "right"}


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    board_size: Optional[int] = None
    walls_per_player: Optional[int] = None

    @field_validator("board_size")
    @classmethod
    def validate_board_size(cls, value: Optional[int]) -> Optional[int]:
        """Not supplying a board size is fine. Pawns start in the middle column, so the size has to be odd."""
        if value is None:
            return value
        if value < 3 or value % 2 == 0:
            raise InvalidRequestError(
                f"Board size must be an odd number >= 3, got {value}."
            )
        return value

    @field_validator("walls_per_player")
    @classmethod
    def validate_walls_per_player(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise InvalidRequestError(
                f"Number of walls cannot be negative, got {value}."
            )
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


class HistoryRequest(BaseModel):
    """Undo / redo"""

    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID
    player_id: PlayerID


class MovePawnRequest(BaseModel):
    game_id: UUID
    player_id: PlayerID
    row: int
    col: int

    @field_validator(*["row", "col"])
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(f"Coordinates cannot be negative, got {value}.")
        return value


class StepPawnRequest(BaseModel):
    """Move relative to where the pawn stands now: u(p), d(own), l(eft), r(ight)"""

    game_id: UUID
    player_id: PlayerID
    direction: str

    @field_validator("direction")
    @classmethod
    def validate_direction(cls, value: str) -> str:
        short = value.strip().lower()[:1]
        if short not in DIRECTION_NAMES:
            raise InvalidRequestError(
                f"Direction must be one of: {', '.join(DIRECTION_NAMES)}. Got {value!r}."
            )
        return short


class PlaceWallRequest(BaseModel):
    game_id: UUID
    player_id: PlayerID
    row: int
    col: int
    orientation: Orientation

    @field_validator(*["row", "col"])
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(f"Coordinates cannot be negative, got {value}.")
        return value

    @field_validator("orientation", mode="before")
    @classmethod
    def validate_orientation(cls, value: object) -> object:
        """Also accept the shorthand 'h' / 'v'"""
        if isinstance(value, str) and value.lower() in ("h", "v"):
            return Orientation.HORIZONTAL if value.lower() == "h" else Orientation.VERTICAL
        return value


# --- RESPONSE MODELS ---
class WallModel(BaseModel):
    row: int
    col: int
    orientation: Orientation


class GameResponse(BaseModel):
    game_id: UUID
    board_size: int
    pawns: dict[PlayerID, tuple[int, int]]
    walls: list[WallModel]
    current_turn: PlayerID
    status: GameStatus
    remaining_walls: dict[PlayerID, int]
    winner: Optional[PlayerID]


class LegalMovesResponse(BaseModel):
    game_id: UUID
    player_id: PlayerID
    pawn_moves: list[tuple[int, int]]
    distance_to_goal: Optional[int]
