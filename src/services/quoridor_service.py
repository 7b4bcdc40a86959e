"""Orchestration of communication from API router to business logic and storage layers (and the reverse direction)."""

import logging
from typing import Optional
from uuid import UUID

from src.api.models import (
    DIRECTION_NAMES,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    HistoryRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MovePawnRequest,
    PlaceWallRequest,
    StepPawnRequest,
    WallModel,
)
from src.core.config import GameSettings
from src.core.exceptions import RepositoryError
from src.db.repository import GameRepository
from src.quoridor.game import Game
from src.quoridor.position import Direction, Position
from src.quoridor.wall import Wall

logger = logging.getLogger(__name__)


class QuoridorService:
    """Orchestration of layers for a Quoridor game."""

    def __init__(
        self, repository: GameRepository, settings: Optional[GameSettings] = None
    ) -> None:
        self.repo = repository
        self.settings = settings or GameSettings()

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a game with both players on their starting squares. Missing options fall back to the settings."""
        settings = GameSettings(
            board_size=(
                request.board_size
                if request.board_size is not None
                else self.settings.board_size
            ),
            walls_per_player=(
                request.walls_per_player
                if request.walls_per_player is not None
                else self.settings.walls_per_player
            ),
            log_level=self.settings.log_level,
        )
        game = Game.new_game(settings.board_size, settings.walls_per_player)
        game_id = self.repo.create_game(game)
        logger.info(
            "Created game %s (%dx%d, %d walls each)",
            game_id,
            settings.board_size,
            settings.board_size,
            settings.walls_per_player,
        )
        return self._create_game_response(game_id, game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        game = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game)

    def move_pawn(self, request: MovePawnRequest) -> GameResponse:
        """Move to an absolute position"""
        game = self._fetch_game(request.game_id)
        target = Position.create(request.row, request.col, game.board.board_size)
        game.move_pawn(request.player_id, target)
        return self._create_game_response(request.game_id, game)

    def step_pawn(self, request: StepPawnRequest) -> GameResponse:
        """Move one step in a direction, relative to the pawn's current position"""
        game = self._fetch_game(request.game_id)
        direction = Direction[DIRECTION_NAMES[request.direction].upper()]
        game.step_pawn(request.player_id, direction)
        return self._create_game_response(request.game_id, game)

    def place_wall(self, request: PlaceWallRequest) -> GameResponse:
        game = self._fetch_game(request.game_id)
        anchor = Position.create(request.row, request.col, game.board.board_size)
        game.place_wall(request.player_id, Wall(anchor, request.orientation))
        return self._create_game_response(request.game_id, game)

    def undo(self, request: HistoryRequest) -> GameResponse:
        game = self._fetch_game(request.game_id)
        game.undo()
        return self._create_game_response(request.game_id, game)

    def redo(self, request: HistoryRequest) -> GameResponse:
        game = self._fetch_game(request.game_id)
        game.redo()
        return self._create_game_response(request.game_id, game)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """retrieve set of legal pawn moves (+ how far the player still has to go)."""
        game = self._fetch_game(request.game_id)
        moves = game.legal_moves(request.player_id)
        return LegalMovesResponse(
            game_id=request.game_id,
            player_id=request.player_id,
            pawn_moves=[(position.row, position.col) for position in moves],
            distance_to_goal=game.distance_to_goal(request.player_id),
        )

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if self.repo.delete_game(request.game_id) is None:
            raise RepositoryError(f"Game with {request.game_id=} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, game: Game) -> GameResponse:
        """Convert the game (through its GameModel) into a GameResponse"""
        model = game.to_model()
        return GameResponse(
            game_id=game_id,
            board_size=model.board_size,
            pawns=model.pawns,
            walls=[
                WallModel(row=row, col=col, orientation=orientation)
                for row, col, orientation in model.walls
            ],
            current_turn=model.current_turn,
            status=model.status,
            remaining_walls=model.remaining_walls,
            winner=game.winner,
        )

    def _fetch_game(self, game_id: UUID) -> Game:
        """Attempt to find the game in the repository and raise error if it fails."""
        game = self.repo.get_game(game_id)
        if game is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game
