"""Protocol repository (only an in-memory implementation for now: games do not outlive the process)"""

from typing import Protocol
from uuid import UUID

from src.quoridor.game import Game


class GameRepository(Protocol):
    """Storage of running games"""

    def get_game(self, game_id: UUID) -> Game | None:
        """Get game by ID, if record exists."""
        ...

    def create_game(self, game: Game) -> UUID:
        """Store new game and return the newly created game ID."""
        ...

    def delete_game(self, game_id: UUID) -> Game | None:
        """Remove a game's record."""
        ...
