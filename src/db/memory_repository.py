"""Implementation of (Game)Repository keeping the live Game objects in a dictionary"""

from uuid import UUID, uuid4

from src.quoridor.game import Game


class InMemoryGameRepository:
    """
    Games are stored as they are (not converted to a GameModel).
    That way the undo / redo history of a game survives in between requests.
    """

    def __init__(self) -> None:
        self._games: dict[UUID, Game] = {}

    def get_game(self, game_id: UUID) -> Game | None:
        return self._games.get(game_id)

    def create_game(self, game: Game) -> UUID:
        new_id = uuid4()
        self._games[new_id] = game
        return new_id

    def delete_game(self, game_id: UUID) -> Game | None:
        return self._games.pop(game_id, None)

    def clear(self) -> None:
        self._games.clear()
