"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Iterator

import pytest

from src.core.shared_types import PLAYER_1, PLAYER_2
from src.db.memory_repository import InMemoryGameRepository
from src.quoridor.board import Board
from src.quoridor.game import Game
from src.quoridor.position import Position


@pytest.fixture
def starting_board() -> Board:
    """9x9 board with both pawns in the middle of their starting rows."""
    return Board.with_pawns(
        {PLAYER_1: Position.create(0, 4), PLAYER_2: Position.create(8, 4)}
    )


@pytest.fixture
def game(starting_board: Board) -> Game:
    """Standard game: both players registered with 10 walls each. Player 1 to move."""
    game = Game(starting_board, walls_per_player=10)
    game.add_player(PLAYER_1)
    game.add_player(PLAYER_2)
    return game


@pytest.fixture
def repository() -> Iterator[InMemoryGameRepository]:
    """Ensures to clear the repository between tests"""
    repo = InMemoryGameRepository()
    try:
        yield repo
    finally:
        repo.clear()
