"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn -->
whose turn it is, wall budgets, the "nobody gets locked in" rule, winning, and undo/redo.
The Board takes care of the geometry (where pawns may step, where walls may go).
"""

import logging
from collections import deque
from dataclasses import replace
from typing import Callable, Mapping, Optional, Self

from src.core.exceptions import (
    GameEndedError,
    GameError,
    GameStateError,
    InvalidMoveError,
    InvalidWallPlacementError,
    MaxPlayersReachedError,
    NoHistoryError,
    NotInGameError,
    NoWallsRemainingError,
    PathBlockedError,
    PlayerAlreadyRegisteredError,
    WrongTurnError,
)
from src.core.models import GameModel
from src.core.shared_types import (
    DEFAULT_BOARD_SIZE,
    DEFAULT_WALLS_PER_PLAYER,
    MAX_PLAYERS,
    PLAYER_1,
    PLAYER_2,
    GameStatus,
    Orientation,
    PlayerID,
)
from src.quoridor.board import Board
from src.quoridor.position import Direction, Position
from src.quoridor.snapshot import GameSnapshot, GameState
from src.quoridor.wall import Wall

logger = logging.getLogger(__name__)

GoalFn = Callable[[Position], bool]

WINNING_STATUS: dict[PlayerID, GameStatus] = {
    PLAYER_1: GameStatus.PLAYER_1_WON,
    PLAYER_2: GameStatus.PLAYER_2_WON,
}


def goal_row(row: int) -> GoalFn:
    """Goal predicate: reach any cell on the given row"""

    def _is_goal(position: Position) -> bool:
        return position.row == row

    return _is_goal


def default_goals(board_size: int) -> dict[PlayerID, GoalFn]:
    """Player 1 starts on top and has to reach the bottom row. Player 2 does the reverse."""
    return {PLAYER_1: goal_row(board_size - 1), PLAYER_2: goal_row(0)}


class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    def __init__(
        self,
        board: Board,
        walls_per_player: int = DEFAULT_WALLS_PER_PLAYER,
        goals: Optional[Mapping[PlayerID, GoalFn]] = None,
    ) -> None:
        self._board = board
        self._walls_per_player = walls_per_player
        self._goals: dict[PlayerID, GoalFn] = default_goals(board.board_size)
        if goals:
            self._goals.update(goals)
        self._remaining_walls: dict[PlayerID, int] = {}
        self._state = GameState(current_turn=PLAYER_1, status=GameStatus.IN_PROGRESS)
        self._history: list[GameSnapshot] = []
        self._redo_stack: list[GameSnapshot] = []

    @classmethod
    def new_game(
        cls,
        board_size: int = DEFAULT_BOARD_SIZE,
        walls_per_player: int = DEFAULT_WALLS_PER_PLAYER,
    ) -> Self:
        """Both pawns in the middle of their starting edge, both players registered."""
        middle = board_size // 2
        board = Board.with_pawns(
            {
                PLAYER_1: Position.create(0, middle, board_size),
                PLAYER_2: Position.create(board_size - 1, middle, board_size),
            },
            board_size,
        )
        game = cls(board, walls_per_player)
        game.add_player(PLAYER_1)
        game.add_player(PLAYER_2)
        return game

    @classmethod
    def from_model(
        cls, model: GameModel, walls_per_player: int = DEFAULT_WALLS_PER_PLAYER
    ) -> Self:
        """Define how to construct a Game from the information the Service layer actually has (history is not part of it)"""

        # Validation
        status_name = model.status.replace(" ", "_").upper()
        if status_name not in GameStatus.__members__:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join([status.value for status in GameStatus])}"
            )
        if len(model.remaining_walls) > MAX_PLAYERS:
            raise GameStateError(
                f"A game has at most {MAX_PLAYERS} players, got {len(model.remaining_walls)}"
            )

        if model.current_turn not in (PLAYER_1, PLAYER_2):
            raise GameStateError(
                f"Invalid current turn: {model.current_turn!r}. Must be {PLAYER_1} or {PLAYER_2}"
            )

        size = model.board_size
        try:
            pawns = {
                player_id: Position.create(row, col, size)
                for player_id, (row, col) in model.pawns.items()
            }
            walls = [
                Wall(Position.create(row, col, size), Orientation(orientation))
                for row, col, orientation in model.walls
            ]
            board = Board.from_walls(pawns, walls, size)
        except (GameError, ValueError) as error:
            raise GameStateError(f"Invalid board in game model: {error}") from error

        game = cls(board, walls_per_player)
        game._remaining_walls = dict(model.remaining_walls)
        game._state = GameState(
            current_turn=model.current_turn, status=GameStatus[status_name]
        )
        if not game._all_players_have_path_to_goal():
            raise GameStateError(
                "Invalid game model: a player has no path left to their goal"
            )
        return game

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            board_size=self._board.board_size,
            pawns={
                player_id: (position.row, position.col)
                for player_id, position in self._board.pawns().items()
            },
            walls=[
                (wall.anchor.row, wall.anchor.col, wall.orientation.value)
                for wall in self._board.walls()
            ],
            current_turn=self._state.current_turn,
            status=self._state.status.value,
            remaining_walls=dict(self._remaining_walls),
        )

    # --- ACCESSORS ---
    @property
    def board(self) -> Board:
        return self._board

    @property
    def walls_per_player(self) -> int:
        return self._walls_per_player

    @property
    def winner(self) -> Optional[PlayerID]:
        for player_id, status in WINNING_STATUS.items():
            if self._state.status == status:
                return player_id
        return None

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def game_state(self) -> GameState:
        return replace(self._state)

    def remaining_walls(self) -> dict[PlayerID, int]:
        return dict(self._remaining_walls)

    def players(self) -> list[PlayerID]:
        return list(self._remaining_walls)

    # --- PLAYING ---
    def add_player(self, player_id: PlayerID) -> None:
        """Register a player (before play starts) and hand out their walls"""
        if player_id in self._remaining_walls:
            raise PlayerAlreadyRegisteredError(
                f"Player {player_id} is already in the game"
            )
        if len(self._remaining_walls) >= MAX_PLAYERS:
            raise MaxPlayersReachedError(
                f"Cannot add player {player_id}: the game already has {MAX_PLAYERS} players"
            )
        self._remaining_walls[player_id] = self._walls_per_player

    def place_wall(self, player_id: PlayerID, wall: Wall) -> None:
        """
        Attempt to place a wall
        -----

        1. player must be in the game, the game must be running, and it must be your turn
        2. you need a wall left
        3. the board must accept the wall (bounds, overlap, crossing)
        4. every player must still be able to reach their goal --> otherwise take the wall back
        5. commit: record history, use up a wall, pass the turn
        """
        remaining = self._remaining_walls.get(player_id)
        if remaining is None:
            raise NotInGameError(f"Player {player_id} is not in the game")
        self._assert_in_progress()
        self._assert_your_turn(player_id)

        if remaining <= 0:
            raise NoWallsRemainingError(f"Player {player_id} has no walls remaining")

        snapshot = self._snapshot()
        self._board.place_wall(wall)

        if not self._all_players_have_path_to_goal():
            self._board.remove_last_wall()
            logger.debug("Rejected %s: it would block a path to goal", wall)
            raise PathBlockedError(
                "Wall placement would block path to goal for at least one player"
            )

        self._commit(snapshot)
        self._remaining_walls[player_id] = remaining - 1
        logger.debug("Player %s placed %s", player_id, wall)
        self._switch_turn()

    def move_pawn(self, player_id: PlayerID, target: Position) -> None:
        """
        Attempt to move the pawn
        -----

        The Board decides if the step / jump is allowed.
        Reaching the goal ends the game, and the turn stays with the winner.
        """
        self._assert_in_progress()
        self._assert_your_turn(player_id)

        snapshot = self._snapshot()
        self._board.move_pawn(player_id, target)
        self._commit(snapshot)
        logger.debug("Player %s moved to %s", player_id, target)

        if self._is_goal(player_id, target):
            self._change_status(WINNING_STATUS.get(player_id, GameStatus.PLAYER_2_WON))
            logger.info("Player %s reached their goal and won", player_id)
        else:
            self._switch_turn()

    def step_pawn(self, player_id: PlayerID, direction: Direction) -> None:
        """One cell in a direction, relative to where the pawn stands now"""
        self._assert_in_progress()
        self._assert_your_turn(player_id)

        current = self._board.pawn_position(player_id)
        if current is None:
            raise InvalidMoveError(f"No pawn found for player {player_id}")
        self.move_pawn(player_id, current.neighbor(direction))

    def undo(self) -> None:
        if not self._history:
            raise NoHistoryError("No moves to undo")
        self._redo_stack.append(self._snapshot())
        self._restore(self._history.pop())

    def redo(self) -> None:
        if not self._redo_stack:
            raise NoHistoryError("No moves to redo")
        self._history.append(self._snapshot())
        self._restore(self._redo_stack.pop())

    # --- MOVE GENERATION ---
    def legal_moves(self, player_id: PlayerID) -> list[Position]:
        """Pawn moves available to the player whose turn it is"""
        self._assert_in_progress()
        self._assert_your_turn(player_id)
        return self._board.legal_pawn_targets(player_id)

    def legal_walls(self, player_id: PlayerID) -> list[Wall]:
        """
        Every wall the player could place right now.
        ---

        Each candidate is placed on the board, checked against the path rule, and taken back again.
        """
        remaining = self._remaining_walls.get(player_id)
        if remaining is None:
            raise NotInGameError(f"Player {player_id} is not in the game")
        self._assert_in_progress()
        self._assert_your_turn(player_id)
        if remaining <= 0:
            return []

        size = self._board.board_size
        legal: list[Wall] = []
        for orientation in Orientation:
            for row in range(size):
                for col in range(size):
                    wall = Wall(Position.create(row, col, size), orientation)
                    if self._can_place(wall):
                        legal.append(wall)
        return legal

    def distance_to_goal(self, player_id: PlayerID) -> Optional[int]:
        """Length of the shortest path to the goal, ignoring pawns. None if there is no path."""
        return self._shortest_path_length(player_id)

    # -- PRIVATE HELPERS ---
    def _assert_in_progress(self) -> None:
        if self._state.status != GameStatus.IN_PROGRESS:
            raise GameEndedError(f"Game is not in progress. status: {self._state.status}")

    def _assert_your_turn(self, player_id: PlayerID) -> None:
        if player_id != self._state.current_turn:
            raise WrongTurnError(
                f"It is not your turn. Waiting for player {self._state.current_turn} to make a move first."
            )

    def _switch_turn(self) -> None:
        next_player = PLAYER_2 if self._state.current_turn == PLAYER_1 else PLAYER_1
        self._state = replace(self._state, current_turn=next_player)

    def _change_status(self, new_status: GameStatus) -> None:
        self._state = replace(self._state, status=new_status)

    def _can_place(self, wall: Wall) -> bool:
        """Try the wall and take it back again"""
        try:
            self._board.place_wall(wall)
        except InvalidWallPlacementError:
            return False
        try:
            return self._all_players_have_path_to_goal()
        finally:
            self._board.remove_last_wall()

    # -- HISTORY HELPERS ---
    def _snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            board_size=self._board.board_size,
            pawns=self._board.pawns(),
            walls=tuple(self._board.walls()),
            state=self._state,
            remaining_walls=dict(self._remaining_walls),
        )

    def _commit(self, snapshot: GameSnapshot) -> None:
        """The move went through: it can be undone, and whatever was undone before is gone for good"""
        self._history.append(snapshot)
        self._redo_stack.clear()

    def _restore(self, snapshot: GameSnapshot) -> None:
        self._board = Board.from_walls(
            snapshot.pawns, snapshot.walls, snapshot.board_size
        )
        self._state = snapshot.state
        self._remaining_walls = dict(snapshot.remaining_walls)

    # -- PATH FINDING HELPERS ---
    def _is_goal(self, player_id: PlayerID, position: Position) -> bool:
        goal = self._goals.get(player_id, goal_row(0))
        return goal(position)

    def _all_players_have_path_to_goal(self) -> bool:
        return all(
            self._shortest_path_length(player_id) is not None
            for player_id in self._remaining_walls
        )

    def _shortest_path_length(self, player_id: PlayerID) -> Optional[int]:
        """
        Breadth first search from the pawn to the goal
        ---

        * Only walls block the way. Pawns do not: they can move out of the way later on.
        * Stops as soon as a goal cell is taken from the queue.
        """
        start = self._board.pawn_position(player_id)
        if start is None:
            return None

        visited: set[Position] = {start}
        queue: deque[tuple[Position, int]] = deque([(start, 0)])
        while queue:
            current, distance = queue.popleft()
            if self._is_goal(player_id, current):
                return distance

            for neighbor in self._reachable_neighbors(current):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append((neighbor, distance + 1))
        return None

    def _reachable_neighbors(self, position: Position) -> list[Position]:
        return [
            position.neighbor(direction)
            for direction in Direction
            if position.has_neighbor(direction)
            and not self._board.is_wall_between(position, position.neighbor(direction))
        ]
