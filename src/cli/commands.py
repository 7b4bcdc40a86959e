"""
Line-oriented command dispatcher: turns a line of text into a call on the Game and returns what to print.

Commands always act for the player whose turn it is.
"""

from dataclasses import dataclass
from typing import Callable

from src.cli.board_renderer import render_board
from src.core.exceptions import GameError, InvalidRequestError
from src.core.shared_types import GameStatus, Orientation
from src.quoridor.game import Game
from src.quoridor.position import Direction, Position
from src.quoridor.wall import Wall

QUIT_COMMAND = "quit"
HELP_COMMAND = "help"

DIRECTIONS: dict[str, Direction] = {
    "u": Direction.UP,
    "d": Direction.DOWN,
    "l": Direction.LEFT,
    "r": Direction.RIGHT,
}
ORIENTATIONS: dict[str, Orientation] = {
    "h": Orientation.HORIZONTAL,
    "v": Orientation.VERTICAL,
}


@dataclass(frozen=True)
class Command:
    name: str
    syntax: str
    description: str
    handler: Callable[[list[str]], str]
    shows_board: bool = True


class CommandDispatcher:
    def __init__(self, game: Game) -> None:
        self.game = game
        commands = [
            Command(
                "move",
                "move <row> <col>",
                "Move your pawn to the specified position",
                self._move,
            ),
            Command(
                "m",
                "m <u/d/l/r>",
                "Move your pawn one step in a direction",
                self._step,
            ),
            Command(
                "wall",
                "wall <row> <col> <h/v>",
                "Place a wall at the specified position",
                self._wall,
            ),
            Command("undo", "undo", "Take back the last move", self._undo),
            Command("redo", "redo", "Replay the last undone move", self._redo),
            Command(
                "status",
                "status",
                "Show the current game status",
                self._status,
                shows_board=False,
            ),
            Command(
                "moves",
                "moves",
                "List the positions your pawn can move to",
                self._moves,
                shows_board=False,
            ),
        ]
        self.commands: dict[str, Command] = {
            command.name: command for command in commands
        }

    def dispatch(self, line: str) -> str:
        """Run a single line of input. Errors are reported, never raised."""
        args = line.split()
        if not args:
            return ""
        name, command_args = args[0].lower(), args[1:]

        if name == HELP_COMMAND:
            return self.help_text()
        command = self.commands.get(name)
        if command is None:
            return f"Unknown command: {name}\nType \"{HELP_COMMAND}\" to see available commands"

        try:
            output = command.handler(command_args)
        except GameError as error:
            message = f"Error: {error}"
            if self.game.game_state().status == GameStatus.IN_PROGRESS:
                message += f"\nUsage: {command.syntax}"
            return message

        parts = [output] if output else []
        if command.shows_board:
            parts.append(render_board(self.game.board))
            if self.game.game_state().status != GameStatus.IN_PROGRESS:
                parts.append(self._status([]))
        return "\n".join(parts)

    def help_text(self) -> str:
        lines = ["Available commands:"]
        for command in self.commands.values():
            lines.append(f"  {command.syntax:<24} - {command.description}")
        lines.append(f"  {QUIT_COMMAND:<24} - Exit the game")
        return "\n".join(lines)

    # --- HANDLERS ---
    def _move(self, args: list[str]) -> str:
        _expect_args(args, 2, "Move command requires exactly 2 arguments: row and column")
        row, col = (_parse_int(arg) for arg in args)
        target = Position.create(row, col, self.game.board.board_size)
        self.game.move_pawn(self._current_player(), target)
        return ""

    def _step(self, args: list[str]) -> str:
        _expect_args(args, 1, f"m command requires exactly 1 argument: direction ({'/'.join(DIRECTIONS)})")
        direction = DIRECTIONS.get(args[0].lower())
        if direction is None:
            raise InvalidRequestError(f"Direction must be one of: {', '.join(DIRECTIONS)}")

        self.game.step_pawn(self._current_player(), direction)
        return ""

    def _wall(self, args: list[str]) -> str:
        _expect_args(args, 3, "Wall command requires exactly 3 arguments: row, column, and orientation (h/v)")
        row, col = (_parse_int(arg) for arg in args[:2])
        orientation = ORIENTATIONS.get(args[2].lower())
        if orientation is None:
            raise InvalidRequestError('Orientation must be either "h" (horizontal) or "v" (vertical)')

        anchor = Position.create(row, col, self.game.board.board_size)
        self.game.place_wall(self._current_player(), Wall(anchor, orientation))
        return ""

    def _undo(self, args: list[str]) -> str:
        _expect_args(args, 0, "Undo command takes no arguments")
        self.game.undo()
        return ""

    def _redo(self, args: list[str]) -> str:
        _expect_args(args, 0, "Redo command takes no arguments")
        self.game.redo()
        return ""

    def _status(self, args: list[str]) -> str:
        _expect_args(args, 0, "Status command takes no arguments")
        state = self.game.game_state()
        lines = ["Game Status:", "-----------"]
        if state.status == GameStatus.IN_PROGRESS:
            lines.append(f"Current turn: Player {state.current_turn}")
        else:
            lines.append(f"Game Status: Player {self.game.winner} Won!")

        lines.append("Remaining Walls:")
        for player_id, walls in sorted(self.game.remaining_walls().items()):
            lines.append(f"Player {player_id}: {walls}")
        return "\n".join(lines)

    def _moves(self, args: list[str]) -> str:
        _expect_args(args, 0, "Moves command takes no arguments")
        targets = self.game.legal_moves(self._current_player())
        return "Possible moves: " + " ".join(str(target) for target in targets)

    def _current_player(self) -> int:
        return self.game.game_state().current_turn


def _expect_args(args: list[str], count: int, message: str) -> None:
    if len(args) != count:
        raise InvalidRequestError(message)


def _parse_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise InvalidRequestError(f"Expected a number, got {value!r}") from None
