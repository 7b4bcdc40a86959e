"""Console entry point: play a game of Quoridor in the terminal."""

import argparse
import logging
from typing import Optional, Sequence

from pydantic import ValidationError

from src.cli.board_renderer import render_board
from src.cli.commands import HELP_COMMAND, QUIT_COMMAND, CommandDispatcher
from src.core.config import GameSettings, load_settings
from src.core.logging_config import setup_logging
from src.quoridor.game import Game

logger = logging.getLogger(__name__)
PROMPT = "quoridor> "


def parse_args(argv: Optional[Sequence[str]], defaults: GameSettings) -> GameSettings:
    parser = argparse.ArgumentParser(prog="quoridor", description=__doc__)
    parser.add_argument("--size", type=int, default=defaults.board_size)
    parser.add_argument("--walls", type=int, default=defaults.walls_per_player)
    parser.add_argument("--log-level", default=defaults.log_level)
    args = parser.parse_args(argv)
    try:
        return GameSettings(
            board_size=args.size, walls_per_player=args.walls, log_level=args.log_level
        )
    except ValidationError as error:
        messages = "; ".join(detail["msg"] for detail in error.errors())
        parser.error(messages)


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = parse_args(argv, load_settings())
    setup_logging(settings.log_level)
    logger.debug("Starting game with %s", settings)

    game = Game.new_game(settings.board_size, settings.walls_per_player)
    dispatcher = CommandDispatcher(game)

    print("\nWelcome to Quoridor!")
    print(f'Type "{HELP_COMMAND}" to see available commands\n')
    print(render_board(game.board))

    while True:
        try:
            line = input(PROMPT).strip()
        except EOFError:
            break
        if line.lower() == QUIT_COMMAND:
            break
        output = dispatcher.dispatch(line)
        if output:
            print(output)
    print("Thanks for playing!")


if __name__ == "__main__":
    main()
