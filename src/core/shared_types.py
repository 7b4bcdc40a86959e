"""
Type definitions used across layers
"""

from enum import StrEnum

# Board is 9x9 in the classic game. Kept adjustable for smaller test boards / variants
DEFAULT_BOARD_SIZE = 9
DEFAULT_WALLS_PER_PLAYER = 10

PlayerID = int

# --- NOTE only two players are supported. Player 1 always moves first.
PLAYER_1: PlayerID = 1
PLAYER_2: PlayerID = 2
MAX_PLAYERS = 2


class GameStatus(StrEnum):
    IN_PROGRESS = "in progress"
    PLAYER_1_WON = "player 1 won"
    PLAYER_2_WON = "player 2 won"


class Orientation(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
