"""
Custom exceptions. Everything the engine raises derives from GameError,
so the layers above can catch the whole family at once.
"""


class GameError(Exception):
    """Top-level exception for anything that goes wrong while playing a game."""


# --- GEOMETRY ---
class InvalidPositionError(GameError):
    """Coordinate outside of the board, or a position built for a board of another size."""


class EdgeError(GameError):
    """Stepping off the edge of the board."""


# --- BOARD RULES ---
class InvalidWallPlacementError(GameError):
    """Wall out of bounds, overlapping another wall, or crossing one."""


class InvalidMoveError(GameError):
    """Pawn move that is neither a simple step nor a jump."""


# --- GAME RULES ---
class NotInGameError(GameError):
    """Operation for a player id that was never registered."""


class MaxPlayersReachedError(GameError):
    pass


class PlayerAlreadyRegisteredError(GameError):
    pass


class NoWallsRemainingError(GameError):
    pass


class PathBlockedError(GameError):
    """A wall would cut off at least one player from their goal."""


class WrongTurnError(GameError):
    pass


class GameEndedError(GameError):
    pass


class NoHistoryError(GameError):
    """Nothing to undo / redo."""


class GameStateError(GameError):
    """Transport model cannot be turned into a Game."""


# --- OUTER LAYERS ---
class InvalidRequestError(GameError):
    pass


class RepositoryError(GameError):
    pass
