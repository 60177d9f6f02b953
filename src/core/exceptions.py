"""
Custom exceptions shared by all layers.

Everything inherits from GameError, so a shell can catch a single type when it only wants to show a message.
NOTE: an illegal move is NOT an exception. The engine answers False and the caller re-prompts.
"""


class GameError(Exception):
    """Top level exception for anything that went wrong in a Brique game."""


class InvalidConfigurationError(GameError):
    """Game could not be set up (ex. non-positive board size, unknown rule set)."""


class OutOfBoundsError(GameError, IndexError):
    """Direct board access outside of the grid. Callers should check `Board.is_valid_position` first."""


class GameStateError(GameError):
    """Protocol error: the call is not allowed in the current state of the game."""


class GameOverError(GameStateError):
    """Attempt to act on a game that already ended (won or aborted)."""


class PieRuleError(GameStateError):
    """Pie rule requested while not eligible (already used/forfeited, or not White's turn)."""


class GameNotFoundError(GameError):
    """No live game registered under the requested id."""


class InvalidRequestError(GameError):
    """Request coming in from a shell could not be validated."""
