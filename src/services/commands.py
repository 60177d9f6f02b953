"""
Player intents a shell can hand to the game loop.

A shell turns raw input (text, clicks) into one of these; parsing itself is the shell's job.
"""

from dataclasses import dataclass

from src.brique.position import Position


@dataclass(frozen=True)
class PlaceStone:
    row: int
    col: int

    @property
    def position(self) -> Position:
        return Position(self.row, self.col)


@dataclass(frozen=True)
class Swap:
    """Apply the pie rule."""


@dataclass(frozen=True)
class Quit:
    """Abort the game (user quit or input closed)."""


ActionCommand = PlaceStone | Swap | Quit
