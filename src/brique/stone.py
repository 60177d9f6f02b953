"""Defines what can occupy a cell. Players are represented by the two non-empty stones."""

from enum import Enum, auto


class Stone(Enum):
    BLACK = auto()
    WHITE = auto()
    EMPTY = auto()

    def opposite(self) -> "Stone":
        """The other player's stone. An empty cell stays empty."""
        return OPPOSITE_STONE[self]

    @property
    def is_player(self) -> bool:
        return self != Stone.EMPTY

    def to_symbol(self) -> str:
        return STONE_TO_SYMBOL[self]


OPPOSITE_STONE: dict[Stone, Stone] = {
    Stone.BLACK: Stone.WHITE,
    Stone.WHITE: Stone.BLACK,
    Stone.EMPTY: Stone.EMPTY,
}

STONE_TO_SYMBOL: dict[Stone, str] = {
    Stone.BLACK: "B",
    Stone.WHITE: "W",
    Stone.EMPTY: ".",
}
