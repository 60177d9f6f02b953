"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Both the API layer (higher) and the domain layer (lower) use the model(s) defined here to send to/receive from the Service.
A snapshot is a read model for rendering only: it is never fed back into the engine.
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make GameSnapshot easier to read
Coordinates = tuple[int, int]
PlayerColor = str


@dataclass
class GameSnapshot:
    """Transport-safe picture of a Brique game, used between API, Service and domain layers."""

    board_size: int
    board_rows: list[str]
    current_player: PlayerColor
    status: str
    pie_rule_available: bool
    move_count: int
    winner: Optional[PlayerColor] = None
    last_filled: list[Coordinates] = field(default_factory=list)
    last_captured: list[Coordinates] = field(default_factory=list)
