"""
Protocol registry of live games, and an in-memory implementation.

NOTE: games only live as long as the process. Nothing is persisted.
"""

from typing import Protocol
from uuid import UUID, uuid4

from src.brique.engine import GameEngine


class GameRegistry(Protocol):
    """Where the service keeps its running games"""

    def add(self, engine: GameEngine) -> UUID:
        """Register a new game and return its newly created ID."""
        ...

    def get(self, game_id: UUID) -> GameEngine | None:
        """Get game by ID, if registered."""
        ...

    def remove(self, game_id: UUID) -> GameEngine | None:
        """Forget a game."""
        ...

    def ids(self) -> list[UUID]:
        """All registered game IDs."""
        ...


class InMemoryGameRegistry:
    """Each engine is independent, so separate games never share mutable state."""

    def __init__(self) -> None:
        self._games: dict[UUID, GameEngine] = {}

    def add(self, engine: GameEngine) -> UUID:
        game_id = uuid4()
        self._games[game_id] = engine
        return game_id

    def get(self, game_id: UUID) -> GameEngine | None:
        return self._games.get(game_id)

    def remove(self, game_id: UUID) -> GameEngine | None:
        return self._games.pop(game_id, None)

    def ids(self) -> list[UUID]:
        return list(self._games.keys())
