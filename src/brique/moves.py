"""A placement, together with everything the escort rule did as a side effect."""

from dataclasses import dataclass, replace
from typing import Iterable, Self

from src.brique.position import Position
from src.brique.stone import Stone


@dataclass(frozen=True)
class Move:
    """
    basic definition of a move.
    ---

    The caller only knows `position` and `stone`. The rules hand back a new Move with the side effects attached:
    * filled: every cell the escort rule placed the mover's stone into (in board-scan order)
    * captured: the subset of `filled` that held an opponent stone before
    """

    position: Position
    stone: Stone
    filled: tuple[Position, ...] = ()
    captured: tuple[Position, ...] = ()

    def with_effects(
        self, filled: Iterable[Position], captured: Iterable[Position]
    ) -> Self:
        # dict.fromkeys keeps insertion order and drops duplicates
        return replace(
            self,
            filled=tuple(dict.fromkeys(filled)),
            captured=tuple(dict.fromkeys(captured)),
        )

    @property
    def is_capture(self) -> bool:
        return len(self.captured) > 0

    def __str__(self) -> str:
        return f"{self.stone.name.lower()} at {self.position}"
