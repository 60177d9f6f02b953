"""The board only stores which stone occupies each cell. All game logic lives in the rules."""

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Iterator

from src.brique.position import Position
from src.brique.stone import Stone
from src.core.exceptions import InvalidConfigurationError, OutOfBoundsError

# Board size a shell should use when the user does not ask for a specific one
DEFAULT_BOARD_SIZE = 11


@dataclass
class Board:
    size: int
    grid: list[list[Stone]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        # bool is a subclass of int, but Board(True) is surely a mistake
        if (
            not isinstance(self.size, int)
            or isinstance(self.size, bool)
            or self.size <= 0
        ):
            raise InvalidConfigurationError(
                f"Board size must be a positive integer, got {self.size!r}."
            )
        self.grid = [[Stone.EMPTY for _ in range(self.size)] for _ in range(self.size)]

    def stone(self, position: Position) -> Stone:
        self._assert_on_board(position)
        return self.grid[position.row][position.col]

    def set_stone(self, position: Position, stone: Stone) -> None:
        """Unconditional write. Whether the placement is allowed is decided one layer up (rules)."""
        self._assert_on_board(position)
        self.grid[position.row][position.col] = stone

    def is_valid_position(self, position: Position) -> bool:
        return 0 <= position.row < self.size and 0 <= position.col < self.size

    def copy(self) -> "Board":
        """Independent copy: changing one board never shows up on the other."""
        return deepcopy(self)

    def positions(self) -> Iterator[Position]:
        """Every cell of the board in row-major order (the scan order of the rules)."""
        for row in range(self.size):
            for col in range(self.size):
                yield Position(row, col)

    def count(self, stone: Stone) -> int:
        return sum(row.count(stone) for row in self.grid)

    def swap_colors(self) -> None:
        """Black stones become white and vice versa. Empty cells are untouched."""
        for row in self.grid:
            for col, stone in enumerate(row):
                row[col] = stone.opposite()

    def rows(self) -> list[str]:
        """One string per row, using B / W / . (convenient for renderers and test fixtures)"""
        return ["".join(stone.to_symbol() for stone in row) for row in self.grid]

    def _assert_on_board(self, position: Position) -> None:
        # Without this check negative indices would silently wrap around the grid
        if not self.is_valid_position(position):
            raise OutOfBoundsError(
                f"Position {position} is outside of a {self.size}x{self.size} board."
            )
