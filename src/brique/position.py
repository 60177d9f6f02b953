"""
A cell on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# up, down, left, right. No diagonals in Brique.
ORTHOGONAL_DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Position:
    """
    0-indexed (row, col) pair.

    NOTE: A position does not know the board, so it can be created out of range.
    Only `Board.is_valid_position` decides if it lies on a given board.
    """

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> Position:
        return Position(self.row + d_row, self.col + d_col)

    def orthogonal_neighbours(self) -> list[Position]:
        """The 4 orthogonally adjacent positions (not filtered by any board)."""
        return [self.offset(d_row, d_col) for d_row, d_col in ORTHOGONAL_DIRECTIONS]

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"
