"""
Rules of Brique: legality, escort fills / captures and the connection win.

Key idea: use strategy pattern so a rule set can be swapped without touching the engine.
Only the standard rule set exists, but new ones can be registered in RULES_REGISTRY.
"""

import logging
from collections import deque
from enum import Enum, auto
from typing import Callable, Protocol

from src.brique.board import Board
from src.brique.moves import Move
from src.brique.position import Position
from src.brique.stone import Stone
from src.core.exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)


class State(Protocol):
    """Just the parts of the game state the rules need"""

    @property
    def board(self) -> Board: ...
    @property
    def current_player(self) -> Stone: ...


class GameRules(Protocol):
    """Capabilities every rule set must offer to the engine."""

    def is_valid_move(self, state: State, move: Move) -> bool: ...
    def process_move(self, state: State, move: Move) -> Move: ...
    def check_win_condition(self, state: State, player: Stone) -> bool: ...
    def get_escorts(self, position: Position, board: Board) -> list[Position]: ...


class SquareColor(Enum):
    """Checkerboard parity of a cell. Decides which neighbours escort it."""

    LIGHT = auto()
    DARK = auto()

    @classmethod
    def at(cls, position: Position) -> "SquareColor":
        return cls.LIGHT if (position.row + position.col) % 2 == 0 else cls.DARK


# (d_row, d_col) of the two escorts. Order matters: front/behind first, then left/right.
ESCORT_OFFSETS: dict[SquareColor, tuple[tuple[int, int], tuple[int, int]]] = {
    SquareColor.LIGHT: ((-1, 0), (0, -1)),  # front (up), left
    SquareColor.DARK: ((1, 0), (0, 1)),  # behind (down), right
}


class StandardBriqueRules:
    """The standard rule set."""

    def is_valid_move(self, state: State, move: Move) -> bool:
        """
        Legal iff the cell is on the board, still empty, and it is the mover's turn.
        NOTE: Does not check whether the game is over. That is the engine's job.
        """
        board = state.board
        if not board.is_valid_position(move.position):
            return False
        if board.stone(move.position) != Stone.EMPTY:
            return False
        return move.stone == state.current_player

    def process_move(self, state: State, move: Move) -> Move:
        """
        Place the stone, then apply the escort rule.
        -----

        1. put the mover's stone on the target cell
        2. scan the board once (row-major) for cells whose two escorts are both the mover's color
        3. fill those cells in scan order. An opponent stone that gets overwritten is a capture.

        ---
        NOTE: This is a single pass. Cells filled in step 3 do not trigger another scan within the same move.
        """
        board = state.board
        board.set_stone(move.position, move.stone)

        to_fill = self._find_positions_to_fill(board, move.stone)
        opponent = move.stone.opposite()

        filled: list[Position] = []
        captured: list[Position] = []
        for position in to_fill:
            if board.stone(position) == opponent:
                captured.append(position)
            board.set_stone(position, move.stone)
            filled.append(position)

        if filled:
            logger.debug(
                "%s filled %d cell(s), captured %d", move, len(filled), len(captured)
            )
        return move.with_effects(filled, captured)

    def get_escorts(self, position: Position, board: Board) -> list[Position]:
        """0, 1 or 2 escorts. Escorts falling off the board are left out (no wrapping)."""
        offsets = ESCORT_OFFSETS[SquareColor.at(position)]
        candidates = [position.offset(d_row, d_col) for d_row, d_col in offsets]
        return [escort for escort in candidates if board.is_valid_position(escort)]

    def check_win_condition(self, state: State, player: Stone) -> bool:
        """Black connects top to bottom row, White connects left to right column."""
        board = state.board
        edge = range(board.size)
        last = board.size - 1
        if player == Stone.BLACK:
            start_edge = [Position(0, col) for col in edge]
            end_edge = {Position(last, col) for col in edge}
        elif player == Stone.WHITE:
            start_edge = [Position(row, 0) for row in edge]
            end_edge = {Position(row, last) for row in edge}
        else:
            return False
        return self._is_connected(board, player, start_edge, end_edge)

    # -- PRIVATE HELPERS ---
    def _find_positions_to_fill(self, board: Board, player: Stone) -> list[Position]:
        """Cells (not already the player's) that have exactly 2 escorts, both occupied by the player."""
        to_fill: list[Position] = []
        for position in board.positions():
            if board.stone(position) == player:
                continue
            escorts = self.get_escorts(position, board)
            if len(escorts) == 2 and all(board.stone(e) == player for e in escorts):
                to_fill.append(position)
        return to_fill

    def _is_connected(
        self,
        board: Board,
        player: Stone,
        start_edge: list[Position],
        end_edge: set[Position],
    ) -> bool:
        """Breadth first search over orthogonally adjacent cells of the player's color."""
        frontier = deque(pos for pos in start_edge if board.stone(pos) == player)
        visited = set(frontier)

        while frontier:
            current = frontier.popleft()
            if current in end_edge:
                return True

            for neighbour in current.orthogonal_neighbours():
                if neighbour in visited or not board.is_valid_position(neighbour):
                    continue
                if board.stone(neighbour) == player:
                    visited.add(neighbour)
                    frontier.append(neighbour)
        return False


# --- RULES FACTORY ---
class RuleType(Enum):
    STANDARD = "standard"


RulesFactory = Callable[[], GameRules]

RULES_REGISTRY: dict[RuleType, RulesFactory] = {
    RuleType.STANDARD: StandardBriqueRules,
}


def register_rules(rule_type: RuleType, factory: RulesFactory) -> None:
    """Make an additional rule set available to `create_rules`."""
    RULES_REGISTRY[rule_type] = factory


def create_rules(rule_type: RuleType = RuleType.STANDARD) -> GameRules:
    factory = RULES_REGISTRY.get(rule_type)
    if factory is None:
        raise InvalidConfigurationError(f"Unknown rule type: {rule_type!r}")
    return factory()
