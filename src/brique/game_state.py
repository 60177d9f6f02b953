"""
Mutable aggregate of a single game: board, whose turn, terminal status, pie rule availability and move history.

All mutations of a running game go through this class. Rules and engine decide WHEN to call them.
"""

import logging
from enum import Enum, auto
from typing import Optional

from src.brique.board import Board
from src.brique.moves import Move
from src.brique.stone import Stone
from src.core.exceptions import GameOverError, PieRuleError

logger = logging.getLogger(__name__)


class Status(Enum):
    IN_PROGRESS = auto()
    BLACK_WON = auto()
    WHITE_WON = auto()
    ABORTED = auto()


WINNING_STATUS: dict[Stone, Status] = {
    Stone.BLACK: Status.BLACK_WON,
    Stone.WHITE: Status.WHITE_WON,
}

WINNER_BY_STATUS: dict[Status, Stone] = {
    status: stone for stone, status in WINNING_STATUS.items()
}


class GameState:
    """
    State of one game of Brique.
    ----

    * Black moves first, the game starts in progress with the pie rule available
    * once the status is not IN_PROGRESS anymore, the game is terminal: no further moves or pie rule
    * the pie rule can only be switched off, never back on
    """

    def __init__(self, board_size: int) -> None:
        self._board = Board(board_size)
        self._current_player = Stone.BLACK
        self._status = Status.IN_PROGRESS
        self._pie_rule_available = True
        self._move_history: list[Move] = []

    # -- READ ACCESS ---
    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_player(self) -> Stone:
        return self._current_player

    @property
    def status(self) -> Status:
        return self._status

    @property
    def pie_rule_available(self) -> bool:
        return self._pie_rule_available

    @property
    def move_history(self) -> tuple[Move, ...]:
        """Read-only view of the recorded moves."""
        return tuple(self._move_history)

    @property
    def move_count(self) -> int:
        return len(self._move_history)

    @property
    def last_move(self) -> Optional[Move]:
        return self._move_history[-1] if self._move_history else None

    @property
    def winner(self) -> Stone:
        """Stone.EMPTY while the game is running or when it was aborted."""
        return WINNER_BY_STATUS.get(self._status, Stone.EMPTY)

    def is_in_progress(self) -> bool:
        return self._status == Status.IN_PROGRESS

    # -- MUTATIONS ---
    def switch_player(self) -> None:
        self._current_player = self._current_player.opposite()

    def record_move(self, move: Move) -> None:
        self._assert_in_progress("record a move")
        self._move_history.append(move)

    def turn_off_pie_rule(self) -> None:
        self._pie_rule_available = False

    def declare_winner(self, stone: Stone) -> None:
        """Ends the game in favour of `stone`. Calling this with Stone.EMPTY is a caller error and is ignored."""
        status = WINNING_STATUS.get(stone)
        if status is None:
            logger.debug("Ignoring declare_winner(%s)", stone)
            return
        self._status = status

    def abort(self) -> None:
        """User quit or the input stream closed. Allowed from any state."""
        self._status = Status.ABORTED

    def apply_pie_rule(self) -> None:
        """
        White swaps colors instead of placing a stone.
        ----

        Every black stone becomes white and vice versa, then the pie rule is gone for good.
        NOTE: the current player is NOT switched afterwards.
        """
        self._assert_in_progress("apply the pie rule")
        if not self._pie_rule_available:
            raise PieRuleError("Pie rule is no longer available.")
        if self._current_player != Stone.WHITE:
            raise PieRuleError(
                f"Only White can apply the pie rule. Current player: {self._current_player.name}"
            )

        self._board.swap_colors()
        self.turn_off_pie_rule()
        logger.debug("Pie rule applied after %d move(s)", self.move_count)

    def _assert_in_progress(self, action: str) -> None:
        if not self.is_in_progress():
            raise GameOverError(f"Cannot {action}: game has ended. status: {self._status.name}")
