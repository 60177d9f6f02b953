"""
The GameEngine is the entrypoint into the domain layer for the service layer (and any other shell).
It orchestrates everything required to play one turn of Brique. The rules decide, the state remembers.
"""

import logging
from typing import Optional

from src.brique.board import DEFAULT_BOARD_SIZE
from src.brique.game_state import GameState, Status
from src.brique.moves import Move
from src.brique.position import Position
from src.brique.rules import GameRules, RuleType, create_rules
from src.brique.stone import Stone
from src.core.exceptions import GameOverError
from src.core.models import GameSnapshot
from src.core.shared_types import Color
from src.core.shared_types import Status as SharedStatus

logger = logging.getLogger(__name__)

STONE_TO_COLOR: dict[Stone, Color] = {
    Stone.BLACK: Color.BLACK,
    Stone.WHITE: Color.WHITE,
}

STATUS_TO_SHARED: dict[Status, SharedStatus] = {
    Status.IN_PROGRESS: SharedStatus.IN_PROGRESS,
    Status.BLACK_WON: SharedStatus.BLACK_WON,
    Status.WHITE_WON: SharedStatus.WHITE_WON,
    Status.ABORTED: SharedStatus.ABORTED,
}


class GameEngine:
    """
    Runs a single game.
    ----

    state machine over the status: IN_PROGRESS --> BLACK_WON | WHITE_WON | ABORTED (terminal)

    * illegal moves are reported with False (caller simply asks again)
    * acting on a finished game raises GameOverError (no caller should get there through normal flow)
    """

    def __init__(
        self,
        board_size: int = DEFAULT_BOARD_SIZE,
        rule_type: RuleType = RuleType.STANDARD,
        rules: Optional[GameRules] = None,
    ) -> None:
        self._state = GameState(board_size)
        self._rules = rules if rules is not None else create_rules(rule_type)

    @property
    def state(self) -> GameState:
        """Exposed for read access by renderers and controllers."""
        return self._state

    @property
    def rules(self) -> GameRules:
        return self._rules

    @property
    def winner(self) -> Stone:
        return self._state.winner

    @property
    def last_move(self) -> Optional[Move]:
        return self._state.last_move

    def is_game_over(self) -> bool:
        return not self._state.is_in_progress()

    def play_move(self, position: Position) -> bool:
        """
        Attempt to place a stone for the current player.
        -----

        1. refuse to act on a finished game
        2. validate with the rules --> False if illegal (board and turn unchanged)
        3. let the rules place the stone and apply escort fills / captures
        4. record the move
        5. did the mover connect their edges? --> declare winner (turn is NOT switched)
        6. White placed a stone instead of swapping --> pie rule is forfeited
        7. switch turn
        """
        if self.is_game_over():
            raise GameOverError(
                f"Cannot play a move after the game has ended. status: {self._state.status.name}"
            )

        player = self._state.current_player
        move = Move(position, player)

        if not self._rules.is_valid_move(self._state, move):
            logger.debug("Rejected %s", move)
            return False

        played = self._rules.process_move(self._state, move)
        self._state.record_move(played)

        if self._rules.check_win_condition(self._state, player):
            self._state.declare_winner(player)
            logger.info(
                "%s wins after %d move(s)", player.name, self._state.move_count
            )
            return True

        if player == Stone.WHITE and self._state.pie_rule_available:
            self._state.turn_off_pie_rule()

        self._state.switch_player()
        return True

    def apply_pie_rule(self) -> None:
        """White swaps colors instead of moving. Raises GameStateError if not eligible."""
        self._state.apply_pie_rule()
        logger.info("Pie rule applied")

    def abort(self) -> None:
        self._state.abort()
        logger.info("Game aborted after %d move(s)", self._state.move_count)

    def to_snapshot(self) -> GameSnapshot:
        """Read model of the current game for renderers / the service layer."""
        last = self._state.last_move
        winner = self._state.winner
        return GameSnapshot(
            board_size=self._state.board.size,
            board_rows=self._state.board.rows(),
            current_player=STONE_TO_COLOR[self._state.current_player],
            status=STATUS_TO_SHARED[self._state.status],
            pie_rule_available=self._state.pie_rule_available,
            move_count=self._state.move_count,
            winner=STONE_TO_COLOR.get(winner),
            last_filled=[(pos.row, pos.col) for pos in last.filled] if last else [],
            last_captured=[(pos.row, pos.col) for pos in last.captured] if last else [],
        )
