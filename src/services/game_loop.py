"""
Engine-owner loop.

The engine does no locking, so exactly one thread may touch it: the thread running `GameLoop.run`.
Other threads (UI, input readers) only `submit` intents to the inbound queue and read TurnReports from the outbound queue.
"""

import logging
import queue
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.brique.engine import GameEngine
from src.brique.moves import Move
from src.core.exceptions import GameStateError
from src.core.models import GameSnapshot
from src.services.commands import ActionCommand, PlaceStone, Quit, Swap

logger = logging.getLogger(__name__)


class ReportType(Enum):
    STARTED = "started"
    MOVE_PLAYED = "move played"
    ILLEGAL_MOVE = "illegal move"
    PIE_RULE_APPLIED = "pie rule applied"
    PIE_RULE_REFUSED = "pie rule refused"
    ERROR = "error"
    ABORTED = "aborted"
    GAME_OVER = "game over"


@dataclass(frozen=True)
class TurnReport:
    type: ReportType
    message: str
    snapshot: GameSnapshot
    move: Optional[Move] = None


class GameLoop:
    """
    Consumes ActionCommands one by one until the game is over, a Quit arrives, or `stop` is called.
    Always ends with a single GAME_OVER report.
    """

    def __init__(
        self,
        engine: GameEngine,
        commands: Optional["queue.Queue[ActionCommand]"] = None,
        reports: Optional["queue.Queue[TurnReport]"] = None,
        poll_interval: float = 0.1,
    ) -> None:
        self.engine = engine
        self.commands: "queue.Queue[ActionCommand]" = (
            commands if commands is not None else queue.Queue()
        )
        self.reports: "queue.Queue[TurnReport]" = (
            reports if reports is not None else queue.Queue()
        )
        self.poll_interval = poll_interval

        # cleared by stop(), a Quit, or a fatal error
        self._running = threading.Event()
        self._running.set()
        self._thread: Optional[threading.Thread] = None

    # ---------- API for other threads ----------

    def submit(self, command: ActionCommand) -> None:
        self.commands.put(command)

    def start(self) -> threading.Thread:
        """Run the loop on its own (daemon) thread. Only one owner thread may run at a time."""
        if self._thread is not None and self._thread.is_alive():
            raise GameStateError("Game loop is already running on another thread.")
        self._thread = threading.Thread(target=self.run, name="brique-game-loop", daemon=True)
        self._thread.start()
        return self._thread

    def stop(self) -> None:
        """Ask the loop to finish. It exits after the command it is currently handling."""
        self._running.clear()

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    @property
    def is_running(self) -> bool:
        return self._running.is_set()

    # ---------- Main loop (engine owner) ----------

    def run(self) -> None:
        self._publish(ReportType.STARTED, "Game started.")

        try:
            while self._running.is_set() and not self.engine.is_game_over():
                # short timeout so `stop` is noticed even when nobody submits anything
                try:
                    command = self.commands.get(timeout=self.poll_interval)
                except queue.Empty:
                    continue
                if not self._running.is_set():
                    break
                self._handle(command)
        finally:
            self._running.clear()
            winner = self.engine.winner
            message = f"Winner: {winner.name}" if winner.is_player else "No winner."
            self._publish(ReportType.GAME_OVER, message)

    # ---------- Command dispatch ----------

    def _handle(self, command: ActionCommand) -> None:
        try:
            self._dispatch(command)
        except Exception as error:
            logger.exception("Stopping game loop: %r failed", command)
            self._publish(ReportType.ERROR, f"Error: {error}")
            self._running.clear()

    def _dispatch(self, command: ActionCommand) -> None:
        match command:
            case Quit():
                self.engine.abort()
                self._publish(ReportType.ABORTED, "Game aborted.")
                self._running.clear()
            case Swap():
                self._handle_swap()
            case PlaceStone():
                self._handle_place_stone(command)
            case _:
                logger.warning("Ignoring unknown command %r", command)

    def _handle_swap(self) -> None:
        try:
            self.engine.apply_pie_rule()
        except GameStateError as error:
            self._publish(ReportType.PIE_RULE_REFUSED, f"Cannot swap: {error}")
            return
        self._publish(ReportType.PIE_RULE_APPLIED, "Pie rule applied! Colors swapped.")

    def _handle_place_stone(self, command: PlaceStone) -> None:
        player = self.engine.state.current_player
        try:
            accepted = self.engine.play_move(command.position)
        except GameStateError as error:
            self._publish(ReportType.ERROR, f"Error: {error}")
            self._running.clear()
            return

        if not accepted:
            self._publish(
                ReportType.ILLEGAL_MOVE,
                f"Invalid move at {command.position}. Try again.",
            )
            return

        move = self.engine.last_move
        message = f"{player.name} placed at {command.position}"
        if move is not None and move.filled:
            message += f", escort fill: {len(move.filled)} cell(s)"
        if move is not None and move.captured:
            message += f", captured: {len(move.captured)} opponent stone(s)"
        self._publish(ReportType.MOVE_PLAYED, message, move)

    def _publish(self, report_type: ReportType, message: str, move: Optional[Move] = None) -> None:
        logger.debug("%s: %s", report_type.value, message)
        self.reports.put(TurnReport(report_type, message, self.engine.to_snapshot(), move))
