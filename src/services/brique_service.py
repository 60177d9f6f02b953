"""Orchestration of communication from a shell (CLI / GUI / API router) to the game engine (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    AbortGameRequest,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveResponse,
    PieRuleRequest,
    PlaceStoneRequest,
)
from src.brique.engine import GameEngine
from src.brique.position import Position
from src.core.exceptions import GameNotFoundError, GameStateError
from src.core.models import GameSnapshot
from src.services.registry import GameRegistry

logger = logging.getLogger(__name__)


class BriqueService:
    """Orchestration of layers for Brique games."""

    def __init__(self, registry: GameRegistry) -> None:
        self.registry = registry

    # -- shell intents ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a new game on an empty board. Black moves first."""
        engine = GameEngine(board_size=request.board_size, rule_type=request.rule_type)
        game_id = self.registry.add(engine)
        logger.info("Created game %s (%dx%d)", game_id, request.board_size, request.board_size)
        return self._create_game_response(game_id, engine.to_snapshot())

    def place_stone(self, request: PlaceStoneRequest) -> MoveResponse:
        """
        Place a stone for the current player.
        ----
        An illegal move is a normal outcome: `accepted` is False and nothing changed.
        Playing on a finished game raises GameOverError.
        """
        engine = self._fetch_game(request.game_id)
        try:
            accepted = engine.play_move(Position(request.row, request.col))
        except GameStateError:
            logger.warning("Rejected move on finished game %s", request.game_id)
            raise

        snapshot = engine.to_snapshot()
        if engine.is_game_over():
            logger.info("Game %s finished: %s", request.game_id, snapshot.status)

        return MoveResponse(
            accepted=accepted,
            filled=snapshot.last_filled if accepted else [],
            captured=snapshot.last_captured if accepted else [],
            game=self._create_game_response(request.game_id, snapshot),
        )

    def apply_pie_rule(self, request: PieRuleRequest) -> GameResponse:
        """White swaps colors instead of placing a stone. Raises GameStateError when not eligible."""
        engine = self._fetch_game(request.game_id)
        try:
            engine.apply_pie_rule()
        except GameStateError as error:
            logger.warning("Pie rule refused for game %s: %s", request.game_id, error)
            raise
        return self._create_game_response(request.game_id, engine.to_snapshot())

    def abort_game(self, request: AbortGameRequest) -> GameResponse:
        """User quit (or its input stream closed)."""
        engine = self._fetch_game(request.game_id)
        engine.abort()
        logger.info("Game %s aborted", request.game_id)
        return self._create_game_response(request.game_id, engine.to_snapshot())

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used by renderers to redraw the board after every intent.
        """
        engine = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, engine.to_snapshot())

    def list_games(self) -> list[UUID]:
        return self.registry.ids()

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Forget a game."""
        if self.registry.remove(request.game_id) is None:
            raise GameNotFoundError(f"Game with {request.game_id=} not found.")

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, snapshot: GameSnapshot) -> GameResponse:
        """Convert info in GameSnapshot to a GameResponse (for game with given ID.)"""
        return GameResponse(
            game_id=game_id,
            board_size=snapshot.board_size,
            board=snapshot.board_rows,
            current_player=snapshot.current_player,
            status=snapshot.status,
            pie_rule_available=snapshot.pie_rule_available,
            move_count=snapshot.move_count,
            winner=snapshot.winner,
        )

    def _fetch_game(self, game_id: UUID) -> GameEngine:
        """Attempt to find the game in the registry and raise error if it fails."""
        engine = self.registry.get(game_id)
        if engine is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return engine
