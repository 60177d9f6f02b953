"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.brique.board import DEFAULT_BOARD_SIZE
from src.brique.rules import RuleType
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Status

Coordinates = tuple[int, int]


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    board_size: int = DEFAULT_BOARD_SIZE
    rule_type: RuleType = RuleType.STANDARD

    @field_validator("board_size")
    @classmethod
    def validate_board_size(cls, value: int) -> int:
        if value <= 0:
            raise InvalidRequestError(
                f"Board size must be a positive integer, got {value}."
            )
        return value


class PlaceStoneRequest(BaseModel):
    """
    Place a stone for the player whose turn it is.
    NOTE: coordinates outside of the board are NOT rejected here. The engine answers with an illegal move instead.
    """

    game_id: UUID
    row: int
    col: int


class PieRuleRequest(BaseModel):
    game_id: UUID


class AbortGameRequest(BaseModel):
    game_id: UUID


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    board_size: int
    board: list[str]
    current_player: Color
    status: Status
    pie_rule_available: bool
    move_count: int
    winner: Optional[Color]


class MoveResponse(BaseModel):
    accepted: bool
    filled: list[Coordinates]
    captured: list[Coordinates]
    game: GameResponse
