from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from src.api.models import CreateGameRequest, PlaceStoneRequest
from src.brique.board import DEFAULT_BOARD_SIZE
from src.brique.rules import RuleType
from src.core.exceptions import InvalidRequestError


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - CreateGameRequest --
def test_default_create_request() -> None:
    request = CreateGameRequest()
    assert request.board_size == DEFAULT_BOARD_SIZE
    assert request.rule_type == RuleType.STANDARD


def test_rule_type_from_string() -> None:
    """A shell can just send the name of the rule set"""
    request = CreateGameRequest(board_size=7, rule_type="standard")
    assert request.rule_type == RuleType.STANDARD


@pytest.mark.parametrize("board_size", [0, -1, -19])
def test_non_positive_board_size(board_size: int) -> None:
    with pytest.raises(InvalidRequestError):
        _ = CreateGameRequest(board_size=board_size)


def test_unknown_rule_type() -> None:
    with pytest.raises(ValidationError):
        _ = CreateGameRequest(rule_type="house rules")


# -- Validation - PlaceStoneRequest --
def test_valid_place_stone_request(mock_id: UUID) -> None:
    request = PlaceStoneRequest(game_id=mock_id, row=3, col=4)
    assert request.row == 3
    assert request.col == 4


def test_out_of_board_coordinates_pass_through(mock_id: UUID) -> None:
    """The engine decides if the coordinates are on the board, not the request"""
    request = PlaceStoneRequest(game_id=mock_id, row=-1, col=100)
    assert (request.row, request.col) == (-1, 100)


@pytest.mark.parametrize("row", ["a", "one", 1.5])
def test_non_integer_coordinates(mock_id: UUID, row: object) -> None:
    with pytest.raises(ValidationError):
        _ = PlaceStoneRequest(game_id=mock_id, row=row, col=0)
