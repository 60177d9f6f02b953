"""Unit tests for src/brique/game_state.py"""

import pytest

from src.brique.game_state import GameState, Status
from src.brique.moves import Move
from src.brique.position import Position
from src.brique.stone import Stone
from src.core.exceptions import (
    GameOverError,
    GameStateError,
    InvalidConfigurationError,
    PieRuleError,
)


@pytest.fixture
def white_to_move() -> GameState:
    """Black placed at (1,1) on a 3x3 board, now it is White's turn (pie rule still available)"""
    state = GameState(3)
    state.board.set_stone(Position(1, 1), Stone.BLACK)
    state.record_move(Move(Position(1, 1), Stone.BLACK))
    state.switch_player()
    return state


# -- CREATION LOGIC --
def test_new_game_state() -> None:
    state = GameState(5)
    assert state.board.size == 5
    assert state.board.count(Stone.EMPTY) == 25
    assert state.current_player == Stone.BLACK
    assert state.status == Status.IN_PROGRESS
    assert state.is_in_progress()
    assert state.pie_rule_available
    assert state.move_history == ()
    assert state.move_count == 0
    assert state.last_move is None
    assert state.winner == Stone.EMPTY


def test_invalid_board_size() -> None:
    with pytest.raises(InvalidConfigurationError):
        _ = GameState(0)


# -- TURNS / HISTORY --
def test_switch_player() -> None:
    state = GameState(3)
    state.switch_player()
    assert state.current_player == Stone.WHITE
    state.switch_player()
    assert state.current_player == Stone.BLACK


def test_record_move() -> None:
    state = GameState(3)
    first = Move(Position(0, 0), Stone.BLACK)
    second = Move(Position(2, 2), Stone.WHITE)
    state.record_move(first)
    state.record_move(second)

    assert state.move_history == (first, second)
    assert state.move_count == 2
    assert state.last_move == second


def test_history_is_read_only_view() -> None:
    """Changing what you got back does not change the recorded history"""
    state = GameState(3)
    state.record_move(Move(Position(0, 0), Stone.BLACK))

    history = list(state.move_history)
    history.append(Move(Position(1, 1), Stone.WHITE))

    assert isinstance(state.move_history, tuple)
    assert state.move_count == 1


def test_cannot_record_move_after_game_ended() -> None:
    state = GameState(3)
    state.abort()
    with pytest.raises(GameOverError):
        state.record_move(Move(Position(0, 0), Stone.BLACK))


# -- PIE RULE FLAG --
def test_turn_off_pie_rule_is_idempotent() -> None:
    state = GameState(3)
    state.turn_off_pie_rule()
    state.turn_off_pie_rule()
    assert not state.pie_rule_available


# -- END OF GAME --
@pytest.mark.parametrize(
    "stone, status",
    [(Stone.BLACK, Status.BLACK_WON), (Stone.WHITE, Status.WHITE_WON)],
)
def test_declare_winner(stone: Stone, status: Status) -> None:
    state = GameState(3)
    state.declare_winner(stone)
    assert state.status == status
    assert state.winner == stone
    assert not state.is_in_progress()


def test_declare_empty_winner_is_ignored() -> None:
    state = GameState(3)
    state.declare_winner(Stone.EMPTY)
    assert state.status == Status.IN_PROGRESS
    assert state.winner == Stone.EMPTY


def test_abort_from_any_state() -> None:
    state = GameState(3)
    state.abort()
    assert state.status == Status.ABORTED
    assert state.winner == Stone.EMPTY

    won = GameState(3)
    won.declare_winner(Stone.BLACK)
    won.abort()
    assert won.status == Status.ABORTED


# -- PIE RULE --
def test_apply_pie_rule(white_to_move: GameState) -> None:
    """Colors swap, pie rule is gone, and White stays the current player"""
    white_to_move.apply_pie_rule()

    assert white_to_move.board.stone(Position(1, 1)) == Stone.WHITE
    assert white_to_move.board.count(Stone.BLACK) == 0
    assert white_to_move.board.count(Stone.EMPTY) == 8
    assert not white_to_move.pie_rule_available
    assert white_to_move.current_player == Stone.WHITE


def test_apply_pie_rule_swaps_every_stone() -> None:
    state = GameState(3)
    state.board.set_stone(Position(0, 0), Stone.BLACK)
    state.board.set_stone(Position(1, 2), Stone.WHITE)
    state.switch_player()

    state.apply_pie_rule()
    assert state.board.rows() == ["W..", "..B", "..."]


def test_pie_rule_only_once(white_to_move: GameState) -> None:
    white_to_move.apply_pie_rule()
    with pytest.raises(PieRuleError):
        white_to_move.apply_pie_rule()


def test_black_cannot_apply_pie_rule() -> None:
    state = GameState(3)
    with pytest.raises(PieRuleError):
        state.apply_pie_rule()
    assert state.pie_rule_available


def test_pie_rule_after_forfeit(white_to_move: GameState) -> None:
    white_to_move.turn_off_pie_rule()
    with pytest.raises(PieRuleError):
        white_to_move.apply_pie_rule()
    assert white_to_move.board.stone(Position(1, 1)) == Stone.BLACK


def test_pie_rule_on_finished_game(white_to_move: GameState) -> None:
    white_to_move.abort()
    with pytest.raises(GameOverError):
        white_to_move.apply_pie_rule()


def test_pie_rule_errors_are_state_errors() -> None:
    """Shells may catch a single type for every protocol misuse"""
    assert issubclass(PieRuleError, GameStateError)
    assert issubclass(GameOverError, GameStateError)
