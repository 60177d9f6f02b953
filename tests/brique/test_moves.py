"""Unit tests for src/brique/moves.py"""

from src.brique.moves import Move
from src.brique.position import Position
from src.brique.stone import Stone


def test_new_move_has_no_side_effects() -> None:
    move = Move(Position(1, 1), Stone.BLACK)
    assert move.filled == ()
    assert move.captured == ()
    assert not move.is_capture


def test_with_effects_returns_new_move() -> None:
    """The original move is left as it was (builder style, no shared mutable state)"""
    move = Move(Position(2, 2), Stone.BLACK)
    played = move.with_effects(
        filled=[Position(1, 1), Position(0, 3)], captured=[Position(1, 1)]
    )

    assert move.filled == ()
    assert played.position == move.position
    assert played.stone == move.stone
    assert played.filled == (Position(1, 1), Position(0, 3))
    assert played.captured == (Position(1, 1),)
    assert played.is_capture


def test_with_effects_keeps_order_and_drops_duplicates() -> None:
    move = Move(Position(0, 0), Stone.WHITE).with_effects(
        filled=[Position(2, 0), Position(1, 0), Position(2, 0)], captured=[]
    )
    assert move.filled == (Position(2, 0), Position(1, 0))


def test_str() -> None:
    assert str(Move(Position(0, 4), Stone.WHITE)) == "white at (0, 4)"
