"""Referee checks raise MoveRejected with a reason."""

import pytest

from Omok_Board_Game.Board import Board
from Omok_Board_Game.engine import referee
from Omok_Board_Game.engine.referee import MoveRejected, RejectReason
from Omok_Board_Game.engine.win_detector import WinResult


def test_valid_move_passes():
    b = Board(size=15)
    assert referee.check_move(b, 112) is True


def test_occupied_cell_rejected():
    b = Board(size=9).place(4, "X")
    with pytest.raises(MoveRejected) as info:
        referee.check_move(b, 4)
    assert info.value.reason is RejectReason.CELL_OCCUPIED


def test_game_over_checked_before_occupancy():
    b = Board(size=9).place(4, "X")
    with pytest.raises(MoveRejected) as info:
        referee.check_move(b, 4, win_result=WinResult("X", (0, 1, 2, 3, 4)))
    assert info.value.reason is RejectReason.GAME_OVER


def test_rejection_is_a_value_error():
    with pytest.raises(ValueError, match="move out of bounds"):
        referee.check_move(Board(size=9), 99)


def test_jump_bounds():
    assert referee.check_jump(3, 2) is True
    for bad in (-1, 3, 2.0, True):
        with pytest.raises(MoveRejected) as info:
            referee.check_jump(3, bad)
        assert info.value.reason is RejectReason.MOVE_OUT_OF_RANGE


def test_board_size_must_be_allowed():
    assert referee.check_board_size(13, (9, 13, 15)) is True
    with pytest.raises(MoveRejected, match="allowed: 9, 13, 15"):
        referee.check_board_size(19, (9, 13, 15))
