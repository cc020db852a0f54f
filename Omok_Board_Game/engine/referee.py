"""Move, jump and board-size validation; raises MoveRejected carrying the reason."""

from enum import Enum


class RejectReason(str, Enum):
    GAME_OVER = "game already won"
    BOARD_FULL = "board is full"
    OUT_OF_BOUNDS = "move out of bounds"
    CELL_OCCUPIED = "cell already occupied"
    MOVE_OUT_OF_RANGE = "no such move in history"
    UNSUPPORTED_BOARD_SIZE = "unsupported board size"


class MoveRejected(ValueError):
    def __init__(self, reason, detail=None):
        self.reason = RejectReason(reason)
        self.detail = detail
        message = self.reason.value if detail is None else f"{self.reason.value}: {detail}"
        super().__init__(message)


def check_move(board, index, win_result=None):
    """
    Validate a placement against the game-over state, bounds and occupancy.
    Raises MoveRejected on invalid moves.
    """
    if win_result is not None:
        raise MoveRejected(RejectReason.GAME_OVER, f"{win_result.winner} has five in a row")
    if board.is_full():
        raise MoveRejected(RejectReason.BOARD_FULL)
    if not board.in_bounds(index):
        raise MoveRejected(RejectReason.OUT_OF_BOUNDS, index)
    if not board.is_empty(index):
        raise MoveRejected(RejectReason.CELL_OCCUPIED, index)
    return True


def check_jump(history_length, move):
    if isinstance(move, bool) or not isinstance(move, int) or not 0 <= move < history_length:
        raise MoveRejected(RejectReason.MOVE_OUT_OF_RANGE, move)
    return True


def check_board_size(size, allowed_sizes):
    if size not in allowed_sizes:
        allowed = ", ".join(str(s) for s in sorted(allowed_sizes))
        raise MoveRejected(RejectReason.UNSUPPORTED_BOARD_SIZE, f"{size} (allowed: {allowed})")
    return True
