"""Move history, cursor and derived game status as pure state transitions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Tuple, Union

try:
    from Board import Board
    from engine import referee
    from engine.referee import MoveRejected, RejectReason
    from engine.win_detector import WinResult, detect_win
except ImportError:
    from Omok_Board_Game.Board import Board
    from Omok_Board_Game.engine import referee
    from Omok_Board_Game.engine.referee import MoveRejected, RejectReason
    from Omok_Board_Game.engine.win_detector import WinResult, detect_win


LOGGER = logging.getLogger(__name__)

DEFAULT_BOARD_SIZE = 15
ALLOWED_BOARD_SIZES = (9, 13, 15)


class Phase(str, Enum):
    EMPTY = "empty"
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class GameState:
    board_size: int
    history: Tuple[Board, ...]
    cursor: int = 0
    allowed_sizes: Tuple[int, ...] = ALLOWED_BOARD_SIZES

    @property
    def current_board(self) -> Board:
        return self.history[self.cursor]

    @property
    def squares(self):
        return self.current_board.cells

    @property
    def next_mark(self) -> str:
        return "X" if self.cursor % 2 == 0 else "O"

    @property
    def win_result(self) -> Optional[WinResult]:
        return detect_win(self.current_board.cells, self.board_size)

    @property
    def is_draw(self) -> bool:
        # Board fullness, not cursor arithmetic: the cursor only tracks history position.
        return self.win_result is None and self.current_board.is_full()

    @property
    def phase(self) -> Phase:
        if self.win_result is not None:
            return Phase.WON
        if self.current_board.is_full():
            return Phase.DRAWN
        if self.current_board.filled_count() == 0:
            return Phase.EMPTY
        return Phase.IN_PROGRESS

    @property
    def status(self) -> str:
        result = self.win_result
        if result is not None:
            return f"Winner: {result.winner}"
        if self.current_board.is_full():
            return "It's a draw!"
        return f"Next player: {self.next_mark}"


@dataclass(frozen=True)
class Applied:
    state: GameState

    @property
    def applied(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    state: GameState
    reason: RejectReason
    detail: object = None

    @property
    def applied(self) -> bool:
        return False


Outcome = Union[Applied, Rejected]


@dataclass(frozen=True)
class MoveEntry:
    move: int
    label: str
    is_current: bool


def _rejected(state: GameState, exc: MoveRejected) -> Rejected:
    LOGGER.debug("Rejected: %s", exc)
    return Rejected(state, exc.reason, exc.detail)


def new_game(board_size: int = DEFAULT_BOARD_SIZE, allowed_sizes=ALLOWED_BOARD_SIZES) -> GameState:
    """Fresh state with a single empty board; raises ValueError for unsupported sizes."""
    allowed_sizes = tuple(allowed_sizes)
    referee.check_board_size(board_size, allowed_sizes)
    return GameState(
        board_size=board_size,
        history=(Board.empty(board_size),),
        cursor=0,
        allowed_sizes=allowed_sizes,
    )


def play(state: GameState, index: int) -> Outcome:
    """
    Place the next mark at `index` on the displayed board.

    Any snapshots after the cursor are discarded first, so playing from an
    earlier point in time starts a new branch.
    """
    board = state.current_board
    try:
        referee.check_move(board, index, win_result=state.win_result)
    except MoveRejected as exc:
        return _rejected(state, exc)

    next_board = board.place(index, state.next_mark)
    history = state.history[: state.cursor + 1] + (next_board,)
    return Applied(replace(state, history=history, cursor=len(history) - 1))


def jump_to(state: GameState, move: int) -> Outcome:
    """Move the cursor to `move`; out-of-range requests leave the state unchanged."""
    try:
        referee.check_jump(len(state.history), move)
    except MoveRejected as exc:
        return _rejected(state, exc)
    return Applied(replace(state, cursor=move))


def restart(state: GameState) -> Outcome:
    return Applied(new_game(state.board_size, state.allowed_sizes))


def set_board_size(state: GameState, new_size: int) -> Outcome:
    """Switch board size; always starts a new game, even for the current size."""
    try:
        referee.check_board_size(new_size, state.allowed_sizes)
    except MoveRejected as exc:
        return _rejected(state, exc)
    return Applied(new_game(new_size, state.allowed_sizes))


def move_label(move: int) -> str:
    return "Game start" if move == 0 else f"Move #{move}"


def move_list(state: GameState, ascending: bool = True) -> List[MoveEntry]:
    """Entries for every snapshot; the order only affects display, never history."""
    entries = [
        MoveEntry(move=m, label=move_label(m), is_current=(m == state.cursor))
        for m in range(len(state.history))
    ]
    if not ascending:
        entries.reverse()
    return entries


def last_move_index(state: GameState) -> Optional[int]:
    """Cell index placed by the move that produced the displayed board."""
    if state.cursor == 0:
        return None
    before = state.history[state.cursor - 1].cells
    after = state.current_board.cells
    for i, (a, b) in enumerate(zip(before, after)):
        if a != b:
            return i
    return None
