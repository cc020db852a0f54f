"""Five-in-a-row detection over a flat, row-major board of any square size."""

from functools import lru_cache
from typing import NamedTuple, Optional, Sequence, Tuple

RUN_LENGTH = 5

# Scan order matters for tie-breaking: horizontal, vertical, diagonal "\", diagonal "/"
DIRECTIONS = (
    ("horizontal", 0, 1),
    ("vertical", 1, 0),
    ("diagonal_down_right", 1, 1),
    ("diagonal_down_left", 1, -1),
)


class WinResult(NamedTuple):
    winner: str
    line: Tuple[int, ...]


def _run_fits(size: int, row: int, col: int, d_row: int, d_col: int) -> bool:
    end_row = row + d_row * (RUN_LENGTH - 1)
    end_col = col + d_col * (RUN_LENGTH - 1)
    return 0 <= end_row < size and 0 <= end_col < size


@lru_cache(maxsize=None)
def candidate_lines(board_size: int) -> Tuple[Tuple[int, ...], ...]:
    """
    Every possible 5-run on a board_size x board_size grid, row-major by start cell.
    Runs never leave the grid or wrap across a row edge; sizes below 5 have none.
    """
    lines = []
    for row in range(board_size):
        for col in range(board_size):
            for _name, d_row, d_col in DIRECTIONS:
                if not _run_fits(board_size, row, col, d_row, d_col):
                    continue
                lines.append(
                    tuple(
                        (row + d_row * step) * board_size + (col + d_col * step)
                        for step in range(RUN_LENGTH)
                    )
                )
    return tuple(lines)


def detect_win(cells: Sequence[Optional[str]], board_size: int) -> Optional[WinResult]:
    """
    Return the first winning line found, or None.

    Pure and cheap enough to call on every render for the supported sizes
    (O(board_size^2) candidate lines, constant work each). Very large boards
    would want an incremental check around the last move instead.
    When several lines win at once the scan order picks one; callers should
    only rely on *a* winning line being returned.
    """
    if board_size < RUN_LENGTH:
        return None
    if len(cells) != board_size * board_size:
        raise ValueError(f"expected {board_size * board_size} cells, got {len(cells)}")

    for line in candidate_lines(board_size):
        first = cells[line[0]]
        if not first:
            continue
        if all(cells[i] == first for i in line[1:]):
            return WinResult(first, line)
    return None


def winning_cells(result: Optional[WinResult]) -> frozenset:
    return frozenset(result.line) if result else frozenset()
