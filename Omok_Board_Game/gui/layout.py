"""Window geometry and hit-testing for the board view (no pygame dependency)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional

try:
    from Player import Intent
    from gui.themes import theme_label
    from utils.settings import THEMES
except ImportError:
    from Omok_Board_Game.Player import Intent
    from Omok_Board_Game.gui.themes import theme_label
    from Omok_Board_Game.utils.settings import THEMES

MARGIN = 16
BUTTON_H = 32
BUTTON_GAP = 8
STATUS_H = 36
MOVE_ROW_H = 28
SIDE_PANEL_W = 260
SETTINGS_H = 56
SETTINGS_H_COMPACT = 2 * BUTTON_H + 3 * BUTTON_GAP
MIN_CELL = 8
MIN_PANEL_H = 4 * MOVE_ROW_H


class Rect(NamedTuple):
    x: int
    y: int
    w: int
    h: int

    def contains(self, pos):
        px, py = pos
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h

    @property
    def center(self):
        return self.x + self.w / 2, self.y + self.h / 2


class Button(NamedTuple):
    rect: Rect
    label: str
    intent: Intent
    active: bool = False


def sort_label(ascending):
    return "▼ Descending" if ascending else "▲ Ascending"


@dataclass
class Layout:
    width: int
    height: int
    compact: bool
    board_size: int
    board_rect: Rect
    cell_size: int
    cell_padding: int
    status_pos: tuple
    moves_header_pos: tuple
    size_label_pos: tuple
    theme_label_pos: tuple
    buttons: List[Button] = field(default_factory=list)
    move_buttons: List[Button] = field(default_factory=list)

    def cell_rect(self, index):
        row, col = divmod(index, self.board_size)
        return Rect(
            self.board_rect.x + col * self.cell_size,
            self.board_rect.y + row * self.cell_size,
            self.cell_size,
            self.cell_size,
        )

    def cell_at(self, pos) -> Optional[int]:
        if not self.board_rect.contains(pos):
            return None
        col = int((pos[0] - self.board_rect.x) // self.cell_size)
        row = int((pos[1] - self.board_rect.y) // self.cell_size)
        if 0 <= row < self.board_size and 0 <= col < self.board_size:
            return row * self.board_size + col
        return None

    def hit_test(self, pos) -> Optional[Intent]:
        """Return the intent for a click at `pos`, or None for dead space."""
        for button in self.buttons + self.move_buttons:
            if button.rect.contains(pos):
                return button.intent
        index = self.cell_at(pos)
        if index is not None:
            return Intent("play", index)
        return None


def _row_of_buttons(x, y, labels_intents, width, active):
    buttons = []
    for label, intent in labels_intents:
        buttons.append(Button(Rect(x, y, width, BUTTON_H), label, intent, active=(intent.value == active)))
        x += width + BUTTON_GAP
    return buttons, x


def visible_window(count, current_pos, rows_fit):
    """First and one-past-last entry to show so that `current_pos` stays visible."""
    rows_fit = max(1, rows_fit)
    if count <= rows_fit:
        return 0, count
    start = 0 if current_pos < rows_fit else current_pos - rows_fit + 1
    return start, start + rows_fit


def compute_layout(
    width,
    height,
    board_size,
    moves,
    sizes=(9, 13, 15),
    theme="classic",
    ascending=True,
    compact_breakpoint=768,
):
    """
    Place every widget for a window of width x height.

    moves: MoveEntry list already in display order.
    Windows at or below the breakpoint stack the move panel under the board.
    """
    compact = width <= compact_breakpoint

    # Settings panel: sizes then themes, on one row or two when compact
    size_w = 64
    theme_w = 84
    label_w = 96
    y = BUTTON_GAP if compact else (SETTINGS_H - BUTTON_H) // 2
    size_label_pos = (MARGIN, y + BUTTON_H // 2)
    size_buttons, x = _row_of_buttons(
        MARGIN + label_w,
        y,
        [(f"{s}x{s}", Intent("size", s)) for s in sizes],
        size_w,
        board_size,
    )
    if compact:
        y += BUTTON_H + BUTTON_GAP
        x = MARGIN
    else:
        x += 2 * MARGIN
    theme_label_pos = (x, y + BUTTON_H // 2)
    theme_x = x + label_w - 24
    fit_w = (width - theme_x - MARGIN) // len(THEMES) - BUTTON_GAP
    theme_buttons, _ = _row_of_buttons(
        theme_x,
        y,
        [(theme_label(t), Intent("theme", t)) for t in THEMES],
        max(48, min(theme_w, fit_w)),
        theme,
    )
    top = SETTINGS_H_COMPACT if compact else SETTINGS_H

    # Board area
    status_pos = (MARGIN, top + MARGIN + STATUS_H // 2)
    board_y = top + MARGIN + STATUS_H
    if compact:
        avail_w = width - 2 * MARGIN
        avail_h = height - board_y - MARGIN - (2 * BUTTON_H + MIN_PANEL_H)
    else:
        avail_w = width - SIDE_PANEL_W - 3 * MARGIN
        avail_h = height - board_y - MARGIN
    cell_size = max(MIN_CELL, min(avail_w, avail_h) // board_size)
    board_px = cell_size * board_size
    board_rect = Rect(MARGIN, board_y, board_px, board_px)

    # Controls + move list
    if compact:
        panel_x = MARGIN
        panel_y = board_rect.y + board_px + MARGIN
        panel_w = width - 2 * MARGIN
    else:
        panel_x = board_rect.x + board_px + MARGIN
        panel_y = board_y
        panel_w = max(SIDE_PANEL_W, width - panel_x - MARGIN)
    half = (panel_w - BUTTON_GAP) // 2
    restart = Button(Rect(panel_x, panel_y, half, BUTTON_H), "Restart Game", Intent("restart"))
    sort = Button(
        Rect(panel_x + half + BUTTON_GAP, panel_y, half, BUTTON_H),
        sort_label(ascending),
        Intent("sort"),
    )
    header_y = panel_y + BUTTON_H + BUTTON_GAP
    moves_header_pos = (panel_x, header_y + MOVE_ROW_H // 2)
    list_y = header_y + MOVE_ROW_H
    rows_fit = (height - MARGIN - list_y) // MOVE_ROW_H

    current_pos = next((i for i, m in enumerate(moves) if m.is_current), 0)
    start, stop = visible_window(len(moves), current_pos, rows_fit)
    move_buttons = []
    for row, entry in enumerate(moves[start:stop]):
        rect = Rect(panel_x, list_y + row * MOVE_ROW_H, panel_w, MOVE_ROW_H - 2)
        move_buttons.append(Button(rect, entry.label, Intent("jump", entry.move), active=entry.is_current))

    return Layout(
        width=width,
        height=height,
        compact=compact,
        board_size=board_size,
        board_rect=board_rect,
        cell_size=cell_size,
        cell_padding=1 if compact else 2,
        status_pos=status_pos,
        moves_header_pos=moves_header_pos,
        size_label_pos=size_label_pos,
        theme_label_pos=theme_label_pos,
        buttons=size_buttons + theme_buttons + [restart, sort],
        move_buttons=move_buttons,
    )
