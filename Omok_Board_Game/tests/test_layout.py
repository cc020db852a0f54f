"""Layout geometry: compact breakpoint, cell hit-testing and panel buttons."""

from Omok_Board_Game.Player import Intent
from Omok_Board_Game.engine import history
from Omok_Board_Game.gui import layout
from Omok_Board_Game.gui.themes import THEMES, theme_label


def _layout(width=1100, height=820, size=15, moves=None, **kwargs):
    moves = moves if moves is not None else history.move_list(history.new_game(size))
    return layout.compute_layout(width, height, size, moves, **kwargs)


def test_compact_flag_follows_breakpoint():
    assert _layout(width=768).compact
    assert not _layout(width=769).compact
    assert _layout(width=1000, compact_breakpoint=1000).compact


def test_cells_hit_test_to_row_major_index():
    lay = _layout(size=9)
    for index in (0, 8, 40, 80):
        cx, cy = lay.cell_rect(index).center
        assert lay.hit_test((cx, cy)) == Intent("play", index)


def test_board_fits_window_in_both_layouts():
    for width in (500, 1100):
        lay = _layout(width=width, height=900, size=15)
        assert lay.board_rect.x + lay.board_rect.w <= width
        assert lay.board_rect.y + lay.board_rect.h <= 900


def test_outside_board_is_dead_space():
    lay = _layout(size=9)
    right_edge = lay.board_rect.x + lay.board_rect.w
    assert lay.cell_at((right_edge + 1, lay.board_rect.y + 5)) is None
    assert lay.cell_at((lay.board_rect.x - 1, lay.board_rect.y + 5)) is None


def test_settings_and_control_buttons():
    lay = _layout(size=13, theme="dark", ascending=True)
    by_label = {b.label: b for b in lay.buttons}

    assert [b.label for b in lay.buttons if b.intent.kind == "size"] == ["9x9", "13x13", "15x15"]
    assert by_label["13x13"].active and not by_label["9x9"].active
    assert [b.label for b in lay.buttons if b.intent.kind == "theme"] == [theme_label(t) for t in THEMES]
    assert by_label["Dark"].active

    assert lay.hit_test(by_label["Restart Game"].rect.center) == Intent("restart")
    assert by_label["▼ Descending"].intent == Intent("sort")
    assert _layout(ascending=False).buttons[-1].label == "▲ Ascending"


def test_move_buttons_follow_display_order():
    state = history.new_game(9)
    for index in range(3):
        state = history.play(state, index).state
    moves = history.move_list(state, ascending=False)
    lay = _layout(size=9, moves=moves)
    assert [b.label for b in lay.move_buttons] == ["Move #3", "Move #2", "Move #1", "Game start"]
    assert lay.move_buttons[0].active
    assert lay.hit_test(lay.move_buttons[-1].rect.center) == Intent("jump", 0)


def test_long_move_list_keeps_current_visible():
    state = history.new_game(15)
    for index in range(60):
        state = history.play(state, index * 3 % 225).state
    lay = _layout(width=600, height=900, size=15, moves=history.move_list(state))
    assert len(lay.move_buttons) < len(state.history)
    assert lay.move_buttons[-1].label == "Move #60"
    assert lay.move_buttons[-1].active


def test_visible_window():
    assert layout.visible_window(3, 2, 10) == (0, 3)
    assert layout.visible_window(50, 0, 10) == (0, 10)
    assert layout.visible_window(50, 49, 10) == (40, 50)
    assert layout.visible_window(50, 5, 0) == (5, 6)
