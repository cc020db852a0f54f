"""Console rendering of the board, status and move list."""

from Omok_Board_Game.Omokgame import Omokgame
from Omok_Board_Game.gui.text_view import make_console_renderer, render_board, render_text
from Omok_Board_Game.utils.settings import Settings


def test_render_board_headers_and_marks():
    squares = [None] * 81
    squares[0] = "X"
    squares[10] = "O"
    text = render_board(squares, 9)
    lines = text.splitlines()
    assert len(lines) == 10
    assert lines[0].split() == [str(c) for c in range(9)]
    assert lines[1].split()[:3] == ["0", "X", "."]
    assert lines[2].split()[:3] == ["1", ".", "O"]


def test_winning_line_is_bracketed():
    game = Omokgame(Settings(board_size=9), logger=lambda *_: None)
    for index in [0, 9, 1, 10, 2, 11, 3, 12, 4]:
        game.play(index)
    text = render_text(game)
    assert "[X][X][X][X][X]" in text
    assert "Winner: X" in text
    assert "Moves (10):" in text
    assert " *   9. Move #9" in text


def test_console_renderer_writes_once_per_call():
    out = []
    game = Omokgame(Settings(board_size=13, theme="nature"), logger=lambda *_: None)
    make_console_renderer(out.append)(game)
    assert len(out) == 1
    assert out[0].startswith("Board: 13x13 | Theme: Nature | Order: ascending")
    assert "Game start" in out[0]
