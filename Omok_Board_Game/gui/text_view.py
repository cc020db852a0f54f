"""Plain-text board rendering for console play."""

try:
    from engine.win_detector import winning_cells
    from gui.themes import theme_label
except ImportError:
    from Omok_Board_Game.engine.win_detector import winning_cells
    from Omok_Board_Game.gui.themes import theme_label


def render_board(squares, board_size, highlight=frozenset()):
    """Grid with row/column headers; '.' marks empty cells, [X] marks the winning line."""
    width = len(str(board_size - 1))
    header = " " * (width + 1) + "".join(f"{c:>3}" for c in range(board_size))
    lines = [header]
    for row in range(board_size):
        cells = []
        for col in range(board_size):
            index = row * board_size + col
            value = squares[index] or "."
            cells.append(f"[{value}]" if index in highlight else f" {value} ")
        lines.append(f"{row:>{width}} " + "".join(cells))
    return "\n".join(lines)


def render_text(game):
    lines = [
        f"Board: {game.board_size}x{game.board_size} | Theme: {theme_label(game.theme)}"
        f" | Order: {'ascending' if game.ascending else 'descending'}",
        render_board(game.squares, game.board_size, winning_cells(game.win_result)),
        game.status,
        f"Moves ({len(game.state.history)}):",
    ]
    for entry in game.moves():
        marker = "*" if entry.is_current else " "
        lines.append(f" {marker} {entry.move:>3}. {entry.label}")
    return "\n".join(lines)


def make_console_renderer(write=print):
    def renderer(game):
        write(render_text(game))

    return renderer
