"""Tests for the Omokgame session: intents, presentation settings and the run loop."""

import pytest

from Omok_Board_Game.Omokgame import Omokgame
from Omok_Board_Game.Player import Intent, Player
from Omok_Board_Game.engine.referee import RejectReason
from Omok_Board_Game.utils.settings import Settings


class SeqPlayer(Player):
    """Deterministic player that replays a fixed intent sequence."""

    def __init__(self, intents):
        self._intents = list(intents)
        self._idx = 0

    def next_intent(self, game):
        if self._idx >= len(self._intents):
            return None
        intent = self._intents[self._idx]
        self._idx += 1
        return intent


def _game(size=9, **kwargs):
    messages = []
    game = Omokgame(Settings(board_size=size, **kwargs), logger=messages.append)
    return game, messages


def test_initial_session_matches_settings():
    game, _ = _game(13, theme="dark", sort_order="descending")
    assert game.board_size == 13
    assert len(game.squares) == 169
    assert game.theme == "dark"
    assert game.ascending is False
    assert game.status == "Next player: X"


def test_play_at_maps_row_col_to_index():
    game, _ = _game()
    game.play_at(2, 3)
    assert game.squares[2 * 9 + 3] == "X"


def test_play_at_out_of_grid_is_rejected_without_wrapping():
    game, messages = _game()
    outcome = game.play_at(0, 9)
    assert outcome.reason is RejectReason.OUT_OF_BOUNDS
    assert game.squares[9] is None
    assert messages[-1].startswith("Ignored:")


def test_repeated_click_is_ignored():
    game, messages = _game()
    assert game.play(5).applied
    before = game.state
    outcome = game.play(5)
    assert not outcome.applied
    assert game.state is before
    assert "cell already occupied" in messages[-1]


def test_winner_is_logged_and_blocks_play():
    game, messages = _game()
    for index in [0, 9, 1, 10, 2, 11, 3, 12, 4]:
        game.play(index)
    assert game.status == "Winner: X"
    assert "Winner: X" in messages
    board = game.state.current_board
    assert not game.play(50).applied
    assert game.state.current_board == board


def test_jump_restart_and_resize():
    game, _ = _game()
    for index in [0, 1, 2, 3]:
        game.play(index)
    assert game.jump_to(1).applied
    assert game.squares[0] == "X" and game.squares[1] is None
    assert not game.jump_to(10).applied
    assert game.state.cursor == 1

    game.restart()
    assert len(game.state.history) == 1
    assert game.board_size == 9

    assert game.set_board_size(15).applied
    assert len(game.squares) == 225
    assert game.set_board_size(10).reason is RejectReason.UNSUPPORTED_BOARD_SIZE
    assert game.board_size == 15


def test_presentation_settings_do_not_touch_game_state():
    game, _ = _game()
    game.play(40)
    state = game.state

    assert game.set_theme("nature") is True
    assert game.set_theme("neon") is False
    assert game.theme == "nature"

    assert game.toggle_sort_order() is False
    assert [m.move for m in game.moves()] == [1, 0]
    assert game.toggle_sort_order() is True

    assert game.update_viewport(768) is True
    assert game.update_viewport(769) is False

    assert game.state is state


def test_dispatch_routes_intents():
    game, _ = _game()
    game.dispatch(Intent("play", (0, 0)))
    game.dispatch(Intent("play", 1))
    game.dispatch(Intent("jump", 1))
    game.dispatch(Intent("theme", "modern"))
    game.dispatch(Intent("sort"))
    assert game.state.cursor == 1
    assert game.theme == "modern"
    assert game.ascending is False
    game.dispatch(Intent("size", 13))
    assert game.board_size == 13
    with pytest.raises(ValueError):
        game.dispatch(Intent("fly", None))


def test_run_renders_each_turn_and_closes():
    rendered = []
    closed = []
    game = Omokgame(
        Settings(board_size=9),
        logger=lambda *_: None,
        renderer=lambda g: rendered.append(g.state.cursor),
        closer=lambda: closed.append(True),
    )
    player = SeqPlayer([Intent("play", 0), Intent("play", 1), Intent("jump", 1), Intent("quit")])
    final = game.run(player)

    assert final.cursor == 1
    assert rendered == [0, 1, 2, 1]
    assert closed == [True]


def test_run_closes_on_error():
    closed = []

    class BrokenPlayer(Player):
        def next_intent(self, game):
            raise RuntimeError("input device lost")

    game = Omokgame(Settings(board_size=9), logger=lambda *_: None, closer=lambda: closed.append(True))
    with pytest.raises(RuntimeError):
        game.run(BrokenPlayer())
    assert closed == [True]
