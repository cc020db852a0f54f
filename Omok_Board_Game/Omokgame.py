"""Interactive game session: owns the history state and presentational settings."""

try:
    from engine import history
    from engine.referee import RejectReason
    from utils.logger import log_event
    from utils.settings import THEMES, Settings
except ImportError:
    from Omok_Board_Game.engine import history
    from Omok_Board_Game.engine.referee import RejectReason
    from Omok_Board_Game.utils.logger import log_event
    from Omok_Board_Game.utils.settings import THEMES, Settings


class Omokgame:
    def __init__(self, settings=None, logger=log_event, renderer=None, closer=None):
        self.settings = (settings or Settings()).validate()
        self.state = history.new_game(self.settings.board_size, self.settings.allowed_board_sizes)
        self.theme = self.settings.theme
        self.ascending = self.settings.ascending
        self.compact = False
        self.logger = logger
        self.renderer = renderer
        self.closer = closer

    # --- derived views -------------------------------------------------
    @property
    def board_size(self):
        return self.state.board_size

    @property
    def squares(self):
        return self.state.squares

    @property
    def status(self):
        return self.state.status

    @property
    def win_result(self):
        return self.state.win_result

    def moves(self):
        return history.move_list(self.state, ascending=self.ascending)

    # --- game intents --------------------------------------------------
    def _commit(self, outcome, description):
        if outcome.applied:
            self.state = outcome.state
            self.logger(description)
        else:
            self.logger(f"Ignored: {description} ({outcome.reason.value})")
        return outcome

    def play(self, index):
        mark = self.state.next_mark
        outcome = self._commit(history.play(self.state, index), f"{mark} plays {index}")
        if outcome.applied:
            if self.state.win_result is not None:
                self.logger(self.state.status)
            elif self.state.is_draw:
                self.logger("Result: Draw (board full)")
        return outcome

    def play_at(self, row, col):
        size = self.state.board_size
        if not (0 <= row < size and 0 <= col < size):
            outcome = history.Rejected(self.state, RejectReason.OUT_OF_BOUNDS, (row, col))
            return self._commit(outcome, f"{self.state.next_mark} plays ({row}, {col})")
        return self.play(row * size + col)

    def jump_to(self, move):
        return self._commit(history.jump_to(self.state, move), f"Jump to move {move}")

    def restart(self):
        return self._commit(history.restart(self.state), "Restart")

    def set_board_size(self, size):
        return self._commit(history.set_board_size(self.state, size), f"Board size {size}x{size}")

    # --- presentation-only settings -------------------------------------
    def set_theme(self, theme):
        if theme not in THEMES:
            self.logger(f"Ignored: unknown theme {theme!r}")
            return False
        self.theme = theme
        return True

    def toggle_sort_order(self):
        self.ascending = not self.ascending
        return self.ascending

    def update_viewport(self, width):
        self.compact = width <= self.settings.compact_breakpoint
        return self.compact

    def dispatch(self, intent):
        """Route an Intent to its handler; returns the handler's result."""
        kind, value = intent
        if kind == "play":
            if isinstance(value, tuple):
                return self.play_at(*value)
            return self.play(value)
        if kind == "jump":
            return self.jump_to(value)
        if kind == "restart":
            return self.restart()
        if kind == "size":
            return self.set_board_size(value)
        if kind == "theme":
            return self.set_theme(value)
        if kind == "sort":
            return self.toggle_sort_order()
        raise ValueError(f"Unsupported intent: {kind}")

    def run(self, player):
        """Pump intents from `player` until it returns None or asks to quit."""
        try:
            while True:
                if self.renderer:
                    self.renderer(self)
                intent = player.next_intent(self)
                if intent is None or intent.kind == "quit":
                    break
                self.dispatch(intent)
            return self.state
        finally:
            if self.closer:
                self.closer()
