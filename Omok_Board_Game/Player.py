"""Intent sources (console or GUI) that feed user actions into a game session."""

from typing import NamedTuple, Optional

INTENT_KINDS = ("play", "jump", "restart", "size", "theme", "sort", "quit")

HELP_TEXT = (
    "Commands: 'r c' or 'play r c' (0-indexed), 'jump m', 'restart', "
    "'size 9|13|15', 'theme classic|modern|nature|dark', 'sort', 'quit'"
)


class Intent(NamedTuple):
    kind: str
    value: object = None


def parse_command(raw):
    """Parse one console command into an Intent; raise ValueError on bad input."""
    parts = raw.strip().lower().split()
    if not parts:
        raise ValueError("Empty command")

    head, args = parts[0], parts[1:]
    if head.lstrip("-").isdigit():
        head, args = "play", parts

    try:
        if head == "play":
            row, col = (int(a) for a in args)
            return Intent("play", (row, col))
        if head == "jump":
            (move,) = args
            return Intent("jump", int(move))
        if head == "size":
            (size,) = args
            return Intent("size", int(size))
        if head == "theme":
            (name,) = args
            return Intent("theme", name)
    except ValueError as exc:
        raise ValueError(f"Invalid arguments for '{head}'; {HELP_TEXT}") from exc

    if head in ("restart", "sort", "quit") and not args:
        return Intent(head)
    raise ValueError(f"Unknown command '{raw.strip()}'; {HELP_TEXT}")


class Player:
    def next_intent(self, game) -> Optional[Intent]:
        """Return the next user intent, or None when input is exhausted."""
        raise NotImplementedError


class ConsolePlayer(Player):
    def __init__(self, input_fn=input, logger=print, prompt="> "):
        self.input_fn = input_fn
        self.logger = logger
        self.prompt = prompt

    def next_intent(self, game):
        while True:
            try:
                raw = self.input_fn(self.prompt)
            except EOFError:
                return None
            if not raw.strip():
                continue
            try:
                return parse_command(raw)
            except ValueError as exc:
                self.logger(str(exc))


class GuiPlayer(Player):
    def __init__(self, view):
        self.view = view

    def next_intent(self, game):
        return self.view.wait_for_intent(game)
