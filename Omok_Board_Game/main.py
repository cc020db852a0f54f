"""Entry point for Omok. Load config, wire the session, player and view, start the loop."""

import sys

try:
    from utils.cli import parse_args
    from utils.logger import configure_logging, log_event
    from utils.settings import apply_overrides, load_settings
    from Omokgame import Omokgame
    from Player import ConsolePlayer, GuiPlayer, HELP_TEXT
    from gui.text_view import make_console_renderer
except ImportError:
    from Omok_Board_Game.utils.cli import parse_args
    from Omok_Board_Game.utils.logger import configure_logging, log_event
    from Omok_Board_Game.utils.settings import apply_overrides, load_settings
    from Omok_Board_Game.Omokgame import Omokgame
    from Omok_Board_Game.Player import ConsolePlayer, GuiPlayer, HELP_TEXT
    from Omok_Board_Game.gui.text_view import make_console_renderer


def build_settings(args):
    settings = load_settings(args.settings)
    return apply_overrides(
        settings,
        board_size=args.board_size,
        theme=args.theme,
        sort_order=args.sort_order,
        compact_breakpoint=args.breakpoint,
    )


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        settings = build_settings(args)
    except ValueError as exc:
        print(f"Invalid settings: {exc}", file=sys.stderr)
        return 2

    if args.gui:
        try:
            from gui.pygame_view import PygameView
        except ImportError:
            from Omok_Board_Game.gui.pygame_view import PygameView

        view = PygameView(window_size=settings.window_size)
        game = Omokgame(settings, logger=log_event, renderer=view.render, closer=view.close)
        player = GuiPlayer(view)
    else:
        print(HELP_TEXT)
        game = Omokgame(settings, logger=log_event, renderer=make_console_renderer())
        player = ConsolePlayer(logger=log_event)

    final = game.run(player)
    print(final.status)
    return 0


if __name__ == "__main__":
    sys.exit(main())
