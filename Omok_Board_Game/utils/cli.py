"""CLI options for board size, theme, display mode and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Omok: five in a row with move history")
    parser.add_argument("--board-size", type=int, help="Board size (9, 13 or 15)")
    parser.add_argument(
        "--theme",
        choices=["classic", "modern", "nature", "dark"],
        default=None,
        help="Colour theme (default from settings)",
    )
    parser.add_argument(
        "--descending",
        action="store_const",
        const="descending",
        dest="sort_order",
        help="List moves newest first",
    )
    parser.add_argument("--breakpoint", type=int, default=None, help="Window width (px) for the compact layout")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--gui", action="store_true", help="Open the pygame window instead of the console board")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)
