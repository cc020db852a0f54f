"""Omok_Board_Game package exports."""

from .Board import Board
from .Omokgame import Omokgame
from .Player import Player, ConsolePlayer, GuiPlayer, Intent, parse_command
from .engine.history import GameState, Applied, Rejected, new_game
from .engine.win_detector import WinResult, detect_win

# Subpackages for game engine, GUI, and helpers
from . import engine, gui, utils

__all__ = [
    "Board",
    "Omokgame",
    "Player",
    "ConsolePlayer",
    "GuiPlayer",
    "Intent",
    "parse_command",
    "GameState",
    "Applied",
    "Rejected",
    "new_game",
    "WinResult",
    "detect_win",
    "engine",
    "gui",
    "utils",
]
