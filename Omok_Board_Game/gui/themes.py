"""Colour palettes for the board themes."""

from typing import NamedTuple


class Theme(NamedTuple):
    background: tuple
    panel: tuple
    board: tuple
    grid: tuple
    mark_x: tuple
    mark_o: tuple
    winning: tuple
    text: tuple
    button: tuple
    button_active: tuple
    button_text: tuple


THEMES = {
    "classic": Theme(
        background=(40, 30, 20),
        panel=(60, 40, 20),
        board=(209, 179, 135),
        grid=(60, 40, 20),
        mark_x=(20, 20, 20),
        mark_o=(245, 245, 245),
        winning=(200, 0, 0),
        text=(230, 230, 230),
        button=(120, 90, 60),
        button_active=(190, 140, 70),
        button_text=(250, 245, 235),
    ),
    "modern": Theme(
        background=(236, 239, 244),
        panel=(52, 58, 72),
        board=(255, 255, 255),
        grid=(200, 205, 215),
        mark_x=(66, 133, 244),
        mark_o=(234, 67, 53),
        winning=(251, 188, 5),
        text=(40, 44, 52),
        button=(96, 108, 128),
        button_active=(66, 133, 244),
        button_text=(255, 255, 255),
    ),
    "nature": Theme(
        background=(222, 235, 212),
        panel=(56, 94, 60),
        board=(176, 206, 150),
        grid=(96, 130, 80),
        mark_x=(94, 60, 30),
        mark_o=(250, 250, 235),
        winning=(240, 200, 60),
        text=(34, 60, 36),
        button=(98, 140, 92),
        button_active=(60, 110, 55),
        button_text=(245, 250, 240),
    ),
    "dark": Theme(
        background=(18, 18, 22),
        panel=(34, 34, 42),
        board=(48, 48, 58),
        grid=(80, 80, 96),
        mark_x=(120, 200, 255),
        mark_o=(255, 150, 120),
        winning=(170, 110, 255),
        text=(220, 220, 230),
        button=(64, 64, 80),
        button_active=(110, 90, 200),
        button_text=(235, 235, 245),
    ),
}


def get_theme(name):
    try:
        return THEMES[name]
    except KeyError:
        raise ValueError(f"Unknown theme: {name}") from None


def theme_label(name):
    return name[:1].upper() + name[1:]
