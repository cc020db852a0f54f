"""Settings loading (YAML) and validation for board size, theme and layout."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path

import yaml

PACKAGE_DIR = Path(__file__).resolve().parents[1]
DEFAULT_SETTINGS_PATH = "config/settings.yaml"

THEMES = ("classic", "modern", "nature", "dark")
SORT_ORDERS = ("ascending", "descending")


@dataclass(frozen=True)
class Settings:
    board_size: int = 15
    allowed_board_sizes: tuple = (9, 13, 15)
    theme: str = "classic"
    sort_order: str = "ascending"
    compact_breakpoint: int = 768
    window_size: tuple = field(default=(1100, 820))

    @property
    def ascending(self) -> bool:
        return self.sort_order == "ascending"

    def validate(self) -> "Settings":
        if not self.allowed_board_sizes:
            raise ValueError("allowed_board_sizes must not be empty")
        for size in self.allowed_board_sizes:
            if not isinstance(size, int) or size < 1:
                raise ValueError(f"invalid board size in allowed_board_sizes: {size!r}")
        if self.board_size not in self.allowed_board_sizes:
            raise ValueError(
                f"board_size {self.board_size} not in allowed sizes {list(self.allowed_board_sizes)}"
            )
        if self.theme not in THEMES:
            raise ValueError(f"unknown theme {self.theme!r}; choose from {', '.join(THEMES)}")
        if self.sort_order not in SORT_ORDERS:
            raise ValueError(f"sort_order must be one of {', '.join(SORT_ORDERS)}")
        if self.compact_breakpoint < 0:
            raise ValueError("compact_breakpoint must be non-negative")
        width, height = self.window_size
        if width <= 0 or height <= 0:
            raise ValueError("window_size must be positive")
        return self


def resolve_settings_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Omok_Board_Game/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PACKAGE_DIR / p
    return candidate if candidate.exists() else p


def settings_from_dict(data: dict) -> Settings:
    defaults = Settings()
    allowed = data.get("allowed_board_sizes", defaults.allowed_board_sizes)
    window = data.get("window_size", defaults.window_size)
    settings = Settings(
        board_size=int(data.get("board_size", defaults.board_size)),
        allowed_board_sizes=tuple(int(s) for s in allowed),
        theme=str(data.get("theme", defaults.theme)).lower(),
        sort_order=str(data.get("sort_order", defaults.sort_order)).lower(),
        compact_breakpoint=int(data.get("compact_breakpoint", defaults.compact_breakpoint)),
        window_size=tuple(int(v) for v in window),
    )
    return settings.validate()


def load_settings(path=DEFAULT_SETTINGS_PATH) -> Settings:
    """Load settings from YAML; a missing file yields the defaults."""
    path = resolve_settings_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return Settings().validate()
    if not isinstance(data, dict):
        raise ValueError(f"settings file {path} must contain a mapping")
    return settings_from_dict(data)


def apply_overrides(settings: Settings, **overrides) -> Settings:
    """Apply CLI overrides; None values keep the loaded setting."""
    changes = {k: v for k, v in overrides.items() if v is not None}
    return replace(settings, **changes).validate()
