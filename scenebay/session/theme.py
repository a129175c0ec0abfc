"""
Theme preference persistence.

The session never touches storage directly; it is handed a ThemeStore at
startup and calls load/save through it.
"""

import json
from pathlib import Path
from typing import Protocol

import structlog

from scenebay.scouting.models import Theme

logger = structlog.get_logger()

THEME_KEY = "theme"
VALID_THEMES: tuple[Theme, ...] = ("light", "dark")


class ThemeStore(Protocol):
    """Where the light/dark preference lives between sessions."""

    def load(self) -> Theme | None: ...

    def save(self, theme: Theme) -> None: ...


class InMemoryThemeStore:
    """Keeps the preference for the lifetime of the process only."""

    def __init__(self, theme: Theme | None = None) -> None:
        self.theme = theme

    def load(self) -> Theme | None:
        return self.theme

    def save(self, theme: Theme) -> None:
        self.theme = theme


class JsonFileThemeStore:
    """Persists the preference as {"theme": "..."} in a JSON file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> Theme | None:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read theme preference", path=str(self.path), error=str(e))
            return None
        if not isinstance(data, dict):
            return None
        return data.get(THEME_KEY)

    def save(self, theme: Theme) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({THEME_KEY: theme}), encoding="utf-8")
        logger.debug("Saved theme preference", path=str(self.path), theme=theme)


def resolve_initial_theme(store: ThemeStore, prefers_dark: bool = False) -> Theme:
    """Stored preference first, then the OS dark-mode preference, then light."""
    saved = store.load()
    if saved in VALID_THEMES:
        return saved
    if saved is not None:
        logger.warning("Ignoring invalid stored theme", theme=saved)
    return "dark" if prefers_dark else "light"


def toggled(theme: Theme) -> Theme:
    return "dark" if theme == "light" else "light"
