"""
Session module.

Holds the per-scout view state and the theme preference store.
"""

from scenebay.session.search_session import (
    SEARCH_ERROR_MESSAGE,
    AppConfig,
    AreaNotFoundError,
    SearchInProgressError,
    SearchSession,
)
from scenebay.session.theme import (
    InMemoryThemeStore,
    JsonFileThemeStore,
    ThemeStore,
    resolve_initial_theme,
)

__all__ = [
    "SEARCH_ERROR_MESSAGE",
    "AppConfig",
    "AreaNotFoundError",
    "SearchInProgressError",
    "SearchSession",
    "InMemoryThemeStore",
    "JsonFileThemeStore",
    "ThemeStore",
    "resolve_initial_theme",
]
