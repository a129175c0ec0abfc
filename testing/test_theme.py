import json

from scenebay.session.theme import (
    InMemoryThemeStore,
    JsonFileThemeStore,
    resolve_initial_theme,
    toggled,
)


def test_stored_theme_wins():
    assert resolve_initial_theme(InMemoryThemeStore("dark"), prefers_dark=False) == "dark"
    assert resolve_initial_theme(InMemoryThemeStore("light"), prefers_dark=True) == "light"


def test_falls_back_to_os_preference_then_light():
    assert resolve_initial_theme(InMemoryThemeStore(), prefers_dark=True) == "dark"
    assert resolve_initial_theme(InMemoryThemeStore(), prefers_dark=False) == "light"


def test_invalid_stored_theme_is_ignored():
    assert resolve_initial_theme(InMemoryThemeStore("sepia"), prefers_dark=True) == "dark"


def test_toggled():
    assert toggled("light") == "dark"
    assert toggled("dark") == "light"


def test_json_file_store_round_trip(tmp_path):
    path = tmp_path / "prefs" / "theme.json"
    store = JsonFileThemeStore(path)

    assert store.load() is None
    store.save("dark")

    assert json.loads(path.read_text()) == {"theme": "dark"}
    assert JsonFileThemeStore(path).load() == "dark"


def test_json_file_store_tolerates_corrupt_file(tmp_path):
    path = tmp_path / "theme.json"
    path.write_text("{not json")

    assert JsonFileThemeStore(path).load() is None
