import json

import pytest

from scenebay.config import Settings
from scenebay.scouting.area_finder import AreaFinder
from scenebay.session.search_session import AppConfig, SearchSession
from scenebay.session.theme import InMemoryThemeStore
from testing.sample_inputs import FakeGenaiClient, make_area_record


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key="test-key", _env_file=None)


@pytest.fixture
def theme_store() -> InMemoryThemeStore:
    return InMemoryThemeStore()


@pytest.fixture
def app_config(settings, theme_store) -> AppConfig:
    return AppConfig(settings=settings, theme_store=theme_store)


@pytest.fixture
def paris_client() -> FakeGenaiClient:
    """One result at (48.86, 2.35)."""
    return FakeGenaiClient(text=json.dumps([make_area_record()]))


@pytest.fixture
def make_session(app_config, settings):
    def _make(client: FakeGenaiClient) -> SearchSession:
        return SearchSession(app_config, finder=AreaFinder(settings, client=client))

    return _make
