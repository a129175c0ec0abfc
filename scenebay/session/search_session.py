"""
Search session: the presentation root.

Owns everything the scout sees during one browser session (search status,
results, selection, map camera, search circle, theme) and moves it through
idle -> loading -> success | error as searches are submitted.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any

import structlog

from scenebay.config import Settings
from scenebay.presentation.map_layers import build_map_layers
from scenebay.presentation.panels import build_details_panel, build_results_panel
from scenebay.scouting.area_finder import AreaFinder, AreaSearchError
from scenebay.scouting.geometry import RESULTS_ZOOM, SELECTED_AREA_ZOOM, build_search_circle
from scenebay.scouting.models import (
    Area,
    MapViewState,
    SearchCircle,
    SearchParams,
    SearchStatus,
    Theme,
    ViewMode,
)
from scenebay.session.theme import JsonFileThemeStore, ThemeStore, resolve_initial_theme, toggled

logger = structlog.get_logger()

SEARCH_ERROR_MESSAGE = "Failed to fetch areas. Please check your query or API key."


class SearchInProgressError(Exception):
    """A search was submitted while another one is still waiting on the model."""


class AreaNotFoundError(Exception):
    """The requested area is not part of the current results."""


@dataclass
class AppConfig:
    """Startup configuration handed to the session root."""

    settings: Settings
    theme_store: ThemeStore
    prefers_dark: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppConfig":
        return cls(
            settings=settings,
            theme_store=JsonFileThemeStore(settings.theme_store_path),
            prefers_dark=settings.default_theme_dark,
        )


@dataclass
class SearchSession:
    """View state for one scout, plus the operations that change it."""

    config: AppConfig
    finder: AreaFinder | None = None

    status: SearchStatus = SearchStatus.IDLE
    view_mode: ViewMode = ViewMode.SEARCH
    areas: list[Area] = field(default_factory=list)
    selected: Area | None = None
    map_view: MapViewState = field(default_factory=MapViewState)
    search_circle: SearchCircle | None = None
    error: str | None = None
    catering_shown: bool = True
    last_params: SearchParams | None = None
    theme: Theme = "light"

    _subscribers: list[asyncio.Queue] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.finder is None:
            self.finder = AreaFinder(self.config.settings)
        self.theme = resolve_initial_theme(self.config.theme_store, self.config.prefers_dark)

    # ─── State Transitions ───────────────────────────────

    @property
    def is_loading(self) -> bool:
        return self.status == SearchStatus.LOADING

    async def submit(self, params: SearchParams) -> None:
        """
        Run one search.

        Only one search may be in flight; a second submission is rejected with
        SearchInProgressError rather than queued.
        """
        if self.is_loading:
            raise SearchInProgressError("A search is already in progress")

        self.status = SearchStatus.LOADING
        self.error = None
        self.areas = []
        self.selected = None
        self.view_mode = ViewMode.SEARCH
        self.search_circle = None
        self.last_params = params
        self._notify("search_started")

        try:
            areas = await self.finder.find_areas(params)
        except AreaSearchError as e:
            logger.error("Search failed", location=params.location, error=str(e))
            self._fail()
            return
        except BaseException:
            # Never leave the session stuck in loading
            self._fail()
            raise

        self.areas = areas
        self.search_circle = build_search_circle(areas, params.radius, params.unit)
        if self.search_circle is not None:
            self.map_view = MapViewState(center=self.search_circle.center, zoom=RESULTS_ZOOM)
        self.status = SearchStatus.SUCCESS

        logger.info(
            "Search completed",
            location=params.location,
            count=len(areas),
            circle_radius_m=self.search_circle.radius if self.search_circle else None,
        )
        self._notify("search_completed")

    def _fail(self) -> None:
        self.areas = []
        self.error = SEARCH_ERROR_MESSAGE
        self.status = SearchStatus.ERROR
        self._notify("search_failed")

    def get_area(self, area_id: str) -> Area:
        for area in self.areas:
            if area.id == area_id:
                return area
        raise AreaNotFoundError(area_id)

    def select(self, area_id: str) -> Area:
        """Select a result, fly the map to it and open the details view."""
        area = self.get_area(area_id)
        self.selected = area
        self.catering_shown = True
        self.map_view = MapViewState(center=(area.lat, area.lng), zoom=SELECTED_AREA_ZOOM)
        self.view_mode = ViewMode.DETAILS
        logger.info("Area selected", area_id=area.id, name=area.name)
        self._notify("area_selected")
        return area

    def back_to_search(self) -> None:
        """Return to the results list; selection and results are kept."""
        self.view_mode = ViewMode.SEARCH
        self._notify("view_changed")

    def toggle_catering(self) -> bool:
        self.catering_shown = not self.catering_shown
        self._notify("view_changed")
        return self.catering_shown

    def toggle_theme(self) -> Theme:
        theme = toggled(self.theme)
        self.config.theme_store.save(theme)
        self.theme = theme
        logger.info("Theme changed", theme=self.theme)
        self._notify("theme_changed")
        return self.theme

    # ─── View State ──────────────────────────────────────

    def snapshot(self) -> dict[str, Any]:
        """Everything a client needs to render the current screen."""
        details = None
        if self.view_mode == ViewMode.DETAILS and self.selected is not None:
            details = build_details_panel(self.selected, catering_shown=self.catering_shown)

        return {
            "status": self.status.value,
            "view_mode": self.view_mode.value,
            "theme": self.theme,
            "is_loading": self.is_loading,
            "error": self.error,
            "selected_area_id": self.selected.id if self.selected else None,
            "results_panel": build_results_panel(
                loading=self.is_loading,
                error=self.error,
                areas=self.areas,
                selected=self.selected,
            ).model_dump(mode="json"),
            "details_panel": details.model_dump(mode="json") if details else None,
            "map": build_map_layers(
                areas=self.areas,
                view_state=self.map_view,
                selected=self.selected,
                theme=self.theme,
                search_circle=self.search_circle,
            ).model_dump(mode="json"),
        }

    # ─── Subscribers ─────────────────────────────────────

    def subscribe(self) -> asyncio.Queue:
        queue: asyncio.Queue = asyncio.Queue()
        self._subscribers.append(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue) -> None:
        if queue in self._subscribers:
            self._subscribers.remove(queue)

    def _notify(self, event_type: str) -> None:
        for queue in self._subscribers:
            queue.put_nowait(event_type)
