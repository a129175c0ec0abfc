"""
Map layer specs for the client mapping library.

Nothing is drawn here: the output describes the basemap, the circles and the
markers (with their theme- and selection-dependent styling) so a Leaflet
client can render them as-is.
"""

from collections.abc import Sequence

from pydantic import BaseModel, Field

from scenebay.scouting.models import Area, MapViewState, SearchCircle, Theme

OSM_ATTRIBUTION = '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
CARTO_ATTRIBUTION = '&copy; <a href="https://carto.com/attributions">CARTO</a>'

TILE_LAYERS: dict[str, tuple[str, str]] = {
    "light": ("https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png", OSM_ATTRIBUTION),
    "dark": (
        "https://{s}.basemaps.cartocdn.com/dark_all/{z}/{x}/{y}{r}.png",
        f"{OSM_ATTRIBUTION} {CARTO_ATTRIBUTION}",
    ),
}

# (light, dark)
SEARCH_CIRCLE_COLORS = ("#16a34a", "#22c55e")  # green-600, green-500
AREA_CIRCLE_COLORS = ("#f97316", "#fb923c")  # orange-500, orange-400
MARKER_COLORS = {
    # (selected, theme) -> color
    (True, "light"): "#4f46e5",  # indigo-600
    (False, "light"): "#818cf8",  # indigo-400
    (True, "dark"): "#a5b4fc",  # indigo-300
    (False, "dark"): "#6366f1",  # indigo-500
}

DARK_POPUP_CLASS = "dark-theme-popup"


class PathOptions(BaseModel):
    color: str
    fill_color: str
    fill_opacity: float
    weight: int = 2
    dash_array: str


class TileLayer(BaseModel):
    url: str
    attribution: str


class AreaPopup(BaseModel):
    title: str
    body: str


class CircleLayer(BaseModel):
    center: tuple[float, float]
    radius: float  # meters
    path_options: PathOptions
    tooltip: str | None = None
    popup: AreaPopup | None = None
    area_id: str | None = None  # click target; None for the search circle


class MarkerIcon(BaseModel):
    color: str
    size: tuple[int, int] = (36, 36)
    anchor: tuple[int, int] = (18, 36)  # tip of the pin
    popup_anchor: tuple[int, int] = (0, -36)


class MarkerLayer(BaseModel):
    area_id: str
    position: tuple[float, float]
    icon: MarkerIcon
    selected: bool


class MapView(BaseModel):
    center: tuple[float, float]
    zoom: int
    fly_to: bool = True


class MapLayers(BaseModel):
    tile_layer: TileLayer
    view: MapView
    search_circle: CircleLayer | None = None
    area_circles: list[CircleLayer] = Field(default_factory=list)
    markers: list[MarkerLayer] = Field(default_factory=list)
    popup_pane_class: str | None = None


def _themed(colors: tuple[str, str], theme: Theme) -> str:
    return colors[1] if theme == "dark" else colors[0]


def tile_layer_for(theme: Theme) -> TileLayer:
    url, attribution = TILE_LAYERS[theme]
    return TileLayer(url=url, attribution=attribution)


def marker_color(selected: bool, theme: Theme) -> str:
    return MARKER_COLORS[(selected, theme)]


def popup_pane_class(theme: Theme) -> str | None:
    """Leaflet overlay panes are not theme-aware; dark mode needs an explicit class."""
    return DARK_POPUP_CLASS if theme == "dark" else None


def search_circle_layer(circle: SearchCircle, theme: Theme) -> CircleLayer:
    color = _themed(SEARCH_CIRCLE_COLORS, theme)
    return CircleLayer(
        center=circle.center,
        radius=circle.radius,
        path_options=PathOptions(color=color, fill_color=color, fill_opacity=0.05, dash_array="10, 5"),
    )


def area_circle_layer(area: Area, theme: Theme) -> CircleLayer:
    color = _themed(AREA_CIRCLE_COLORS, theme)
    return CircleLayer(
        center=(area.lat, area.lng),
        radius=area.area_radius,
        path_options=PathOptions(color=color, fill_color=color, fill_opacity=0.1, dash_array="5, 10"),
        tooltip=f"Accommodation Perimeter\nRadius: {area.area_radius / 1000:.2f} km",
        popup=AreaPopup(title=area.name, body=area.summary),
        area_id=area.id,
    )


def build_map_layers(
    areas: Sequence[Area],
    view_state: MapViewState,
    selected: Area | None,
    theme: Theme,
    search_circle: SearchCircle | None,
) -> MapLayers:
    """Describe the whole map for the current view state."""
    selected_id = selected.id if selected else None

    return MapLayers(
        tile_layer=tile_layer_for(theme),
        view=MapView(center=view_state.center, zoom=view_state.zoom),
        search_circle=search_circle_layer(search_circle, theme) if search_circle else None,
        area_circles=[area_circle_layer(area, theme) for area in areas],
        markers=[
            MarkerLayer(
                area_id=area.id,
                position=(area.lat, area.lng),
                icon=MarkerIcon(color=marker_color(area.id == selected_id, theme)),
                selected=area.id == selected_id,
            )
            for area in areas
        ],
        popup_pane_class=popup_pane_class(theme),
    )
