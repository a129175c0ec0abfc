"""
Results and details panels.

Both are pure functions of the session state: the results panel of
(loading, error, areas, selection), the details panel of the selected area.
"""

from collections.abc import Sequence
from enum import Enum
from urllib.parse import quote

from pydantic import BaseModel, Field

from scenebay.scouting.models import Area, Availability, FeatureAnalysis

NO_FEATURES_MESSAGE = "No specific features requested. Click to see details."
EMPTY_RESULTS_MESSAGE = "No areas found. Try a different search."
SKELETON_ROWS = 3

BOOKING_SEARCH_URL = "https://www.booking.com/searchresults.html?ss={query}"


class AvailabilityTier(str, Enum):
    """Color tier of a capacity gauge."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class PanelState(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    RESULTS = "results"


# ══════════════════════════════════════════════════════════
# Results Panel
# ══════════════════════════════════════════════════════════


class ResultRow(BaseModel):
    area_id: str
    name: str
    selected: bool
    features: list[FeatureAnalysis] = Field(default_factory=list)
    placeholder: str | None = None  # shown instead of the checklist when no features were requested


class ResultsPanel(BaseModel):
    state: PanelState
    message: str | None = None
    skeleton_rows: int = 0
    rows: list[ResultRow] = Field(default_factory=list)


def build_results_panel(
    loading: bool,
    error: str | None,
    areas: Sequence[Area],
    selected: Area | None,
) -> ResultsPanel:
    if loading:
        return ResultsPanel(state=PanelState.LOADING, skeleton_rows=SKELETON_ROWS)

    if error:
        return ResultsPanel(state=PanelState.ERROR, message=error)

    if not areas:
        return ResultsPanel(state=PanelState.EMPTY, message=EMPTY_RESULTS_MESSAGE)

    selected_id = selected.id if selected else None
    rows = [
        ResultRow(
            area_id=area.id,
            name=area.name,
            selected=area.id == selected_id,
            features=list(area.feature_analysis),
            placeholder=None if area.feature_analysis else NO_FEATURES_MESSAGE,
        )
        for area in areas
    ]
    return ResultsPanel(state=PanelState.RESULTS, rows=rows)


# ══════════════════════════════════════════════════════════
# Details Panel
# ══════════════════════════════════════════════════════════


class AvailabilityGauge(BaseModel):
    label: str
    unit_label: str
    available: float
    total: float
    percent: int
    tier: AvailabilityTier
    description: str | None = None


class HotelLink(BaseModel):
    name: str
    price_range: str
    booking_url: str


class DetailsPanel(BaseModel):
    area_id: str
    name: str
    summary: str
    accommodation: AvailabilityGauge
    parking: AvailabilityGauge
    hotels: list[HotelLink] = Field(default_factory=list)
    parking_examples: list[str] = Field(default_factory=list)
    catering_shown: bool = True
    catering_examples: list[str] = Field(default_factory=list)


def availability_tier(availability: Availability) -> AvailabilityTier:
    """
    Green at 60% available or more, yellow from 30%, red below.

    A zero total counts as a zero ratio.
    """
    ratio = availability.ratio
    if ratio >= 0.6:
        return AvailabilityTier.GREEN
    if ratio >= 0.3:
        return AvailabilityTier.YELLOW
    return AvailabilityTier.RED


def availability_gauge(
    label: str,
    availability: Availability,
    unit_label: str = "Available",
    description: str | None = None,
) -> AvailabilityGauge:
    return AvailabilityGauge(
        label=label,
        unit_label=unit_label,
        available=availability.available,
        total=availability.total,
        percent=round(availability.ratio * 100),
        tier=availability_tier(availability),
        description=description or None,
    )


def hotel_booking_url(hotel_name: str, area_name: str) -> str:
    return BOOKING_SEARCH_URL.format(query=quote(f"{hotel_name} {area_name}", safe="!'()*"))


def build_details_panel(area: Area, catering_shown: bool = True) -> DetailsPanel:
    scores = area.scores

    return DetailsPanel(
        area_id=area.id,
        name=area.name,
        summary=area.summary,
        accommodation=availability_gauge(
            "Accommodation",
            scores.accommodation,
            unit_label="Rooms Available",
            description=scores.accommodation_capacity,
        ),
        parking=availability_gauge("Parking", scores.parking, unit_label="Lots / Garages"),
        hotels=[
            HotelLink(
                name=hotel.name,
                price_range=hotel.price_range,
                booking_url=hotel_booking_url(hotel.name, area.name),
            )
            for hotel in scores.example_hotels or []
        ],
        parking_examples=list(scores.example_parking or []),
        catering_shown=catering_shown,
        catering_examples=list(scores.example_catering or []) if catering_shown else [],
    )
