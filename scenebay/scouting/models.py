"""
Data models for area scouting.

Defines the search input (SearchParams), the AI-proposed areas (Area) and the
map geometry derived from them (MapViewState, SearchCircle).
"""

from enum import Enum
from typing import Literal
from uuid import uuid4

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = structlog.get_logger()

Unit = Literal["km", "miles"]
Theme = Literal["light", "dark"]


class ViewMode(str, Enum):
    """Which side panel the scout is looking at."""

    SEARCH = "search"
    DETAILS = "details"


class SearchStatus(str, Enum):
    """Lifecycle of the current submission."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class SearchParams(BaseModel):
    """What the scout typed into the search form."""

    model_config = ConfigDict(populate_by_name=True)

    location: str = Field(default="Paris, France", description="Base location, e.g. 'San Francisco, CA'")
    radius: float = Field(default=5, gt=0)
    unit: Unit = "km"
    desired_features: str = Field(
        default="historic architecture with cobblestone streets",
        alias="desiredFeatures",
    )
    crew_size: int = Field(default=50, gt=0, alias="crewSize")

    @field_validator("location")
    @classmethod
    def location_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("location must not be blank")
        return value

    @property
    def has_features(self) -> bool:
        return bool(self.desired_features and self.desired_features.strip())


class _AreaPart(BaseModel):
    """Base for the pieces of an Area: frozen, and keyed by the model's camelCase names."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class FeatureAnalysis(_AreaPart):
    """Presence judgment for one requested feature."""

    feature: str
    present: bool


class Availability(_AreaPart):
    """Available/total count pair used to draw a capacity gauge."""

    available: float = Field(ge=0)
    total: float = Field(ge=0)

    @model_validator(mode="after")
    def clamp_available(self) -> "Availability":
        if self.available > self.total:
            logger.warning(
                "Availability exceeds total, clamping",
                available=self.available,
                total=self.total,
            )
            # frozen model: bypass __setattr__
            object.__setattr__(self, "available", self.total)
        return self

    @property
    def ratio(self) -> float:
        return self.available / self.total if self.total > 0 else 0.0


class HotelInfo(_AreaPart):
    name: str
    price_range: str = Field(alias="priceRange")


class AreaScores(_AreaPart):
    """Logistics estimates for an area, conditioned on crew size."""

    accommodation: Availability
    catering: Availability
    parking: Availability
    accommodation_capacity: str = Field(default="", alias="accommodationCapacity")
    example_hotels: list[HotelInfo] | None = Field(default=None, alias="exampleHotels")
    example_catering: list[str] | None = Field(default=None, alias="exampleCatering")
    example_parking: list[str] | None = Field(default=None, alias="exampleParking")


class Area(_AreaPart):
    """
    One AI-proposed shoot area.

    Built wholesale from a parsed model response and never mutated afterwards;
    the next search discards it.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    summary: str
    feature_analysis: list[FeatureAnalysis] = Field(alias="featureAnalysis")
    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)
    area_radius: float = Field(ge=0, alias="areaRadius", description="Radius of the area in meters")
    scores: AreaScores


class MapViewState(BaseModel):
    """Map camera: center (lat, lng) and zoom level."""

    center: tuple[float, float] = (48.8566, 2.3522)  # Paris
    zoom: int = 12


class SearchCircle(BaseModel):
    """Overall search extent: centroid of the results plus the requested radius."""

    center: tuple[float, float]
    radius: float  # meters
