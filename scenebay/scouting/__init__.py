"""
Area scouting module.

Builds the Gemini request for a location search, parses the structured
answer into Area records and derives the map geometry from them.
"""

from scenebay.scouting.area_finder import AreaFinder, AreaSearchError, parse_areas
from scenebay.scouting.geometry import build_search_circle, centroid, radius_in_meters
from scenebay.scouting.models import (
    Area,
    AreaScores,
    Availability,
    FeatureAnalysis,
    HotelInfo,
    MapViewState,
    SearchCircle,
    SearchParams,
    SearchStatus,
    ViewMode,
)
from scenebay.scouting.prompts import build_area_prompt
from scenebay.scouting.response_schema import AREA_RESPONSE_SCHEMA, get_response_schema

__all__ = [
    # Finder
    "AreaFinder",
    "AreaSearchError",
    "parse_areas",
    # Prompt + schema
    "build_area_prompt",
    "AREA_RESPONSE_SCHEMA",
    "get_response_schema",
    # Geometry
    "build_search_circle",
    "centroid",
    "radius_in_meters",
    # Models
    "Area",
    "AreaScores",
    "Availability",
    "FeatureAnalysis",
    "HotelInfo",
    "MapViewState",
    "SearchCircle",
    "SearchParams",
    "SearchStatus",
    "ViewMode",
]
