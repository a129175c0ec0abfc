"""Map geometry derived from a list of areas."""

from collections.abc import Sequence

from scenebay.scouting.models import Area, SearchCircle, Unit

METERS_PER_KM = 1000.0
METERS_PER_MILE = 1609.34

# Zoom levels used when the map recenters
RESULTS_ZOOM = 13
SELECTED_AREA_ZOOM = 14


def radius_in_meters(radius: float, unit: Unit) -> float:
    """Convert the requested search radius to meters."""
    if unit == "miles":
        return radius * METERS_PER_MILE
    return radius * METERS_PER_KM


def centroid(areas: Sequence[Area]) -> tuple[float, float]:
    """
    Arithmetic mean of the area coordinates.

    Every area weighs the same regardless of its own radius or scores.
    """
    if not areas:
        raise ValueError("Cannot compute the centroid of an empty area list")
    lat = sum(a.lat for a in areas) / len(areas)
    lng = sum(a.lng for a in areas) / len(areas)
    return lat, lng


def build_search_circle(areas: Sequence[Area], radius: float, unit: Unit) -> SearchCircle | None:
    """Search circle for a result set, or None when nothing came back."""
    if not areas:
        return None
    return SearchCircle(center=centroid(areas), radius=radius_in_meters(radius, unit))
