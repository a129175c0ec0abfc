import pytest

from scenebay.scouting.geometry import build_search_circle, centroid, radius_in_meters
from scenebay.scouting.models import Area
from testing.sample_inputs import make_area_record


def _area(lat: float, lng: float, area_radius: float = 500) -> Area:
    return Area.model_validate(make_area_record(lat=lat, lng=lng, area_radius=area_radius))


def test_centroid_is_plain_mean_of_coordinates():
    areas = [_area(10.0, 20.0, 100), _area(20.0, 40.0, 5000), _area(30.0, 0.0, 50)]

    lat, lng = centroid(areas)

    assert lat == pytest.approx(20.0)
    assert lng == pytest.approx(20.0)


def test_centroid_ignores_area_radius():
    small = [_area(1.0, 1.0, 10), _area(3.0, 5.0, 10)]
    mixed = [_area(1.0, 1.0, 10), _area(3.0, 5.0, 9000)]

    assert centroid(small) == centroid(mixed)


def test_centroid_of_nothing_is_an_error():
    with pytest.raises(ValueError):
        centroid([])


@pytest.mark.parametrize(
    "radius, unit, expected",
    [
        (5, "km", 5000),
        (0.5, "km", 500),
        (1, "miles", 1609.34),
        (3, "miles", 3 * 1609.34),
    ],
)
def test_radius_in_meters(radius, unit, expected):
    assert radius_in_meters(radius, unit) == pytest.approx(expected)


def test_search_circle_for_results():
    circle = build_search_circle([_area(48.86, 2.35)], 5, "km")

    assert circle.center == (48.86, 2.35)
    assert circle.radius == 5000


def test_no_search_circle_without_results():
    assert build_search_circle([], 5, "km") is None
