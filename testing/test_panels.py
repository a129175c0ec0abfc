from urllib.parse import unquote

import pytest

from scenebay.presentation.panels import (
    EMPTY_RESULTS_MESSAGE,
    NO_FEATURES_MESSAGE,
    AvailabilityTier,
    PanelState,
    availability_tier,
    build_details_panel,
    build_results_panel,
    hotel_booking_url,
)
from scenebay.scouting.models import Area, Availability
from testing.sample_inputs import make_area_record


@pytest.mark.parametrize(
    "available, total, tier",
    [
        (10, 10, AvailabilityTier.GREEN),
        (6, 10, AvailabilityTier.GREEN),
        (59, 100, AvailabilityTier.YELLOW),
        (3, 10, AvailabilityTier.YELLOW),
        (29, 100, AvailabilityTier.RED),
        (0, 10, AvailabilityTier.RED),
        (0, 0, AvailabilityTier.RED),
    ],
)
def test_availability_tier(available, total, tier):
    assert availability_tier(Availability(available=available, total=total)) == tier


def test_zero_total_has_zero_ratio():
    assert Availability(available=0, total=0).ratio == 0.0


def test_results_panel_loading_shows_skeleton():
    panel = build_results_panel(loading=True, error=None, areas=[], selected=None)

    assert panel.state == PanelState.LOADING
    assert panel.skeleton_rows == 3
    assert panel.rows == []


def test_results_panel_error_and_empty_are_distinct():
    error = build_results_panel(loading=False, error="Boom", areas=[], selected=None)
    empty = build_results_panel(loading=False, error=None, areas=[], selected=None)

    assert (error.state, error.message) == (PanelState.ERROR, "Boom")
    assert (empty.state, empty.message) == (PanelState.EMPTY, EMPTY_RESULTS_MESSAGE)


def test_results_panel_rows():
    with_features = Area.model_validate(make_area_record("Marais", features=[("canal", False)]))
    without_features = Area.model_validate(make_area_record("Bastille"))

    panel = build_results_panel(
        loading=False, error=None, areas=[with_features, without_features], selected=without_features
    )

    assert panel.state == PanelState.RESULTS
    first, second = panel.rows
    assert first.name == "Marais"
    assert not first.selected
    assert first.features[0].feature == "canal"
    assert first.placeholder is None
    assert second.selected
    assert second.features == []
    assert second.placeholder == NO_FEATURES_MESSAGE


def test_details_panel_gauges_and_examples():
    area = Area.model_validate(make_area_record("Le Marais", accommodation=(120, 400), parking=(1, 8)))

    panel = build_details_panel(area)

    assert panel.summary == area.summary
    assert panel.accommodation.unit_label == "Rooms Available"
    assert panel.accommodation.description == "Capacity for over 300 people"
    assert panel.accommodation.percent == 30
    assert panel.accommodation.tier == AvailabilityTier.YELLOW
    assert panel.parking.unit_label == "Lots / Garages"
    assert panel.parking.tier == AvailabilityTier.RED
    assert panel.parking_examples == ["Parking Saint-Paul", "Parking Baudoyer"]
    assert panel.catering_shown
    assert panel.catering_examples == ["Chez Janou", "L'As du Fallafel"]


def test_details_panel_hotel_links_search_booking():
    area = Area.model_validate(make_area_record("Le Marais"))

    hotel = build_details_panel(area).hotels[0]

    assert hotel.booking_url.startswith("https://www.booking.com/searchresults.html?ss=")
    assert unquote(hotel.booking_url.split("ss=", 1)[1]) == "Hotel du Petit Moulin Le Marais"


def test_booking_url_leaves_js_safe_punctuation_unescaped():
    url = hotel_booking_url("Hotel Jeanne d'Arc", "Le Marais (4e)")

    assert url.endswith("ss=Hotel%20Jeanne%20d'Arc%20Le%20Marais%20(4e)")
    assert hotel_booking_url("Caf\u00e9 & Co*", "Paris!").endswith("ss=Caf%C3%A9%20%26%20Co*%20Paris!")


def test_details_panel_hides_catering_when_toggled_off():
    area = Area.model_validate(make_area_record())

    panel = build_details_panel(area, catering_shown=False)

    assert not panel.catering_shown
    assert panel.catering_examples == []
