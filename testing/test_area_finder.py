import json

import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from scenebay.config import Settings
from scenebay.scouting.area_finder import AreaFinder, AreaSearchError, parse_areas
from testing.sample_inputs import SAMPLE_FEATURES_RESPONSE, FakeGenaiClient, get_sample_params, make_area_record


def test_parse_areas_maps_fields_and_assigns_ids():
    areas = parse_areas(SAMPLE_FEATURES_RESPONSE)

    assert [a.name for a in areas] == ["Le Marais District, Paris", "Montmartre, Paris", "La Défense, Puteaux"]
    assert len({a.id for a in areas}) == 3
    marais = areas[0]
    assert marais.feature_analysis[0].feature == "historic architecture"
    assert marais.feature_analysis[0].present is True
    assert marais.area_radius == 800
    assert marais.scores.accommodation_capacity == "Capacity for over 300 people"
    assert marais.scores.example_hotels[0].price_range == "$250-$400/night"
    assert marais.scores.example_parking == ["Parking Saint-Paul", "Parking Baudoyer"]


def test_parse_areas_replaces_model_supplied_id():
    record = {**make_area_record(), "id": "from-the-model"}

    (area,) = parse_areas(json.dumps([record]))

    assert area.id != "from-the-model"


def test_parse_areas_accepts_fenced_json():
    text = "```json\n" + json.dumps([make_area_record()]) + "\n```"

    assert len(parse_areas(text)) == 1


def test_parse_areas_allows_missing_examples():
    record = make_area_record()
    for key in ("exampleHotels", "exampleCatering", "exampleParking"):
        del record["scores"][key]

    (area,) = parse_areas(json.dumps([record]))

    assert area.scores.example_hotels is None


def test_parse_areas_clamps_available_to_total():
    (area,) = parse_areas(json.dumps([make_area_record(parking=(12, 8))]))

    assert area.scores.parking.available == 8
    assert area.scores.parking.total == 8


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "not json",
        '{"name": "single object"}',
        "[1, 2]",
        json.dumps([{"name": "No coordinates"}]),
        json.dumps([make_area_record(accommodation=(-1, 10))]),
        json.dumps([make_area_record(lat=123.0)]),
    ],
)
def test_parse_areas_rejects_bad_responses(text):
    with pytest.raises(ValueError):
        parse_areas(text)


@pytest.mark.asyncio
async def test_find_areas_sends_prompt_and_schema(settings):
    client = FakeGenaiClient(text=SAMPLE_FEATURES_RESPONSE)
    finder = AreaFinder(settings, client=client)

    areas = await finder.find_areas(get_sample_params(desired_features="cobblestone streets"))

    assert len(areas) == 3
    (call,) = client.models.calls
    assert call["model"] == "gemini-2.5-flash"
    assert '"cobblestone streets"' in call["contents"]
    assert call["config"].response_mime_type == "application/json"
    assert call["config"].temperature == 0.5
    assert call["config"].response_schema is not None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "client",
    [
        FakeGenaiClient(error=RuntimeError("503 Service Unavailable")),
        FakeGenaiClient(text=None),
        FakeGenaiClient(text="Sorry, I can't help with that."),
        FakeGenaiClient(text=json.dumps([{"name": "Half an area"}])),
    ],
)
async def test_find_areas_failures_become_area_search_error(settings, client):
    finder = AreaFinder(settings, client=client)

    with pytest.raises(AreaSearchError, match="Failed to generate areas from AI service."):
        await finder.find_areas(get_sample_params())


@pytest.mark.asyncio
async def test_find_areas_without_api_key_fails_at_request_time():
    finder = AreaFinder(Settings(gemini_api_key="", _env_file=None))

    with pytest.raises(AreaSearchError):
        await finder.find_areas(get_sample_params())


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "text, cause",
    [
        ("not json", json.JSONDecodeError),
        (json.dumps([{"name": "Half an area"}]), ValidationError),
        ('{"name": "single object"}', ValueError),
    ],
)
async def test_unparseable_responses_are_logged_as_parse_failures(settings, text, cause):
    finder = AreaFinder(settings, client=FakeGenaiClient(text=text))

    with capture_logs() as logs, pytest.raises(AreaSearchError) as exc_info:
        await finder.find_areas(get_sample_params())

    assert isinstance(exc_info.value.__cause__, cause)
    errors = [entry["event"] for entry in logs if entry["log_level"] == "error"]
    assert errors == ["Failed to parse Gemini response"]
