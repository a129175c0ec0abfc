"""
Structured-output schema for area generation.

Declares the JSON shape Gemini must answer with: an array of areas, each with
a feature analysis, coordinates, a radius and logistics estimates.
Type names follow the Gemini schema dialect (upper-case OpenAPI types).
"""

import copy

_AVAILABILITY_PROPERTIES = {
    "available": {"type": "NUMBER"},
    "total": {"type": "NUMBER"},
}


def _availability(description: str) -> dict:
    return {
        "type": "OBJECT",
        "description": description,
        "properties": copy.deepcopy(_AVAILABILITY_PROPERTIES),
        "required": ["available", "total"],
    }


AREA_RESPONSE_SCHEMA = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "name": {
                "type": "STRING",
                "description": "The name of the area or neighborhood.",
            },
            "summary": {
                "type": "STRING",
                "description": "A detailed summary of the area's suitability for a film shoot, for use in a details view.",
            },
            "featureAnalysis": {
                "type": "ARRAY",
                "description": "An analysis of the user's desired features and their presence at the location.",
                "items": {
                    "type": "OBJECT",
                    "properties": {
                        "feature": {"type": "STRING"},
                        "present": {"type": "BOOLEAN"},
                    },
                    "required": ["feature", "present"],
                },
            },
            "lat": {
                "type": "NUMBER",
                "description": "The central latitude of the area.",
            },
            "lng": {
                "type": "NUMBER",
                "description": "The central longitude of the area.",
            },
            "areaRadius": {
                "type": "NUMBER",
                "description": "The radius of the area in meters.",
            },
            "scores": {
                "type": "OBJECT",
                "properties": {
                    "accommodation": _availability("Estimated available and total hotel rooms."),
                    "catering": _availability("Estimated available and total suitable catering services."),
                    "parking": _availability(
                        "Estimated number of available large parking lots/garages out of the "
                        "total suitable lots/garages in the area."
                    ),
                    "accommodationCapacity": {
                        "type": "STRING",
                        "description": "A textual description of the estimated number of people that can be accommodated.",
                    },
                    "exampleHotels": {
                        "type": "ARRAY",
                        "description": "A list of 2-3 real-world hotel examples with their estimated price range.",
                        "items": {
                            "type": "OBJECT",
                            "properties": {
                                "name": {"type": "STRING"},
                                "priceRange": {"type": "STRING"},
                            },
                            "required": ["name", "priceRange"],
                        },
                    },
                    "exampleCatering": {
                        "type": "ARRAY",
                        "description": "A list of 2-3 real-world catering or large restaurant examples.",
                        "items": {"type": "STRING"},
                    },
                    "exampleParking": {
                        "type": "ARRAY",
                        "description": "A list of 2-3 real-world parking garage examples.",
                        "items": {"type": "STRING"},
                    },
                },
                "required": ["accommodation", "catering", "parking"],
            },
        },
        "required": ["name", "summary", "featureAnalysis", "lat", "lng", "areaRadius", "scores"],
    },
}


def get_response_schema() -> dict:
    """Get a copy of the area response schema, safe for the caller to modify."""
    return copy.deepcopy(AREA_RESPONSE_SCHEMA)
