"""
Area Finder

Uses Google GenAI (Gemini) structured output to propose shoot areas around a
base location, then parses the JSON answer into Area records.
"""

import asyncio
import json
import re
from typing import Any
from uuid import uuid4

import structlog
from google import genai
from google.genai.types import GenerateContentConfig

from scenebay.config import Settings, get_settings
from scenebay.scouting.models import Area, SearchParams
from scenebay.scouting.prompts import build_area_prompt
from scenebay.scouting.response_schema import get_response_schema

logger = structlog.get_logger()


class AreaSearchError(Exception):
    """The generation service could not produce a usable list of areas."""


def _strip_code_fence(text: str) -> str:
    """Drop a surrounding ```json fence if the model added one anyway."""
    fence = re.fullmatch(r"```(?:json)?\s*([\s\S]*?)\s*```", text)
    if fence:
        return fence.group(1)
    return text


def parse_areas(response_text: str | None) -> list[Area]:
    """
    Parse the model's JSON array into Area records, each with a fresh id.

    Raises ValueError for an empty, malformed or schema-violating response.
    No partial results: one bad record fails the whole response.
    """
    if not response_text or not response_text.strip():
        raise ValueError("Empty response")

    data = json.loads(_strip_code_fence(response_text.strip()))
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array, got {type(data).__name__}")

    areas = []
    for record in data:
        if not isinstance(record, dict):
            raise ValueError(f"Expected an area object, got {type(record).__name__}")
        areas.append(Area.model_validate({**record, "id": str(uuid4())}))
    return areas


class AreaFinder:
    """
    Turns SearchParams into a list of AI-proposed areas.

    The genai client is created on first use so a missing API key only fails
    the search that needs it.
    """

    def __init__(self, settings: Settings | None = None, client: Any = None) -> None:
        self.settings = settings or get_settings()
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            if not self.settings.gemini_api_key:
                raise AreaSearchError("GEMINI_API_KEY is not configured")
            self._client = genai.Client(api_key=self.settings.gemini_api_key)
        return self._client

    def build_config(self) -> GenerateContentConfig:
        return GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=get_response_schema(),
            temperature=self.settings.gemini_temperature,
        )

    async def find_areas(self, params: SearchParams) -> list[Area]:
        """
        Ask Gemini for 3-5 areas matching the search.

        Every failure surfaces as AreaSearchError; the cause is logged.
        """
        prompt = build_area_prompt(params)
        logger.info(
            "Requesting areas",
            location=params.location,
            radius=params.radius,
            unit=params.unit,
            crew_size=params.crew_size,
            has_features=params.has_features,
        )

        try:
            client = self.client
            config = self.build_config()

            # The SDK call blocks; keep it off the event loop
            def _call_gemini():
                return client.models.generate_content(
                    model=self.settings.gemini_model,
                    contents=prompt,
                    config=config,
                )

            response = await asyncio.to_thread(_call_gemini)
            response_text = response.text
            logger.info("Received response from Gemini", length=len(response_text or ""))

            areas = parse_areas(response_text)

        except ValueError as e:  # JSONDecodeError and ValidationError included
            logger.error("Failed to parse Gemini response", error=str(e))
            raise AreaSearchError("Failed to generate areas from AI service.") from e
        except Exception as e:
            logger.error("Error calling Gemini API", error=str(e), error_type=type(e).__name__)
            raise AreaSearchError("Failed to generate areas from AI service.") from e

        logger.info("Parsed areas", count=len(areas), names=[a.name for a in areas])
        return areas
