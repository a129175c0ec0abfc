#!/usr/bin/env python3
"""
Run a live area search against Gemini and print the results.

Usage:
    python scripts/run_search.py
    python scripts/run_search.py --location "Lisbon, Portugal" --radius 3 --unit miles
    python scripts/run_search.py --features "" --crew-size 120 --output areas.json

Environment variables required:
    GEMINI_API_KEY=your-gemini-key
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv
load_dotenv(project_root / ".env")

from scenebay.config import get_settings
from scenebay.presentation.panels import availability_tier
from scenebay.scouting.area_finder import AreaFinder, AreaSearchError
from scenebay.scouting.geometry import build_search_circle
from scenebay.scouting.models import Area, SearchParams


def print_area(area: Area, index: int) -> None:
    scores = area.scores
    print(f"\n  [{index}] {area.name}")
    print(f"      Center: {area.lat:.4f}, {area.lng:.4f} (radius {area.area_radius / 1000:.2f} km)")
    print(f"      Summary: {area.summary[:100]}...")

    if area.feature_analysis:
        checklist = ", ".join(f"{'+' if f.present else '-'}{f.feature}" for f in area.feature_analysis)
        print(f"      Features: {checklist}")

    for label, availability in (
        ("Accommodation", scores.accommodation),
        ("Catering", scores.catering),
        ("Parking", scores.parking),
    ):
        tier = availability_tier(availability).value
        print(f"      {label}: {availability.available:g}/{availability.total:g} [{tier}]")

    if scores.accommodation_capacity:
        print(f"      Capacity: {scores.accommodation_capacity}")
    if scores.example_hotels:
        print(f"      Hotels: {', '.join(f'{h.name} ({h.price_range})' for h in scores.example_hotels)}")


async def main() -> int:
    parser = argparse.ArgumentParser(description="Live SceneBay area search")
    parser.add_argument("--location", default="Paris, France")
    parser.add_argument("--radius", type=float, default=5)
    parser.add_argument("--unit", choices=["km", "miles"], default="km")
    parser.add_argument("--features", default="historic architecture with cobblestone streets")
    parser.add_argument("--crew-size", type=int, default=50)
    parser.add_argument("--output", type=Path, help="Write the raw areas to this JSON file")
    args = parser.parse_args()

    if not get_settings().gemini_api_key:
        print("\n ERROR: GEMINI_API_KEY not set in .env")
        return 1

    params = SearchParams(
        location=args.location,
        radius=args.radius,
        unit=args.unit,
        desired_features=args.features,
        crew_size=args.crew_size,
    )

    print("\n" + "=" * 60)
    print(f"AREA SEARCH - {params.location} ({params.radius:g} {params.unit}, crew {params.crew_size})")
    print("=" * 60)

    try:
        areas = await AreaFinder().find_areas(params)
    except AreaSearchError as e:
        print(f"\n  ERROR: {e}")
        return 1

    circle = build_search_circle(areas, params.radius, params.unit)
    if circle is None:
        print("\n  No areas found.")
    else:
        print(f"\nSearch circle: {circle.center[0]:.4f}, {circle.center[1]:.4f} r={circle.radius:.0f} m")

    for i, area in enumerate(areas, 1):
        print_area(area, i)

    if args.output:
        with open(args.output, "w") as f:
            json.dump([a.model_dump(mode="json") for a in areas], f, indent=2)
        print(f"\nSaved: {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
