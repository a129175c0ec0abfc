"""
Prompt construction for area generation.

The instruction text branches on whether the scout asked for specific scene
features; the logistics section is always conditioned on crew size.
"""

from scenebay.scouting.models import SearchParams


AREA_SEARCH_INTRO = """You are a simulated AI assistant for a film location scout. Identify suitable public areas or neighborhoods for a film shoot.
The scout is looking for locations within a {radius} {unit} radius of "{location}".
The production will have a crew of approximately {crew_size} people. This is a crucial factor: areas without the infrastructure for a crew of this size should score lower.
"""

FEATURES_REQUESTED_SECTION = """
The scout wants locations with the following features for the scene: "{desired_features}".

For each location provide a 'featureAnalysis' array. For each distinct feature the scout requested, add an object with the 'feature' name (string) and a 'present' flag (boolean) telling whether that feature is available there.
Also provide a detailed 'summary' paragraph (3-4 sentences) explaining the area's overall suitability for the scene and for production logistics given the crew size. It will be shown on a details page.

Generate a list of 3 to 5 realistic public areas or neighborhoods that best match these criteria.
"""

NO_FEATURES_SECTION = """
Generate a list of 3 to 5 interesting or notable public areas or neighborhoods within the search radius that would suit a film shoot.

In each area's summary explain why the area is notable and logistically viable for the crew size. No features were requested, so return an empty array for 'featureAnalysis'.
"""

AREA_FIELDS_SECTION = """
For each location provide:
1. A concise name (e.g. "Le Marais District, Paris", "Downtown Core, Vancouver").
2. The 'featureAnalysis' array described above.
3. The detailed 'summary' described above.
4. A central latitude and longitude ('lat', 'lng').
5. A radius for the area in meters ('areaRadius'), e.g. 500 for a small neighborhood, 1500 for a larger district.
6. Your estimated availability of the following resources for a crew of {crew_size}, each as an object with 'available' and 'total' counts:
   - Accommodation: available hotel rooms out of the total rooms in the area. Also give an 'accommodationCapacity' text estimating how many people can be housed (e.g. 'Capacity for over 300 people') and 2-3 real-world hotels in 'exampleHotels', each an object with a 'name' and a 'priceRange' (e.g. "$150-$250/night").
   - Catering: catering services or large restaurants suitable for a film crew that are available, out of the total in the area. List 2-3 real-world examples in 'exampleCatering'.
   - Parking: large parking lots or garages suitable for production vehicles that are likely available, out of the total suitable lots/garages in the area. Count whole lots or garages, not individual spots. List 2-3 real-world examples in 'exampleParking'.

Return ONLY a JSON array of objects conforming to the provided JSON schema. Do not include any other text, explanations, or markdown formatting.
"""


def _format_radius(radius: float) -> str:
    """Whole numbers without a trailing .0, everything else at full precision."""
    return str(int(radius)) if float(radius).is_integer() else repr(float(radius))


def build_area_prompt(params: SearchParams) -> str:
    """Build the natural-language instruction for one search."""
    prompt = AREA_SEARCH_INTRO.format(
        radius=_format_radius(params.radius),
        unit=params.unit,
        location=params.location,
        crew_size=params.crew_size,
    )

    if params.has_features:
        prompt += FEATURES_REQUESTED_SECTION.format(desired_features=params.desired_features.strip())
    else:
        prompt += NO_FEATURES_SECTION

    prompt += AREA_FIELDS_SECTION.format(crew_size=params.crew_size)
    return prompt
