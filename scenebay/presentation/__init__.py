"""
Presentation layer.

Pure builders that turn session state into view models: results list,
details view and map layers.
"""

from scenebay.presentation.map_layers import MapLayers, build_map_layers
from scenebay.presentation.panels import (
    AvailabilityTier,
    DetailsPanel,
    ResultsPanel,
    availability_tier,
    build_details_panel,
    build_results_panel,
)

__all__ = [
    "AvailabilityTier",
    "DetailsPanel",
    "MapLayers",
    "ResultsPanel",
    "availability_tier",
    "build_details_panel",
    "build_map_layers",
    "build_results_panel",
]
