"""
Testing module for SceneBay.

Contains sample inputs and a fake genai client for offline tests.
"""

from testing.sample_inputs import (
    SAMPLE_FEATURES_RESPONSE,
    FakeGenaiClient,
    get_sample_params,
    make_area_record,
)

__all__ = [
    "SAMPLE_FEATURES_RESPONSE",
    "FakeGenaiClient",
    "get_sample_params",
    "make_area_record",
]
