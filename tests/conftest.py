"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture
def google_ok_payload():
    return {
        "status": "OK",
        "results": [{"geometry": {"location": {"lat": 51.523767, "lng": -0.158555}}}],
    }


@pytest.fixture
def nominatim_payload():
    return [{"lat": "51.5237", "lon": "-0.1585", "display_name": "221B Baker Street, London"}]
