"""Shared test fixtures for chuk-mcp-topo."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from chuk_mcp_topo.core.geodesy import LocationPoint
from chuk_mcp_topo.core.reducer import ElevationSample


def make_profile(elevations, lat=0.0, lng_step=0.01):
    """Profile of evenly spaced samples along the equator."""
    return [
        ElevationSample(location=LocationPoint(lat, i * lng_step), elevation=float(e))
        for i, e in enumerate(elevations)
    ]


def echo_lookup(elevation=100.0):
    """AsyncMock lookup returning one sample per queried point."""

    async def _lookup(points):
        return [ElevationSample(location=p, elevation=elevation) for p in points]

    return AsyncMock(side_effect=_lookup)


@pytest.fixture
def sample_profile():
    """Four-sample profile: 100 -> 150 -> 120 -> 180 m."""
    return make_profile([100, 150, 120, 180])


@pytest.fixture
def sample_dicts():
    """The same profile in the tool argument shape."""
    return [
        {"lat": 0.0, "lng": 0.0, "elevation": 100.0},
        {"lat": 0.0, "lng": 0.01, "elevation": 150.0},
        {"lat": 0.0, "lng": 0.02, "elevation": 120.0},
        {"lat": 0.0, "lng": 0.03, "elevation": 180.0},
    ]


@pytest.fixture
def mock_lookup():
    """Lookup client with a mocked ``lookup`` coroutine."""
    lookup = MagicMock()
    lookup.api_url = "https://elevation.example.com/api/v1/lookup"
    lookup.timeout = 30.0
    lookup.lookup = echo_lookup()
    return lookup


@pytest.fixture
def mock_manager(mock_lookup):
    """ProfileManager with a mocked lookup client."""
    from chuk_mcp_topo.core.profile_manager import ProfileManager

    return ProfileManager(lookup=mock_lookup, two_point_samples=100, path_samples=250)


@pytest.fixture
def route_session(mock_manager):
    """RouteSession backed by the mocked manager."""
    from chuk_mcp_topo.core.route_state import RouteSession

    return RouteSession(mock_manager)

