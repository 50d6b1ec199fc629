"""Response models for chuk-mcp-topo."""

from .responses import (
    CapabilitiesResponse,
    ErrorResponse,
    GradientBandInfo,
    GradientLegendResponse,
    GradientSegmentInfo,
    LocationInfo,
    NearestPointResponse,
    ProfilePointInfo,
    ProfileResponse,
    ProfileStatsInfo,
    RouteStateResponse,
    SampleResponse,
    StatusResponse,
    format_response,
)

__all__ = [
    "ErrorResponse",
    "LocationInfo",
    "ProfilePointInfo",
    "ProfileStatsInfo",
    "GradientSegmentInfo",
    "ProfileResponse",
    "SampleResponse",
    "NearestPointResponse",
    "RouteStateResponse",
    "GradientBandInfo",
    "GradientLegendResponse",
    "StatusResponse",
    "CapabilitiesResponse",
    "format_response",
]
