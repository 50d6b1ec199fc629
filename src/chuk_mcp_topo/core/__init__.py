"""Core sampling, reduction, and lookup logic for chuk-mcp-topo."""

from .errors import (
    InvalidPathError,
    InvalidSampleCountError,
    LookupFailedError,
    LookupUnavailableError,
    ProfileError,
)
from .geodesy import LocationPoint, distance, haversine_km
from .lookup_client import ElevationLookupClient
from .profile_manager import ProfileAnalysis, ProfileManager
from .reducer import (
    ElevationSample,
    GradientSegment,
    ProfilePoint,
    ProfileStats,
    classify_gradient,
    gradient_segments,
    nearest_profile_point,
    reduce_profile,
    with_cumulative_distance,
)
from .route_state import RouteSession, RouteState
from .sampler import PathSegment, build_segments, sample_path, sample_two_points

__all__ = [
    "LocationPoint",
    "distance",
    "haversine_km",
    "PathSegment",
    "build_segments",
    "sample_path",
    "sample_two_points",
    "ElevationSample",
    "ProfilePoint",
    "ProfileStats",
    "GradientSegment",
    "classify_gradient",
    "gradient_segments",
    "nearest_profile_point",
    "reduce_profile",
    "with_cumulative_distance",
    "ElevationLookupClient",
    "ProfileManager",
    "ProfileAnalysis",
    "RouteSession",
    "RouteState",
    "ProfileError",
    "InvalidPathError",
    "InvalidSampleCountError",
    "LookupFailedError",
    "LookupUnavailableError",
]
