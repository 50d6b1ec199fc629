"""
Conversions between tool arguments, core types, and response models.

Tool arguments carry points as ``[lat, lng]`` lists and profile samples as
``{"lat", "lng", "elevation"}`` dicts.
"""

from collections.abc import Sequence
from typing import Any

from ..constants import ErrorMessages, ProfileStatus, SuccessMessages
from ..core.geodesy import LocationPoint
from ..core.profile_manager import ProfileAnalysis
from ..core.reducer import ElevationSample, GradientSegment, ProfilePoint, ProfileStats
from ..core.route_state import RouteState
from ..models.responses import (
    ErrorResponse,
    GradientSegmentInfo,
    ProfilePointInfo,
    ProfileResponse,
    ProfileStatsInfo,
    RouteStateResponse,
)


def parse_point(value: Sequence[float]) -> LocationPoint:
    """Parse a ``[lat, lng]`` pair.

    Raises:
        ValueError: If the value is not a pair or lies outside valid ranges
    """
    if value is None or len(value) != 2:
        raise ValueError(ErrorMessages.INVALID_POINT.format(value))
    return LocationPoint(float(value[0]), float(value[1]))


def parse_points(values: Sequence[Sequence[float]]) -> list[LocationPoint]:
    return [parse_point(v) for v in values]


def parse_samples(values: Sequence[dict[str, Any]]) -> list[ElevationSample]:
    """Parse caller-supplied ``{"lat", "lng", "elevation"}`` samples."""
    samples: list[ElevationSample] = []
    for value in values:
        try:
            location = LocationPoint(float(value["lat"]), float(value["lng"]))
            elevation = float(value["elevation"])
        except (KeyError, TypeError) as e:
            raise ValueError(ErrorMessages.INVALID_SAMPLE.format(value)) from e
        samples.append(ElevationSample(location=location, elevation=elevation))
    return samples


def point_info(point: ProfilePoint) -> ProfilePointInfo:
    return ProfilePointInfo(
        lat=point.location.lat,
        lng=point.location.lng,
        elevation_m=point.elevation,
        distance_km=point.distance_from_start_km,
    )


def stats_info(stats: ProfileStats | None) -> ProfileStatsInfo | None:
    if stats is None:
        return None
    return ProfileStatsInfo(
        distance_km=stats.distance_km,
        max_elevation_m=stats.max_elevation_m,
        min_elevation_m=stats.min_elevation_m,
        total_ascent_m=stats.total_ascent_m,
        total_descent_m=stats.total_descent_m,
    )


def gradient_info(segment: GradientSegment) -> GradientSegmentInfo:
    return GradientSegmentInfo(
        start=segment.start.to_list(),
        end=segment.end.to_list(),
        distance_km=segment.distance_km,
        elevation_delta_m=segment.elevation_delta_m,
        gradient_percent=segment.gradient_percent,
        gradient_class=segment.gradient_class.key,
        color=segment.gradient_class.color,
    )


def profile_response(
    mode: str,
    waypoints: Sequence[LocationPoint],
    requested_samples: int,
    analysis: ProfileAnalysis,
    include_gradients: bool = True,
) -> ProfileResponse | ErrorResponse:
    """Build the tool response for a settled analysis.

    ``ok`` and ``empty_result`` produce a :class:`ProfileResponse`; failure
    categories produce an :class:`ErrorResponse`.
    """
    if analysis.status not in (ProfileStatus.OK, ProfileStatus.EMPTY_RESULT):
        return ErrorResponse(error=analysis.message, category=analysis.status)

    gradients = [gradient_info(g) for g in analysis.gradients] if include_gradients else []
    return ProfileResponse(
        mode=mode,
        status=analysis.status,
        waypoints=[p.to_list() for p in waypoints],
        requested_samples=requested_samples,
        num_points=len(analysis.points),
        points=[point_info(p) for p in analysis.points],
        stats=stats_info(analysis.stats),
        gradients=gradients,
        message=analysis.message,
    )


def route_state_response(state: RouteState, message: str | None = None) -> RouteStateResponse:
    return RouteStateResponse(
        mode=state.mode,
        start=state.start.to_list() if state.start else None,
        end=state.end.to_list() if state.end else None,
        waypoints=[p.to_list() for p in state.waypoints],
        status=state.status,
        error=state.error,
        is_loading=state.is_loading,
        request_id=state.request_id,
        num_points=len(state.points),
        points=[point_info(p) for p in state.points],
        stats=stats_info(state.stats),
        hovered=point_info(state.hovered) if state.hovered else None,
        message=message or SuccessMessages.ROUTE_UPDATED.format(state.mode),
    )
