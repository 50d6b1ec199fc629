"""
Profile tools: path sampling, elevation profiles, reduction, and hover lookup.

Points are passed as [lat, lng]. The profile tools perform exactly one
elevation lookup per call; sampling and reduction tools perform none.
"""

import logging
from dataclasses import replace
from typing import Any

from ...constants import (
    SUPPLIED_PROFILE_MODE,
    ErrorMessages,
    RouteMode,
    SuccessMessages,
)
from ...core import reducer, sampler
from ...models.responses import (
    ErrorResponse,
    LocationInfo,
    NearestPointResponse,
    SampleResponse,
    format_response,
)
from ..common import (
    parse_point,
    parse_points,
    parse_samples,
    point_info,
    profile_response,
)

logger = logging.getLogger(__name__)


def register_profile_tools(mcp, manager):
    """Register profile tools with the MCP server."""

    @mcp.tool()
    async def topo_profile_two_points(
        start: list[float],
        end: list[float],
        samples: int | None = None,
        include_gradients: bool = True,
        output_mode: str = "json",
    ) -> str:
        """Extract an elevation profile along the straight line between two points.

        The line is split into evenly spaced samples, elevations are fetched in
        a single lookup, and the result is reduced to distance, elevation range,
        ascent, descent, and per-segment gradient classes.

        Args:
            start: Start point [lat, lng]
            end: End point [lat, lng]
            samples: Number of samples (default 100)
            include_gradients: Include per-segment gradient classification
            output_mode: "json" or "text"

        Returns:
            Profile points with cumulative distance and statistics
        """
        try:
            start_pt = parse_point(start)
            end_pt = parse_point(end)
            count = samples if samples is not None else manager.two_point_samples

            analysis = await manager.analyze_two_points(start_pt, end_pt, count)
            response = profile_response(
                RouteMode.TWO_POINT, [start_pt, end_pt], count, analysis, include_gradients
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"topo_profile_two_points failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def topo_profile_path(
        waypoints: list[list[float]],
        total_samples: int | None = None,
        include_gradients: bool = True,
        output_mode: str = "json",
    ) -> str:
        """Extract an elevation profile along a chain of waypoints.

        Samples are spaced evenly by distance along the whole polyline, not per
        segment. At least two waypoints are required.

        Args:
            waypoints: Ordered path points [[lat, lng], ...]
            total_samples: Number of samples along the whole path (default 250)
            include_gradients: Include per-segment gradient classification
            output_mode: "json" or "text"

        Returns:
            Profile points with cumulative distance and statistics
        """
        try:
            path = parse_points(waypoints)
            count = total_samples if total_samples is not None else manager.path_samples

            analysis = await manager.analyze_path(path, count)
            response = profile_response(
                RouteMode.MULTI_POINT, path, count, analysis, include_gradients
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"topo_profile_path failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def topo_sample_path(
        waypoints: list[list[float]],
        sample_count: int | None = None,
        output_mode: str = "json",
    ) -> str:
        """Compute evenly spaced sample coordinates along a path without fetching elevation.

        Args:
            waypoints: Ordered path points [[lat, lng], ...]
            sample_count: Number of samples (default 250)
            output_mode: "json" or "text"

        Returns:
            Sample coordinates, start to end
        """
        try:
            path = parse_points(waypoints)
            count = sample_count if sample_count is not None else manager.path_samples

            points = sampler.sample_path(path, count)
            table = sampler.cumulative_distances(path)
            total = table[-1] if table else 0.0

            response = SampleResponse(
                waypoints=[p.to_list() for p in path],
                sample_count=count,
                path_distance_km=total,
                samples=[LocationInfo(lat=p.lat, lng=p.lng) for p in points],
                message=SuccessMessages.SAMPLES_COMPUTED.format(len(points), total),
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"topo_sample_path failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def topo_reduce_profile(
        samples: list[dict[str, Any]],
        include_gradients: bool = True,
        output_mode: str = "json",
    ) -> str:
        """Reduce an existing elevation profile without a lookup.

        Args:
            samples: Ordered samples [{"lat", "lng", "elevation"}, ...]
            include_gradients: Include per-segment gradient classification
            output_mode: "json" or "text"

        Returns:
            Profile points with cumulative distance and statistics
        """
        try:
            profile = parse_samples(samples)
            analysis = manager.analyze_profile(profile)
            if analysis.ok:
                analysis = replace(
                    analysis,
                    message=SuccessMessages.PROFILE_REDUCED.format(
                        len(profile), analysis.stats.distance_km
                    ),
                )

            response = profile_response(
                SUPPLIED_PROFILE_MODE,
                [s.location for s in profile],
                len(profile),
                analysis,
                include_gradients,
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"topo_reduce_profile failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def topo_nearest_point(
        samples: list[dict[str, Any]],
        location: list[float],
        output_mode: str = "json",
    ) -> str:
        """Find the profile point closest to a location (e.g., a hovered map position).

        Args:
            samples: Ordered samples [{"lat", "lng", "elevation"}, ...]
            location: Query location [lat, lng]
            output_mode: "json" or "text"

        Returns:
            The closest profile point with its distance from the start
        """
        try:
            query = parse_point(location)
            points = reducer.with_cumulative_distance(parse_samples(samples))
            nearest = reducer.nearest_profile_point(points, query)
            if nearest is None:
                raise ValueError(ErrorMessages.EMPTY_PROFILE)

            response = NearestPointResponse(
                query=query.to_list(),
                point=point_info(nearest),
                index=points.index(nearest),
                message=SuccessMessages.NEAREST_POINT.format(
                    nearest.distance_from_start_km, nearest.elevation
                ),
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"topo_nearest_point failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)
