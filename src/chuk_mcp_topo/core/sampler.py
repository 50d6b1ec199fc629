"""
Path sampling for batched elevation lookups.

Turns a two-point line or a waypoint chain into a fixed number of coordinates
spaced uniformly by cumulative geodesic distance. Latitude and longitude are
interpolated linearly within each segment.

All functions are synchronous and pure.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from ..constants import (
    DEFAULT_PATH_SAMPLES,
    DEFAULT_TWO_POINT_SAMPLES,
    MIN_SAMPLES,
    ErrorMessages,
)
from .errors import InvalidSampleCountError
from .geodesy import LocationPoint, distance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathSegment:
    """Consecutive pair of path points with its length and cumulative end distance."""

    start: LocationPoint
    end: LocationPoint
    length_km: float
    cumulative_end_km: float


def _check_sample_count(sample_count: int) -> None:
    if sample_count < MIN_SAMPLES:
        raise InvalidSampleCountError(ErrorMessages.INVALID_SAMPLE_COUNT.format(sample_count))


def build_segments(path: Sequence[LocationPoint]) -> list[PathSegment]:
    """Split a path into segments with precomputed geodesic lengths."""
    segments: list[PathSegment] = []
    cumulative = 0.0
    for i in range(len(path) - 1):
        length = distance(path[i], path[i + 1])
        cumulative += length
        segments.append(PathSegment(path[i], path[i + 1], length, cumulative))
    return segments


def cumulative_distances(path: Sequence[LocationPoint]) -> list[float]:
    """Polyline distance from path[0] to every path point, in kilometres."""
    if not path:
        return []
    return [0.0] + [seg.cumulative_end_km for seg in build_segments(path)]


def sample_two_points(
    start: LocationPoint,
    end: LocationPoint,
    samples: int = DEFAULT_TWO_POINT_SAMPLES,
) -> list[LocationPoint]:
    """Linearly interpolate ``samples`` points from start to end.

    Coincident endpoints yield a single point.

    Raises:
        InvalidSampleCountError: If samples < 2 (a ValueError)
    """
    _check_sample_count(samples)
    if distance(start, end) == 0:
        return [start]

    t = np.arange(samples) / (samples - 1)
    lats = start.lat + t * (end.lat - start.lat)
    lngs = start.lng + t * (end.lng - start.lng)
    return [LocationPoint(float(lat), float(lng)) for lat, lng in zip(lats, lngs)]


def sample_path(
    path: Sequence[LocationPoint],
    sample_count: int = DEFAULT_PATH_SAMPLES,
) -> list[LocationPoint]:
    """Sample ``sample_count`` points evenly spaced by distance along a polyline.

    Each target distance is located in the first segment whose cumulative range
    contains it, so a sample falling exactly on a shared breakpoint belongs to
    the earlier segment. Zero-length segments interpolate with t = 0.

    Args:
        path: Ordered waypoints (start to end)
        sample_count: Number of output points

    Returns:
        Sampled points, start to end. A single point when the path has no
        length, and an empty list for an empty path.

    Raises:
        InvalidSampleCountError: If sample_count < 2 (a ValueError)
    """
    _check_sample_count(sample_count)
    if not path:
        return []

    table = np.asarray(cumulative_distances(path), dtype=float)
    total = float(table[-1])
    if total == 0:
        return [path[0]]

    step = total / (sample_count - 1)
    targets = np.arange(sample_count) * step
    targets[-1] = total

    # First index with table[k] >= d; the containing segment starts one before it.
    seg = np.searchsorted(table, targets, side="left") - 1
    seg = np.clip(seg, 0, len(table) - 2)

    lats = np.array([p.lat for p in path], dtype=float)
    lngs = np.array([p.lng for p in path], dtype=float)

    seg_start = table[seg]
    seg_length = table[seg + 1] - seg_start
    safe_length = np.where(seg_length == 0, 1.0, seg_length)
    t = np.where(seg_length == 0, 0.0, (targets - seg_start) / safe_length)

    out_lats = lats[seg] + t * (lats[seg + 1] - lats[seg])
    out_lngs = lngs[seg] + t * (lngs[seg + 1] - lngs[seg])

    logger.debug(f"Sampled {sample_count} points over {total:.3f} km ({len(path)} waypoints)")
    return [LocationPoint(float(lat), float(lng)) for lat, lng in zip(out_lats, out_lngs)]
