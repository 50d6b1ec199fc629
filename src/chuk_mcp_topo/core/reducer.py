"""
Profile reduction: cumulative distance, summary statistics, and gradients.

Operates on an ordered elevation profile (index 0 is the path start). Every
result is recomputed from the profile; nothing is cached or updated in place.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from ..constants import GRADIENT_BANDS
from .geodesy import LocationPoint, distance


@dataclass(frozen=True)
class ElevationSample:
    """Elevation returned by the lookup for one queried location."""

    location: LocationPoint
    elevation: float


@dataclass(frozen=True)
class ProfilePoint:
    """A profile sample with its distance along the profile."""

    location: LocationPoint
    elevation: float
    distance_from_start_km: float


@dataclass(frozen=True)
class ProfileStats:
    """Summary statistics for an elevation profile."""

    distance_km: float
    max_elevation_m: float
    min_elevation_m: float
    total_ascent_m: float
    total_descent_m: float


@dataclass(frozen=True)
class GradientClass:
    """A named gradient band with its display colour."""

    key: str
    label: str
    color: str
    above: float | None


@dataclass(frozen=True)
class GradientSegment:
    """Gradient between two consecutive profile samples."""

    start: LocationPoint
    end: LocationPoint
    distance_km: float
    elevation_delta_m: float
    gradient_percent: float
    gradient_class: GradientClass


GRADIENT_CLASSES: list[GradientClass] = [
    GradientClass(key=b["key"], label=b["label"], color=b["color"], above=b["above"])
    for b in GRADIENT_BANDS
]


def with_cumulative_distance(profile: Sequence[ElevationSample]) -> list[ProfilePoint]:
    """Attach the running along-profile distance to every sample."""
    points: list[ProfilePoint] = []
    cumulative = 0.0
    for i, sample in enumerate(profile):
        if i > 0:
            cumulative += distance(profile[i - 1].location, sample.location)
        points.append(ProfilePoint(sample.location, sample.elevation, cumulative))
    return points


def reduce_profile(profile: Sequence[ElevationSample]) -> ProfileStats:
    """Compute distance, elevation range, ascent and descent in one pass.

    A profile with fewer than two samples has zero distance, ascent and
    descent; its min and max are the single elevation, or 0 when empty.
    """
    if len(profile) < 2:
        elevation = profile[0].elevation if profile else 0.0
        return ProfileStats(
            distance_km=0.0,
            max_elevation_m=elevation,
            min_elevation_m=elevation,
            total_ascent_m=0.0,
            total_descent_m=0.0,
        )

    total_distance = 0.0
    max_elev = -math.inf
    min_elev = math.inf
    ascent = 0.0
    descent = 0.0

    for i, current in enumerate(profile):
        if current.elevation > max_elev:
            max_elev = current.elevation
        if current.elevation < min_elev:
            min_elev = current.elevation

        if i > 0:
            prev = profile[i - 1]
            total_distance += distance(prev.location, current.location)

            diff = current.elevation - prev.elevation
            if diff > 0:
                ascent += diff
            else:
                descent += abs(diff)

    return ProfileStats(
        distance_km=total_distance,
        max_elevation_m=max_elev,
        min_elevation_m=min_elev,
        total_ascent_m=ascent,
        total_descent_m=descent,
    )


def gradient_percent(distance_km: float, elevation_delta_m: float) -> float:
    """Slope in percent; 0 when the horizontal distance is 0."""
    if distance_km > 0:
        return (elevation_delta_m / (distance_km * 1000)) * 100
    return 0.0


def classify_gradient(percent: float) -> GradientClass:
    """Return the first band whose threshold the gradient strictly exceeds."""
    for band in GRADIENT_CLASSES[:-1]:
        if percent > band.above:
            return band
    return GRADIENT_CLASSES[-1]


def gradient_segments(profile: Sequence[ElevationSample]) -> list[GradientSegment]:
    """Classify the gradient of each consecutive sample pair."""
    segments: list[GradientSegment] = []
    for i in range(1, len(profile)):
        prev, current = profile[i - 1], profile[i]
        dist = distance(prev.location, current.location)
        delta = current.elevation - prev.elevation
        pct = gradient_percent(dist, delta)
        segments.append(
            GradientSegment(
                start=prev.location,
                end=current.location,
                distance_km=dist,
                elevation_delta_m=delta,
                gradient_percent=pct,
                gradient_class=classify_gradient(pct),
            )
        )
    return segments


def nearest_profile_point(
    points: Sequence[ProfilePoint],
    location: LocationPoint,
) -> ProfilePoint | None:
    """Closest profile point by squared lat/lng difference (first minimum wins)."""
    closest = None
    best = math.inf
    for point in points:
        d = (location.lat - point.location.lat) ** 2 + (location.lng - point.location.lng) ** 2
        if d < best:
            best = d
            closest = point
    return closest
