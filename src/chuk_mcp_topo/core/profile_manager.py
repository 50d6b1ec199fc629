"""
Profile Manager: central orchestrator for elevation profile requests.

Samples the requested path, runs one batched lookup, and reduces the result.
The ``get_profile_*`` entry points return the raw elevation profile; the
``analyze_*`` methods always settle into a categorised :class:`ProfileAnalysis`.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..constants import (
    MIN_WAYPOINTS,
    ErrorMessages,
    ProfileStatus,
    SuccessMessages,
    get_path_samples,
    get_two_point_samples,
)
from . import reducer, sampler
from .errors import InvalidPathError, ProfileError
from .geodesy import LocationPoint
from .lookup_client import ElevationLookupClient
from .reducer import ElevationSample, GradientSegment, ProfilePoint, ProfileStats

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProfileAnalysis:
    """Settled outcome of one profile request."""

    status: str
    message: str
    samples: list[ElevationSample] = field(default_factory=list)
    points: list[ProfilePoint] = field(default_factory=list)
    stats: ProfileStats | None = None
    gradients: list[GradientSegment] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == ProfileStatus.OK


class ProfileManager:
    """Central manager for path sampling, elevation lookup, and reduction."""

    def __init__(
        self,
        lookup: ElevationLookupClient | None = None,
        two_point_samples: int | None = None,
        path_samples: int | None = None,
    ) -> None:
        self.lookup = lookup or ElevationLookupClient()
        self.two_point_samples = two_point_samples or get_two_point_samples()
        self.path_samples = path_samples or get_path_samples()

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    async def get_profile_for_two_points(
        self,
        start: LocationPoint,
        end: LocationPoint,
        samples: int | None = None,
    ) -> list[ElevationSample]:
        """Elevation profile along the straight line from start to end."""
        count = samples if samples is not None else self.two_point_samples
        query = sampler.sample_two_points(start, end, count)
        return await self.lookup.lookup(query)

    async def get_profile_for_path(
        self,
        waypoints: Sequence[LocationPoint],
        total_samples: int | None = None,
    ) -> list[ElevationSample]:
        """Elevation profile along a waypoint chain; empty for fewer than 2 waypoints."""
        if len(waypoints) < MIN_WAYPOINTS:
            return []
        count = total_samples if total_samples is not None else self.path_samples
        query = sampler.sample_path(waypoints, count)
        return await self.lookup.lookup(query)

    # ------------------------------------------------------------------
    # Settling analysis
    # ------------------------------------------------------------------

    async def analyze_two_points(
        self,
        start: LocationPoint,
        end: LocationPoint,
        samples: int | None = None,
    ) -> ProfileAnalysis:
        try:
            profile = await self.get_profile_for_two_points(start, end, samples)
        except ProfileError as e:
            return self._failure(e)
        return self.analyze_profile(profile)

    async def analyze_path(
        self,
        waypoints: Sequence[LocationPoint],
        total_samples: int | None = None,
    ) -> ProfileAnalysis:
        try:
            if len(waypoints) < MIN_WAYPOINTS:
                raise InvalidPathError(ErrorMessages.INVALID_PATH.format(len(waypoints)))
            profile = await self.get_profile_for_path(waypoints, total_samples)
        except ProfileError as e:
            return self._failure(e)
        return self.analyze_profile(profile)

    def analyze_profile(self, profile: Sequence[ElevationSample]) -> ProfileAnalysis:
        """Reduce an elevation profile; an empty profile settles as ``empty_result``."""
        if not profile:
            return ProfileAnalysis(
                status=ProfileStatus.EMPTY_RESULT,
                message=ErrorMessages.EMPTY_RESULT,
            )

        samples = list(profile)
        stats = reducer.reduce_profile(samples)
        return ProfileAnalysis(
            status=ProfileStatus.OK,
            message=SuccessMessages.PROFILE_COMPLETE.format(len(samples), stats.distance_km),
            samples=samples,
            points=reducer.with_cumulative_distance(samples),
            stats=stats,
            gradients=reducer.gradient_segments(samples),
        )

    @staticmethod
    def _failure(error: ProfileError) -> ProfileAnalysis:
        logger.error(f"Profile request failed ({error.category}): {error}")
        return ProfileAnalysis(
            status=error.category,
            message=str(error) or ErrorMessages.LOOKUP_UNKNOWN,
        )
