"""
Route selection state.

``RouteState`` is an immutable snapshot. Each user action has a pure update
function returning a new snapshot; ``RouteSession`` is the single container
that holds the current snapshot and runs the profile fetches the actions ask for.

Every reset, multi-point click, or analysis start bumps ``request_id``. A result carrying an older
id is discarded, so the most recent action always wins.
"""

import logging
from dataclasses import dataclass, replace

from ..constants import (
    DEFAULT_ROUTE_MODE,
    MIN_WAYPOINTS,
    ROUTE_MODES,
    ErrorMessages,
    ProfileStatus,
    RouteMode,
)
from .geodesy import LocationPoint
from .profile_manager import ProfileAnalysis, ProfileManager
from .reducer import ElevationSample, ProfilePoint, ProfileStats, nearest_profile_point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteState:
    """Snapshot of the current route selection and its profile."""

    mode: str = DEFAULT_ROUTE_MODE
    start: LocationPoint | None = None
    end: LocationPoint | None = None
    waypoints: tuple[LocationPoint, ...] = ()
    profile: tuple[ElevationSample, ...] = ()
    points: tuple[ProfilePoint, ...] = ()
    stats: ProfileStats | None = None
    status: str | None = None
    error: str | None = None
    is_loading: bool = False
    request_id: int = 0
    hovered: ProfilePoint | None = None

    @property
    def can_analyze(self) -> bool:
        if self.mode == RouteMode.TWO_POINT:
            return self.start is not None and self.end is not None
        return len(self.waypoints) >= MIN_WAYPOINTS


def _clear_profile(state: RouteState) -> RouteState:
    return replace(state, profile=(), points=(), stats=None, status=None, error=None, hovered=None)


def click(state: RouteState, point: LocationPoint) -> RouteState:
    """Map click: place the start/end point or append a waypoint.

    In two-point mode the second click also starts an analysis; clicks after
    that are ignored until the route is reset. A multi-point click supersedes
    any analysis in flight.
    """
    if state.mode == RouteMode.TWO_POINT:
        if state.start is None:
            return replace(_clear_profile(state), start=point, end=None)
        if state.end is None:
            return begin_analysis(replace(state, end=point))
        return state

    return replace(
        _clear_profile(state),
        waypoints=state.waypoints + (point,),
        is_loading=False,
        request_id=state.request_id + 1,
    )


def reset(state: RouteState) -> RouteState:
    """Clear points and profile, keeping the mode."""
    return RouteState(mode=state.mode, request_id=state.request_id + 1)


def change_mode(state: RouteState, mode: str) -> RouteState:
    """Switch route mode; always resets the route."""
    if mode not in ROUTE_MODES:
        raise ValueError(ErrorMessages.INVALID_ROUTE_MODE.format(mode, ", ".join(ROUTE_MODES)))
    return reset(replace(state, mode=mode))


def begin_analysis(state: RouteState) -> RouteState:
    return replace(
        _clear_profile(state),
        is_loading=True,
        request_id=state.request_id + 1,
    )


def apply_analysis(state: RouteState, request_id: int, analysis: ProfileAnalysis) -> RouteState:
    """Store a settled analysis unless a newer action has superseded it."""
    if request_id != state.request_id:
        logger.info(
            f"Discarding stale profile result (request {request_id}, current {state.request_id})"
        )
        return state

    return replace(
        state,
        profile=tuple(analysis.samples),
        points=tuple(analysis.points),
        stats=analysis.stats,
        status=analysis.status,
        error=None if analysis.ok else analysis.message,
        is_loading=False,
        hovered=None,
    )


def hover(state: RouteState, location: LocationPoint | None) -> RouteState:
    """Highlight the profile point nearest to ``location`` (None clears it)."""
    if location is None:
        return replace(state, hovered=None)
    return replace(state, hovered=nearest_profile_point(state.points, location))


class RouteSession:
    """Holds the current :class:`RouteState` and runs fetches for it."""

    def __init__(self, manager: ProfileManager) -> None:
        self.manager = manager
        self.state = RouteState()

    async def click(self, point: LocationPoint) -> RouteState:
        previous = self.state
        self.state = click(previous, point)
        # Only the two-point second click starts a fetch
        if self.state.is_loading and self.state.request_id != previous.request_id:
            await self._run_analysis(self.state)
        return self.state

    def set_mode(self, mode: str) -> RouteState:
        self.state = change_mode(self.state, mode)
        return self.state

    def reset(self) -> RouteState:
        self.state = reset(self.state)
        return self.state

    def hover(self, location: LocationPoint | None) -> RouteState:
        self.state = hover(self.state, location)
        return self.state

    async def analyze(self) -> RouteState:
        """Analyze the current route; too few points settles as ``invalid_path``."""
        if not self.state.can_analyze:
            count = len(self.state.waypoints)
            if self.state.mode == RouteMode.TWO_POINT:
                count = sum(p is not None for p in (self.state.start, self.state.end))
            self.state = replace(
                _clear_profile(self.state),
                status=ProfileStatus.INVALID_PATH,
                error=ErrorMessages.INVALID_PATH.format(count),
            )
            return self.state

        self.state = begin_analysis(self.state)
        await self._run_analysis(self.state)
        return self.state

    async def _run_analysis(self, pending: RouteState) -> None:
        try:
            if pending.mode == RouteMode.TWO_POINT:
                analysis = await self.manager.analyze_two_points(pending.start, pending.end)
            else:
                analysis = await self.manager.analyze_path(list(pending.waypoints))
        except Exception as e:
            logger.error(f"Route analysis failed: {e}")
            analysis = ProfileAnalysis(
                status=ProfileStatus.LOOKUP_FAILED,
                message=str(e) or ErrorMessages.LOOKUP_UNKNOWN,
            )
        self.state = apply_analysis(self.state, pending.request_id, analysis)
