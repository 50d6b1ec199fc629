"""Tests for chuk_mcp_topo.core.route_state."""

import asyncio
from unittest.mock import AsyncMock

import httpx
import pytest

from chuk_mcp_topo.constants import ProfileStatus, RouteMode
from chuk_mcp_topo.core import route_state
from chuk_mcp_topo.core.errors import LookupUnavailableError
from chuk_mcp_topo.core.geodesy import LocationPoint
from chuk_mcp_topo.core.lookup_client import ElevationLookupClient
from chuk_mcp_topo.core.profile_manager import ProfileAnalysis, ProfileManager
from chuk_mcp_topo.core.reducer import ElevationSample
from chuk_mcp_topo.core.route_state import RouteSession, RouteState

A = LocationPoint(46.5, 7.9)
B = LocationPoint(46.6, 8.0)
C = LocationPoint(46.7, 8.2)

OK_ANALYSIS = ProfileAnalysis(status=ProfileStatus.OK, message="done")


# ===========================================================================
# Pure update functions
# ===========================================================================


class TestClick:
    def test_initial_state(self):
        state = RouteState()
        assert state.mode == RouteMode.TWO_POINT
        assert state.request_id == 0
        assert not state.can_analyze

    def test_first_click_sets_start(self):
        state = route_state.click(RouteState(), A)
        assert state.start == A
        assert state.end is None
        assert not state.is_loading

    def test_second_click_sets_end_and_starts_analysis(self):
        state = route_state.click(route_state.click(RouteState(), A), B)
        assert state.end == B
        assert state.is_loading
        assert state.request_id == 1

    def test_third_click_ignored(self):
        state = route_state.click(route_state.click(RouteState(), A), B)
        assert route_state.click(state, C) is state

    def test_multi_point_appends(self):
        state = RouteState(mode=RouteMode.MULTI_POINT)
        for p in (A, B, C):
            state = route_state.click(state, p)
        assert state.waypoints == (A, B, C)
        assert not state.is_loading
        assert state.can_analyze

    def test_multi_point_click_clears_profile(self):
        state = RouteState(
            mode=RouteMode.MULTI_POINT,
            waypoints=(A, B),
            profile=(ElevationSample(A, 1.0),),
            status=ProfileStatus.OK,
        )
        state = route_state.click(state, C)
        assert state.profile == ()
        assert state.status is None

    def test_multi_point_click_supersedes_pending_analysis(self):
        state = RouteState(
            mode=RouteMode.MULTI_POINT, waypoints=(A, B), is_loading=True, request_id=3
        )
        state = route_state.click(state, C)
        assert not state.is_loading
        assert state.request_id == 4

    def test_does_not_mutate(self):
        original = RouteState()
        route_state.click(original, A)
        assert original.start is None


class TestResetAndMode:
    def test_reset_clears_points(self):
        state = route_state.click(route_state.click(RouteState(), A), B)
        state = route_state.reset(state)
        assert state.start is None
        assert state.end is None
        assert not state.is_loading
        assert state.request_id == 2

    def test_reset_keeps_mode(self):
        state = route_state.reset(RouteState(mode=RouteMode.MULTI_POINT, waypoints=(A,)))
        assert state.mode == RouteMode.MULTI_POINT
        assert state.waypoints == ()

    def test_change_mode_resets(self):
        state = route_state.click(RouteState(), A)
        state = route_state.change_mode(state, RouteMode.MULTI_POINT)
        assert state.mode == RouteMode.MULTI_POINT
        assert state.start is None
        assert state.request_id == 1

    def test_change_mode_invalid(self):
        with pytest.raises(ValueError, match="Invalid route mode"):
            route_state.change_mode(RouteState(), "three-point")


class TestApplyAnalysis:
    def test_applies_current_result(self):
        pending = route_state.begin_analysis(RouteState(start=A, end=B))
        state = route_state.apply_analysis(pending, pending.request_id, OK_ANALYSIS)
        assert state.status == ProfileStatus.OK
        assert state.error is None
        assert not state.is_loading

    def test_stale_result_discarded(self):
        pending = route_state.begin_analysis(RouteState(start=A, end=B))
        newer = route_state.reset(pending)
        state = route_state.apply_analysis(newer, pending.request_id, OK_ANALYSIS)
        assert state is newer
        assert state.status is None

    def test_failure_sets_error(self):
        pending = route_state.begin_analysis(RouteState(start=A, end=B))
        failed = ProfileAnalysis(status=ProfileStatus.LOOKUP_FAILED, message="status 500")
        state = route_state.apply_analysis(pending, pending.request_id, failed)
        assert state.status == ProfileStatus.LOOKUP_FAILED
        assert state.error == "status 500"
        assert not state.is_loading


# ===========================================================================
# RouteSession
# ===========================================================================


class TestRouteSession:
    async def test_two_point_flow(self, route_session, mock_lookup):
        await route_session.click(A)
        state = await route_session.click(B)
        assert state.status == ProfileStatus.OK
        assert len(state.points) == 100
        assert state.stats is not None
        assert not state.is_loading
        mock_lookup.lookup.assert_awaited_once()

    async def test_multi_point_requires_analyze(self, route_session, mock_lookup):
        route_session.set_mode(RouteMode.MULTI_POINT)
        for p in (A, B, C):
            await route_session.click(p)
        mock_lookup.lookup.assert_not_awaited()

        state = await route_session.analyze()
        assert state.status == ProfileStatus.OK
        assert len(state.points) == 250

    async def test_analyze_too_few_points(self, route_session, mock_lookup):
        route_session.set_mode(RouteMode.MULTI_POINT)
        await route_session.click(A)
        state = await route_session.analyze()
        assert state.status == ProfileStatus.INVALID_PATH
        assert "got 1" in state.error
        mock_lookup.lookup.assert_not_awaited()

    async def test_analyze_two_point_without_end(self, route_session):
        await route_session.click(A)
        state = await route_session.analyze()
        assert state.status == ProfileStatus.INVALID_PATH
        assert "got 1" in state.error

    async def test_empty_result(self, route_session, mock_lookup):
        mock_lookup.lookup = AsyncMock(return_value=[])
        await route_session.click(A)
        state = await route_session.click(B)
        assert state.status == ProfileStatus.EMPTY_RESULT
        assert state.points == ()
        assert "No elevation data" in state.error

    async def test_lookup_unavailable(self, route_session, mock_lookup):
        mock_lookup.lookup = AsyncMock(side_effect=LookupUnavailableError("Network error"))
        await route_session.click(A)
        state = await route_session.click(B)
        assert state.status == ProfileStatus.LOOKUP_UNAVAILABLE
        assert state.error == "Network error"
        assert not state.is_loading

    async def test_reset_during_fetch_discards_result(self, route_session, mock_lookup):
        async def lookup_then_reset(points):
            route_session.reset()
            return [ElevationSample(location=p, elevation=1.0) for p in points]

        mock_lookup.lookup = AsyncMock(side_effect=lookup_then_reset)
        await route_session.click(A)
        state = await route_session.click(B)

        assert state.start is None
        assert state.points == ()
        assert state.status is None

    async def test_newer_analysis_wins(self, route_session, mock_lookup):
        route_session.set_mode(RouteMode.MULTI_POINT)
        for p in (A, B):
            await route_session.click(p)

        calls = []

        async def lookup(points):
            calls.append(len(points))
            call_number = len(calls)
            if call_number == 1:
                # A second analysis starts while the first is in flight.
                await route_session.analyze()
            return [ElevationSample(location=p, elevation=float(call_number)) for p in points]

        mock_lookup.lookup = AsyncMock(side_effect=lookup)
        state = await route_session.analyze()

        assert len(calls) == 2
        assert state.status == ProfileStatus.OK
        assert all(p.elevation == 2.0 for p in state.points)

    async def test_click_during_analyze_does_not_fetch(self, route_session, mock_lookup):
        route_session.set_mode(RouteMode.MULTI_POINT)
        for p in (A, B):
            await route_session.click(p)

        gate = asyncio.Event()

        async def gated(points):
            await gate.wait()
            return [ElevationSample(location=p, elevation=1.0) for p in points]

        mock_lookup.lookup = AsyncMock(side_effect=gated)
        pending = asyncio.create_task(route_session.analyze())
        await asyncio.sleep(0)
        assert route_session.state.is_loading

        state = await route_session.click(C)
        assert not state.is_loading

        gate.set()
        await pending

        assert mock_lookup.lookup.call_count == 1
        assert route_session.state.waypoints == (A, B, C)
        assert route_session.state.status is None
        assert route_session.state.points == ()

    async def test_unexpected_error_settles(self, route_session, mock_lookup):
        mock_lookup.lookup = AsyncMock(side_effect=RuntimeError("boom"))
        await route_session.click(A)
        state = await route_session.click(B)
        assert state.status == ProfileStatus.LOOKUP_FAILED
        assert state.error == "boom"
        assert not state.is_loading

    async def test_undecodable_body_settles(self):
        def handler(request):
            return httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=b"not gzip")

        lookup = ElevationLookupClient(
            api_url="https://elevation.example.com/api/v1/lookup",
            transport=httpx.MockTransport(handler),
        )
        session = RouteSession(ProfileManager(lookup=lookup, two_point_samples=3))
        await session.click(A)
        state = await session.click(B)
        assert state.status == ProfileStatus.LOOKUP_FAILED
        assert not state.is_loading

    async def test_hover_highlights_nearest(self, route_session):
        await route_session.click(A)
        await route_session.click(B)
        state = route_session.hover(LocationPoint(46.5, 7.9))
        assert state.hovered is not None
        assert state.hovered.distance_from_start_km == 0.0

    async def test_hover_clear(self, route_session):
        await route_session.click(A)
        await route_session.click(B)
        route_session.hover(A)
        assert route_session.hover(None).hovered is None

    def test_hover_without_profile(self, route_session):
        assert route_session.hover(A).hovered is None

    async def test_set_mode_resets(self, route_session):
        await route_session.click(A)
        state = route_session.set_mode(RouteMode.MULTI_POINT)
        assert state.start is None
        assert state.mode == RouteMode.MULTI_POINT
