"""Tests for chuk_mcp_topo.tools.discovery.api.

Tests all three discovery tools: topo_status, topo_capabilities, and
topo_gradient_legend in JSON and text output modes.
"""

import json

import pytest
from unittest.mock import MagicMock

from chuk_mcp_topo.constants import (
    DISCOVERY_TOOLS,
    GRADIENT_CLASS_KEYS,
    PROFILE_TOOLS,
    ROUTE_MODES,
    ROUTE_TOOLS,
    ServerConfig,
)
from chuk_mcp_topo.tools.discovery.api import register_discovery_tools


# ── Fixtures ───────────────────────────────────────────────────────


@pytest.fixture
def discovery_tools(mock_manager, route_session):
    """Register discovery tools and return a dict mapping name -> coroutine function."""
    tools = {}
    mcp = MagicMock()

    def capture_tool(**kwargs):
        def decorator(fn):
            tools[fn.__name__] = fn
            return fn

        return decorator

    mcp.tool = capture_tool
    register_discovery_tools(mcp, mock_manager, route_session)
    return tools


# ── Registration tests ─────────────────────────────────────────────


class TestRegistration:
    def test_registers_three_tools(self, discovery_tools):
        assert set(discovery_tools) == set(DISCOVERY_TOOLS)

    def test_all_tools_are_coroutines(self, discovery_tools):
        import asyncio

        for name, fn in discovery_tools.items():
            assert asyncio.iscoroutinefunction(fn), f"{name} is not a coroutine"


# ── topo_status ────────────────────────────────────────────────────


class TestTopoStatus:
    async def test_json_fields(self, discovery_tools):
        data = json.loads(await discovery_tools["topo_status"]())
        assert data["server"] == ServerConfig.NAME
        assert data["version"] == ServerConfig.VERSION
        assert data["api_url"] == "https://elevation.example.com/api/v1/lookup"
        assert data["api_timeout_s"] == 30.0
        assert data["two_point_samples"] == 100
        assert data["path_samples"] == 250
        assert data["route_mode"] == "two-point"

    async def test_reflects_route_mode(self, discovery_tools, route_session):
        route_session.set_mode("multi-point")
        data = json.loads(await discovery_tools["topo_status"]())
        assert data["route_mode"] == "multi-point"

    async def test_text_output(self, discovery_tools):
        result = await discovery_tools["topo_status"](output_mode="text")
        assert "chuk-mcp-topo v0.1.0" in result
        assert "Samples: 100 two-point, 250 multi-point" in result


# ── topo_capabilities ──────────────────────────────────────────────


class TestTopoCapabilities:
    async def test_tool_lists(self, discovery_tools):
        data = json.loads(await discovery_tools["topo_capabilities"]())
        assert data["profile_tools"] == PROFILE_TOOLS
        assert data["route_tools"] == ROUTE_TOOLS
        assert data["discovery_tools"] == DISCOVERY_TOOLS
        assert data["tool_count"] == 14

    async def test_modes_and_classes(self, discovery_tools):
        data = json.loads(await discovery_tools["topo_capabilities"]())
        assert data["route_modes"] == ROUTE_MODES
        assert data["gradient_classes"] == GRADIENT_CLASS_KEYS
        assert "lookup_unavailable" in data["statuses"]

    async def test_guidance_mentions_point_order(self, discovery_tools):
        data = json.loads(await discovery_tools["topo_capabilities"]())
        assert "[lat, lng]" in data["llm_guidance"]

    async def test_text_output(self, discovery_tools):
        result = await discovery_tools["topo_capabilities"](output_mode="text")
        assert "Tools: 14" in result
        assert "Route modes: two-point, multi-point" in result


# ── topo_gradient_legend ───────────────────────────────────────────


class TestGradientLegend:
    async def test_seven_bands(self, discovery_tools):
        data = json.loads(await discovery_tools["topo_gradient_legend"]())
        assert [b["key"] for b in data["bands"]] == GRADIENT_CLASS_KEYS
        assert data["message"] == "7 gradient classes"

    async def test_thresholds(self, discovery_tools):
        data = json.loads(await discovery_tools["topo_gradient_legend"]())
        assert [b["above_percent"] for b in data["bands"]] == [
            10.0,
            5.0,
            1.0,
            -1.0,
            -5.0,
            -10.0,
            None,
        ]

    async def test_colours(self, discovery_tools):
        data = json.loads(await discovery_tools["topo_gradient_legend"]())
        assert data["bands"][0]["color"] == "#d73027"
        assert data["bands"][-1]["color"] == "#313695"

    async def test_text_output(self, discovery_tools):
        result = await discovery_tools["topo_gradient_legend"](output_mode="text")
        assert "#d73027 Steep climb (> 10%)" in result
        assert "#313695 Steep descent (otherwise)" in result
