"""
Discovery tools: server status, capabilities, and the gradient legend.

These tools require no network I/O.
"""

import logging

from ...constants import (
    DISCOVERY_TOOLS,
    GRADIENT_CLASS_KEYS,
    PROFILE_STATUSES,
    PROFILE_TOOLS,
    ROUTE_MODES,
    ROUTE_TOOLS,
    ServerConfig,
    SuccessMessages,
)
from ...core.reducer import GRADIENT_CLASSES
from ...models.responses import (
    CapabilitiesResponse,
    ErrorResponse,
    GradientBandInfo,
    GradientLegendResponse,
    StatusResponse,
    format_response,
)

logger = logging.getLogger(__name__)


def register_discovery_tools(mcp, manager, session):
    """Register discovery tools with the MCP server."""

    @mcp.tool()
    async def topo_status(output_mode: str = "json") -> str:
        """Get server status including the lookup endpoint and sampling defaults.

        Args:
            output_mode: "json" for structured data, "text" for human-readable summary

        Returns:
            Server status information
        """
        try:
            response = StatusResponse(
                server=ServerConfig.NAME,
                version=ServerConfig.VERSION,
                api_url=manager.lookup.api_url,
                api_timeout_s=manager.lookup.timeout,
                two_point_samples=manager.two_point_samples,
                path_samples=manager.path_samples,
                route_mode=session.state.mode,
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"topo_status failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def topo_capabilities(output_mode: str = "json") -> str:
        """Get full server capabilities including tools, route modes, and gradient classes.

        Args:
            output_mode: "json" for structured data, "text" for human-readable summary

        Returns:
            Complete server capabilities
        """
        try:
            tool_count = len(PROFILE_TOOLS) + len(ROUTE_TOOLS) + len(DISCOVERY_TOOLS)
            response = CapabilitiesResponse(
                server=ServerConfig.NAME,
                version=ServerConfig.VERSION,
                route_modes=ROUTE_MODES,
                profile_tools=PROFILE_TOOLS,
                route_tools=ROUTE_TOOLS,
                discovery_tools=DISCOVERY_TOOLS,
                gradient_classes=GRADIENT_CLASS_KEYS,
                statuses=PROFILE_STATUSES,
                tool_count=tool_count,
                llm_guidance=(
                    "Points are [lat, lng]. "
                    "Use topo_profile_two_points for a straight line between two points. "
                    "Use topo_profile_path for a multi-waypoint route (samples are spaced "
                    "evenly along the whole path). "
                    "Use topo_sample_path to preview sample coordinates without a lookup. "
                    "Use topo_reduce_profile to compute statistics for an existing profile. "
                    "The topo_route_* tools keep a single interactive route session."
                ),
                message=SuccessMessages.CAPABILITIES.format(tool_count),
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"topo_capabilities failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def topo_gradient_legend(output_mode: str = "json") -> str:
        """List gradient classes with thresholds and display colours.

        A segment belongs to the first band whose threshold its gradient
        strictly exceeds, steepest climb first.

        Args:
            output_mode: "json" for structured data, "text" for human-readable summary

        Returns:
            Gradient bands
        """
        try:
            bands = [
                GradientBandInfo(key=c.key, label=c.label, above_percent=c.above, color=c.color)
                for c in GRADIENT_CLASSES
            ]
            response = GradientLegendResponse(
                bands=bands,
                message=SuccessMessages.LEGEND.format(len(bands)),
            )
            return format_response(response, output_mode)

        except Exception as e:
            logger.error(f"topo_gradient_legend failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)
