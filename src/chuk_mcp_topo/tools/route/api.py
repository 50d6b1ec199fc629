"""
Route tools: interactive route selection backed by a single RouteSession.

Mirrors a map UI: clicks place points, the second two-point click or an
explicit analyze fetches the profile, and hover highlights the nearest
profile point.
"""

import logging

from ...constants import SuccessMessages
from ...models.responses import ErrorResponse, format_response
from ..common import parse_point, route_state_response

logger = logging.getLogger(__name__)


def register_route_tools(mcp, session):
    """Register route session tools with the MCP server."""

    @mcp.tool()
    async def topo_route_click(lat: float, lng: float, output_mode: str = "json") -> str:
        """Place a point on the route, as a map click would.

        In two-point mode the first click sets the start and the second sets
        the end and fetches the profile. In multi-point mode each click appends
        a waypoint; call topo_route_analyze when the path is complete.

        Args:
            lat: Latitude of the clicked point
            lng: Longitude of the clicked point
            output_mode: "json" or "text"

        Returns:
            Current route state
        """
        try:
            state = await session.click(parse_point([lat, lng]))
            return format_response(route_state_response(state), output_mode)

        except Exception as e:
            logger.error(f"topo_route_click failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def topo_route_set_mode(mode: str, output_mode: str = "json") -> str:
        """Switch between two-point and multi-point routes. Resets the route.

        Args:
            mode: "two-point" or "multi-point"
            output_mode: "json" or "text"

        Returns:
            Current route state
        """
        try:
            state = session.set_mode(mode)
            message = SuccessMessages.ROUTE_RESET.format(state.mode)
            return format_response(route_state_response(state, message), output_mode)

        except Exception as e:
            logger.error(f"topo_route_set_mode failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def topo_route_reset(output_mode: str = "json") -> str:
        """Clear all points and the profile, keeping the current mode.

        Args:
            output_mode: "json" or "text"

        Returns:
            Current route state
        """
        try:
            state = session.reset()
            message = SuccessMessages.ROUTE_RESET.format(state.mode)
            return format_response(route_state_response(state, message), output_mode)

        except Exception as e:
            logger.error(f"topo_route_reset failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def topo_route_analyze(output_mode: str = "json") -> str:
        """Fetch and reduce the elevation profile for the current route.

        Args:
            output_mode: "json" or "text"

        Returns:
            Current route state with profile points and statistics
        """
        try:
            state = await session.analyze()
            return format_response(route_state_response(state), output_mode)

        except Exception as e:
            logger.error(f"topo_route_analyze failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def topo_route_hover(
        lat: float | None = None,
        lng: float | None = None,
        output_mode: str = "json",
    ) -> str:
        """Highlight the profile point nearest to a location; omit both to clear.

        Args:
            lat: Latitude of the hovered position
            lng: Longitude of the hovered position
            output_mode: "json" or "text"

        Returns:
            Current route state with the highlighted point
        """
        try:
            location = None if lat is None and lng is None else parse_point([lat, lng])
            state = session.hover(location)
            return format_response(route_state_response(state), output_mode)

        except Exception as e:
            logger.error(f"topo_route_hover failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)

    @mcp.tool()
    async def topo_route_state(output_mode: str = "json") -> str:
        """Get the current route state without changing it.

        Args:
            output_mode: "json" or "text"

        Returns:
            Current route state
        """
        try:
            return format_response(route_state_response(session.state), output_mode)

        except Exception as e:
            logger.error(f"topo_route_state failed: {e}")
            return format_response(ErrorResponse(error=str(e)), output_mode)
