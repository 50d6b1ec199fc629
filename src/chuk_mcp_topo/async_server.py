#!/usr/bin/env python3
"""
Async Topo MCP Server using chuk-mcp-server

Path sampling, elevation profile extraction, and gradient analysis.
Samples lines and waypoint paths, fetches elevations from an
Open-Elevation compatible lookup service, and reduces them to
distance, ascent, descent, and gradient classes.
"""

import logging

from chuk_mcp_server import ChukMCPServer

from .constants import ServerConfig
from .core.profile_manager import ProfileManager
from .core.route_state import RouteSession
from .tools.discovery import register_discovery_tools
from .tools.profile import register_profile_tools
from .tools.route import register_route_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer(ServerConfig.NAME)

# Profile manager and the single interactive route session
manager = ProfileManager()
session = RouteSession(manager)

# Register all tool modules
register_discovery_tools(mcp, manager, session)
register_profile_tools(mcp, manager)
register_route_tools(mcp, session)

# Run the server
if __name__ == "__main__":
    logger.info("Starting Topo MCP Server...")
    logger.info(f"Elevation lookup: {manager.lookup.api_url}")
    mcp.run(stdio=True)
