"""
chuk-mcp-topo: Terrain Elevation Profile MCP Server

Samples straight lines and multi-waypoint paths, fetches elevations from a
remote lookup service, and reduces them to distance, ascent, descent, and
gradient classes.
"""

__version__ = "0.1.0"
