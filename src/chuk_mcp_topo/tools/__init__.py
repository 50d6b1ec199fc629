"""MCP tool groups for chuk-mcp-topo."""
