#!/usr/bin/env python3
"""
Topo MCP Server - Entry Point

This module provides the async MCP server for path sampling, elevation
profiles, and gradient analysis.
Supports both stdio (for Claude Desktop) and HTTP (for API access) transports.
"""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from .constants import EnvVar, ServerConfig, get_http_host, get_http_port

# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

logger = logging.getLogger(__name__)

# Import mcp instance and all registered tools from async server
from .async_server import manager, mcp  # noqa: F401, E402

ENV_HELP = f"""environment:
  {EnvVar.API_URL:<24}elevation lookup endpoint
  {EnvVar.API_TIMEOUT:<24}lookup timeout in seconds
  {EnvVar.TWO_POINT_SAMPLES:<24}default samples for two-point profiles
  {EnvVar.PATH_SAMPLES:<24}default samples for multi-point profiles
  {EnvVar.HTTP_HOST:<24}default HTTP host
  {EnvVar.HTTP_PORT:<24}default HTTP port
  {EnvVar.MCP_STDIO:<24}force stdio when no mode is given
"""


def _use_stdio(mode: str | None) -> bool:
    if mode is not None:
        return mode == "stdio"
    return bool(os.environ.get(EnvVar.MCP_STDIO)) or not sys.stdin.isatty()


def main() -> None:
    """Main entry point for the MCP server."""
    import argparse

    parser = argparse.ArgumentParser(
        description=ServerConfig.DESCRIPTION,
        epilog=ENV_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["stdio", "http"],
        default=None,
        help="Transport mode; auto-detected from MCP_STDIO and stdin when omitted",
    )
    parser.add_argument("--host", default=get_http_host(), help="Host for HTTP mode")
    parser.add_argument("--port", type=int, default=get_http_port(), help="Port for HTTP mode")
    parser.add_argument("--api-url", default=None, help="Override the elevation lookup endpoint")
    parser.add_argument(
        "--api-timeout", type=float, default=None, help="Override the lookup timeout (seconds)"
    )

    args = parser.parse_args()

    if args.api_url:
        manager.lookup.api_url = args.api_url.strip().rstrip("/")
    if args.api_timeout is not None:
        manager.lookup.timeout = args.api_timeout

    detected = "" if args.mode else " (auto-detected)"
    if _use_stdio(args.mode):
        print(f"Topo MCP Server starting in STDIO mode{detected}", file=sys.stderr)
        mcp.run(stdio=True)
    else:
        print(
            f"Topo MCP Server starting in HTTP mode{detected} on {args.host}:{args.port}, "
            f"elevation lookup {manager.lookup.api_url}",
            file=sys.stderr,
        )
        mcp.run(host=args.host, port=args.port, stdio=False)


if __name__ == "__main__":
    main()
