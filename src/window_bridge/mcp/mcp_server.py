#!/usr/bin/env python3
"""
MCP Server Entry Point for Window Bridge

This is the main entry point for the window bridge MCP server, designed to be
directly referenced in the .mcp.json configuration.

MCP clients speak JSON-RPC over stdout, so all logging goes to stderr and a
rotating log file, never to stdout.

This module is part of the Integration Layer and connects the MCP functionality
to the application core.
"""

import argparse
import json
import os
import sys
from typing import Any, Dict, Optional

from loguru import logger

from window_bridge.core.config import ServerConfig, load_environment
from window_bridge.core.constants import LOG_FILE, VERSION
from window_bridge.core.discovery import find_available_port
from window_bridge.core.utils import ensure_directory
from window_bridge.mcp.mcp_tools import create_mcp_server

NETWORK_TRANSPORTS = ("sse", "streamable-http")


def ensure_log_directory() -> None:
    """Ensure log directory exists"""
    ensure_directory(os.path.dirname(LOG_FILE))


def configure_logging(level: str = "INFO") -> None:
    """
    Configure logging with proper format and level.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    ensure_log_directory()

    # Remove default handlers
    logger.remove()

    logger.add(
        LOG_FILE,
        rotation="10 MB",
        retention="1 week",
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} | {message}"
    )

    logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> | {message}",
        level=level,
        colorize=True
    )


def get_server_info() -> Dict[str, Any]:
    """
    Get server information.

    Returns:
        Dict[str, Any]: Server information
    """
    return {
        "name": "Window Bridge MCP Server",
        "version": VERSION,
        "description": "Window screenshots and window management for MCP agents",
        "tools": ["screenshot", "manage_window"],
    }


def health_check() -> Dict[str, Any]:
    """
    Perform a health check.

    Returns:
        Dict[str, Any]: Health check results
    """
    from window_bridge.core.errors import PlatformUnsupported
    from window_bridge.core.providers import get_capture_provider, get_system_info

    result: Dict[str, Any] = {"system": get_system_info()}

    try:
        get_capture_provider()
    except PlatformUnsupported as e:
        result.update({"status": "unhealthy", "error": str(e)})
        return result

    try:
        import pywinctl
        result["pywinctl_version"] = getattr(pywinctl, "__version__", "unknown")
    except Exception as e:
        result.update({"status": "degraded", "error": f"Window backend unavailable: {e}"})
        return result

    result["status"] = "healthy"
    return result


def resolve_port(transport: str, host: str, port: int, discover: bool = True) -> int:
    """Pick the port to bind, scanning upwards for network transports."""
    if transport not in NETWORK_TRANSPORTS or not discover:
        return port
    return find_available_port(host, port)


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the MCP server.

    Returns:
        int: Exit code
    """
    load_environment()
    config = ServerConfig.from_env()

    parser = argparse.ArgumentParser(description="Window Bridge MCP Server")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    start_parser = subparsers.add_parser("start", help="Start the MCP server")
    start_parser.add_argument(
        "--transport", choices=("stdio",) + NETWORK_TRANSPORTS, default="stdio",
        help="MCP transport"
    )
    start_parser.add_argument("--host", type=str, default=config.host, help="Host to listen on")
    start_parser.add_argument("--port", type=int, default=config.port, help="Base port to listen on")
    start_parser.add_argument(
        "--no-port-discovery", action="store_true",
        help="Bind exactly --port instead of scanning for a free port"
    )
    start_parser.add_argument("--debug", action="store_true", help="Enable debug mode")

    subparsers.add_parser("health", help="Check server health")
    subparsers.add_parser("info", help="Display server information")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "start":
        log_level = "DEBUG" if args.debug else config.log_level
        configure_logging(log_level)

        port = resolve_port(args.transport, args.host, args.port, discover=not args.no_port_discovery)
        logger.info("Starting MCP server for window tools")
        logger.info(f"Transport: {args.transport}, Host: {args.host}, Port: {port}, Debug: {args.debug}")

        try:
            mcp = create_mcp_server(host=args.host, port=port)
            mcp.run(transport=args.transport)
        except KeyboardInterrupt:
            logger.info("Server stopped by user")
            return 0
        except Exception as e:
            logger.error(f"Server failed to start: {str(e)}")
            logger.exception(e)
            return 1

    elif args.command == "health":
        result = health_check()
        print(json.dumps(result, indent=2))
        return 0 if result["status"] == "healthy" else 1

    elif args.command == "info":
        print(json.dumps(get_server_info(), indent=2))
        return 0

    return 0


if __name__ == "__main__":
    """
    Direct entry point for the window bridge MCP server.
    This file is designed to be referenced in .mcp.json.

    Usage:
      python -m window_bridge.mcp.mcp_server start [--transport sse] [--host HOST] [--port PORT] [--debug]
      python -m window_bridge.mcp.mcp_server health
      python -m window_bridge.mcp.mcp_server info
    """
    sys.exit(main())
