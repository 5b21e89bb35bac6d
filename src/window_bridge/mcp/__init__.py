"""
MCP Layer for Window Bridge

This package contains the MCP (Model Context Protocol) layer, providing
wrappers for the core functionality to be used by AI agents.

The MCP layer is designed to:
1. Expose core functions as MCP tools
2. Handle MCP-specific protocol requirements
3. Manage server startup and configuration
4. Implement MCP-compatible error handling

Usage:
    # Start the MCP server
    python -m window_bridge.mcp.mcp_server start

    # Use the MCP server in Python
    from window_bridge.mcp import create_mcp_server
    mcp = create_mcp_server()
    mcp.run()
"""

# MCP server creation
from window_bridge.mcp.mcp_tools import create_mcp_server

# MCP server entry point
from window_bridge.mcp.mcp_server import (
    main,
    health_check,
    get_server_info,
    configure_logging
)

# MCP wrappers
from window_bridge.mcp.wrappers import (
    screenshot_wrapper,
    list_windows_wrapper,
    window_info_wrapper,
    resize_window_wrapper,
    manage_window_wrapper,
    format_mcp_response
)

__all__ = [
    # MCP server
    'create_mcp_server',
    'main',
    'health_check',
    'get_server_info',
    'configure_logging',

    # MCP wrappers
    'screenshot_wrapper',
    'list_windows_wrapper',
    'window_info_wrapper',
    'resize_window_wrapper',
    'manage_window_wrapper',
    'format_mcp_response'
]

# Example configuration for .mcp.json
EXAMPLE_MCP_CONFIG = """
{
  "mcpServers": {
    "window-bridge": {
      "command": "python",
      "args": [
        "-m",
        "window_bridge.mcp.mcp_server",
        "start"
      ],
      "env": {
        "WINDOW_BRIDGE_APP_TITLE": "My App",
        "WINDOW_BRIDGE_SCREENSHOT_MAX_WIDTH": "1280"
      }
    }
  }
}
"""
