"""
Window Bridge

Lets an MCP-speaking agent inspect and manipulate a desktop application's
windows: capture a viewport screenshot (optionally downscaled and re-encoded)
as a data URL, list and describe windows, and resize them.

This package implements a three-layer architecture:

1. Core Layer: Pure business logic (capture pipeline, window management)
2. Presentation Layer: CLI interface with rich formatting
3. Integration Layer: MCP wrapper for AI agent usage

Usage:
    # Direct API usage (Core Layer)
    import asyncio
    from window_bridge.core import resolve_window, capture_viewport_screenshot
    data_url = asyncio.run(capture_viewport_screenshot(resolve_window(), "jpeg", 80, 1280))

    # CLI usage (Presentation Layer)
    # window-bridge screenshot --format jpeg --max-width 1280

    # MCP server usage (Integration Layer)
    # python -m window_bridge.mcp.mcp_server start
"""

from window_bridge.core.constants import VERSION

__version__ = VERSION

__all__ = [
    '__version__'
]
