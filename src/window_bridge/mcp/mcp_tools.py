#!/usr/bin/env python3
"""
MCP Tools for Window Bridge

This module provides MCP tool definitions for window screenshots and window
management to be used by AI agents.

This module is part of the Integration Layer and can depend on both
Core Layer and Presentation Layer components.

Sample input:
- MCP server configuration

Expected output:
- Configured MCP server with registered tools
"""

from typing import Any, Dict, Optional

from loguru import logger
from mcp.server.fastmcp import FastMCP

from window_bridge.core.constants import DISCOVERY_SETTINGS, IMAGE_SETTINGS
from window_bridge.mcp.wrappers import manage_window_wrapper, screenshot_wrapper


def create_mcp_server(
    name: str = "Window Bridge",
    host: str = DISCOVERY_SETTINGS["BIND_ADDRESS"],
    port: int = DISCOVERY_SETTINGS["BASE_PORT"]
) -> FastMCP:
    """
    Create and configure MCP server with window tools

    Args:
        name: Name for the MCP server
        host: Host to listen on (network transports only)
        port: Port to listen on (network transports only)

    Returns:
        FastMCP: Configured MCP server instance
    """
    mcp = FastMCP(name, host=host, port=port)
    logger.info(f"Initialized FastMCP server: {name} on {host}:{port}")

    register_screenshot_tool(mcp)
    register_manage_window_tool(mcp)

    return mcp


def register_screenshot_tool(mcp: FastMCP) -> None:
    """
    Register screenshot tool with the MCP server

    Args:
        mcp: MCP server instance
    """
    @mcp.tool()
    async def screenshot(
        window_id: Optional[str] = None,
        format: str = IMAGE_SETTINGS["DEFAULT_FORMAT"],
        quality: int = IMAGE_SETTINGS["DEFAULT_QUALITY"],
        max_width: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Captures the viewport of an application window and returns it as a base64 data URL.

        Args:
            window_id (str, optional): Window label, title or handle. Defaults to "main".
            format (str, optional): "png" (lossless) or "jpeg". Defaults to "png".
            quality (int, optional): JPEG quality (0-100). Ignored for PNG. Defaults to 80.
            max_width (int, optional): Maximum width in pixels. Larger screenshots are scaled
                down, preserving aspect ratio. Defaults to WINDOW_BRIDGE_SCREENSHOT_MAX_WIDTH if set.

        Returns:
            dict: MCP-compliant response containing:
                - dataUrl: "data:image/png;base64,..." or "data:image/jpeg;base64,..."
                - mimeType: MIME type of the image
                - windowLabel: Label of the captured window
                On error:
                - error: Error message as a string.
                - errorKind: PlatformUnsupported, CaptureFailed, ResizeFailed, EncodeFailed,
                  Timeout or WindowNotFound.
                - success: Boolean indicating success/failure.
        """
        logger.info(f"Screenshot requested with window_id={window_id}, format={format}, quality={quality}, max_width={max_width}")
        return await screenshot_wrapper(window_id, format, quality, max_width)


def register_manage_window_tool(mcp: FastMCP) -> None:
    """
    Register manage_window tool with the MCP server

    Args:
        mcp: MCP server instance
    """
    @mcp.tool()
    def manage_window(
        action: str,
        window_id: Optional[str] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        logical: bool = True
    ) -> Dict[str, Any]:
        """
        Lists application windows, describes one window, or resizes a window.

        Args:
            action (str): "list" all windows, get "info" for one window, or "resize" a window.
            window_id (str, optional): Window label to target. Defaults to "main".
            width (int, optional): Width in pixels (required for "resize").
            height (int, optional): Height in pixels (required for "resize").
            logical (bool, optional): Use logical (true) or physical (false) pixels. Only for "resize".

        Returns:
            dict: MCP-compliant response. A resize returns success, windowLabel, width, height,
                logical and error; a fixed-size window gives success=false with an error message.
        """
        logger.info(f"Window action requested: action={action}, window_id={window_id}")
        return manage_window_wrapper(action, window_id, width, height, logical)
