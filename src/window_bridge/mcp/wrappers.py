#!/usr/bin/env python3
"""
MCP Wrappers for Window Bridge

This module provides MCP-specific wrapper functions for the core window and
screenshot functionality, handling parameter validation and error formatting
specific to MCP. Every wrapper returns a dictionary with a ``success`` flag;
failures carry the original error text and, for typed errors, an
``errorKind`` an agent can branch on.

This module is part of the Integration Layer and can depend on both
Core Layer and Presentation Layer components.

Sample input:
- await screenshot_wrapper(window_id="main", image_format="jpeg", quality=80, max_width=1000)

Expected output:
- {"success": True, "dataUrl": "data:image/jpeg;base64,...", "mimeType": "image/jpeg", "windowLabel": "main"}
"""

import asyncio
from typing import Any, Dict, List, Optional

from loguru import logger
from pydantic import ValidationError

from window_bridge.core.capture import ScreenshotPipeline, mime_type_for
from window_bridge.core.config import ScreenshotConfig
from window_bridge.core.constants import IMAGE_SETTINGS
from window_bridge.core.errors import ScreenshotError, ScreenshotTimeout, WindowError
from window_bridge.core.models import ResizeWindowParams, ScreenshotRequest
from window_bridge.core.utils import (
    format_error_response,
    normalize_image_format,
    supported_formats_text,
    validate_quality
)
from window_bridge.core.window_resize import resize_window
from window_bridge.core.windows import get_window_info, list_windows, resolve_window

WINDOW_ACTIONS = ("list", "info", "resize")


def format_mcp_response(
    success: bool,
    data: Optional[Dict[str, Any]] = None,
    error: Optional[str] = None
) -> Dict[str, Any]:
    """
    Format a response in MCP-compatible format.

    Args:
        success: Whether the operation was successful
        data: Response data (for successful operations)
        error: Error message (for failed operations)

    Returns:
        Dict[str, Any]: MCP-compatible response
    """
    response = {"success": success}

    if success and data is not None:
        response.update(data)
    elif not success and error is not None:
        response["error"] = error

    return response


def _validation_message(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}")
    return "Invalid parameters: " + "; ".join(parts)


async def screenshot_wrapper(
    window_id: Optional[str] = None,
    image_format: str = IMAGE_SETTINGS["DEFAULT_FORMAT"],
    quality: int = IMAGE_SETTINGS["DEFAULT_QUALITY"],
    max_width: Optional[int] = None,
    pipeline: Optional[ScreenshotPipeline] = None,
    timeout: Optional[float] = None
) -> Dict[str, Any]:
    """
    MCP wrapper for window screenshots.

    Args:
        window_id: Window label, title or handle (defaults to "main")
        image_format: "png" or "jpeg" ("jpg" is accepted)
        quality: JPEG quality (0-100), clamped into range
        max_width: Optional width ceiling in pixels
        pipeline: Pipeline to use (a default one is built per call)
        timeout: Deadline in seconds for the whole capture

    Returns:
        Dict[str, Any]: MCP-compatible response
    """
    canonical_format = normalize_image_format(image_format)
    if canonical_format is None:
        return format_mcp_response(
            False,
            error=f"Unsupported format: {image_format!r} (expected one of {supported_formats_text()})"
        )

    quality = validate_quality(quality, IMAGE_SETTINGS["MIN_QUALITY"], IMAGE_SETTINGS["MAX_QUALITY"])

    try:
        request = ScreenshotRequest(
            window_id=window_id,
            format=canonical_format,
            quality=quality,
            max_width=max_width
        )
    except ValidationError as e:
        return format_mcp_response(False, error=_validation_message(e))

    if timeout is None:
        timeout = ScreenshotConfig.from_env().timeout
    pipeline = pipeline or ScreenshotPipeline()

    try:
        window = resolve_window(request.window_id)
        data_url = await asyncio.wait_for(
            pipeline.capture_and_package(window, request.format, request.quality, request.max_width),
            timeout=timeout
        )
    except asyncio.TimeoutError:
        error = ScreenshotTimeout()
        logger.error(f"Screenshot timed out after {timeout}s")
        return format_error_response(error)
    except (ScreenshotError, WindowError) as e:
        logger.error(f"Screenshot failed: {e}")
        return format_error_response(e)
    except Exception as e:
        logger.error(f"Unexpected error during screenshot: {e}")
        return format_error_response(e)

    return format_mcp_response(True, data={
        "dataUrl": data_url,
        "mimeType": mime_type_for(request.format),
        "windowLabel": window.label,
    })


def list_windows_wrapper() -> Dict[str, Any]:
    """
    MCP wrapper for listing the application's windows.

    Returns:
        Dict[str, Any]: MCP-compatible response with window information
    """
    try:
        windows: List[Dict[str, Any]] = [window.info() for window in list_windows()]
    except Exception as e:
        error_message = f"Failed to list windows: {str(e)}"
        logger.error(error_message)
        return format_mcp_response(False, error=error_message)

    return format_mcp_response(True, data={
        "windows": windows,
        "defaultWindow": "main",
        "totalCount": len(windows),
    })


def window_info_wrapper(window_id: Optional[str] = None) -> Dict[str, Any]:
    """MCP wrapper for details of one window."""
    try:
        return format_mcp_response(True, data={"window": get_window_info(window_id)})
    except Exception as e:
        logger.error(f"Failed to get window info: {e}")
        return format_error_response(e)


def resize_window_wrapper(
    width: int,
    height: int,
    window_id: Optional[str] = None,
    logical: bool = True
) -> Dict[str, Any]:
    """
    MCP wrapper for resizing a window.

    The resize result already carries success and error fields and is
    returned as-is; only window lookup failures and invalid sizes are reported
    through the generic error format.
    """
    try:
        params = ResizeWindowParams(width=width, height=height, window_id=window_id, logical=logical)
    except ValidationError as e:
        return format_mcp_response(False, error=_validation_message(e))

    try:
        window = resolve_window(params.window_id)
    except Exception as e:
        logger.error(f"Failed to resize window: {e}")
        return format_error_response(e)

    result = resize_window(window, params.width, params.height, logical=params.logical)
    return result.model_dump(by_alias=True)


def manage_window_wrapper(
    action: str,
    window_id: Optional[str] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    logical: bool = True
) -> Dict[str, Any]:
    """
    Unified window management.

    Actions:
    - list: all application windows
    - info: details of one window
    - resize: resize a window (width and height required)
    """
    if action == "list":
        return list_windows_wrapper()

    if action == "info":
        return window_info_wrapper(window_id)

    if action == "resize":
        if width is None or height is None:
            return format_mcp_response(False, error="width and height are required for resize action")
        return resize_window_wrapper(width, height, window_id, logical)

    return format_mcp_response(
        False,
        error=f"Unknown action: {action!r} (expected one of {', '.join(WINDOW_ACTIONS)})"
    )
