#!/usr/bin/env python3
"""
Window Resize

Sets a window's size and reports the outcome as a ``ResizeWindowResult``.
Fixed-size windows and window manager refusals are expected outcomes, so they
come back as results with ``success=False`` instead of exceptions.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- resize_window(<WindowHandle "main">, 1024, 768)

Expected output:
- ResizeWindowResult(success=True, window_label="main", width=1024, height=768, logical=True)
"""

from typing import Optional

from loguru import logger

from window_bridge.core.models import ResizeWindowResult
from window_bridge.core.windows import WindowHandle


def resize_window(window: WindowHandle, width: int, height: int, logical: bool = True) -> ResizeWindowResult:
    """
    Resize a window to the given dimensions.

    Args:
        window: Window to resize
        width: Target width in pixels
        height: Target height in pixels
        logical: Use logical (True) or physical (False) pixels

    Returns:
        ResizeWindowResult: Outcome, with error set when success is False
    """
    unit = "logical" if logical else "physical"
    logger.info(f"Resizing window '{window.label}' to {width}x{height} ({unit} pixels)")

    def result(success: bool, error: Optional[str] = None) -> ResizeWindowResult:
        return ResizeWindowResult(
            success=success,
            window_label=window.label,
            width=width,
            height=height,
            logical=logical,
            error=error,
        )

    try:
        resizable = window.is_resizable()
    except Exception as e:
        logger.debug(f"Could not query resizability of '{window.label}', assuming resizable: {e}")
        resizable = True

    if not resizable:
        logger.warning(f"Window '{window.label}' is not resizable")
        return result(False, "Window is not resizable")

    try:
        window.set_size(width, height, logical=logical)
    except Exception as e:
        logger.error(f"Failed to resize window '{window.label}': {e}")
        return result(False, f"Failed to resize window: {e}")

    return result(True)
