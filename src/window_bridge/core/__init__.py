"""
Core Layer for Window Bridge

This package contains the core business logic: window resolution, viewport
capture, the resize and transcode stages, the screenshot pipeline, window
resizing and port discovery.

The core layer is designed to be:
1. Independent of UI or integration concerns
2. Fully testable in isolation
3. Focused on business logic only

Usage:
    import asyncio
    from window_bridge.core import resolve_window, ScreenshotPipeline
    window = resolve_window("main")
    data_url = asyncio.run(ScreenshotPipeline().capture_and_package(window, "jpeg", 80, 1000))
"""

# Core constants and settings
from window_bridge.core.constants import (
    IMAGE_SETTINGS,
    MIME_TYPES,
    SUPPORTED_FORMATS,
    DEFAULT_WINDOW_LABEL,
    DISCOVERY_SETTINGS
)

# Errors
from window_bridge.core.errors import (
    ScreenshotError,
    PlatformUnsupported,
    CaptureFailed,
    ResizeFailed,
    EncodeFailed,
    ScreenshotTimeout,
    WindowError,
    WindowNotFoundError,
    WindowOperationError
)

# Configuration
from window_bridge.core.config import (
    ScreenshotConfig,
    ServerConfig,
    load_environment,
    resolve_effective_width
)

# Image processing
from window_bridge.core.image_processing import (
    maybe_resize,
    convert_format,
    convert_to_jpeg,
    calculate_resize_dimensions,
    ensure_rgb
)

# Windows and capture
from window_bridge.core.windows import WindowHandle, list_windows, resolve_window, get_window_info
from window_bridge.core.providers import CaptureProvider, MssCaptureProvider, RawCapture, get_capture_provider
from window_bridge.core.capture import (
    ScreenshotPipeline,
    capture_viewport_screenshot,
    package_data_url,
    decode_data_url
)

# Window resize and port discovery
from window_bridge.core.models import ScreenshotRequest, ResizeWindowParams, ResizeWindowResult
from window_bridge.core.window_resize import resize_window
from window_bridge.core.discovery import find_available_port, is_port_available

__all__ = [
    # Constants
    'IMAGE_SETTINGS',
    'MIME_TYPES',
    'SUPPORTED_FORMATS',
    'DEFAULT_WINDOW_LABEL',
    'DISCOVERY_SETTINGS',

    # Errors
    'ScreenshotError',
    'PlatformUnsupported',
    'CaptureFailed',
    'ResizeFailed',
    'EncodeFailed',
    'ScreenshotTimeout',
    'WindowError',
    'WindowNotFoundError',
    'WindowOperationError',

    # Configuration
    'ScreenshotConfig',
    'ServerConfig',
    'load_environment',
    'resolve_effective_width',

    # Image processing
    'maybe_resize',
    'convert_format',
    'convert_to_jpeg',
    'calculate_resize_dimensions',
    'ensure_rgb',

    # Windows and capture
    'WindowHandle',
    'list_windows',
    'resolve_window',
    'get_window_info',
    'CaptureProvider',
    'MssCaptureProvider',
    'RawCapture',
    'get_capture_provider',
    'ScreenshotPipeline',
    'capture_viewport_screenshot',
    'package_data_url',
    'decode_data_url',

    # Window resize and port discovery
    'ScreenshotRequest',
    'ResizeWindowParams',
    'ResizeWindowResult',
    'resize_window',
    'find_available_port',
    'is_port_available'
]
