#!/usr/bin/env python3
"""
Constants for Window Bridge

This module defines constants used throughout the window bridge, ensuring
consistent configuration across the capture pipeline, window management and
server layers.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- None (module contains only constants)

Expected output:
- None (module contains only constants)
"""

from typing import Dict, Any, Tuple

# Image settings for capture and transcoding
IMAGE_SETTINGS: Dict[str, Any] = {
    "WORKING_FORMAT": "png",  # Lossless format passed between pipeline stages
    "DEFAULT_FORMAT": "png",  # Output format if none specified
    "DEFAULT_QUALITY": 80,  # JPEG quality if none specified
    "MIN_QUALITY": 0,
    "MAX_QUALITY": 100,
}

# Output formats and their MIME labels
MIME_TYPES: Dict[str, str] = {
    "png": "image/png",
    "jpeg": "image/jpeg",
}

# Pillow encoder names for each output format
PIL_FORMATS: Dict[str, str] = {
    "png": "PNG",
    "jpeg": "JPEG",
}

SUPPORTED_FORMATS: Tuple[str, ...] = tuple(MIME_TYPES.keys())

# Environment variables
ENV_MAX_WIDTH = "WINDOW_BRIDGE_SCREENSHOT_MAX_WIDTH"
ENV_SCREENSHOT_TIMEOUT = "WINDOW_BRIDGE_SCREENSHOT_TIMEOUT"
ENV_HOST = "WINDOW_BRIDGE_HOST"
ENV_PORT = "WINDOW_BRIDGE_PORT"
ENV_LOG_LEVEL = "WINDOW_BRIDGE_LOG_LEVEL"
ENV_APP_TITLE = "WINDOW_BRIDGE_APP_TITLE"
ENV_SCALE_FACTOR = "WINDOW_BRIDGE_SCALE_FACTOR"

# Largest value accepted for a width ceiling (unsigned 32-bit)
MAX_WIDTH_LIMIT = 2**32 - 1

DEFAULT_SCREENSHOT_TIMEOUT = 30.0  # seconds

# Window resolution
DEFAULT_WINDOW_LABEL = "main"

# Platforms with a capture provider (values of platform.system())
SUPPORTED_PLATFORMS: Tuple[str, ...] = ("Linux", "Windows", "Darwin")

# Port discovery for running several instances side by side
DISCOVERY_SETTINGS: Dict[str, Any] = {
    "BIND_ADDRESS": "127.0.0.1",
    "BASE_PORT": 9223,
    "MAX_ATTEMPTS": 100,
}

# Logging settings
LOG_MAX_STR_LEN: int = 100  # Maximum string length for truncated logging
LOG_FILE = "logs/window_bridge.log"

VERSION = "0.3.0"
