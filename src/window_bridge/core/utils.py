#!/usr/bin/env python3
"""
Utility Functions for Window Bridge

This module provides common utility functions used by other core modules.
It includes functions for parameter validation, error responses, file
operations and log-friendly value truncation.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- validate_quality(120, 0, 100)
- normalize_image_format("JPG")

Expected output:
- 100
- "jpeg"
"""

import os
import time
from typing import Any, Dict, Optional, Tuple

from loguru import logger

from window_bridge.core.constants import LOG_MAX_STR_LEN, SUPPORTED_FORMATS

# Accepted spellings for output formats
FORMAT_ALIASES: Dict[str, str] = {
    "png": "png",
    "jpeg": "jpeg",
    "jpg": "jpeg",
}


def validate_quality(quality: int, min_quality: int, max_quality: int) -> int:
    """
    Validates and clamps quality value to acceptable range.

    Args:
        quality: Requested quality
        min_quality: Minimum acceptable quality
        max_quality: Maximum acceptable quality

    Returns:
        int: Clamped quality value
    """
    original_quality = quality
    quality = max(min_quality, min(quality, max_quality))

    if quality != original_quality:
        logger.info(
            f"Adjusted quality from {original_quality} to {quality} "
            f"(min={min_quality}, max={max_quality})"
        )

    return quality


def normalize_image_format(image_format: Optional[str]) -> Optional[str]:
    """
    Map a user-supplied format name to "png" or "jpeg".

    Returns:
        Optional[str]: Canonical format, or None if unsupported
    """
    if image_format is None:
        return None
    return FORMAT_ALIASES.get(image_format.strip().lower())


def validate_max_width(max_width: Optional[int]) -> Tuple[bool, Optional[str]]:
    """
    Validates an explicit width ceiling.

    Returns:
        Tuple[bool, Optional[str]]: (is_valid, error_message)
    """
    if max_width is None:
        return True, None

    if isinstance(max_width, bool) or not isinstance(max_width, int):
        return False, f"max_width must be an integer, got {type(max_width).__name__}"

    if max_width < 1:
        return False, f"max_width must be a positive integer, got {max_width}"

    return True, None


def supported_formats_text() -> str:
    return ", ".join(SUPPORTED_FORMATS)


def generate_filename(prefix: str = "screenshot", extension: str = "png") -> str:
    """
    Generates a unique filename with timestamp.

    Args:
        prefix: Filename prefix
        extension: File extension without dot

    Returns:
        str: Generated filename
    """
    timestamp = int(time.time() * 1000)
    return f"{prefix}_{timestamp}.{extension}"


def ensure_directory(directory: str) -> bool:
    """
    Ensures directory exists, creating it if necessary.

    Args:
        directory: Directory path

    Returns:
        bool: True if successful, False otherwise
    """
    try:
        os.makedirs(directory, exist_ok=True)
        return True
    except OSError as e:
        logger.error(f"Failed to create directory {directory}: {str(e)}")
        return False


def format_error_response(error: Any, include_kind: bool = True) -> Dict[str, Any]:
    """
    Creates a standardized error response.

    Args:
        error: Exception or error message
        include_kind: Whether to add the error kind for typed errors

    Returns:
        Dict[str, Any]: Error response dictionary
    """
    response: Dict[str, Any] = {"success": False, "error": str(error)}

    if include_kind and isinstance(error, Exception):
        response["errorKind"] = getattr(error, "kind", type(error).__name__)

    return response


def truncate_large_value(value: Any, max_str_len: int = LOG_MAX_STR_LEN) -> Any:
    """
    Truncates large string values for logging purposes.

    Args:
        value: The value to truncate
        max_str_len: Maximum string length to allow

    Returns:
        Truncated string, or the value unchanged if it is not a long string
    """
    if isinstance(value, str) and len(value) > max_str_len:
        return f"{value[:max_str_len]}... [truncated, {len(value)} chars total]"
    return value
