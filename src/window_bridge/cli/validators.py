#!/usr/bin/env python3
"""
Validators for Window Bridge CLI

This module provides Typer callbacks validating CLI inputs: quality, output
format, width ceiling and output path.

This module is part of the Presentation Layer and should only depend on
Core Layer components, not on Integration Layer.

Sample input:
- CLI parameter values

Expected output:
- Validated and processed parameter values
- Friendly error messages
"""

import os
from typing import Optional

import typer
from loguru import logger

from window_bridge.core.constants import IMAGE_SETTINGS
from window_bridge.core.utils import (
    normalize_image_format,
    supported_formats_text,
    validate_max_width,
    validate_quality
)
from window_bridge.cli.formatters import print_error


def validate_quality_option(ctx: typer.Context, value: int) -> int:
    """
    Typer callback for validating quality option.

    Args:
        ctx: Typer context
        value: Quality value from CLI

    Returns:
        int: Quality clamped into 0-100
    """
    return validate_quality(value, IMAGE_SETTINGS["MIN_QUALITY"], IMAGE_SETTINGS["MAX_QUALITY"])


def validate_format_option(ctx: typer.Context, value: str) -> str:
    """
    Typer callback for validating the output format.

    Returns:
        str: "png" or "jpeg"
    """
    image_format = normalize_image_format(value)
    if image_format is None:
        print_error(f"Invalid format: {value}. Must be one of {supported_formats_text()}.")
        raise typer.Exit(1)
    return image_format


def validate_max_width_option(ctx: typer.Context, value: Optional[int]) -> Optional[int]:
    """
    Typer callback for validating the width ceiling.

    Returns:
        Optional[int]: Validated width, or None for the configured default
    """
    is_valid, error = validate_max_width(value)
    if not is_valid:
        print_error(error or "Invalid max width")
        raise typer.Exit(1)
    return value


def validate_output_path(ctx: typer.Context, value: Optional[str]) -> Optional[str]:
    """
    Typer callback for validating an output file path.

    The parent directory is created if needed.
    """
    if value is None:
        return None

    directory = os.path.dirname(value)
    if directory:
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as e:
            logger.error(f"Cannot create output directory {directory}: {e}")
            print_error(f"Cannot create output directory: {directory}. Error: {str(e)}")
            raise typer.Exit(1)

    return value


def validate_json_output(ctx: typer.Context, value: bool) -> bool:
    """
    Typer callback for validating JSON output flag.

    Args:
        ctx: Typer context
        value: JSON output flag from CLI

    Returns:
        bool: Validated JSON output flag
    """
    return value
