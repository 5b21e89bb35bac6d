"""
CLI Layer for Window Bridge

This package contains the CLI (Command Line Interface) layer, providing a rich
interface for human users.

The CLI layer is designed to:
1. Handle user interaction concerns
2. Format outputs for human readability
3. Parse and validate command-line arguments
4. Implement CLI-specific error handling

Usage:
    from window_bridge.cli import app as window_bridge_app

    # Run the CLI app
    window_bridge_app()
"""

# CLI application
from window_bridge.cli.cli import app

# Formatters for rich output
from window_bridge.cli.formatters import (
    print_screenshot_result,
    print_resize_result,
    print_windows_table,
    print_error,
    print_warning,
    print_info,
    print_json,
    print_raw_json,
    create_progress,
    console
)

# CLI validators
from window_bridge.cli.validators import (
    validate_quality_option,
    validate_format_option,
    validate_max_width_option,
    validate_output_path,
    validate_json_output
)

# Response envelope
from window_bridge.cli.schemas import format_cli_response

__all__ = [
    # CLI application
    'app',

    # Formatters
    'print_screenshot_result',
    'print_resize_result',
    'print_windows_table',
    'print_error',
    'print_warning',
    'print_info',
    'print_json',
    'print_raw_json',
    'create_progress',
    'console',

    # Validators
    'validate_quality_option',
    'validate_format_option',
    'validate_max_width_option',
    'validate_output_path',
    'validate_json_output',

    # Schemas
    'format_cli_response'
]
