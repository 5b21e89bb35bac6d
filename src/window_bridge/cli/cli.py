#!/usr/bin/env python3
"""
Command Line Interface for Window Bridge

This module provides a CLI for window screenshots and window management using
Typer and Rich.

This module is part of the Presentation Layer and should only depend on
Core Layer components, not on Integration Layer.

Sample input:
- CLI commands with options

Expected output:
- Formatted console output of operation results
- Screenshot files saved to disk
- Structured JSON output for machine consumption
"""

import asyncio
import os
import sys
from typing import Any, Dict, Optional

import typer
from loguru import logger

from window_bridge.core.capture import ScreenshotPipeline, decode_data_url
from window_bridge.core.config import ScreenshotConfig, ServerConfig, load_environment
from window_bridge.core.constants import ENV_MAX_WIDTH, IMAGE_SETTINGS, VERSION
from window_bridge.core.discovery import find_available_port
from window_bridge.core.errors import WindowError
from window_bridge.core.image_processing import image_size
from window_bridge.core.utils import ensure_directory, generate_filename
from window_bridge.core.window_resize import resize_window
from window_bridge.core.windows import get_window_info, list_windows, resolve_window
from window_bridge.cli.formatters import (
    create_progress,
    print_error,
    print_info,
    print_json,
    print_raw_json,
    print_resize_result,
    print_screenshot_result,
    print_windows_table
)
from window_bridge.cli.schemas import format_cli_response
from window_bridge.cli.validators import (
    validate_format_option,
    validate_json_output,
    validate_max_width_option,
    validate_output_path,
    validate_quality_option
)


app = typer.Typer(
    help="Window Bridge - screenshots and window management for desktop apps",
    rich_markup_mode="rich",
    add_completion=False
)

tools_app = typer.Typer(help="Utility tools", rich_markup_mode="rich")
app.add_typer(tools_app, name="tools", help="Utility tools")


def _fail(ctx: typer.Context, error: Exception, prefix: str) -> None:
    """Report an error in the active output mode and exit with status 1."""
    logger.error(f"{prefix}: {error}")
    if ctx.obj.get("json_output", False):
        response = format_cli_response(False, error=str(error), error_kind=getattr(error, "kind", None))
        print_raw_json(response)
    else:
        print_error(f"{prefix}: {error}")
    sys.exit(1)


@app.callback()
def main(
    ctx: typer.Context,
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output results as JSON",
        callback=validate_json_output
    ),
):
    """
    Window Bridge - captures and resizes application windows

    Set WINDOW_BRIDGE_APP_TITLE to the title of the application to control.
    """
    load_environment()
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json_output


@app.command("screenshot")
def screenshot_command(
    ctx: typer.Context,
    window: Optional[str] = typer.Option(
        None,
        "--window", "-w",
        help="Window label, title or handle (defaults to 'main')"
    ),
    image_format: str = typer.Option(
        IMAGE_SETTINGS["DEFAULT_FORMAT"],
        "--format", "-f",
        help="Output format: png or jpeg",
        callback=validate_format_option
    ),
    quality: int = typer.Option(
        IMAGE_SETTINGS["DEFAULT_QUALITY"],
        "--quality", "-q",
        help="JPEG quality (0-100), ignored for png",
        callback=validate_quality_option
    ),
    max_width: Optional[int] = typer.Option(
        None,
        "--max-width",
        help=f"Maximum width in pixels (defaults to {ENV_MAX_WIDTH})",
        callback=validate_max_width_option
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output", "-o",
        help="Output file path. If not provided, saves to the screenshots directory.",
        callback=validate_output_path
    )
):
    """
    Capture the viewport of an application window.
    """
    json_output = ctx.obj.get("json_output", False)

    try:
        target = resolve_window(window)
        pipeline = ScreenshotPipeline(config=ScreenshotConfig.from_env())

        if json_output:
            data_url = asyncio.run(pipeline.capture_and_package(target, image_format, quality, max_width))
        else:
            with create_progress() as progress:
                progress.add_task(f"Capturing window '{target.label}'...", total=None)
                data_url = asyncio.run(pipeline.capture_and_package(target, image_format, quality, max_width))
    except Exception as e:
        _fail(ctx, e, "Screenshot failed")

    mime_type, data = decode_data_url(data_url)
    path = output or os.path.join("screenshots", generate_filename(extension=image_format))
    directory = os.path.dirname(path) or "."
    if not ensure_directory(directory):
        _fail(ctx, OSError(f"Cannot create output directory: {directory}"), "Screenshot failed")
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        _fail(ctx, e, "Failed to save screenshot")

    width, height = image_size(data)
    result: Dict[str, Any] = {
        "file": path,
        "mimeType": mime_type,
        "windowLabel": target.label,
        "width": width,
        "height": height,
        "bytes": len(data),
    }
    logger.info(f"Screenshot saved to {path}")

    if json_output:
        print_raw_json(format_cli_response(True, data=result))
    else:
        print_screenshot_result(result)


@app.command("resize")
def resize_command(
    ctx: typer.Context,
    width: int = typer.Argument(..., min=1, help="Width in pixels"),
    height: int = typer.Argument(..., min=1, help="Height in pixels"),
    window: Optional[str] = typer.Option(
        None,
        "--window", "-w",
        help="Window label, title or handle (defaults to 'main')"
    ),
    physical: bool = typer.Option(
        False,
        "--physical",
        help="Interpret width and height as physical instead of logical pixels"
    )
):
    """
    Resize an application window.
    """
    json_output = ctx.obj.get("json_output", False)

    try:
        target = resolve_window(window)
    except Exception as e:
        _fail(ctx, e, "Resize failed")

    result = resize_window(target, width, height, logical=not physical).model_dump(by_alias=True)

    if json_output:
        print_raw_json(result)
    else:
        print_resize_result(result)

    if not result["success"]:
        sys.exit(1)


@tools_app.command("windows")
def windows_command(ctx: typer.Context):
    """
    List the application's windows.
    """
    try:
        windows = [window.info() for window in list_windows()]
    except Exception as e:
        _fail(ctx, e, "Failed to list windows")

    if ctx.obj.get("json_output", False):
        print_raw_json(format_cli_response(True, data={"windows": windows, "totalCount": len(windows)}))
    else:
        print_windows_table(windows)


@tools_app.command("info")
def info_command(
    ctx: typer.Context,
    window: Optional[str] = typer.Argument(None, help="Window label, title or handle")
):
    """
    Show details of one window.
    """
    try:
        info = get_window_info(window)
    except WindowError as e:
        _fail(ctx, e, "Failed to get window info")

    if ctx.obj.get("json_output", False):
        print_raw_json(format_cli_response(True, data={"window": info}))
    else:
        print_json(info, title=f"Window '{info['label']}'")


@tools_app.command("port")
def port_command(
    ctx: typer.Context,
    host: Optional[str] = typer.Option(None, "--host", help="Bind address to probe"),
    base_port: Optional[int] = typer.Option(None, "--base-port", help="First port to try")
):
    """
    Find the first free port for a new server instance.
    """
    config = ServerConfig.from_env()
    host = host or config.host
    base_port = base_port or config.port
    port = find_available_port(host, base_port)

    if ctx.obj.get("json_output", False):
        print_raw_json(format_cli_response(True, data={"host": host, "basePort": base_port, "port": port}))
    else:
        print_info(f"First available port on {host} from {base_port}: {port}", title="Port Discovery")


@tools_app.command("config")
def config_command(ctx: typer.Context):
    """
    Show the configuration resolved from the environment.
    """
    screenshot_config = ScreenshotConfig.from_env()
    server_config = ServerConfig.from_env()
    data = {
        "defaultMaxWidth": screenshot_config.default_max_width,
        "screenshotTimeout": screenshot_config.timeout,
        "host": server_config.host,
        "port": server_config.port,
        "logLevel": server_config.log_level,
        "appTitle": server_config.app_title,
        "scaleFactor": server_config.scale_factor,
    }

    if ctx.obj.get("json_output", False):
        print_raw_json(format_cli_response(True, data=data))
    else:
        print_json(data, title="Configuration")


@tools_app.command("version")
def show_version(ctx: typer.Context):
    """
    Show version information.
    """
    version_info = {
        "name": "Window Bridge",
        "version": VERSION,
        "description": "Window screenshots and window management for MCP agents.",
    }

    if ctx.obj.get("json_output", False):
        print_raw_json(format_cli_response(True, data=version_info))
    else:
        print_info(
            f"Name: {version_info['name']}\n"
            f"Version: {version_info['version']}\n"
            f"Description: {version_info['description']}"
        )


def run() -> None:
    """Console script entry point."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<level>{level}: {message}</level>",
        level="WARNING",
        colorize=True
    )
    app()


if __name__ == "__main__":
    """
    CLI entry point for window bridge.

    Examples:
      python -m window_bridge.cli.cli screenshot --format jpeg --quality 70 --max-width 1280
      python -m window_bridge.cli.cli resize 1024 768 --window main
      python -m window_bridge.cli.cli tools windows
    """
    run()
