#!/usr/bin/env python3
"""
Formatters for Window Bridge CLI

This module provides rich formatting utilities for the CLI presentation layer.
It includes tables, panels, and progress indicators for a better user experience.

This module is part of the Presentation Layer and should only depend on
Core Layer components, not on Integration Layer.

Sample input:
- Screenshot result dictionary
- Window info dictionaries
- Error messages

Expected output:
- Rich formatted tables, panels, and progress indicators
"""

import json
import os
from typing import Any, Dict, List

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text


# Initialize console
console = Console()


# Color scheme
COLORS = {
    "success": "green",
    "error": "red",
    "warning": "yellow",
    "info": "blue",
    "path": "cyan",
    "highlight": "magenta",
    "dim": "grey70",
}


def print_screenshot_result(result: Dict[str, Any]) -> None:
    """
    Format and print screenshot result to the console.

    Args:
        result: Screenshot result dictionary with file, mimeType, width, height
    """
    if "error" in result:
        print_error(result["error"])
        return

    file_path = result.get("file", "Unknown")

    file_info = Text()
    file_info.append("Window: ", style=COLORS["dim"])
    file_info.append(f"{result.get('windowLabel', 'main')}\n", style=COLORS["highlight"])
    file_info.append("Filename: ", style=COLORS["dim"])
    file_info.append(f"{os.path.basename(file_path)}\n", style=COLORS["path"])
    file_info.append("Directory: ", style=COLORS["dim"])
    file_info.append(f"{os.path.dirname(file_path) or '.'}\n", style=COLORS["path"])
    file_info.append("Format: ", style=COLORS["dim"])
    file_info.append(f"{result.get('mimeType', 'unknown')}\n", style=COLORS["info"])

    if "width" in result and "height" in result:
        file_info.append("Dimensions: ", style=COLORS["dim"])
        file_info.append(f"{result['width']}x{result['height']}\n", style=COLORS["info"])

    if "bytes" in result:
        file_info.append("Size: ", style=COLORS["dim"])
        file_info.append(f"{result['bytes'] / 1024:.1f} KB", style=COLORS["info"])

    panel = Panel(
        file_info,
        title="[bold green]Screenshot Captured Successfully",
        border_style=COLORS["success"],
        padding=(1, 2)
    )

    console.print(panel)


def print_resize_result(result: Dict[str, Any]) -> None:
    """
    Format and print a window resize result.

    Args:
        result: ResizeWindowResult dumped with camelCase aliases
    """
    unit = "logical" if result.get("logical", True) else "physical"
    size = f"{result.get('width')}x{result.get('height')} ({unit} pixels)"
    label = result.get("windowLabel", "main")

    if result.get("success"):
        print_info(f"Window '{label}' resized to {size}", title="Window Resized")
    else:
        print_warning(
            f"Window '{label}' was not resized to {size}\n{result.get('error') or 'Unknown error'}",
            title="Resize Failed"
        )


def print_error(message: str, title: str = "Error") -> None:
    """
    Format and print error message to the console.

    Args:
        message: Error message
        title: Panel title
    """
    panel = Panel(
        Text(message, style=COLORS["error"]),
        title=f"[bold {COLORS['error']}]{title}",
        border_style=COLORS["error"],
        padding=(1, 2)
    )

    console.print(panel)


def print_warning(message: str, title: str = "Warning") -> None:
    """
    Format and print warning message to the console.

    Args:
        message: Warning message
        title: Panel title
    """
    panel = Panel(
        Text(message, style=COLORS["warning"]),
        title=f"[bold {COLORS['warning']}]{title}",
        border_style=COLORS["warning"],
        padding=(1, 2)
    )

    console.print(panel)


def print_info(message: str, title: str = "Info") -> None:
    """
    Format and print info message to the console.

    Args:
        message: Info message
        title: Panel title
    """
    panel = Panel(
        Text(message, style=COLORS["info"]),
        title=f"[bold {COLORS['info']}]{title}",
        border_style=COLORS["info"],
        padding=(1, 2)
    )

    console.print(panel)


def print_json(data: Dict[str, Any], title: str = "JSON Output") -> None:
    """
    Format and print JSON data to the console.

    Args:
        data: JSON data
        title: Panel title
    """
    json_str = json.dumps(data, indent=2)
    syntax = Syntax(json_str, "json", theme="monokai", line_numbers=True)

    panel = Panel(
        syntax,
        title=f"[bold {COLORS['info']}]{title}",
        border_style=COLORS["info"],
        padding=(1, 2)
    )

    console.print(panel)


def print_windows_table(windows: List[Dict[str, Any]]) -> None:
    """
    Format and print application windows as a table.

    Args:
        windows: Window info dictionaries
    """
    table = Table(title="Application Windows")

    table.add_column("Label", style=COLORS["highlight"])
    table.add_column("Title", style=COLORS["path"])
    table.add_column("Left", justify="right", style=COLORS["info"])
    table.add_column("Top", justify="right", style=COLORS["info"])
    table.add_column("Width", justify="right", style=COLORS["info"])
    table.add_column("Height", justify="right", style=COLORS["info"])
    table.add_column("Resizable", justify="center")

    for window in windows:
        viewport = window.get("viewport") or {}
        table.add_row(
            window["label"],
            window.get("title", ""),
            str(viewport.get("left", "-")),
            str(viewport.get("top", "-")),
            str(viewport.get("width", "-")),
            str(viewport.get("height", "-")),
            "yes" if window.get("isResizable", True) else "no"
        )

    console.print(table)


def create_progress(description: str = "Processing") -> Progress:
    """
    Create a progress indicator.

    Args:
        description: Progress description

    Returns:
        Progress: Rich progress indicator
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )


def print_raw_json(data: Dict[str, Any]) -> None:
    """
    Print JSON without decoration, for ``--json`` output read by other programs.

    Args:
        data: JSON data
    """
    console.print_json(data=data, highlight=False)
