#!/usr/bin/env python3
"""
Window Resolution for Window Bridge

This module finds the desktop application's windows and wraps them in a small
handle type the capture and resize code work against. Native windows come from
PyWinCtl, which covers Windows, macOS and X11 with one API. The backend is
imported on first use so that importing this module never touches the display.

Windows belonging to the application are those whose title contains the
configured application title (all titled windows when none is configured).
The first of them is the primary window and answers to the label "main".

Third-party package documentation:
- PyWinCtl: https://github.com/Kalmat/PyWinCtl

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- resolve_window(None)
- resolve_window("window-48234511")

Expected output:
- WindowHandle for the primary window
- WindowHandle whose native handle is 48234511, or WindowNotFoundError
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from loguru import logger

from window_bridge.core.config import ServerConfig
from window_bridge.core.constants import DEFAULT_WINDOW_LABEL
from window_bridge.core.errors import WindowNotFoundError, WindowOperationError


def _load_backend() -> Any:
    import pywinctl
    return pywinctl


def _native_flag(native: Any, name: str, default: bool) -> bool:
    """Read a boolean that backends expose either as a property or a method."""
    value = getattr(native, name, None)
    if value is None:
        return default
    if callable(value):
        value = value()
    return bool(value)


def _native_handle(native: Any) -> Optional[str]:
    get_handle = getattr(native, "getHandle", None)
    if callable(get_handle):
        try:
            return str(get_handle())
        except Exception as e:
            logger.debug(f"Could not read native window handle: {e}")
    return None


@dataclass
class WindowHandle:
    """A resolved application window."""

    label: str
    native: Any
    scale_factor: float = 1.0

    @property
    def title(self) -> str:
        return (getattr(self.native, "title", "") or "").strip()

    @property
    def handle(self) -> Optional[str]:
        return _native_handle(self.native)

    def viewport(self) -> Dict[str, int]:
        """
        Return the client-area rectangle in screen coordinates.

        The client area excludes the title bar and borders drawn by the OS.

        Raises:
            WindowOperationError: If the backend cannot report geometry
        """
        try:
            frame = self.native.getClientFrame()
            left, top, right, bottom = (int(v) for v in frame)
        except Exception as e:
            raise WindowOperationError(f"Failed to read viewport of window '{self.label}': {e}") from e

        return {
            "left": left,
            "top": top,
            "width": right - left,
            "height": bottom - top,
        }

    def _frame_padding(self) -> Tuple[int, int]:
        """Width and height the OS frame adds around the client area."""
        outer_width = getattr(self.native, "width", None)
        outer_height = getattr(self.native, "height", None)
        if outer_width is None or outer_height is None:
            return 0, 0
        try:
            viewport = self.viewport()
        except WindowOperationError as e:
            logger.debug(f"No client frame for '{self.label}', resizing outer frame: {e}")
            return 0, 0
        return max(0, int(outer_width) - viewport["width"]), max(0, int(outer_height) - viewport["height"])

    def is_resizable(self) -> bool:
        return _native_flag(self.native, "isResizable", True)

    def set_size(self, width: int, height: int, logical: bool = True) -> None:
        """
        Resize the window so its client area (the viewport) has the given size.

        The backend sizes the outer frame, so the current frame-to-client
        difference is added before resizing.

        Args:
            width: Target viewport width
            height: Target viewport height
            logical: Treat width/height as logical pixels; physical pixels are
                divided by the window's scale factor first

        Raises:
            WindowOperationError: If the backend rejects the new size
        """
        if not logical:
            width = max(1, round(width / self.scale_factor))
            height = max(1, round(height / self.scale_factor))

        extra_width, extra_height = self._frame_padding()
        applied = self.native.resizeTo(width + extra_width, height + extra_height)
        if applied is False:
            raise WindowOperationError(f"window manager did not apply size {width}x{height}")

    def info(self) -> Dict[str, Any]:
        """Describe the window for MCP and CLI output."""
        info: Dict[str, Any] = {
            "label": self.label,
            "title": self.title,
            "handle": self.handle,
            "isVisible": _native_flag(self.native, "isVisible", True),
            "isActive": _native_flag(self.native, "isActive", False),
            "isMinimized": _native_flag(self.native, "isMinimized", False),
            "isMaximized": _native_flag(self.native, "isMaximized", False),
            "isResizable": self.is_resizable(),
            "scaleFactor": self.scale_factor,
        }
        try:
            info["viewport"] = self.viewport()
        except WindowOperationError as e:
            logger.warning(str(e))
            info["viewport"] = None
        return info


def _application_windows(app_title: Optional[str]) -> List[Any]:
    backend = _load_backend()

    if app_title:
        natives = backend.getWindowsWithTitle(app_title, condition=backend.Re.CONTAINS)
    else:
        natives = backend.getAllWindows()

    return [native for native in natives if (getattr(native, "title", "") or "").strip()]


def list_windows(app_title: Optional[str] = None, config: Optional[ServerConfig] = None) -> List[WindowHandle]:
    """
    List the application's windows, primary window first.

    Args:
        app_title: Title fragment identifying the application; defaults to the
            configured WINDOW_BRIDGE_APP_TITLE
        config: Server configuration (read from the environment if omitted)

    Returns:
        List[WindowHandle]: Handles labelled "main", "window-<handle>", ...
    """
    config = config or ServerConfig.from_env()
    if app_title is None:
        app_title = config.app_title

    handles = []
    for index, native in enumerate(_application_windows(app_title)):
        if index == 0:
            label = DEFAULT_WINDOW_LABEL
        else:
            label = f"window-{_native_handle(native) or index}"
        handles.append(WindowHandle(label=label, native=native, scale_factor=config.scale_factor))

    logger.debug(f"Found {len(handles)} application window(s) for title filter {app_title!r}")
    return handles


def resolve_window(
    window_id: Optional[str] = None,
    app_title: Optional[str] = None,
    config: Optional[ServerConfig] = None
) -> WindowHandle:
    """
    Resolve a window identifier to a handle.

    Args:
        window_id: Label, exact title or native handle; None means "main"

    Raises:
        WindowNotFoundError: If nothing matches
    """
    windows = list_windows(app_title=app_title, config=config)
    if not windows:
        raise WindowNotFoundError("No application windows found")

    wanted = window_id or DEFAULT_WINDOW_LABEL
    for window in windows:
        if wanted in (window.label, window.title, window.handle):
            return window

    available = ", ".join(window.label for window in windows)
    raise WindowNotFoundError(f"Window not found: {wanted} (available: {available})")


def get_window_info(window_id: Optional[str] = None, config: Optional[ServerConfig] = None) -> Dict[str, Any]:
    """Return the info dictionary of one window."""
    return resolve_window(window_id, config=config).info()
