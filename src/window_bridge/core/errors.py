#!/usr/bin/env python3
"""
Error Types for Window Bridge

Every failure the screenshot pipeline can report is one of the classes below.
Each carries a stable ``kind`` string so an automated caller can branch on it
without parsing messages, and keeps the underlying reason text verbatim.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- CaptureFailed("window is minimized")

Expected output:
- str(error) == "Viewport capture failed: window is minimized"
- error.kind == "CaptureFailed"
"""


class ScreenshotError(Exception):
    """Base class for screenshot pipeline failures."""

    kind = "ScreenshotError"
    message = "Screenshot failed"

    def __init__(self, reason: str = ""):
        self.reason = reason
        super().__init__(self.format_message())

    def format_message(self) -> str:
        if self.reason:
            return f"{self.message}: {self.reason}"
        return self.message


class PlatformUnsupported(ScreenshotError):
    """No capture provider exists for the running operating system."""

    kind = "PlatformUnsupported"
    message = "Platform not supported"


class CaptureFailed(ScreenshotError):
    """The platform capture API returned an error or no data."""

    kind = "CaptureFailed"
    message = "Viewport capture failed"


class ResizeFailed(ScreenshotError):
    """Decoding or resampling failed while applying the width ceiling."""

    kind = "ResizeFailed"
    message = "Resize failed"


class EncodeFailed(ScreenshotError):
    """Decoding or re-encoding failed while converting the output format."""

    kind = "EncodeFailed"
    message = "Encoding failed"


class ScreenshotTimeout(ScreenshotError):
    """Raised by callers that put a deadline around the pipeline."""

    kind = "Timeout"
    message = "Timeout exceeded"


class WindowError(RuntimeError):
    """Base class for errors related to window operations."""

    kind = "WindowError"


class WindowNotFoundError(WindowError):
    """Raised when a window identifier does not resolve to an open window."""

    kind = "WindowNotFound"


class WindowOperationError(WindowError):
    """Raised when a window backend call (geometry, resize) fails."""

    kind = "WindowOperationFailed"
