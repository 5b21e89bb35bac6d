#!/usr/bin/env python3
"""
Test doubles shared by the Window Bridge unit tests
"""

import io

from PIL import Image

from window_bridge.core.errors import CaptureFailed
from window_bridge.core.providers import CaptureProvider, RawCapture


def make_png(width, height, mode="RGB", color="red"):
    """Encode a solid-colour image as PNG bytes."""
    buffer = io.BytesIO()
    Image.new(mode, (width, height), color=color).save(buffer, format="PNG")
    return buffer.getvalue()


class FakeNativeWindow:
    """Stands in for a PyWinCtl window object."""

    def __init__(self, title, handle, frame=(100, 80, 1380, 800), resizable=True, resize_ok=True, outer_size=None):
        self.title = title
        self._handle = handle
        self.frame = frame
        self.isResizable = resizable
        self.isVisible = True
        self.isActive = False
        self.isMinimized = False
        self.isMaximized = False
        self.resize_ok = resize_ok
        self.resize_calls = []
        if outer_size is not None:
            self.width, self.height = outer_size

    def getHandle(self):
        return self._handle

    def getClientFrame(self):
        if self.frame is None:
            raise RuntimeError("window has been destroyed")
        return self.frame

    def resizeTo(self, width, height):
        self.resize_calls.append((width, height))
        return self.resize_ok


class FakeProvider(CaptureProvider):
    """Returns fixed PNG bytes and counts captures."""

    platform_name = "Test"

    def __init__(self, data):
        self.data = data
        self.calls = 0

    async def capture_viewport(self, window):
        self.calls += 1
        img = Image.open(io.BytesIO(self.data))
        return RawCapture(data=self.data, width=img.width, height=img.height)


class FailingProvider(CaptureProvider):
    """Always fails the capture stage."""

    async def capture_viewport(self, window):
        raise CaptureFailed("window is minimized")
