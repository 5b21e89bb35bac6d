#!/usr/bin/env python3
"""
Platform Capture Providers

This module captures the current viewport of a window as lossless PNG bytes.
The pipeline only depends on the ``CaptureProvider`` interface; the concrete
provider is picked by runtime platform detection in ``get_capture_provider``.

The MSS provider grabs the window's client rectangle from the screen, so the
window must be visible and unobscured for the capture to show its contents.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- WindowHandle whose viewport is {"left": 100, "top": 80, "width": 1280, "height": 720}

Expected output:
- RawCapture(data=<PNG bytes>, width=1280, height=720)
"""

import asyncio
import io
import platform
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional, Type

import mss
import mss.exception
from PIL import Image
from loguru import logger

from window_bridge.core.constants import SUPPORTED_PLATFORMS
from window_bridge.core.errors import CaptureFailed, PlatformUnsupported, WindowError
from window_bridge.core.windows import WindowHandle


@dataclass
class RawCapture:
    """Lossless PNG bytes of a captured viewport."""

    data: bytes
    width: int
    height: int


class CaptureProvider(ABC):
    """Captures a window's viewport into a lossless buffer."""

    platform_name = "unknown"

    @abstractmethod
    async def capture_viewport(self, window: WindowHandle) -> RawCapture:
        """
        Capture the window's current viewport.

        Raises:
            CaptureFailed: If the platform API errors or returns no data
        """


class MssCaptureProvider(CaptureProvider):
    """Screen-grab provider built on MSS, used on Linux, Windows and macOS."""

    def __init__(self, platform_name: Optional[str] = None):
        self.platform_name = platform_name or platform.system()

    async def capture_viewport(self, window: WindowHandle) -> RawCapture:
        try:
            region = window.viewport()
        except WindowError as e:
            raise CaptureFailed(str(e)) from e

        if region["width"] < 1 or region["height"] < 1:
            raise CaptureFailed(
                f"Window '{window.label}' has an empty viewport "
                f"({region['width']}x{region['height']}); is it minimized?"
            )

        logger.info(
            f"Capturing viewport of window '{window.label}' at x={region['left']}, y={region['top']}, "
            f"width={region['width']}, height={region['height']}"
        )
        return await asyncio.to_thread(self.grab_region, region)

    def grab_region(self, region: Dict[str, int]) -> RawCapture:
        """Grab a screen rectangle and encode it as PNG."""
        try:
            with mss.mss() as sct:
                sct_img = sct.grab(region)
                img = Image.frombytes("RGB", sct_img.size, sct_img.bgra, "raw", "BGRX")
        except mss.exception.ScreenShotError as e:
            raise CaptureFailed(str(e)) from e

        if img.width < 1 or img.height < 1:
            raise CaptureFailed("Capture returned no image data")

        buffer = io.BytesIO()
        try:
            img.save(buffer, format="PNG")
        except OSError as e:
            raise CaptureFailed(f"Failed to encode capture as PNG: {e}") from e

        # On HiDPI displays the grab is in physical pixels, so the size can
        # differ from the requested logical region.
        logger.debug(f"Captured {img.width}x{img.height} image ({buffer.tell() / 1024:.1f} KB PNG)")
        return RawCapture(data=buffer.getvalue(), width=img.width, height=img.height)


# platform.system() value -> provider class
PROVIDERS: Dict[str, Type[CaptureProvider]] = {
    system: MssCaptureProvider for system in SUPPORTED_PLATFORMS
}


def get_capture_provider(system: Optional[str] = None) -> CaptureProvider:
    """
    Select the capture provider for the running operating system.

    Args:
        system: Platform name to use instead of platform.system()

    Raises:
        PlatformUnsupported: If no provider is registered for the platform
    """
    system = system or platform.system()
    provider_class = PROVIDERS.get(system)
    if provider_class is None:
        logger.error(f"No capture provider registered for platform {system!r}")
        raise PlatformUnsupported()

    return provider_class(system)


def get_system_info() -> Dict[str, str]:
    """
    Get system information relevant to screenshots.

    Returns:
        Dict[str, str]: System information
    """
    import PIL

    system = platform.system()
    return {
        "platform": system,
        "platform_release": platform.release(),
        "python_version": platform.python_version(),
        "capture_provider": PROVIDERS[system].__name__ if system in PROVIDERS else "none",
        "mss_version": getattr(mss, "__version__", "unknown"),
        "pil_version": getattr(PIL, "__version__", "unknown"),
    }
