#!/usr/bin/env python3
"""
Screenshot Capture Pipeline

This module sequences the screenshot stages for one window:

1. Capture the viewport with the platform provider (lossless PNG)
2. Resolve the width ceiling (request value, then process default)
3. Downscale to the ceiling if one is set
4. Convert to the requested output format
5. Package the bytes as a base64 data URL

Stages run strictly in order and every stage error propagates unchanged, so
the caller sees exactly which stage failed and why.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- window=<WindowHandle "main">, image_format="jpeg", quality=80, max_width=1000

Expected output:
- "data:image/jpeg;base64,/9j/4AAQSkZJRgABAQAAAQABAAD..."
"""

import base64
import binascii
from typing import Optional, Tuple

from loguru import logger

from window_bridge.core.config import ScreenshotConfig, resolve_effective_width
from window_bridge.core.constants import IMAGE_SETTINGS, MIME_TYPES
from window_bridge.core.image_processing import convert_format, maybe_resize
from window_bridge.core.providers import CaptureProvider, get_capture_provider
from window_bridge.core.utils import truncate_large_value
from window_bridge.core.windows import WindowHandle


def mime_type_for(image_format: str) -> str:
    """Return the MIME type of an output format ("png" or "jpeg")."""
    return MIME_TYPES["jpeg"] if image_format == "jpeg" else MIME_TYPES["png"]


def package_data_url(data: bytes, image_format: str) -> str:
    """
    Wrap encoded image bytes in a data URL.

    Args:
        data: Encoded image bytes
        image_format: Format the bytes are in ("png" or "jpeg")

    Returns:
        str: "data:<mime>;base64,<payload>"
    """
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type_for(image_format)};base64,{payload}"


def decode_data_url(data_url: str) -> Tuple[str, bytes]:
    """
    Split a base64 data URL into its MIME type and decoded bytes.

    Raises:
        ValueError: If the string is not a base64 data URL
    """
    if not data_url.startswith("data:") or ";base64," not in data_url:
        raise ValueError(f"Not a base64 data URL: {truncate_large_value(data_url)}")

    header, payload = data_url[len("data:"):].split(";base64,", 1)
    try:
        return header, base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e


class ScreenshotPipeline:
    """
    Capture, resize, transcode and package window screenshots.

    Args:
        provider: Capture provider; when omitted the platform provider is
            selected at the start of each capture
        config: Process-wide defaults; when omitted the environment is read on
            each capture
    """

    def __init__(
        self,
        provider: Optional[CaptureProvider] = None,
        config: Optional[ScreenshotConfig] = None
    ):
        self.provider = provider
        self.config = config

    async def capture_and_package(
        self,
        window: WindowHandle,
        image_format: str = IMAGE_SETTINGS["DEFAULT_FORMAT"],
        quality: int = IMAGE_SETTINGS["DEFAULT_QUALITY"],
        max_width: Optional[int] = None
    ) -> str:
        """
        Capture a window's viewport and return it as a data URL.

        Args:
            window: Window to capture
            image_format: "png" or "jpeg"
            quality: JPEG quality (0-100), ignored for PNG
            max_width: Width ceiling overriding the process default

        Returns:
            str: Data URL whose MIME type matches the encoded bytes

        Raises:
            PlatformUnsupported, CaptureFailed, ResizeFailed, EncodeFailed
        """
        logger.info(
            f"Screenshot requested for window '{window.label}' with format={image_format}, "
            f"quality={quality}, max_width={max_width}"
        )

        provider = self.provider or get_capture_provider()
        raw = await provider.capture_viewport(window)

        ceiling = resolve_effective_width(max_width, self.config)
        if ceiling is not None:
            data = maybe_resize(raw.data, ceiling)
        else:
            data = raw.data

        final_data = convert_format(data, image_format, quality)
        data_url = package_data_url(final_data, image_format)

        logger.info(
            f"Screenshot of window '{window.label}' packaged as {mime_type_for(image_format)} "
            f"({len(final_data) / 1024:.1f} KB, {len(data_url)} characters)"
        )
        return data_url


async def capture_viewport_screenshot(
    window: WindowHandle,
    image_format: str = IMAGE_SETTINGS["DEFAULT_FORMAT"],
    quality: int = IMAGE_SETTINGS["DEFAULT_QUALITY"],
    max_width: Optional[int] = None
) -> str:
    """Capture a window with the platform provider and environment defaults."""
    return await ScreenshotPipeline().capture_and_package(window, image_format, quality, max_width)


if __name__ == "__main__":
    """Validate the capture pipeline with a synthetic capture"""
    import asyncio
    import io
    import sys

    from PIL import Image

    from window_bridge.core.providers import RawCapture

    class StaticProvider(CaptureProvider):
        def __init__(self, data: bytes, width: int, height: int):
            self.capture = RawCapture(data=data, width=width, height=height)

        async def capture_viewport(self, window: WindowHandle) -> RawCapture:
            return self.capture

    all_validation_failures = []
    total_tests = 0

    buffer = io.BytesIO()
    Image.new("RGB", (4000, 3000), color="blue").save(buffer, format="PNG")
    source = buffer.getvalue()
    window = WindowHandle(label="main", native=None)
    pipeline = ScreenshotPipeline(StaticProvider(source, 4000, 3000), ScreenshotConfig())

    # Test 1: resize and JPEG transcode
    total_tests += 1
    data_url = asyncio.run(pipeline.capture_and_package(window, "jpeg", 80, 1000))
    mime_type, data = decode_data_url(data_url)
    with Image.open(io.BytesIO(data)) as img:
        size = img.size
    if mime_type != "image/jpeg" or size != (1000, 750):
        all_validation_failures.append(f"Resize test: Expected image/jpeg 1000x750, got {mime_type} {size}")

    # Test 2: PNG without ceiling is passed through
    total_tests += 1
    data_url = asyncio.run(pipeline.capture_and_package(window, "png", 80, None))
    if data_url != package_data_url(source, "png"):
        all_validation_failures.append("Passthrough test: Expected the captured PNG unchanged")

    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        sys.exit(0)
