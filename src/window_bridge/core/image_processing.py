#!/usr/bin/env python3
"""
Image Processing for Window Bridge

This module provides the two image stages of the screenshot pipeline:

1. Resize policy: downscale an image to a width ceiling, preserving aspect
   ratio and never upscaling.
2. Format transcoding: pass lossless PNG through untouched, or re-encode it as
   JPEG at a requested quality.

Both stages take and return encoded bytes. PNG is the working format between
stages, so resizing always writes PNG and format conversion happens last.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- PNG bytes of a 4000x3000 screenshot
- Resize parameters: max_width=1000
- Transcode parameters: image_format="jpeg", quality=80

Expected output:
- PNG bytes of a 1000x750 image after resizing
- JPEG bytes of the same image after transcoding
"""

import io
import math
from typing import Tuple

from PIL import Image
from loguru import logger

from window_bridge.core.constants import IMAGE_SETTINGS, PIL_FORMATS, SUPPORTED_FORMATS
from window_bridge.core.errors import EncodeFailed, ResizeFailed


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_resize_dimensions(width: int, height: int, max_width: int) -> Tuple[int, int]:
    """
    Compute output dimensions for a width ceiling.

    Args:
        width: Current image width
        height: Current image height
        max_width: Width ceiling

    Returns:
        Tuple[int, int]: (new_width, new_height); unchanged if already within the ceiling
    """
    if width <= max_width:
        return width, height

    scale = max_width / width
    new_height = max(1, _round_half_up(height * scale))
    return max_width, new_height


def decode_image(data: bytes) -> Image.Image:
    """
    Decode encoded image bytes into a fully loaded Pillow image.

    Raises:
        OSError: If the bytes are not a readable image
    """
    img = Image.open(io.BytesIO(data))
    img.load()
    return img


def encode_image(img: Image.Image, image_format: str, quality: int = IMAGE_SETTINGS["DEFAULT_QUALITY"]) -> bytes:
    """
    Encode a Pillow image as PNG or JPEG bytes.

    Quality is only used for JPEG.
    """
    buffer = io.BytesIO()
    if image_format == "jpeg":
        img.save(buffer, format=PIL_FORMATS["jpeg"], quality=quality)
    else:
        img.save(buffer, format=PIL_FORMATS[image_format])
    return buffer.getvalue()


def maybe_resize(data: bytes, max_width: int) -> bytes:
    """
    Downscale image bytes to a width ceiling, preserving aspect ratio.

    Images already within the ceiling are returned as the same bytes object
    without re-encoding. Resized output is always PNG.

    Args:
        data: Encoded image bytes
        max_width: Width ceiling in pixels (at least 1)

    Returns:
        bytes: Original bytes, or PNG bytes of the resized image

    Raises:
        ResizeFailed: On an invalid ceiling, undecodable input or encode failure
    """
    if max_width < 1:
        raise ResizeFailed(f"max_width must be at least 1, got {max_width}")

    try:
        img = decode_image(data)
    except Exception as e:
        raise ResizeFailed(f"Failed to decode image: {e}") from e

    width, height = img.size
    if width <= max_width:
        logger.debug(f"Image width {width} within ceiling {max_width}, skipping resize")
        return data

    new_width, new_height = calculate_resize_dimensions(width, height, max_width)
    logger.info(f"Resizing image from {width}x{height} to {new_width}x{new_height}")

    try:
        resized = img.resize((new_width, new_height), Image.LANCZOS)
    except Exception as e:
        raise ResizeFailed(f"Failed to resample image: {e}") from e

    try:
        return encode_image(resized, IMAGE_SETTINGS["WORKING_FORMAT"])
    except Exception as e:
        raise ResizeFailed(f"Failed to encode PNG: {e}") from e


def ensure_rgb(img: Image.Image) -> Image.Image:
    """
    Converts image to RGB mode if needed for JPEG compatibility.

    Transparent pixels are composited onto a white background.

    Args:
        img: PIL Image object to convert

    Returns:
        PIL.Image: Image in RGB mode
    """
    if img.mode in ("RGBA", "LA") or (img.mode == "P" and "transparency" in img.info):
        rgba = img.convert("RGBA")
        background = Image.new("RGB", rgba.size, (255, 255, 255))
        background.paste(rgba, mask=rgba.split()[3])
        return background
    elif img.mode != "RGB":
        return img.convert("RGB")
    return img


def convert_to_jpeg(png_data: bytes, quality: int) -> bytes:
    """
    Re-encode lossless image bytes as JPEG.

    Args:
        png_data: Encoded image bytes (normally PNG)
        quality: JPEG quality (0-100), passed straight to the encoder

    Returns:
        bytes: JPEG bytes

    Raises:
        EncodeFailed: If decoding or encoding fails
    """
    try:
        img = decode_image(png_data)
    except Exception as e:
        raise EncodeFailed(f"Failed to decode PNG: {e}") from e

    try:
        jpeg_bytes = encode_image(ensure_rgb(img), "jpeg", quality)
    except Exception as e:
        raise EncodeFailed(f"Failed to encode JPEG: {e}") from e

    logger.debug(
        f"Converted {len(png_data) / 1024:.1f} KB PNG to {len(jpeg_bytes) / 1024:.1f} KB JPEG "
        f"(quality={quality})"
    )
    return jpeg_bytes


def convert_format(data: bytes, image_format: str, quality: int = IMAGE_SETTINGS["DEFAULT_QUALITY"]) -> bytes:
    """
    Convert PNG bytes to the requested output format.

    PNG requests return the input unchanged whatever the quality.

    Args:
        data: PNG bytes from the capture or resize stage
        image_format: "png" or "jpeg"
        quality: JPEG quality (0-100), ignored for PNG

    Returns:
        bytes: Bytes in the requested format

    Raises:
        EncodeFailed: For unsupported formats or codec errors
    """
    if image_format == IMAGE_SETTINGS["WORKING_FORMAT"]:
        return data

    if image_format not in SUPPORTED_FORMATS:
        raise EncodeFailed(
            f"Unsupported image format: {image_format!r} (expected one of {', '.join(SUPPORTED_FORMATS)})"
        )

    return convert_to_jpeg(data, quality)


def image_size(data: bytes) -> Tuple[int, int]:
    """Return (width, height) of encoded image bytes."""
    with Image.open(io.BytesIO(data)) as img:
        return img.size


if __name__ == "__main__":
    """Validate image processing functions with real test data"""
    import sys

    all_validation_failures = []
    total_tests = 0

    source = encode_image(Image.new("RGB", (4000, 3000), color="red"), "png")

    # Test 1: downscale to ceiling
    total_tests += 1
    resized = maybe_resize(source, 1000)
    if image_size(resized) != (1000, 750):
        all_validation_failures.append(f"Resize test: Expected (1000, 750), got {image_size(resized)}")

    # Test 2: no upscaling
    total_tests += 1
    if maybe_resize(source, 5000) is not source:
        all_validation_failures.append("No-upscale test: Expected input bytes to be returned unchanged")

    # Test 3: JPEG conversion
    total_tests += 1
    jpeg = convert_format(resized, "jpeg", 80)
    if not jpeg.startswith(b"\xff\xd8"):
        all_validation_failures.append("JPEG test: Output does not start with a JPEG marker")

    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        print("Image processing functions are validated and ready for use")
        sys.exit(0)
