#!/usr/bin/env python3
"""
Unit tests for core/image_processing.py
"""

import io
import os
import sys
import unittest

from PIL import Image

# Add src directory to path to import package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from window_bridge.core.errors import EncodeFailed, ResizeFailed
from window_bridge.core.image_processing import (
    calculate_resize_dimensions,
    convert_format,
    convert_to_jpeg,
    ensure_rgb,
    image_size,
    maybe_resize
)
from window_bridge.tests.fakes import make_png


class TestResizeDimensions(unittest.TestCase):
    """Test cases for the resize arithmetic"""

    def test_scales_height_with_width(self):
        self.assertEqual(calculate_resize_dimensions(4000, 3000, 1000), (1000, 750))

    def test_within_ceiling_unchanged(self):
        self.assertEqual(calculate_resize_dimensions(800, 600, 800), (800, 600))
        self.assertEqual(calculate_resize_dimensions(800, 600, 5000), (800, 600))

    def test_rounds_half_up(self):
        # 5 * 0.5 = 2.5
        self.assertEqual(calculate_resize_dimensions(4, 5, 2), (2, 3))

    def test_height_never_zero(self):
        self.assertEqual(calculate_resize_dimensions(1000, 1, 10), (10, 1))
        self.assertEqual(calculate_resize_dimensions(3000, 1, 1), (1, 1))


class TestMaybeResize(unittest.TestCase):
    """Test cases for the resize stage"""

    def setUp(self):
        self.large = make_png(4000, 3000)

    def test_downscales_to_ceiling(self):
        resized = maybe_resize(self.large, 1000)
        self.assertEqual(image_size(resized), (1000, 750))
        self.assertTrue(resized.startswith(b"\x89PNG"))

    def test_no_upscaling_returns_same_bytes(self):
        self.assertIs(maybe_resize(self.large, 5000), self.large)

    def test_exact_width_returns_same_bytes(self):
        self.assertIs(maybe_resize(self.large, 4000), self.large)

    def test_zero_ceiling_rejected(self):
        with self.assertRaises(ResizeFailed) as context:
            maybe_resize(self.large, 0)
        self.assertEqual(context.exception.kind, "ResizeFailed")
        self.assertIn("at least 1", str(context.exception))

    def test_negative_ceiling_rejected(self):
        with self.assertRaises(ResizeFailed):
            maybe_resize(self.large, -5)

    def test_undecodable_input(self):
        with self.assertRaises(ResizeFailed) as context:
            maybe_resize(b"not an image", 100)
        self.assertTrue(str(context.exception).startswith("Resize failed: Failed to decode image"))

    def test_resized_output_keeps_aspect_ratio(self):
        resized = maybe_resize(make_png(1920, 1080), 1280)
        self.assertEqual(image_size(resized), (1280, 720))


class TestConvertFormat(unittest.TestCase):
    """Test cases for the transcode stage"""

    def setUp(self):
        self.png = make_png(64, 48)

    def test_png_passes_through_unchanged(self):
        self.assertIs(convert_format(self.png, "png", 10), self.png)
        self.assertIs(convert_format(self.png, "png", 95), self.png)

    def test_jpeg_output(self):
        jpeg = convert_format(self.png, "jpeg", 80)
        self.assertTrue(jpeg.startswith(b"\xff\xd8"))
        with Image.open(io.BytesIO(jpeg)) as img:
            self.assertEqual(img.format, "JPEG")
            self.assertEqual(img.size, (64, 48))

    def test_quality_affects_jpeg_size(self):
        buffer = io.BytesIO()
        Image.linear_gradient("L").convert("RGB").save(buffer, format="PNG")
        gradient = buffer.getvalue()
        self.assertLess(len(convert_format(gradient, "jpeg", 10)), len(convert_format(gradient, "jpeg", 95)))

    def test_unsupported_format(self):
        with self.assertRaises(EncodeFailed) as context:
            convert_format(self.png, "gif", 80)
        self.assertEqual(context.exception.kind, "EncodeFailed")

    def test_undecodable_input(self):
        with self.assertRaises(EncodeFailed) as context:
            convert_to_jpeg(b"garbage", 80)
        self.assertIn("Failed to decode PNG", str(context.exception))

    def test_transparency_flattened_onto_white(self):
        rgba = make_png(8, 8, mode="RGBA", color=(0, 0, 0, 0))
        jpeg = convert_format(rgba, "jpeg", 95)
        with Image.open(io.BytesIO(jpeg)) as img:
            r, g, b = img.convert("RGB").getpixel((4, 4))
        self.assertGreater(min(r, g, b), 240)


class TestEnsureRgb(unittest.TestCase):
    """Test cases for mode conversion"""

    def test_rgb_unchanged(self):
        img = Image.new("RGB", (2, 2))
        self.assertIs(ensure_rgb(img), img)

    def test_grayscale_converted(self):
        self.assertEqual(ensure_rgb(Image.new("L", (2, 2))).mode, "RGB")

    def test_rgba_converted(self):
        self.assertEqual(ensure_rgb(Image.new("RGBA", (2, 2))).mode, "RGB")


if __name__ == "__main__":
    unittest.main()
