#!/usr/bin/env python3
"""
Unit tests for core/utils.py
"""

import os
import shutil
import sys
import tempfile
import unittest

# Add src directory to path to import package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from window_bridge.core.errors import CaptureFailed, WindowNotFoundError
from window_bridge.core.utils import (
    ensure_directory,
    format_error_response,
    generate_filename,
    normalize_image_format,
    truncate_large_value,
    validate_max_width,
    validate_quality
)


class TestCoreUtils(unittest.TestCase):
    """Test cases for core utility functions"""

    def test_validate_quality(self):
        """Test quality validation"""
        # Test within range
        self.assertEqual(validate_quality(50, 0, 100), 50)

        # Test below minimum
        self.assertEqual(validate_quality(-10, 0, 100), 0)

        # Test above maximum
        self.assertEqual(validate_quality(150, 0, 100), 100)

    def test_normalize_image_format(self):
        """Test format aliases"""
        self.assertEqual(normalize_image_format("png"), "png")
        self.assertEqual(normalize_image_format("JPG"), "jpeg")
        self.assertEqual(normalize_image_format(" jpeg "), "jpeg")
        self.assertIsNone(normalize_image_format("gif"))
        self.assertIsNone(normalize_image_format(None))

    def test_validate_max_width(self):
        """Test width ceiling validation"""
        self.assertEqual(validate_max_width(None), (True, None))
        self.assertEqual(validate_max_width(1280), (True, None))
        self.assertFalse(validate_max_width(0)[0])
        self.assertFalse(validate_max_width(-1)[0])
        self.assertFalse(validate_max_width(True)[0])

    def test_generate_filename(self):
        """Test filename generation"""
        # Test default parameters
        filename = generate_filename()
        self.assertTrue(filename.startswith("screenshot_"))
        self.assertTrue(filename.endswith(".png"))

        # Test custom parameters
        filename = generate_filename("window", "jpeg")
        self.assertTrue(filename.startswith("window_"))
        self.assertTrue(filename.endswith(".jpeg"))

    def test_ensure_directory(self):
        """Test directory creation"""
        temp_dir = tempfile.mkdtemp()
        try:
            test_dir = os.path.join(temp_dir, "nested", "dir")
            self.assertTrue(ensure_directory(test_dir))
            self.assertTrue(os.path.isdir(test_dir))
        finally:
            shutil.rmtree(temp_dir)

    def test_format_error_response(self):
        """Test error response formatting"""
        response = format_error_response(CaptureFailed("no display"))
        self.assertEqual(response, {
            "success": False,
            "error": "Viewport capture failed: no display",
            "errorKind": "CaptureFailed"
        })

        response = format_error_response(WindowNotFoundError("Window not found: x"))
        self.assertEqual(response["errorKind"], "WindowNotFound")

        response = format_error_response(ValueError("bad"), include_kind=False)
        self.assertNotIn("errorKind", response)

        response = format_error_response("plain message")
        self.assertEqual(response, {"success": False, "error": "plain message"})

    def test_truncate_large_value(self):
        """Test log truncation"""
        self.assertEqual(truncate_large_value("short"), "short")
        truncated = truncate_large_value("x" * 500, max_str_len=10)
        self.assertTrue(truncated.startswith("x" * 10 + "..."))
        self.assertIn("500 chars", truncated)
        self.assertEqual(truncate_large_value(42), 42)


if __name__ == "__main__":
    unittest.main()
