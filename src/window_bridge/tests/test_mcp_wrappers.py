#!/usr/bin/env python3
"""
Unit tests for mcp/wrappers.py
"""

import asyncio
import os
import sys
import unittest
from unittest.mock import patch

# Add src directory to path to import package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from window_bridge.core.capture import ScreenshotPipeline, decode_data_url
from window_bridge.core.config import ScreenshotConfig
from window_bridge.core.errors import WindowNotFoundError
from window_bridge.core.image_processing import image_size
from window_bridge.core.providers import CaptureProvider
from window_bridge.core.windows import WindowHandle
from window_bridge.mcp.wrappers import (
    format_mcp_response,
    list_windows_wrapper,
    manage_window_wrapper,
    resize_window_wrapper,
    screenshot_wrapper,
    window_info_wrapper
)
from window_bridge.tests.fakes import FailingProvider, FakeNativeWindow, FakeProvider, make_png


class SlowProvider(CaptureProvider):
    async def capture_viewport(self, window):
        await asyncio.sleep(5)


class TestFormatMcpResponse(unittest.TestCase):
    """Test cases for MCP response formatting"""

    def test_format_mcp_response(self):
        """Test MCP response formatting"""
        # Test success response
        success_response = format_mcp_response(True, data={"result": "test"})
        self.assertTrue(success_response["success"])
        self.assertEqual(success_response["result"], "test")

        # Test error response
        error_response = format_mcp_response(False, error="Test error")
        self.assertFalse(error_response["success"])
        self.assertEqual(error_response["error"], "Test error")


class TestScreenshotWrapper(unittest.IsolatedAsyncioTestCase):
    """Test cases for the screenshot wrapper"""

    def setUp(self):
        self.window = WindowHandle(label="main", native=FakeNativeWindow("App", 1))
        patcher = patch('window_bridge.mcp.wrappers.resolve_window', return_value=self.window)
        self.mock_resolve = patcher.start()
        self.addCleanup(patcher.stop)

    async def test_success(self):
        pipeline = ScreenshotPipeline(FakeProvider(make_png(4000, 3000)), ScreenshotConfig())

        result = await screenshot_wrapper(image_format="jpg", quality=70, max_width=1000, pipeline=pipeline, timeout=10)

        self.assertTrue(result["success"])
        self.assertEqual(result["mimeType"], "image/jpeg")
        self.assertEqual(result["windowLabel"], "main")
        mime_type, data = decode_data_url(result["dataUrl"])
        self.assertEqual(mime_type, "image/jpeg")
        self.assertEqual(image_size(data), (1000, 750))
        self.mock_resolve.assert_called_once_with(None)

    async def test_window_id_passed_through(self):
        pipeline = ScreenshotPipeline(FakeProvider(make_png(10, 10)), ScreenshotConfig())

        await screenshot_wrapper(window_id="settings", pipeline=pipeline, timeout=10)

        self.mock_resolve.assert_called_once_with("settings")

    async def test_quality_clamped(self):
        pipeline = ScreenshotPipeline(FakeProvider(make_png(10, 10)), ScreenshotConfig())

        result = await screenshot_wrapper(image_format="jpeg", quality=250, pipeline=pipeline, timeout=10)

        self.assertTrue(result["success"])

    async def test_unsupported_format(self):
        result = await screenshot_wrapper(image_format="gif", timeout=10)

        self.assertFalse(result["success"])
        self.assertIn("Unsupported format", result["error"])
        self.mock_resolve.assert_not_called()

    async def test_invalid_max_width(self):
        result = await screenshot_wrapper(max_width=0, timeout=10)

        self.assertFalse(result["success"])
        self.assertTrue(result["error"].startswith("Invalid parameters"))

    async def test_capture_failure(self):
        pipeline = ScreenshotPipeline(FailingProvider(), ScreenshotConfig())

        result = await screenshot_wrapper(pipeline=pipeline, timeout=10)

        self.assertFalse(result["success"])
        self.assertEqual(result["errorKind"], "CaptureFailed")
        self.assertEqual(result["error"], "Viewport capture failed: window is minimized")

    async def test_timeout(self):
        pipeline = ScreenshotPipeline(SlowProvider(), ScreenshotConfig())

        result = await screenshot_wrapper(pipeline=pipeline, timeout=0.05)

        self.assertFalse(result["success"])
        self.assertEqual(result["errorKind"], "Timeout")
        self.assertEqual(result["error"], "Timeout exceeded")

    async def test_window_not_found(self):
        self.mock_resolve.side_effect = WindowNotFoundError("Window not found: settings (available: main)")

        result = await screenshot_wrapper(window_id="settings", timeout=10)

        self.assertFalse(result["success"])
        self.assertEqual(result["errorKind"], "WindowNotFound")


    async def test_unexpected_error_reported(self):
        self.mock_resolve.side_effect = ImportError("No module named 'pywinctl'")

        result = await screenshot_wrapper("main", "png", 80, None, timeout=10)

        self.assertFalse(result["success"])
        self.assertEqual(result["errorKind"], "ImportError")
        self.assertIn("pywinctl", result["error"])


class TestWindowWrappers(unittest.TestCase):
    """Test cases for the window management wrappers"""

    @patch('window_bridge.mcp.wrappers.list_windows')
    def test_list_windows(self, mock_list):
        mock_list.return_value = [
            WindowHandle(label="main", native=FakeNativeWindow("App", 1)),
            WindowHandle(label="window-2", native=FakeNativeWindow("App Settings", 2)),
        ]

        result = list_windows_wrapper()

        self.assertTrue(result["success"])
        self.assertEqual(result["totalCount"], 2)
        self.assertEqual(result["defaultWindow"], "main")
        self.assertEqual(result["windows"][1]["title"], "App Settings")

    @patch('window_bridge.mcp.wrappers.list_windows')
    def test_list_windows_backend_error(self, mock_list):
        mock_list.side_effect = RuntimeError("cannot open display")

        result = list_windows_wrapper()

        self.assertFalse(result["success"])
        self.assertIn("cannot open display", result["error"])

    @patch('window_bridge.core.windows.resolve_window')
    def test_window_info(self, mock_resolve):
        mock_resolve.return_value = WindowHandle(label="main", native=FakeNativeWindow("App", 1))

        result = window_info_wrapper("main")

        self.assertTrue(result["success"])
        self.assertEqual(result["window"]["label"], "main")
        mock_resolve.assert_called_once_with("main", config=None)

    @patch('window_bridge.core.windows.resolve_window')
    def test_window_info_not_found(self, mock_resolve):
        mock_resolve.side_effect = WindowNotFoundError("No application windows found")

        result = window_info_wrapper()

        self.assertFalse(result["success"])
        self.assertEqual(result["errorKind"], "WindowNotFound")

    @patch('window_bridge.core.windows.resolve_window')
    def test_window_info_backend_error(self, mock_resolve):
        mock_resolve.side_effect = RuntimeError("cannot open display")

        result = window_info_wrapper()

        self.assertFalse(result["success"])
        self.assertIn("cannot open display", result["error"])

    @patch('window_bridge.mcp.wrappers.resolve_window')
    def test_resize_backend_error(self, mock_resolve):
        mock_resolve.side_effect = ImportError("No module named 'pywinctl'")

        result = resize_window_wrapper(1024, 768)

        self.assertFalse(result["success"])
        self.assertEqual(result["errorKind"], "ImportError")

    @patch('window_bridge.mcp.wrappers.resolve_window')
    def test_resize(self, mock_resolve):
        native = FakeNativeWindow("App", 1)
        mock_resolve.return_value = WindowHandle(label="main", native=native)

        result = resize_window_wrapper(1024, 768)

        self.assertTrue(result["success"])
        self.assertEqual(result["windowLabel"], "main")
        self.assertEqual(native.resize_calls, [(1024, 768)])

    @patch('window_bridge.mcp.wrappers.resolve_window')
    def test_resize_not_resizable(self, mock_resolve):
        mock_resolve.return_value = WindowHandle(label="main", native=FakeNativeWindow("App", 1, resizable=False))

        result = resize_window_wrapper(1024, 768)

        self.assertFalse(result["success"])
        self.assertEqual(result["error"], "Window is not resizable")

    def test_resize_invalid_size(self):
        result = resize_window_wrapper(0, 768)

        self.assertFalse(result["success"])
        self.assertTrue(result["error"].startswith("Invalid parameters"))

    def test_manage_window_resize_requires_size(self):
        result = manage_window_wrapper("resize", width=800)

        self.assertFalse(result["success"])
        self.assertEqual(result["error"], "width and height are required for resize action")

    def test_manage_window_unknown_action(self):
        result = manage_window_wrapper("minimize")

        self.assertFalse(result["success"])
        self.assertIn("Unknown action", result["error"])

    @patch('window_bridge.mcp.wrappers.list_windows_wrapper')
    def test_manage_window_list(self, mock_list):
        mock_list.return_value = {"success": True, "windows": [], "totalCount": 0}

        self.assertEqual(manage_window_wrapper("list"), mock_list.return_value)


if __name__ == "__main__":
    unittest.main()
