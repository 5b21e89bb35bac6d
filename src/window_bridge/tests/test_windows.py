#!/usr/bin/env python3
"""
Unit tests for core/windows.py
"""

import os
import sys
import unittest
from unittest.mock import MagicMock, patch

# Add src directory to path to import package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from window_bridge.core.config import ServerConfig
from window_bridge.core.errors import WindowNotFoundError, WindowOperationError
from window_bridge.core.windows import WindowHandle, list_windows, resolve_window
from window_bridge.tests.fakes import FakeNativeWindow


class TestWindowLookup(unittest.TestCase):
    """Test cases for listing and resolving windows"""

    def setUp(self):
        self.backend = MagicMock()
        self.backend.getAllWindows.return_value = [
            FakeNativeWindow("Editor", 101),
            FakeNativeWindow("", 102),
            FakeNativeWindow("Editor Settings", 103),
        ]
        self.backend.getWindowsWithTitle.return_value = [FakeNativeWindow("Editor", 101)]
        patcher = patch('window_bridge.core.windows._load_backend', return_value=self.backend)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.config = ServerConfig(scale_factor=2.0)

    def test_labels(self):
        windows = list_windows(config=self.config)
        self.assertEqual([w.label for w in windows], ["main", "window-103"])
        self.assertEqual(windows[0].scale_factor, 2.0)

    def test_title_filter(self):
        windows = list_windows(config=ServerConfig(app_title="Editor"))
        self.backend.getWindowsWithTitle.assert_called_once_with("Editor", condition=self.backend.Re.CONTAINS)
        self.assertEqual(len(windows), 1)

    def test_resolve_default(self):
        self.assertEqual(resolve_window(config=self.config).title, "Editor")

    def test_resolve_by_label_title_or_handle(self):
        self.assertEqual(resolve_window("window-103", config=self.config).title, "Editor Settings")
        self.assertEqual(resolve_window("Editor Settings", config=self.config).label, "window-103")
        self.assertEqual(resolve_window("103", config=self.config).label, "window-103")

    def test_unknown_window(self):
        with self.assertRaises(WindowNotFoundError) as context:
            resolve_window("settings", config=self.config)
        self.assertIn("available: main, window-103", str(context.exception))

    def test_no_windows(self):
        self.backend.getAllWindows.return_value = []
        with self.assertRaises(WindowNotFoundError) as context:
            resolve_window(config=self.config)
        self.assertEqual(str(context.exception), "No application windows found")


class TestWindowHandle(unittest.TestCase):
    """Test cases for the window handle"""

    def test_viewport(self):
        window = WindowHandle(label="main", native=FakeNativeWindow("App", 1))
        self.assertEqual(window.viewport(), {"left": 100, "top": 80, "width": 1280, "height": 720})

    def test_viewport_error(self):
        window = WindowHandle(label="main", native=FakeNativeWindow("App", 1, frame=None))
        with self.assertRaises(WindowOperationError):
            window.viewport()

    def test_physical_size_divided_by_scale(self):
        native = FakeNativeWindow("App", 1)
        WindowHandle(label="main", native=native, scale_factor=2.0).set_size(1600, 1200, logical=False)
        self.assertEqual(native.resize_calls, [(800, 600)])

    def test_logical_size_passed_through(self):
        native = FakeNativeWindow("App", 1)
        WindowHandle(label="main", native=native, scale_factor=2.0).set_size(1600, 1200)
        self.assertEqual(native.resize_calls, [(1600, 1200)])

    def test_frame_padding_added_to_requested_size(self):
        native = FakeNativeWindow("App", 1, outer_size=(1300, 760))
        WindowHandle(label="main", native=native).set_size(1024, 768)
        self.assertEqual(native.resize_calls, [(1044, 808)])

    def test_no_padding_without_client_frame(self):
        native = FakeNativeWindow("App", 1, frame=None, outer_size=(1300, 760))
        WindowHandle(label="main", native=native).set_size(1024, 768)
        self.assertEqual(native.resize_calls, [(1024, 768)])

    def test_info(self):
        info = WindowHandle(label="main", native=FakeNativeWindow("App", 7)).info()
        self.assertEqual(info["label"], "main")
        self.assertEqual(info["title"], "App")
        self.assertEqual(info["handle"], "7")
        self.assertTrue(info["isResizable"])
        self.assertEqual(info["viewport"]["width"], 1280)

    def test_info_without_geometry(self):
        info = WindowHandle(label="main", native=FakeNativeWindow("App", 7, frame=None)).info()
        self.assertIsNone(info["viewport"])


if __name__ == "__main__":
    unittest.main()
