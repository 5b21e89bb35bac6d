#!/usr/bin/env python3
"""
Configuration for Window Bridge

Resolves the settings the pipeline and server read from the process
environment. Values are loaded into explicit configuration objects rather than
looked up ad hoc inside the pipeline. A ``.env`` file in the working directory
is honoured through python-dotenv when ``load_environment()`` is called at
startup.

Third-party package documentation:
- python-dotenv: https://github.com/theskumar/python-dotenv

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- WINDOW_BRIDGE_SCREENSHOT_MAX_WIDTH=2000
- resolve_effective_width(500)

Expected output:
- 500 (the explicit request value wins over the environment default)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv
from loguru import logger

from window_bridge.core.constants import (
    DEFAULT_SCREENSHOT_TIMEOUT,
    DISCOVERY_SETTINGS,
    ENV_APP_TITLE,
    ENV_HOST,
    ENV_LOG_LEVEL,
    ENV_MAX_WIDTH,
    ENV_PORT,
    ENV_SCALE_FACTOR,
    ENV_SCREENSHOT_TIMEOUT,
    MAX_WIDTH_LIMIT,
)


def load_environment(dotenv_path: Optional[str] = None) -> bool:
    """
    Load variables from a .env file into the process environment.

    Existing environment variables take precedence over the file.

    Returns:
        bool: True if a .env file was found and loaded
    """
    loaded = load_dotenv(dotenv_path=dotenv_path, override=False)
    if loaded:
        logger.debug("Loaded environment from .env file")
    return loaded


def parse_max_width(raw: Optional[str]) -> Optional[int]:
    """
    Parse a width ceiling from an environment string.

    Only plain ASCII unsigned integers that fit in 32 bits are accepted; anything
    else yields None.
    """
    if raw is None:
        return None

    value = raw.strip()
    if not (value.isascii() and value.isdigit()):
        logger.debug(f"Ignoring non-numeric {ENV_MAX_WIDTH} value: {raw!r}")
        return None

    width = int(value)
    if width > MAX_WIDTH_LIMIT:
        logger.debug(f"Ignoring out-of-range {ENV_MAX_WIDTH} value: {raw!r}")
        return None

    return width


def _parse_float(raw: Optional[str], default: float) -> float:
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid number {raw!r}, using default {default}")
        return default


def _parse_int(raw: Optional[str], default: int) -> int:
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid integer {raw!r}, using default {default}")
        return default


@dataclass(frozen=True)
class ScreenshotConfig:
    """Process-wide screenshot defaults."""

    default_max_width: Optional[int] = None
    timeout: float = DEFAULT_SCREENSHOT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ScreenshotConfig":
        env = os.environ if environ is None else environ

        default_max_width = parse_max_width(env.get(ENV_MAX_WIDTH))
        if default_max_width == 0:
            logger.warning(f"{ENV_MAX_WIDTH}=0 is not a usable ceiling, screenshots will not be resized")
            default_max_width = None

        return cls(
            default_max_width=default_max_width,
            timeout=_parse_float(env.get(ENV_SCREENSHOT_TIMEOUT), DEFAULT_SCREENSHOT_TIMEOUT),
        )


@dataclass(frozen=True)
class ServerConfig:
    """Settings for the MCP server and window lookup."""

    host: str = DISCOVERY_SETTINGS["BIND_ADDRESS"]
    port: int = DISCOVERY_SETTINGS["BASE_PORT"]
    log_level: str = "INFO"
    app_title: Optional[str] = None
    scale_factor: float = 1.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        env = os.environ if environ is None else environ

        scale_factor = _parse_float(env.get(ENV_SCALE_FACTOR), 1.0)
        if scale_factor <= 0:
            logger.warning(f"{ENV_SCALE_FACTOR} must be positive, got {scale_factor}; using 1.0")
            scale_factor = 1.0

        return cls(
            host=env.get(ENV_HOST) or DISCOVERY_SETTINGS["BIND_ADDRESS"],
            port=_parse_int(env.get(ENV_PORT), DISCOVERY_SETTINGS["BASE_PORT"]),
            log_level=(env.get(ENV_LOG_LEVEL) or "INFO").upper(),
            app_title=env.get(ENV_APP_TITLE) or None,
            scale_factor=scale_factor,
        )


def resolve_effective_width(
    request_param: Optional[int],
    config: Optional[ScreenshotConfig] = None
) -> Optional[int]:
    """
    Resolve the width ceiling for one screenshot.

    Precedence: explicit request value (used verbatim, including 0), then the
    process-wide default. Without a config object the environment is read on
    each call so changes apply to the next screenshot.

    Args:
        request_param: max_width passed by the caller, if any
        config: Configuration loaded at startup

    Returns:
        Optional[int]: Effective ceiling, or None when no resize should run
    """
    if request_param is not None:
        return request_param

    if config is None:
        config = ScreenshotConfig.from_env()

    return config.default_max_width


if __name__ == "__main__":
    """Validate configuration resolution"""
    import sys

    all_validation_failures = []
    total_tests = 0

    # Test 1: explicit value wins
    total_tests += 1
    result = resolve_effective_width(500, ScreenshotConfig(default_max_width=2000))
    if result != 500:
        all_validation_failures.append(f"Explicit precedence: expected 500, got {result}")

    # Test 2: environment default
    total_tests += 1
    config = ScreenshotConfig.from_env({ENV_MAX_WIDTH: "1280"})
    if resolve_effective_width(None, config) != 1280:
        all_validation_failures.append(f"Environment default: expected 1280, got {config.default_max_width}")

    # Test 3: unparseable value means no ceiling
    total_tests += 1
    config = ScreenshotConfig.from_env({ENV_MAX_WIDTH: "wide"})
    if config.default_max_width is not None:
        all_validation_failures.append(f"Invalid env value: expected None, got {config.default_max_width}")

    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        sys.exit(0)
