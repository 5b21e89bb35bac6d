#!/usr/bin/env python3
"""
Request and Result Models for Window Bridge

Pydantic models for the parameters the MCP and CLI layers accept and for the
structured window resize result. Field aliases follow the camelCase names MCP
clients send (``windowId``, ``maxWidth``).

Third-party package documentation:
- Pydantic: https://docs.pydantic.dev/

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- ResizeWindowParams.model_validate({"width": 800, "height": 600, "windowId": "main"})

Expected output:
- ResizeWindowParams(width=800, height=600, window_id="main", logical=True)
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from window_bridge.core.constants import IMAGE_SETTINGS


class ScreenshotRequest(BaseModel):
    """Parameters of one screenshot request."""

    model_config = ConfigDict(populate_by_name=True)

    window_id: Optional[str] = Field(None, alias="windowId")
    format: Literal["png", "jpeg"] = IMAGE_SETTINGS["DEFAULT_FORMAT"]
    quality: int = Field(
        IMAGE_SETTINGS["DEFAULT_QUALITY"],
        ge=IMAGE_SETTINGS["MIN_QUALITY"],
        le=IMAGE_SETTINGS["MAX_QUALITY"]
    )
    max_width: Optional[int] = Field(None, ge=1, alias="maxWidth")


class ResizeWindowParams(BaseModel):
    """Parameters for resizing a window."""

    model_config = ConfigDict(populate_by_name=True)

    width: int = Field(gt=0, description="Width in pixels")
    height: int = Field(gt=0, description="Height in pixels")
    window_id: Optional[str] = Field(None, alias="windowId", description="Window label, defaults to main")
    logical: bool = Field(True, description="Logical (true) or physical (false) pixels")


class ResizeWindowResult(BaseModel):
    """
    Outcome of a window resize.

    A failed resize is an ordinary result with success=False and an error
    message, not an exception.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    window_label: str = Field(alias="windowLabel")
    width: int
    height: int
    logical: bool
    error: Optional[str] = None
