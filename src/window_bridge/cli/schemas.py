#!/usr/bin/env python3
"""
Response Schemas for Window Bridge CLI

Pydantic models and helpers that give every ``--json`` CLI command the same
response envelope.

Third-party package documentation:
- Pydantic: https://docs.pydantic.dev/

This module is part of the Presentation Layer and should only depend on
Core Layer components, not on Integration Layer.

Sample input:
- format_cli_response(True, data={"file": "screenshots/screenshot_1.png"})
- format_cli_response(False, error="Platform not supported", error_kind="PlatformUnsupported")

Expected output:
- {"success": True, "data": {"file": "screenshots/screenshot_1.png"}}
- {"success": False, "error": "Platform not supported", "errorKind": "PlatformUnsupported"}
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Error response model"""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = False
    error: str
    error_kind: Optional[str] = Field(None, alias="errorKind")


class SuccessResponse(BaseModel):
    """Success response model"""
    success: bool = True
    data: Dict[str, Any]


def format_cli_response(
    success: bool,
    data: Optional[Dict[str, Any]] = None,
    error: Optional[str] = None,
    error_kind: Optional[str] = None
) -> Dict[str, Any]:
    """
    Format a standardized CLI response.

    Args:
        success: Whether the operation was successful
        data: Response data (for successful operations)
        error: Error message (for failed operations)
        error_kind: Typed error kind, if known

    Returns:
        Dict[str, Any]: Formatted response
    """
    if success and data is not None:
        return SuccessResponse(data=data).model_dump()
    elif not success and error is not None:
        return ErrorResponse(error=error, error_kind=error_kind).model_dump(by_alias=True, exclude_none=True)
    else:
        return {"success": success}
