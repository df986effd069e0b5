"""Shared / generic schemas."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error envelope returned for grading/analytics failures."""

    success: bool = False
    error_code: str
    message: str
    details: dict[str, Any] | None = None
