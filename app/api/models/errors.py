"""API error response models."""
from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Human-readable error message")

    model_config = {
        "json_schema_extra": {
            "example": {"error": "Translation not found"}
        }
    }


class ErrorMessages:
    """Error bodies returned by the translation endpoint."""

    # 4xx Client Errors
    TRANSLATION_NOT_FOUND = "Translation not found"

    # 5xx Server Errors
    PARSE_FAILED = "Failed to parse JSON"
