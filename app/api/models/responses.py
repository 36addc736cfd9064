"""API response models."""
from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class LanguagesResponse(BaseModel):
    """Languages with a bundle on the server."""

    languages: list[str] = Field(..., description="Available language codes")
    default: str = Field(..., description="Language used when none is given")

    model_config = {
        "json_schema_extra": {
            "example": {"languages": ["en", "fr"], "default": "en"}
        }
    }


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "degraded"]
    version: str
    timestamp: datetime
    languages: int = Field(..., ge=0, description="Number of bundles on disk")
