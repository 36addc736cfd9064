"""API Pydantic models."""
from app.api.models.errors import ErrorMessages, ErrorResponse
from app.api.models.responses import HealthResponse, LanguagesResponse

__all__ = [
    "LanguagesResponse",
    "HealthResponse",
    "ErrorResponse",
    "ErrorMessages",
]
