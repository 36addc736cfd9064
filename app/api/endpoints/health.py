"""Health check endpoint."""
from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Depends

from app.api.deps import get_store
from app.api.models.responses import HealthResponse
from langroute import __version__
from langroute.translations.store import TranslationStore

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check server health and how many bundles are available.",
)
async def health_check(store: TranslationStore = Depends(get_store)) -> HealthResponse:
    """Return server health status."""
    count = len(store.available_languages())

    return HealthResponse(
        status="healthy" if count else "degraded",
        version=__version__,
        timestamp=datetime.now(UTC),
        languages=count,
    )
