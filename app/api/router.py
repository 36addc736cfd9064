"""API router aggregation."""
from __future__ import annotations

from fastapi import APIRouter

from app.api.endpoints import health, translations

router = APIRouter()

router.include_router(translations.router)
router.include_router(health.router)
