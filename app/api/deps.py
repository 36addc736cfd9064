"""API dependencies."""
from __future__ import annotations

from fastapi import Request

from langroute.config.settings import Settings
from langroute.translations.store import TranslationStore


async def get_store(request: Request) -> TranslationStore:
    """Translation store attached to the running app."""
    return request.app.state.store


async def get_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    return request.app.state.settings
