"""Translation bundle endpoints."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_settings, get_store
from app.api.models.errors import ErrorResponse
from app.api.models.responses import LanguagesResponse
from langroute.config.settings import Settings
from langroute.translations.store import TranslationStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Translations"])


@router.get(
    "/translations",
    response_model=LanguagesResponse,
    summary="List languages",
    description="List the language codes that have a translation bundle.",
)
async def list_languages(
    store: TranslationStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> LanguagesResponse:
    """Return available languages and the default one."""
    return LanguagesResponse(
        languages=store.available_languages(),
        default=settings.languages.default_language,
    )


@router.get(
    "/translations/{lang:path}",
    responses={
        200: {
            "description": "Translation bundle (key to localized string)",
            "content": {"application/json": {"example": {"nav.home": "Home"}}},
        },
        404: {"model": ErrorResponse, "description": "No bundle for this language"},
        500: {"model": ErrorResponse, "description": "Bundle is not valid JSON"},
    },
    summary="Get translations",
    description="""
Serve the translation bundle for one language.

A region suffix is ignored: `en-US` serves the `en` bundle. Anything that
is not a plain language code, including codes holding a `/`, is a 404.
Successful responses are cacheable publicly for an hour.
""",
)
async def get_translations(
    lang: str,
    store: TranslationStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Serve the bundle for ``lang``; lookup errors go to the app's handlers."""
    bundle = await store.get(lang)
    logger.debug("Serving translations for %r", lang)

    return JSONResponse(
        content=bundle,
        headers={"Cache-Control": f"public, max-age={settings.server.cache_max_age}"},
    )
