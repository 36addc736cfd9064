"""FastAPI entry point.

Run with ``langroute serve`` or ``uvicorn app.main:create_app --factory``.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.api.models.errors import ErrorMessages
from app.api.router import router as api_router
from app.routes.pages import router as pages_router
from langroute import __version__
from langroute.config.settings import Settings
from langroute.translations.errors import MalformedTranslation, TranslationNotFound
from langroute.translations.store import TranslationStore

logger = logging.getLogger(__name__)


PAGE_CSP = "default-src 'self'; style-src 'self' 'unsafe-inline'; frame-ancestors 'none'"

# Swagger UI and ReDoc pull their assets from jsdelivr
DOCS_CSP = (
    "default-src 'self'; "
    "script-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
    "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
    "img-src 'self' data: https://cdn.jsdelivr.net https://fastapi.tiangolo.com; "
    "frame-ancestors 'none'"
)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Stamp the fixed security headers and a CSP on every response."""

    def __init__(self, app, docs_paths: tuple[str, ...] = ()):
        super().__init__(app)
        self.docs_paths = frozenset(docs_paths)

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.update(SECURITY_HEADERS)
        response.headers["Content-Security-Policy"] = (
            DOCS_CSP if request.url.path in self.docs_paths else PAGE_CSP
        )
        return response


async def translation_not_found_handler(request: Request, exc: TranslationNotFound):
    logger.info("No translations for %r: %s", exc.language, exc)
    return JSONResponse(
        status_code=404,
        content={"error": ErrorMessages.TRANSLATION_NOT_FOUND},
    )


async def malformed_translation_handler(request: Request, exc: MalformedTranslation):
    logger.error("Broken translation bundle for %r: %s", exc.language, exc)
    return JSONResponse(
        status_code=500,
        content={"error": ErrorMessages.PARSE_FAILED},
    )


def create_app(
    settings: Settings | None = None,
    store: TranslationStore | None = None,
) -> FastAPI:
    """Build the application.

    The settings and translation store are attached to ``app.state`` and
    reach the route handlers through dependencies.
    """
    settings = settings or Settings()
    store = store or TranslationStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        languages = store.available_languages()
        logger.info(
            "Serving %d translation bundle(s) %s from %s",
            len(languages), languages, store.base_dir,
        )
        logger.info(
            "Server listening at http://%s:%d", settings.server.host, settings.server.port
        )
        yield

    app = FastAPI(
        title="langroute",
        description="""
Translation bundles for a language-routed site.

- `GET /translations/{lang}` - bundle for one language (`en-US` serves `en`)
- `GET /translations` - languages with a bundle
- `/{lang}` and `/{lang}/about` - rendered pages
""",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    # CORS middleware (single allowed client origin)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.server.allowed_origin],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.add_middleware(
        SecurityHeadersMiddleware,
        docs_paths=(app.docs_url, app.redoc_url, app.openapi_url),
    )

    app.add_exception_handler(TranslationNotFound, translation_not_found_handler)
    app.add_exception_handler(MalformedTranslation, malformed_translation_handler)

    # API first: the page router catches every remaining path, and
    # /translations/{lang:path} keeps slash-bearing codes on the API side
    app.include_router(api_router)
    app.include_router(pages_router)

    return app
