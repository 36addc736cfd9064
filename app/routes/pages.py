"""Web UI routes.

Every non-API path is matched against the language route table:
``/`` redirects to the default language, ``/{lang}`` and ``/{lang}/about``
render pages, and any other path below a language renders that language's
not-found page.
"""
from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from app.api.deps import get_settings, get_store
from app.i18n import get_translator, load_page_bundle
from langroute.config.settings import Settings
from langroute.routing import language_links, match_route, nav_links
from langroute.translations.store import TranslationStore

TEMPLATES = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

router = APIRouter()


@router.get("/{path:path}", include_in_schema=False)
async def page(
    request: Request,
    store: TranslationStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Render the page for a language-prefixed path."""
    match = match_route(request.url.path, settings.languages.default_language)
    if match.kind == "redirect":
        return RedirectResponse(match.location)

    bundle = await load_page_bundle(store, match.language)
    template = f"{match.page}.html" if match.kind == "page" else "not_found.html"

    return TEMPLATES.TemplateResponse(
        request,
        template,
        {
            "lang": match.language,
            "t": get_translator(bundle),
            "nav_links": nav_links(match.language),
            "language_links": language_links(
                request.url.path, settings.languages.switcher_languages
            ),
        },
        status_code=200 if match.kind == "page" else 404,
    )
