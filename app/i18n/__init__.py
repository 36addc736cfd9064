"""Server-side translation helpers for rendered pages."""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from langroute.translations.errors import TranslationError
from langroute.translations.store import TranslationStore

logger = logging.getLogger(__name__)


async def load_page_bundle(store: TranslationStore, lang: str) -> dict[str, Any]:
    """Load the bundle used to render a page in ``lang``.

    A missing or broken bundle renders the page with raw keys instead of
    failing the page; there is no fallback to another language.
    """
    try:
        bundle = await store.get(lang)
    except TranslationError as e:
        logger.warning("Rendering %r without translations: %s", lang, e)
        return {}

    if not isinstance(bundle, dict):
        logger.warning("Bundle for %r is not a JSON object, ignoring it", lang)
        return {}
    return bundle


def get_translator(bundle: dict[str, Any]) -> Callable[[str], str]:
    """Return ``t(key)`` that falls back to the key when it is missing."""

    def t(key: str) -> str:
        value = bundle.get(key)
        return value if isinstance(value, str) else key

    return t
