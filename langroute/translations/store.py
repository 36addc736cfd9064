"""Translation bundle lookup on disk."""
from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from langroute.config.settings import TRANSLATIONS_DIR
from langroute.translations.codes import is_valid_language_code, validate_language_code
from langroute.translations.errors import (
    InvalidLanguageCode,
    MalformedTranslation,
    TranslationNotFound,
)

logger = logging.getLogger(__name__)


class TranslationStore:
    """Read-only access to ``{code}.json`` bundles in one directory.

    Every lookup reads the file again; freshness is left to HTTP caching.
    """

    def __init__(self, base_dir: Path | None = None):
        self.base_dir = Path(base_dir or TRANSLATIONS_DIR).resolve()

    def resolve_path(self, lang: str) -> Path:
        """Map a raw language parameter to its bundle path.

        Raises:
            InvalidLanguageCode: if the code is malformed or the path would
                leave the translations directory.
        """
        code = validate_language_code(lang)
        path = (self.base_dir / f"{code}.json").resolve()

        # Ensure path is within base_dir (prevent path traversal)
        try:
            path.relative_to(self.base_dir)
        except ValueError:
            raise InvalidLanguageCode(lang, f"Path escapes translations directory: {lang!r}")

        return path

    def load(self, lang: str) -> Any:
        """Read and parse the bundle for ``lang``.

        Raises:
            TranslationNotFound: file missing, unreadable or code rejected.
            MalformedTranslation: file content is not valid UTF-8 JSON.
        """
        path = self.resolve_path(lang)

        try:
            raw = path.read_bytes()
        except OSError as e:
            raise TranslationNotFound(lang, f"Cannot read {path.name}: {e.strerror or e}") from e

        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise MalformedTranslation(lang, f"Invalid JSON in {path.name}: {e}") from e

    async def get(self, lang: str) -> Any:
        """Load the bundle for ``lang`` without blocking the event loop."""
        return await asyncio.to_thread(self.load, lang)

    def available_languages(self) -> list[str]:
        """List language codes that have a bundle file."""
        if not self.base_dir.is_dir():
            logger.warning("Translations directory missing: %s", self.base_dir)
            return []
        return sorted(
            path.stem
            for path in self.base_dir.glob("*.json")
            if path.is_file() and is_valid_language_code(path.stem)
        )
