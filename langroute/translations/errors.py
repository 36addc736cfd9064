"""Translation lookup errors."""
from __future__ import annotations


class TranslationError(Exception):
    """Base class for translation lookup failures."""

    message = "Translation error"

    def __init__(self, language: str, detail: str | None = None):
        self.language = language
        self.detail = detail
        super().__init__(detail or f"{self.message}: {language!r}")


class TranslationNotFound(TranslationError):
    """No bundle exists (or can be read) for the requested language."""

    message = "Translation not found"


class InvalidLanguageCode(TranslationNotFound):
    """Language code rejected before any file path was built."""

    message = "Translation not found"


class MalformedTranslation(TranslationError):
    """Bundle exists but its contents are not valid JSON."""

    message = "Failed to parse JSON"


class TranslationFetchError(TranslationError):
    """Transport failure or unexpected response from the translation server."""

    message = "Failed to fetch translations"
