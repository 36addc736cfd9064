"""Translation bundles and their lookup."""
from langroute.translations.codes import (
    is_valid_language_code,
    normalize_language_code,
    validate_language_code,
)
from langroute.translations.errors import (
    InvalidLanguageCode,
    MalformedTranslation,
    TranslationError,
    TranslationFetchError,
    TranslationNotFound,
)
from langroute.translations.store import TranslationStore

__all__ = [
    "TranslationStore",
    "normalize_language_code",
    "validate_language_code",
    "is_valid_language_code",
    "TranslationError",
    "TranslationNotFound",
    "InvalidLanguageCode",
    "MalformedTranslation",
    "TranslationFetchError",
]
