"""Client side of the translation pipeline."""
from langroute.client.http_client import TranslationClient
from langroute.client.resolver import LOADING_FALLBACK, LanguageResolver

__all__ = ["TranslationClient", "LanguageResolver", "LOADING_FALLBACK"]
