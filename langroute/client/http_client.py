"""HTTP client for the translation server."""
from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests

from langroute.config.settings import settings
from langroute.translations.errors import (
    MalformedTranslation,
    TranslationFetchError,
    TranslationNotFound,
)

logger = logging.getLogger(__name__)


class TranslationClient:
    """Fetch bundles from ``GET /translations/{lang}``."""

    def __init__(
        self,
        server_url: str | None = None,
        timeout: int | None = None,
        session: requests.Session | None = None,
    ):
        self.server_url = (server_url or settings.client.server_url).rstrip("/")
        self.timeout = timeout or settings.client.request_timeout
        self._session = session or requests.Session()

    def translations_url(self, lang: str) -> str:
        return f"{self.server_url}/translations/{quote(lang, safe='')}"

    def fetch(self, lang: str) -> dict[str, Any]:
        """Fetch and decode one bundle.

        Raises:
            TranslationNotFound: server answered 404.
            MalformedTranslation: server answered 500 or sent a non-JSON body.
            TranslationFetchError: network failure or any other status,
                redirects included.
        """
        url = self.translations_url(lang)
        logger.debug("Fetching translations from %s", url)

        try:
            response = self._session.get(url, timeout=self.timeout, allow_redirects=False)
        except requests.RequestException as e:
            raise TranslationFetchError(lang, f"Request to {url} failed: {e}") from e

        if response.status_code == 404:
            raise TranslationNotFound(lang, _error_message(response))
        if response.status_code == 500:
            raise MalformedTranslation(lang, _error_message(response))
        if response.status_code != 200:
            raise TranslationFetchError(
                lang, f"Unexpected status {response.status_code} from {url}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise MalformedTranslation(lang, f"Response from {url} is not JSON") from e

    def list_languages(self) -> dict[str, Any]:
        """Fetch the server's language listing."""
        url = f"{self.server_url}/translations"
        try:
            response = self._session.get(url, timeout=self.timeout, allow_redirects=False)
            response.raise_for_status()
            if response.status_code != 200:
                raise TranslationFetchError(
                    "*", f"Unexpected status {response.status_code} from {url}"
                )
            return response.json()
        except (requests.RequestException, ValueError) as e:
            raise TranslationFetchError("*", f"Cannot list languages from {url}: {e}") from e

    def close(self) -> None:
        self._session.close()


def _error_message(response: requests.Response) -> str | None:
    """Pull the ``error`` field out of an error body, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get("error")
    return None
