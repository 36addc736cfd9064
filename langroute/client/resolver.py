"""Keep the active UI language in step with the route's language segment."""
from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

from langroute.config.settings import settings
from langroute.translations.errors import TranslationError

logger = logging.getLogger(__name__)

# Shown while a bundle for a newly selected language is in flight
LOADING_FALLBACK = "Loading Translations..."


class LanguageResolver:
    """Track the active language and load bundles in the background.

    ``resolve_active_language`` never blocks: it schedules a load on a worker
    thread and returns. Each load carries a generation token, and only the
    load started by the most recent navigation may update the state, so a
    slow response for an earlier language can never overwrite a later one.

    A failed load leaves the previous language and bundle active and keeps
    the error in ``last_error``.
    """

    def __init__(
        self,
        loader: Callable[[str], dict[str, Any]],
        initial_language: str | None = None,
        initial_bundle: dict[str, Any] | None = None,
        max_workers: int | None = None,
    ):
        self._loader = loader
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers or settings.client.max_workers,
            thread_name_prefix="langroute-resolver",
        )
        self._cond = threading.Condition()
        self._generation = 0
        self._pending: Future | None = None
        self._pending_language: str | None = None
        self._active_language = initial_language
        self._bundle: dict[str, Any] = dict(initial_bundle or {})
        self.last_error: Exception | None = None

    @property
    def active_language(self) -> str | None:
        with self._cond:
            return self._active_language

    @property
    def bundle(self) -> dict[str, Any]:
        with self._cond:
            return dict(self._bundle)

    @property
    def is_loading(self) -> bool:
        with self._cond:
            return self._pending is not None

    @property
    def pending_language(self) -> str | None:
        with self._cond:
            return self._pending_language

    def resolve_active_language(self, route_param: str | None) -> None:
        """Start switching to ``route_param`` if it is not already active."""
        if not route_param:
            return

        with self._cond:
            if route_param == self._pending_language:
                return
            if route_param == self._active_language and self._pending is None:
                return

            # Supersede whatever is in flight
            self._generation += 1
            token = self._generation
            if self._pending is not None:
                self._pending.cancel()
                logger.debug(
                    "Superseding load of %r with %r", self._pending_language, route_param
                )

            if route_param == self._active_language:
                # Navigated back to the language already shown
                self._pending = None
                self._pending_language = None
                self._cond.notify_all()
                return

            self._pending_language = route_param
            self._pending = self._executor.submit(self._load, route_param, token)

    def _load(self, language: str, token: int) -> None:
        """Run the loader (executed in thread pool)."""
        try:
            bundle = self._loader(language)
        except TranslationError as e:
            logger.warning("Could not load translations for %r: %s", language, e)
            self._settle(token, error=e)
            return
        except Exception as e:
            logger.exception("Unexpected error loading translations for %r", language)
            self._settle(token, error=e)
            return

        self._settle(token, language=language, bundle=bundle)

    def _settle(
        self,
        token: int,
        language: str | None = None,
        bundle: dict[str, Any] | None = None,
        error: Exception | None = None,
    ) -> None:
        with self._cond:
            if token != self._generation:
                logger.debug("Discarding stale translations for %r", language)
                return

            self._pending = None
            self._pending_language = None
            if error is not None:
                self.last_error = error
            else:
                self._active_language = language
                self._bundle = dict(bundle or {})
                self.last_error = None
            self._cond.notify_all()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until no load is in flight. Returns False on timeout."""
        with self._cond:
            return self._cond.wait_for(lambda: self._pending is None, timeout)

    def translate(self, key: str) -> str:
        """Look up ``key`` in the active bundle, falling back to the key itself."""
        with self._cond:
            value = self._bundle.get(key)
        return value if isinstance(value, str) else key

    def shutdown(self, wait: bool = True) -> None:
        """Shutdown the executor, dropping any load that has not started."""
        self._executor.shutdown(wait=wait, cancel_futures=True)
        with self._cond:
            # A cancelled load never settles
            if self._pending is not None and self._pending.cancelled():
                self._generation += 1
                self._pending = None
                self._pending_language = None
            self._cond.notify_all()
