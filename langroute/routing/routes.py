"""Language-prefixed route table and path rewriting.

Paths have the shape ``/{lang}/{page}``: segment 1 always holds the language
code and everything after it identifies the page.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from langroute.translations.codes import is_valid_language_code, normalize_language_code

# Page name -> sub-path below the language segment
PAGES: dict[str, str] = {
    "home": "",
    "about": "about",
}


@dataclass(frozen=True)
class RouteMatch:
    """Outcome of matching a path against the route table."""

    kind: Literal["redirect", "page", "not_found"]
    language: str | None = None
    page: str | None = None
    location: str | None = None


def _split(path: str) -> list[str]:
    if not path.startswith("/"):
        path = f"/{path}"
    return path.split("/")


def switch_language(current_path: str, new_language: str) -> str:
    """Rewrite the language segment of ``current_path``.

    Only segment 1 changes; deeper segments (and trailing slashes) are kept
    as they are.

    Examples:
        >>> switch_language("/en/about", "fr")
        '/fr/about'
        >>> switch_language("/en", "fr")
        '/fr'
    """
    segments = _split(current_path)
    segments[1] = new_language
    return "/".join(segments)


def match_route(path: str, default_language: str = "en") -> RouteMatch:
    """Resolve ``path`` to a page, a redirect or a language-scoped not-found.

    ``/`` and paths whose first segment is not a usable language code
    redirect to the default language. A valid language segment followed by
    an unknown sub-path yields ``not_found`` for that language.
    """
    segments = _split(path)
    language = segments[1]
    default_location = f"/{default_language}"

    if not language or not is_valid_language_code(normalize_language_code(language)):
        return RouteMatch(kind="redirect", location=default_location)

    rest = segments[2:]
    # Tolerate a single trailing slash
    if rest and rest[-1] == "":
        rest = rest[:-1]

    sub_path = "/".join(rest)
    for page, page_path in PAGES.items():
        if sub_path == page_path:
            return RouteMatch(kind="page", language=language, page=page)

    return RouteMatch(kind="not_found", language=language)


def page_path(language: str, page: str = "home") -> str:
    """Build the path of ``page`` in ``language``."""
    sub_path = PAGES[page]
    return f"/{language}/{sub_path}" if sub_path else f"/{language}"


def nav_links(language: str) -> list[tuple[str, str]]:
    """Header navigation as ``(translation key, href)`` pairs."""
    return [(f"nav.{page}", page_path(language, page)) for page in PAGES]


def language_links(current_path: str, languages: list[str]) -> list[tuple[str, str]]:
    """Language switcher as ``(label, href)`` pairs keeping the current page."""
    return [(code.upper(), switch_language(current_path, code)) for code in languages]
