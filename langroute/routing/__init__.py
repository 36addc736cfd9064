"""Language-prefixed routing."""
from langroute.routing.routes import (
    PAGES,
    RouteMatch,
    language_links,
    match_route,
    nav_links,
    page_path,
    switch_language,
)

__all__ = [
    "PAGES",
    "RouteMatch",
    "match_route",
    "switch_language",
    "page_path",
    "nav_links",
    "language_links",
]
