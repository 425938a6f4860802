"""Request path classification.

Decides which kind of blog resource a normalized path refers to. Rules are
evaluated in a fixed order and the first one that matches wins.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from urllib.parse import unquote

from dropinblog.core.paths import join_base_path
from dropinblog.core.router import base_prefix
from dropinblog.core.types import URLPath


class RouteKind(StrEnum):
    SITEMAP = "sitemap"
    FEED = "feed"
    CATEGORY_FEED = "category_feed"
    AUTHOR_FEED = "author_feed"
    CONTENT = "content"
    UNMATCHED = "unmatched"


@dataclass(frozen=True)
class RouteClassification:
    """Kind of a request path plus the decoded slug for per-slug feeds."""

    kind: RouteKind
    slug: str | None = None


# Returns the slug (or "" when the rule carries none) on match, None otherwise
Predicate = Callable[[URLPath], str | None]
Rule = tuple[Predicate, Callable[[str], RouteClassification]]

_EXTENSION = r"(?:\.(?:xml|rss))?/?$"


class RouteClassifier:
    """Ordered chain of (predicate, classification) rules.

    All patterns are anchored at the escaped base path and compiled once.

    Args:
        base_path: Blog base path (e.g., "/blog")
        content_match: Predicate recognizing blog content routes
    """

    def __init__(self, base_path: str, content_match: Callable[[URLPath], object]) -> None:
        base = re.escape(base_prefix(base_path))
        self._sitemap_path = join_base_path(base_path, "sitemap.xml").lower()
        self._feed = re.compile(rf"^{base}/feed{_EXTENSION}", re.IGNORECASE)
        self._category_feed = re.compile(
            rf"^{base}/feed/category/([^/]+?){_EXTENSION}", re.IGNORECASE
        )
        self._author_feed = re.compile(
            rf"^{base}/feed/author/([^/]+?){_EXTENSION}", re.IGNORECASE
        )
        self._content_match = content_match

        self._rules: list[Rule] = [
            (self._is_sitemap, lambda _: RouteClassification(RouteKind.SITEMAP)),
            (_matcher(self._feed), lambda _: RouteClassification(RouteKind.FEED)),
            (
                _matcher(self._category_feed),
                lambda slug: RouteClassification(RouteKind.CATEGORY_FEED, slug),
            ),
            (
                _matcher(self._author_feed),
                lambda slug: RouteClassification(RouteKind.AUTHOR_FEED, slug),
            ),
            (self._is_content, lambda _: RouteClassification(RouteKind.CONTENT)),
        ]

    def classify(self, path: URLPath) -> RouteClassification:
        for predicate, build in self._rules:
            captured = predicate(path)
            if captured is not None:
                return build(captured)
        return RouteClassification(RouteKind.UNMATCHED)

    def _is_sitemap(self, path: URLPath) -> str | None:
        return "" if path.lower() == self._sitemap_path else None

    def _is_content(self, path: URLPath) -> str | None:
        return "" if self._content_match(path) else None


def _matcher(pattern: re.Pattern[str]) -> Predicate:
    def predicate(path: URLPath) -> str | None:
        m = pattern.match(path)
        if m is None:
            return None
        return unquote(m.group(1)) if pattern.groups else ""

    return predicate
