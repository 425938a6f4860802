"""Blog content route table.

Maps normalized paths under the blog base path to content kinds and resolves
them into upstream payloads.
"""

import re
from dataclasses import dataclass, field
from enum import StrEnum
from urllib.parse import unquote

from dropinblog.core.client import BlogClient
from dropinblog.core.paths import normalize_pathname
from dropinblog.core.types import FetchPayload, URLPath

# Segments that can never be a post slug directly below the base path
RESERVED_SEGMENTS = frozenset({"page", "category", "author", "feed", "sitemap.xml"})


class ContentKind(StrEnum):
    MAIN_LIST = "main_list"
    POST = "post"
    CATEGORY = "category"
    AUTHOR = "author"


@dataclass(frozen=True)
class RouteMatch:
    """A content route recognized by the router."""

    kind: ContentKind
    params: dict[str, str] = field(default_factory=dict)

    @property
    def page(self) -> int:
        return int(self.params.get("page", "1"))


@dataclass(frozen=True)
class Resolution:
    """A matched route together with its fetched payload."""

    match: RouteMatch
    payload: FetchPayload


class BlogRouter:
    """Recognizes blog content paths and fetches their payloads.

    Paths are expected in normalized form (see normalize_pathname).
    """

    def __init__(self, client: BlogClient, base_path: str) -> None:
        self._client = client
        self._base_path = base_prefix(base_path)
        base = re.escape(self._base_path)
        page = r"(?:/page/(?P<page>[1-9][0-9]*))?"
        self._routes: list[tuple[re.Pattern[str], ContentKind]] = [
            (_route(rf"^{base}{page}/?$"), ContentKind.MAIN_LIST),
            (_route(rf"^{base}/category/(?P<slug>[^/]+){page}/?$"), ContentKind.CATEGORY),
            (_route(rf"^{base}/author/(?P<slug>[^/]+){page}/?$"), ContentKind.AUTHOR),
            (_route(rf"^{base}/(?P<slug>[^/]+)/?$"), ContentKind.POST),
        ]

    @property
    def base_path(self) -> str:
        return self._base_path

    def match(self, path: URLPath | str) -> RouteMatch | None:
        """Match a normalized path against the content routes.

        Args:
            path: Normalized request path

        Returns:
            RouteMatch with decoded params, or None if the path is not a blog route
        """
        for pattern, kind in self._routes:
            m = pattern.match(path)
            if m is None:
                continue
            params = {k: unquote(v) for k, v in m.groupdict().items() if v is not None}
            if kind is ContentKind.POST and params["slug"].lower() in RESERVED_SEGMENTS:
                return None
            return RouteMatch(kind=kind, params=params)
        return None

    async def resolve(self, path: URLPath | str) -> Resolution:
        """Fetch the payload for a content path.

        Raises:
            LookupError: If the path is not a blog content route
            httpx.HTTPError: If the upstream request fails
        """
        route = self.match(path)
        if route is None:
            raise LookupError(f"Not a blog route: {path}")

        match route.kind:
            case ContentKind.MAIN_LIST:
                payload = await self._client.fetch_main_list(route.page)
            case ContentKind.POST:
                payload = await self._client.fetch_post(route.params["slug"])
            case ContentKind.CATEGORY:
                payload = await self._client.fetch_category(route.params["slug"], route.page)
            case ContentKind.AUTHOR:
                payload = await self._client.fetch_author(route.params["slug"], route.page)

        return Resolution(match=route, payload=payload)


def _route(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


def base_prefix(base_path: str) -> str:
    """Normalize a base path into a pattern prefix ("" for the site root)."""
    normalized = normalize_pathname(base_path)
    return "" if normalized == "/" else normalized
