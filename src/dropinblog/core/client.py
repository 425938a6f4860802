"""DropInBlog API client.

Async HTTP client for the DropInBlog rendered-content API. Every fetch returns
a FetchPayload; an upstream 404 yields an empty payload so callers can treat
the resource as not available.
"""

import logging
from typing import Any, TypedDict
from urllib.parse import quote

import httpx

from dropinblog.core.types import FetchPayload
from dropinblog.errors import BlogAPIError

logger = logging.getLogger(__name__)


class EnvelopeDict(TypedDict, total=False):
    """JSON envelope wrapping every API response."""

    success: bool
    message: str
    data: dict[str, Any]


class BlogClient:
    """Async HTTP client for the DropInBlog API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_url: str,
        blog_id: str,
    ) -> None:
        """Initialize DropInBlog client.

        Args:
            client: httpx AsyncClient carrying auth headers, timeout and transport
            api_url: API root (e.g., https://api.dropinblog.com/v2)
            blog_id: DropInBlog blog identifier
        """
        self.client = client
        self.api_url = api_url.rstrip("/")
        self.blog_id = blog_id
        self.blog_url = f"{self.api_url}/blog/{quote(blog_id, safe='')}/rendered"

    async def aclose(self) -> None:
        await self.client.aclose()

    async def fetch_sitemap(self) -> FetchPayload:
        return await self._get("sitemap")

    async def fetch_feed(self) -> FetchPayload:
        return await self._get("feed")

    async def fetch_category_feed(self, slug: str) -> FetchPayload:
        return await self._get(f"feed/category/{_segment(slug)}")

    async def fetch_author_feed(self, slug: str) -> FetchPayload:
        return await self._get(f"feed/author/{_segment(slug)}")

    async def fetch_main_list(self, page: int = 1) -> FetchPayload:
        return await self._get("list", page=page)

    async def fetch_post(self, slug: str) -> FetchPayload:
        return await self._get(f"post/{_segment(slug)}")

    async def fetch_category(self, slug: str, page: int = 1) -> FetchPayload:
        return await self._get(f"category/{_segment(slug)}", page=page)

    async def fetch_author(self, slug: str, page: int = 1) -> FetchPayload:
        return await self._get(f"author/{_segment(slug)}", page=page)

    async def _get(self, path: str, *, page: int | None = None) -> FetchPayload:
        """Fetch a rendered resource and unwrap the response envelope.

        Args:
            path: Resource path relative to the rendered API root
            page: Optional page number for paginated listings

        Returns:
            Payload data, empty when the resource does not exist upstream

        Raises:
            httpx.HTTPError: If the request fails or returns a non-404 error status
            BlogAPIError: If the API reports an unsuccessful response
        """
        params = {"page": str(page)} if page is not None and page > 1 else None

        logger.info(f"Fetching {path} for blog {self.blog_id}")
        response = await self.client.get(f"{self.blog_url}/{path}", params=params)
        if response.status_code == 404:
            logger.info(f"Resource {path} not found upstream")
            return {}
        if response.status_code >= 400:
            logger.error(f"Error response for {path}: {response.text}")
        response.raise_for_status()

        envelope: EnvelopeDict = response.json()
        if not envelope.get("success", True):
            raise BlogAPIError(envelope.get("message", "Request failed"), path=path)

        data: FetchPayload = envelope.get("data") or {}  # type: ignore[assignment]
        return data


def create_http_client(
    api_token: str,
    *,
    timeout: float = 10.0,
    retries: int = 2,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an httpx AsyncClient configured for the DropInBlog API.

    Connection failures are retried by the transport; HTTP error statuses are not.

    Args:
        api_token: Bearer token for the Authorization header
        timeout: Request timeout in seconds
        retries: Connection retry attempts
        transport: Optional transport override (e.g., httpx.MockTransport in tests)

    Returns:
        Configured AsyncClient
    """
    return httpx.AsyncClient(
        headers={
            "Authorization": f"Bearer {api_token}",
            "Accept": "application/json",
        },
        timeout=timeout,
        transport=transport or httpx.AsyncHTTPTransport(retries=retries),
    )


def _segment(value: str) -> str:
    return quote(value, safe="")
