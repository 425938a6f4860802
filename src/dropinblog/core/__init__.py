"""Content-resolution core for DropInBlog.

Wires the API client, the content router and the resolved configuration
together. Everything here is built once and shared read-only across requests.
"""

from dataclasses import dataclass

import httpx

from dropinblog.config import BlogConfig
from dropinblog.core.client import BlogClient, create_http_client
from dropinblog.core.head import HeadDescriptor, build_head_descriptors
from dropinblog.core.paths import normalize_pathname
from dropinblog.core.router import BlogRouter, ContentKind, Resolution, RouteMatch
from dropinblog.core.types import FetchPayload, URLPath

__all__ = [
    "BlogClient",
    "BlogCore",
    "BlogRouter",
    "ContentKind",
    "FetchPayload",
    "HeadDescriptor",
    "Resolution",
    "RouteMatch",
    "URLPath",
    "build_head_descriptors",
    "create_core",
    "normalize_pathname",
]


@dataclass(frozen=True)
class BlogCore:
    router: BlogRouter
    client: BlogClient
    config: BlogConfig


def create_core(
    config: BlogConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> BlogCore:
    """Create the client and router for a blog configuration.

    Args:
        config: Blog configuration (blog_id and api_token are required)
        transport: Optional httpx transport override

    Returns:
        BlogCore sharing one httpx client between client and router

    Raises:
        ConfigError: If credentials are missing
    """
    blog_id, api_token = config.require_credentials()
    http_client = create_http_client(
        api_token,
        timeout=config.timeout,
        retries=config.retries,
        transport=transport,
    )
    client = BlogClient(http_client, config.api_url, blog_id)
    router = BlogRouter(client, config.base_path)
    return BlogCore(router=router, client=client, config=config)
