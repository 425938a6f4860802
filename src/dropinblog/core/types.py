"""Core type definitions."""

from typing import Any, NewType, TypedDict

# Normalized URL path (e.g., "/blog", "/blog/my-post")
# Distinct from raw request paths to catch missing normalization
URLPath = NewType("URLPath", str)


class HeadItemDict(TypedDict, total=False):
    """Raw head element as returned by the DropInBlog API."""

    tag: str
    content: str
    attributes: dict[str, str]


class FetchPayload(TypedDict, total=False):
    """Payload returned by every upstream fetch.

    Exactly one of sitemap, feed or body_html is expected per successful fetch.
    None of them present means the resource is not available.
    """

    content_type: str
    sitemap: str
    feed: str
    body_html: str
    head_data: dict[str, Any]
    head_items: list[HeadItemDict]
