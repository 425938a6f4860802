"""Shared test fixtures."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest
from aiohttp import web
from dropinblog.config import BlogConfig
from dropinblog.core import BlogCore, create_core
from dropinblog.middleware import create_dropinblog_middleware

API_URL = "https://api.dropinblog.test/v2"
BLOG_ID = "test-blog"
RENDERED_PREFIX = f"/v2/blog/{BLOG_ID}/rendered/"


class FakeUpstream:
    """In-memory DropInBlog API served through httpx.MockTransport.

    Responses are keyed by the decoded resource path below the rendered API
    root (e.g. "feed/category/shoes"). Unknown resources answer 404.
    """

    def __init__(self) -> None:
        self.responses: dict[str, httpx.Response] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        resource: str,
        data: dict[str, Any] | None = None,
        *,
        status: int = 200,
        success: bool = True,
        message: str | None = None,
    ) -> None:
        envelope: dict[str, Any] = {"success": success, "data": data or {}}
        if message is not None:
            envelope["message"] = message
        self.responses[resource] = httpx.Response(status, json=envelope)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        resource = request.url.path.removeprefix(RENDERED_PREFIX)
        if resource in self.responses:
            return self.responses[resource]
        return httpx.Response(404, json={"success": False, "message": "Not found"})

    @property
    def resources(self) -> list[str]:
        return [r.url.path.removeprefix(RENDERED_PREFIX) for r in self.requests]


@pytest.fixture
def blog_config() -> BlogConfig:
    """Blog configuration pointing at the fake API, mounted at /blog."""
    return BlogConfig(
        blog_id=BLOG_ID,
        api_token="secret-token",
        base_path="/blog",
        api_url=API_URL,
    )


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def core(blog_config: BlogConfig, upstream: FakeUpstream) -> BlogCore:
    """Content core whose HTTP client talks to the fake upstream."""
    return create_core(blog_config, transport=httpx.MockTransport(upstream.handle))


async def host_page(request: web.Request) -> web.Response:
    return web.Response(text="host page")


@pytest.fixture
def make_app(core: BlogCore) -> Callable[..., web.Application]:
    """Factory for a host app with the DropInBlog middleware installed.

    The host serves its own route at /about.
    """

    def factory(**options: Any) -> web.Application:
        middleware = create_dropinblog_middleware(core.config, core=core, **options)
        app = web.Application(middlewares=[middleware])
        app.router.add_get("/about", host_page)
        return app

    return factory
