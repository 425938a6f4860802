"""aiohttp middleware serving DropInBlog content.

Classifies each request path and either answers it (sitemap, feeds, blog
pages) or hands it back to the host application.
"""

import logging
from collections.abc import Awaitable, Callable

from aiohttp import web

from dropinblog.classify import RouteClassification, RouteClassifier, RouteKind
from dropinblog.config import BlogConfig
from dropinblog.core import BlogCore, build_head_descriptors, create_core, normalize_pathname
from dropinblog.core.types import FetchPayload, URLPath
from dropinblog.html import DocumentRenderer, RenderHtml, select_document_renderer

logger = logging.getLogger(__name__)

XML_CONTENT_TYPE = "application/xml; charset=utf-8"

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]
Middleware = Callable[[web.Request, Handler], Awaitable[web.StreamResponse]]
NotFoundHandler = Middleware
ErrorHandler = Callable[[Exception, web.Request], Awaitable[web.StreamResponse]]


def create_dropinblog_middleware(
    config: BlogConfig,
    *,
    render_html: RenderHtml | None = None,
    on_error: ErrorHandler | None = None,
    not_found_handler: NotFoundHandler | None = None,
    core: BlogCore | None = None,
) -> Middleware:
    """Create the DropInBlog middleware.

    Patterns, renderer and upstream client are built here once and shared by
    every request.

    Args:
        config: Blog configuration
        render_html: Custom document renderer, called with keyword arguments
                     content, head_descriptors and pathname
        on_error: Coroutine receiving (error, request) that produces the
                  response for any fault raised while serving a blog route
        not_found_handler: Middleware-style coroutine (request, handler) invoked
                           for paths that are not blog routes
        core: Prebuilt content core (defaults to create_core(config))

    Returns:
        aiohttp middleware
    """
    if core is None:
        core = create_core(config)
    classifier = RouteClassifier(core.config.base_path, core.router.match)
    renderer = select_document_renderer(render_html)
    client = core.client

    async def respond(pathname: URLPath, route: RouteClassification) -> web.StreamResponse | None:
        slug = route.slug or ""
        match route.kind:
            case RouteKind.SITEMAP:
                return _xml_response(await client.fetch_sitemap(), "Sitemap not available")
            case RouteKind.FEED:
                return _xml_response(await client.fetch_feed(), "Feed not available")
            case RouteKind.CATEGORY_FEED:
                return _xml_response(
                    await client.fetch_category_feed(slug),
                    f'No feed available for category "{slug}"',
                )
            case RouteKind.AUTHOR_FEED:
                return _xml_response(
                    await client.fetch_author_feed(slug),
                    f'No feed available for author "{slug}"',
                )
            case RouteKind.CONTENT:
                return await _html_response(core, renderer, pathname)
            case RouteKind.UNMATCHED:
                return None

    @web.middleware
    async def dropinblog_middleware(
        request: web.Request, handler: Handler
    ) -> web.StreamResponse:
        try:
            pathname = normalize_pathname(request.raw_path)
            route = classifier.classify(pathname)
            logger.debug(f"{pathname} classified as {route.kind}")
            response = await respond(pathname, route)
        except Exception as e:
            if on_error is not None:
                return await on_error(e, request)
            logger.exception(f"DropInBlog SSR error for {request.path}")
            return web.Response(status=500, text="Internal Server Error")

        if response is not None:
            return response
        if not_found_handler is not None:
            return await not_found_handler(request, handler)
        return await handler(request)

    return dropinblog_middleware


def _xml_response(payload: FetchPayload, not_found_message: str) -> web.Response:
    content = payload.get("sitemap") or payload.get("feed") or payload.get("body_html")
    if not content:
        return web.Response(status=404, text=not_found_message)
    # bytes body: Content-Type is sent exactly as given
    return web.Response(
        body=content.encode("utf-8"),
        headers={"Content-Type": payload.get("content_type") or XML_CONTENT_TYPE},
    )


async def _html_response(
    core: BlogCore, renderer: DocumentRenderer, pathname: URLPath
) -> web.Response:
    resolution = await core.router.resolve(pathname)
    payload = resolution.payload

    content = payload.get("body_html") or ""
    head_descriptors = build_head_descriptors(
        payload.get("head_data"),
        payload.get("head_items"),
    )
    html = renderer.render(content, head_descriptors, pathname)
    return web.Response(text=html, content_type="text/html")
