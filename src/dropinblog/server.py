"""aiohttp integration for dropinblog.

Installs the middleware into a host application and provides a standalone
preview server.
"""

import logging

from aiohttp import web

from dropinblog.app_keys import core_key
from dropinblog.config import BlogConfig, Config
from dropinblog.core import create_core
from dropinblog.html import RenderHtml, escape_html
from dropinblog.middleware import ErrorHandler, NotFoundHandler, create_dropinblog_middleware

logger = logging.getLogger(__name__)


def setup_dropinblog(
    app: web.Application,
    config: BlogConfig,
    *,
    render_html: RenderHtml | None = None,
    on_error: ErrorHandler | None = None,
    not_found_handler: NotFoundHandler | None = None,
) -> None:
    """Install the DropInBlog middleware into a host application.

    The upstream HTTP client is closed when the application shuts down.

    Args:
        app: Host application (not yet started)
        config: Blog configuration
        render_html: Optional custom document renderer
        on_error: Optional error handler
        not_found_handler: Optional handler for paths that are not blog routes
    """
    core = create_core(config)
    app[core_key] = core
    app.middlewares.append(
        create_dropinblog_middleware(
            config,
            render_html=render_html,
            on_error=on_error,
            not_found_handler=not_found_handler,
            core=core,
        )
    )
    app.on_cleanup.append(_close_client)
    logger.info(f"DropInBlog routes mounted at {core.router.base_path or '/'}")


async def _close_client(app: web.Application) -> None:
    """Close the upstream client on application cleanup."""
    await app[core_key].client.aclose()


def create_app(config: Config) -> web.Application:
    """Create the preview host application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()
    setup_dropinblog(app, config.blog)

    blog_path = app[core_key].router.base_path or "/"
    if blog_path != "/":

        async def index(request: web.Request) -> web.Response:
            href = escape_html(blog_path)
            return web.Response(
                text=f'<!DOCTYPE html>\n<html><body><a href="{href}">Blog</a></body></html>',
                content_type="text/html",
            )

        app.router.add_get("/", index)

    return app


def run_server(config: Config) -> None:
    """Run the preview server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
