"""DropInBlog server-side rendering for aiohttp."""

from dropinblog.classify import RouteClassification, RouteClassifier, RouteKind
from dropinblog.config import BlogConfig, Config, ServerConfig
from dropinblog.core import (
    BlogClient,
    BlogCore,
    BlogRouter,
    FetchPayload,
    HeadDescriptor,
    build_head_descriptors,
    create_core,
    normalize_pathname,
)
from dropinblog.errors import BlogAPIError, ConfigError, DropInBlogError
from dropinblog.html import (
    escape_html,
    render_default_document,
    render_head_tags,
    render_html_template,
)
from dropinblog.middleware import create_dropinblog_middleware
from dropinblog.server import setup_dropinblog

__all__ = [
    "BlogAPIError",
    "BlogClient",
    "BlogConfig",
    "BlogCore",
    "BlogRouter",
    "Config",
    "ConfigError",
    "DropInBlogError",
    "FetchPayload",
    "HeadDescriptor",
    "RouteClassification",
    "RouteClassifier",
    "RouteKind",
    "ServerConfig",
    "build_head_descriptors",
    "create_core",
    "create_dropinblog_middleware",
    "escape_html",
    "normalize_pathname",
    "render_default_document",
    "render_head_tags",
    "render_html_template",
    "setup_dropinblog",
]
