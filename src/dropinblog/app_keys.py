"""Application keys for type-safe app configuration access."""

from aiohttp import web

from dropinblog.core import BlogCore

core_key = web.AppKey("dropinblog_core", BlogCore)
