"""URL path normalization."""

import re

from dropinblog.core.types import URLPath

_REPEATED_SLASHES = re.compile(r"/{2,}")


def normalize_pathname(path: str) -> URLPath:
    """Canonicalize a request path.

    Drops query string and fragment, guarantees a leading slash, collapses
    repeated slashes and removes the trailing slash (except for the root).
    Percent-encoding and case are left untouched.

    Args:
        path: Raw request path, possibly with query string

    Returns:
        Normalized URL path
    """
    path = path.split("?", 1)[0].split("#", 1)[0]
    path = _REPEATED_SLASHES.sub("/", "/" + path)
    if len(path) > 1:
        path = path.rstrip("/")
    return URLPath(path)


def join_base_path(base_path: str, suffix: str = "") -> URLPath:
    """Join a blog base path with a route suffix and normalize the result."""
    return normalize_pathname(f"{base_path}/{suffix}")
