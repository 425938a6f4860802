"""Exception hierarchy for dropinblog."""


class DropInBlogError(Exception):
    """Base class for all dropinblog errors."""


class BlogAPIError(DropInBlogError):
    """The DropInBlog API answered with an unsuccessful envelope."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(f"{message} (request: {path})")
        self.path = path


class ConfigError(DropInBlogError, ValueError):
    """Configuration is missing or invalid."""
