"""Configuration management for dropinblog.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from dropinblog.errors import ConfigError

CONFIG_FILENAME = "dropinblog.toml"
DEFAULT_API_URL = "https://api.dropinblog.com/v2"


@dataclass
class ServerConfig:
    """Preview server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class BlogConfig:
    """DropInBlog connection and routing configuration."""

    blog_id: str | None = None
    api_token: str | None = field(default=None, repr=False)
    base_path: str = "/blog"
    api_url: str = DEFAULT_API_URL
    timeout: float = 10.0
    retries: int = 2

    def require_credentials(self) -> tuple[str, str]:
        """Return (blog_id, api_token), failing when either is missing.

        Raises:
            ConfigError: If blog_id or api_token is not configured
        """
        if not self.blog_id:
            raise ConfigError("blog.blog_id is required")
        if not self.api_token:
            raise ConfigError("blog.api_token is required")
        return self.blog_id, self.api_token


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    blog: BlogConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for dropinblog.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ConfigError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        return cls(server=ServerConfig(), blog=BlogConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ConfigError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid TOML in {path}: {e}") from e

        server = cls._parse_server(data.get("server"))
        blog = cls._parse_blog(data.get("blog"))

        return cls(server=server, blog=blog, config_path=path)

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ConfigError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ConfigError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ConfigError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_blog(cls, data: object) -> BlogConfig:
        """Parse blog configuration section.

        Args:
            data: Raw blog section data

        Returns:
            BlogConfig instance
        """
        if data is None:
            return BlogConfig()

        if not isinstance(data, dict):
            raise ConfigError("blog section must be a dictionary")

        blog_id = data.get("blog_id")
        if blog_id is not None and not isinstance(blog_id, str):
            raise ConfigError("blog.blog_id must be a string")

        api_token = data.get("api_token")
        if api_token is not None and not isinstance(api_token, str):
            raise ConfigError("blog.api_token must be a string")

        base_path = data.get("base_path", "/blog")
        if not isinstance(base_path, str):
            raise ConfigError("blog.base_path must be a string")

        api_url = data.get("api_url", DEFAULT_API_URL)
        if not isinstance(api_url, str):
            raise ConfigError("blog.api_url must be a string")

        timeout = data.get("timeout", 10.0)
        if not isinstance(timeout, int | float) or isinstance(timeout, bool):
            raise ConfigError("blog.timeout must be a number")
        if timeout <= 0:
            raise ConfigError("blog.timeout must be positive")

        retries = data.get("retries", 2)
        if not isinstance(retries, int) or isinstance(retries, bool):
            raise ConfigError("blog.retries must be an integer")
        if retries < 0:
            raise ConfigError("blog.retries must not be negative")

        return BlogConfig(
            blog_id=blog_id,
            api_token=api_token,
            base_path=base_path,
            api_url=api_url,
            timeout=float(timeout),
            retries=retries,
        )

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        base_path: str | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            base_path: Override blog.base_path

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        blog = self.blog
        if base_path is not None:
            blog = replace(self.blog, base_path=base_path)

        return replace(self, server=server, blog=blog)
