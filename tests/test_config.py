"""Tests for configuration loading."""

from pathlib import Path
from unittest.mock import patch

import pytest
from dropinblog.config import DEFAULT_API_URL, BlogConfig, Config, ServerConfig
from dropinblog.errors import ConfigError


class TestConfigLoad:
    """Tests for Config.load()."""

    def test__explicit_path__loads_config(self, tmp_path: Path) -> None:
        """Load config from explicit path."""
        config_file = tmp_path / "dropinblog.toml"
        config_file.write_text("""
[server]
host = "0.0.0.0"
port = 3000

[blog]
blog_id = "abc123"
api_token = "token456"
base_path = "/news"
api_url = "https://api.example.com/v2"
timeout = 5
retries = 0
""")

        config = Config.load(config_file)

        assert config.server.host == "0.0.0.0"
        assert config.server.port == 3000
        assert config.blog.blog_id == "abc123"
        assert config.blog.api_token == "token456"
        assert config.blog.base_path == "/news"
        assert config.blog.api_url == "https://api.example.com/v2"
        assert config.blog.timeout == 5.0
        assert config.blog.retries == 0
        assert config.config_path == config_file

    def test__minimal_config__uses_defaults(self, tmp_path: Path) -> None:
        """Load minimal config with defaults."""
        config_file = tmp_path / "dropinblog.toml"
        config_file.write_text("")

        config = Config.load(config_file)

        assert config.server == ServerConfig()
        assert config.blog.blog_id is None
        assert config.blog.api_token is None
        assert config.blog.base_path == "/blog"
        assert config.blog.api_url == DEFAULT_API_URL
        assert config.blog.timeout == 10.0
        assert config.blog.retries == 2

    def test__missing_explicit_path__raises_error(self, tmp_path: Path) -> None:
        """Raise FileNotFoundError for missing explicit config file."""
        config_file = tmp_path / "nonexistent.toml"

        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            Config.load(config_file)

    def test__no_path_no_discovery__returns_defaults(self) -> None:
        """Return defaults when no config file found."""
        with patch.object(Config, "_discover_config", return_value=None):
            config = Config.load()

        assert config.server.port == 8080
        assert config.blog == BlogConfig()
        assert config.config_path is None

    def test__discovery__finds_config_in_parent(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Discover dropinblog.toml in a parent directory."""
        (tmp_path / "dropinblog.toml").write_text('[blog]\nblog_id = "found"\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        config = Config.load()

        assert config.blog.blog_id == "found"
        assert config.config_path == tmp_path / "dropinblog.toml"

    def test__invalid_toml__raises_config_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / "dropinblog.toml"
        config_file.write_text("[blog\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            Config.load(config_file)

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ("server = 1", "server section must be a dictionary"),
            ('[server]\nport = "80"', "server.port must be an integer"),
            ("[server]\nhost = 1", "server.host must be a string"),
            ("blog = []", "blog section must be a dictionary"),
            ("[blog]\nblog_id = 12", "blog.blog_id must be a string"),
            ("[blog]\nbase_path = false", "blog.base_path must be a string"),
            ('[blog]\ntimeout = "slow"', "blog.timeout must be a number"),
            ("[blog]\ntimeout = 0", "blog.timeout must be positive"),
            ("[blog]\nretries = -1", "blog.retries must not be negative"),
        ],
    )
    def test__invalid_values__raise_config_error(
        self, tmp_path: Path, content: str, message: str
    ) -> None:
        """Reject values of the wrong type."""
        config_file = tmp_path / "dropinblog.toml"
        config_file.write_text(content)

        with pytest.raises(ConfigError, match=message):
            Config.load(config_file)


class TestWithOverrides:
    """Tests for Config.with_overrides()."""

    def test__overrides__replace_only_given_values(self) -> None:
        config = Config(server=ServerConfig(), blog=BlogConfig(blog_id="x"))

        updated = config.with_overrides(port=9000, base_path="/journal")

        assert updated.server.host == "127.0.0.1"
        assert updated.server.port == 9000
        assert updated.blog.base_path == "/journal"
        assert updated.blog.blog_id == "x"
        assert config.server.port == 8080
        assert config.blog.base_path == "/blog"

    def test__no_overrides__returns_equal_config(self) -> None:
        config = Config(server=ServerConfig(), blog=BlogConfig())

        assert config.with_overrides() == config


class TestRequireCredentials:
    """Tests for BlogConfig.require_credentials()."""

    def test__credentials_present__returned(self) -> None:
        assert BlogConfig(blog_id="b", api_token="t").require_credentials() == ("b", "t")

    def test__missing_blog_id__raises(self) -> None:
        with pytest.raises(ConfigError, match="blog.blog_id is required"):
            BlogConfig(api_token="t").require_credentials()

    def test__missing_token__raises(self) -> None:
        with pytest.raises(ConfigError, match="blog.api_token is required"):
            BlogConfig(blog_id="b").require_credentials()

    def test__token__hidden_from_repr(self) -> None:
        assert "secret" not in repr(BlogConfig(blog_id="b", api_token="secret"))
