"""Tests for path normalization."""

import pytest
from dropinblog.core.paths import join_base_path, normalize_pathname


class TestNormalizePathname:
    """Tests for normalize_pathname()."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("/blog", "/blog"),
            ("/blog/", "/blog"),
            ("/blog///post//", "/blog/post"),
            ("blog/post", "/blog/post"),
            ("/blog/post?page=2&x=1", "/blog/post"),
            ("/blog/post#comments", "/blog/post"),
            ("", "/"),
            ("/", "/"),
            ("//", "/"),
        ],
    )
    def test__raw_path__is_canonicalized(self, raw: str, expected: str) -> None:
        """Normalize slashes, query strings and fragments."""
        assert normalize_pathname(raw) == expected

    def test__percent_encoding__is_preserved(self) -> None:
        """Leave percent-encoded segments for the classifier to decode."""
        assert normalize_pathname("/blog/feed/category/%20shoes/") == "/blog/feed/category/%20shoes"

    def test__case__is_preserved(self) -> None:
        """Keep path case intact."""
        assert normalize_pathname("/Blog/My-Post") == "/Blog/My-Post"

    def test__normalized_path__is_stable(self) -> None:
        """Normalizing twice yields the same path."""
        once = normalize_pathname("//blog//feed.xml/?a=b")
        assert normalize_pathname(once) == once


class TestJoinBasePath:
    """Tests for join_base_path()."""

    def test__nested_base__joins_suffix(self) -> None:
        assert join_base_path("/blog/", "sitemap.xml") == "/blog/sitemap.xml"

    def test__root_base__joins_suffix(self) -> None:
        assert join_base_path("/", "sitemap.xml") == "/sitemap.xml"

    def test__empty_suffix__returns_base(self) -> None:
        assert join_base_path("/blog") == "/blog"
