"""Tests for paths module."""

from pathlib import Path

import pytest

from vibeforge.errors import InvalidPathError
from vibeforge.paths import page_location, resolve_page


class TestResolvePage:
    """Tests for resolve_page()."""

    @pytest.mark.parametrize("value", [None, "", "   ", "?x=1", "#frag", "/", "./"])
    def test__no_page__returns_default(self, value) -> None:
        assert resolve_page(value) == "playground.html"

    def test__custom_default__is_used(self) -> None:
        assert resolve_page("", default="index.html") == "index.html"

    @pytest.mark.parametrize(
        "value",
        [
            "../x",
            "..",
            "../../etc/passwd",
            "a/../../b",
            "a/../../etc/passwd",
            "/../secret.html",
            "..\\windows\\system.ini",
            "http://example.com/../../etc/passwd",
        ],
    )
    def test__traversal__raises(self, value: str) -> None:
        with pytest.raises(InvalidPathError):
            resolve_page(value)

    def test__full_url__keeps_only_path(self) -> None:
        assert resolve_page("http://example.com/foo/bar.html?x=1") == "foo/bar.html"

    def test__url_with_fragment__drops_fragment(self) -> None:
        assert resolve_page("https://host:3000/generated/p.html#top") == "generated/p.html"

    def test__scheme_with_rooted_path__keeps_only_path(self) -> None:
        assert resolve_page("file:///etc/passwd") == "etc/passwd"
        assert resolve_page("file:/generated/page-1.html") == "generated/page-1.html"

    def test__generated_page__passes_through(self) -> None:
        assert resolve_page("generated/page-1.html") == "generated/page-1.html"
        assert resolve_page("generated/page-123.html") == "generated/page-123.html"

    def test__leading_slashes_and_query__are_stripped(self) -> None:
        assert resolve_page("  ///generated/page-1.html?v=2  ") == "generated/page-1.html"

    def test__inner_dot_segments__are_collapsed(self) -> None:
        assert resolve_page("a/./b/../c.html") == "a/c.html"
        assert resolve_page("a//b.html") == "a/b.html"

    def test__dotdot_prefixed_name__is_not_traversal(self) -> None:
        assert resolve_page("..notes.html") == "..notes.html"

    def test__resolving_twice__is_idempotent(self) -> None:
        once = resolve_page("/docs/./guide/../index.html")
        assert resolve_page(once) == once


class TestPageLocation:
    """Tests for page_location()."""

    def test__inside_root__returns_absolute_path(self, tmp_path: Path) -> None:
        location = page_location(tmp_path, "generated/page-1.html")

        assert location == tmp_path.resolve() / "generated" / "page-1.html"

    def test__nul_byte__returns_none(self, tmp_path: Path) -> None:
        assert page_location(tmp_path, "a\x00b.html") is None

    def test__symlink_out_of_root__returns_none(self, tmp_path: Path) -> None:
        root = tmp_path / "public"
        root.mkdir()
        outside = tmp_path / "secret.html"
        outside.write_text("secret")
        (root / "link.html").symlink_to(outside)

        assert page_location(root, "link.html") is None
