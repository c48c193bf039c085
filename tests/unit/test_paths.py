"""Unit tests for folkcontext.paths."""

from __future__ import annotations

import pytest

from folkcontext.paths import is_full_url, resolve_path, to_url


class TestResolvePath:
    def test_sibling_in_directory_referrer(self) -> None:
        assert resolve_path("foo.html", "/a/b/") == "/a/b/foo.html"

    def test_sibling_of_file_referrer(self) -> None:
        assert resolve_path("foo.html", "/a/b/c.html") == "/a/b/foo.html"

    def test_single_parent_hop(self) -> None:
        assert resolve_path("../x.html", "/a/b/c.html") == "/a/x.html"

    def test_parent_hop_from_directory(self) -> None:
        assert resolve_path("../martin.carthy/", "/folk/") == "/martin.carthy/"

    def test_chained_parent_hops(self) -> None:
        assert resolve_path("../../x.html", "/a/b/c/d.html") == "/a/x.html"

    def test_parent_hop_then_subdirectory(self) -> None:
        assert (
            resolve_path("../records/anthemsineden.html", "/folk/songs/reynardine.html")
            == "/folk/records/anthemsineden.html"
        )

    def test_hops_past_root_stay_at_root(self) -> None:
        assert resolve_path("../../../x.html", "/a/") == "/x.html"

    def test_current_directory_marker(self) -> None:
        assert resolve_path("./foo.html", "/a/b/") == "/a/b/foo.html"

    def test_root_referrer(self) -> None:
        assert resolve_path("folk/", "/") == "/folk/"

    @pytest.mark.parametrize("referrer", ["/", "/a/b/", "/a/b/c.html", ""])
    def test_absolute_href_unchanged(self, referrer: str) -> None:
        assert resolve_path("/folk/songs/tamlin.html", referrer) == "/folk/songs/tamlin.html"

    @pytest.mark.parametrize(
        "url", ["https://www.mainlynorfolk.info/folk/", "http://example.com/x.html"]
    )
    def test_full_url_unchanged(self, url: str) -> None:
        assert resolve_path(url, "/a/b/") == url

    @pytest.mark.parametrize(
        ("href", "referrer"),
        [
            ("foo.html", "/a/b/"),
            ("../x.html", "/a/b/c.html"),
            ("../../y/", "/a/b/c/"),
            ("/abs.html", "/a/"),
        ],
    )
    def test_idempotent_once_resolved(self, href: str, referrer: str) -> None:
        once = resolve_path(href, referrer)
        assert once.startswith("/")
        assert resolve_path(once, "/somewhere/else.html") == once


class TestToUrl:
    def test_site_path_gets_origin(self) -> None:
        assert to_url("/folk/") == "https://www.mainlynorfolk.info/folk/"

    def test_full_url_unchanged(self) -> None:
        assert to_url("https://example.com/a") == "https://example.com/a"

    def test_missing_leading_slash(self) -> None:
        assert to_url("folk/") == "https://www.mainlynorfolk.info/folk/"


class TestIsFullUrl:
    def test_http_and_https(self) -> None:
        assert is_full_url("http://x")
        assert is_full_url("https://x")

    def test_relative_paths(self) -> None:
        assert not is_full_url("/folk/")
        assert not is_full_url("httpfoo.html")
