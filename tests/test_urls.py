"""Tests for URL normalisation and validation."""

from __future__ import annotations

import pytest

from infsite.scraper.urls import is_valid_url, normalize_url


class TestNormalizeUrl:
    def test_bare_domain_gets_https_prefix(self) -> None:
        assert normalize_url("example.com") == "https://example.com/"

    def test_absolute_url_is_kept(self) -> None:
        assert normalize_url("http://example.com/page?q=1#top") == "http://example.com/page?q=1#top"

    def test_scheme_and_host_are_lower_cased(self) -> None:
        assert normalize_url("HTTPS://Example.COM/Path") == "https://example.com/Path"

    def test_empty_path_becomes_slash(self) -> None:
        assert normalize_url("https://example.com") == "https://example.com/"

    def test_default_port_is_dropped(self) -> None:
        assert normalize_url("http://example.com:80/a") == "http://example.com/a"
        assert normalize_url("https://example.com:443/") == "https://example.com/"

    def test_non_default_port_is_kept(self) -> None:
        assert normalize_url("http://localhost:8080/x") == "http://localhost:8080/x"

    def test_spaces_in_path_are_encoded(self) -> None:
        assert normalize_url("https://example.com/a b") == "https://example.com/a%20b"

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert normalize_url("  example.com/docs \n") == "https://example.com/docs"

    def test_userinfo_is_preserved(self) -> None:
        assert normalize_url("https://user:pw@Example.com/") == "https://user:pw@example.com/"

    def test_non_http_scheme_still_normalizes(self) -> None:
        assert normalize_url("ftp://x") == "ftp://x/"

    @pytest.mark.parametrize("value", ["", "   ", "not a url", "exa mple.com"])
    def test_unparseable_returns_none(self, value: str) -> None:
        assert normalize_url(value) is None

    def test_non_string_returns_none(self) -> None:
        assert normalize_url(None) is None  # type: ignore[arg-type]


class TestIsValidUrl:
    @pytest.mark.parametrize(
        "value",
        ["http://example.com", "https://example.com/", "https://sub.example.co.uk/a?b=c"],
    )
    def test_http_and_https_are_valid(self, value: str) -> None:
        assert is_valid_url(value) is True

    @pytest.mark.parametrize(
        "value",
        ["ftp://x/", "mailto:someone@example.com", "javascript:alert(1)", "file:///etc/passwd"],
    )
    def test_other_schemes_are_invalid(self, value: str) -> None:
        assert is_valid_url(value) is False

    @pytest.mark.parametrize("value", ["", "example.com", "https://exa mple.com"])
    def test_unparseable_is_invalid(self, value: str) -> None:
        assert is_valid_url(value) is False

    def test_normalize_then_validate_rejects_ftp(self) -> None:
        normalized = normalize_url("ftp://x")
        assert normalized is not None
        assert is_valid_url(normalized) is False
