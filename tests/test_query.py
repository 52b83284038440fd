"""Tests for the request builder."""

from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import pytest

from wikiextract import config
from wikiextract.errors import InvalidEndpoint
from wikiextract.query import api_endpoint, build_request


def test_build_request_targets_language_host():
    """Test URL host, path and method."""
    request = build_request("en", "Rust (programming language)")
    parts = urlsplit(request.url)

    assert request.method == "GET"
    assert parts.scheme == "https"
    assert parts.netloc == "en.wikipedia.org"
    assert parts.path == "/w/api.php"


def test_build_request_query_string():
    """Test that all protocol parameters are attached and encoded."""
    request = build_request("de", "Rust (programming language)")
    query = parse_qs(urlsplit(request.url).query)

    assert query == {
        "format": ["json"],
        "action": ["query"],
        "prop": ["extracts"],
        "exintro": ["true"],
        "explaintext": ["true"],
        "redirects": ["1"],
        "titles": ["Rust (programming language)"],
    }


def test_build_request_headers():
    """Test User-Agent and Accept headers."""
    request = build_request("en", "Python")

    assert request.headers["User-Agent"] == config.DEFAULT_UA
    assert request.headers["Accept"] == "application/json"


def test_build_request_non_ascii_phrase():
    """Test that a non-ASCII phrase round-trips through the query string."""
    request = build_request("ja", "東京")
    query = parse_qs(urlsplit(request.url).query)

    assert query["titles"] == ["東京"]


@pytest.mark.parametrize("code", ["", "en us", "en|x", "en:x", "<en>"])
def test_build_request_invalid_language(code):
    """Test that codes which cannot form a URL host are rejected."""
    with pytest.raises(InvalidEndpoint) as excinfo:
        build_request(code, "Python")

    assert excinfo.value.language_code == code


def test_api_endpoint_hyphenated_code():
    """Test that editions with hyphenated codes are accepted."""
    assert api_endpoint("zh-yue") == "https://zh-yue.wikipedia.org/w/api.php"


@pytest.mark.parametrize("code", ["C.", "en.x", "-en", "en-", "a" * 64, "zh-yue"])
def test_build_request_accepts_unresolvable_codes(code):
    """Test that codes forming a parseable URL are left for DNS to judge."""
    request = build_request(code, "Python")

    assert urlsplit(request.url).hostname == f"{code}.wikipedia.org".lower()
