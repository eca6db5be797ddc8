"""Tests for URL assembly and API-key injection."""

import pytest

from coingecko.client.urls import build_url, redact_url


HOSTS = [
    "https://api.coingecko.com/api/v3",
    "https://pro-api.coingecko.com/api/v3",
    "http://localhost:8080",
    "",
]


class TestBuildUrl:
    """Test build_url key/query combinations."""

    @pytest.mark.parametrize("host", HOSTS)
    def test_query_and_key(self, host: str):
        """Key is appended once with '&'."""
        url = build_url(host, "/simple/price", "?ids=bitcoin", "abc")

        assert url == f"{host}/simple/price?ids=bitcoin&x_cg_pro_api_key=abc"
        assert url.count("x_cg_pro_api_key=") == 1
        assert url.count("?") == 1

    @pytest.mark.parametrize("host", HOSTS)
    def test_key_without_query(self, host: str):
        """Key becomes the only parameter, prefixed with '?'."""
        url = build_url(host, "/ping", None, "abc")

        assert url == f"{host}/ping?x_cg_pro_api_key=abc"
        assert url.count("?") == 1

    @pytest.mark.parametrize("host", HOSTS)
    def test_query_without_key(self, host: str):
        """Query string is passed through unchanged."""
        query = "?vs_currency=usd&ids=bitcoin%2Cethereum"

        assert build_url(host, "/coins/markets", query, None) == f"{host}/coins/markets{query}"

    @pytest.mark.parametrize("host", HOSTS)
    def test_neither(self, host: str):
        assert build_url(host, "/ping", None, None) == f"{host}/ping"

    def test_no_normalization(self):
        """Malformed input yields a deterministic concatenation rather than an error."""
        assert build_url("h/", "/ping", "x=1", None) == "h//pingx=1"
        assert build_url("h", "ping", "", "k") == "hping&x_cg_pro_api_key=k"

    def test_idempotent(self):
        args = ("https://h", "/ping", "?a=1", "k")

        assert build_url(*args) == build_url(*args)


class TestRedactUrl:
    """Test API-key masking for logs."""

    def test_masks_key(self):
        url = "https://h/ping?x_cg_pro_api_key=secret"

        assert redact_url(url) == "https://h/ping?x_cg_pro_api_key=***"

    def test_masks_key_after_other_params(self):
        url = "https://h/simple/price?ids=bitcoin&x_cg_pro_api_key=secret"

        redacted = redact_url(url)

        assert "secret" not in redacted
        assert redacted.startswith("https://h/simple/price?ids=bitcoin&")

    def test_url_without_key_unchanged(self):
        url = "https://h/coins/list?include_platform=false"

        assert redact_url(url) == url
