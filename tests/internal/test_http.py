"""Tests for shared HTTP client configuration."""

import logging

import httpx
import respx

from nexmo_sdk._internal.dispatch.namespace import Namespace
from nexmo_sdk._internal.http import (
    RedactURLFilter,
    create_http_client,
    install_httpx_log_filter,
)
from nexmo_sdk.config import Config


class TestCreateHttpClient:
    """Tests for create_http_client."""

    def test_client_settings(self):
        """Should root the client at the host with the configured options."""
        config = Config(timeout=5)
        client = create_http_client(config, "api.example.com")
        assert client.base_url.scheme == "https"
        assert client.base_url.host == "api.example.com"
        assert client.timeout.read == 5
        assert client.headers["User-Agent"] == config.user_agent
        client.close()


class TestHttpxLogRedaction:
    """Tests for redaction of httpx's own request log."""

    def test_filter_installed_once(self):
        """Should attach a single filter to the httpx logger."""
        install_httpx_log_filter()
        install_httpx_log_filter()
        filters = logging.getLogger("httpx").filters
        assert sum(isinstance(f, RedactURLFilter) for f in filters) == 1

    def test_redacts_url_args(self, caplog):
        """Should redact credentials from URLs logged by httpx."""
        caplog.set_level(logging.INFO, logger="httpx")
        url = httpx.URL("https://api.nexmo.com/v1/x?a=1&api_key=key-123&api_secret=secret-456")

        logging.getLogger("httpx").info("HTTP Request: %s %s", "GET", url)

        message = caplog.records[-1].getMessage()
        assert "key-123" not in message
        assert "secret-456" not in message
        assert "a=1" in message

    def test_leaves_other_urls(self, caplog):
        """Should leave URLs without credentials unchanged."""
        caplog.set_level(logging.INFO, logger="httpx")
        url = httpx.URL("https://api.nexmo.com/v1/files/abc123")

        logging.getLogger("httpx").info("HTTP Request: %s %s", "GET", url)

        assert caplog.records[-1].getMessage() == f"HTTP Request: GET {url}"

    @respx.mock
    def test_key_secret_request_log(self, caplog):
        """Should keep key/secret credentials out of httpx's INFO record."""
        caplog.set_level(logging.INFO)
        respx.get("https://api.nexmo.com/v1/x").mock(return_value=httpx.Response(204))

        Namespace(Config(api_key="key-123", api_secret="secret-456")).request(
            "/v1/x", params={"a": "1"}
        )

        httpx_records = [r for r in caplog.records if r.name == "httpx"]
        assert httpx_records
        for record in httpx_records:
            assert "key-123" not in record.getMessage()
            assert "secret-456" not in record.getMessage()
