"""Shared HTTP client configuration."""

import logging

import httpx

from nexmo_sdk._internal.dispatch.redaction import redact_url
from nexmo_sdk.config import Config


class RedactURLFilter(logging.Filter):
    """Redacts credential query parameters from URLs in httpx log records.

    httpx logs every request URL at INFO, which for key/secret namespaces
    includes api_key and api_secret.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.args, tuple):
            record.args = tuple(
                redact_url(arg) if isinstance(arg, httpx.URL) else arg
                for arg in record.args
            )
        return True


def install_httpx_log_filter() -> None:
    """Attach RedactURLFilter to the httpx logger once."""
    httpx_logger = logging.getLogger("httpx")
    if not any(isinstance(f, RedactURLFilter) for f in httpx_logger.filters):
        httpx_logger.addFilter(RedactURLFilter())


def create_http_client(config: Config, host: str) -> httpx.Client:
    """Create configured HTTP client for one API host.

    Args:
        config: Client configuration (timeout, TLS verification, User-Agent).
        host: Host every request of the returned client is sent to.

    Returns:
        Configured httpx.Client instance rooted at https://<host>.
    """
    return httpx.Client(
        timeout=config.timeout,
        verify=config.verify,
        base_url=f"https://{host}",
        headers={"User-Agent": config.user_agent},
    )


install_httpx_log_filter()
