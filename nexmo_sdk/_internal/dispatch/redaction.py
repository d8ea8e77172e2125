"""Redaction of credentials in logged request parameters and URLs."""

from typing import Any

import httpx

REDACT_KEYS: frozenset[str] = frozenset({
    "api_key",
    "api_secret",
    "sig",
    "signature_secret",
    "token",
    "secret",
    "password",
    "authorization",
    "private_key",
})

REDACTED_VALUE = "[REDACTED]"


def _is_secret(key: Any) -> bool:
    return isinstance(key, str) and key.lower() in REDACT_KEYS


def redact_params(params: dict[str, Any]) -> dict[str, Any]:
    """Copy a parameter map with credential values replaced by "[REDACTED]".

    Credentials are only ever injected at the top level of the params, so
    nested values are copied as they are.
    """
    return {
        key: REDACTED_VALUE if _is_secret(key) else value
        for key, value in params.items()
    }


def redact_url(url: httpx.URL) -> httpx.URL:
    """Return `url` with credential query parameters redacted."""
    items = url.params.multi_items()
    if not any(_is_secret(key) for key, _ in items):
        return url
    return url.copy_with(
        params=[(key, REDACTED_VALUE if _is_secret(key) else value) for key, value in items]
    )
