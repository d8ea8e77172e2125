"""Authentication strategies applied to outgoing requests.

Each strategy has two hooks. ``update_params`` runs before the params are
placed in the query string or body, so strategies that add parameters change
what gets encoded. ``update_headers`` runs after encoding.
"""

import time
from typing import Any

from nexmo_sdk._internal.dispatch.signature import Signature
from nexmo_sdk.config import Config


class Authentication:
    """Base strategy: leaves params and headers untouched."""

    def __init__(self, config: Config) -> None:
        self._config = config

    def update_params(self, params: dict[str, Any]) -> None:
        pass

    def update_headers(self, headers: dict[str, str]) -> None:
        pass


class KeySecretParams(Authentication):
    """Adds ``api_key`` and ``api_secret`` to the params."""

    def update_params(self, params: dict[str, Any]) -> None:
        params["api_key"] = self._config.require_api_key()
        params["api_secret"] = self._config.require_api_secret()


class BearerToken(Authentication):
    """Sends ``Authorization: Bearer <token>``."""

    def update_headers(self, headers: dict[str, str]) -> None:
        headers["Authorization"] = f"Bearer {self._config.require_token()}"


class SignedParams(Authentication):
    """Adds ``api_key``, ``timestamp`` and a ``sig`` computed over all params."""

    def update_params(self, params: dict[str, Any]) -> None:
        params["api_key"] = self._config.require_api_key()
        params.setdefault("timestamp", int(time.time()))

        signature = Signature(
            self._config.require_signature_secret(),
            self._config.signature_method,
        )
        params["sig"] = signature.digest(params)
