"""User-facing client for the Nexmo APIs.

Example usage:
    from nexmo_sdk import Client

    client = Client(token="your-token")

    recording = client.files.get(recording_url)
    client.files.save(recording_url, "recording.mp3")

    # Verify a signed webhook
    client.signature.check(request_params)
"""

import logging
from typing import Any, TypeVar

import httpx

from nexmo_sdk._internal.dispatch import Namespace, Signature
from nexmo_sdk.config import Config
from nexmo_sdk.files import Files

N = TypeVar("N", bound=Namespace)


class Client:
    """Entry point holding the configuration and the API namespaces.

    Namespaces are created on first access and reuse the client's
    configuration. Use the client as a context manager, or call `close()`,
    to release the HTTP connections it opened.
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        http_client: httpx.Client | None = None,
        logger: logging.Logger | None = None,
        **settings: Any,
    ) -> None:
        """Initialize the client.

        Args:
            config: Full configuration. When omitted, one is built from
                `settings` (e.g. api_key=..., api_secret=..., token=...).
            http_client: Optional httpx.Client shared by every namespace.
                The caller keeps ownership and must close it.
            logger: Logger for request and response records.
            **settings: Config fields, used only when `config` is omitted.
        """
        if config is not None and settings:
            raise TypeError("Pass either a Config or keyword settings, not both")
        self._config = config or Config(**settings)
        self._http_client = http_client
        self._logger = logger
        self._namespaces: dict[type[Namespace], Namespace] = {}

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Client":
        """Create a client configured from NEXMO_* environment variables."""
        return cls(Config.from_env(), **kwargs)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def files(self) -> Files:
        return self._namespace(Files)

    @property
    def signature(self) -> Signature:
        """Signature checker built from signature_secret and signature_method."""
        return Signature(
            self._config.require_signature_secret(),
            self._config.signature_method,
        )

    def _namespace(self, namespace_class: type[N]) -> N:
        if namespace_class not in self._namespaces:
            self._namespaces[namespace_class] = namespace_class(
                self._config,
                self._http_client,
                logger=self._logger,
            )
        return self._namespaces[namespace_class]  # type: ignore[return-value]

    def close(self) -> None:
        for namespace in self._namespaces.values():
            namespace.close()
        self._namespaces.clear()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
