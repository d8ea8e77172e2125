"""Request dispatch shared by every API namespace."""

import logging
from typing import Any, ClassVar, Literal

import httpx

from nexmo_sdk._internal.dispatch.auth import Authentication, KeySecretParams
from nexmo_sdk._internal.dispatch.encoding import FORM, ParamsEncoder, encode_query
from nexmo_sdk._internal.dispatch.models import BODY_METHODS, Outcome
from nexmo_sdk._internal.dispatch.redaction import redact_params
from nexmo_sdk._internal.dispatch.response import StreamCallback, classify
from nexmo_sdk._internal.http import create_http_client
from nexmo_sdk.config import Config

log = logging.getLogger(__name__)


class Namespace:
    """A group of API operations sharing one host, auth strategy and encoder.

    Subclasses declare their defaults as class attributes:

        class Files(Namespace):
            default_authentication = BearerToken

    and pass paths and params to `request()`. The resolved host, strategy and
    encoder are fixed when the namespace is constructed, so one instance can
    serve concurrent requests; each request builds its own params, headers
    and httpx.Request.
    """

    host_setting: ClassVar[Literal["api_host", "rest_host"]] = "api_host"
    default_authentication: ClassVar[type[Authentication]] = KeySecretParams
    default_encoder: ClassVar[ParamsEncoder] = FORM

    def __init__(
        self,
        config: Config,
        http_client: httpx.Client | None = None,
        *,
        host: str | None = None,
        authentication: Authentication | None = None,
        encoder: ParamsEncoder | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the namespace.

        Args:
            config: Credentials and transport settings.
            http_client: Client to send requests with. Must be rooted at
                https://<host>. Defaults to a new client from
                `create_http_client()`, owned and closed by this namespace.
            host: Override the host selected by `host_setting`.
            authentication: Override the `default_authentication` strategy.
            encoder: Override the `default_encoder`.
            logger: Logger for request and response records.
        """
        self._config = config
        self._host = host or getattr(config, self.host_setting)
        self._authentication = authentication or self.default_authentication(config)
        self._encoder = encoder or self.default_encoder
        self._logger = logger or log
        self._owns_http_client = http_client is None
        self._http = http_client or create_http_client(config, self._host)

    @property
    def host(self) -> str:
        return self._host

    @property
    def authentication(self) -> Authentication:
        return self._authentication

    @property
    def encoder(self) -> ParamsEncoder:
        return self._encoder

    def close(self) -> None:
        """Close the HTTP client if this namespace created it."""
        if self._owns_http_client:
            self._http.close()

    def request(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        method: str = "GET",
        stream_callback: StreamCallback | None = None,
    ) -> Outcome:
        """Send an authenticated request and classify the response.

        Bodyless methods (GET, DELETE) carry the params in the query string;
        POST, PUT and PATCH carry them in a body built by the encoder.

        Args:
            path: Request path, e.g. "/v1/files/abc123".
            params: Request parameters. Not mutated.
            method: HTTP method.
            stream_callback: Receives the body chunk by chunk instead of it
                being buffered. Ignored for JSON responses.

        Returns:
            The Outcome of the request.

        Raises:
            APIError: A subclass matching the error status.
            ConfigError: If the auth strategy is missing a credential.
            httpx.TransportError: If the request could not be sent.
        """
        method = method.upper()
        params = dict(params or {})
        headers: dict[str, str] = {}
        url = path
        content: bytes | None = None

        self._authentication.update_params(params)

        if method in BODY_METHODS:
            body = self._encoder.encode(params)
            headers["Content-Type"] = body.content_type
            content = body.content
        elif params:
            query = encode_query(params)
            if query:
                url = f"{path}?{query}"

        self._authentication.update_headers(headers)
        headers["User-Agent"] = self._config.user_agent

        self._logger.info("Nexmo API request", extra={"method": method, "path": path})
        self._logger.debug(
            "Nexmo API request params", extra={"params": redact_params(params)}
        )

        request = self._http.build_request(method, url, headers=headers, content=content)
        response = self._http.send(request, stream=True)
        try:
            return classify(response, stream_callback, host=self._host, log=self._logger)
        finally:
            response.close()

    # =========================================================================
    # Convenience Methods
    # =========================================================================

    def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request(path, params).body

    def _post(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request(path, params, method="POST").body

    def _put(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request(path, params, method="PUT").body

    def _delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request(path, params, method="DELETE").body
