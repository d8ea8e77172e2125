"""Client configuration for the Nexmo SDK."""

import os
import platform
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from nexmo_sdk._version import __version__
from nexmo_sdk.exceptions import ConfigError

DEFAULT_API_HOST = "api.nexmo.com"
DEFAULT_REST_HOST = "rest.nexmo.com"
DEFAULT_TIMEOUT = 30.0

SignatureMethod = Literal["md5hash", "md5", "sha1", "sha256", "sha512"]


class Config(BaseModel):
    """Credentials and transport settings shared by every namespace.

    The model is frozen: a single instance can be handed to any number of
    namespaces and used from concurrent requests.

    Fields:
        api_key: Account API key (key/secret and signed authentication).
        api_secret: Account API secret.
        signature_secret: Secret used to sign requests and verify webhooks.
        signature_method: Digest used for signatures (default: md5hash).
        token: Bearer token for namespaces that authenticate with a token.
        api_host: Host for API namespaces.
        rest_host: Host for legacy REST namespaces.
        app_name: Optional application name appended to the User-Agent.
        app_version: Optional application version appended to the User-Agent.
        timeout: Transport timeout in seconds.
        verify: Verify TLS certificates.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str | None = None
    api_secret: str | None = None
    signature_secret: str | None = None
    signature_method: SignatureMethod = "md5hash"
    token: str | None = None

    api_host: str = DEFAULT_API_HOST
    rest_host: str = DEFAULT_REST_HOST

    app_name: str | None = None
    app_version: str | None = None

    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    verify: bool = True

    @classmethod
    def from_env(cls) -> "Config":
        """Create a configuration from environment variables.

        Credential variables:
            NEXMO_API_KEY, NEXMO_API_SECRET, NEXMO_SIGNATURE_SECRET,
            NEXMO_SIGNATURE_METHOD, NEXMO_TOKEN

        Optional settings:
            NEXMO_API_HOST, NEXMO_REST_HOST: Override the default hosts.
            NEXMO_APP_NAME, NEXMO_APP_VERSION: User-Agent suffix.
            NEXMO_TIMEOUT: Transport timeout in seconds.
            NEXMO_VERIFY: Set to "0" to disable TLS verification.

        Returns:
            A Config. Missing credentials are only reported when a namespace
            actually needs them.

        Raises:
            ValueError: If NEXMO_TIMEOUT is not a number.
        """
        timeout = float(os.environ.get("NEXMO_TIMEOUT", str(DEFAULT_TIMEOUT)))

        return cls(
            api_key=os.environ.get("NEXMO_API_KEY"),
            api_secret=os.environ.get("NEXMO_API_SECRET"),
            signature_secret=os.environ.get("NEXMO_SIGNATURE_SECRET"),
            signature_method=os.environ.get("NEXMO_SIGNATURE_METHOD", "md5hash"),  # type: ignore[arg-type]
            token=os.environ.get("NEXMO_TOKEN"),
            api_host=os.environ.get("NEXMO_API_HOST", DEFAULT_API_HOST),
            rest_host=os.environ.get("NEXMO_REST_HOST", DEFAULT_REST_HOST),
            app_name=os.environ.get("NEXMO_APP_NAME"),
            app_version=os.environ.get("NEXMO_APP_VERSION"),
            timeout=timeout,
            verify=os.environ.get("NEXMO_VERIFY", "1") != "0",
        )

    def require_api_key(self) -> str:
        return self._require("api_key", "NEXMO_API_KEY")

    def require_api_secret(self) -> str:
        return self._require("api_secret", "NEXMO_API_SECRET")

    def require_signature_secret(self) -> str:
        return self._require("signature_secret", "NEXMO_SIGNATURE_SECRET")

    def require_token(self) -> str:
        return self._require("token", "NEXMO_TOKEN")

    def _require(self, field: str, env_var: str) -> str:
        value = getattr(self, field)
        if not value:
            raise ConfigError(
                f"No {field} provided. Set it on the client config or via {env_var}."
            )
        return value

    @property
    def user_agent(self) -> str:
        """User-Agent sent with every request."""
        user_agent = f"nexmo-python/{__version__} python/{platform.python_version()}"
        if self.app_name and self.app_version:
            user_agent += f" {self.app_name}/{self.app_version}"
        return user_agent
