"""Public exceptions for the Nexmo SDK."""


class NexmoError(Exception):
    """Base exception for all Nexmo SDK errors."""


class ConfigError(NexmoError):
    """Configuration error (missing credentials, invalid settings)."""


class APIError(NexmoError):
    """Error response from the Nexmo API.

    The raw response body is kept on the error so callers can inspect what
    the API returned.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: bytes = b"",
        trace_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.trace_id = trace_id


class ClientError(APIError):
    """4xx response."""


class AuthenticationError(ClientError):
    """401 response: the credentials were missing or rejected."""


class ServerError(APIError):
    """5xx response."""


class GenericError(APIError):
    """Response that is neither a success nor a 4xx/5xx error."""
