"""Models for dispatched requests and their classified outcomes."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

# =============================================================================
# Constants
# =============================================================================

BODYLESS_METHODS = frozenset({"GET", "DELETE"})
BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})
TRACE_ID_HEADER = "x-nexmo-trace-id"

# =============================================================================
# Response Classes
# =============================================================================


class ResponseClass(Enum):
    """Status-code class a response falls into."""

    NO_CONTENT = "no_content"
    SUCCESS = "success"
    UNAUTHORIZED = "unauthorized"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    OTHER = "other"

    @classmethod
    def from_status(cls, status_code: int) -> "ResponseClass":
        if status_code == 204:
            return cls.NO_CONTENT
        if 200 <= status_code < 300:
            return cls.SUCCESS
        if status_code == 401:
            return cls.UNAUTHORIZED
        if 400 <= status_code < 500:
            return cls.CLIENT_ERROR
        if 500 <= status_code < 600:
            return cls.SERVER_ERROR
        return cls.OTHER


# =============================================================================
# Outcomes
# =============================================================================


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    SUCCESS_STREAM = "success_stream"
    NO_CONTENT = "no_content"


class Outcome(BaseModel):
    """Result of a successful request.

    Fields:
        kind: Which kind of success this is.
        body: Decoded JSON (an Entity), raw bytes, or None for no-content
            and streamed responses.
        status_code: HTTP status of the response.
        trace_id: Value of the x-nexmo-trace-id response header, if any.
    """

    model_config = ConfigDict(frozen=True)

    kind: OutcomeKind
    body: Any = None
    status_code: int
    trace_id: str | None = None
