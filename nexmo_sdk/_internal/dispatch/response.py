"""Classification of API responses into outcomes and errors."""

import json
import logging
from collections.abc import Callable

import httpx

from nexmo_sdk._internal.dispatch.models import (
    TRACE_ID_HEADER,
    Outcome,
    OutcomeKind,
    ResponseClass,
)
from nexmo_sdk.exceptions import (
    APIError,
    AuthenticationError,
    ClientError,
    GenericError,
    ServerError,
)
from nexmo_sdk.models import Entity

StreamCallback = Callable[[bytes], object]

logger = logging.getLogger(__name__)


def media_type(response: httpx.Response) -> str | None:
    """Content type without parameters, e.g. ``application/json``."""
    content_type = response.headers.get("content-type")
    if content_type is None:
        return None
    return content_type.split(";")[0].strip().lower()


def classify(
    response: httpx.Response,
    stream_callback: StreamCallback | None = None,
    *,
    host: str | None = None,
    log: logging.Logger | None = None,
) -> Outcome:
    """Turn a response into an Outcome, or raise the matching APIError.

    The response may be unread (sent with ``stream=True``); the body is only
    read when it is needed. A JSON body is always decoded, even when a
    stream callback was given. Other success bodies go to the callback chunk
    by chunk when one is given.

    Args:
        response: The response to classify.
        stream_callback: Optional consumer for the raw body chunks.
        host: Host the request went to, for the response log record.
        log: Logger to use instead of the module logger.

    Returns:
        The Outcome of a 2xx response.

    Raises:
        AuthenticationError: On 401.
        ClientError: On any other 4xx.
        ServerError: On 5xx.
        GenericError: On any other status.
    """
    log = log or logger
    host = host or response.request.url.host
    trace_id = response.headers.get(TRACE_ID_HEADER)
    content_length = response.headers.get("content-length")

    log.info(
        "Nexmo API response",
        extra={
            "host": host,
            "status": response.status_code,
            "content_type": media_type(response),
            "content_length": int(content_length) if content_length else None,
            "trace_id": trace_id,
        },
    )

    match ResponseClass.from_status(response.status_code):
        case ResponseClass.NO_CONTENT:
            return Outcome(
                kind=OutcomeKind.NO_CONTENT,
                status_code=response.status_code,
                trace_id=trace_id,
            )
        case ResponseClass.SUCCESS:
            return _success(response, stream_callback, trace_id)
        case ResponseClass.UNAUTHORIZED:
            raise _error(AuthenticationError, response, host, trace_id, log)
        case ResponseClass.CLIENT_ERROR:
            raise _error(ClientError, response, host, trace_id, log)
        case ResponseClass.SERVER_ERROR:
            raise _error(ServerError, response, host, trace_id, log)
        case ResponseClass.OTHER:
            raise _error(GenericError, response, host, trace_id, log)


def _success(
    response: httpx.Response,
    stream_callback: StreamCallback | None,
    trace_id: str | None,
) -> Outcome:
    if media_type(response) == "application/json":
        body = json.loads(response.read(), object_hook=Entity)
        return Outcome(
            kind=OutcomeKind.SUCCESS,
            body=body,
            status_code=response.status_code,
            trace_id=trace_id,
        )

    if stream_callback is not None:
        for chunk in response.iter_bytes():
            stream_callback(chunk)
        return Outcome(
            kind=OutcomeKind.SUCCESS_STREAM,
            status_code=response.status_code,
            trace_id=trace_id,
        )

    return Outcome(
        kind=OutcomeKind.SUCCESS,
        body=response.read(),
        status_code=response.status_code,
        trace_id=trace_id,
    )


def _error(
    error_class: type[APIError],
    response: httpx.Response,
    host: str,
    trace_id: str | None,
    log: logging.Logger,
) -> APIError:
    body = response.read()
    log.debug(body.decode("utf-8", errors="replace"))
    return error_class(
        f"{response.status_code} response from {host}",
        status_code=response.status_code,
        body=body,
        trace_id=trace_id,
    )
