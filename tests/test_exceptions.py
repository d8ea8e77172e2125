"""Tests for public exceptions."""

import pytest

from nexmo_sdk.exceptions import (
    APIError,
    AuthenticationError,
    ClientError,
    ConfigError,
    GenericError,
    NexmoError,
    ServerError,
)


class TestNexmoError:
    """Tests for base NexmoError."""

    def test_is_exception(self):
        """NexmoError should be an Exception."""
        assert issubclass(NexmoError, Exception)

    def test_can_be_raised(self):
        """NexmoError should be raisable with message."""
        with pytest.raises(NexmoError) as exc_info:
            raise NexmoError("test error")
        assert str(exc_info.value) == "test error"


class TestAPIError:
    """Tests for APIError."""

    def test_inherits_from_nexmo_error(self):
        """APIError should inherit from NexmoError."""
        assert issubclass(APIError, NexmoError)

    def test_with_message_only(self):
        """Should create error with message only."""
        error = APIError("API request failed")
        assert str(error) == "API request failed"
        assert error.status_code is None
        assert error.body == b""
        assert error.trace_id is None

    def test_with_response_context(self):
        """Should store status code, body and trace id."""
        error = APIError("Not found", status_code=404, body=b'{"title":"x"}', trace_id="t-1")
        assert error.status_code == 404
        assert error.body == b'{"title":"x"}'
        assert error.trace_id == "t-1"

    def test_can_be_caught_as_nexmo_error(self):
        """Should be catchable as NexmoError."""
        with pytest.raises(NexmoError):
            raise ServerError("API error", status_code=500)


class TestErrorHierarchy:
    """Tests for the status-specific error classes."""

    @pytest.mark.parametrize("error_class", [ClientError, ServerError, GenericError])
    def test_status_errors_are_api_errors(self, error_class):
        """Status-specific errors should inherit from APIError."""
        assert issubclass(error_class, APIError)

    def test_authentication_error_is_client_error(self):
        """A 401 is a client error too."""
        assert issubclass(AuthenticationError, ClientError)

    def test_server_error_is_not_client_error(self):
        """Server and client errors should be distinct."""
        assert not issubclass(ServerError, ClientError)


class TestConfigError:
    """Tests for ConfigError."""

    def test_inherits_from_nexmo_error(self):
        """ConfigError should inherit from NexmoError."""
        assert issubclass(ConfigError, NexmoError)

    def test_is_not_api_error(self):
        """Configuration problems never come from a response."""
        assert not issubclass(ConfigError, APIError)
