"""Nexmo SDK for Python.

Client library for the Nexmo communications APIs.

Public API:
    Client - User-facing client exposing the API namespaces
    Config - Credentials and transport settings
    Entity - Record decoded from JSON responses
    NexmoError and subclasses - Errors raised by the SDK

Internal (system-level, not for direct use):
    _internal.dispatch - Request dispatch core
"""

from nexmo_sdk._version import __version__
from nexmo_sdk.client import Client
from nexmo_sdk.config import Config
from nexmo_sdk.exceptions import (
    APIError,
    AuthenticationError,
    ClientError,
    ConfigError,
    GenericError,
    NexmoError,
    ServerError,
)
from nexmo_sdk.models import Entity

__all__ = [
    "__version__",
    "Client",
    "Config",
    "Entity",
    "NexmoError",
    "ConfigError",
    "APIError",
    "ClientError",
    "AuthenticationError",
    "ServerError",
    "GenericError",
]
