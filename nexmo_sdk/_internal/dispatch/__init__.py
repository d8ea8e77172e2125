"""Request dispatch core for Nexmo API namespaces.

WARNING: This is a system-level module used by the resource namespaces.
Do not call directly from user code.
"""

from nexmo_sdk._internal.dispatch.auth import (
    Authentication,
    BearerToken,
    KeySecretParams,
    SignedParams,
)
from nexmo_sdk._internal.dispatch.encoding import (
    FORM,
    JSON,
    EncodedBody,
    FormEncoder,
    JSONEncoder,
    ParamsEncoder,
    encode_query,
)
from nexmo_sdk._internal.dispatch.models import Outcome, OutcomeKind, ResponseClass
from nexmo_sdk._internal.dispatch.namespace import Namespace
from nexmo_sdk._internal.dispatch.response import classify
from nexmo_sdk._internal.dispatch.signature import Signature

__all__ = [
    "Namespace",
    "Authentication",
    "KeySecretParams",
    "BearerToken",
    "SignedParams",
    "ParamsEncoder",
    "FormEncoder",
    "JSONEncoder",
    "EncodedBody",
    "FORM",
    "JSON",
    "encode_query",
    "Outcome",
    "OutcomeKind",
    "ResponseClass",
    "classify",
    "Signature",
]
