"""Parameter encoders for query strings and request bodies."""

import json
from typing import Any, NamedTuple

import httpx

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


class EncodedBody(NamedTuple):
    content_type: str
    content: bytes


def _form_items(params: dict[str, Any]) -> list[tuple[str, Any]]:
    """Flatten params into (key, value) pairs, repeating keys for lists."""
    items: list[tuple[str, Any]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            items.extend((key, item) for item in value if item is not None)
        else:
            items.append((key, value))
    return items


def encode_query(params: dict[str, Any]) -> str:
    """Percent-encode params as ``key=value&...``.

    List values repeat their key, booleans become ``true``/``false`` and
    ``None`` values are dropped.
    """
    return str(httpx.QueryParams(_form_items(params)))


class ParamsEncoder:
    """Places a parameter map into a request body."""

    content_type: str

    def encode(self, params: dict[str, Any]) -> EncodedBody:
        raise NotImplementedError


class FormEncoder(ParamsEncoder):
    content_type = FORM_CONTENT_TYPE

    def encode(self, params: dict[str, Any]) -> EncodedBody:
        return EncodedBody(self.content_type, encode_query(params).encode("ascii"))


class JSONEncoder(ParamsEncoder):
    """Serializes params as a JSON object; arrays and objects stay nested."""

    content_type = JSON_CONTENT_TYPE

    def encode(self, params: dict[str, Any]) -> EncodedBody:
        return EncodedBody(self.content_type, json.dumps(params).encode("utf-8"))


FORM = FormEncoder()
JSON = JSONEncoder()
