"""Generic record decoded from JSON response bodies."""

from typing import Any


class Entity(dict[str, Any]):
    """JSON object with attribute access.

    Entities are plain dicts underneath, so they compare equal to the decoded
    JSON they came from. Keys are also readable as attributes:

        entity = Entity({"file_id": "abc123"})
        entity.file_id  # "abc123"

    Keys that clash with dict methods (`items`, `keys`, ...) are only
    reachable by subscription.
    """

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            ) from None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict.__repr__(self)})"

    def to_dict(self) -> dict[str, Any]:
        """Convert back to plain dicts and lists, recursively."""
        return _to_plain(self)


def _to_plain(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {key: _to_plain(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [_to_plain(item) for item in obj]
    else:
        return obj
