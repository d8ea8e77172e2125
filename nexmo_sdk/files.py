"""Files namespace: recordings and other media stored by the API."""

import json
import os
import tempfile
from typing import Any

from nexmo_sdk._internal.dispatch import BearerToken, Namespace, OutcomeKind


class Files(Namespace):
    default_authentication = BearerToken

    def get(self, id: str) -> Any:
        """Download a file into memory.

        Args:
            id: File id, or the full file URL (e.g. a recording_url).

        Returns:
            The raw file bytes, or an Entity if the API answered with JSON.
        """
        return self._get(_file_path(id))

    def save(self, id: str, filename: str) -> None:
        """Stream a file to disk without buffering it in memory.

        The download goes to a temporary file next to `filename`, which only
        replaces `filename` once the whole body has been written. A failed
        request leaves any existing file untouched.

        Args:
            id: File id, or the full file URL.
            filename: Destination path, overwritten if it exists.
        """
        directory = os.path.dirname(os.path.abspath(filename))
        fd, temp_path = tempfile.mkstemp(dir=directory, prefix=".nexmo-download-")
        try:
            with os.fdopen(fd, "wb") as file:
                outcome = self.request(_file_path(id), stream_callback=file.write)
                # JSON bodies are decoded instead of streamed
                if outcome.kind is OutcomeKind.SUCCESS:
                    file.write(_body_bytes(outcome.body))
            os.replace(temp_path, filename)
        except BaseException:
            os.unlink(temp_path)
            raise


def _file_path(id: str) -> str:
    return "/v1/files/" + id.rstrip("/").split("/")[-1]


def _body_bytes(body: Any) -> bytes:
    if isinstance(body, bytes):
        return body
    return json.dumps(body).encode("utf-8")
