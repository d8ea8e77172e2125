"""Tests for the Files namespace."""

import json

import httpx
import pytest
import respx

from nexmo_sdk.config import Config
from nexmo_sdk.exceptions import APIError, ClientError
from nexmo_sdk.files import Files

CONFIG = Config(token="T")
FILE_URL = "https://api.nexmo.com/v1/files/aaaaaaaa-bbbb-cccc-dddd-0123456789ab"


class TestFilesGet:
    """Tests for Files.get()."""

    @respx.mock
    def test_get_by_id(self):
        """Should return the file bytes."""
        route = respx.get(FILE_URL).mock(
            return_value=httpx.Response(
                200, content=b"audio", headers={"Content-Type": "audio/mpeg"}
            )
        )

        result = Files(CONFIG).get("aaaaaaaa-bbbb-cccc-dddd-0123456789ab")

        assert result == b"audio"
        assert route.calls.last.request.headers["Authorization"] == "Bearer T"
        assert route.calls.last.request.url.query == b""

    @respx.mock
    def test_get_by_url(self):
        """Should accept a full recording URL."""
        route = respx.get(FILE_URL).mock(return_value=httpx.Response(200, content=b"audio"))

        Files(CONFIG).get(FILE_URL)

        assert route.called

    @respx.mock
    def test_get_not_found(self):
        """Should raise ClientError for a missing file."""
        respx.get(FILE_URL).mock(return_value=httpx.Response(404, content=b"not found"))

        with pytest.raises(ClientError):
            Files(CONFIG).get(FILE_URL)


class TestFilesSave:
    """Tests for Files.save()."""

    @respx.mock
    def test_save_writes_file(self, tmp_path):
        """Should write the streamed body to disk."""
        respx.get(FILE_URL).mock(
            return_value=httpx.Response(
                200,
                content=b"hello",
                headers={"Content-Type": "application/octet-stream"},
            )
        )
        destination = tmp_path / "recording.mp3"

        Files(CONFIG).save(FILE_URL, str(destination))

        assert destination.read_bytes() == b"hello"

    def test_save_streams_chunks(self, tmp_path):
        """Should write every chunk in order."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                headers={"Content-Type": "application/octet-stream"},
                content=iter([b"hel", b"lo"]),
            )

        http_client = httpx.Client(
            base_url="https://api.nexmo.com", transport=httpx.MockTransport(handler)
        )
        destination = tmp_path / "recording.mp3"

        Files(CONFIG, http_client).save("abc123", str(destination))

        assert destination.read_bytes() == b"hello"

    @pytest.mark.parametrize("status_code", [401, 404, 500])
    def test_failed_save_keeps_existing_file(self, tmp_path, status_code):
        """Should leave an earlier download untouched when the request fails."""
        destination = tmp_path / "recording.mp3"
        destination.write_bytes(b"previous recording")

        with respx.mock:
            respx.get(FILE_URL).mock(return_value=httpx.Response(status_code, content=b"error"))
            with pytest.raises(APIError):
                Files(CONFIG).save(FILE_URL, str(destination))

        assert destination.read_bytes() == b"previous recording"
        assert [p.name for p in tmp_path.iterdir()] == ["recording.mp3"]

    @respx.mock
    def test_failed_save_creates_no_file(self, tmp_path):
        """Should not create the destination when the request fails."""
        respx.get(FILE_URL).mock(return_value=httpx.Response(404))
        destination = tmp_path / "recording.mp3"

        with pytest.raises(ClientError):
            Files(CONFIG).save(FILE_URL, str(destination))

        assert list(tmp_path.iterdir()) == []

    @respx.mock
    def test_save_json_response(self, tmp_path):
        """Should write a JSON body to the file instead of dropping it."""
        respx.get(FILE_URL).mock(return_value=httpx.Response(200, json={"a": 1}))
        destination = tmp_path / "recording.json"

        Files(CONFIG).save(FILE_URL, str(destination))

        assert json.loads(destination.read_bytes()) == {"a": 1}
