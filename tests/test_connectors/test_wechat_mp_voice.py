"""Testes para upload de voz e reconhecimento de fala."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from connectors.wechat_mp import (
    LANGUAGE_EN_US,
    WeChatApiError,
    recognize_voice,
    upload_voice_file,
    validate_voice_file,
)


@pytest.fixture
def voice_file(tmp_path: Path) -> Path:
    path = tmp_path / "hello.amr"
    path.write_bytes(b"#!AMR\n" + b"\x00" * 64)
    return path


class TestValidateVoiceFile:
    """Testes para validate_voice_file."""

    def test_valid(self, voice_file: Path) -> None:
        assert validate_voice_file(str(voice_file)) == voice_file

    def test_missing(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            validate_voice_file(tmp_path / "nope.amr")

    def test_directory(self, tmp_path: Path) -> None:
        with pytest.raises(IsADirectoryError):
            validate_voice_file(tmp_path)

    def test_empty(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty.amr"
        empty.write_bytes(b"")
        with pytest.raises(ValueError, match="empty"):
            validate_voice_file(empty)

    def test_too_large(self, voice_file: Path) -> None:
        with pytest.raises(ValueError, match="too large"):
            validate_voice_file(voice_file, max_size_bytes=10)


class TestUploadVoiceFile:
    """Testes para upload_voice_file."""

    @pytest.mark.asyncio
    async def test_upload_returns_media_id(self, voice_file: Path, mock_http) -> None:
        http_client, requests = mock_http(
            lambda request: httpx.Response(
                200, json={"type": "voice", "media_id": "MEDIA_ID", "created_at": 1700000000}
            )
        )

        media_id = await upload_voice_file(voice_file, "TOKEN", http_client=http_client)

        assert media_id == "MEDIA_ID"
        request = requests[0]
        assert request.url.path == "/cgi-bin/media/upload"
        assert request.url.params["type"] == "voice"
        assert request.url.params["access_token"] == "TOKEN"
        assert request.headers["Content-Type"].startswith("multipart/form-data")
        assert b'name="media"; filename="hello.amr"' in request.content
        assert b"#!AMR" in request.content

    @pytest.mark.asyncio
    async def test_unsupported_format(self, voice_file: Path) -> None:
        with pytest.raises(ValueError, match="unsupported voice format"):
            await upload_voice_file(voice_file, "TOKEN", fmt="ogg")

    @pytest.mark.asyncio
    async def test_missing_file_makes_no_call(self, tmp_path: Path, mock_http) -> None:
        http_client, requests = mock_http(lambda request: httpx.Response(200, json={}))
        with pytest.raises(FileNotFoundError):
            await upload_voice_file(tmp_path / "x.amr", "TOKEN", http_client=http_client)
        assert requests == []

    @pytest.mark.asyncio
    async def test_empty_media_id(self, voice_file: Path, mock_http) -> None:
        http_client, _ = mock_http(lambda request: httpx.Response(200, json={"type": "voice"}))
        with pytest.raises(WeChatApiError, match="empty media_id"):
            await upload_voice_file(voice_file, "TOKEN", http_client=http_client)

    @pytest.mark.asyncio
    async def test_errcode(self, voice_file: Path, mock_http) -> None:
        http_client, _ = mock_http(
            lambda request: httpx.Response(200, json={"errcode": 40004, "errmsg": "invalid media type"})
        )
        with pytest.raises(WeChatApiError) as exc_info:
            await upload_voice_file(voice_file, "TOKEN", http_client=http_client)
        assert exc_info.value.code == 40004


class TestRecognizeVoice:
    """Testes para recognize_voice."""

    @pytest.mark.asyncio
    async def test_returns_text(self, mock_http) -> None:
        http_client, requests = mock_http(
            lambda request: httpx.Response(200, json={"errcode": 0, "text": "hello world"})
        )

        text = await recognize_voice("MEDIA_ID", "TOKEN", LANGUAGE_EN_US, http_client=http_client)

        assert text == "hello world"
        assert json.loads(requests[0].content) == {"media_id": "MEDIA_ID", "lang": "en_US"}

    @pytest.mark.asyncio
    async def test_unsupported_language(self) -> None:
        with pytest.raises(ValueError, match="unsupported language"):
            await recognize_voice("MEDIA_ID", "TOKEN", "fr_FR")

    @pytest.mark.asyncio
    async def test_requires_media_id(self) -> None:
        with pytest.raises(ValueError, match="media_id"):
            await recognize_voice("", "TOKEN")
