"""Testes para CosClient e transferências de arquivos no COS."""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from config.settings import CosSettings
from connectors.cos import (
    CosApiError,
    CosClient,
    CosConfig,
    bucket_url,
    create_cos_client,
    download_bytes,
    download_file,
    download_with_config,
    parse_cos_error,
    upload_bytes,
    upload_file,
    upload_with_config,
)

BUCKET = "examplebucket-1250000000"
HOST = f"{BUCKET}.cos.ap-guangzhou.myqcloud.com"

ERROR_XML = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    "<Error><Code>AccessDenied</Code><Message>Access Denied.</Message>"
    "<Resource>examplebucket-1250000000.cos.ap-guangzhou.myqcloud.com/a.txt</Resource>"
    "<RequestId>NjE2NjJlYjJfMjQ</RequestId></Error>"
)


def _client(http_client) -> CosClient:
    return CosClient(
        "AKIDEXAMPLE",
        "SECRET",
        BUCKET,
        region="ap-guangzhou",
        http_client=http_client,
        clock=lambda: 1_700_000_000.0,
    )


class TestBucketUrl:
    """Testes para bucket_url."""

    def test_url(self) -> None:
        assert bucket_url(BUCKET, "ap-guangzhou") == f"https://{HOST}"

    @pytest.mark.parametrize(
        ("bucket", "region", "message"),
        [
            ("", "ap-guangzhou", "bucket cannot be empty"),
            (BUCKET, "", "region cannot be empty"),
            ("Bad_Bucket", "ap-guangzhou", "invalid bucket name"),
            (BUCKET, "ap guangzhou", "invalid region"),
        ],
    )
    def test_invalid(self, bucket: str, region: str, message: str) -> None:
        with pytest.raises(ValueError, match=message):
            bucket_url(bucket, region)


class TestCosClientInit:
    """Testes de construção."""

    def test_requires_credentials(self) -> None:
        with pytest.raises(ValueError):
            CosClient("", "SECRET", BUCKET, "ap-guangzhou")

    def test_custom_endpoint(self) -> None:
        client = CosClient("id", "key", BUCKET, endpoint="cos.ap-beijing.myqcloud.com/")
        assert client.host == f"{BUCKET}.cos.ap-beijing.myqcloud.com"

    def test_object_url_encodes_key(self) -> None:
        client = _client(None)
        assert client.object_url("/dir/olá mundo.txt") == f"https://{HOST}/dir/ol%C3%A1%20mundo.txt"

    def test_factory_from_settings(self) -> None:
        client = create_cos_client(
            CosSettings(secret_id="id", secret_key="key", region="ap-guangzhou", bucket=BUCKET)
        )
        assert client.host == HOST


class TestCosClientObjects:
    """Testes para put/get/head."""

    @pytest.mark.asyncio
    async def test_put_object(self, mock_http) -> None:
        http_client, requests = mock_http(
            lambda request: httpx.Response(200, headers={"ETag": '"d41d8cd98f00b204e9800998ecf8427e"'})
        )

        etag = await _client(http_client).put_object("docs/a.txt", b"hello", "text/plain")

        assert etag == "d41d8cd98f00b204e9800998ecf8427e"
        request = requests[0]
        assert request.method == "PUT"
        assert str(request.url) == f"https://{HOST}/docs/a.txt"
        assert request.content == b"hello"
        auth = request.headers["Authorization"]
        assert auth.startswith("q-sign-algorithm=sha1&q-ak=AKIDEXAMPLE")
        assert "q-sign-time=1699999940;1700000600" in auth
        assert "q-header-list=content-type;host" in auth

    @pytest.mark.asyncio
    async def test_sign_time_tolerates_clock_ahead(self, mock_http) -> None:
        http_client, requests = mock_http(lambda request: httpx.Response(200, content=b""))
        client = CosClient(
            "AKIDEXAMPLE",
            "SECRET",
            BUCKET,
            region="ap-guangzhou",
            sign_expires_seconds=300,
            http_client=http_client,
            clock=lambda: 1_700_000_000.9,
        )
        await client.get_object("a.txt")
        auth = requests[0].headers["Authorization"]
        assert "q-sign-time=1699999940;1700000300" in auth
        assert "q-key-time=1699999940;1700000300" in auth

    @pytest.mark.asyncio
    async def test_get_object(self, mock_http) -> None:
        http_client, requests = mock_http(lambda request: httpx.Response(200, content=b"data"))
        assert await _client(http_client).get_object("a.txt") == b"data"
        assert "q-header-list=host" in requests[0].headers["Authorization"]

    @pytest.mark.asyncio
    async def test_head_object(self, mock_http) -> None:
        http_client, _ = mock_http(
            lambda request: httpx.Response(
                200,
                headers={
                    "Content-Length": "5",
                    "Content-Type": "text/plain",
                    "ETag": '"abc"',
                    "Last-Modified": "Wed, 28 Oct 2020 07:00:00 GMT",
                },
            )
        )
        meta = await _client(http_client).head_object("a.txt")
        assert meta.content_length == 5
        assert meta.etag == "abc"
        assert meta.content_type == "text/plain"

    @pytest.mark.asyncio
    async def test_error_body(self, mock_http) -> None:
        http_client, _ = mock_http(lambda request: httpx.Response(403, text=ERROR_XML))
        with pytest.raises(CosApiError) as exc_info:
            await _client(http_client).get_object("a.txt")
        err = exc_info.value
        assert err.code == "AccessDenied"
        assert err.message == "Access Denied."
        assert err.status_code == 403
        assert err.request_id == "NjE2NjJlYjJfMjQ"
        assert err.resource.endswith("/a.txt")

    @pytest.mark.asyncio
    async def test_head_404_without_body(self, mock_http) -> None:
        http_client, _ = mock_http(
            lambda request: httpx.Response(404, headers={"x-cos-request-id": "req-404"})
        )
        with pytest.raises(CosApiError) as exc_info:
            await _client(http_client).head_object("missing.txt")
        assert exc_info.value.code == "NoSuchKey"
        assert exc_info.value.request_id == "req-404"

    @pytest.mark.asyncio
    async def test_empty_key(self, mock_http) -> None:
        http_client, requests = mock_http(lambda request: httpx.Response(200))
        with pytest.raises(ValueError, match="object key cannot be empty"):
            await _client(http_client).put_object("/", b"x")
        assert requests == []


class TestParseCosError:
    """Testes para parse_cos_error."""

    def test_non_xml_body(self) -> None:
        response = httpx.Response(500, text="oops")
        err = parse_cos_error(response)
        assert err.code == "HTTP500"
        assert err.vendor == "cos"


class TestCosTransfer:
    """Testes para upload/download de arquivos e bytes."""

    @pytest.mark.asyncio
    async def test_upload_file_guesses_content_type(self, tmp_path: Path, mock_http) -> None:
        local = tmp_path / "photo.png"
        local.write_bytes(b"\x89PNG")
        http_client, requests = mock_http(lambda request: httpx.Response(200, headers={"ETag": '"e1"'}))

        etag = await upload_file(_client(http_client), local, "images/photo.png")

        assert etag == "e1"
        assert requests[0].headers["Content-Type"] == "image/png"
        assert requests[0].content == b"\x89PNG"

    @pytest.mark.asyncio
    async def test_upload_missing_file_makes_no_call(self, tmp_path: Path, mock_http) -> None:
        http_client, requests = mock_http(lambda request: httpx.Response(200))
        with pytest.raises(FileNotFoundError):
            await upload_file(_client(http_client), tmp_path / "nope.txt", "a.txt")
        assert requests == []

    @pytest.mark.asyncio
    async def test_upload_invalid_cos_path(self, tmp_path: Path, mock_http) -> None:
        local = tmp_path / "a.txt"
        local.write_text("x")
        http_client, _ = mock_http(lambda request: httpx.Response(200))
        with pytest.raises(ValueError, match="invalid character"):
            await upload_file(_client(http_client), local, "a?b.txt")

    @pytest.mark.asyncio
    async def test_upload_bytes_default_content_type(self, mock_http) -> None:
        http_client, requests = mock_http(lambda request: httpx.Response(200, headers={"ETag": "e2"}))
        assert await upload_bytes(_client(http_client), b"raw", "blob/data") == "e2"
        assert requests[0].headers["Content-Type"] == "application/octet-stream"

    @pytest.mark.asyncio
    async def test_download_bytes(self, mock_http) -> None:
        http_client, _ = mock_http(lambda request: httpx.Response(200, content=b"payload"))
        assert await download_bytes(_client(http_client), "a.bin") == b"payload"

    @pytest.mark.asyncio
    async def test_download_file_creates_dirs(self, tmp_path: Path, mock_http) -> None:
        http_client, _ = mock_http(lambda request: httpx.Response(200, content=b"payload"))
        target = tmp_path / "nested" / "dir" / "a.bin"
        written = await download_file(_client(http_client), "a.bin", target)
        assert written == 7
        assert target.read_bytes() == b"payload"

    @pytest.mark.asyncio
    async def test_upload_with_config_returns_url(self, tmp_path: Path, mock_http) -> None:
        local = tmp_path / "report.pdf"
        local.write_bytes(b"%PDF")
        http_client, requests = mock_http(lambda request: httpx.Response(200, headers={"ETag": "e"}))
        config = CosConfig("cos.ap-guangzhou.myqcloud.com", "id", "key", BUCKET)

        url = await upload_with_config(config, local, "reports/report.pdf", http_client=http_client)

        assert url == f"https://{HOST}/reports/report.pdf"
        assert requests[0].url.host == HOST

    @pytest.mark.asyncio
    async def test_download_with_config(self, tmp_path: Path, mock_http) -> None:
        http_client, _ = mock_http(lambda request: httpx.Response(200, content=b"abc"))
        config = CosConfig("cos.ap-guangzhou.myqcloud.com", "id", "key", BUCKET)
        written = await download_with_config(config, "a.txt", tmp_path / "a.txt", http_client=http_client)
        assert written == 3

    @pytest.mark.asyncio
    async def test_incomplete_config(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="invalid cos configuration"):
            await upload_with_config(CosConfig("", "id", "key", BUCKET), tmp_path / "a", "a")
