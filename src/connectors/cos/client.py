"""Cliente da API XML do COS (PUT/GET/HEAD de objetos)."""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import quote, urlsplit

from config.logging import log_vendor_error
from connectors.http_base import HttpClient, HttpClientConfig, is_success

from .errors import parse_cos_error
from .signer import build_authorization

if TYPE_CHECKING:
    import httpx

    from config.settings import CosSettings

logger: logging.Logger = logging.getLogger(__name__)

_NAME_RE = re.compile(r"^[a-z0-9][a-z0-9-]*[a-z0-9]$|^[a-z0-9]$")

# q-sign-time começa no passado para tolerar relógio local adiantado
SIGN_CLOCK_SKEW_SECONDS = 60


def bucket_url(bucket: str, region: str) -> str:
    """https://<bucket>.cos.<region>.myqcloud.com.

    Raises:
        ValueError: bucket/region vazios ou com caracteres inválidos
    """
    if not bucket:
        raise ValueError("bucket cannot be empty")
    if not region:
        raise ValueError("region cannot be empty")
    if not _NAME_RE.match(bucket):
        raise ValueError(f"invalid bucket name: {bucket}")
    if not _NAME_RE.match(region):
        raise ValueError(f"invalid region: {region}")
    return f"https://{bucket}.cos.{region}.myqcloud.com"


@dataclass(frozen=True)
class CosObjectMeta:
    """Metadados de HEAD Object."""

    content_length: int
    content_type: str
    etag: str
    last_modified: str


class CosClient:
    """Cliente de um bucket COS.

    Args:
        secret_id: SecretId
        secret_key: SecretKey
        bucket: Bucket no formato <nome>-<appid>
        region: Região (ex: ap-guangzhou)
        endpoint: Endpoint alternativo (ex: cos.ap-guangzhou.myqcloud.com);
            quando informado, dispensa region
        sign_expires_seconds: Validade de cada assinatura
        http_client: HttpClient injetável (testes)
        clock: Fonte de tempo em segundos (testes)
    """

    def __init__(
        self,
        secret_id: str,
        secret_key: str,
        bucket: str,
        region: str = "",
        endpoint: str | None = None,
        sign_expires_seconds: int = 600,
        http_client: HttpClient | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret_id or not secret_key:
            raise ValueError("secret_id e secret_key são obrigatórios")
        if endpoint:
            if not bucket:
                raise ValueError("bucket cannot be empty")
            self.base_url = f"https://{bucket}.{endpoint.strip('/')}"
        else:
            self.base_url = bucket_url(bucket, region)
        self.bucket = bucket
        self.region = region
        self._secret_id = secret_id
        self._secret_key = secret_key
        self._sign_expires = sign_expires_seconds
        self._http = http_client or HttpClient()
        self._clock = clock

    @property
    def host(self) -> str:
        return urlsplit(self.base_url).netloc

    def object_url(self, key: str) -> str:
        """URL pública do objeto (key url-encoded, '/' preservado)."""
        return f"{self.base_url}/{quote(key.lstrip('/'), safe='/')}"

    def _signed_headers(
        self, method: str, key: str, extra: dict[str, str] | None = None
    ) -> dict[str, str]:
        headers = {"Host": self.host, **(extra or {})}
        signed = {name.lower(): value for name, value in headers.items()}
        headers["Authorization"] = build_authorization(
            self._secret_id,
            self._secret_key,
            method,
            "/" + key.lstrip("/"),
            headers=signed,
            start_time=int(self._clock()) - SIGN_CLOCK_SKEW_SECONDS,
            expires_seconds=self._sign_expires + SIGN_CLOCK_SKEW_SECONDS,
        )
        return headers

    async def _send(
        self,
        method: str,
        key: str,
        content: bytes | None = None,
        extra_headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        if not key or not key.strip("/"):
            raise ValueError("object key cannot be empty")
        response = await self._http.request(
            method,
            self.object_url(key),
            headers=self._signed_headers(method, key, extra_headers),
            content=content,
        )
        if not is_success(response):
            error = parse_cos_error(response)
            log_vendor_error(
                logger,
                "cos",
                f"{method.lower()}_object",
                code=error.code,
                status_code=response.status_code,
            )
            raise error
        return response

    async def put_object(
        self, key: str, data: bytes, content_type: str = "application/octet-stream"
    ) -> str:
        """Grava objeto e devolve o ETag."""
        response = await self._send(
            "PUT", key, content=data, extra_headers={"Content-Type": content_type}
        )
        logger.info("cos_put_object_ok", extra={"bucket": self.bucket, "size": len(data)})
        return response.headers.get("ETag", "").strip('"')

    async def get_object(self, key: str) -> bytes:
        """Lê o conteúdo do objeto."""
        response = await self._send("GET", key)
        return response.content

    async def head_object(self, key: str) -> CosObjectMeta:
        """Metadados do objeto; inexistente gera CosApiError(NoSuchKey)."""
        response = await self._send("HEAD", key)
        return CosObjectMeta(
            content_length=int(response.headers.get("Content-Length", "0") or 0),
            content_type=response.headers.get("Content-Type", ""),
            etag=response.headers.get("ETag", "").strip('"'),
            last_modified=response.headers.get("Last-Modified", ""),
        )


def create_cos_client(
    settings: CosSettings | None = None,
    http_client: HttpClient | None = None,
) -> CosClient:
    """Factory a partir das settings do COS."""
    from config.settings import get_cos_settings

    cos = settings or get_cos_settings()
    return CosClient(
        secret_id=cos.secret_id,
        secret_key=cos.secret_key,
        bucket=cos.bucket,
        region=cos.region,
        sign_expires_seconds=cos.sign_expires_seconds,
        http_client=http_client
        or HttpClient(HttpClientConfig(timeout_seconds=cos.request_timeout_seconds)),
    )
