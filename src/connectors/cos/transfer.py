"""Upload e download de arquivos/bytes no COS."""

from __future__ import annotations

import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path

from connectors.http_base import HttpClient

from .client import CosClient
from .paths import validate_path

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CosConfig:
    """Configuração avulsa para upload/download sem cliente pré-montado.

    Attributes:
        endpoint: Endpoint regional (ex: cos.ap-guangzhou.myqcloud.com)
        secret_id: SecretId
        secret_key: SecretKey
        bucket_name: Bucket no formato <nome>-<appid>
    """

    endpoint: str
    secret_id: str
    secret_key: str
    bucket_name: str

    def is_complete(self) -> bool:
        return all((self.endpoint, self.secret_id, self.secret_key, self.bucket_name))


def _guess_content_type(name: str) -> str:
    return mimetypes.guess_type(name)[0] or "application/octet-stream"


async def upload_file(client: CosClient, local_path: str | Path, cos_path: str) -> str:
    """Envia arquivo local. Devolve o ETag.

    Raises:
        FileNotFoundError: Arquivo local inexistente (antes da requisição)
        ValueError: cos_path inválido
    """
    validate_path(cos_path)
    path = Path(local_path)
    if not path.is_file():
        raise FileNotFoundError(f"local file not found: {path}")
    return await client.put_object(
        cos_path, path.read_bytes(), content_type=_guess_content_type(path.name)
    )


async def upload_bytes(client: CosClient, data: bytes, cos_path: str) -> str:
    """Envia bytes. Devolve o ETag."""
    validate_path(cos_path)
    return await client.put_object(cos_path, data, content_type=_guess_content_type(cos_path))


async def download_bytes(client: CosClient, cos_path: str) -> bytes:
    """Lê o objeto para memória."""
    validate_path(cos_path)
    return await client.get_object(cos_path)


async def download_file(client: CosClient, cos_path: str, local_path: str | Path) -> int:
    """Grava o objeto em local_path (cria diretórios). Devolve bytes escritos."""
    data = await download_bytes(client, cos_path)
    path = Path(local_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    logger.info("cos_download_ok", extra={"bucket": client.bucket, "size": len(data)})
    return len(data)


def _client_from_config(config: CosConfig, http_client: HttpClient | None) -> CosClient:
    if not config.is_complete():
        raise ValueError("invalid cos configuration")
    return CosClient(
        secret_id=config.secret_id,
        secret_key=config.secret_key,
        bucket=config.bucket_name,
        endpoint=config.endpoint,
        http_client=http_client,
    )


async def upload_with_config(
    config: CosConfig,
    file_path: str | Path,
    cos_path: str,
    http_client: HttpClient | None = None,
) -> str:
    """Envia arquivo e devolve a URL do objeto."""
    client = _client_from_config(config, http_client)
    await upload_file(client, file_path, cos_path)
    return client.object_url(cos_path)


async def download_with_config(
    config: CosConfig,
    cos_path: str,
    local_path: str | Path,
    http_client: HttpClient | None = None,
) -> int:
    """Baixa objeto para local_path. Devolve bytes escritos."""
    client = _client_from_config(config, http_client)
    return await download_file(client, cos_path, local_path)
