"""Settings do AWS S3.

Credenciais estáticas (AK/SK) carregadas de variáveis de ambiente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class S3Settings:
    """Configurações do S3.

    Attributes:
        access_key_id: Access Key ID
        secret_access_key: Secret Access Key
        region: Região (ex: us-east-1)
        endpoint_url: Endpoint compatível com S3 (opcional)
        bucket: Bucket padrão (opcional)
        presign_expires_seconds: Validade padrão de URLs pré-assinadas
    """

    access_key_id: str = ""
    secret_access_key: str = ""
    region: str = "us-east-1"
    endpoint_url: str = ""
    bucket: str = ""
    presign_expires_seconds: int = 900

    def validate(self) -> list[str]:
        """Valida configurações mínimas do S3."""
        errors: list[str] = []
        if not self.access_key_id:
            errors.append("S3_ACCESS_KEY_ID não configurado")
        if not self.secret_access_key:
            errors.append("S3_SECRET_ACCESS_KEY não configurado")
        if not self.region:
            errors.append("S3_REGION não configurado")
        if self.presign_expires_seconds <= 0:
            errors.append("S3_PRESIGN_EXPIRES_SECONDS deve ser > 0")
        return errors


def _load_from_env() -> S3Settings:
    """Carrega S3Settings de variáveis de ambiente."""
    return S3Settings(
        access_key_id=os.getenv("S3_ACCESS_KEY_ID", ""),
        secret_access_key=os.getenv("S3_SECRET_ACCESS_KEY", ""),
        region=os.getenv("S3_REGION", "us-east-1"),
        endpoint_url=os.getenv("S3_ENDPOINT_URL", ""),
        bucket=os.getenv("S3_BUCKET", ""),
        presign_expires_seconds=int(os.getenv("S3_PRESIGN_EXPIRES_SECONDS", "900")),
    )


@lru_cache(maxsize=1)
def get_s3_settings() -> S3Settings:
    """Retorna instância cacheada de S3Settings."""
    return _load_from_env()
