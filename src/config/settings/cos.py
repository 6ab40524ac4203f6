"""Settings do Tencent Cloud Object Storage (COS)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class CosSettings:
    """Configurações do COS.

    Attributes:
        secret_id: SecretId da conta Tencent Cloud
        secret_key: SecretKey da conta Tencent Cloud
        region: Região do bucket (ex: ap-guangzhou)
        bucket: Nome do bucket no formato <nome>-<appid>
        sign_expires_seconds: Validade da assinatura q-sign-time
        request_timeout_seconds: Timeout para requisições HTTP
    """

    secret_id: str = ""
    secret_key: str = ""
    region: str = ""
    bucket: str = ""
    sign_expires_seconds: int = 600
    request_timeout_seconds: float = 60.0

    @property
    def endpoint(self) -> str:
        """Endpoint regional (cos.<region>.myqcloud.com)."""
        return f"cos.{self.region}.myqcloud.com"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do COS."""
        errors: list[str] = []
        if not self.secret_id:
            errors.append("COS_SECRET_ID não configurado")
        if not self.secret_key:
            errors.append("COS_SECRET_KEY não configurado")
        if not self.region:
            errors.append("COS_REGION não configurado")
        if not self.bucket:
            errors.append("COS_BUCKET não configurado")
        if self.sign_expires_seconds <= 0:
            errors.append("COS_SIGN_EXPIRES_SECONDS deve ser > 0")
        return errors


def _load_from_env() -> CosSettings:
    """Carrega CosSettings de variáveis de ambiente."""
    return CosSettings(
        secret_id=os.getenv("COS_SECRET_ID", ""),
        secret_key=os.getenv("COS_SECRET_KEY", ""),
        region=os.getenv("COS_REGION", ""),
        bucket=os.getenv("COS_BUCKET", ""),
        sign_expires_seconds=int(os.getenv("COS_SIGN_EXPIRES_SECONDS", "600")),
        request_timeout_seconds=float(os.getenv("COS_REQUEST_TIMEOUT_SECONDS", "60")),
    )


@lru_cache(maxsize=1)
def get_cos_settings() -> CosSettings:
    """Retorna instância cacheada de CosSettings."""
    return _load_from_env()
