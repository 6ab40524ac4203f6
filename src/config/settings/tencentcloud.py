"""Settings compartilhadas da Tencent Cloud API.

SMS e SES (email) usam o mesmo par SecretId/SecretKey.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class TencentCloudSettings:
    """Credenciais da Tencent Cloud API.

    Attributes:
        secret_id: SecretId (AK)
        secret_key: SecretKey (SK)
        request_timeout_seconds: Timeout para requisições HTTP
    """

    secret_id: str = ""
    secret_key: str = ""
    request_timeout_seconds: float = 15.0

    def validate(self) -> list[str]:
        """Valida credenciais mínimas."""
        errors: list[str] = []
        if not self.secret_id:
            errors.append("TENCENTCLOUD_SECRET_ID não configurado")
        if not self.secret_key:
            errors.append("TENCENTCLOUD_SECRET_KEY não configurado")
        if self.request_timeout_seconds <= 0:
            errors.append("TENCENTCLOUD_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_from_env() -> TencentCloudSettings:
    """Carrega TencentCloudSettings de variáveis de ambiente."""
    return TencentCloudSettings(
        secret_id=os.getenv("TENCENTCLOUD_SECRET_ID", ""),
        secret_key=os.getenv("TENCENTCLOUD_SECRET_KEY", ""),
        request_timeout_seconds=float(
            os.getenv("TENCENTCLOUD_REQUEST_TIMEOUT_SECONDS", "15")
        ),
    )


@lru_cache(maxsize=1)
def get_tencentcloud_settings() -> TencentCloudSettings:
    """Retorna instância cacheada de TencentCloudSettings."""
    return _load_from_env()
