"""Settings do Tencent Cloud VectorDB."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class VectorDbSettings:
    """Configurações do VectorDB.

    Attributes:
        endpoint: URL da instância (ex: http://lb-xxx.clb.ap-guangzhou.tencentclb.com:10000)
        account: Conta de acesso (padrão root)
        api_key: API key da instância
        database: Database padrão
        request_timeout_seconds: Timeout para requisições HTTP
    """

    endpoint: str = ""
    account: str = "root"
    api_key: str = ""
    database: str = ""
    request_timeout_seconds: float = 10.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas do VectorDB."""
        errors: list[str] = []
        if not self.endpoint:
            errors.append("VECTORDB_ENDPOINT não configurado")
        if not self.api_key:
            errors.append("VECTORDB_API_KEY não configurado")
        if not self.account:
            errors.append("VECTORDB_ACCOUNT não configurado")
        return errors


def _load_from_env() -> VectorDbSettings:
    """Carrega VectorDbSettings de variáveis de ambiente."""
    return VectorDbSettings(
        endpoint=os.getenv("VECTORDB_ENDPOINT", ""),
        account=os.getenv("VECTORDB_ACCOUNT", "root"),
        api_key=os.getenv("VECTORDB_API_KEY", ""),
        database=os.getenv("VECTORDB_DATABASE", ""),
        request_timeout_seconds=float(
            os.getenv("VECTORDB_REQUEST_TIMEOUT_SECONDS", "10")
        ),
    )


@lru_cache(maxsize=1)
def get_vectordb_settings() -> VectorDbSettings:
    """Retorna instância cacheada de VectorDbSettings."""
    return _load_from_env()
