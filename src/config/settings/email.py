"""Settings específicas de Email (Tencent Cloud SES, versão 2020-10-02)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

SES_API_VERSION: str = "2020-10-02"
SES_API_HOST: str = "ses.tencentcloudapi.com"


@dataclass(frozen=True)
class EmailSettings:
    """Configurações do canal Email.

    Attributes:
        region: Região do SES (ap-guangzhou, ap-hongkong)
        from_address: Remetente padrão (pode incluir nome: "Loja <no-reply@x.com>")
        reply_to: Endereço de resposta padrão
        host: Host da API
        api_version: Versão da API
    """

    region: str = "ap-guangzhou"
    from_address: str = ""
    reply_to: str = ""
    host: str = SES_API_HOST
    api_version: str = SES_API_VERSION

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Email."""
        errors: list[str] = []
        if not self.region:
            errors.append("EMAIL_REGION não configurado")
        if not self.from_address:
            errors.append("EMAIL_FROM_ADDRESS não configurado")
        return errors


def _load_from_env() -> EmailSettings:
    """Carrega EmailSettings de variáveis de ambiente."""
    return EmailSettings(
        region=os.getenv("EMAIL_REGION", "ap-guangzhou"),
        from_address=os.getenv("EMAIL_FROM_ADDRESS", ""),
        reply_to=os.getenv("EMAIL_REPLY_TO", ""),
        host=os.getenv("EMAIL_API_HOST", SES_API_HOST),
        api_version=os.getenv("EMAIL_API_VERSION", SES_API_VERSION),
    )


@lru_cache(maxsize=1)
def get_email_settings() -> EmailSettings:
    """Retorna instância cacheada de EmailSettings."""
    return _load_from_env()
