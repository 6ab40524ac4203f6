"""Settings específicas de SMS (Tencent Cloud SMS, versão 2021-01-11)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

SMS_API_VERSION: str = "2021-01-11"
SMS_API_HOST: str = "sms.tencentcloudapi.com"


@dataclass(frozen=True)
class SmsSettings:
    """Configurações do canal SMS.

    Attributes:
        sdk_app_id: SmsSdkAppId da aplicação SMS
        sign_name: Assinatura (签名) aprovada
        region: Região da API (ex: ap-guangzhou)
        host: Host da API
        api_version: Versão da API
    """

    sdk_app_id: str = ""
    sign_name: str = ""
    region: str = "ap-guangzhou"
    host: str = SMS_API_HOST
    api_version: str = SMS_API_VERSION

    def validate(self) -> list[str]:
        """Valida configurações mínimas de SMS."""
        errors: list[str] = []
        if not self.sdk_app_id:
            errors.append("SMS_SDK_APP_ID não configurado")
        if not self.sign_name:
            errors.append("SMS_SIGN_NAME não configurado")
        if not self.region:
            errors.append("SMS_REGION não configurado")
        return errors


def _load_from_env() -> SmsSettings:
    """Carrega SmsSettings de variáveis de ambiente."""
    return SmsSettings(
        sdk_app_id=os.getenv("SMS_SDK_APP_ID", ""),
        sign_name=os.getenv("SMS_SIGN_NAME", ""),
        region=os.getenv("SMS_REGION", "ap-guangzhou"),
        host=os.getenv("SMS_API_HOST", SMS_API_HOST),
        api_version=os.getenv("SMS_API_VERSION", SMS_API_VERSION),
    )


@lru_cache(maxsize=1)
def get_sms_settings() -> SmsSettings:
    """Retorna instância cacheada de SmsSettings."""
    return _load_from_env()
