"""Settings do WeChat Pay (API v3 e API v2 legada).

Chaves PEM podem vir inline (variável com o conteúdo) ou de arquivo
(variável *_PATH). Conteúdo inline tem precedência.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

WECHATPAY_API_BASE_URL: str = "https://api.mch.weixin.qq.com"


@dataclass(frozen=True)
class WeChatPaySettings:
    """Configurações do WeChat Pay.

    Attributes:
        mchid: Número do comerciante (商户号)
        appid: AppID padrão dos pedidos (build_order_request)
        cert_serial_no: Número de série do certificado do comerciante
        private_key_pem: Chave privada RSA do comerciante (PEM)
        platform_cert_pem: Certificado da plataforma para verificar respostas (PEM)
        api_v2_key: Chave da API v2 (assinatura MD5/HMAC-SHA256 do XML)
        notify_url: URL de notificação padrão dos pedidos
        api_base_url: URL base da API
        request_timeout_seconds: Timeout para requisições HTTP
    """

    mchid: str = ""
    appid: str = ""
    cert_serial_no: str = ""
    private_key_pem: str = ""
    platform_cert_pem: str = ""
    api_v2_key: str = ""
    notify_url: str = ""
    api_base_url: str = WECHATPAY_API_BASE_URL
    request_timeout_seconds: float = 10.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas da API v3."""
        errors: list[str] = []
        if not self.mchid:
            errors.append("WECHATPAY_MCHID não configurado")
        if not self.cert_serial_no:
            errors.append("WECHATPAY_CERT_SERIAL_NO não configurado")
        if not self.private_key_pem:
            errors.append("WECHATPAY_PRIVATE_KEY não configurado")
        if self.request_timeout_seconds <= 0:
            errors.append("WECHATPAY_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _read_pem(inline_var: str, path_var: str) -> str:
    """Lê PEM inline ou de arquivo."""
    inline = os.getenv(inline_var, "")
    if inline:
        return inline.replace("\\n", "\n")
    path = os.getenv(path_var, "")
    if path:
        return Path(path).read_text(encoding="utf-8")
    return ""


def _load_from_env() -> WeChatPaySettings:
    """Carrega WeChatPaySettings de variáveis de ambiente."""
    return WeChatPaySettings(
        mchid=os.getenv("WECHATPAY_MCHID", ""),
        appid=os.getenv("WECHATPAY_APPID", ""),
        cert_serial_no=os.getenv("WECHATPAY_CERT_SERIAL_NO", ""),
        private_key_pem=_read_pem("WECHATPAY_PRIVATE_KEY", "WECHATPAY_PRIVATE_KEY_PATH"),
        platform_cert_pem=_read_pem(
            "WECHATPAY_PLATFORM_CERT", "WECHATPAY_PLATFORM_CERT_PATH"
        ),
        api_v2_key=os.getenv("WECHATPAY_API_V2_KEY", ""),
        notify_url=os.getenv("WECHATPAY_NOTIFY_URL", ""),
        api_base_url=os.getenv("WECHATPAY_API_BASE_URL", WECHATPAY_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("WECHATPAY_REQUEST_TIMEOUT_SECONDS", "10")
        ),
    )


@lru_cache(maxsize=1)
def get_wechatpay_settings() -> WeChatPaySettings:
    """Retorna instância cacheada de WeChatPaySettings."""
    return _load_from_env()
