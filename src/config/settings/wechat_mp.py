"""Settings do serviço de conta oficial WeChat (服务号)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

WECHAT_API_BASE_URL: str = "https://api.weixin.qq.com"


@dataclass(frozen=True)
class WeChatMpSettings:
    """Configurações da conta oficial.

    Attributes:
        app_id: AppID da conta oficial
        app_secret: AppSecret da conta oficial
        template_id: Template padrão para mensagens de template
        api_base_url: URL base da API
        request_timeout_seconds: Timeout para requisições HTTP
        voice_max_size_bytes: Tamanho máximo aceito para upload de voz
    """

    app_id: str = ""
    app_secret: str = ""
    template_id: str = ""
    api_base_url: str = WECHAT_API_BASE_URL
    request_timeout_seconds: float = 10.0
    voice_max_size_bytes: int = 2 * 1024 * 1024  # 2MB, limite do WeChat para voz

    def validate(self) -> list[str]:
        """Valida configurações mínimas da conta oficial."""
        errors: list[str] = []
        if not self.app_id:
            errors.append("WECHAT_MP_APP_ID não configurado")
        if not self.app_secret:
            errors.append("WECHAT_MP_APP_SECRET não configurado")
        if self.request_timeout_seconds <= 0:
            errors.append("WECHAT_MP_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_from_env() -> WeChatMpSettings:
    """Carrega WeChatMpSettings de variáveis de ambiente."""
    return WeChatMpSettings(
        app_id=os.getenv("WECHAT_MP_APP_ID", ""),
        app_secret=os.getenv("WECHAT_MP_APP_SECRET", ""),
        template_id=os.getenv("WECHAT_MP_TEMPLATE_ID", ""),
        api_base_url=os.getenv("WECHAT_MP_API_BASE_URL", WECHAT_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("WECHAT_MP_REQUEST_TIMEOUT_SECONDS", "10")
        ),
        voice_max_size_bytes=int(
            os.getenv("WECHAT_MP_VOICE_MAX_SIZE_BYTES", str(2 * 1024 * 1024))
        ),
    )


@lru_cache(maxsize=1)
def get_wechat_mp_settings() -> WeChatMpSettings:
    """Retorna instância cacheada de WeChatMpSettings."""
    return _load_from_env()
