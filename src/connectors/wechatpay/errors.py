"""Erros do WeChat Pay (API v3 e v2)."""

from __future__ import annotations

from typing import Any

from utils.errors import ConnectorError, VendorApiError


class WeChatPayCryptoError(ConnectorError):
    """Chave, certificado ou assinatura em formato inválido."""


class WeChatPaySignatureError(ConnectorError):
    """Resposta sem headers Wechatpay-* ou com assinatura que não confere."""


class WeChatPayApiError(VendorApiError):
    """Erro da API v3 (corpo {code, message} em status não-2xx)."""

    vendor = "wechatpay"


class WeChatPayV2Error(VendorApiError):
    """Erro da API v2 (return_code/result_code diferentes de SUCCESS).

    Attributes:
        result: Resposta XML decodificada, quando houver
    """

    vendor = "wechatpay_v2"

    def __init__(
        self,
        code: str,
        message: str,
        result: dict[str, Any] | None = None,
        status_code: int | None = None,
    ) -> None:
        self.result = result or {}
        super().__init__(code, message, status_code)
