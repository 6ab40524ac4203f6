"""Erros da Tencent Cloud API e classificação de retentabilidade."""

from __future__ import annotations

import httpx

from utils.errors import VendorApiError

# Códigos de erro transitórios devolvidos em Response.Error.Code
RETRYABLE_ERROR_CODES = frozenset(
    {
        "RequestLimitExceeded",
        "TooManyRequests",
        "RateLimitExceeded",
        "InternalError",
        "ServiceUnavailable",
        "Timeout",
    }
)


class TencentCloudApiError(VendorApiError):
    """Erro devolvido em Response.Error de uma API Tencent Cloud.

    Attributes:
        request_id: RequestId da resposta (para suporte)
    """

    vendor = "tencentcloud"

    def __init__(
        self,
        code: str,
        message: str,
        request_id: str = "",
        status_code: int | None = None,
    ) -> None:
        self.request_id = request_id
        super().__init__(code, message, status_code)


def is_retryable_error(err: BaseException) -> bool:
    """Indica se vale a pena o chamador repetir a requisição.

    Timeouts de rede, códigos numéricos 5xx e códigos de limitação/indisponibilidade
    são transitórios. O conector em si nunca repete.
    """
    if isinstance(err, httpx.TimeoutException):
        return True
    if not isinstance(err, TencentCloudApiError):
        return False

    code = str(err.code)
    if code.isdigit():
        return 500 <= int(code) < 600
    # Códigos compostos, ex: "InternalError.DbError"
    return code.split(".", 1)[0] in RETRYABLE_ERROR_CODES
