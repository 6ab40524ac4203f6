"""Erros e interpretação de respostas da API da conta oficial."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from config.logging import log_vendor_error
from connectors.http_base import is_success, parse_json_body
from utils.errors import ConnectorError, HttpStatusError, VendorApiError

if TYPE_CHECKING:
    import httpx

logger: logging.Logger = logging.getLogger(__name__)


class WeChatApiError(VendorApiError):
    """Resposta com errcode diferente de zero."""

    vendor = "wechat"


def parse_wechat_response(response: httpx.Response, operation: str) -> dict[str, Any]:
    """Valida status e errcode; devolve o corpo JSON.

    Raises:
        HttpStatusError: Status não-2xx
        ConnectorError: Corpo não é um objeto JSON
        WeChatApiError: errcode != 0
    """
    if not is_success(response):
        raise HttpStatusError(response.status_code, response.text)

    data = parse_json_body(response)
    if not isinstance(data, dict):
        raise ConnectorError(f"wechat {operation}: invalid json response")

    errcode = data.get("errcode", 0)
    if errcode:
        log_vendor_error(
            logger, "wechat", operation, code=errcode, status_code=response.status_code
        )
        raise WeChatApiError(
            int(errcode), str(data.get("errmsg", "")), response.status_code
        )
    return data
