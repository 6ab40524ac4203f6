"""Pedidos: criação (jsapi/native/app/h5), consulta e fechamento."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote, urlencode

from .errors import WeChatPayApiError
from .http_client import WeChatPayClient
from .models import (
    TRADE_TYPES,
    CreateOrderRequest,
    CreateOrderResponse,
    OrderAmount,
    Payer,
    QueryOrderResponse,
)

if TYPE_CHECKING:
    from config.settings import WeChatPaySettings

logger: logging.Logger = logging.getLogger(__name__)

TRANSACTIONS_PATH = "/v3/pay/transactions"


def _escape(segment: str) -> str:
    return quote(segment, safe="")


def build_order_request(
    description: str,
    out_trade_no: str,
    total: int,
    openid: str = "",
    settings: WeChatPaySettings | None = None,
    **extra: Any,
) -> CreateOrderRequest:
    """Monta CreateOrderRequest com appid, mchid e notify_url das settings.

    Args:
        description: Descrição do produto
        out_trade_no: Número do pedido do comerciante
        total: Valor em centavos
        openid: Pagador (obrigatório em jsapi)
        settings: WeChatPaySettings (default: variáveis de ambiente)
        **extra: Campos opcionais de CreateOrderRequest (attach, time_expire, scene_info)
    """
    from config.settings import get_wechatpay_settings

    wechatpay = settings or get_wechatpay_settings()
    return CreateOrderRequest(
        appid=wechatpay.appid,
        mchid=wechatpay.mchid,
        description=description,
        out_trade_no=out_trade_no,
        notify_url=wechatpay.notify_url,
        amount=OrderAmount(total=total),
        payer=Payer(openid=openid) if openid else None,
        **extra,
    )


def validate_create_order(request: CreateOrderRequest, trade_type: str) -> None:
    """Valida campos obrigatórios do pedido.

    Raises:
        ValueError: Primeiro campo inválido encontrado
    """
    if trade_type not in TRADE_TYPES:
        raise ValueError(f"unsupported trade_type: {trade_type}")
    if not request.appid:
        raise ValueError("appid is required")
    if not request.mchid:
        raise ValueError("mchid is required")
    if not request.description:
        raise ValueError("description is required")
    if not request.out_trade_no:
        raise ValueError("out_trade_no is required")
    if not request.notify_url:
        raise ValueError("notify_url is required")
    if request.amount.total <= 0:
        raise ValueError("amount.total must be positive")
    if not request.amount.currency:
        raise ValueError("currency is required")
    if trade_type == "jsapi" and (request.payer is None or not request.payer.openid):
        raise ValueError("payer.openid is required for jsapi")
    if trade_type == "h5" and not (request.scene_info or {}).get("payer_client_ip"):
        raise ValueError("scene_info.payer_client_ip is required for h5")


async def create_order(
    client: WeChatPayClient,
    request: CreateOrderRequest,
    trade_type: str = "jsapi",
) -> CreateOrderResponse:
    """Cria pedido e devolve prepay_id, code_url ou h5_url."""
    validate_create_order(request, trade_type)
    data = await client.request_json(
        "POST", f"{TRANSACTIONS_PATH}/{trade_type}", request.to_body()
    )
    result = CreateOrderResponse.model_validate(data)
    logger.info(
        "wechatpay_order_created",
        extra={"trade_type": trade_type, "out_trade_no": request.out_trade_no},
    )
    return result


async def query_order(
    client: WeChatPayClient,
    mchid: str,
    transaction_id: str | None = None,
    out_trade_no: str | None = None,
) -> QueryOrderResponse:
    """Consulta pedido por transaction_id (preferido) ou out_trade_no."""
    if not mchid:
        raise ValueError("mchid is required")
    if transaction_id:
        path = f"{TRANSACTIONS_PATH}/id/{_escape(transaction_id)}"
    elif out_trade_no:
        path = f"{TRANSACTIONS_PATH}/out-trade-no/{_escape(out_trade_no)}"
    else:
        raise ValueError("transaction_id or out_trade_no is required")

    data = await client.request_json("GET", f"{path}?{urlencode({'mchid': mchid})}")
    return QueryOrderResponse.model_validate(data)


async def close_order(client: WeChatPayClient, mchid: str, out_trade_no: str) -> None:
    """Fecha pedido não pago. Sucesso é HTTP 204 sem corpo."""
    if not mchid:
        raise ValueError("mchid is required")
    if not out_trade_no:
        raise ValueError("out_trade_no is required")

    response = await client.request(
        "POST",
        f"{TRANSACTIONS_PATH}/out-trade-no/{_escape(out_trade_no)}/close",
        {"mchid": mchid},
    )
    if response.status_code != 204:
        raise WeChatPayApiError(
            code="UNEXPECTED_STATUS",
            message=f"close order expected 204, got {response.status_code}",
            status_code=response.status_code,
        )
    logger.info("wechatpay_order_closed", extra={"out_trade_no": out_trade_no})
