"""Reembolsos: criação e consulta (/v3/refund/domestic/refunds)."""

from __future__ import annotations

import logging
from urllib.parse import quote

from .http_client import WeChatPayClient
from .models import CreateRefundRequest, RefundResponse

logger: logging.Logger = logging.getLogger(__name__)

REFUNDS_PATH = "/v3/refund/domestic/refunds"


def validate_create_refund(request: CreateRefundRequest) -> None:
    """Valida reembolso.

    Raises:
        ValueError: Campo obrigatório ausente ou valores inconsistentes
    """
    if not request.out_refund_no:
        raise ValueError("out_refund_no is required")
    if not request.out_trade_no and not request.transaction_id:
        raise ValueError("transaction_id or out_trade_no is required")
    if request.amount.refund <= 0:
        raise ValueError("amount.refund must be positive")
    if request.amount.total <= 0:
        raise ValueError("amount.total must be positive")
    if request.amount.refund > request.amount.total:
        raise ValueError("amount.refund cannot exceed amount.total")
    if not request.amount.currency:
        raise ValueError("currency is required")


async def create_refund(
    client: WeChatPayClient, request: CreateRefundRequest
) -> RefundResponse:
    """Solicita reembolso."""
    validate_create_refund(request)
    data = await client.request_json("POST", REFUNDS_PATH, request.to_body())
    result = RefundResponse.model_validate(data)
    logger.info(
        "wechatpay_refund_created",
        extra={"out_refund_no": request.out_refund_no, "status": result.status},
    )
    return result


async def query_refund(client: WeChatPayClient, out_refund_no: str) -> RefundResponse:
    """Consulta reembolso por out_refund_no."""
    if not out_refund_no:
        raise ValueError("out_refund_no is required")
    data = await client.request_json(
        "GET", f"{REFUNDS_PATH}/{quote(out_refund_no, safe='')}"
    )
    return RefundResponse.model_validate(data)
