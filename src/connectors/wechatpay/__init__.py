"""WeChat Pay API v3 (JSON, WECHATPAY2-SHA256-RSA2048)."""

from connectors.wechatpay.errors import (
    WeChatPayApiError,
    WeChatPayCryptoError,
    WeChatPaySignatureError,
    WeChatPayV2Error,
)
from connectors.wechatpay.http_client import WeChatPayClient, create_wechatpay_client
from connectors.wechatpay.keys import load_certificate, load_private_key
from connectors.wechatpay.models import (
    CreateOrderRequest,
    CreateOrderResponse,
    CreateRefundRequest,
    OrderAmount,
    Payer,
    QueryOrderResponse,
    RefundAmount,
    RefundResponse,
)
from connectors.wechatpay.orders import (
    build_order_request,
    close_order,
    create_order,
    query_order,
)
from connectors.wechatpay.refunds import create_refund, query_refund
from connectors.wechatpay.signature import (
    build_authorization,
    build_sign_message,
    generate_nonce,
    sign_message,
    verify_signature,
)

__all__ = [
    "CreateOrderRequest",
    "CreateOrderResponse",
    "CreateRefundRequest",
    "OrderAmount",
    "Payer",
    "QueryOrderResponse",
    "RefundAmount",
    "RefundResponse",
    "WeChatPayApiError",
    "WeChatPayClient",
    "WeChatPayCryptoError",
    "WeChatPaySignatureError",
    "WeChatPayV2Error",
    "build_authorization",
    "build_order_request",
    "build_sign_message",
    "close_order",
    "create_order",
    "create_refund",
    "create_wechatpay_client",
    "generate_nonce",
    "load_certificate",
    "load_private_key",
    "query_order",
    "query_refund",
    "sign_message",
    "verify_signature",
]
