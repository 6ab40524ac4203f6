"""WeChat Pay API v2 legada (reembolso XML)."""

from connectors.wechatpay.errors import WeChatPayV2Error
from connectors.wechatpay.v2.refund import (
    RefundRequest,
    WeChatPayV2Client,
    create_wechatpay_v2_client,
    validate_refund_request,
)
from connectors.wechatpay.v2.sign import (
    SIGN_TYPE_HMAC_SHA256,
    SIGN_TYPE_MD5,
    sign_params,
    verify_params_sign,
)
from connectors.wechatpay.v2.xml_codec import from_xml, to_xml

__all__ = [
    "SIGN_TYPE_HMAC_SHA256",
    "SIGN_TYPE_MD5",
    "RefundRequest",
    "WeChatPayV2Client",
    "WeChatPayV2Error",
    "create_wechatpay_v2_client",
    "from_xml",
    "sign_params",
    "to_xml",
    "validate_refund_request",
    "verify_params_sign",
]
