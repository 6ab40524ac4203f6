"""Assinaturas e cliente compartilhados pelos produtos Tencent Cloud."""

from connectors.tencentcloud.client import TencentCloudClient, create_tencentcloud_client
from connectors.tencentcloud.errors import (
    RETRYABLE_ERROR_CODES,
    TencentCloudApiError,
    is_retryable_error,
)
from connectors.tencentcloud.hmac_v1 import hmac_v1_sign
from connectors.tencentcloud.tc3 import Tc3Signature, tc3_sign

__all__ = [
    "RETRYABLE_ERROR_CODES",
    "Tc3Signature",
    "TencentCloudApiError",
    "TencentCloudClient",
    "create_tencentcloud_client",
    "hmac_v1_sign",
    "is_retryable_error",
    "tc3_sign",
]
