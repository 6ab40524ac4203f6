"""Agregador de settings dos conectores.

Re-exporta todas as settings e funções de cada módulo.
Organização por fornecedor para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Object storage
from config.settings.cos import CosSettings, get_cos_settings

# Tencent Cloud (SMS, SES)
from config.settings.email import (
    SES_API_HOST,
    SES_API_VERSION,
    EmailSettings,
    get_email_settings,
)
from config.settings.s3 import S3Settings, get_s3_settings
from config.settings.sms import (
    SMS_API_HOST,
    SMS_API_VERSION,
    SmsSettings,
    get_sms_settings,
)
from config.settings.tencentcloud import (
    TencentCloudSettings,
    get_tencentcloud_settings,
)
from config.settings.vectordb import VectorDbSettings, get_vectordb_settings

# WeChat
from config.settings.wechat_mp import (
    WECHAT_API_BASE_URL,
    WeChatMpSettings,
    get_wechat_mp_settings,
)
from config.settings.wechatpay import (
    WECHATPAY_API_BASE_URL,
    WeChatPaySettings,
    get_wechatpay_settings,
)

__all__ = [
    # Constants
    "SES_API_HOST",
    "SES_API_VERSION",
    "SMS_API_HOST",
    "SMS_API_VERSION",
    "WECHATPAY_API_BASE_URL",
    "WECHAT_API_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    "get_base_settings",
    # Vendors
    "CosSettings",
    "EmailSettings",
    "S3Settings",
    "SmsSettings",
    "TencentCloudSettings",
    "VectorDbSettings",
    "WeChatMpSettings",
    "WeChatPaySettings",
    "get_cos_settings",
    "get_email_settings",
    "get_s3_settings",
    "get_sms_settings",
    "get_tencentcloud_settings",
    "get_vectordb_settings",
    "get_wechat_mp_settings",
    "get_wechatpay_settings",
]
