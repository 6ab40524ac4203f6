"""Tencent Cloud SMS."""

from connectors.sms.models import SendSmsResult, SendStatus, SmsSendError
from connectors.sms.service import (
    SmsService,
    build_send_sms_params,
    create_sms_service,
    validate_phone_number,
)

__all__ = [
    "SendSmsResult",
    "SendStatus",
    "SmsSendError",
    "SmsService",
    "build_send_sms_params",
    "create_sms_service",
    "validate_phone_number",
]
