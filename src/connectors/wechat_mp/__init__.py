"""API da conta oficial WeChat (服务号)."""

from connectors.wechat_mp.errors import WeChatApiError
from connectors.wechat_mp.models import (
    FORMAT_AMR,
    FORMAT_MP3,
    FORMAT_SPEEX,
    FORMAT_WAV,
    LANGUAGE_EN_US,
    LANGUAGE_ZH_CN,
    AccessToken,
    MiniProgram,
)
from connectors.wechat_mp.template import (
    TemplateMessageClient,
    build_template_message,
    create_template_message_client,
    send_template_message,
)
from connectors.wechat_mp.token import get_access_token
from connectors.wechat_mp.voice import (
    recognize_voice,
    upload_voice_file,
    validate_voice_file,
)

__all__ = [
    "FORMAT_AMR",
    "FORMAT_MP3",
    "FORMAT_SPEEX",
    "FORMAT_WAV",
    "LANGUAGE_EN_US",
    "LANGUAGE_ZH_CN",
    "AccessToken",
    "MiniProgram",
    "TemplateMessageClient",
    "WeChatApiError",
    "build_template_message",
    "create_template_message_client",
    "get_access_token",
    "recognize_voice",
    "send_template_message",
    "upload_voice_file",
    "validate_voice_file",
]
