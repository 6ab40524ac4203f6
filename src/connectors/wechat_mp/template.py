"""Mensagens de template da conta oficial."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from config.settings.wechat_mp import WECHAT_API_BASE_URL
from connectors.http_base import HttpClient, HttpClientConfig

from .errors import parse_wechat_response
from .models import MiniProgram
from .token import get_access_token

if TYPE_CHECKING:
    from config.settings import WeChatMpSettings

logger: logging.Logger = logging.getLogger(__name__)

TEMPLATE_SEND_PATH = "/cgi-bin/message/template/send"


def build_template_message(
    open_id: str,
    template_id: str,
    data: Mapping[str, Any],
    url: str | None = None,
    miniprogram: MiniProgram | Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Monta o corpo de template/send.

    miniprogram só entra quando appid e pagepath estão presentes.
    """
    if not open_id:
        raise ValueError("open_id is required")
    if not template_id:
        raise ValueError("template_id is required")

    message: dict[str, Any] = {
        "touser": open_id,
        "template_id": template_id,
        "data": dict(data),
    }
    if url:
        message["url"] = url

    if isinstance(miniprogram, MiniProgram):
        appid, pagepath = miniprogram.appid, miniprogram.pagepath
    elif miniprogram:
        appid, pagepath = miniprogram.get("appid", ""), miniprogram.get("pagepath", "")
    else:
        appid = pagepath = ""
    if appid and pagepath:
        message["miniprogram"] = {"appid": appid, "pagepath": pagepath}
    return message


async def send_template_message(
    access_token: str,
    message: dict[str, Any],
    *,
    http_client: HttpClient | None = None,
    base_url: str = WECHAT_API_BASE_URL,
) -> int:
    """Envia mensagem já montada e devolve msgid."""
    if not access_token:
        raise ValueError("access_token is required")

    http = http_client or HttpClient()
    response = await http.post(
        f"{base_url.rstrip('/')}{TEMPLATE_SEND_PATH}",
        params={"access_token": access_token},
        json=message,
    )
    data = parse_wechat_response(response, "template_send")
    msgid = int(data.get("msgid") or 0)
    logger.info(
        "wechat_template_sent",
        extra={"template_id": message.get("template_id", ""), "msgid": msgid},
    )
    return msgid


class TemplateMessageClient:
    """Envio de template com token buscado a cada chamada.

    Args:
        app_id: AppID da conta oficial
        app_secret: AppSecret da conta oficial
        template_id: Template usado por send()
        http_client: HttpClient injetável (testes)
        base_url: URL base da API
    """

    def __init__(
        self,
        app_id: str,
        app_secret: str,
        template_id: str,
        http_client: HttpClient | None = None,
        base_url: str = WECHAT_API_BASE_URL,
    ) -> None:
        if not app_id or not app_secret:
            raise ValueError("app_id and app_secret are required")
        if not template_id:
            raise ValueError("template_id is required")
        self._app_id = app_id
        self._app_secret = app_secret
        self.template_id = template_id
        self._http = http_client or HttpClient()
        self._base_url = base_url

    async def send(
        self,
        open_id: str,
        data: Mapping[str, Any],
        url: str | None = None,
        miniprogram: MiniProgram | Mapping[str, str] | None = None,
    ) -> int:
        """Monta a mensagem, obtém token e envia. Devolve msgid."""
        message = build_template_message(
            open_id, self.template_id, data, url, miniprogram
        )
        token = await get_access_token(
            self._app_id,
            self._app_secret,
            http_client=self._http,
            base_url=self._base_url,
        )
        return await send_template_message(
            token.token, message, http_client=self._http, base_url=self._base_url
        )


def create_template_message_client(
    settings: WeChatMpSettings | None = None,
) -> TemplateMessageClient:
    """Factory a partir das settings da conta oficial."""
    from config.settings import get_wechat_mp_settings

    wechat = settings or get_wechat_mp_settings()
    return TemplateMessageClient(
        app_id=wechat.app_id,
        app_secret=wechat.app_secret,
        template_id=wechat.template_id,
        http_client=HttpClient(
            HttpClientConfig(timeout_seconds=wechat.request_timeout_seconds)
        ),
        base_url=wechat.api_base_url,
    )
