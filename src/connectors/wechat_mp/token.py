"""Obtenção de access_token (grant_type=client_credential)."""

from __future__ import annotations

import logging

from config.settings.wechat_mp import WECHAT_API_BASE_URL
from connectors.http_base import HttpClient

from .errors import WeChatApiError, parse_wechat_response
from .models import AccessToken

logger: logging.Logger = logging.getLogger(__name__)

TOKEN_PATH = "/cgi-bin/token"


async def get_access_token(
    app_id: str,
    app_secret: str,
    *,
    http_client: HttpClient | None = None,
    base_url: str = WECHAT_API_BASE_URL,
) -> AccessToken:
    """Busca um access_token novo (sem cache).

    Raises:
        ValueError: app_id ou app_secret vazios
        HttpStatusError: Status não-2xx
        WeChatApiError: errcode != 0 ou token vazio
    """
    if not app_id:
        raise ValueError("app_id is required")
    if not app_secret:
        raise ValueError("app_secret is required")

    http = http_client or HttpClient()
    response = await http.get(
        f"{base_url.rstrip('/')}{TOKEN_PATH}",
        params={
            "grant_type": "client_credential",
            "appid": app_id,
            "secret": app_secret,
        },
    )
    data = parse_wechat_response(response, "token")

    token = str(data.get("access_token") or "")
    if not token:
        raise WeChatApiError(-1, "empty access_token", response.status_code)

    expires_in = int(data.get("expires_in") or 0)
    logger.info("wechat_access_token_fetched", extra={"expires_in": expires_in})
    return AccessToken(token=token, expires_in=expires_in)
