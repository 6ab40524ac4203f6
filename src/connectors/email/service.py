"""Envio de email via Tencent Cloud SES (API 2020-10-02, TC3)."""

from __future__ import annotations

import base64
import json
import logging
from typing import TYPE_CHECKING, Any

import httpx

from connectors.email.models import (
    HTML,
    EmailRequest,
    EmailResponse,
    EmailSendError,
    TemplateEmailRequest,
)
from connectors.email.validation import (
    validate_email_request,
    validate_template_email_request,
)
from connectors.tencentcloud.client import TencentCloudClient, create_tencentcloud_client
from utils.errors import ConnectorError

if TYPE_CHECKING:
    from config.settings import EmailSettings, TencentCloudSettings

logger: logging.Logger = logging.getLogger(__name__)

SEND_EMAIL_ACTION = "SendEmail"


def _b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def build_send_email_payload(request: EmailRequest) -> dict[str, Any]:
    """Monta payload de SendEmail com corpo Simple (base64)."""
    simple_key = "Html" if request.body_type == HTML else "Text"
    payload: dict[str, Any] = {
        "FromEmailAddress": request.from_address,
        "Destination": list(request.to),
        "Subject": request.subject,
        "Simple": {simple_key: _b64(request.body)},
    }
    if request.reply_to:
        payload["ReplyToAddresses"] = request.reply_to
    return payload


def build_template_email_payload(request: TemplateEmailRequest) -> dict[str, Any]:
    """Monta payload de SendEmail com Template (TemplateData em JSON)."""
    payload: dict[str, Any] = {
        "FromEmailAddress": request.from_address,
        "Destination": list(request.to),
        "Subject": request.subject,
        "Template": {
            "TemplateID": request.template_id,
            "TemplateData": json.dumps(request.template_data, ensure_ascii=False),
        },
    }
    if request.reply_to:
        payload["ReplyToAddresses"] = request.reply_to
    return payload


class EmailService:
    """Serviço de envio de email.

    Args:
        client: TencentCloudClient configurado para o serviço "ses"
    """

    def __init__(self, client: TencentCloudClient) -> None:
        self._client = client

    async def send_email(self, request: EmailRequest) -> EmailResponse:
        """Envia email simples.

        Raises:
            ValueError: Parâmetros inválidos (antes de qualquer rede)
            EmailSendError: Falha do cliente SES (causa encadeada)
        """
        validate_email_request(request)
        return await self._send(build_send_email_payload(request), len(request.to))

    async def send_template_email(self, request: TemplateEmailRequest) -> EmailResponse:
        """Envia email de template."""
        validate_template_email_request(request)
        return await self._send(build_template_email_payload(request), len(request.to))

    async def _send(self, payload: dict[str, Any], recipients: int) -> EmailResponse:
        try:
            response = await self._client.call(SEND_EMAIL_ACTION, payload)
        except (ConnectorError, httpx.HTTPError) as exc:
            logger.warning(
                "email_send_failed",
                extra={"recipients": recipients, "error_type": type(exc).__name__},
            )
            raise EmailSendError(f"email client error: {exc}") from exc

        result = EmailResponse(
            message_id=str(response.get("MessageId", "")),
            request_id=str(response.get("RequestId", "")),
        )
        logger.info(
            "email_sent",
            extra={"recipients": recipients, "request_id": result.request_id},
        )
        return result


def create_email_service(
    settings: EmailSettings | None = None,
    tencent_settings: TencentCloudSettings | None = None,
) -> EmailService:
    """Factory com settings do ambiente quando não informadas."""
    from config.settings import get_email_settings

    email = settings or get_email_settings()
    client = create_tencentcloud_client(
        service="ses",
        version=email.api_version,
        region=email.region,
        host=email.host,
        settings=tencent_settings,
    )
    return EmailService(client)
