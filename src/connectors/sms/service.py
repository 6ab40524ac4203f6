"""Envio de SMS via Tencent Cloud SMS (API 2021-01-11, assinatura v1)."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from connectors.sms.models import SendSmsResult, SmsSendError
from connectors.tencentcloud.client import TencentCloudClient, create_tencentcloud_client

if TYPE_CHECKING:
    from config.settings import SmsSettings, TencentCloudSettings

logger: logging.Logger = logging.getLogger(__name__)

SEND_SMS_ACTION = "SendSms"

_E164_RE = re.compile(r"^\+[1-9]\d{5,14}$")
_MAINLAND_RE = re.compile(r"^1\d{10}$")


def validate_phone_number(number: str) -> str:
    """Valida e normaliza número de telefone.

    Aceita E.164 (+ seguido de 6 a 15 dígitos) ou celular da China continental
    com 11 dígitos, que vira +86<número>.

    Raises:
        ValueError: "invalid phone number"
    """
    candidate = (number or "").strip().replace(" ", "").replace("-", "")
    if _E164_RE.match(candidate):
        return candidate
    if _MAINLAND_RE.match(candidate):
        return f"+86{candidate}"
    raise ValueError("invalid phone number")


def build_send_sms_params(
    template_id: str,
    phone_number: str,
    sign_name: str,
    template_params: list[str] | None = None,
) -> dict[str, str]:
    """Monta os parâmetros achatados de SendSms (formato v1)."""
    params = {
        "TemplateId": template_id,
        "PhoneNumberSet.0": phone_number,
        "SignName": sign_name,
    }
    for index, value in enumerate(template_params or []):
        params[f"TemplateParamSet.{index}"] = value
    return params


class SmsService:
    """Serviço de envio de SMS.

    Args:
        client: TencentCloudClient configurado para o serviço "sms"
        sdk_app_id: SmsSdkAppId
        sign_name: Assinatura padrão
    """

    def __init__(self, client: TencentCloudClient, sdk_app_id: str, sign_name: str = "") -> None:
        if not sdk_app_id:
            raise ValueError("sdk_app_id é obrigatório")
        self._client = client
        self._sdk_app_id = sdk_app_id
        self._sign_name = sign_name

    async def send_sms(
        self,
        phone_number: str,
        template_id: str,
        template_params: list[str] | None = None,
        sign_name: str | None = None,
    ) -> SendSmsResult:
        """Envia SMS de template para um número.

        Raises:
            ValueError: Número inválido, template ou assinatura ausentes
            TencentCloudApiError: Response.Error presente
            SmsSendError: Status do número diferente de "Ok"
        """
        normalized = validate_phone_number(phone_number)
        if not template_id:
            raise ValueError("template_id é obrigatório")
        signature_name = sign_name if sign_name is not None else self._sign_name
        if not signature_name:
            raise ValueError("sign_name é obrigatório")

        params = build_send_sms_params(
            template_id, normalized, signature_name, template_params
        )
        params["SmsSdkAppId"] = self._sdk_app_id

        response = await self._client.call_v1(SEND_SMS_ACTION, params)
        result = SendSmsResult.model_validate(response)

        for status in result.statuses:
            if not status.ok:
                logger.warning(
                    "sms_send_rejected",
                    extra={
                        "template_id": template_id,
                        "error_code": status.code,
                        "request_id": result.request_id,
                    },
                )
                raise SmsSendError(status)

        logger.info(
            "sms_sent",
            extra={"template_id": template_id, "request_id": result.request_id},
        )
        return result


def create_sms_service(
    settings: SmsSettings | None = None,
    tencent_settings: TencentCloudSettings | None = None,
) -> SmsService:
    """Factory com settings do ambiente quando não informadas."""
    from config.settings import get_sms_settings

    sms = settings or get_sms_settings()
    client = create_tencentcloud_client(
        service="sms",
        version=sms.api_version,
        region=sms.region,
        host=sms.host,
        settings=tencent_settings,
    )
    return SmsService(client, sdk_app_id=sms.sdk_app_id, sign_name=sms.sign_name)
