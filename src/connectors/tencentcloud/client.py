"""Cliente genérico da Tencent Cloud API (assinaturas TC3 e v1).

Cada chamada é um POST para https://<host>/; a resposta sempre vem embrulhada
em {"Response": {...}} e erros chegam em Response.Error com status 200.
"""

from __future__ import annotations

import json
import logging
import secrets
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from config.logging import log_vendor_error
from connectors.http_base import HttpClient, HttpClientConfig, is_success, parse_json_body
from connectors.tencentcloud.errors import TencentCloudApiError
from connectors.tencentcloud.hmac_v1 import V1_SIGNATURE_METHOD, hmac_v1_sign
from connectors.tencentcloud.tc3 import TC3_CONTENT_TYPE, tc3_sign
from utils.errors import ConnectorError, HttpStatusError

if TYPE_CHECKING:
    import httpx

    from config.settings import TencentCloudSettings

logger: logging.Logger = logging.getLogger(__name__)


class TencentCloudClient:
    """Cliente para um produto Tencent Cloud (serviço + versão + região).

    Args:
        secret_id: SecretId
        secret_key: SecretKey
        service: Nome curto do serviço (ex: "ses", "sms")
        version: Versão da API (ex: "2020-10-02")
        region: Região (ex: "ap-guangzhou"); vazio omite X-TC-Region
        host: Host do endpoint; padrão <service>.tencentcloudapi.com
        http_client: HttpClient injetável (testes)
        clock: Fonte de tempo em segundos (testes)
    """

    def __init__(
        self,
        secret_id: str,
        secret_key: str,
        service: str,
        version: str,
        region: str = "",
        host: str | None = None,
        http_client: HttpClient | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret_id or not secret_key:
            raise ValueError("secret_id e secret_key são obrigatórios")
        if not service or not version:
            raise ValueError("service e version são obrigatórios")
        self._secret_id = secret_id
        self._secret_key = secret_key
        self.service = service
        self.version = version
        self.region = region
        self.host = host or f"{service}.tencentcloudapi.com"
        self._http = http_client or HttpClient()
        self._clock = clock

    @property
    def endpoint(self) -> str:
        return f"https://{self.host}/"

    async def call(self, action: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Chama uma action com assinatura TC3-HMAC-SHA256.

        Returns:
            Conteúdo de Response (sem o envelope).

        Raises:
            TencentCloudApiError: Se Response.Error presente
            HttpStatusError: Se status não-2xx sem erro estruturado
        """
        body = json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode(
            "utf-8"
        )
        timestamp = int(self._clock())
        signed = tc3_sign(
            secret_id=self._secret_id,
            secret_key=self._secret_key,
            service=self.service,
            host=self.host,
            action=action,
            payload=body,
            timestamp=timestamp,
        )
        headers = {
            "Authorization": signed.authorization,
            "Content-Type": TC3_CONTENT_TYPE,
            "Host": self.host,
            "X-TC-Action": action,
            "X-TC-Timestamp": str(timestamp),
            "X-TC-Version": self.version,
        }
        if self.region:
            headers["X-TC-Region"] = self.region

        response = await self._http.post(self.endpoint, content=body, headers=headers)
        return self._parse_response(response, action)

    async def call_v1(self, action: str, params: dict[str, str]) -> dict[str, Any]:
        """Chama uma action com assinatura v1 (HmacSHA256) em form-urlencoded."""
        full_params: dict[str, str] = {
            **params,
            "Action": action,
            "Version": self.version,
            "Timestamp": str(int(self._clock())),
            "Nonce": str(secrets.randbelow(2**31 - 1) + 1),
            "SecretId": self._secret_id,
            "SignatureMethod": V1_SIGNATURE_METHOD,
        }
        if self.region:
            full_params["Region"] = self.region
        full_params["Signature"] = hmac_v1_sign(
            full_params, self._secret_key, "POST", self.host, "/"
        )

        response = await self._http.post(
            self.endpoint,
            data=full_params,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        return self._parse_response(response, action)

    def _parse_response(self, response: httpx.Response, action: str) -> dict[str, Any]:
        data = parse_json_body(response)
        inner = data.get("Response") if isinstance(data, dict) else None

        if isinstance(inner, dict):
            error = inner.get("Error")
            if isinstance(error, dict) and error.get("Code"):
                log_vendor_error(
                    logger,
                    f"tencentcloud.{self.service}",
                    action,
                    code=str(error.get("Code")),
                    status_code=response.status_code,
                )
                raise TencentCloudApiError(
                    code=str(error.get("Code")),
                    message=str(error.get("Message", "")),
                    request_id=str(inner.get("RequestId", "")),
                    status_code=response.status_code,
                )

        if not is_success(response):
            raise HttpStatusError(response.status_code, response.text)
        if not isinstance(inner, dict):
            raise ConnectorError(f"{self.service} {action}: resposta sem campo Response")

        logger.info(
            "tencentcloud_call_ok",
            extra={
                "product": self.service,
                "action": action,
                "request_id": inner.get("RequestId", ""),
            },
        )
        return inner


def create_tencentcloud_client(
    service: str,
    version: str,
    region: str = "",
    host: str | None = None,
    settings: TencentCloudSettings | None = None,
    http_client: HttpClient | None = None,
) -> TencentCloudClient:
    """Factory com credenciais e timeout vindos das settings."""
    from config.settings import get_tencentcloud_settings

    tencent = settings or get_tencentcloud_settings()
    return TencentCloudClient(
        secret_id=tencent.secret_id,
        secret_key=tencent.secret_key,
        service=service,
        version=version,
        region=region,
        host=host,
        http_client=http_client
        or HttpClient(HttpClientConfig(timeout_seconds=tencent.request_timeout_seconds)),
    )
