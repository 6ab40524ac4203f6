"""Cliente HTTP da API v3 do WeChat Pay.

Cada requisição é assinada com a chave privada do comerciante. Quando um
certificado da plataforma é configurado, respostas 2xx têm a assinatura
Wechatpay-Signature verificada antes de serem devolvidas.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from config.logging import log_vendor_error
from config.settings.wechatpay import WECHATPAY_API_BASE_URL
from connectors.http_base import HttpClient, HttpClientConfig, is_success, parse_json_body
from utils.errors import HttpStatusError

from .errors import WeChatPayApiError, WeChatPaySignatureError
from .keys import certificate_serial_no, load_certificate, load_private_key
from .signature import (
    build_authorization,
    build_sign_message,
    generate_nonce,
    sign_message,
    verify_signature,
)

if TYPE_CHECKING:
    import httpx
    from cryptography import x509
    from cryptography.hazmat.primitives.asymmetric import rsa

    from config.settings import WeChatPaySettings

logger: logging.Logger = logging.getLogger(__name__)

USER_AGENT = "conectores-nuvem-wechatpay/1.0"
_RESPONSE_HEADERS = (
    "Wechatpay-Signature",
    "Wechatpay-Timestamp",
    "Wechatpay-Nonce",
    "Wechatpay-Serial",
)


class WeChatPayClient:
    """Cliente assinado da API v3.

    Args:
        mchid: Número do comerciante
        serial_no: Número de série do certificado do comerciante
        private_key: Chave privada RSA do comerciante
        platform_certificate: Certificado da plataforma (ativa verificação)
        base_url: URL base da API
        http_client: HttpClient injetável (testes)
        clock: Fonte de tempo em segundos (testes)
    """

    def __init__(
        self,
        mchid: str,
        serial_no: str,
        private_key: rsa.RSAPrivateKey,
        platform_certificate: x509.Certificate | None = None,
        base_url: str = WECHATPAY_API_BASE_URL,
        http_client: HttpClient | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not mchid:
            raise ValueError("mchid is required")
        if not serial_no:
            raise ValueError("serial_no is required")
        self.mchid = mchid
        self.serial_no = serial_no
        self.base_url = base_url.rstrip("/")
        self._private_key = private_key
        self._platform_certificate = platform_certificate
        self._platform_serial = (
            certificate_serial_no(platform_certificate) if platform_certificate else ""
        )
        self._http = http_client or HttpClient()
        self._clock = clock

    @property
    def verifies_responses(self) -> bool:
        return self._platform_certificate is not None

    def sign(self, method: str, url: str, body: str) -> str:
        """Gera o header Authorization para METHOD + url (caminho com query)."""
        timestamp = str(int(self._clock()))
        nonce = generate_nonce()
        message = build_sign_message(method, url, timestamp, nonce, body)
        signature = sign_message(message, self._private_key)
        return build_authorization(self.mchid, self.serial_no, nonce, timestamp, signature)

    async def request(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Envia requisição assinada.

        Args:
            method: GET ou POST
            path: Caminho com query string já codificada (ex: /v3/...?mchid=1)
            body: Corpo JSON (POST)

        Raises:
            WeChatPayApiError: Status não-2xx com {code, message}
            HttpStatusError: Status não-2xx sem corpo estruturado
            WeChatPaySignatureError: Resposta 2xx sem assinatura válida
        """
        method = method.upper()
        payload = (
            json.dumps(body, separators=(",", ":"), ensure_ascii=False)
            if body is not None
            else ""
        )
        headers = {
            "Authorization": self.sign(method, path, payload),
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        if body is not None:
            headers["Content-Type"] = "application/json"

        response = await self._http.request(
            method,
            f"{self.base_url}{path}",
            headers=headers,
            content=payload.encode("utf-8") if body is not None else None,
        )

        if not is_success(response):
            self._raise_for_error(response, method, path)
        self._verify_response(response)
        return response

    async def request_json(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Como request(), devolvendo o corpo JSON (vazio em 204)."""
        response = await self.request(method, path, body)
        data = parse_json_body(response)
        return data if isinstance(data, dict) else {}

    def _raise_for_error(self, response: httpx.Response, method: str, path: str) -> None:
        data = parse_json_body(response)
        if isinstance(data, dict) and data.get("code"):
            log_vendor_error(
                logger,
                "wechatpay",
                f"{method} {path.split('?', 1)[0]}",
                code=str(data["code"]),
                status_code=response.status_code,
            )
            raise WeChatPayApiError(
                code=str(data["code"]),
                message=str(data.get("message", "")),
                status_code=response.status_code,
            )
        raise HttpStatusError(response.status_code, response.text)

    def _verify_response(self, response: httpx.Response) -> None:
        certificate = self._platform_certificate
        if certificate is None:
            return

        values = {name: response.headers.get(name, "") for name in _RESPONSE_HEADERS}
        missing = [name for name, value in values.items() if not value]
        if missing:
            raise WeChatPaySignatureError(f"missing response headers: {', '.join(missing)}")
        serial = values["Wechatpay-Serial"]
        if serial.upper() != self._platform_serial:
            logger.warning(
                "wechatpay_platform_serial_mismatch",
                extra={"serial": serial, "expected_serial": self._platform_serial},
            )
            raise WeChatPaySignatureError(f"unknown platform certificate serial: {serial}")
        valid = verify_signature(
            values["Wechatpay-Signature"],
            values["Wechatpay-Timestamp"],
            values["Wechatpay-Nonce"],
            response.text,
            certificate.public_key(),
        )
        if not valid:
            logger.warning(
                "wechatpay_response_signature_invalid",
                extra={"serial": serial},
            )
            raise WeChatPaySignatureError("invalid response signature")


def create_wechatpay_client(
    settings: WeChatPaySettings | None = None,
    http_client: HttpClient | None = None,
) -> WeChatPayClient:
    """Factory a partir das settings (carrega chave e certificado PEM)."""
    from config.settings import get_wechatpay_settings

    wechatpay = settings or get_wechatpay_settings()
    errors = wechatpay.validate()
    if errors:
        raise ValueError("; ".join(errors))

    certificate = (
        load_certificate(wechatpay.platform_cert_pem)
        if wechatpay.platform_cert_pem
        else None
    )
    return WeChatPayClient(
        mchid=wechatpay.mchid,
        serial_no=wechatpay.cert_serial_no,
        private_key=load_private_key(wechatpay.private_key_pem),
        platform_certificate=certificate,
        base_url=wechatpay.api_base_url,
        http_client=http_client
        or HttpClient(HttpClientConfig(timeout_seconds=wechatpay.request_timeout_seconds)),
    )
