"""Reembolso pela API v2 legada (/secapi/pay/refund, XML + certificado).

O endpoint exige TLS mútuo com o certificado do comerciante (apiclient_cert.pem
e apiclient_key.pem).
"""

from __future__ import annotations

import logging
import ssl
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from config.logging import log_vendor_error
from config.settings.wechatpay import WECHATPAY_API_BASE_URL
from connectors.http_base import HttpClient, HttpClientConfig, is_success
from utils.errors import HttpStatusError
from utils.nonce import generate_nonce

from ..errors import WeChatPayV2Error
from .sign import SIGN_TYPE_HMAC_SHA256, SIGN_TYPE_MD5, sign_params, verify_params_sign
from .xml_codec import from_xml, to_xml

if TYPE_CHECKING:
    from config.settings import WeChatPaySettings

logger: logging.Logger = logging.getLogger(__name__)

REFUND_PATH = "/secapi/pay/refund"
SUCCESS = "SUCCESS"


@dataclass(frozen=True)
class RefundRequest:
    """Parâmetros do reembolso v2 (valores em centavos)."""

    appid: str
    mch_id: str
    out_refund_no: str
    total_fee: int
    refund_fee: int
    out_trade_no: str = ""
    transaction_id: str = ""
    refund_desc: str = ""
    notify_url: str = ""
    refund_fee_type: str = ""
    sign_type: str = SIGN_TYPE_MD5


def validate_refund_request(request: RefundRequest) -> None:
    """Raises ValueError se faltar campo obrigatório."""
    if (
        not request.appid
        or not request.mch_id
        or not request.out_refund_no
        or request.total_fee <= 0
        or request.refund_fee <= 0
    ):
        raise ValueError("missing required parameters")
    if not request.out_trade_no and not request.transaction_id:
        raise ValueError("either out_trade_no or transaction_id is required")
    if request.sign_type not in (SIGN_TYPE_MD5, SIGN_TYPE_HMAC_SHA256):
        raise ValueError(f"unsupported sign_type: {request.sign_type}")


class WeChatPayV2Client:
    """Cliente da API v2.

    Args:
        api_key: Chave da API v2
        cert: (cert_pem_path, key_pem_path) para TLS mútuo
        base_url: URL base da API
        http_client: HttpClient injetável (testes); ignora cert
    """

    def __init__(
        self,
        api_key: str,
        cert: tuple[str, str] | None = None,
        base_url: str = WECHATPAY_API_BASE_URL,
        http_client: HttpClient | None = None,
        timeout_seconds: float = 15.0,
    ) -> None:
        if not api_key:
            raise ValueError("API key not configured")
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        if http_client is None:
            verify: bool | ssl.SSLContext = True
            if cert is not None:
                context = ssl.create_default_context()
                context.load_cert_chain(certfile=cert[0], keyfile=cert[1])
                verify = context
            http_client = HttpClient(
                HttpClientConfig(timeout_seconds=timeout_seconds, verify_ssl=verify)
            )
        self._http = http_client

    def build_refund_params(self, request: RefundRequest) -> dict[str, str]:
        """Parâmetros assinados (inclui nonce_str e sign)."""
        params: dict[str, Any] = {
            "appid": request.appid,
            "mch_id": request.mch_id,
            "nonce_str": generate_nonce(32),
            "sign_type": request.sign_type,
            "transaction_id": request.transaction_id,
            "out_trade_no": request.out_trade_no,
            "out_refund_no": request.out_refund_no,
            "total_fee": str(request.total_fee),
            "refund_fee": str(request.refund_fee),
            "refund_fee_type": request.refund_fee_type,
            "refund_desc": request.refund_desc,
            "notify_url": request.notify_url,
        }
        params = {k: v for k, v in params.items() if v}
        params["sign"] = sign_params(params, self._api_key, request.sign_type)
        return params

    async def initiate_refund(self, request: RefundRequest) -> dict[str, str]:
        """Solicita reembolso e devolve a resposta decodificada.

        Raises:
            ValueError: Parâmetros obrigatórios ausentes
            HttpStatusError: Status HTTP não-2xx
            WeChatPayV2Error: return_code/result_code diferentes de SUCCESS
                ou assinatura da resposta inválida
        """
        validate_refund_request(request)
        body = to_xml(self.build_refund_params(request))

        response = await self._http.post(
            f"{self.base_url}{REFUND_PATH}",
            content=body.encode("utf-8"),
            headers={"Content-Type": "text/xml; charset=utf-8"},
        )
        if not is_success(response):
            raise HttpStatusError(response.status_code, response.text)

        try:
            result = from_xml(response.content)
        except ValueError as exc:
            raise WeChatPayV2Error(
                "INVALID_RESPONSE", str(exc), status_code=response.status_code
            ) from exc

        if result.get("return_code") != SUCCESS:
            log_vendor_error(logger, "wechatpay_v2", "refund", code=result.get("return_code", ""))
            raise WeChatPayV2Error(
                result.get("return_code", ""), result.get("return_msg", ""), result
            )
        if result.get("result_code") != SUCCESS:
            log_vendor_error(logger, "wechatpay_v2", "refund", code=result.get("err_code", ""))
            raise WeChatPayV2Error(
                result.get("err_code", ""), result.get("err_code_des", ""), result
            )
        if result.get("sign") and not self.verify_response_sign(result, request.sign_type):
            raise WeChatPayV2Error("SIGN_ERROR", "response sign mismatch", result)

        logger.info(
            "wechatpay_v2_refund_ok",
            extra={"out_refund_no": request.out_refund_no},
        )
        return result

    def verify_response_sign(
        self, result: dict[str, str], sign_type: str = SIGN_TYPE_MD5
    ) -> bool:
        """Confere o campo sign de uma resposta."""
        return verify_params_sign(result, self._api_key, sign_type)


def create_wechatpay_v2_client(
    settings: WeChatPaySettings | None = None,
    cert: tuple[str, str] | None = None,
) -> WeChatPayV2Client:
    """Factory a partir das settings (api_v2_key)."""
    from config.settings import get_wechatpay_settings

    wechatpay = settings or get_wechatpay_settings()
    return WeChatPayV2Client(
        api_key=wechatpay.api_v2_key,
        cert=cert,
        base_url=wechatpay.api_base_url,
        timeout_seconds=wechatpay.request_timeout_seconds,
    )
