"""Testes para WeChatPayClient (assinatura de requests e verificação de respostas)."""

from __future__ import annotations

import base64
import json

import httpx
import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from config.settings import WeChatPaySettings
from connectors.wechatpay import (
    WeChatPayApiError,
    WeChatPayClient,
    WeChatPaySignatureError,
    create_wechatpay_client,
    sign_message,
)
from connectors.wechatpay.signature import build_verify_message
from utils.errors import HttpStatusError

MCHID = "1900009191"
SERIAL = "408B07E79B8269FEC3D5D3E6AB8ED163A6A380DB"


def signed_headers(rsa_material, body: str) -> dict[str, str]:
    """Headers Wechatpay-* assinados com a chave de teste (a mesma do certificado)."""
    timestamp, nonce = "1700000000", "RESPNONCE"
    signature = sign_message(build_verify_message(timestamp, nonce, body), rsa_material["key"])
    headers = {
        "Wechatpay-Signature": signature,
        "Wechatpay-Timestamp": timestamp,
        "Wechatpay-Nonce": nonce,
        "Wechatpay-Serial": "5157F09EFDC096DE15EBE81A47057A7232F1B8E1",
    }
    return headers


def signed_response(rsa_material, status: int, payload: dict | None = None) -> httpx.Response:
    body = json.dumps(payload) if payload is not None else ""
    headers = signed_headers(rsa_material, body)
    if body:
        headers["Content-Type"] = "application/json"
    return httpx.Response(status, content=body.encode(), headers=headers)


def make_client(rsa_material, http_client, verify: bool = False) -> WeChatPayClient:
    return WeChatPayClient(
        mchid=MCHID,
        serial_no=SERIAL,
        private_key=rsa_material["key"],
        platform_certificate=rsa_material["cert"] if verify else None,
        http_client=http_client,
        clock=lambda: 1_700_000_000.0,
    )


def parse_authorization(header: str) -> dict[str, str]:
    scheme, _, params = header.partition(" ")
    assert scheme == "WECHATPAY2-SHA256-RSA2048"
    return {k: v.strip('"') for k, v in (item.split("=", 1) for item in params.split(","))}


class TestWeChatPayClientInit:
    """Testes de construção."""

    def test_requires_mchid(self, rsa_material) -> None:
        with pytest.raises(ValueError, match="mchid"):
            WeChatPayClient("", SERIAL, rsa_material["key"])

    def test_requires_serial(self, rsa_material) -> None:
        with pytest.raises(ValueError, match="serial_no"):
            WeChatPayClient(MCHID, "", rsa_material["key"])

    def test_factory_loads_pem(self, rsa_material) -> None:
        settings = WeChatPaySettings(
            mchid=MCHID,
            cert_serial_no=SERIAL,
            private_key_pem=rsa_material["private_pem"],
            platform_cert_pem=rsa_material["cert_pem"],
            api_base_url="https://api2.mch.weixin.qq.com/",
        )
        client = create_wechatpay_client(settings)
        assert client.verifies_responses is True
        assert client.base_url == "https://api2.mch.weixin.qq.com"

    def test_factory_rejects_invalid_settings(self) -> None:
        with pytest.raises(ValueError, match="WECHATPAY_MCHID"):
            create_wechatpay_client(WeChatPaySettings())


class TestWeChatPayClientRequest:
    """Testes para request/request_json."""

    @pytest.mark.asyncio
    async def test_post_is_signed(self, rsa_material, mock_http) -> None:
        http_client, requests = mock_http(lambda request: httpx.Response(200, json={"prepay_id": "wx1"}))
        client = make_client(rsa_material, http_client)

        data = await client.request_json("POST", "/v3/pay/transactions/jsapi", {"description": "Café"})

        assert data == {"prepay_id": "wx1"}
        request = requests[0]
        assert str(request.url) == "https://api.mch.weixin.qq.com/v3/pay/transactions/jsapi"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["Accept"] == "application/json"
        assert request.content.decode() == '{"description":"Café"}'

        auth = parse_authorization(request.headers["Authorization"])
        assert auth["mchid"] == MCHID
        assert auth["serial_no"] == SERIAL
        assert auth["timestamp"] == "1700000000"
        message = (
            f"POST\n/v3/pay/transactions/jsapi\n1700000000\n{auth['nonce_str']}\n"
            '{"description":"Café"}\n'
        )
        rsa_material["key"].public_key().verify(
            base64.b64decode(auth["signature"]),
            message.encode(),
            padding.PKCS1v15(),
            hashes.SHA256(),
        )

    @pytest.mark.asyncio
    async def test_get_has_no_body(self, rsa_material, mock_http) -> None:
        http_client, requests = mock_http(lambda request: httpx.Response(200, json={}))
        await make_client(rsa_material, http_client).request("GET", "/v3/certificates")
        assert requests[0].content == b""
        assert "Content-Type" not in requests[0].headers

    @pytest.mark.asyncio
    async def test_api_error(self, rsa_material, mock_http) -> None:
        http_client, _ = mock_http(
            lambda request: httpx.Response(
                400, json={"code": "PARAM_ERROR", "message": "参数错误"}
            )
        )
        with pytest.raises(WeChatPayApiError) as exc_info:
            await make_client(rsa_material, http_client).request("POST", "/v3/x", {})
        assert exc_info.value.code == "PARAM_ERROR"
        assert exc_info.value.status_code == 400
        assert exc_info.value.vendor == "wechatpay"

    @pytest.mark.asyncio
    async def test_http_status_error(self, rsa_material, mock_http) -> None:
        http_client, _ = mock_http(lambda request: httpx.Response(502, text="bad gateway"))
        with pytest.raises(HttpStatusError):
            await make_client(rsa_material, http_client).request("GET", "/v3/x")

    @pytest.mark.asyncio
    async def test_request_json_on_204(self, rsa_material, mock_http) -> None:
        http_client, _ = mock_http(lambda request: httpx.Response(204))
        assert await make_client(rsa_material, http_client).request_json("POST", "/v3/x", {}) == {}


class TestWeChatPayResponseVerification:
    """Testes de verificação de Wechatpay-Signature."""

    @pytest.mark.asyncio
    async def test_valid_signature_passes(self, rsa_material, mock_http) -> None:
        http_client, _ = mock_http(lambda request: signed_response(rsa_material, 200, {"ok": True}))
        client = make_client(rsa_material, http_client, verify=True)
        assert await client.request_json("GET", "/v3/x") == {"ok": True}

    @pytest.mark.asyncio
    async def test_signed_204_passes(self, rsa_material, mock_http) -> None:
        http_client, _ = mock_http(lambda request: signed_response(rsa_material, 204))
        response = await make_client(rsa_material, http_client, verify=True).request("POST", "/v3/x", {})
        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_missing_headers(self, rsa_material, mock_http) -> None:
        http_client, _ = mock_http(lambda request: httpx.Response(200, json={"ok": True}))
        with pytest.raises(WeChatPaySignatureError, match="missing response headers"):
            await make_client(rsa_material, http_client, verify=True).request("GET", "/v3/x")

    @pytest.mark.asyncio
    async def test_tampered_body(self, rsa_material, mock_http) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            headers = signed_headers(rsa_material, '{"ok": true}')
            return httpx.Response(200, content=b'{"ok": false}', headers=headers)

        http_client, _ = mock_http(handler)
        with pytest.raises(WeChatPaySignatureError, match="invalid response signature"):
            await make_client(rsa_material, http_client, verify=True).request("GET", "/v3/x")

    @pytest.mark.asyncio
    async def test_lowercase_serial_accepted(self, rsa_material, mock_http) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            response = signed_response(rsa_material, 200, {"ok": True})
            response.headers["Wechatpay-Serial"] = response.headers["Wechatpay-Serial"].lower()
            return response

        http_client, _ = mock_http(handler)
        assert await make_client(rsa_material, http_client, verify=True).request_json("GET", "/v3/x") == {"ok": True}

    @pytest.mark.asyncio
    async def test_unknown_platform_serial(self, rsa_material, mock_http) -> None:
        """Resposta assinada por outro certificado (rotação) falha pelo serial."""

        def handler(request: httpx.Request) -> httpx.Response:
            response = signed_response(rsa_material, 200, {"ok": True})
            response.headers["Wechatpay-Serial"] = "7132D72A03E93CDDF8C03BBD1F37EEDF65B6E5A2"
            return response

        http_client, _ = mock_http(handler)
        with pytest.raises(
            WeChatPaySignatureError,
            match="unknown platform certificate serial: 7132D72A03E93CDDF8C03BBD1F37EEDF65B6E5A2",
        ):
            await make_client(rsa_material, http_client, verify=True).request("GET", "/v3/x")

    @pytest.mark.asyncio
    async def test_error_responses_are_not_verified(self, rsa_material, mock_http) -> None:
        """Status não-2xx vira erro de API mesmo sem headers de assinatura."""
        http_client, _ = mock_http(
            lambda request: httpx.Response(404, json={"code": "ORDER_NOT_EXIST", "message": "x"})
        )
        with pytest.raises(WeChatPayApiError):
            await make_client(rsa_material, http_client, verify=True).request("GET", "/v3/x")
