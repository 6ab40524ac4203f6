"""Assinatura de requisições da API XML do COS (q-sign-algorithm=sha1).

Referência: https://cloud.tencent.com/document/product/436/7778
"""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Mapping
from urllib.parse import quote


def _encode(value: str) -> str:
    return quote(value, safe="-_.~")


def _hmac_sha1_hex(key: str, msg: str) -> str:
    return hmac.new(key.encode("utf-8"), msg.encode("utf-8"), hashlib.sha1).hexdigest()


def _canonical(items: Mapping[str, str]) -> tuple[str, str]:
    """(lista de chaves ;-separadas, k=v &-separados) com chaves minúsculas."""
    encoded = sorted(
        (_encode(key).lower(), _encode(str(value))) for key, value in items.items()
    )
    key_list = ";".join(key for key, _ in encoded)
    pairs = "&".join(f"{key}={value}" for key, value in encoded)
    return key_list, pairs


def build_http_string(
    method: str,
    path: str,
    params: Mapping[str, str],
    headers: Mapping[str, str],
) -> str:
    """method\\npath\\nparams\\nheaders\\n."""
    _, http_params = _canonical(params)
    _, http_headers = _canonical(headers)
    return f"{method.lower()}\n{path}\n{http_params}\n{http_headers}\n"


def build_authorization(
    secret_id: str,
    secret_key: str,
    method: str,
    path: str,
    params: Mapping[str, str] | None = None,
    headers: Mapping[str, str] | None = None,
    start_time: int = 0,
    expires_seconds: int = 600,
) -> str:
    """Valor do header Authorization.

    Args:
        secret_id: SecretId
        secret_key: SecretKey
        method: Método HTTP
        path: Caminho do objeto com '/' inicial, sem url-encoding
        params: Query string a assinar
        headers: Headers a assinar (ex: host, content-type)
        start_time: Início da validade (unix)
        expires_seconds: Duração da validade
    """
    if not secret_id or not secret_key:
        raise ValueError("secret_id e secret_key são obrigatórios")

    params = params or {}
    headers = headers or {}
    key_time = f"{start_time};{start_time + expires_seconds}"
    sign_key = _hmac_sha1_hex(secret_key, key_time)

    http_string = build_http_string(method, path, params, headers)
    string_to_sign = (
        f"sha1\n{key_time}\n{hashlib.sha1(http_string.encode('utf-8')).hexdigest()}\n"
    )
    signature = _hmac_sha1_hex(sign_key, string_to_sign)

    header_list, _ = _canonical(headers)
    param_list, _ = _canonical(params)
    return "&".join(
        [
            "q-sign-algorithm=sha1",
            f"q-ak={secret_id}",
            f"q-sign-time={key_time}",
            f"q-key-time={key_time}",
            f"q-header-list={header_list}",
            f"q-url-param-list={param_list}",
            f"q-signature={signature}",
        ]
    )
