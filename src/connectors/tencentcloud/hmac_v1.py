"""Assinatura v1 (AK/SK em parâmetros) da Tencent Cloud API.

StringToSign = METHOD + host + path + "?" + k1=v1&k2=v2 (chaves ordenadas,
valores sem url-encoding). Signature = base64(HMAC-SHA256(SecretKey, StringToSign)).
"""

from __future__ import annotations

import base64
import hashlib
import hmac
from collections.abc import Mapping

V1_SIGNATURE_METHOD = "HmacSHA256"


def build_string_to_sign(
    params: Mapping[str, str],
    method: str = "POST",
    host: str = "",
    path: str = "/",
) -> str:
    """Monta a string a assinar; o parâmetro Signature nunca entra."""
    query = "&".join(
        f"{key}={params[key]}" for key in sorted(params) if key != "Signature"
    )
    return f"{method.upper()}{host}{path}?{query}"


def hmac_v1_sign(
    params: Mapping[str, str],
    secret_key: str,
    method: str = "POST",
    host: str = "",
    path: str = "/",
) -> str:
    """Calcula a assinatura v1 (HmacSHA256, base64)."""
    if not secret_key:
        raise ValueError("secret_key é obrigatório")
    string_to_sign = build_string_to_sign(params, method, host, path)
    digest = hmac.new(
        secret_key.encode("utf-8"),
        string_to_sign.encode("utf-8"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("ascii")
