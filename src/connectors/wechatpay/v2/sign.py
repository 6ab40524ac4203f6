"""Assinatura da API v2 (MD5 ou HMAC-SHA256 sobre parâmetros ordenados)."""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Mapping
from typing import Any

SIGN_TYPE_MD5 = "MD5"
SIGN_TYPE_HMAC_SHA256 = "HMAC-SHA256"


def build_sign_string(params: Mapping[str, Any], api_key: str) -> str:
    """k1=v1&k2=v2&...&key=API_KEY, sem 'sign' e sem valores vazios."""
    pairs = [
        f"{key}={params[key]}"
        for key in sorted(params)
        if key != "sign" and params[key] is not None and str(params[key]) != ""
    ]
    pairs.append(f"key={api_key}")
    return "&".join(pairs)


def sign_params(
    params: Mapping[str, Any], api_key: str, sign_type: str = SIGN_TYPE_MD5
) -> str:
    """Assinatura em hex maiúsculo.

    Raises:
        ValueError: api_key vazio ou sign_type desconhecido
    """
    if not api_key:
        raise ValueError("API key not configured")
    payload = build_sign_string(params, api_key).encode("utf-8")
    if sign_type == SIGN_TYPE_MD5:
        digest = hashlib.md5(payload).hexdigest()
    elif sign_type == SIGN_TYPE_HMAC_SHA256:
        digest = hmac.new(api_key.encode("utf-8"), payload, hashlib.sha256).hexdigest()
    else:
        raise ValueError(f"unsupported sign_type: {sign_type}")
    return digest.upper()


def verify_params_sign(
    params: Mapping[str, Any], api_key: str, sign_type: str = SIGN_TYPE_MD5
) -> bool:
    """Confere o campo 'sign' de uma resposta/notificação."""
    received = str(params.get("sign") or "")
    if not received:
        return False
    expected = sign_params(params, api_key, sign_type)
    return hmac.compare_digest(expected, received.upper())
