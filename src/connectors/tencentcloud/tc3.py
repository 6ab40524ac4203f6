"""Assinatura TC3-HMAC-SHA256 (Tencent Cloud API 3.0).

Referência: https://cloud.tencent.com/document/api/213/30654
"""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from datetime import datetime, timezone

TC3_ALGORITHM = "TC3-HMAC-SHA256"
TC3_CONTENT_TYPE = "application/json; charset=utf-8"
TC3_SIGNED_HEADERS = "content-type;host;x-tc-action"


@dataclass(frozen=True)
class Tc3Signature:
    """Resultado da assinatura TC3."""

    authorization: str
    credential_scope: str
    signature: str
    timestamp: int


def _hmac_sha256(key: bytes, msg: str) -> bytes:
    return hmac.new(key, msg.encode("utf-8"), hashlib.sha256).digest()


def _sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def utc_date(timestamp: int) -> str:
    """Data UTC (YYYY-MM-DD) usada no credential scope."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%d")


def build_canonical_request(host: str, action: str, payload: bytes) -> str:
    """Monta o canonical request para POST / com corpo JSON."""
    canonical_headers = (
        f"content-type:{TC3_CONTENT_TYPE}\n"
        f"host:{host}\n"
        f"x-tc-action:{action.lower()}\n"
    )
    return "\n".join(
        [
            "POST",
            "/",
            "",
            canonical_headers,
            TC3_SIGNED_HEADERS,
            _sha256_hex(payload),
        ]
    )


def derive_signing_key(secret_key: str, date: str, service: str) -> bytes:
    """Cadeia de chaves TC3: TC3+SecretKey -> date -> service -> tc3_request."""
    secret_date = _hmac_sha256(("TC3" + secret_key).encode("utf-8"), date)
    secret_service = _hmac_sha256(secret_date, service)
    return _hmac_sha256(secret_service, "tc3_request")


def tc3_sign(
    *,
    secret_id: str,
    secret_key: str,
    service: str,
    host: str,
    action: str,
    payload: bytes,
    timestamp: int,
) -> Tc3Signature:
    """Assina uma requisição TC3.

    Args:
        secret_id: SecretId
        secret_key: SecretKey
        service: Serviço (ex: "ses", "sms")
        host: Host do endpoint (ex: ses.tencentcloudapi.com)
        action: Nome da action (ex: "SendEmail")
        payload: Corpo JSON exato que será enviado
        timestamp: Unix timestamp em segundos (o mesmo de X-TC-Timestamp)

    Returns:
        Tc3Signature com o header Authorization pronto.
    """
    if not secret_id or not secret_key:
        raise ValueError("secret_id e secret_key são obrigatórios")

    date = utc_date(timestamp)
    credential_scope = f"{date}/{service}/tc3_request"
    canonical_request = build_canonical_request(host, action, payload)
    string_to_sign = "\n".join(
        [
            TC3_ALGORITHM,
            str(timestamp),
            credential_scope,
            _sha256_hex(canonical_request.encode("utf-8")),
        ]
    )

    signing_key = derive_signing_key(secret_key, date, service)
    signature = hmac.new(
        signing_key, string_to_sign.encode("utf-8"), hashlib.sha256
    ).hexdigest()

    authorization = (
        f"{TC3_ALGORITHM} "
        f"Credential={secret_id}/{credential_scope}, "
        f"SignedHeaders={TC3_SIGNED_HEADERS}, "
        f"Signature={signature}"
    )
    return Tc3Signature(
        authorization=authorization,
        credential_scope=credential_scope,
        signature=signature,
        timestamp=timestamp,
    )
