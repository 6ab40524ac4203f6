"""Assinatura WECHATPAY2-SHA256-RSA2048 e verificação de respostas."""

from __future__ import annotations

import base64
import binascii

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from utils.nonce import generate_nonce as _generate_nonce

from .errors import WeChatPayCryptoError

AUTH_SCHEME = "WECHATPAY2-SHA256-RSA2048"


def generate_nonce(length: int = 32) -> str:
    """Nonce alfanumérico para nonce_str."""
    return _generate_nonce(length)


def build_sign_message(
    method: str, url: str, timestamp: str, nonce: str, body: str
) -> str:
    """Mensagem a assinar: METHOD\\nURL\\nTS\\nNONCE\\nBODY\\n.

    url é o caminho com query string (sem esquema nem host).
    """
    return f"{method.upper()}\n{url}\n{timestamp}\n{nonce}\n{body}\n"


def sign_message(message: str, private_key: rsa.RSAPrivateKey) -> str:
    """RSA PKCS#1 v1.5 com SHA-256, em base64."""
    signature = private_key.sign(
        message.encode("utf-8"),
        padding.PKCS1v15(),
        hashes.SHA256(),
    )
    return base64.b64encode(signature).decode("ascii")


def build_authorization(
    mchid: str, serial_no: str, nonce: str, timestamp: str, signature: str
) -> str:
    """Valor do header Authorization."""
    return (
        f'{AUTH_SCHEME} mchid="{mchid}",nonce_str="{nonce}",'
        f'signature="{signature}",timestamp="{timestamp}",serial_no="{serial_no}"'
    )


def build_verify_message(timestamp: str, nonce: str, body: str) -> str:
    """Mensagem assinada pela plataforma: TS\\nNONCE\\nBODY\\n."""
    return f"{timestamp}\n{nonce}\n{body}\n"


def verify_signature(
    signature: str,
    timestamp: str,
    nonce: str,
    body: str,
    public_key: rsa.RSAPublicKey,
) -> bool:
    """Verifica assinatura de resposta/callback da plataforma.

    Returns:
        False se a assinatura não confere

    Raises:
        WeChatPayCryptoError: Se a assinatura não é base64 válido
    """
    try:
        raw = base64.b64decode(signature, validate=True)
    except (ValueError, binascii.Error) as exc:
        raise WeChatPayCryptoError(f"Invalid base64 signature: {exc}") from exc

    try:
        public_key.verify(
            raw,
            build_verify_message(timestamp, nonce, body).encode("utf-8"),
            padding.PKCS1v15(),
            hashes.SHA256(),
        )
    except InvalidSignature:
        return False
    return True
