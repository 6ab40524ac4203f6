"""Carga de chave privada do comerciante e certificado da plataforma."""

from __future__ import annotations

from cryptography import x509
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from .errors import WeChatPayCryptoError


def load_private_key(
    private_key_pem: str, passphrase: str | None = None
) -> rsa.RSAPrivateKey:
    """Carrega chave privada RSA em formato PEM (PKCS#8 ou PKCS#1).

    Args:
        private_key_pem: Chave privada em formato PEM
        passphrase: Senha da chave (opcional)

    Returns:
        Chave privada RSA

    Raises:
        WeChatPayCryptoError: Se chave inválida ou não RSA
    """
    if not private_key_pem or not private_key_pem.strip():
        raise WeChatPayCryptoError("Invalid private key: empty")

    passphrase_bytes = passphrase.encode() if passphrase and passphrase.strip() else None

    def _load(password: bytes | None) -> object:
        return serialization.load_pem_private_key(
            private_key_pem.encode("utf-8"),
            password=password,
            backend=default_backend(),
        )

    try:
        key = _load(passphrase_bytes)
    except (ValueError, TypeError) as exc:
        # Chave sem criptografia com passphrase injetada por configuração
        exc_text = str(exc).lower()
        if passphrase_bytes and "private key is not encrypted" in exc_text:
            try:
                key = _load(None)
            except (ValueError, TypeError) as retry_exc:
                raise WeChatPayCryptoError(f"Invalid private key: {retry_exc}") from retry_exc
        else:
            raise WeChatPayCryptoError(f"Invalid private key: {exc}") from exc

    if not isinstance(key, rsa.RSAPrivateKey):
        raise WeChatPayCryptoError("Invalid private key: not an RSA key")
    return key


def load_certificate(certificate_pem: str) -> x509.Certificate:
    """Carrega certificado X.509 (PEM) da plataforma WeChat Pay.

    Raises:
        WeChatPayCryptoError: Se certificado inválido ou sem chave RSA
    """
    if not certificate_pem or not certificate_pem.strip():
        raise WeChatPayCryptoError("Invalid certificate: empty")
    try:
        certificate = x509.load_pem_x509_certificate(
            certificate_pem.encode("utf-8"), default_backend()
        )
    except ValueError as exc:
        raise WeChatPayCryptoError(f"Invalid certificate: {exc}") from exc

    if not isinstance(certificate.public_key(), rsa.RSAPublicKey):
        raise WeChatPayCryptoError("Invalid certificate: public key is not RSA")
    return certificate


def certificate_serial_no(certificate: x509.Certificate) -> str:
    """Número de série em hex maiúsculo, como enviado em Wechatpay-Serial."""
    return format(certificate.serial_number, "X")
