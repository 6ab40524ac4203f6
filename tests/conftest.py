"""Configuração do pytest para os conectores de nuvem."""

import sys
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from pathlib import Path

import httpx
import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from connectors.http_base import HttpClient  # noqa: E402

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def mock_http() -> Callable[[Handler], tuple[HttpClient, list[httpx.Request]]]:
    """Factory de HttpClient sobre httpx.MockTransport.

    Devolve (client, requests); cada requisição enviada é anexada a `requests`.
    """

    def factory(handler: Handler) -> tuple[HttpClient, list[httpx.Request]]:
        requests: list[httpx.Request] = []

        def recording(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        return HttpClient(transport=httpx.MockTransport(recording)), requests

    return factory


@pytest.fixture(scope="session")
def rsa_material() -> dict[str, object]:
    """Par RSA 2048 + certificado autoassinado (PEM) para testes de assinatura."""
    from cryptography import x509
    from cryptography.hazmat.primitives import hashes, serialization
    from cryptography.hazmat.primitives.asymmetric import rsa
    from cryptography.x509.oid import NameOID

    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "Test Platform")])
    now = datetime.now(timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(0x5157F09EFDC096DE15EBE81A47057A7232F1B8E1)
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=30))
        .sign(key, hashes.SHA256())
    )
    private_pem = key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    ).decode("ascii")
    return {
        "key": key,
        "cert": cert,
        "private_pem": private_pem,
        "cert_pem": cert.public_bytes(serialization.Encoding.PEM).decode("ascii"),
    }
