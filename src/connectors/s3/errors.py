"""Erros do S3 e conversão de exceções do botocore."""

from __future__ import annotations

from botocore.exceptions import ClientError

from utils.errors import VendorApiError

NOT_FOUND_CODES = frozenset({"NotFound", "NoSuchKey", "404"})


class S3Error(VendorApiError):
    """Erro devolvido pela API do S3 (ou validação com código S3)."""

    vendor = "s3"


def parse_s3_error(exc: BaseException) -> BaseException:
    """ClientError vira S3Error(code, message); demais exceções voltam iguais."""
    if not isinstance(exc, ClientError):
        return exc
    error = exc.response.get("Error", {})
    status = exc.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
    return S3Error(
        code=str(error.get("Code", "Unknown")),
        message=str(error.get("Message", "")),
        status_code=status,
    )


def is_not_found(exc: BaseException) -> bool:
    """True para ClientError de objeto inexistente."""
    if not isinstance(exc, ClientError):
        return False
    return str(exc.response.get("Error", {}).get("Code", "")) in NOT_FOUND_CODES
