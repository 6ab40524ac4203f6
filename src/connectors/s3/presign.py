"""URLs pré-assinadas de leitura."""

from __future__ import annotations

from typing import Any

from botocore.exceptions import ClientError

from .errors import parse_s3_error
from .transfer import validate_bucket_name

# Limite do SigV4 para URLs pré-assinadas (7 dias)
MAX_PRESIGN_EXPIRES_SECONDS = 7 * 24 * 3600


def generate_presigned_url(client: Any, bucket: str, key: str, expires_in: int = 900) -> str:
    """URL GET pré-assinada válida por expires_in segundos."""
    validate_bucket_name(bucket)
    if not key:
        raise ValueError("key cannot be empty")
    if expires_in <= 0 or expires_in > MAX_PRESIGN_EXPIRES_SECONDS:
        raise ValueError(
            f"expires_in must be between 1 and {MAX_PRESIGN_EXPIRES_SECONDS} seconds"
        )
    try:
        return client.generate_presigned_url(
            "get_object",
            Params={"Bucket": bucket, "Key": key},
            ExpiresIn=expires_in,
        )
    except ClientError as exc:
        raise parse_s3_error(exc) from exc
