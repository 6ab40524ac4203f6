"""Upload, download e checagem de existência de objetos S3."""

from __future__ import annotations

import logging
import re
from typing import IO, Any

from botocore.exceptions import ClientError

from .errors import S3Error, is_not_found, parse_s3_error

logger: logging.Logger = logging.getLogger(__name__)

DOWNLOAD_CHUNK_SIZE = 1024 * 1024

_BUCKET_RE = re.compile(r"^[a-z0-9][a-z0-9.-]+[a-z0-9]$")


def validate_bucket_name(bucket: str) -> None:
    """Raises S3Error(InvalidBucketName) para nome vazio, fora de 3..63 ou inválido."""
    if not bucket:
        raise S3Error("InvalidBucketName", "Bucket name cannot be empty")
    if len(bucket) < 3 or len(bucket) > 63:
        raise S3Error(
            "InvalidBucketName", "Bucket name must be between 3 and 63 characters"
        )
    if not _BUCKET_RE.match(bucket):
        raise S3Error(
            "InvalidBucketName", "Bucket name contains invalid characters or format"
        )


def upload_file(
    client: Any,
    bucket: str,
    key: str,
    body: bytes | IO[bytes] | None,
    content_type: str | None = None,
) -> str:
    """Grava objeto (bytes, arquivo aberto ou vazio). Devolve o ETag.

    Raises:
        S3Error: Bucket inválido ou erro da API
    """
    validate_bucket_name(bucket)
    if not key:
        raise ValueError("key cannot be empty")

    params: dict[str, Any] = {"Bucket": bucket, "Key": key}
    if body is not None:
        params["Body"] = body
    if content_type:
        params["ContentType"] = content_type

    try:
        result = client.put_object(**params)
    except ClientError as exc:
        raise parse_s3_error(exc) from exc

    logger.info("s3_upload_ok", extra={"bucket": bucket})
    return str(result.get("ETag", "")).strip('"')


def download_file(client: Any, bucket: str, key: str, writer: IO[bytes]) -> int:
    """Copia o objeto para writer em blocos de 1 MiB. Devolve bytes escritos."""
    validate_bucket_name(bucket)
    try:
        result = client.get_object(Bucket=bucket, Key=key)
    except ClientError as exc:
        raise parse_s3_error(exc) from exc

    body = result["Body"]
    written = 0
    try:
        while True:
            chunk = body.read(DOWNLOAD_CHUNK_SIZE)
            if not chunk:
                break
            writer.write(chunk)
            written += len(chunk)
    finally:
        body.close()

    logger.info("s3_download_ok", extra={"bucket": bucket, "size": written})
    return written


def object_exists(client: Any, bucket: str, key: str) -> bool:
    """HEAD do objeto. NotFound/NoSuchKey/404 viram False."""
    validate_bucket_name(bucket)
    try:
        client.head_object(Bucket=bucket, Key=key)
    except ClientError as exc:
        if is_not_found(exc):
            return False
        raise parse_s3_error(exc) from exc
    return True
