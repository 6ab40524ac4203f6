"""Criação do cliente boto3 com credenciais estáticas (SigV4)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import boto3
from botocore.config import Config as BotoConfig

if TYPE_CHECKING:
    from config.settings import S3Settings

logger: logging.Logger = logging.getLogger(__name__)

MIN_CREDENTIAL_LENGTH = 16


def validate_credentials(access_key: str, secret_key: str) -> None:
    """Valida presença e tamanho mínimo das chaves.

    Raises:
        ValueError: Chave vazia ou menor que 16 caracteres
    """
    if not access_key:
        raise ValueError("accessKey cannot be empty")
    if not secret_key:
        raise ValueError("secretKey cannot be empty")
    if len(access_key) < MIN_CREDENTIAL_LENGTH:
        raise ValueError("accessKey format invalid: minimum length 16 characters")
    if len(secret_key) < MIN_CREDENTIAL_LENGTH:
        raise ValueError("secretKey format invalid: minimum length 16 characters")


def create_s3_client(
    access_key: str,
    secret_key: str,
    region: str,
    endpoint_url: str | None = None,
    timeout_seconds: float = 60.0,
) -> Any:
    """Cria cliente S3 com uma tentativa por operação (sem retry do botocore)."""
    validate_credentials(access_key, secret_key)
    if not region:
        raise ValueError("region cannot be empty")

    config = BotoConfig(
        signature_version="s3v4",
        connect_timeout=timeout_seconds,
        read_timeout=timeout_seconds,
        retries={"total_max_attempts": 1, "mode": "standard"},
    )
    client = boto3.client(
        "s3",
        aws_access_key_id=access_key,
        aws_secret_access_key=secret_key,
        region_name=region,
        endpoint_url=endpoint_url or None,
        config=config,
    )
    logger.debug(
        "s3_client_created",
        extra={"region": region, "custom_endpoint": bool(endpoint_url)},
    )
    return client


def create_s3_client_from_settings(settings: S3Settings | None = None) -> Any:
    """Factory a partir das settings do S3."""
    from config.settings import get_s3_settings

    s3 = settings or get_s3_settings()
    return create_s3_client(
        access_key=s3.access_key_id,
        secret_key=s3.secret_access_key,
        region=s3.region,
        endpoint_url=s3.endpoint_url or None,
    )
