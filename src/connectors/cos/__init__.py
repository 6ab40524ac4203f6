"""Tencent Cloud Object Storage (API XML)."""

from connectors.cos.client import CosClient, CosObjectMeta, bucket_url, create_cos_client
from connectors.cos.errors import CosApiError, parse_cos_error
from connectors.cos.paths import generate_temp_file_name, validate_path
from connectors.cos.signer import build_authorization
from connectors.cos.transfer import (
    CosConfig,
    download_bytes,
    download_file,
    download_with_config,
    upload_bytes,
    upload_file,
    upload_with_config,
)

__all__ = [
    "CosApiError",
    "CosClient",
    "CosConfig",
    "CosObjectMeta",
    "build_authorization",
    "bucket_url",
    "create_cos_client",
    "download_bytes",
    "download_file",
    "download_with_config",
    "generate_temp_file_name",
    "parse_cos_error",
    "upload_bytes",
    "upload_file",
    "upload_with_config",
    "validate_path",
]
