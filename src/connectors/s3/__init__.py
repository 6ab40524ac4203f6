"""AWS S3 via boto3."""

from connectors.s3.client import (
    create_s3_client,
    create_s3_client_from_settings,
    validate_credentials,
)
from connectors.s3.errors import S3Error, is_not_found, parse_s3_error
from connectors.s3.presign import generate_presigned_url
from connectors.s3.transfer import (
    download_file,
    object_exists,
    upload_file,
    validate_bucket_name,
)

__all__ = [
    "S3Error",
    "create_s3_client",
    "create_s3_client_from_settings",
    "download_file",
    "generate_presigned_url",
    "is_not_found",
    "object_exists",
    "parse_s3_error",
    "upload_file",
    "validate_bucket_name",
    "validate_credentials",
]
