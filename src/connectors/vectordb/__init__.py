"""Tencent Cloud VectorDB."""

from connectors.vectordb.client import (
    VectorDbClient,
    create_vectordb_client,
    extract_host,
    extract_region,
)
from connectors.vectordb.models import (
    SearchOptions,
    SearchResult,
    VectorData,
    VectorDbApiError,
    WriteOptions,
)

__all__ = [
    "SearchOptions",
    "SearchResult",
    "VectorData",
    "VectorDbApiError",
    "VectorDbClient",
    "WriteOptions",
    "create_vectordb_client",
    "extract_host",
    "extract_region",
]
