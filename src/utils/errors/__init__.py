"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConnectorError,
    HttpStatusError,
    VendorApiError,
)

__all__ = [
    "ConnectorError",
    "HttpStatusError",
    "VendorApiError",
]
