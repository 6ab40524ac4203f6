"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO")
    logger = get_logger(__name__)
"""

from config.logging.config import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
    log_vendor_error,
)
from config.logging.correlation import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "configure_logging_from_settings",
    "create_json_formatter",
    "generate_correlation_id",
    "get_correlation_id",
    "get_logger",
    "log_vendor_error",
    "reset_correlation_id",
    "set_correlation_id",
]
