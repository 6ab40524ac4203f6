"""Configuração centralizada de logging.

Logging JSON estruturado com campos fixos (correlation_id, service, level,
logger, message). Chamar configure_logging() uma vez na inicialização do
processo que usa os conectores.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO")
    logger = get_logger(__name__)
    logger.info("wechatpay_order_created", extra={"out_trade_no": "T1"})

Nunca logar SecretKey, chaves privadas, access_token ou números de telefone.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.correlation import get_correlation_id
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

    from config.settings.base import BaseSettings

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "conectores_nuvem"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado no root logger.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço injetado em cada record.
        correlation_id_getter: Função que devolve o correlation_id atual.
            Default: ContextVar de config.logging.correlation.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(
        CorrelationIdFilter(service_name, correlation_id_getter or get_correlation_id)
    )

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substitui handlers existentes para evitar duplicação
    root.handlers = [handler]


def configure_logging_from_settings(settings: BaseSettings | None = None) -> None:
    """Configura logging a partir de BaseSettings (LOG_LEVEL, SERVICE_NAME, DEBUG).

    DEBUG ativo força o nível DEBUG.
    """
    from config.settings.base import get_base_settings

    base = settings or get_base_settings()
    configure_logging(
        level="DEBUG" if base.debug else base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def get_logger(name: str) -> logging.Logger:
    """Retorna logger do módulo (service e correlation_id vêm do filter)."""
    return logging.getLogger(name)


def log_vendor_error(
    logger: logging.Logger,
    vendor: str,
    operation: str,
    *,
    code: str | int | None = None,
    status_code: int | None = None,
) -> None:
    """Log padronizado de erro de fornecedor (sem payloads nem credenciais).

    Args:
        logger: Logger do conector.
        vendor: Fornecedor (ex: "wechatpay").
        operation: Operação (ex: "create_refund").
        code: Código de erro do fornecedor, se houver.
        status_code: Status HTTP, se houver.
    """
    extra: dict[str, object] = {"vendor": vendor, "operation": operation}
    if code is not None:
        extra["error_code"] = code
    if status_code is not None:
        extra["status_code"] = status_code

    logger.warning("Vendor API error on %s.%s", vendor, operation, extra=extra)
