"""Correlation id para rastrear chamadas a fornecedores nos logs.

Usa ContextVar, portanto é seguro entre tasks asyncio.

Uso:
    token = set_correlation_id(request_id)
    try:
        await client.create_order(...)
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual ("" se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; gera um UUID4 hex quando None."""
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return uuid.uuid4().hex
