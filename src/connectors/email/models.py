"""Tipos do envio de email (Tencent Cloud SES)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from utils.errors import ConnectorError

BodyType = Literal["text", "html"]

TEXT: BodyType = "text"
HTML: BodyType = "html"


@dataclass(frozen=True)
class EmailRequest:
    """Email simples (corpo texto ou HTML)."""

    from_address: str
    to: list[str]
    subject: str
    body: str
    body_type: str = TEXT
    reply_to: str = ""


@dataclass(frozen=True)
class TemplateEmailRequest:
    """Email a partir de template cadastrado no SES."""

    from_address: str
    to: list[str]
    subject: str
    template_id: int
    template_data: dict[str, str] = field(default_factory=dict)
    reply_to: str = ""


@dataclass(frozen=True)
class EmailResponse:
    """Identificadores devolvidos pelo SES."""

    message_id: str
    request_id: str


class EmailSendError(ConnectorError):
    """Falha do cliente SES durante o envio (causa encadeada em __cause__)."""
