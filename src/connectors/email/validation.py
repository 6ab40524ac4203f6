"""Validação de parâmetros de email antes da chamada ao SES."""

from __future__ import annotations

import re

from connectors.email.models import HTML, TEXT, EmailRequest, TemplateEmailRequest

_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
# "Nome <endereco@dominio>"
_DISPLAY_NAME_RE = re.compile(r"^[^<>]*<([^<>]+)>$")


def validate_email(address: str) -> bool:
    """True se o endereço tem formato válido."""
    return bool(_EMAIL_RE.match(address))


def _bare_address(address: str) -> str:
    match = _DISPLAY_NAME_RE.match(address.strip())
    return match.group(1).strip() if match else address


def _validate_envelope(from_address: str, to: list[str], subject: str) -> None:
    if not from_address:
        raise ValueError("sender email cannot be empty")
    if not validate_email(_bare_address(from_address)):
        raise ValueError("invalid sender email format")

    if not to:
        raise ValueError("recipient list cannot be empty")
    for recipient in to:
        if not recipient:
            raise ValueError("recipient email cannot be empty")
        if not validate_email(recipient):
            raise ValueError(f"invalid recipient email: {recipient}")

    if not subject:
        raise ValueError("email subject cannot be empty")


def validate_email_request(request: EmailRequest) -> None:
    """Valida um EmailRequest.

    Raises:
        ValueError: Primeiro problema encontrado, na ordem remetente,
            destinatários, assunto, corpo e tipo de corpo.
    """
    _validate_envelope(request.from_address, request.to, request.subject)
    if not request.body:
        raise ValueError("email body cannot be empty")
    if request.body_type not in (TEXT, HTML):
        raise ValueError("bodyType must be either 'text' or 'html'")


def validate_template_email_request(request: TemplateEmailRequest) -> None:
    """Valida um TemplateEmailRequest."""
    _validate_envelope(request.from_address, request.to, request.subject)
    if request.template_id <= 0:
        raise ValueError("template id must be > 0")
