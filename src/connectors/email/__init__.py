"""Tencent Cloud SES (email)."""

from connectors.email.models import (
    HTML,
    TEXT,
    EmailRequest,
    EmailResponse,
    EmailSendError,
    TemplateEmailRequest,
)
from connectors.email.service import EmailService, create_email_service
from connectors.email.validation import validate_email, validate_email_request

__all__ = [
    "HTML",
    "TEXT",
    "EmailRequest",
    "EmailResponse",
    "EmailSendError",
    "EmailService",
    "TemplateEmailRequest",
    "create_email_service",
    "validate_email",
    "validate_email_request",
]
