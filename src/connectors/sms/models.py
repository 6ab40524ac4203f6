"""Modelos de resposta do Tencent Cloud SMS (SendSms)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from utils.errors import VendorApiError


class SendStatus(BaseModel):
    """Status de envio por número (SendStatusSet[i])."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    serial_no: str = Field(default="", alias="SerialNo")
    phone_number: str = Field(default="", alias="PhoneNumber")
    fee: int = Field(default=0, alias="Fee")
    code: str = Field(default="", alias="Code")
    message: str = Field(default="", alias="Message")
    iso_code: str = Field(default="", alias="IsoCode")

    @property
    def ok(self) -> bool:
        return self.code == "Ok"


class SendSmsResult(BaseModel):
    """Resultado de SendSms."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    request_id: str = Field(default="", alias="RequestId")
    statuses: list[SendStatus] = Field(default_factory=list, alias="SendStatusSet")


class SmsSendError(VendorApiError):
    """Operadora recusou o envio de um número (Code != "Ok")."""

    vendor = "sms"

    def __init__(self, status: SendStatus) -> None:
        self.status = status
        super().__init__(status.code, status.message)
