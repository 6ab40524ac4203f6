"""Requisições (dataclasses) e respostas (pydantic) da API v3."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

TradeType = Literal["jsapi", "native", "app", "h5"]
TRADE_TYPES: tuple[str, ...] = ("jsapi", "native", "app", "h5")


# =============================================================================
# Requisições
# =============================================================================


@dataclass(frozen=True)
class OrderAmount:
    """Valor em centavos (分)."""

    total: int
    currency: str = "CNY"


@dataclass(frozen=True)
class Payer:
    openid: str


@dataclass(frozen=True)
class CreateOrderRequest:
    """Pedido de pagamento (下单)."""

    appid: str
    mchid: str
    description: str
    out_trade_no: str
    notify_url: str
    amount: OrderAmount
    payer: Payer | None = None
    attach: str = ""
    time_expire: str = ""
    scene_info: dict[str, Any] | None = None

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "appid": self.appid,
            "mchid": self.mchid,
            "description": self.description,
            "out_trade_no": self.out_trade_no,
            "notify_url": self.notify_url,
            "amount": {"total": self.amount.total, "currency": self.amount.currency},
        }
        if self.payer is not None:
            body["payer"] = {"openid": self.payer.openid}
        if self.attach:
            body["attach"] = self.attach
        if self.time_expire:
            body["time_expire"] = self.time_expire
        if self.scene_info:
            body["scene_info"] = self.scene_info
        return body


@dataclass(frozen=True)
class RefundAmount:
    """Valores do reembolso em centavos."""

    refund: int
    total: int
    currency: str = "CNY"


@dataclass(frozen=True)
class CreateRefundRequest:
    """Pedido de reembolso (申请退款)."""

    out_refund_no: str
    amount: RefundAmount
    out_trade_no: str = ""
    transaction_id: str = ""
    reason: str = ""
    notify_url: str = ""
    funds_account: str = ""
    goods_detail: list[dict[str, Any]] = field(default_factory=list)

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "out_refund_no": self.out_refund_no,
            "amount": {
                "refund": self.amount.refund,
                "total": self.amount.total,
                "currency": self.amount.currency,
            },
        }
        if self.transaction_id:
            body["transaction_id"] = self.transaction_id
        if self.out_trade_no:
            body["out_trade_no"] = self.out_trade_no
        if self.reason:
            body["reason"] = self.reason
        if self.notify_url:
            body["notify_url"] = self.notify_url
        if self.funds_account:
            body["funds_account"] = self.funds_account
        if self.goods_detail:
            body["goods_detail"] = self.goods_detail
        return body


# =============================================================================
# Respostas
# =============================================================================


class CreateOrderResponse(BaseModel):
    """prepay_id (jsapi/app), code_url (native) ou h5_url (h5)."""

    model_config = ConfigDict(extra="ignore")

    prepay_id: str = ""
    code_url: str = ""
    h5_url: str = ""


class TransactionAmount(BaseModel):
    model_config = ConfigDict(extra="ignore")

    total: int = 0
    currency: str = ""
    payer_total: int = 0
    payer_currency: str = ""


class TransactionPayer(BaseModel):
    model_config = ConfigDict(extra="ignore")

    openid: str = ""


class QueryOrderResponse(BaseModel):
    """Estado de uma transação."""

    model_config = ConfigDict(extra="ignore")

    appid: str = ""
    mchid: str = ""
    out_trade_no: str = ""
    transaction_id: str = ""
    trade_type: str = ""
    trade_state: str = ""
    trade_state_desc: str = ""
    bank_type: str = ""
    attach: str = ""
    success_time: str = ""
    amount: TransactionAmount = Field(default_factory=TransactionAmount)
    payer: TransactionPayer = Field(default_factory=TransactionPayer)

    @property
    def is_paid(self) -> bool:
        return self.trade_state == "SUCCESS"


class RefundAmountDetail(BaseModel):
    model_config = ConfigDict(extra="ignore")

    total: int = 0
    refund: int = 0
    payer_total: int = 0
    payer_refund: int = 0
    settlement_refund: int = 0
    discount_refund: int = 0
    currency: str = ""


class RefundResponse(BaseModel):
    """Reembolso criado ou consultado. status em maiúsculas."""

    model_config = ConfigDict(extra="ignore")

    refund_id: str = ""
    out_refund_no: str = ""
    transaction_id: str = ""
    out_trade_no: str = ""
    channel: str = ""
    user_received_account: str = ""
    success_time: str = ""
    create_time: str = ""
    status: str = ""
    funds_account: str = ""
    amount: RefundAmountDetail = Field(default_factory=RefundAmountDetail)

    @field_validator("status")
    @classmethod
    def _upper_status(cls, value: str) -> str:
        return value.upper()
