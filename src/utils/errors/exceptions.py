"""Exceções compartilhadas pelos conectores de fornecedores."""

from __future__ import annotations


class ConnectorError(RuntimeError):
    """Base para todas as falhas levantadas pelos conectores."""


class VendorApiError(ConnectorError):
    """Fornecedor recusou a chamada e devolveu código + mensagem.

    Attributes:
        vendor: Nome curto do fornecedor (ex: "wechatpay", "tencentcloud")
        code: Código de erro do fornecedor (string ou inteiro)
        message: Mensagem de erro do fornecedor
        status_code: Status HTTP da resposta, quando houver
    """

    vendor: str = "vendor"

    def __init__(
        self,
        code: str | int,
        message: str,
        status_code: int | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"{self.vendor} api error [{code}]: {message}")


class HttpStatusError(ConnectorError):
    """Resposta não-2xx sem erro estruturado do fornecedor no corpo."""

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body[:512]
        detail = f", body: {self.body}" if self.body else ""
        super().__init__(f"http status: {status_code}{detail}")
