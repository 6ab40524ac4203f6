"""Erros da API XML do COS."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

from utils.errors import VendorApiError

if TYPE_CHECKING:
    import httpx


class CosApiError(VendorApiError):
    """Resposta não-2xx do COS.

    Attributes:
        request_id: x-cos-request-id / <RequestId>
        resource: <Resource> do corpo de erro
    """

    vendor = "cos"

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int | None = None,
        request_id: str = "",
        resource: str = "",
    ) -> None:
        self.request_id = request_id
        self.resource = resource
        super().__init__(code, message, status_code)


def parse_cos_error(response: httpx.Response) -> CosApiError:
    """Converte <Error><Code/><Message/></Error> em CosApiError.

    Respostas sem corpo XML (ex: HEAD) viram código genérico por status.
    """
    request_id = response.headers.get("x-cos-request-id", "")
    fields: dict[str, str] = {}
    if response.content:
        try:
            root = ET.fromstring(response.content)
        except ET.ParseError:
            root = None
        if root is not None and root.tag == "Error":
            fields = {child.tag: (child.text or "") for child in root}

    if not fields:
        code = "NoSuchKey" if response.status_code == 404 else f"HTTP{response.status_code}"
        return CosApiError(
            code, response.reason_phrase or "", response.status_code, request_id
        )
    return CosApiError(
        code=fields.get("Code", f"HTTP{response.status_code}"),
        message=fields.get("Message", ""),
        status_code=response.status_code,
        request_id=fields.get("RequestId", request_id),
        resource=fields.get("Resource", ""),
    )
