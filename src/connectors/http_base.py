"""Cliente HTTP base para os conectores de fornecedores.

Uma requisição, uma resposta: não há retry nem backoff. Erros de rede
(`httpx.HTTPError`) propagam sem embrulho; a interpretação do status e do
corpo fica com cada conector.
"""

from __future__ import annotations

import logging
import ssl
from dataclasses import dataclass, field
from typing import Any

import httpx

from config.settings.base import get_base_settings

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP.

    O timeout padrão vem de HTTP_TIMEOUT_SECONDS (BaseSettings).
    """

    timeout_seconds: float = field(
        default_factory=lambda: get_base_settings().http_timeout_seconds
    )
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool | ssl.SSLContext = True


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Args:
        config: Configuração HTTP (timeout, headers padrão, TLS)
        transport: Transport httpx opcional (ex: httpx.MockTransport em testes)
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        content: bytes | str | None = None,
        json: Any = None,
        data: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Executa uma requisição e devolve a resposta sem interpretar status."""
        merged_headers = {**self._config.default_headers, **(headers or {})}
        async with httpx.AsyncClient(
            verify=self._config.verify_ssl,
            timeout=self._config.timeout_seconds,
            transport=self._transport,
        ) as client:
            response = await client.request(
                method,
                url,
                headers=merged_headers,
                params=params,
                content=content,
                json=json,
                data=data,
                files=files,
            )
        logger.debug(
            "http_request_completed",
            extra={
                "method": method,
                "host": response.request.url.host,
                "path": response.request.url.path,
                "status_code": response.status_code,
            },
        )
        return response

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("PUT", url, **kwargs)


def is_success(response: httpx.Response) -> bool:
    """True para status 2xx."""
    return 200 <= response.status_code < 300


def parse_json_body(response: httpx.Response) -> Any | None:
    """Decodifica corpo JSON; devolve None se o corpo não for JSON válido."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None
