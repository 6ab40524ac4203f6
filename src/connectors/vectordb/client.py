"""Cliente HTTP do Tencent Cloud VectorDB.

Autenticação por credencial estática no header
Authorization: Bearer account=<conta>&api_key=<chave>.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

from config.logging import log_vendor_error
from connectors.http_base import HttpClient, HttpClientConfig, is_success, parse_json_body
from connectors.vectordb.models import (
    SearchOptions,
    SearchResult,
    VectorData,
    VectorDbApiError,
    VectorDbResponse,
    WriteOptions,
)
from utils.errors import HttpStatusError

if TYPE_CHECKING:
    from config.settings import VectorDbSettings

logger: logging.Logger = logging.getLogger(__name__)

UPSERT_PATH = "/document/upsert"
SEARCH_PATH = "/document/search"

_RESERVED_FIELDS = ("id", "score", "vector")


def extract_host(endpoint: str) -> str:
    """Hostname do endpoint (sem porta); vazio se inválido."""
    try:
        return urlsplit(endpoint).hostname or ""
    except ValueError:
        return ""


def extract_region(endpoint: str) -> str:
    """Região inferida do host (terceiro rótulo a partir do fim).

    Ex: lb-xxx.clb.ap-guangzhou.tencentclb.com -> ap-guangzhou.
    """
    labels = extract_host(endpoint).split(".")
    if len(labels) < 3:
        return ""
    return labels[-3]


def _validate_vectors(vectors: list[VectorData]) -> None:
    if not vectors:
        raise ValueError("vectors cannot be empty")
    seen: set[str] = set()
    dimension = len(vectors[0].vector)
    for item in vectors:
        if not item.id:
            raise ValueError("vector id cannot be empty")
        if item.id in seen:
            raise ValueError(f"duplicate vector id: {item.id}")
        seen.add(item.id)
        if not item.vector:
            raise ValueError(f"vector cannot be empty: {item.id}")
        if len(item.vector) != dimension:
            raise ValueError(
                f"inconsistent vector dimension: {item.id} has {len(item.vector)},"
                f" expected {dimension}"
            )
        clashing = [name for name in _RESERVED_FIELDS if name in item.metadata]
        if clashing:
            raise ValueError(f"metadata uses reserved field: {clashing[0]}")


def _document_to_result(document: dict[str, Any]) -> SearchResult:
    metadata = {k: v for k, v in document.items() if k not in _RESERVED_FIELDS}
    return SearchResult(
        id=str(document.get("id", "")),
        score=float(document.get("score", 0.0)),
        vector=list(document.get("vector") or []),
        metadata=metadata,
    )


class VectorDbClient:
    """Cliente do VectorDB.

    Args:
        endpoint: URL da instância (http[s]://host[:porta])
        api_key: API key
        account: Conta (padrão root)
        database: Database padrão quando as opções não informam
        http_client: HttpClient injetável (testes)
    """

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        account: str = "root",
        database: str = "",
        http_client: HttpClient | None = None,
    ) -> None:
        if not endpoint or not extract_host(endpoint):
            raise ValueError("endpoint inválido")
        if not api_key or not account:
            raise ValueError("account e api_key são obrigatórios")
        self.endpoint = endpoint.rstrip("/")
        self.database = database
        self._account = account
        self._api_key = api_key
        self._http = http_client or HttpClient()

    @property
    def region(self) -> str:
        return extract_region(self.endpoint)

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer account={self._account}&api_key={self._api_key}",
            "Content-Type": "application/json",
        }

    def _resolve_target(self, database: str, collection: str) -> tuple[str, str]:
        resolved = database or self.database
        if not resolved:
            raise ValueError("database is required")
        if not collection:
            raise ValueError("collection is required")
        return resolved, collection

    async def _post(self, path: str, body: dict[str, Any]) -> VectorDbResponse:
        response = await self._http.post(
            f"{self.endpoint}{path}", json=body, headers=self._headers()
        )
        data = parse_json_body(response)
        if not isinstance(data, dict):
            if not is_success(response):
                raise HttpStatusError(response.status_code, response.text)
            raise VectorDbApiError(-1, "invalid json response", response.status_code)

        parsed = VectorDbResponse.model_validate(data)
        if parsed.code != 0:
            log_vendor_error(
                logger, "vectordb", path, code=parsed.code, status_code=response.status_code
            )
            raise VectorDbApiError(parsed.code, parsed.msg, response.status_code)
        if not is_success(response):
            raise HttpStatusError(response.status_code, response.text)
        return parsed

    async def write_vectors(
        self, vectors: list[VectorData], options: WriteOptions
    ) -> int:
        """Grava (upsert) documentos e devolve a quantidade afetada.

        Raises:
            ValueError: Alvo ausente, vetores vazios, ids repetidos ou
                dimensões inconsistentes
            VectorDbApiError: code != 0
            HttpStatusError: Status não-2xx sem JSON
        """
        database, collection = self._resolve_target(options.database, options.collection)
        _validate_vectors(vectors)

        body: dict[str, Any] = {
            "database": database,
            "collection": collection,
            "buildIndex": options.build_index,
            "documents": [
                {"id": item.id, "vector": list(item.vector), **item.metadata}
                for item in vectors
            ],
        }
        parsed = await self._post(UPSERT_PATH, body)
        logger.info(
            "vectordb_upsert_ok",
            extra={
                "collection": collection,
                "documents": len(vectors),
                "affected_count": parsed.affected_count,
            },
        )
        return parsed.affected_count

    async def search_vectors(
        self, query_vector: list[float], options: SearchOptions
    ) -> list[SearchResult]:
        """Busca os top_k documentos mais próximos de query_vector."""
        database, collection = self._resolve_target(options.database, options.collection)
        if not query_vector:
            raise ValueError("query vector cannot be empty")
        if options.top_k <= 0:
            raise ValueError("top_k must be > 0")

        search: dict[str, Any] = {
            "vectors": [list(query_vector)],
            "limit": options.top_k,
            "retrieveVector": options.retrieve_vector,
        }
        if options.filter:
            search["filter"] = options.filter

        parsed = await self._post(
            SEARCH_PATH,
            {"database": database, "collection": collection, "search": search},
        )
        # Um grupo de resultados por vetor de consulta
        documents = parsed.documents[0] if parsed.documents else []
        results = [_document_to_result(doc) for doc in documents]
        logger.info(
            "vectordb_search_ok",
            extra={"collection": collection, "results": len(results)},
        )
        return results


def create_vectordb_client(
    settings: VectorDbSettings | None = None,
    http_client: HttpClient | None = None,
) -> VectorDbClient:
    """Factory com settings do ambiente quando não informadas."""
    from config.settings import get_vectordb_settings

    vectordb = settings or get_vectordb_settings()
    return VectorDbClient(
        endpoint=vectordb.endpoint,
        api_key=vectordb.api_key,
        account=vectordb.account,
        database=vectordb.database,
        http_client=http_client
        or HttpClient(HttpClientConfig(timeout_seconds=vectordb.request_timeout_seconds)),
    )
