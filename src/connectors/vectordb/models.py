"""Tipos do Tencent Cloud VectorDB."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from utils.errors import VendorApiError


@dataclass(frozen=True)
class VectorData:
    """Documento a gravar: id, vetor e campos escalares."""

    id: str
    vector: list[float]
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class WriteOptions:
    """Destino da escrita. Database vazio usa o padrão do cliente."""

    collection: str
    database: str = ""
    build_index: bool = True


@dataclass(frozen=True)
class SearchOptions:
    """Parâmetros de busca por similaridade."""

    collection: str
    database: str = ""
    top_k: int = 10
    filter: str = ""
    retrieve_vector: bool = False


@dataclass(frozen=True)
class SearchResult:
    """Documento encontrado."""

    id: str
    score: float
    vector: list[float] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


class VectorDbResponse(BaseModel):
    """Envelope comum das respostas ({code, msg, ...})."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    code: int = 0
    msg: str = ""
    affected_count: int = Field(default=0, alias="affectedCount")
    documents: list[list[dict[str, Any]]] = Field(default_factory=list)


class VectorDbApiError(VendorApiError):
    """Corpo com code != 0."""

    vendor = "vectordb"
