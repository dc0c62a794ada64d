"""Data-plane request and response schemas.

Response models accept the camelCase keys the service returns (``upsertedCount``,
``sparseValues``, ...) as well as the snake_case attribute names.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for data-plane models exchanged with the vector service."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SparseValues(WireModel):
    """Sparse vector as parallel index and value sequences."""

    indices: list[int] = Field(default_factory=list)
    values: list[float] = Field(default_factory=list)


class Vector(WireModel):
    """A vector record."""

    id: str
    values: list[float] = Field(default_factory=list)
    sparse_values: SparseValues | None = None
    metadata: dict[str, Any] | None = None


class UpsertVectorsParams(WireModel):
    vectors: list[Vector]
    namespace: str


class UpsertVectorsResponse(WireModel):
    upserted_count: int = 0


class QueryParams(WireModel):
    """Similarity query anchored on either a dense vector or a stored vector id."""

    namespace: str
    top_k: int
    vector: list[float] | None = None
    id: str | None = None
    sparse_vector: SparseValues | None = None
    filter: dict[str, Any] | None = None
    include_values: bool = False
    include_metadata: bool = False


class ScoredVector(WireModel):
    """A query match."""

    id: str
    score: float = 0.0
    values: list[float] = Field(default_factory=list)
    sparse_values: SparseValues | None = None
    metadata: dict[str, Any] | None = None


class QueryResponse(WireModel):
    matches: list[ScoredVector] = Field(default_factory=list)
    namespace: str = ""


class FetchVectorsParams(WireModel):
    ids: list[str]
    namespace: str


class FetchVectorsResponse(WireModel):
    vectors: dict[str, Vector] = Field(default_factory=dict)
    namespace: str = ""


class UpdateVectorParams(WireModel):
    """Partial update of a single vector."""

    id: str
    namespace: str
    values: list[float] | None = None
    sparse_values: SparseValues | None = None
    set_metadata: dict[str, Any] | None = None


class DeleteVectorsParams(WireModel):
    """Delete either an explicit id set or every vector in the namespace."""

    ids: list[str] = Field(default_factory=list)
    delete_all: bool = False
    namespace: str = ""


class DescribeIndexStatsParams(WireModel):
    filter: dict[str, Any] | None = None


class NamespaceSummary(WireModel):
    vector_count: int = 0


class DescribeIndexStatsResponse(WireModel):
    namespaces: dict[str, NamespaceSummary] = Field(default_factory=dict)
    dimension: int = 0
    index_fullness: float = 0.0
    total_vector_count: int = 0
