"""Async client for the Pinecone vector database."""

from pinecone_client.client import PineconeClient
from pinecone_client.config import Settings, get_settings
from pinecone_client.core.exceptions import (
    IndexNotFoundError,
    InvalidParamsError,
    PineconeError,
    RequestFailedError,
)
from pinecone_client.schemas.indexes import (
    ConfigureIndexParams,
    CreateIndexParams,
    DescribeIndexResponse,
    IndexDatabase,
    IndexStatus,
    Metric,
    PodSize,
    PodType,
)
from pinecone_client.schemas.vectors import (
    DeleteVectorsParams,
    DescribeIndexStatsParams,
    DescribeIndexStatsResponse,
    FetchVectorsParams,
    FetchVectorsResponse,
    NamespaceSummary,
    QueryParams,
    QueryResponse,
    ScoredVector,
    SparseValues,
    UpdateVectorParams,
    UpsertVectorsParams,
    UpsertVectorsResponse,
    Vector,
)
from pinecone_client.services.index_service import IndexService
from pinecone_client.services.vector_service import VectorService

__all__ = [
    # Client
    "PineconeClient",
    "IndexService",
    "VectorService",
    # Config
    "Settings",
    "get_settings",
    # Errors
    "PineconeError",
    "InvalidParamsError",
    "IndexNotFoundError",
    "RequestFailedError",
    # Index models
    "ConfigureIndexParams",
    "CreateIndexParams",
    "DescribeIndexResponse",
    "IndexDatabase",
    "IndexStatus",
    "Metric",
    "PodSize",
    "PodType",
    # Vector models
    "DeleteVectorsParams",
    "DescribeIndexStatsParams",
    "DescribeIndexStatsResponse",
    "FetchVectorsParams",
    "FetchVectorsResponse",
    "NamespaceSummary",
    "QueryParams",
    "QueryResponse",
    "ScoredVector",
    "SparseValues",
    "UpdateVectorParams",
    "UpsertVectorsParams",
    "UpsertVectorsResponse",
    "Vector",
]
