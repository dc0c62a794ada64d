"""Helpers to translate validated parameters into wire payloads.

Control-plane bodies use the service's snake_case keys; data-plane bodies use
camelCase. Optional fields that are unset are left out of the body entirely.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from pinecone_client.core.constants import (
    K_DELETE_ALL,
    K_DIMENSION,
    K_FILTER,
    K_ID,
    K_IDS,
    K_INCLUDE_METADATA,
    K_INCLUDE_VALUES,
    K_INDICES,
    K_METADATA,
    K_METADATA_CONFIG,
    K_METRIC,
    K_NAME,
    K_NAMESPACE,
    K_POD_TYPE,
    K_PODS,
    K_REPLICAS,
    K_SET_METADATA,
    K_SOURCE_COLLECTION,
    K_SPARSE_VALUES,
    K_SPARSE_VECTOR,
    K_TOP_K,
    K_VALUES,
    K_VECTOR,
    K_VECTORS,
)
from pinecone_client.schemas.indexes import ConfigureIndexParams, CreateIndexParams
from pinecone_client.schemas.vectors import (
    DeleteVectorsParams,
    DescribeIndexStatsParams,
    FetchVectorsParams,
    QueryParams,
    SparseValues,
    UpdateVectorParams,
    UpsertVectorsParams,
    Vector,
)


def pod_type_token(pod_type: Enum | str | None, pod_size: Enum | str | None) -> str | None:
    """Combine a pod type and size into the ``"<type>.<size>"`` token.

    Returns None when neither is set. Callers validate co-presence first, so a
    half-specified pair here is a programming error.
    """
    if pod_type is None and pod_size is None:
        return None
    if pod_type is None or pod_size is None:
        raise ValueError("pod_type and pod_size must be combined together")
    return f"{_token(pod_type)}.{_token(pod_size)}"


def create_index_body(params: CreateIndexParams) -> dict[str, Any]:
    """Build the body for ``POST /databases``."""
    return _compact(
        {
            K_NAME: params.name,
            K_DIMENSION: params.dimension,
            K_METRIC: _token(params.metric) if params.metric is not None else None,
            K_PODS: params.pods,
            K_REPLICAS: params.replicas,
            K_POD_TYPE: pod_type_token(params.pod_type, params.pod_size),
            K_METADATA_CONFIG: params.metadata_config,
            K_SOURCE_COLLECTION: params.source_collection,
        }
    )


def configure_index_body(params: ConfigureIndexParams) -> dict[str, Any]:
    """Build the body for ``PATCH /databases/{name}``."""
    return _compact(
        {
            K_REPLICAS: params.replicas,
            K_POD_TYPE: pod_type_token(params.pod_type, params.pod_size),
        }
    )


def sparse_to_wire(sparse: SparseValues) -> dict[str, Any]:
    return {K_INDICES: list(sparse.indices), K_VALUES: list(sparse.values)}


def vector_to_wire(vector: Vector) -> dict[str, Any]:
    """Convert a vector record into its upsert representation."""
    return _compact(
        {
            K_ID: vector.id,
            K_VALUES: list(vector.values),
            K_SPARSE_VALUES: _sparse_or_none(vector.sparse_values),
            K_METADATA: vector.metadata,
        }
    )


def upsert_body(params: UpsertVectorsParams) -> dict[str, Any]:
    return {
        K_VECTORS: [vector_to_wire(vector) for vector in params.vectors],
        K_NAMESPACE: params.namespace,
    }


def query_body(params: QueryParams) -> dict[str, Any]:
    return _compact(
        {
            K_NAMESPACE: params.namespace,
            K_TOP_K: params.top_k,
            K_VECTOR: list(params.vector) if params.vector else None,
            K_ID: params.id or None,
            K_SPARSE_VECTOR: _sparse_or_none(params.sparse_vector),
            K_FILTER: params.filter,
            K_INCLUDE_VALUES: params.include_values,
            K_INCLUDE_METADATA: params.include_metadata,
        }
    )


def update_body(params: UpdateVectorParams) -> dict[str, Any]:
    return _compact(
        {
            K_ID: params.id,
            K_VALUES: list(params.values) if params.values else None,
            K_SPARSE_VALUES: _sparse_or_none(params.sparse_values),
            K_SET_METADATA: params.set_metadata,
            K_NAMESPACE: params.namespace,
        }
    )


def delete_body(params: DeleteVectorsParams) -> dict[str, Any]:
    return _compact(
        {
            K_IDS: list(params.ids) if params.ids else None,
            K_DELETE_ALL: True if params.delete_all else None,
            K_NAMESPACE: params.namespace or None,
        }
    )


def describe_index_stats_body(params: DescribeIndexStatsParams | None) -> dict[str, Any]:
    if params is None:
        return {}
    return _compact({K_FILTER: params.filter})


def build_fetch_query(params: FetchVectorsParams) -> str:
    """Build the percent-encoded query string for ``GET /vectors/fetch``.

    ``ids`` is repeated once per id, in caller order, followed by ``namespace``
    when one is given.
    """
    pairs: list[tuple[str, str]] = [(K_IDS, vector_id) for vector_id in params.ids]
    if params.namespace:
        pairs.append((K_NAMESPACE, params.namespace))
    return urlencode(pairs)


def _sparse_or_none(sparse: SparseValues | None) -> dict[str, Any] | None:
    if sparse is None:
        return None
    return sparse_to_wire(sparse)


def _compact(body: Mapping[str, Any]) -> dict[str, Any]:
    """Drop unset (None) fields so they are omitted rather than sent as null."""
    return {key: value for key, value in body.items() if value is not None}


def _token(value: Enum | str) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return value
