"""Request parameter validation.

Each validator checks one operation's parameters and raises
``InvalidParamsError`` naming the first violated rule. Validators never touch
the network and never mutate their input.
"""

from __future__ import annotations

from pinecone_client.core.constants import MAX_INDEX_NAME_LENGTH, MAX_UINT32
from pinecone_client.core.exceptions import InvalidParamsError
from pinecone_client.schemas.indexes import ConfigureIndexParams, CreateIndexParams
from pinecone_client.schemas.vectors import (
    DeleteVectorsParams,
    FetchVectorsParams,
    QueryParams,
    SparseValues,
    UpdateVectorParams,
    UpsertVectorsParams,
)


def validate_index_name(index_name: str) -> None:
    if not index_name:
        raise InvalidParamsError("index name is required")


def validate_create_index_params(params: CreateIndexParams) -> None:
    if not params.name:
        raise InvalidParamsError("name is required")
    if len(params.name) > MAX_INDEX_NAME_LENGTH:
        raise InvalidParamsError(f"name must be at most {MAX_INDEX_NAME_LENGTH} characters")
    if params.dimension <= 0:
        raise InvalidParamsError("dimension is required and must be greater than 0")
    if params.pods is not None and params.pods < 1:
        raise InvalidParamsError("pods must be greater than 0")
    _check_replicas(params.replicas)
    _check_pod_pair(params.pod_type, params.pod_size)


def validate_configure_index_params(params: ConfigureIndexParams) -> None:
    validate_index_name(params.index_name)
    if params.replicas is None and params.pod_type is None and params.pod_size is None:
        raise InvalidParamsError("at least one of replicas, pod_type or pod_size is required")
    _check_replicas(params.replicas)
    _check_pod_pair(params.pod_type, params.pod_size)


def validate_query_params(params: QueryParams) -> None:
    if not params.namespace:
        raise InvalidParamsError("namespace is required")
    if params.top_k < 1:
        raise InvalidParamsError("top k is required and must be greater than 0")
    if params.top_k > MAX_UINT32:
        raise InvalidParamsError(f"top k must be at most {MAX_UINT32}")

    has_vector = bool(params.vector)
    has_id = bool(params.id)
    if not has_vector and not has_id:
        raise InvalidParamsError("vector or id is required")
    if has_vector and has_id:
        raise InvalidParamsError("cannot specify both vector and id")

    _check_sparse_values(params.sparse_vector)


def validate_delete_vectors_params(params: DeleteVectorsParams) -> None:
    if not params.ids and not params.delete_all:
        raise InvalidParamsError("ids or delete_all is required")
    if params.ids and params.delete_all:
        raise InvalidParamsError("cannot specify both ids and delete_all")


def validate_fetch_vectors_params(params: FetchVectorsParams) -> None:
    if not params.namespace:
        raise InvalidParamsError("namespace is required")
    if not params.ids:
        raise InvalidParamsError("ids are required")


def validate_update_vector_params(params: UpdateVectorParams) -> None:
    if not params.id:
        raise InvalidParamsError("id is required")
    if not params.namespace:
        raise InvalidParamsError("namespace is required")

    has_sparse = params.sparse_values is not None and bool(params.sparse_values.indices)
    if not params.values and not has_sparse:
        raise InvalidParamsError("values or sparse_values is required")

    _check_sparse_values(params.sparse_values)


def validate_upsert_vectors_params(params: UpsertVectorsParams) -> None:
    if not params.vectors:
        raise InvalidParamsError("vectors are required")
    if not params.namespace:
        raise InvalidParamsError("namespace is required")

    for position, vector in enumerate(params.vectors):
        if not vector.id:
            raise InvalidParamsError(f"vector at position {position} has no id")
        _check_sparse_values(vector.sparse_values)


def _check_replicas(replicas: int | None) -> None:
    if replicas is not None and replicas < 0:
        raise InvalidParamsError("replicas must not be negative")


def _check_pod_pair(pod_type: object | None, pod_size: object | None) -> None:
    if pod_size is not None and pod_type is None:
        raise InvalidParamsError("pod_type is required when pod_size is specified")
    if pod_type is not None and pod_size is None:
        raise InvalidParamsError("pod_size is required when pod_type is specified")


def _check_sparse_values(sparse: SparseValues | None) -> None:
    if sparse is None:
        return
    if len(sparse.indices) != len(sparse.values):
        raise InvalidParamsError("sparse vector values and indices must be the same length")
    if any(index < 0 or index > MAX_UINT32 for index in sparse.indices):
        raise InvalidParamsError(f"sparse vector indices must be between 0 and {MAX_UINT32}")
