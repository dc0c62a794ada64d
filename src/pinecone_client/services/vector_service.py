"""Data-plane service for vector operations on a single index."""

from __future__ import annotations

from pinecone_client.adapters import payloads
from pinecone_client.core.constants import (
    DELETE_PATH,
    DESCRIBE_INDEX_STATS_PATH,
    FETCH_PATH,
    QUERY_PATH,
    UPDATE_PATH,
    UPSERT_PATH,
)
from pinecone_client.core.exceptions import raise_for_response
from pinecone_client.core.logging import get_logger
from pinecone_client.core.validators import (
    validate_delete_vectors_params,
    validate_fetch_vectors_params,
    validate_query_params,
    validate_update_vector_params,
    validate_upsert_vectors_params,
)
from pinecone_client.schemas.vectors import (
    DeleteVectorsParams,
    DescribeIndexStatsParams,
    DescribeIndexStatsResponse,
    FetchVectorsParams,
    FetchVectorsResponse,
    QueryParams,
    QueryResponse,
    UpdateVectorParams,
    UpsertVectorsParams,
    UpsertVectorsResponse,
)
from pinecone_client.transport.base import Transport

logger = get_logger(__name__)


class VectorService:
    """Vector operations against one index, over any ``Transport``.

    The service owns its transport; close it with ``aclose()`` or use it as an
    async context manager so a gRPC channel is not leaked.
    """

    def __init__(self, transport: Transport, index_name: str | None = None):
        self.transport = transport
        self.index_name = index_name

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> VectorService:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def upsert_vectors(
        self,
        params: UpsertVectorsParams,
        *,
        timeout: float | None = None,
    ) -> UpsertVectorsResponse:
        """Insert or overwrite vectors in a namespace.

        Raises:
            InvalidParamsError: No vectors, no namespace, or malformed sparse values.
            RequestFailedError: The service rejected the request.
        """
        validate_upsert_vectors_params(params)
        body = payloads.upsert_body(params)

        response = await self.transport.request("POST", UPSERT_PATH, json=body, timeout=timeout)
        raise_for_response(response)

        result = UpsertVectorsResponse.model_validate(response.json() or {})
        logger.debug(
            "Upserted %d vectors into namespace '%s'", result.upserted_count, params.namespace
        )
        return result

    async def query(
        self,
        params: QueryParams,
        *,
        timeout: float | None = None,
    ) -> QueryResponse:
        """Return the ``top_k`` nearest vectors to a dense vector or a stored id.

        Raises:
            InvalidParamsError: Missing namespace/top_k, both or neither anchor set,
                or malformed sparse vector.
            RequestFailedError: The service rejected the request.
        """
        validate_query_params(params)
        body = payloads.query_body(params)

        response = await self.transport.request("POST", QUERY_PATH, json=body, timeout=timeout)
        raise_for_response(response)
        return QueryResponse.model_validate(response.json() or {})

    async def fetch_vectors(
        self,
        params: FetchVectorsParams,
        *,
        timeout: float | None = None,
    ) -> FetchVectorsResponse:
        """Fetch vectors by id."""
        validate_fetch_vectors_params(params)
        query = payloads.build_fetch_query(params)

        response = await self.transport.request(
            "GET", FETCH_PATH, params=query, timeout=timeout
        )
        raise_for_response(response)
        return FetchVectorsResponse.model_validate(response.json() or {})

    async def update_vector(
        self,
        params: UpdateVectorParams,
        *,
        timeout: float | None = None,
    ) -> None:
        """Update the values and/or metadata of one vector."""
        validate_update_vector_params(params)
        body = payloads.update_body(params)

        response = await self.transport.request("POST", UPDATE_PATH, json=body, timeout=timeout)
        raise_for_response(response)

    async def delete_vectors(
        self,
        params: DeleteVectorsParams,
        *,
        timeout: float | None = None,
    ) -> None:
        """Delete vectors by id, or every vector in the namespace."""
        validate_delete_vectors_params(params)
        body = payloads.delete_body(params)

        response = await self.transport.request("POST", DELETE_PATH, json=body, timeout=timeout)
        raise_for_response(response)
        if params.delete_all:
            logger.info("Deleted all vectors in namespace '%s'", params.namespace)

    async def describe_index_stats(
        self,
        params: DescribeIndexStatsParams | None = None,
        *,
        timeout: float | None = None,
    ) -> DescribeIndexStatsResponse:
        """Return per-namespace vector counts and index fullness."""
        body = payloads.describe_index_stats_body(params)

        response = await self.transport.request(
            "POST", DESCRIBE_INDEX_STATS_PATH, json=body, timeout=timeout
        )
        raise_for_response(response)
        return DescribeIndexStatsResponse.model_validate(response.json() or {})
