"""Tests for the data-plane vector service."""

from __future__ import annotations

from urllib.parse import parse_qsl

import pytest

from pinecone_client.core.exceptions import (
    IndexNotFoundError,
    InvalidParamsError,
    RequestFailedError,
)
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
from pinecone_client.services.vector_service import VectorService
from tests.fakes import RecordingTransport

pytestmark = pytest.mark.asyncio


@pytest.fixture
def service(transport: RecordingTransport) -> VectorService:
    return VectorService(transport, index_name="movies")


async def test_upsert_vectors(service: VectorService, transport: RecordingTransport) -> None:
    transport.respond(200, {"upsertedCount": 2})

    result = await service.upsert_vectors(
        UpsertVectorsParams(
            namespace="films",
            vectors=[
                Vector(id="a", values=[0.1, 0.2], metadata={"genre": "drama"}),
                Vector(id="b", values=[0.3, 0.4]),
            ],
        )
    )

    assert result.upserted_count == 2
    request = transport.last
    assert (request.method, request.path) == ("POST", "/vectors/upsert")
    assert request.json == {
        "vectors": [
            {"id": "a", "values": [0.1, 0.2], "metadata": {"genre": "drama"}},
            {"id": "b", "values": [0.3, 0.4]},
        ],
        "namespace": "films",
    }


async def test_upsert_empty_vector_set_makes_no_network_call(
    service: VectorService, transport: RecordingTransport
) -> None:
    with pytest.raises(InvalidParamsError, match="vectors are required"):
        await service.upsert_vectors(UpsertVectorsParams(vectors=[], namespace="films"))

    assert transport.call_count == 0


async def test_upsert_failure_is_request_failed(
    service: VectorService, transport: RecordingTransport
) -> None:
    transport.respond(400, "Vector dimension 2 does not match the dimension of the index 8")

    with pytest.raises(RequestFailedError) as exc_info:
        await service.upsert_vectors(
            UpsertVectorsParams(vectors=[Vector(id="a", values=[0.1, 0.2])], namespace="films")
        )

    assert exc_info.value.status_code == 400
    assert "does not match" in exc_info.value.body


async def test_query_by_vector(service: VectorService, transport: RecordingTransport) -> None:
    transport.respond(
        200,
        {
            "matches": [
                {"id": "a", "score": 0.98, "values": [], "metadata": {"genre": "drama"}},
                {
                    "id": "b",
                    "score": 0.5,
                    "sparseValues": {"indices": [1], "values": [0.2]},
                },
            ],
            "namespace": "films",
        },
    )

    result = await service.query(
        QueryParams(namespace="films", top_k=2, vector=[0.1, 0.2], include_metadata=True),
        timeout=2.5,
    )

    assert [match.id for match in result.matches] == ["a", "b"]
    assert result.matches[0].metadata == {"genre": "drama"}
    assert result.matches[1].sparse_values == SparseValues(indices=[1], values=[0.2])
    assert result.namespace == "films"

    request = transport.last
    assert (request.method, request.path) == ("POST", "/query")
    assert request.json is not None
    assert request.json["topK"] == 2
    assert request.json["vector"] == [0.1, 0.2]
    assert "id" not in request.json
    assert request.timeout == 2.5


async def test_query_by_id(service: VectorService, transport: RecordingTransport) -> None:
    transport.respond(200, {"matches": [], "namespace": "films"})

    result = await service.query(QueryParams(namespace="films", top_k=1, id="a"))

    assert result.matches == []
    assert transport.last.json is not None
    assert transport.last.json["id"] == "a"
    assert "vector" not in transport.last.json


@pytest.mark.parametrize(
    ("vector", "vector_id"),
    [(None, None), ([0.1], "a")],
)
async def test_query_anchor_rules_are_local(
    service: VectorService,
    transport: RecordingTransport,
    vector: list[float] | None,
    vector_id: str | None,
) -> None:
    with pytest.raises(InvalidParamsError):
        await service.query(QueryParams(namespace="films", top_k=1, vector=vector, id=vector_id))

    assert transport.call_count == 0


async def test_fetch_vectors(service: VectorService, transport: RecordingTransport) -> None:
    transport.respond(
        200,
        {
            "vectors": {
                "1": {"id": "1", "values": [0.1, 0.2]},
                "3": {"id": "3", "values": [0.5, 0.6], "metadata": {"year": 1999}},
            },
            "namespace": "foo",
        },
    )

    result = await service.fetch_vectors(FetchVectorsParams(ids=["1", "2", "3"], namespace="foo"))

    request = transport.last
    assert (request.method, request.path) == ("GET", "/vectors/fetch")
    assert request.json is None
    assert request.params == "ids=1&ids=2&ids=3&namespace=foo"
    assert parse_qsl(request.params) == [
        ("ids", "1"),
        ("ids", "2"),
        ("ids", "3"),
        ("namespace", "foo"),
    ]

    assert set(result.vectors) == {"1", "3"}
    assert result.vectors["3"].metadata == {"year": 1999}
    assert result.namespace == "foo"


async def test_fetch_requires_ids(service: VectorService, transport: RecordingTransport) -> None:
    with pytest.raises(InvalidParamsError, match="ids are required"):
        await service.fetch_vectors(FetchVectorsParams(ids=[], namespace="foo"))
    assert transport.call_count == 0


async def test_update_vector(service: VectorService, transport: RecordingTransport) -> None:
    transport.respond(200, {})

    await service.update_vector(
        UpdateVectorParams(
            id="a",
            namespace="films",
            sparse_values=SparseValues(indices=[4], values=[0.4]),
            set_metadata={"genre": "comedy"},
        )
    )

    request = transport.last
    assert (request.method, request.path) == ("POST", "/vectors/update")
    assert request.json == {
        "id": "a",
        "sparseValues": {"indices": [4], "values": [0.4]},
        "setMetadata": {"genre": "comedy"},
        "namespace": "films",
    }


async def test_update_rejects_mismatched_sparse_values(
    service: VectorService, transport: RecordingTransport
) -> None:
    with pytest.raises(InvalidParamsError, match="same length"):
        await service.update_vector(
            UpdateVectorParams(
                id="a",
                namespace="films",
                values=[0.1],
                sparse_values=SparseValues(indices=[1, 2], values=[0.4]),
            )
        )
    assert transport.call_count == 0


async def test_delete_by_ids(service: VectorService, transport: RecordingTransport) -> None:
    transport.respond(200, {})

    await service.delete_vectors(DeleteVectorsParams(ids=["a", "b"], namespace="films"))

    assert transport.last.path == "/vectors/delete"
    assert transport.last.json == {"ids": ["a", "b"], "namespace": "films"}


async def test_delete_all(service: VectorService, transport: RecordingTransport) -> None:
    transport.respond(200, {})

    await service.delete_vectors(DeleteVectorsParams(delete_all=True, namespace="films"))

    assert transport.last.json == {"deleteAll": True, "namespace": "films"}


async def test_delete_requires_one_selector(
    service: VectorService, transport: RecordingTransport
) -> None:
    with pytest.raises(InvalidParamsError, match="ids or delete_all is required"):
        await service.delete_vectors(DeleteVectorsParams(namespace="films"))
    with pytest.raises(InvalidParamsError, match="cannot specify both"):
        await service.delete_vectors(DeleteVectorsParams(ids=["a"], delete_all=True))
    assert transport.call_count == 0


async def test_describe_index_stats(service: VectorService, transport: RecordingTransport) -> None:
    transport.respond(
        200,
        {
            "namespaces": {"": {"vectorCount": 3}, "films": {"vectorCount": 10}},
            "dimension": 8,
            "indexFullness": 0.01,
            "totalVectorCount": 13,
        },
    )

    stats = await service.describe_index_stats(DescribeIndexStatsParams(filter={"genre": "drama"}))

    assert transport.last.path == "/describe_index_stats"
    assert transport.last.json == {"filter": {"genre": "drama"}}
    assert stats.dimension == 8
    assert stats.total_vector_count == 13
    assert stats.index_fullness == pytest.approx(0.01)
    assert stats.namespaces["films"].vector_count == 10


async def test_data_plane_404_is_request_failed(
    service: VectorService, transport: RecordingTransport
) -> None:
    transport.respond(404, "not found")

    with pytest.raises(RequestFailedError) as exc_info:
        await service.describe_index_stats()

    assert not isinstance(exc_info.value, IndexNotFoundError)


async def test_service_closes_its_transport(
    service: VectorService, transport: RecordingTransport
) -> None:
    async with service:
        pass
    assert transport.closed
