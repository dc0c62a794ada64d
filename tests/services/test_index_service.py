"""Tests for the control-plane index service."""

from __future__ import annotations

import pytest

from pinecone_client.config import Settings
from pinecone_client.core.exceptions import (
    IndexNotFoundError,
    InvalidParamsError,
    RequestFailedError,
)
from pinecone_client.schemas.indexes import (
    ConfigureIndexParams,
    CreateIndexParams,
    Metric,
    PodType,
)
from pinecone_client.services.index_service import IndexService
from tests.fakes import RecordingTransport

pytestmark = pytest.mark.asyncio

_DESCRIBE_BODY = {
    "database": {
        "name": "movies",
        "metric": "cosine",
        "dimension": 8,
        "replicas": 1,
        "shards": 1,
        "pods": 1,
        "pod_type": "p1.x1",
    },
    "status": {
        "waiting": [],
        "crashed": [],
        "host": "movies-abc123.svc.us-west1-gcp.pinecone.io",
        "port": 433,
        "state": "Ready",
        "ready": True,
    },
}


@pytest.fixture
def service(test_settings: Settings, transport: RecordingTransport) -> IndexService:
    return IndexService(test_settings, transport)


async def test_list_indexes(service: IndexService, transport: RecordingTransport) -> None:
    transport.respond(200, ["movies", "books"])

    names = await service.list_indexes()

    assert names == ["movies", "books"]
    assert (transport.last.method, transport.last.path) == ("GET", "/databases")


async def test_list_indexes_failure(service: IndexService, transport: RecordingTransport) -> None:
    transport.respond(401, "API key is missing or invalid")

    with pytest.raises(RequestFailedError) as exc_info:
        await service.list_indexes()

    assert exc_info.value.status_code == 401
    assert exc_info.value.body == "API key is missing or invalid"


async def test_create_index_sends_composite_pod_type(
    service: IndexService, transport: RecordingTransport
) -> None:
    transport.respond(201, "")

    await service.create_index(
        CreateIndexParams(
            name="movies",
            dimension=8,
            metric=Metric.DOTPRODUCT,
            pod_type=PodType.P1,
            pod_size="2",
        ),
        timeout=5.0,
    )

    request = transport.last
    assert (request.method, request.path) == ("POST", "/databases")
    assert request.json == {
        "name": "movies",
        "dimension": 8,
        "metric": "dotproduct",
        "pod_type": "p1.2",
    }
    assert request.timeout == 5.0


async def test_create_index_invalid_params_never_sends(
    service: IndexService, transport: RecordingTransport
) -> None:
    with pytest.raises(InvalidParamsError, match="pod_size is required"):
        await service.create_index(CreateIndexParams(name="movies", dimension=8, pod_type="p1"))

    assert transport.call_count == 0


async def test_describe_index(service: IndexService, transport: RecordingTransport) -> None:
    transport.respond(200, _DESCRIBE_BODY)

    description = await service.describe_index("movies")

    assert transport.last.path == "/databases/movies"
    assert description.database.name == "movies"
    assert description.database.pod_type == "p1.x1"
    assert description.status.ready is True
    assert description.status.state == "Ready"


async def test_describe_nonexistent_index_is_not_found(
    service: IndexService, transport: RecordingTransport
) -> None:
    transport.respond(404, "")

    with pytest.raises(IndexNotFoundError):
        await service.describe_index("does-not-exist")


async def test_describe_index_other_failure(
    service: IndexService, transport: RecordingTransport
) -> None:
    transport.respond(500, "internal error")

    with pytest.raises(RequestFailedError) as exc_info:
        await service.describe_index("movies")

    assert not isinstance(exc_info.value, IndexNotFoundError)
    assert exc_info.value.status_code == 500


async def test_describe_index_empty_success_body(
    service: IndexService, transport: RecordingTransport
) -> None:
    transport.respond(200, "")

    with pytest.raises(RequestFailedError) as exc_info:
        await service.describe_index("movies")

    assert exc_info.value.status_code == 200
    assert exc_info.value.body == ""


async def test_describe_index_requires_name(
    service: IndexService, transport: RecordingTransport
) -> None:
    with pytest.raises(InvalidParamsError):
        await service.describe_index("")
    assert transport.call_count == 0


async def test_index_name_is_escaped_in_path(
    service: IndexService, transport: RecordingTransport
) -> None:
    transport.respond(202, "")

    await service.delete_index("odd/name")

    assert transport.last.path == "/databases/odd%2Fname"


async def test_delete_index(service: IndexService, transport: RecordingTransport) -> None:
    transport.respond(202, "")

    await service.delete_index("movies")

    assert (transport.last.method, transport.last.path) == ("DELETE", "/databases/movies")
    assert transport.last.json is None


async def test_delete_missing_index_is_not_found(
    service: IndexService, transport: RecordingTransport
) -> None:
    transport.respond(404, "")

    with pytest.raises(IndexNotFoundError):
        await service.delete_index("movies")


async def test_configure_index_sends_body(
    service: IndexService, transport: RecordingTransport
) -> None:
    transport.respond(202, "")

    await service.configure_index(
        ConfigureIndexParams(index_name="movies", replicas=2, pod_type="p1", pod_size="x2")
    )

    request = transport.last
    assert (request.method, request.path) == ("PATCH", "/databases/movies")
    assert request.json == {"replicas": 2, "pod_type": "p1.x2"}


async def test_configure_missing_index_is_not_found(
    service: IndexService, transport: RecordingTransport
) -> None:
    transport.respond(404, "")

    with pytest.raises(IndexNotFoundError):
        await service.configure_index(ConfigureIndexParams(index_name="movies", replicas=2))


async def test_aclose_releases_transport(
    service: IndexService, transport: RecordingTransport
) -> None:
    async with service:
        pass
    assert transport.closed
