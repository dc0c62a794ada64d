"""Control-plane service for managing indexes."""

from __future__ import annotations

from urllib.parse import quote

from pinecone_client.adapters import payloads
from pinecone_client.config import Settings
from pinecone_client.core.constants import DATABASES_PATH
from pinecone_client.core.exceptions import RequestFailedError, raise_for_response
from pinecone_client.core.logging import get_logger
from pinecone_client.core.validators import (
    validate_configure_index_params,
    validate_create_index_params,
    validate_index_name,
)
from pinecone_client.schemas.indexes import (
    ConfigureIndexParams,
    CreateIndexParams,
    DescribeIndexResponse,
)
from pinecone_client.transport.base import Transport
from pinecone_client.transport.http_transport import HttpTransport

logger = get_logger(__name__)


class IndexService:
    """List, create, describe, delete and configure indexes."""

    def __init__(self, settings: Settings, transport: Transport | None = None):
        self.settings = settings
        self.transport = transport or HttpTransport(settings, settings.controller_url)

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> IndexService:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def list_indexes(self, *, timeout: float | None = None) -> list[str]:
        """Return the names of the project's indexes."""
        response = await self.transport.request("GET", DATABASES_PATH, timeout=timeout)
        raise_for_response(response)
        return list(response.json() or [])

    async def create_index(
        self,
        params: CreateIndexParams,
        *,
        timeout: float | None = None,
    ) -> None:
        """Create an index.

        Args:
            params: Index name, dimension and optional pod/metric configuration.
            timeout: Per-call timeout in seconds; defaults to the configured one.

        Raises:
            InvalidParamsError: The parameters failed validation.
            RequestFailedError: The service rejected the request.
        """
        validate_create_index_params(params)
        body = payloads.create_index_body(params)

        response = await self.transport.request(
            "POST", DATABASES_PATH, json=body, timeout=timeout
        )
        raise_for_response(response)
        logger.info("Created index '%s' (dimension=%d)", params.name, params.dimension)

    async def describe_index(
        self,
        index_name: str,
        *,
        timeout: float | None = None,
    ) -> DescribeIndexResponse:
        """Describe an index.

        Raises:
            InvalidParamsError: ``index_name`` is empty.
            IndexNotFoundError: No index with that name exists.
            RequestFailedError: Any other non-success response, or a success with an empty body.
        """
        validate_index_name(index_name)

        response = await self.transport.request(
            "GET", _index_path(index_name), timeout=timeout
        )
        raise_for_response(response, not_found=True)

        body = response.json()
        if not body:
            raise RequestFailedError(response.text, response.status_code)
        return DescribeIndexResponse.model_validate(body)

    async def delete_index(self, index_name: str, *, timeout: float | None = None) -> None:
        """Delete an index.

        Raises:
            InvalidParamsError: ``index_name`` is empty.
            IndexNotFoundError: No index with that name exists.
            RequestFailedError: Any other non-success response.
        """
        validate_index_name(index_name)

        response = await self.transport.request(
            "DELETE", _index_path(index_name), timeout=timeout
        )
        raise_for_response(response, not_found=True)
        logger.info("Deleted index '%s'", index_name)

    async def configure_index(
        self,
        params: ConfigureIndexParams,
        *,
        timeout: float | None = None,
    ) -> None:
        """Change the replica count and/or pod type of an index."""
        validate_configure_index_params(params)
        body = payloads.configure_index_body(params)

        response = await self.transport.request(
            "PATCH", _index_path(params.index_name), json=body, timeout=timeout
        )
        raise_for_response(response, not_found=True)
        logger.info("Configured index '%s': %s", params.index_name, body)


def _index_path(index_name: str) -> str:
    return f"{DATABASES_PATH}/{quote(index_name, safe='')}"
