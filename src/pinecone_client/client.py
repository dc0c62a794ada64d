"""Entry point tying settings, transports and services together."""

from __future__ import annotations

from pinecone_client.config import Settings, get_settings
from pinecone_client.core.exceptions import InvalidParamsError
from pinecone_client.core.logging import get_logger
from pinecone_client.services.index_service import IndexService
from pinecone_client.services.vector_service import VectorService
from pinecone_client.transport.base import Transport
from pinecone_client.transport.grpc_transport import GrpcTransport
from pinecone_client.transport.http_transport import HttpTransport

logger = get_logger(__name__)


class PineconeClient:
    """Client for the index-management API plus per-index vector services.

    Example:
        async with PineconeClient(settings) as pc:
            await pc.indexes.create_index(CreateIndexParams(name="movies", dimension=8))
            async with pc.index("movies") as index:
                await index.upsert_vectors(...)
    """

    def __init__(self, settings: Settings | None = None, transport: Transport | None = None):
        """Initialize the client.

        Args:
            settings: Immutable client settings; read from the environment when omitted.
            transport: Optional control-plane transport (primarily for tests).
        """
        self.settings = settings or get_settings()
        self.indexes = IndexService(self.settings, transport)

        logger.info(
            "PineconeClient initialized for environment '%s'", self.settings.pinecone_environment
        )

    async def aclose(self) -> None:
        """Release the control-plane transport."""
        await self.indexes.aclose()

    async def __aenter__(self) -> PineconeClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def index(self, index_name: str | None = None, *, grpc: bool | None = None) -> VectorService:
        """Open a vector service for one index.

        The returned service owns a new transport (an HTTP client, or a gRPC
        channel when ``grpc`` is true) and must be closed by the caller.

        Args:
            index_name: Index to target; defaults to ``pinecone_index_name``.
            grpc: Use the gRPC transport; defaults to ``pinecone_prefer_grpc``.
        """
        name = index_name or self.settings.pinecone_index_name
        if not name:
            raise InvalidParamsError("index name is required")

        use_grpc = self.settings.pinecone_prefer_grpc if grpc is None else grpc
        transport: Transport
        if use_grpc:
            transport = GrpcTransport(self.settings, name)
        else:
            transport = HttpTransport(self.settings, self.settings.index_url(name))

        logger.debug("Opened %s vector service for index '%s'", "gRPC" if use_grpc else "HTTP", name)
        return VectorService(transport, index_name=name)
