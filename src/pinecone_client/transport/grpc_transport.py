"""gRPC transport for the index data plane."""

from __future__ import annotations

import json as jsonlib
from collections.abc import Mapping
from typing import Any, Final
from urllib.parse import parse_qs

import grpc
import grpc.aio
from google.protobuf import json_format

from pinecone_client.config import Settings
from pinecone_client.core.constants import (
    DELETE_PATH,
    DESCRIBE_INDEX_STATS_PATH,
    FETCH_PATH,
    GRPC_API_KEY_METADATA,
    K_IDS,
    K_NAMESPACE,
    QUERY_PATH,
    UPDATE_PATH,
    UPSERT_PATH,
)
from pinecone_client.core.logging import get_logger
from pinecone_client.transport.base import TransportResponse
from pinecone_client.transport.protos import RPCS, Rpc

logger = get_logger(__name__)
_grpc_logger = get_logger("pinecone_client.grpc")

_ROUTES: Final[dict[tuple[str, str], str]] = {
    ("POST", UPSERT_PATH): "Upsert",
    ("POST", QUERY_PATH): "Query",
    ("GET", FETCH_PATH): "Fetch",
    ("POST", UPDATE_PATH): "Update",
    ("POST", DELETE_PATH): "Delete",
    ("POST", DESCRIBE_INDEX_STATS_PATH): "DescribeIndexStats",
}

# Codes raised by the channel itself rather than answered by the service.
CONNECTION_STATUS_CODES: Final[frozenset[grpc.StatusCode]] = frozenset(
    {
        grpc.StatusCode.UNAVAILABLE,
        grpc.StatusCode.DEADLINE_EXCEEDED,
        grpc.StatusCode.CANCELLED,
    }
)

_HTTP_STATUS: Final[dict[grpc.StatusCode, int]] = {
    grpc.StatusCode.INVALID_ARGUMENT: 400,
    grpc.StatusCode.FAILED_PRECONDITION: 400,
    grpc.StatusCode.OUT_OF_RANGE: 400,
    grpc.StatusCode.UNAUTHENTICATED: 401,
    grpc.StatusCode.PERMISSION_DENIED: 403,
    grpc.StatusCode.NOT_FOUND: 404,
    grpc.StatusCode.ALREADY_EXISTS: 409,
    grpc.StatusCode.ABORTED: 409,
    grpc.StatusCode.RESOURCE_EXHAUSTED: 429,
    grpc.StatusCode.UNIMPLEMENTED: 501,
}


def http_status_for(code: grpc.StatusCode) -> int:
    """Map a gRPC status answered by the service onto an HTTP status code."""
    return _HTTP_STATUS.get(code, 500)


class GrpcTransport:
    """Async gRPC transport owning a single channel to one index.

    Close it with ``aclose()`` (or use it as an async context manager) to
    release the channel.
    """

    def __init__(
        self,
        settings: Settings,
        index_name: str,
        channel: grpc.aio.Channel | None = None,
    ):
        """Initialize the transport.

        Args:
            settings: Client settings (API key, environment, project name).
            index_name: Index served by the channel.
            channel: Optional preconfigured channel (primarily for tests).
        """
        self.settings = settings
        self.target = settings.index_grpc_target(index_name)
        self._channel = channel or grpc.aio.secure_channel(
            self.target,
            grpc.ssl_channel_credentials(),
        )
        self._metadata: tuple[tuple[str, str], ...] = (
            ((GRPC_API_KEY_METADATA, settings.pinecone_api_key),)
            if settings.pinecone_api_key is not None
            else ()
        )
        self._calls: dict[str, grpc.aio.UnaryUnaryMultiCallable] = {}

        logger.debug("GrpcTransport initialized for '%s'", self.target)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: str | None = None,
        json: Mapping[str, Any] | None = None,
        timeout: float | None = None,
    ) -> TransportResponse:
        """Invoke the RPC routed from ``(method, path)`` and return its JSON form."""
        rpc = self._rpc_for(method, path)
        payload = dict(json) if json is not None else _payload_from_query(params)
        request = json_format.ParseDict(payload, rpc.request(), ignore_unknown_fields=True)
        if timeout is None:
            timeout = self.settings.pinecone_timeout
        if self.settings.debug:
            _grpc_logger.debug("> %s %s", rpc.path, jsonlib.dumps(payload))

        try:
            reply = await self._call(rpc)(request, metadata=self._metadata, timeout=timeout)
        except grpc.aio.AioRpcError as exc:
            if exc.code() in CONNECTION_STATUS_CODES:
                raise
            if self.settings.debug:
                _grpc_logger.debug("< %s %s", rpc.path, exc.code().name)
            logger.debug("%s answered %s: %s", rpc.path, exc.code().name, exc.details())
            return TransportResponse(
                status_code=http_status_for(exc.code()),
                content=(exc.details() or exc.code().name).encode("utf-8"),
            )

        body = json_format.MessageToDict(reply)
        if self.settings.debug:
            _grpc_logger.debug("< %s OK %s", rpc.path, jsonlib.dumps(body))
        return TransportResponse(status_code=200, content=jsonlib.dumps(body).encode("utf-8"))

    def _rpc_for(self, method: str, path: str) -> Rpc:
        try:
            return RPCS[_ROUTES[(method.upper(), path)]]
        except KeyError:
            raise ValueError(f"No VectorService method for {method} {path}") from None

    def _call(self, rpc: Rpc) -> grpc.aio.UnaryUnaryMultiCallable:
        call = self._calls.get(rpc.name)
        if call is None:
            call = self._channel.unary_unary(
                rpc.path,
                request_serializer=rpc.request.SerializeToString,
                response_deserializer=rpc.response.FromString,
            )
            self._calls[rpc.name] = call
        return call

    async def aclose(self) -> None:
        """Close the channel."""
        await self._channel.close()

    async def __aenter__(self) -> GrpcTransport:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def _payload_from_query(params: str | None) -> dict[str, Any]:
    if not params:
        return {}
    parsed = parse_qs(params, keep_blank_values=True)
    payload: dict[str, Any] = {K_IDS: parsed.get(K_IDS, [])}
    if K_NAMESPACE in parsed:
        payload[K_NAMESPACE] = parsed[K_NAMESPACE][-1]
    return payload
