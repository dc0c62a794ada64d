"""Transport interface shared by the HTTP and gRPC backends."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """A fully read response: status code plus raw body bytes."""

    status_code: int
    content: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Decode the body as JSON, returning None for an empty body."""
        if not self.content:
            return None
        return json.loads(self.content)


@runtime_checkable
class Transport(Protocol):
    """Sends one request and returns the fully read response.

    Implementations raise their own low-level errors (connection, TLS, DNS,
    deadline) unchanged; any response the service actually produced is
    returned, whatever its status.
    """

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: str | None = None,
        json: Mapping[str, Any] | None = None,
        timeout: float | None = None,
    ) -> TransportResponse: ...

    async def aclose(self) -> None: ...
