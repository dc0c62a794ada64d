"""Client exceptions and response classification."""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING

from pinecone_client.core.logging import get_logger

if TYPE_CHECKING:
    from pinecone_client.transport.base import TransportResponse

logger = get_logger(__name__)


class PineconeError(Exception):
    """Base client exception."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class InvalidParamsError(PineconeError):
    """Parameters failed local validation; no request was sent."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"invalid params: {reason}")


class IndexNotFoundError(PineconeError):
    """The named index does not exist."""

    def __init__(self, message: str = "index not found"):
        super().__init__(message, status_code=HTTPStatus.NOT_FOUND)


class RequestFailedError(PineconeError):
    """The service answered with a non-success status."""

    def __init__(self, body: str, status_code: int):
        self.body = body
        super().__init__(f"request failed: {body}, status code: {status_code}", status_code)


def raise_for_response(response: TransportResponse, *, not_found: bool = False) -> None:
    """Raise the matching client error for a non-success response.

    Classification uses the status code only; the body is carried along as
    diagnostic text.

    Args:
        response: Fully read transport response.
        not_found: Map a 404 to ``IndexNotFoundError`` instead of a generic failure.

    Raises:
        IndexNotFoundError: The index named by the request does not exist.
        RequestFailedError: Any other non-success status.
    """
    if response.is_success:
        return

    if not_found and response.status_code == HTTPStatus.NOT_FOUND:
        raise IndexNotFoundError()

    logger.warning("Request failed with status %d: %s", response.status_code, response.text)
    raise RequestFailedError(response.text, response.status_code)
