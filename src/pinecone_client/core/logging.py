"""Logging configuration."""

import logging
import sys

import httpx


def setup_logging(level: str | None = None) -> None:
    """Configure client logging.

    Args:
        level: Log level name. Defaults to the configured ``log_level`` setting.
    """
    if level is None:
        from pinecone_client.config import get_settings

        level = get_settings().log_level

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__ of the module).

    Returns:
        logging.Logger: Configured logger instance.
    """
    return logging.getLogger(name)


_http_logger = get_logger("pinecone_client.http")


async def log_request(request: httpx.Request) -> None:
    """httpx event hook dumping outgoing requests at DEBUG."""
    _http_logger.debug("> %s %s", request.method, request.url)
    for name, value in request.headers.items():
        if name.lower() == "api-key":
            value = "***"
        _http_logger.debug("> %s: %s", name, value)
    if request.content:
        _http_logger.debug("> %s", request.content.decode("utf-8", errors="replace"))


async def log_response(response: httpx.Response) -> None:
    """httpx event hook dumping response status lines at DEBUG."""
    request = response.request
    _http_logger.debug(
        "< %s %s %s %s",
        request.method,
        request.url,
        response.status_code,
        response.reason_phrase,
    )
    for name, value in response.headers.items():
        _http_logger.debug("< %s: %s", name, value)


def debug_event_hooks() -> dict[str, list]:
    """Event hooks for an ``httpx.AsyncClient`` running in debug mode."""
    return {"request": [log_request], "response": [log_response]}
