"""Structured logging for REST calls and pagination.

This module provides telemetry hooks for the transport and the paginating
iterator, emitting structured logs with a stable event name and the context
in ``extra``. The library never installs handlers; applications decide where
these records go.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_request_sent(*, method: str, url: str) -> None:
    """Log an outbound request."""
    logger.debug("request_sent", extra={"method": method, "url": url})


def log_request_failed(
    *,
    method: str,
    url: str,
    status: int | None = None,
    error_type: str | None = None,
    error_message: str | None = None,
) -> None:
    """Log a request that produced no usable response.

    Args:
        method: HTTP verb
        url: Fully built request URL
        status: HTTP status when a response was received
        error_type: Exception class name for transport-level failures
        error_message: Exception message or decode error details
    """
    logger.error(
        "request_failed",
        extra={
            "method": method,
            "url": url,
            "status": status,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_decode_failed(*, endpoint: str, model: str, error_message: str) -> None:
    """Log a response body that did not match the expected model."""
    logger.error(
        "decode_failed",
        extra={"endpoint": endpoint, "model": model, "error_message": error_message},
    )


def log_encode_failed(*, endpoint: str, error_message: str) -> None:
    """Log a request payload that has no JSON form; nothing was sent."""
    logger.error(
        "encode_failed",
        extra={"endpoint": endpoint, "error_message": error_message},
    )


def log_page_fetched(*, endpoint: str, offset: int | None, items: int, total_items: int) -> None:
    """Log a page appended to an iterator's buffer."""
    logger.debug(
        "page_fetched",
        extra={
            "endpoint": endpoint,
            "offset": offset,
            "items": items,
            "total_items": total_items,
        },
    )


def log_page_fetch_failed(*, endpoint: str, offset: int | None, error_message: str) -> None:
    """Log a background page fetch that was swallowed by the iterator."""
    logger.warning(
        "page_fetch_failed",
        extra={"endpoint": endpoint, "offset": offset, "error_message": error_message},
    )


def log_listing_failed(*, endpoint: str, error_message: str) -> None:
    """Log a failed initial listing call; the iterator starts empty."""
    logger.warning(
        "listing_failed",
        extra={"endpoint": endpoint, "error_message": error_message},
    )
