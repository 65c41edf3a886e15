"""HTTP client utilities for talking to a host bridge."""

import logging

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from lmtools_mcp.config.loader import get_settings

logger = logging.getLogger(__name__)


def create_http_client(
    base_url: str | None = None,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create an async HTTP client for the host bridge.

    Args:
        base_url: Base URL for all requests. Uses host_bridge_url from settings if None.
        timeout: Default request timeout in seconds. Uses host_bridge_timeout if None.
        transport: Optional transport override (used by tests).

    Returns:
        Configured httpx.AsyncClient instance.
    """
    settings = get_settings()

    if timeout is None:
        timeout = float(settings.host_bridge_timeout)

    logger.debug(f"Creating host bridge client for {base_url or settings.host_bridge_url}")
    return httpx.AsyncClient(
        base_url=base_url or settings.host_bridge_url,
        timeout=httpx.Timeout(timeout),
        transport=transport,
        headers={
            "User-Agent": f"{settings.server_name}/{settings.server_version}",
        },
    )


# Retry decorator for idempotent host bridge requests
http_retry = retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    retry=retry_if_exception_type((httpx.ConnectError, httpx.TimeoutException)),
    reraise=True,
)
