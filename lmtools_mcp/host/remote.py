"""Capability provider that reaches the host's tools through an HTTP bridge."""

import logging
from typing import Any

import httpx

from lmtools_mcp.host.provider import (
    CancellationToken,
    ToolInformation,
    ToolInvocationError,
    ToolInvocationOptions,
)
from lmtools_mcp.utils.http import create_http_client, http_retry

logger = logging.getLogger(__name__)


class RemoteToolProvider:
    """
    Client for a host bridge exposing the host's tool registry.

    The bridge is expected to serve:
        GET  /tools               -> [{"name", "description", "inputSchema"}, ...]
        POST /tools/{name}/invoke -> raw tool result
    """

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self._client = client or create_http_client(base_url=base_url)

    @http_retry
    async def _fetch_tools(self) -> Any:
        response = await self._client.get("/tools")
        response.raise_for_status()
        return response.json()

    async def list_tools(self) -> list[ToolInformation]:
        data = await self._fetch_tools()
        if isinstance(data, dict):
            data = data.get("tools", [])
        return [ToolInformation(**item) for item in data]

    async def invoke_tool(
        self,
        name: str,
        options: ToolInvocationOptions,
        token: CancellationToken,
    ) -> Any:
        # No timeout: tool executions last as long as the host needs.
        response = await self._client.post(
            f"/tools/{name}/invoke",
            json={
                "input": options.input,
                "toolInvocationToken": options.tool_invocation_token,
            },
            timeout=None,
        )
        if response.is_error:
            raise ToolInvocationError(
                name,
                f"Host bridge returned {response.status_code}: {response.text}",
            )
        return response.json()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
        logger.debug("Closed host bridge client")
