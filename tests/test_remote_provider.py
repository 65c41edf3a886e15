"""Tests for the host bridge capability provider."""

import json

import httpx
import pytest

from lmtools_mcp.host.provider import (
    CancellationToken,
    ToolInvocationError,
    ToolInvocationOptions,
)
from lmtools_mcp.host.remote import RemoteToolProvider
from lmtools_mcp.mcp.invoker import Described, Executed, ToolInvoker
from lmtools_mcp.mcp.registry import ToolRegistryAdapter

BRIDGE_TOOLS = [
    {
        "name": "copilot_readFile",
        "description": "Read a file from the workspace",
        "inputSchema": {"type": "object", "properties": {"filePath": {"type": "string"}}},
    },
    {"name": "copilot_getErrors"},
]


def make_provider(handler) -> RemoteToolProvider:
    client = httpx.AsyncClient(
        base_url="http://bridge.test",
        transport=httpx.MockTransport(handler),
    )
    return RemoteToolProvider(client=client)


class TestRemoteToolProvider:
    """Tests for talking to the host bridge."""

    @pytest.mark.asyncio
    async def test_list_tools(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "GET"
            assert request.url.path == "/tools"
            return httpx.Response(200, json=BRIDGE_TOOLS)

        provider = make_provider(handler)
        tools = await provider.list_tools()

        assert [t.name for t in tools] == ["copilot_readFile", "copilot_getErrors"]
        assert tools[1].description is None
        assert tools[1].inputSchema is None
        await provider.aclose()

    @pytest.mark.asyncio
    async def test_list_tools_accepts_wrapped_list(self):
        provider = make_provider(lambda request: httpx.Response(200, json={"tools": BRIDGE_TOOLS}))
        assert len(await provider.list_tools()) == 2

    @pytest.mark.asyncio
    async def test_invoke_tool_posts_input(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "POST"
            assert request.url.path == "/tools/copilot_readFile/invoke"
            assert json.loads(request.content) == {
                "input": {"filePath": "README.md"},
                "toolInvocationToken": None,
            }
            return httpx.Response(200, json={"content": [{"value": "# Title"}]})

        provider = make_provider(handler)
        result = await provider.invoke_tool(
            "copilot_readFile",
            ToolInvocationOptions(input={"filePath": "README.md"}),
            CancellationToken(),
        )
        assert result == {"content": [{"value": "# Title"}]}

    @pytest.mark.asyncio
    async def test_invoke_error_status_raises(self):
        provider = make_provider(lambda request: httpx.Response(403, text="token required"))

        with pytest.raises(ToolInvocationError, match="403"):
            await provider.invoke_tool("copilot_readFile", ToolInvocationOptions(), CancellationToken())


class TestRemoteProviderWithDispatcherPieces:
    """Tests for the adapter and invoker on top of the bridge."""

    @pytest.mark.asyncio
    async def test_listing_failure_degrades(self):
        provider = make_provider(lambda request: httpx.Response(500))
        registry = ToolRegistryAdapter(provider)

        assert list(await registry.list_tools()) == []

    @pytest.mark.asyncio
    async def test_executed_and_described_outcomes(self):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "GET":
                return httpx.Response(200, json=BRIDGE_TOOLS)
            if request.url.path == "/tools/copilot_readFile/invoke":
                return httpx.Response(200, json={"content": [{"value": "text"}]})
            return httpx.Response(400, text="needs chat context")

        invoker = ToolInvoker(ToolRegistryAdapter(make_provider(handler)))

        executed = await invoker.invoke("copilot_readFile", {"filePath": "a.txt"})
        described = await invoker.invoke("copilot_getErrors", {})

        assert isinstance(executed, Executed)
        assert json.loads(executed.text) == {"content": [{"value": "text"}]}
        assert isinstance(described, Described)
        assert "copilot_getErrors" in described.text
