"""Pytest configuration and fixtures."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from lmtools_mcp.config.loader import Settings
from lmtools_mcp.host.local import LocalToolProvider
from lmtools_mcp.host.provider import ToolInformation
from lmtools_mcp.main import create_app
from lmtools_mcp.mcp.context import ServerContext


class StubProvider:
    """Capability provider with a fixed tool list and scripted failures."""

    def __init__(
        self,
        tools: list[ToolInformation] | None = None,
        result: Any = None,
        list_error: Exception | None = None,
        invoke_error: Exception | None = None,
    ):
        self.tools = tools or []
        self.result = result
        self.list_error = list_error
        self.invoke_error = invoke_error
        self.list_calls = 0
        self.invocations: list[tuple] = []

    async def list_tools(self) -> list[ToolInformation]:
        self.list_calls += 1
        if self.list_error is not None:
            raise self.list_error
        return list(self.tools)

    async def invoke_tool(self, name, options, token) -> Any:
        self.invocations.append((name, options, token))
        if self.invoke_error is not None:
            raise self.invoke_error
        return self.result


@pytest.fixture
def settings():
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def make_provider():
    """Factory for stub capability providers."""
    return StubProvider


@pytest.fixture
def example_provider():
    """In-process provider with the example tools loaded."""
    provider = LocalToolProvider()
    provider.load_provider("example")
    return provider


@pytest.fixture
def make_client(settings):
    """Factory for test clients bound to an initialized server context."""
    clients = []

    def _make_client(provider) -> TestClient:
        context = ServerContext(settings, provider)
        client = TestClient(create_app(context))
        client.__enter__()  # runs the lifespan, which initializes the context
        clients.append(client)
        return client

    yield _make_client

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client, example_provider):
    """Test client serving the example tools."""
    return make_client(example_provider)


@pytest.fixture
def sample_jsonrpc_request():
    """Sample JSON-RPC request factory."""
    def _make_request(method: str, params: dict = None, id: int = 1):
        return {
            "jsonrpc": "2.0",
            "id": id,
            "method": method,
            "params": params or {},
        }
    return _make_request
