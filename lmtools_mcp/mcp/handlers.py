"""MCP method handlers for JSON-RPC requests."""

import logging
from typing import Any

from pydantic import ValidationError

from lmtools_mcp.config.loader import Settings
from lmtools_mcp.host.provider import ToolInformation
from lmtools_mcp.mcp.errors import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    McpError,
    make_error_data,
)
from lmtools_mcp.mcp.invoker import NotFound, ToolInvoker
from lmtools_mcp.mcp.models import (
    Capabilities,
    InitializeResult,
    ServerInfo,
    TextContent,
    Tool,
    ToolCallParams,
    ToolCallResult,
    ToolsListResult,
)
from lmtools_mcp.mcp.registry import ToolRegistryAdapter
from lmtools_mcp.mcp.schema import normalize_input_schema

logger = logging.getLogger(__name__)

NOTIFICATION_PREFIX = "notifications/"


def is_notification_method(method: str) -> bool:
    """Notification methods never produce a response."""
    return method.startswith(NOTIFICATION_PREFIX)


def to_mcp_tool(tool: ToolInformation) -> Tool:
    """Convert host tool metadata into an MCP tool listing entry."""
    return Tool(
        name=tool.name,
        description=tool.description or f"VS Code LM Tool: {tool.name}",
        inputSchema=normalize_input_schema(tool.inputSchema),
    )


class MCPHandlers:
    """Handlers for MCP protocol methods."""

    def __init__(
        self,
        registry: ToolRegistryAdapter,
        invoker: ToolInvoker,
        settings: Settings,
    ):
        self.registry = registry
        self.invoker = invoker
        self.settings = settings

    async def handle_initialize(self, params: dict[str, Any]) -> dict[str, Any]:
        """Handle the initialize request. No version negotiation takes place."""
        result = InitializeResult(
            protocolVersion=self.settings.protocol_version,
            capabilities=Capabilities(tools={}),
            serverInfo=ServerInfo(
                name=self.settings.server_name,
                version=self.settings.server_version,
            ),
        )
        return result.model_dump()

    async def handle_initialized(self, params: dict[str, Any]) -> None:
        """Handle the notifications/initialized notification (no response)."""
        logger.info("Client confirmed initialization")
        return None

    async def handle_tools_list(self, params: dict[str, Any]) -> dict[str, Any]:
        """Handle the tools/list request."""
        try:
            tools = await self.registry.list_tools()
            result = ToolsListResult(tools=[to_mcp_tool(tool) for tool in tools])
        except Exception as e:
            logger.exception("Error listing tools")
            raise McpError(INTERNAL_ERROR, f"Error listing tools: {e}") from e
        return result.model_dump()

    async def handle_tools_call(self, params: dict[str, Any]) -> dict[str, Any]:
        """Handle the tools/call request."""
        try:
            call_params = ToolCallParams(**params)
        except ValidationError as e:
            logger.warning(f"Invalid tools/call params: {e}")
            raise McpError(INVALID_PARAMS, f"Invalid params: {e}") from e

        name = call_params.name
        logger.info(f"Calling tool: {name}")
        try:
            outcome = await self.invoker.invoke(name, call_params.arguments)
        except Exception as e:
            logger.exception(f"Error invoking tool {name}")
            raise McpError(INTERNAL_ERROR, f"Error invoking tool {name}: {e}") from e

        if isinstance(outcome, NotFound):
            raise McpError(INVALID_PARAMS, f"Tool {name} not found")

        return ToolCallResult(content=[TextContent(text=outcome.text)]).model_dump()

    async def handle_ping(self, params: dict[str, Any]) -> dict[str, Any]:
        """Handle the ping request."""
        return {}

    async def dispatch(
        self, method: str, params: dict[str, Any]
    ) -> tuple[Any | None, dict[str, Any] | None]:
        """
        Dispatch a method call to the appropriate handler.

        Returns (result, error) tuple. One will be None.
        """
        handlers = {
            "initialize": self.handle_initialize,
            "notifications/initialized": self.handle_initialized,
            "tools/list": self.handle_tools_list,
            "tools/call": self.handle_tools_call,
            "ping": self.handle_ping,
        }

        handler = handlers.get(method)
        if handler is None:
            return None, make_error_data(
                METHOD_NOT_FOUND, f"Method not found: {method}"
            )

        try:
            result = await handler(params)
            return result, None
        except McpError as e:
            return None, e.to_error_data()
        except Exception as e:
            logger.exception(f"Error handling method {method}")
            return None, make_error_data(INTERNAL_ERROR, f"Internal error: {e}")
