"""In-process capability provider with plugin-style tool loading."""

import importlib
import logging
from typing import Any, Awaitable, Callable

from lmtools_mcp.host.provider import (
    CancellationToken,
    ToolInformation,
    ToolInvocationError,
    ToolInvocationOptions,
)

logger = logging.getLogger(__name__)


class ToolInvocationContext:
    """Per-invocation context handed to tool handlers."""

    def __init__(self, tool_invocation_token: Any, cancellation_token: CancellationToken):
        self.tool_invocation_token = tool_invocation_token
        self.cancellation_token = cancellation_token

    @property
    def has_chat_session(self) -> bool:
        """True when the call originates from an interactive chat session."""
        return self.tool_invocation_token is not None


# Type alias for tool handlers
ToolHandler = Callable[[dict[str, Any], ToolInvocationContext], Awaitable[Any]]


class ToolDefinition:
    """A registered tool with its metadata and handler."""

    def __init__(
        self,
        name: str,
        description: str | None,
        input_schema: Any,
        handler: ToolHandler,
    ):
        self.name = name
        self.description = description
        self.input_schema = input_schema
        self.handler = handler

    def to_information(self) -> ToolInformation:
        """Convert to the metadata the host reports for this tool."""
        return ToolInformation(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )


class LocalToolProvider:
    """Capability provider backed by Python tool handlers."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}
        self._providers: set[str] = set()

    def register(
        self,
        name: str,
        description: str | None,
        input_schema: Any,
        handler: ToolHandler,
    ) -> None:
        """Register a tool with the provider."""
        if name in self._tools:
            logger.warning(f"Tool '{name}' already registered, overwriting")
        self._tools[name] = ToolDefinition(
            name=name,
            description=description,
            input_schema=input_schema,
            handler=handler,
        )
        logger.info(f"Registered tool: {name}")

    def get(self, name: str) -> ToolDefinition | None:
        """Get a tool by name."""
        return self._tools.get(name)

    async def list_tools(self) -> list[ToolInformation]:
        return [tool.to_information() for tool in self._tools.values()]

    async def invoke_tool(
        self,
        name: str,
        options: ToolInvocationOptions,
        token: CancellationToken,
    ) -> Any:
        tool = self.get(name)
        if tool is None:
            raise ToolInvocationError(name, f"Tool {name} is not registered")

        context = ToolInvocationContext(options.tool_invocation_token, token)
        return await tool.handler(options.input, context)

    def load_provider(self, provider_name: str) -> bool:
        """
        Load a tool provider module and register its tools.

        Providers are expected to be in lmtools_mcp/tools/<provider_name>/
        and have a register_tools(provider) function.
        """
        if provider_name in self._providers:
            logger.debug(f"Provider '{provider_name}' already loaded")
            return True

        module_path = f"lmtools_mcp.tools.{provider_name}.tools"
        try:
            module = importlib.import_module(module_path)
        except ImportError as e:
            logger.warning(f"Could not import provider '{provider_name}': {e}")
            return False

        if not hasattr(module, "register_tools"):
            logger.warning(f"Provider '{provider_name}' has no register_tools function")
            return False

        try:
            module.register_tools(self)
        except Exception as e:
            logger.error(f"Error loading provider '{provider_name}': {e}")
            return False

        self._providers.add(provider_name)
        logger.info(f"Loaded provider: {provider_name}")
        return True

    def load_providers(self, provider_names: list[str]) -> dict[str, bool]:
        """Load multiple providers, returning success status for each."""
        results = {}
        for name in provider_names:
            results[name] = self.load_provider(name)
        return results

    @property
    def tool_count(self) -> int:
        """Return the number of registered tools."""
        return len(self._tools)

    @property
    def provider_count(self) -> int:
        """Return the number of loaded providers."""
        return len(self._providers)
