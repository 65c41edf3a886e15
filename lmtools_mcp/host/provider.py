"""Capability provider contract consumed by the MCP dispatcher.

A capability provider is the host environment's tool registry and execution
engine. The dispatcher only ever talks to it through :class:`CapabilityProvider`.
"""

from typing import Any, Protocol, Sequence, runtime_checkable

from pydantic import BaseModel, Field


class ToolInformation(BaseModel):
    """Metadata for a tool as reported by the host."""

    name: str
    description: str | None = None
    inputSchema: Any = None


class ToolInvocationOptions(BaseModel):
    """Options passed to the host when invoking a tool."""

    input: dict[str, Any] = Field(default_factory=dict)
    # Only available inside an interactive chat session; never set by this server.
    tool_invocation_token: Any = None


class CancellationToken:
    """Cancellation token that is never cancelled."""

    @property
    def is_cancellation_requested(self) -> bool:
        return False


class ToolInvocationError(Exception):
    """Raised by a provider when a tool cannot be executed."""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name


@runtime_checkable
class CapabilityProvider(Protocol):
    """Lists and invokes the tools registered with the host."""

    async def list_tools(self) -> Sequence[ToolInformation]:
        """Return the tools currently registered with the host."""
        ...

    async def invoke_tool(
        self,
        name: str,
        options: ToolInvocationOptions,
        token: CancellationToken,
    ) -> Any:
        """Invoke a tool by name and return its raw result."""
        ...
