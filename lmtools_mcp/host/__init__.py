"""Host capability providers: the boundary to the host's tool registry."""

from lmtools_mcp.host.provider import (
    CapabilityProvider,
    CancellationToken,
    ToolInformation,
    ToolInvocationError,
    ToolInvocationOptions,
)
from lmtools_mcp.host.local import LocalToolProvider
from lmtools_mcp.host.remote import RemoteToolProvider

__all__ = [
    "CapabilityProvider",
    "CancellationToken",
    "ToolInformation",
    "ToolInvocationError",
    "ToolInvocationOptions",
    "LocalToolProvider",
    "RemoteToolProvider",
]
