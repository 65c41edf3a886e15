"""Tool registry adapter over the host capability provider."""

import logging
from typing import Sequence

from lmtools_mcp.host.provider import CapabilityProvider, ToolInformation

logger = logging.getLogger(__name__)


class ToolListingError(Exception):
    """Raised in strict mode when the provider cannot list its tools."""


class ToolRegistryAdapter:
    """Reads the current tool list from the capability provider.

    Nothing is cached: every call queries the provider, which may change its
    tool set between calls.
    """

    def __init__(self, provider: CapabilityProvider, strict: bool = False):
        self.provider = provider
        self.strict = strict

    async def list_tools(self) -> Sequence[ToolInformation]:
        """
        Return the provider's current tools.

        On provider failure an empty list is returned, unless the adapter is
        strict, in which case ToolListingError is raised.
        """
        try:
            return await self.provider.list_tools()
        except Exception as e:
            if self.strict:
                raise ToolListingError(str(e)) from e
            logger.warning("Error getting tools from capability provider", exc_info=True)
            return []

    async def find_tool(self, name: str) -> ToolInformation | None:
        """Look up a tool by exact name in a fresh snapshot."""
        for tool in await self.list_tools():
            if tool.name == name:
                return tool
        return None
