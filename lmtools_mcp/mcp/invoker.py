"""Tool invocation with informational fallback."""

import json
import logging
from typing import Any, Literal

from pydantic import BaseModel

from lmtools_mcp.host.provider import (
    CancellationToken,
    ToolInformation,
    ToolInvocationOptions,
)
from lmtools_mcp.mcp.registry import ToolRegistryAdapter

logger = logging.getLogger(__name__)


class NotFound(BaseModel):
    """The tool is not in the current registry snapshot."""

    kind: Literal["not_found"] = "not_found"
    name: str


class Executed(BaseModel):
    """The tool ran; ``text`` is its serialized result."""

    kind: Literal["executed"] = "executed"
    name: str
    text: str


class Described(BaseModel):
    """The tool exists but could not run here; its metadata is returned instead."""

    kind: Literal["described"] = "described"
    name: str
    tool: ToolInformation
    reason: str

    @property
    def text(self) -> str:
        info = json.dumps(
            {
                "name": self.tool.name,
                "description": self.tool.description,
                "inputSchema": self.tool.inputSchema,
            }
        )
        return (
            f"Tool {self.name} is available but cannot be invoked outside of "
            f"a chat context. Tool info: {info}"
        )


InvocationOutcome = NotFound | Executed | Described


def serialize_result(result: Any) -> str:
    """Serialize a raw tool result to a text payload."""
    if isinstance(result, BaseModel):
        return result.model_dump_json()
    return json.dumps(result)


class ToolInvoker:
    """Executes tools against the capability provider."""

    def __init__(self, registry: ToolRegistryAdapter):
        self.registry = registry

    async def invoke(self, name: str, arguments: dict[str, Any] | None) -> InvocationOutcome:
        """
        Invoke a tool by name.

        Provider failures are not raised: they produce a Described outcome
        carrying the tool's metadata. Serialization failures do propagate.
        """
        tool = await self.registry.find_tool(name)
        if tool is None:
            return NotFound(name=name)

        options = ToolInvocationOptions(input=arguments or {})
        try:
            result = await self.registry.provider.invoke_tool(
                tool.name, options, CancellationToken()
            )
        except Exception as e:
            logger.info(f"Tool {name} could not be invoked, returning tool info: {e}")
            return Described(name=name, tool=tool, reason=str(e))

        return Executed(name=name, text=serialize_result(result))
