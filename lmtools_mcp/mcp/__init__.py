"""MCP (Model Context Protocol) implementation with JSON-RPC 2.0."""

from lmtools_mcp.mcp.models import (
    JsonRpcRequest,
    JsonRpcResponse,
    JsonRpcError,
    Tool,
    TextContent,
    ToolCallResult,
)
from lmtools_mcp.mcp.context import ServerContext
from lmtools_mcp.mcp.registry import ToolRegistryAdapter
from lmtools_mcp.mcp.invoker import ToolInvoker, NotFound, Executed, Described
from lmtools_mcp.mcp.schema import normalize_input_schema
from lmtools_mcp.mcp.errors import (
    PARSE_ERROR,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    INVALID_PARAMS,
    INTERNAL_ERROR,
)

__all__ = [
    "JsonRpcRequest",
    "JsonRpcResponse",
    "JsonRpcError",
    "Tool",
    "TextContent",
    "ToolCallResult",
    "ServerContext",
    "ToolRegistryAdapter",
    "ToolInvoker",
    "NotFound",
    "Executed",
    "Described",
    "normalize_input_schema",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
]
