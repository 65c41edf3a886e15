"""JSON-RPC 2.0 message processing."""

import json
import logging
from typing import Any

from pydantic import ValidationError

from lmtools_mcp.mcp.context import ServerContext
from lmtools_mcp.mcp.errors import (
    INTERNAL_ERROR,
    INVALID_REQUEST,
    PARSE_ERROR,
    make_error_data,
)
from lmtools_mcp.mcp.handlers import MCPHandlers, is_notification_method
from lmtools_mcp.mcp.invoker import ToolInvoker
from lmtools_mcp.mcp.models import JsonRpcError, JsonRpcRequest, JsonRpcResponse
from lmtools_mcp.mcp.registry import ToolRegistryAdapter

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def _error_response(request_id: Any, code: int, message: str | None = None) -> JsonRpcResponse:
    return JsonRpcResponse(id=request_id, error=JsonRpcError(**make_error_data(code, message)))


class JsonRpcProcessor:
    """Process JSON-RPC 2.0 messages against a server context."""

    def __init__(self, context: ServerContext):
        self.context = context

    def parse_request(
        self, raw_data: str | bytes
    ) -> tuple[JsonRpcRequest | None, JsonRpcResponse | None]:
        """
        Parse a JSON-RPC request from raw data.

        Returns (request, error_response) tuple. One will be None.
        """
        try:
            if isinstance(raw_data, bytes):
                raw_data = raw_data.decode("utf-8")
            data = json.loads(raw_data, parse_constant=_reject_constant)
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors
            logger.warning(f"Invalid JSON received: {e}")
            return None, _error_response(None, PARSE_ERROR)

        if not isinstance(data, dict):
            logger.warning(f"JSON-RPC request is not an object: {type(data).__name__}")
            return None, _error_response(None, INVALID_REQUEST)

        try:
            return JsonRpcRequest(**data), None
        except ValidationError as e:
            logger.warning(f"Invalid JSON-RPC request: {e}")
            request_id = data.get("id")
            if not isinstance(request_id, (int, float, str)) or isinstance(request_id, bool):
                request_id = None
            return None, _error_response(request_id, INVALID_REQUEST)

    def _build_handlers(self) -> MCPHandlers:
        settings = self.context.settings
        registry = ToolRegistryAdapter(
            self.context.provider, strict=settings.strict_tool_listing
        )
        return MCPHandlers(registry, ToolInvoker(registry), settings)

    async def process_request(
        self, request: JsonRpcRequest
    ) -> JsonRpcResponse | None:
        """
        Process a validated JSON-RPC request.

        Returns None for notification methods.
        """
        if not self.context.is_initialized:
            return _error_response(request.id, INTERNAL_ERROR, "MCP Server not initialized")

        handlers = self._build_handlers()
        result, error = await handlers.dispatch(request.method, request.params or {})

        if is_notification_method(request.method):
            if error is not None:
                logger.debug(f"Ignoring notification {request.method}: {error['message']}")
            return None

        if error is not None:
            return JsonRpcResponse(id=request.id, error=JsonRpcError(**error))
        return JsonRpcResponse(id=request.id, result=result)

    async def handle_message(
        self, raw_data: str | bytes
    ) -> tuple[JsonRpcResponse | None, int]:
        """
        Handle a raw JSON-RPC message end-to-end.

        Returns (response, http_status). The response is None for
        notifications. Messages that cannot be parsed into a request get
        status 400; everything else, errors included, gets 200.
        """
        request, error_response = self.parse_request(raw_data)
        if error_response is not None:
            return error_response, 400

        logger.debug(f"Received MCP request {request.method} (id={request.id})")
        try:
            response = await self.process_request(request)  # type: ignore[arg-type]
        except Exception as e:
            logger.error(f"Error handling MCP request {request.method}: {e}", exc_info=True)
            return _error_response(request.id, INTERNAL_ERROR, f"Internal error: {e}"), 200
        return response, 200
