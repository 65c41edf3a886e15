"""Example provider tools - demonstrates the tool implementation pattern."""

from typing import Any

from lmtools_mcp.host.local import LocalToolProvider, ToolInvocationContext
from lmtools_mcp.host.provider import ToolInvocationError


async def ping_handler(arguments: dict[str, Any], context: ToolInvocationContext) -> str:
    """Handle the example_ping tool call."""
    return "pong"


async def echo_handler(arguments: dict[str, Any], context: ToolInvocationContext) -> dict[str, Any]:
    """Handle the example_echo tool call."""
    message = arguments.get("message", "")
    if not message:
        raise ToolInvocationError("example_echo", "'message' argument is required")
    return {"echo": message}


async def chat_selection_handler(
    arguments: dict[str, Any], context: ToolInvocationContext
) -> dict[str, Any]:
    """Handle the example_chat_selection tool call.

    The selection belongs to a chat request, so without an invocation token
    there is nothing to return.
    """
    if not context.has_chat_session:
        raise ToolInvocationError(
            "example_chat_selection",
            "Tool requires a tool invocation token from a chat session",
        )
    return {"selection": "", "includeContext": bool(arguments.get("includeContext"))}


def register_tools(provider: LocalToolProvider) -> None:
    """Register all example provider tools with the capability provider."""

    # Tool: example_ping (no schema, listed with the default input schema)
    provider.register(
        name="example_ping",
        description=None,
        input_schema=None,
        handler=ping_handler,
    )

    # Tool: example_echo
    provider.register(
        name="example_echo",
        description="Echoes back the provided message. Use this to test tool argument passing.",
        input_schema={
            "type": "object",
            "properties": {
                "message": {
                    "type": "string",
                    "description": "The message to echo back",
                },
            },
            "required": ["message"],
        },
        handler=echo_handler,
    )

    # Tool: example_chat_selection (legacy schema without a root type)
    provider.register(
        name="example_chat_selection",
        description="Returns the editor selection attached to the current chat request.",
        input_schema={
            "properties": {
                "includeContext": {
                    "type": "boolean",
                    "description": "Include surrounding lines",
                },
            },
            "required": [],
        },
        handler=chat_selection_handler,
    )
