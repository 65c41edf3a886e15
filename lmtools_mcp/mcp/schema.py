"""Input schema normalization for tools reported by the host."""

from typing import Any


def default_input_schema() -> dict[str, Any]:
    """Schema used when a tool has no usable input schema."""
    return {
        "type": "object",
        "properties": {
            "input": {
                "type": "string",
                "description": "Input for the tool",
            },
        },
    }


def normalize_input_schema(schema: Any) -> dict[str, Any]:
    """
    Coerce a raw tool input schema into an object-typed JSON Schema.

    - Object schemas with ``type: "object"`` are passed through unchanged.
    - Other dicts are wrapped under a synthetic ``input`` property, keeping
      their ``properties`` and ``required`` members.
    - Anything that is not a dict, including ``None``, gets the default
      single-string-input schema. An empty dict is wrapped like any other
      untyped dict.
    """
    if not isinstance(schema, dict):
        return default_input_schema()

    if schema.get("type") == "object":
        return schema

    return {
        "type": "object",
        "properties": {
            "input": {
                "type": "object",
                "description": "Tool input parameters",
                "properties": schema.get("properties") or {},
                "required": schema.get("required") or [],
            },
        },
    }
