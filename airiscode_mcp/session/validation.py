"""Check tool arguments against a tool's declared JSON Schema.

Only the parts of the schema that describe a flat argument object are
enforced: ``required`` keys and the JSON ``type`` of each declared property.
Anything else (nested schemas, formats, enums) is left to the gateway.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from pydantic import JsonValue

from ..schemas.core import ToolDescription


def _matches(value: Any, typ: str) -> bool:
    if typ == "string":
        return isinstance(value, str)
    if typ == "integer":
        return isinstance(value, int) and not isinstance(value, bool)
    if typ == "number":
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if typ == "boolean":
        return isinstance(value, bool)
    if typ == "object":
        return isinstance(value, dict)
    if typ == "array":
        return isinstance(value, list)
    if typ == "null":
        return value is None
    # Unknown type keywords are not enforced
    return True


def validate_tool_arguments(tool: ToolDescription, arguments: Mapping[str, JsonValue]) -> List[str]:
    """Return a list of problems with ``arguments``; empty when they are acceptable.

    Args:
        tool: Tool whose ``input_schema`` declares the arguments.
        arguments: Arguments about to be sent to the gateway.
    """
    schema: Dict[str, Any] = tool.input_schema if isinstance(tool.input_schema, dict) else {}
    problems: List[str] = []

    required = schema.get("required")
    if isinstance(required, list):
        for key in required:
            if isinstance(key, str) and key not in arguments:
                problems.append(f"missing required argument '{key}'")

    props = schema.get("properties")
    if isinstance(props, dict):
        for key, value in arguments.items():
            prop = props.get(key)
            if not isinstance(prop, dict):
                continue
            typ = prop.get("type")
            if isinstance(typ, str):
                allowed = [typ]
            elif isinstance(typ, list):
                allowed = [t for t in typ if isinstance(t, str)]
            else:
                allowed = []
            if allowed and not any(_matches(value, t) for t in allowed):
                problems.append(f"argument '{key}' should be of type {' or '.join(allowed)}")
    return problems
