from __future__ import annotations

from typing import Dict

from pydantic import ConfigDict, Field, JsonValue

from .base import BaseSchema


class ToolDescription(BaseSchema):
    """A tool advertised by a provider: name, description and input schema.

    Instances are frozen once received from the gateway. Unknown keys in the
    gateway payload are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(..., description="Tool name.", min_length=1, examples=["read_file"])
    description: str = Field("", description="Short description of what the tool does.")
    input_schema: Dict[str, JsonValue] = Field(
        default_factory=dict,
        description="JSON Schema document describing the tool arguments.",
        examples=[{"type": "object", "properties": {"path": {"type": "string"}}, "required": ["path"]}],
    )
