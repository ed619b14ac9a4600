"""Common pydantic base for gateway payloads, session state and configuration.

The gateway speaks camelCase JSON (``serverName``, ``alwaysOn``,
``inputSchema``) while the package uses snake_case attributes. Every model in
``airiscode_mcp`` derives from :class:`BaseSchema` so both spellings are
accepted on input and ``model_dump(by_alias=True)`` produces the wire form.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


def _camel_alias(field_name: str) -> str:
    head, *rest = field_name.split("_")
    return head + "".join(word[:1].upper() + word[1:] for word in rest)


class BaseSchema(BaseModel):
    """Snake_case models with camelCase wire aliases.

    Unknown keys are rejected by default; response models that must tolerate
    newer gateway fields override ``extra``.
    """

    model_config = ConfigDict(
        alias_generator=_camel_alias,
        populate_by_name=True,
        extra="forbid",
    )
