from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field

from ..schemas.base import BaseSchema
from ..schemas.core import ToolDescription


class SessionStatus(str, Enum):
    UNINITIALIZED = "uninitialized"
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


class SessionState(BaseSchema):
    """Mutable state of one session, owned by ``McpSessionManager``.

    ``lazy_tools`` keys mirror the loader's enabled set; its insertion order is
    the order providers were enabled.
    """

    session_id: str = Field(..., description="Session identifier.", min_length=1)
    connected: bool = Field(False, description="Whether the session is connected to the gateway.")
    always_on_tools: List[ToolDescription] = Field(
        default_factory=list, description="Tools of always-on providers, in gateway order."
    )
    lazy_tools: Dict[str, List[ToolDescription]] = Field(
        default_factory=dict, description="Tools per enabled lazy provider."
    )
    started_at: Optional[datetime] = Field(None, description="UTC time of the last successful initialize.")
