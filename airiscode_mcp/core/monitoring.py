"""
Monitoring and Tracing Configuration Module.

This module provides integration with Pydantic Logfire for tracing gateway
traffic and session lifecycle events:
- HTTPX request tracing for every gateway call
- Session lifecycle records (initialized, server enabled/disabled, cleaned up)

Initialization is conditional on the LOGFIRE_ENABLED environment variable.
"""

import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

# Logfire configuration from environment
LOGFIRE_ENABLED = os.getenv("LOGFIRE_ENABLED", "false").lower() in ("true", "1", "yes")
LOGFIRE_TOKEN = os.getenv("LOGFIRE_TOKEN", "")
LOGFIRE_ENVIRONMENT = os.getenv("LOGFIRE_ENVIRONMENT", "development")
LOGFIRE_SERVICE_NAME = os.getenv("LOGFIRE_SERVICE_NAME", "airiscode-mcp")
LOGFIRE_SERVICE_VERSION = os.getenv("LOGFIRE_SERVICE_VERSION", "0.1.0")

# Feature flags
LOGFIRE_TRACE_HTTPX = os.getenv("LOGFIRE_TRACE_HTTPX", "true").lower() in ("true", "1", "yes")


def initialize_logfire() -> None:
    """
    Initialize Pydantic Logfire for monitoring and tracing.

    When enabled, configures Logfire with the service identity and instruments
    HTTPX so every gateway request becomes a span.
    """
    if not LOGFIRE_ENABLED:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return

    if not LOGFIRE_TOKEN:
        logger.warning(
            "Logfire is enabled but LOGFIRE_TOKEN is not set. "
            "Monitoring will not work. Set LOGFIRE_TOKEN to enable Logfire."
        )
        return

    try:
        import logfire

        logfire.configure(
            token=LOGFIRE_TOKEN,
            service_name=LOGFIRE_SERVICE_NAME,
            service_version=LOGFIRE_SERVICE_VERSION,
            environment=LOGFIRE_ENVIRONMENT,
        )

        if LOGFIRE_TRACE_HTTPX:
            try:
                logfire.instrument_httpx()
                logger.info("Logfire: HTTPX instrumentation enabled")
            except Exception as e:
                logger.warning(f"Failed to instrument HTTPX: {e}")

        logger.info(
            f"Logfire monitoring initialized: environment={LOGFIRE_ENVIRONMENT}, service={LOGFIRE_SERVICE_NAME}"
        )

    except ImportError:
        logger.warning(
            "Logfire is enabled but 'logfire' package is not installed. "
            "Install it with: pip install logfire"
        )
    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)


def log_session_event(event: str, session_id: str, **attributes: Any) -> None:
    """
    Record a session lifecycle event.

    Args:
        event: Event name, e.g. ``initialized`` or ``server_enabled``
        session_id: The session the event belongs to
        **attributes: Extra attributes attached to the record
    """
    logger.debug("MCP session event: %s session_id=%s %s", event, session_id, attributes)
    if not LOGFIRE_ENABLED:
        return
    try:
        import logfire

        logfire.info(
            "MCP session {event}",
            event=event,
            session_id=session_id,
            **attributes,
        )
    except Exception:
        logger.debug(f"Could not log session event to Logfire: event={event} session_id={session_id}")
