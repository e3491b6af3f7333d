"""Server-Sent Events stub for the MCP SSE endpoint.

The stream announces the connection and then emits a heartbeat event on a
fixed interval until the client goes away. It carries no MCP traffic.
"""

import asyncio
import json
import logging
from collections.abc import AsyncGenerator
from datetime import UTC, datetime
from typing import Any

from starlette.requests import Request

logger = logging.getLogger(__name__)

CONNECTED_MESSAGE = "GKG MCP SSE connection established"


def format_sse_event(event: str, data: dict[str, Any]) -> str:
    """Format one SSE frame with a named event and a compact JSON payload."""
    return f"event: {event}\ndata: {json.dumps(data, separators=(',', ':'))}\n\n"


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a ``Z`` suffix."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def heartbeat_event_stream(
    request: Request | None = None,
    interval: float = 30.0,
) -> AsyncGenerator[str, None]:
    """Yield the connected event, then a heartbeat every ``interval`` seconds.

    Stops once ``request`` reports the client disconnected.
    """
    logger.info("SSE client connected")
    yield format_sse_event("connected", {"type": "connected", "message": CONNECTED_MESSAGE})

    try:
        while True:
            await asyncio.sleep(interval)
            if request is not None and await request.is_disconnected():
                break
            yield format_sse_event("heartbeat", {"timestamp": utc_timestamp()})
    finally:
        logger.info("SSE client disconnected")
