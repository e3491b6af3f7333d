"""MCP (Model Context Protocol) transport module.

This module contains components for the MCP JSON-RPC endpoint:
- Tool definitions for tools/list
- JSON-RPC 2.0 helpers
- The request router
- The SSE heartbeat stream
"""

from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    jsonrpc_error,
    jsonrpc_response,
    parse_error_response,
)
from .router import (
    PROTOCOL_VERSION,
    SERVER_NAME,
    SERVER_VERSION,
    MCPRequestRouter,
    mcp_router,
)
from .sse import format_sse_event, heartbeat_event_stream
from .tool_defs import TOOL_DEFINITIONS, TOOL_NAMES

__all__ = [
    # Tool definitions
    "TOOL_DEFINITIONS",
    "TOOL_NAMES",
    # JSON-RPC helpers
    "jsonrpc_response",
    "jsonrpc_error",
    "parse_error_response",
    "PARSE_ERROR",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    # Router
    "MCPRequestRouter",
    "mcp_router",
    "PROTOCOL_VERSION",
    "SERVER_NAME",
    "SERVER_VERSION",
    # SSE
    "format_sse_event",
    "heartbeat_event_stream",
]
