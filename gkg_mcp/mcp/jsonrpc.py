"""JSON-RPC 2.0 helpers for the MCP endpoint.

This module provides utility functions for creating JSON-RPC 2.0
responses and errors according to the specification.

See: https://www.jsonrpc.org/specification
"""

from typing import Any

JSONRPC_VERSION = "2.0"


def jsonrpc_response(id: Any, result: Any) -> dict:
    """Create a JSON-RPC 2.0 success response.

    Args:
        id: Request ID, echoed verbatim (None when the request had none)
        result: The result payload

    Returns:
        JSON-RPC 2.0 response dict
    """
    return {"jsonrpc": JSONRPC_VERSION, "id": id, "result": result}


def jsonrpc_error(id: Any, code: int, message: str) -> dict:
    """Create a JSON-RPC 2.0 error response.

    Error codes produced by this server:
        -32700: Parse error (use parse_error_response instead)
        -32601: Method or tool not found
        -32602: Invalid params
        -32603: Internal error (transport only)

    Args:
        id: Request ID, echoed verbatim
        code: Error code (negative integer)
        message: Human-readable error message

    Returns:
        JSON-RPC 2.0 error response dict
    """
    return {"jsonrpc": JSONRPC_VERSION, "id": id, "error": {"code": code, "message": message}}


def parse_error_response() -> dict:
    """Create the response for a body that is not valid JSON.

    The request id cannot be recovered from an unparseable body, so the
    response carries no ``id`` member at all.
    """
    return {"jsonrpc": JSONRPC_VERSION, "error": {"code": PARSE_ERROR, "message": "Parse error"}}


# Standard JSON-RPC error codes
PARSE_ERROR = -32700
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
