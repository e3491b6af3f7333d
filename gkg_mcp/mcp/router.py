"""JSON-RPC request router for the MCP endpoint.

Turns one raw request body into exactly one JSON-RPC response object:

- initialize: server capabilities and info
- tools/list: the static tool definitions
- tools/call: dispatch to a tool handler by ``params.name``

Malformed JSON yields a parse error without an ``id``. Unknown methods and
tools yield METHOD_NOT_FOUND; arguments a handler cannot render yield
INVALID_PARAMS. Nothing is raised across the router boundary for these.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ..handlers import TOOL_HANDLERS, ToolHandler, render
from ..models import ToolDefinition
from .jsonrpc import (
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    jsonrpc_error,
    jsonrpc_response,
    parse_error_response,
)
from .tool_defs import TOOL_DEFINITIONS

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "gitlab-knowledge-graph"
SERVER_VERSION = "0.1.0-mock"


def _describe_validation_error(tool_name: str, error: ValidationError) -> str:
    problems = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "arguments"
        problems.append(f"{location}: {err['msg']}")
    return f"Invalid params for {tool_name}: " + "; ".join(problems)


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


class MCPRequestRouter:
    """Dispatches JSON-RPC requests to the MCP methods and tool handlers.

    The router holds no per-request state; the same request always produces
    the same response.
    """

    def __init__(
        self,
        tools: tuple[ToolDefinition, ...] = TOOL_DEFINITIONS,
        handlers: Mapping[str, ToolHandler] = TOOL_HANDLERS,
    ):
        self.tools = tools
        self.handlers = handlers

    @property
    def tool_names(self) -> list[str]:
        return [tool.name for tool in self.tools]

    def handle_request(self, data: str | bytes) -> dict:
        """Parse a raw request body and dispatch it."""
        try:
            request = json.loads(data, parse_constant=_reject_constant)
        except (ValueError, RecursionError):
            logger.warning("Rejecting request body that is not valid JSON")
            return parse_error_response()

        return self.dispatch(request)

    def dispatch(self, request: Any) -> dict:
        """Dispatch an already-decoded JSON-RPC request."""
        if not isinstance(request, dict):
            request = {}

        method = request.get("method")
        id = request.get("id")
        params = request.get("params")
        if not isinstance(params, dict):
            params = {}

        logger.debug(f"Dispatching {method} (id={id!r})")

        if method == "initialize":
            return jsonrpc_response(
                id,
                {
                    "protocolVersion": PROTOCOL_VERSION,
                    "capabilities": {"tools": {}},
                    "serverInfo": {"name": SERVER_NAME, "version": SERVER_VERSION},
                },
            )
        elif method == "tools/list":
            return jsonrpc_response(id, {"tools": [tool.to_wire() for tool in self.tools]})
        elif method == "tools/call":
            return self._call_tool(id, params)

        logger.warning(f"Method not found: {method}")
        return jsonrpc_error(id, METHOD_NOT_FOUND, f"Method not found: {render(method)}")

    def _call_tool(self, id: Any, params: dict) -> dict:
        """Handle a tools/call request."""
        tool_name = params.get("name")
        arguments = params.get("arguments") or {}

        handler = self.handlers.get(tool_name) if isinstance(tool_name, str) else None
        if handler is None:
            logger.warning(f"Unknown tool requested: {tool_name}")
            return jsonrpc_error(
                id,
                METHOD_NOT_FOUND,
                f"Unknown tool: {render(tool_name)}. "
                f"Available tools: {', '.join(self.tool_names)}",
            )

        try:
            result = handler(arguments)
        except ValidationError as e:
            message = _describe_validation_error(tool_name, e)
            logger.warning(message)
            return jsonrpc_error(id, INVALID_PARAMS, message)

        return jsonrpc_response(id, result.model_dump(mode="json"))


mcp_router = MCPRequestRouter()
