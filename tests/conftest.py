"""Shared fixtures for the GKG MCP server tests."""

import json

import pytest

from gkg_mcp.mcp import MCPRequestRouter


class DisconnectingRequest:
    """Stand-in for a Starlette request that disconnects after N checks."""

    def __init__(self, connected_checks: int):
        self.remaining = connected_checks

    async def is_disconnected(self) -> bool:
        if self.remaining == 0:
            return True
        self.remaining -= 1
        return False


@pytest.fixture
def router():
    """A fresh router over the default tool registry."""
    return MCPRequestRouter()


@pytest.fixture
def call_tool(router):
    """Call a tool through the router and return the full response."""

    def _call(name, arguments=None, id=1):
        params = {"name": name}
        if arguments is not None:
            params["arguments"] = arguments
        body = {"jsonrpc": "2.0", "id": id, "method": "tools/call", "params": params}
        return router.handle_request(json.dumps(body))

    return _call


@pytest.fixture
def tool_text(call_tool):
    """Call a tool and return the text of its single content block."""

    def _text(name, arguments=None):
        response = call_tool(name, arguments)
        assert "error" not in response, response
        content = response["result"]["content"]
        assert len(content) == 1
        assert content[0]["type"] == "text"
        return content[0]["text"]

    return _text


@pytest.fixture
def disconnecting_request():
    """Factory for requests that report a disconnect after N checks."""
    return DisconnectingRequest
