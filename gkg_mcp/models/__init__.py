"""Pydantic models for GKG MCP server requests and responses.

    from gkg_mcp.models import ToolName, ToolResult
"""

from .enums import ContentType, ToolName
from .requests import (
    DefinitionRef,
    GetDefinitionArgs,
    GetReferencesArgs,
    IndexProjectArgs,
    ListProjectsArgs,
    ReadDefinitionsArgs,
    RepoMapArgs,
    SearchCodebaseDefinitionsArgs,
    ToolArguments,
)
from .responses import StatusResponse, TextContent, ToolDefinition, ToolResult

__all__ = [
    # Enums
    "ContentType",
    "ToolName",
    # Tool arguments
    "ToolArguments",
    "ListProjectsArgs",
    "SearchCodebaseDefinitionsArgs",
    "IndexProjectArgs",
    "GetReferencesArgs",
    "DefinitionRef",
    "ReadDefinitionsArgs",
    "GetDefinitionArgs",
    "RepoMapArgs",
    # Responses
    "ToolDefinition",
    "TextContent",
    "ToolResult",
    "StatusResponse",
]
