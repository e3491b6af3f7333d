"""Tool handlers for the knowledge graph tools.

This package contains the tool handlers organized by domain:
- projects: list_projects, index_project
- search: search_codebase_definitions, get_references
- definitions: read_definitions, get_definition
- repo_map: repo_map

TOOL_HANDLERS maps each tool name to a ToolHandler that validates the raw
``params.arguments`` mapping and returns a ToolResult.
"""

from types import MappingProxyType

from ..models import (
    GetDefinitionArgs,
    GetReferencesArgs,
    IndexProjectArgs,
    ListProjectsArgs,
    ReadDefinitionsArgs,
    RepoMapArgs,
    SearchCodebaseDefinitionsArgs,
    ToolName,
)
from .base import ToolHandler, render
from .definitions import handle_get_definition, handle_read_definitions
from .projects import handle_index_project, handle_list_projects
from .repo_map import handle_repo_map
from .search import handle_get_references, handle_search_codebase_definitions

TOOL_HANDLERS = MappingProxyType(
    {
        ToolName.LIST_PROJECTS.value: ToolHandler(ListProjectsArgs, handle_list_projects),
        ToolName.SEARCH_CODEBASE_DEFINITIONS.value: ToolHandler(
            SearchCodebaseDefinitionsArgs, handle_search_codebase_definitions
        ),
        ToolName.INDEX_PROJECT.value: ToolHandler(IndexProjectArgs, handle_index_project),
        ToolName.GET_REFERENCES.value: ToolHandler(GetReferencesArgs, handle_get_references),
        ToolName.READ_DEFINITIONS.value: ToolHandler(ReadDefinitionsArgs, handle_read_definitions),
        ToolName.GET_DEFINITION.value: ToolHandler(GetDefinitionArgs, handle_get_definition),
        ToolName.REPO_MAP.value: ToolHandler(RepoMapArgs, handle_repo_map),
    }
)

__all__ = [
    # Base
    "ToolHandler",
    "TOOL_HANDLERS",
    "render",
    # Handlers
    "handle_list_projects",
    "handle_index_project",
    "handle_search_codebase_definitions",
    "handle_get_references",
    "handle_read_definitions",
    "handle_get_definition",
    "handle_repo_map",
]
