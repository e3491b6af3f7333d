"""MCP tool definitions for the GitLab Knowledge Graph.

This module contains all tool definitions returned by the tools/list method.
Each tool definition includes the schema for its input parameters. The
schemas are advertised to clients as-is; argument checking happens in the
handlers' own argument models.
"""

from ..models import ToolDefinition, ToolName


def _number(description: str) -> dict:
    return {"type": "number", "description": description}


def _string(description: str) -> dict:
    return {"type": "string", "description": description}


def _string_array(description: str) -> dict:
    return {"type": "array", "items": {"type": "string"}, "description": description}


TOOL_DEFINITIONS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name=ToolName.LIST_PROJECTS.value,
        description="Get a list of all projects in the knowledge graph",
        inputSchema={"type": "object", "properties": {}},
    ),
    ToolDefinition(
        name=ToolName.SEARCH_CODEBASE_DEFINITIONS.value,
        description=(
            "Efficiently searches the codebase for functions, classes, methods, "
            "constants, interfaces..."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "project_absolute_path": _string("Absolute path to the project to search"),
                "search_terms": _string_array("Array of search terms to look for"),
                "page": _number("Page number for pagination (optional)"),
            },
            "required": ["project_absolute_path", "search_terms"],
        },
    ),
    ToolDefinition(
        name=ToolName.INDEX_PROJECT.value,
        description="Creates new or rebuilds the Knowledge Graph index for a project",
        inputSchema={
            "type": "object",
            "properties": {
                "project_absolute_path": _string("Absolute path to the project to index"),
            },
            "required": ["project_absolute_path"],
        },
    ),
    ToolDefinition(
        name=ToolName.GET_REFERENCES.value,
        description="Find all references to a code definition across the entire codebase",
        inputSchema={
            "type": "object",
            "properties": {
                "definition_name": _string("Name of the definition to find references for"),
                "file_path": _string("Path to the file containing the definition"),
                "page": _number("Page number for pagination (optional)"),
            },
            "required": ["definition_name", "file_path"],
        },
    ),
    ToolDefinition(
        name=ToolName.READ_DEFINITIONS.value,
        description="Read the definition bodies for multiple definitions across the codebase",
        inputSchema={
            "type": "object",
            "properties": {
                "definitions": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "name": _string("Name of the definition"),
                            "file_path": _string("Path to the file containing the definition"),
                        },
                        "required": ["name", "file_path"],
                    },
                    "description": "Array of definitions to read",
                },
            },
            "required": ["definitions"],
        },
    ),
    ToolDefinition(
        name=ToolName.GET_DEFINITION.value,
        description="Navigates directly to the definition of a function or method call",
        inputSchema={
            "type": "object",
            "properties": {
                "file_path": _string("Path to the file containing the reference"),
                "line": _number("Line number where the reference is located"),
                "symbol_name": _string("Name of the symbol to find definition for"),
            },
            "required": ["file_path", "line", "symbol_name"],
        },
    ),
    ToolDefinition(
        name=ToolName.REPO_MAP.value,
        description="Produces a compact, API-style map of a repository segment",
        inputSchema={
            "type": "object",
            "properties": {
                "project_absolute_path": _string("Absolute path to the project"),
                "relative_paths": _string_array("Array of relative paths to include in the map"),
                "depth": _number("Maximum depth for directory traversal (optional)"),
                "show_directories": {
                    "type": "boolean",
                    "description": "Whether to include directories in the output (optional)",
                },
                "show_definitions": {
                    "type": "boolean",
                    "description": "Whether to include code definitions in the output (optional)",
                },
                "page": _number("Page number for pagination (optional)"),
                "page_size": _number("Number of items per page (optional)"),
            },
            "required": ["project_absolute_path", "relative_paths"],
        },
    ),
)

TOOL_NAMES: tuple[str, ...] = tuple(tool.name for tool in TOOL_DEFINITIONS)
