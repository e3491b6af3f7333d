"""Enumeration types for the GKG MCP server."""

from enum import StrEnum


class ToolName(StrEnum):
    """Knowledge graph tools exposed through tools/call."""

    LIST_PROJECTS = "list_projects"
    SEARCH_CODEBASE_DEFINITIONS = "search_codebase_definitions"
    INDEX_PROJECT = "index_project"
    GET_REFERENCES = "get_references"
    READ_DEFINITIONS = "read_definitions"
    GET_DEFINITION = "get_definition"
    REPO_MAP = "repo_map"


class ContentType(StrEnum):
    """MCP content block types."""

    TEXT = "text"
