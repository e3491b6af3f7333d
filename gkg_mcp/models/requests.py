"""Tool argument models.

Each model lists the arguments one tool reads from ``params.arguments``.
Only arguments the response template cannot render without are required;
everything else is optional and falls back to the template's default text.
"""

from pydantic import BaseModel, ConfigDict, Field

Number = int | float


class ToolArguments(BaseModel):
    """Base class for tool arguments. Unknown arguments are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class ListProjectsArgs(ToolArguments):
    """Arguments for list_projects (none)."""


class SearchCodebaseDefinitionsArgs(ToolArguments):
    """Arguments for search_codebase_definitions."""

    project_absolute_path: str | None = Field(default=None, description="Project to search")
    search_terms: list[str] | None = Field(default=None, description="Terms to look for")
    page: Number | None = Field(default=None, description="Page number (default 1)")


class IndexProjectArgs(ToolArguments):
    """Arguments for index_project."""

    project_absolute_path: str | None = Field(default=None, description="Project to index")


class GetReferencesArgs(ToolArguments):
    """Arguments for get_references."""

    definition_name: str = Field(..., description="Definition to find references for")
    file_path: str | None = Field(default=None, description="File containing the definition")
    page: Number | None = Field(default=None, description="Page number (default 1)")


class DefinitionRef(ToolArguments):
    """One entry of read_definitions.definitions."""

    name: str | None = None
    file_path: str | None = None


class ReadDefinitionsArgs(ToolArguments):
    """Arguments for read_definitions."""

    definitions: list[DefinitionRef] | None = Field(default=None, description="Definitions to read")


class GetDefinitionArgs(ToolArguments):
    """Arguments for get_definition."""

    file_path: str | None = Field(default=None, description="File containing the reference")
    line: Number | None = Field(default=None, description="Line of the reference")
    symbol_name: str = Field(..., description="Symbol to resolve")


class RepoMapArgs(ToolArguments):
    """Arguments for repo_map."""

    project_absolute_path: str | None = Field(default=None, description="Project to map")
    relative_paths: list[str] | None = Field(default=None, description="Paths to include")
    depth: Number | None = Field(default=None, description="Max traversal depth (default 3)")
    show_directories: bool | None = Field(default=None, description="Include directories")
    show_definitions: bool | None = Field(default=None, description="Include definitions")
    page: Number | None = Field(default=None, description="Page number (default 1)")
    page_size: Number | None = Field(default=None, description="Items per page (default 50)")
