"""Response models for the GKG MCP server."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .enums import ContentType


class ToolDefinition(BaseModel):
    """A tool descriptor as returned by tools/list."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., description="Tool name used in tools/call")
    description: str = Field(..., min_length=1, description="Human-readable description")
    input_schema: dict[str, Any] = Field(
        ..., alias="inputSchema", description="JSON Schema of the tool arguments"
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize with MCP's camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class TextContent(BaseModel):
    """A text content block."""

    type: ContentType = ContentType.TEXT
    text: str


class ToolResult(BaseModel):
    """Result of a tools/call invocation."""

    content: list[TextContent] = Field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "ToolResult":
        return cls(content=[TextContent(text=text)])


class StatusResponse(BaseModel):
    """Health probe response."""

    status: str = Field(default="healthy", description="Service status")
    service: str = Field(default="gkg-mcp-server", description="Service name")
