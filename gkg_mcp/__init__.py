"""Mock MCP server for the GitLab Knowledge Graph tools."""

__version__ = "0.1.0"
