"""Definition tool handlers.

Handles:
- read_definitions: Read the bodies of several definitions
- get_definition: Jump from a reference to its definition
"""

from ..models import DefinitionRef, GetDefinitionArgs, ReadDefinitionsArgs, ToolResult
from .base import mock_notice, render


def _definition_body(definition: DefinitionRef) -> str:
    name = render(definition.name)
    return (
        f"=== {name} ({render(definition.file_path)}) ===\n\n"
        f"function {name}(param1, param2) {{\n"
        "  // Mock implementation\n"
        "  if (!param1 || !param2) {\n"
        "    throw new Error('Missing required parameters');\n"
        "  }\n"
        "  return param1 + param2;\n"
        "}\n\n"
        "// Dependencies: helper.js\n"
        "// Used by: main.js, app.js\n"
        "// Last modified: 2025-01-15\n\n"
    )


def handle_read_definitions(args: ReadDefinitionsArgs) -> ToolResult:
    """Return one mock definition block per requested definition."""
    definitions = args.definitions or []
    summary = ", ".join(
        f"{render(d.name)} ({render(d.file_path)})" for d in definitions
    )
    bodies = "".join(_definition_body(d) for d in definitions)

    return ToolResult.from_text(
        f"Reading definitions: {summary or 'No definitions provided'}\n\n"
        "Mock definition bodies:\n\n"
        f"{bodies or 'No definitions to read.'}\n"
        + mock_notice("definition data", "Real definitions will be read by official GKG.")
    )


def handle_get_definition(args: GetDefinitionArgs) -> ToolResult:
    """Return a mock definition for the symbol referenced at file:line."""
    symbol = args.symbol_name
    file_path = render(args.file_path)
    line = render(args.line)

    return ToolResult.from_text(
        f'Definition for "{symbol}" at {file_path}:{line}:\n\n'
        "Mock definition found:\n\n"
        "=== Original Reference ===\n"
        f"File: {file_path}\n"
        f"Line: {line}\n"
        f"Code: const result = {symbol}();\n\n"
        "=== Definition Location ===\n"
        f"File: src/core/{symbol.lower()}.js\n"
        "Lines: 15-28\n\n"
        f"function {symbol}(input) {{\n"
        "  // Main implementation\n"
        "  const processed = processInput(input);\n"
        "  const result = calculateResult(processed);\n"
        "  return result;\n"
        "}\n\n"
        "// Helper functions\n"
        "function processInput(input) { /* ... */ }\n"
        "function calculateResult(data) { /* ... */ }\n\n"
        + mock_notice(
            "navigation data", "Real definition navigation will be provided by official GKG."
        )
    )
