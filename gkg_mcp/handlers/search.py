"""Search tool handlers.

Handles:
- search_codebase_definitions: Find definitions matching search terms
- get_references: Find references to a definition
"""

from ..models import GetReferencesArgs, SearchCodebaseDefinitionsArgs, ToolResult
from .base import mock_notice, render


def handle_search_codebase_definitions(args: SearchCodebaseDefinitionsArgs) -> ToolResult:
    """Return three mock definitions named after the first search term."""
    terms = args.search_terms
    joined = ", ".join(terms) if terms is not None else "N/A"
    first = terms[0] if terms else None
    slug = first.lower() if first else None

    return ToolResult.from_text(
        f'Search results for "{joined}" in {render(args.project_absolute_path)}:\n\n'
        "Mock definitions found:\n\n"
        f"1. Function: {first or 'example_function'}()\n"
        "   Location: src/main.js:42\n"
        "   Type: Function\n"
        "   Signature: function(param1, param2)\n\n"
        f"2. Class: {first or 'ExampleClass'}\n"
        f"   Location: src/models/{slug or 'example'}.js:1\n"
        "   Type: Class\n"
        "   Methods: 3 methods\n\n"
        f"3. Interface: I{first or 'ExampleInterface'}\n"
        f"   Location: src/interfaces/{slug or 'example'}.ts:1\n"
        "   Type: Interface\n\n"
        f"Page: {render(args.page or 1)}\n"
        "Next page available: true\n\n"
        + mock_notice(
            "search data", "Real search results will appear when official GKG is connected."
        )
    )


def handle_get_references(args: GetReferencesArgs) -> ToolResult:
    """Return four mock references to a definition."""
    name = args.definition_name

    return ToolResult.from_text(
        f'References to "{name}" in {render(args.file_path)}:\n\n'
        "Mock references found:\n\n"
        "1. Function call\n"
        "   File: src/main.js:45\n"
        "   Type: Direct function call\n"
        f"   Context: const result = {name}();\n\n"
        "2. Import statement\n"
        "   File: src/utils/helpers.js:123\n"
        "   Type: ES6 import\n"
        f"   Context: import {{ {name} }} from './{name}';\n\n"
        "3. Test usage\n"
        f"   File: tests/test_{name.lower()}.js:67\n"
        "   Type: Unit test\n"
        f"   Context: test('{name} works correctly', () => {{...}});\n\n"
        "4. Variable assignment\n"
        "   File: src/config/index.js:15\n"
        "   Type: Variable reference\n"
        f"   Context: const handler = {name};\n\n"
        "Total: 4 references\n"
        f"Page: {render(args.page or 1)}\n\n"
        + mock_notice("reference data", "Real references will be found by official GKG.")
    )
