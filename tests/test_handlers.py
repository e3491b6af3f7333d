"""
Tests for the knowledge graph tool handlers.

Tests cover:
- Each tool's templated text and argument echoing
- Fallback text for absent optional arguments
- Default values for pagination and repo_map options
"""

import pytest

from gkg_mcp.handlers import render

# ============================================================================
# Rendering
# ============================================================================


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "undefined"),
        (True, "true"),
        (False, "false"),
        (3, "3"),
        (3.0, "3"),
        (2.5, "2.5"),
        ("src/app.py", "src/app.py"),
    ],
)
def test_render(value, expected):
    assert render(value) == expected


# ============================================================================
# list_projects / index_project
# ============================================================================


def test_list_projects_text(tool_text):
    assert tool_text("list_projects") == (
        "Indexed Projects:\n\n"
        "Mock projects in knowledge graph:\n"
        "- /data/projects/example-repo\n"
        "- /data/projects/vps-infra\n"
        "- /data/projects/sample-app\n\n"
        "Total: 3 projects indexed\n\n"
        "⚠️ This is mock data. Real data will appear when official GKG is connected."
    )


def test_index_project_echoes_path(tool_text):
    text = tool_text("index_project", {"project_absolute_path": "/srv/repo"})
    assert text.startswith("Indexing project: /srv/repo\n\n✅ Indexing completed successfully!")
    assert "- Functions indexed: 1,247" in text
    assert text.endswith("Real indexing will be performed by official GKG.")


# ============================================================================
# search_codebase_definitions
# ============================================================================


def test_search_uses_first_term(tool_text):
    text = tool_text(
        "search_codebase_definitions",
        {"project_absolute_path": "/p", "search_terms": ["UserService", "login"], "page": 2},
    )
    assert text.startswith('Search results for "UserService, login" in /p:')
    assert "1. Function: UserService()" in text
    assert "2. Class: UserService" in text
    assert "Location: src/models/userservice.js:1" in text
    assert "3. Interface: IUserService" in text
    assert "Location: src/interfaces/userservice.ts:1" in text
    assert "Page: 2\n" in text
    assert "Next page available: true" in text


def test_search_without_terms_falls_back(tool_text):
    text = tool_text("search_codebase_definitions", {"project_absolute_path": "/p"})
    assert 'Search results for "N/A" in /p:' in text
    assert "1. Function: example_function()" in text
    assert "2. Class: ExampleClass" in text
    assert "src/models/example.js:1" in text
    assert "3. Interface: IExampleInterface" in text
    assert "Page: 1\n" in text


def test_search_with_empty_terms(tool_text):
    text = tool_text("search_codebase_definitions", {"project_absolute_path": "/p", "search_terms": []})
    assert 'Search results for "" in /p:' in text
    assert "1. Function: example_function()" in text


def test_search_page_zero_uses_default(tool_text):
    text = tool_text("search_codebase_definitions", {"search_terms": ["x"], "page": 0})
    assert "Page: 1\n" in text
    assert " in undefined:" in text


# ============================================================================
# get_references
# ============================================================================


def test_get_references(tool_text):
    text = tool_text(
        "get_references", {"definition_name": "ParseConfig", "file_path": "src/config.js"}
    )
    assert text.startswith('References to "ParseConfig" in src/config.js:')
    assert "Context: const result = ParseConfig();" in text
    assert "Context: import { ParseConfig } from './ParseConfig';" in text
    assert "File: tests/test_parseconfig.js:67" in text
    assert "Context: test('ParseConfig works correctly', () => {...});" in text
    assert "Context: const handler = ParseConfig;" in text
    assert "Total: 4 references\nPage: 1\n" in text


def test_get_references_missing_file_path(tool_text):
    text = tool_text("get_references", {"definition_name": "x", "page": 4})
    assert 'References to "x" in undefined:' in text
    assert "Page: 4\n" in text


# ============================================================================
# read_definitions
# ============================================================================


def test_read_definitions_blocks(tool_text):
    text = tool_text(
        "read_definitions",
        {
            "definitions": [
                {"name": "add", "file_path": "src/math.js"},
                {"name": "sub", "file_path": "src/math.js"},
            ]
        },
    )
    assert text.startswith("Reading definitions: add (src/math.js), sub (src/math.js)\n")
    assert "=== add (src/math.js) ===" in text
    assert "function add(param1, param2) {" in text
    assert "=== sub (src/math.js) ===" in text
    assert text.count("// Last modified: 2025-01-15") == 2
    assert text.endswith("Real definitions will be read by official GKG.")


def test_read_definitions_without_definitions(tool_text):
    text = tool_text("read_definitions", {})
    assert "Reading definitions: No definitions provided" in text
    assert "No definitions to read.\n⚠️" in text


def test_read_definitions_entry_missing_fields(tool_text):
    text = tool_text("read_definitions", {"definitions": [{"name": "solo"}]})
    assert "Reading definitions: solo (undefined)" in text


# ============================================================================
# get_definition
# ============================================================================


def test_get_definition(tool_text):
    text = tool_text(
        "get_definition", {"file_path": "src/app.js", "line": 12, "symbol_name": "RunTask"}
    )
    assert text.startswith('Definition for "RunTask" at src/app.js:12:')
    assert "File: src/app.js\nLine: 12\nCode: const result = RunTask();" in text
    assert "File: src/core/runtask.js\nLines: 15-28" in text
    assert "function RunTask(input) {" in text


def test_get_definition_float_line(tool_text):
    text = tool_text("get_definition", {"file_path": "a.js", "line": 7.0, "symbol_name": "f"})
    assert "at a.js:7:" in text


# ============================================================================
# repo_map
# ============================================================================


def test_repo_map_defaults(tool_text):
    text = tool_text("repo_map", {"project_absolute_path": "/p", "relative_paths": ["src"]})
    assert text.startswith("Repository map for /p:\n\nAnalyzing paths: src\n")
    assert "📁 src/" in text
    assert "- Max depth: 3\n" in text
    assert "- Show directories: true\n" in text
    assert "- Show definitions: true\n" in text
    assert "- Page: 1\n" in text
    assert "- Page size: 50\n" in text
    assert "Total items: 156 files, 89 definitions" in text


def test_repo_map_overrides(tool_text):
    text = tool_text(
        "repo_map",
        {
            "project_absolute_path": "/p",
            "relative_paths": ["src", "lib"],
            "depth": 5,
            "show_directories": False,
            "show_definitions": False,
            "page": 3,
            "page_size": 10,
        },
    )
    assert "Analyzing paths: src, lib\n" in text
    assert "- Max depth: 5\n" in text
    assert "- Show directories: false\n" in text
    assert "- Show definitions: false\n" in text
    assert "- Page: 3\n" in text
    assert "- Page size: 10\n" in text


def test_repo_map_without_paths(tool_text):
    text = tool_text("repo_map", {"project_absolute_path": "/p", "relative_paths": []})
    assert "Analyzing paths: No paths specified" in text
