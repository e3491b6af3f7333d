"""repo_map tool handler."""

from ..models import RepoMapArgs, ToolResult
from .base import mock_notice, render

DEFAULT_DEPTH = 3
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 50

MOCK_TREE = """\
📁 src/
  📄 main.js (15 functions, 3 classes)
  📁 components/
    📄 Header.jsx (1 component, 2 props)
    📄 Footer.jsx (1 component, 1 prop)
  📁 utils/
    📄 helpers.js (8 functions)
    📄 validators.js (5 functions)
  📁 models/
    📄 User.js (1 class, 4 methods)
    📄 Product.js (1 class, 6 methods)

📁 tests/
  📄 unit/ (23 test files)
  📁 integration/ (12 test files)

📁 docs/
  📄 README.md
  📄 API.md

📁 config/
  📄 webpack.config.js
  📄 babel.config.js"""


def handle_repo_map(args: RepoMapArgs) -> ToolResult:
    """Return a fixed directory tree plus the effective map configuration.

    Zero or absent depth/page/page_size fall back to their defaults; the two
    show_* flags are on unless explicitly false.
    """
    paths = ", ".join(args.relative_paths or []) or "No paths specified"

    return ToolResult.from_text(
        f"Repository map for {render(args.project_absolute_path)}:\n\n"
        f"Analyzing paths: {paths}\n\n"
        "Mock repository structure:\n\n"
        f"{MOCK_TREE}\n\n"
        "Configuration:\n"
        f"- Max depth: {render(args.depth or DEFAULT_DEPTH)}\n"
        f"- Show directories: {render(args.show_directories is not False)}\n"
        f"- Show definitions: {render(args.show_definitions is not False)}\n"
        f"- Page: {render(args.page or DEFAULT_PAGE)}\n"
        f"- Page size: {render(args.page_size or DEFAULT_PAGE_SIZE)}\n\n"
        "Total items: 156 files, 89 definitions\n\n"
        + mock_notice("repository map", "Real structure will be analyzed by official GKG.")
    )
