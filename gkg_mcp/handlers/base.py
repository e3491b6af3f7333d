"""Base infrastructure for tool handlers.

Each handler is a plain function that takes its validated argument model
and returns a ToolResult. Handlers are registered with a ToolHandler, which
validates raw ``params.arguments`` before calling them.
"""

from dataclasses import dataclass
from typing import Any, Callable

from ..models import ToolArguments, ToolResult

UNDEFINED = "undefined"


@dataclass(frozen=True)
class ToolHandler:
    """A tool's argument model paired with the function that renders it."""

    arguments: type[ToolArguments]
    func: Callable[[Any], ToolResult]

    def __call__(self, raw_arguments: Any) -> ToolResult:
        """Validate raw arguments and run the handler.

        Raises:
            pydantic.ValidationError: if the arguments do not fit the model
        """
        return self.func(self.arguments.model_validate(raw_arguments))


def render(value: Any) -> str:
    """Render an argument value for interpolation into a template.

    Absent values print as ``undefined``, booleans as ``true``/``false`` and
    integral floats without a fractional part.
    """
    if value is None:
        return UNDEFINED
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def mock_notice(subject: str, followup: str) -> str:
    """Trailing banner that marks a response as mock data."""
    return f"⚠️ This is mock {subject}. {followup}"
