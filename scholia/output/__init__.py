"""Output formatters for Scholia."""

from scholia.output.base import OutputFormatter
from scholia.output.markdown_formatter import MarkdownFormatter
from scholia.output.json_formatter import JsonFormatter

FORMATTERS = {
    "markdown": MarkdownFormatter,
    "json": JsonFormatter,
}


def create_formatter(output_format: str) -> OutputFormatter:
    """Create the formatter registered for `output_format`."""
    return FORMATTERS[output_format]()


__all__ = [
    "OutputFormatter",
    "MarkdownFormatter",
    "JsonFormatter",
    "FORMATTERS",
    "create_formatter",
]
