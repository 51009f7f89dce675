"""Text helpers shared by the reader and the extractors."""

import re
from typing import Iterable, Tuple

_MARKER_RE = re.compile(r"^;+\s?")
_NON_DOC_RE = re.compile(r"^;(\s|$)")
_ESCAPE_RE = re.compile(r"\\(u[0-9a-fA-F]{4}|[0-7]{1,3}|.)", re.DOTALL)
_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    '"': '"',
    "\\": "\\",
}


def is_doc_comment(text: str) -> bool:
    """Whether a comment token counts as documentation.

    A lone `;` followed by whitespace (or nothing) marks a plain code comment;
    `;;` and longer markers are documentation. Shebang lines never are.
    """
    return text.startswith(";") and not _NON_DOC_RE.match(text)


def strip_comment_marker(text: str) -> str:
    """Remove leading semicolons and at most one following whitespace char."""
    return _MARKER_RE.sub("", text, count=1)


def decode_string_literal(literal: str) -> str:
    """Return the value of a string literal, quotes removed and escapes decoded."""
    body = literal[1:-1]

    def replace(match: "re.Match[str]") -> str:
        escape = match.group(1)
        if escape[0] == "u" and len(escape) == 5:
            return chr(int(escape[1:], 16))
        if escape[0] in "01234567":
            return chr(int(escape, 8))
        return _ESCAPES.get(escape, escape)

    return _ESCAPE_RE.sub(replace, body)


def cut_spans(text: str, spans: Iterable[Tuple[int, int]]) -> str:
    """Remove `[start, end)` spans from text.

    When a removal leaves its line blank the whole line goes, newline
    included. A removal at the end of a line takes the whitespace before it;
    one at the start of a line takes the whitespace after it. Inside a line,
    at most one space is left between the neighbours, and none before a
    closing delimiter.
    """
    result = text
    for start, end in sorted(set(spans), reverse=True):
        line_start = result.rfind("\n", 0, start) + 1
        line_end = result.find("\n", end)
        if line_end == -1:
            line_end = len(result)

        before = result[line_start:start]
        after = result[end:line_end]

        if not before.strip() and not after.strip():
            if line_end < len(result):
                result = result[:line_start] + result[line_end + 1 :]
            elif line_start > 0:
                result = result[: line_start - 1]
            else:
                result = ""
            continue

        if not after.strip():
            start = line_start + len(before.rstrip())
        elif not before.strip():
            end = end + len(after) - len(after.lstrip())
        elif before[-1:].isspace():
            if after[:1].isspace():
                end = end + len(after) - len(after.lstrip(" \t"))
            elif after[:1] in (")", "]", "}"):
                start = start - (len(before) - len(before.rstrip(" \t")))
        result = result[:start] + result[end:]

    return result
