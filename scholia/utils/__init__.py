"""Utility functions for Scholia."""

from scholia.utils.text import (
    cut_spans,
    decode_string_literal,
    is_doc_comment,
    strip_comment_marker,
)

__all__ = [
    "cut_spans",
    "decode_string_literal",
    "is_doc_comment",
    "strip_comment_marker",
]
