"""Extractors that pull documentation out of code forms."""

from scholia.extractors.docstring import (
    DocstringExtractor,
    ExtractedDocstring,
    ShapeRule,
    SHAPE_RULES,
    DEFINITION_HEADS,
)
from scholia.extractors.comments import CommentLifter, LiftedComments

__all__ = [
    "DocstringExtractor",
    "ExtractedDocstring",
    "ShapeRule",
    "SHAPE_RULES",
    "DEFINITION_HEADS",
    "CommentLifter",
    "LiftedComments",
]
