"""Data models for Scholia."""

from scholia.models.enums import FormKind, SectionType, DefinitionShape
from scholia.models.syntax import Token, TokenKind, Node, NodeKind
from scholia.models.document import (
    Form,
    CommentFragment,
    DocContent,
    Section,
    Document,
)
from scholia.models.result import ScholiaResult

__all__ = [
    "FormKind",
    "SectionType",
    "DefinitionShape",
    "Token",
    "TokenKind",
    "Node",
    "NodeKind",
    "Form",
    "CommentFragment",
    "DocContent",
    "Section",
    "Document",
    "ScholiaResult",
]
