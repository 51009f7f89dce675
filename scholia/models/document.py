"""Document models for Scholia."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from scholia.models.enums import FormKind, SectionType
from scholia.models.syntax import Node, Token


@dataclass(frozen=True)
class Form:
    """One top-level unit of source text: a comment run or an expression."""

    kind: FormKind
    raw_text: str
    start_line: int
    end_line: int
    start: int = 0  # Offset of the form in the source text
    end: int = 0
    node: Optional[Node] = None  # Expressions only
    tokens: Tuple[Token, ...] = ()  # Expressions only
    lines: Tuple[str, ...] = ()  # Comments only, markers stripped

    @property
    def is_comment(self) -> bool:
        return self.kind is FormKind.COMMENT

    @property
    def is_expression(self) -> bool:
        return self.kind is FormKind.EXPRESSION


@dataclass(frozen=True)
class CommentFragment:
    """A single comment line, tagged with where it was found."""

    text: str
    line: int
    depth: int = 0
    start: int = 0  # Offsets relative to the owning form
    end: int = 0


@dataclass(frozen=True)
class DocContent:
    """Unmerged documentation pieces for one form."""

    docstring: Optional[str] = None
    prelude_paragraphs: Tuple[str, ...] = ()
    lifted_paragraphs: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.prelude_paragraphs and not self.lifted_paragraphs


@dataclass(frozen=True)
class Section:
    """A documentation or code unit, in source order."""

    type: SectionType
    raw: str
    docstring: Optional[str] = None
    start_line: int = 0
    end_line: int = 0

    @property
    def is_code(self) -> bool:
        return self.type is SectionType.CODE

    @property
    def is_comment(self) -> bool:
        return self.type is SectionType.COMMENT

    @property
    def doc_text(self) -> str:
        """The text a renderer should show in the documentation column."""
        return self.docstring or ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "type": self.type.value,
            "raw": self.raw,
            "docstring": self.docstring,
            "start_line": self.start_line,
            "end_line": self.end_line,
        }


@dataclass(frozen=True)
class Document:
    """The parsed sections of one source file."""

    filename: str
    sections: Tuple[Section, ...] = field(default_factory=tuple)
    namespace: Optional[str] = None
    raw_text: str = ""

    @property
    def title(self) -> str:
        """Namespace name, or the file name when there is no `ns` form."""
        return self.namespace or self.filename

    @property
    def section_count(self) -> int:
        return len(self.sections)

    @property
    def code_sections(self) -> List[Section]:
        return [s for s in self.sections if s.is_code]

    @property
    def comment_sections(self) -> List[Section]:
        return [s for s in self.sections if s.is_comment]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "filename": self.filename,
            "namespace": self.namespace,
            "sections": [s.to_dict() for s in self.sections],
        }
