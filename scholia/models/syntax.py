"""Lexical and syntactic models produced by the reader."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class TokenKind(str, Enum):
    """Kind of a lexical token."""

    WHITESPACE = "whitespace"
    COMMENT = "comment"
    OPEN = "open"
    CLOSE = "close"
    STRING = "string"
    REGEX = "regex"
    CHAR = "char"
    PREFIX = "prefix"
    ATOM = "atom"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source span.

    `start` and `end` are character offsets into the source text; `line` and
    `end_line` are 1-based.
    """

    kind: TokenKind
    text: str
    start: int
    end: int
    line: int
    end_line: int

    @property
    def is_trivia(self) -> bool:
        """Whitespace and comments carry no syntax."""
        return self.kind in (TokenKind.WHITESPACE, TokenKind.COMMENT)


class NodeKind(str, Enum):
    """Kind of a datum in the syntax tree."""

    LIST = "list"
    VECTOR = "vector"
    MAP = "map"
    SET = "set"
    FN = "fn"
    READER_CONDITIONAL = "reader_conditional"
    NAMESPACED_MAP = "namespaced_map"
    SYMBOL = "symbol"
    KEYWORD = "keyword"
    NUMBER = "number"
    STRING = "string"
    REGEX = "regex"
    CHAR = "char"
    META = "meta"
    DISCARD = "discard"
    TAGGED = "tagged"
    PREFIXED = "prefixed"


COLLECTION_KINDS = frozenset(
    {
        NodeKind.LIST,
        NodeKind.VECTOR,
        NodeKind.MAP,
        NodeKind.SET,
        NodeKind.FN,
        NodeKind.READER_CONDITIONAL,
        NodeKind.NAMESPACED_MAP,
    }
)


@dataclass(frozen=True)
class Node:
    """A datum read from source.

    Leaves keep their token text. Collections keep their opening delimiter as
    `text` and their elements as `children`. Prefixed data (metadata,
    discards, tags, quotes) keep the prefix as `text` and wrap their
    targets in `children`; a `META` node holds `(metadata, target)`.
    """

    kind: NodeKind
    text: str
    start: int
    end: int
    line: int
    end_line: int
    children: Tuple["Node", ...] = ()

    @property
    def is_collection(self) -> bool:
        return self.kind in COLLECTION_KINDS

    @property
    def elements(self) -> Tuple["Node", ...]:
        """Children with `#_` discarded data removed."""
        return tuple(c for c in self.children if c.kind is not NodeKind.DISCARD)

    @property
    def head(self) -> Optional["Node"]:
        """First element of a collection, if any."""
        elements = self.elements
        return elements[0] if elements else None
