"""Form reader - turns source text into top-level forms."""

import re
from typing import List, Tuple, Union

from scholia.exceptions import ScholiaSyntaxError
from scholia.models import Form, FormKind, Node, NodeKind, Token, TokenKind
from scholia.reader.lexer import Lexer
from scholia.utils.text import is_doc_comment, strip_comment_marker

_NUMBER_RE = re.compile(r"^[+-]?\d")
_CLOSERS = {"(": ")", "[": "]", "{": "}"}
_QUOTING_PREFIXES = frozenset({"'", "`", "~", "~@", "@", "#'", "#="})


def _collection_kind(opener: str) -> NodeKind:
    if opener == "(":
        return NodeKind.LIST
    if opener == "[":
        return NodeKind.VECTOR
    if opener == "{":
        return NodeKind.MAP
    if opener == "#{":
        return NodeKind.SET
    if opener == "#(":
        return NodeKind.FN
    if opener.startswith("#?"):
        return NodeKind.READER_CONDITIONAL
    return NodeKind.NAMESPACED_MAP


def _atom_kind(text: str) -> NodeKind:
    if text.startswith(":"):
        return NodeKind.KEYWORD
    if _NUMBER_RE.match(text):
        return NodeKind.NUMBER
    return NodeKind.SYMBOL


class FormReader:
    """Reads source text into an ordered list of top-level forms.

    Consecutive documentation comments on adjacent lines collapse into a
    single comment form. A blank line, a plain `;` comment or an expression
    ends the run. Plain comments are dropped at the top level.
    """

    def read(self, text: str) -> List[Form]:
        """Read all top-level forms.

        Args:
            text: Source text

        Returns:
            Forms in source order

        Raises:
            ScholiaSyntaxError: On unterminated literals or unbalanced nesting
        """
        tokens = Lexer(text).tokenize()
        items: List[Union[Token, Form]] = []

        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token.kind is TokenKind.WHITESPACE:
                i += 1
                continue
            if token.kind is TokenKind.COMMENT:
                items.append(token)
                i += 1
                continue
            if token.kind is TokenKind.CLOSE:
                raise ScholiaSyntaxError(
                    f"Unmatched delimiter: {token.text}", line=token.line
                )

            node, end_index = self._read_datum(tokens, i, token.line)
            items.append(
                Form(
                    kind=FormKind.EXPRESSION,
                    raw_text=text[node.start : node.end],
                    start_line=node.line,
                    end_line=node.end_line,
                    start=node.start,
                    end=node.end,
                    node=node,
                    tokens=tuple(tokens[i:end_index]),
                )
            )
            i = end_index

        return self._collapse_comments(items)

    def _read_datum(
        self, tokens: List[Token], index: int, context_line: int
    ) -> Tuple[Node, int]:
        """Read one datum starting at `index`, skipping leading trivia."""
        index = self._skip_trivia(tokens, index)
        if index >= len(tokens):
            raise ScholiaSyntaxError(
                "Unexpected end of input while reading a form", line=context_line
            )

        token = tokens[index]

        if token.kind is TokenKind.OPEN:
            return self._read_collection(tokens, index)

        if token.kind is TokenKind.CLOSE:
            raise ScholiaSyntaxError(f"Unmatched delimiter: {token.text}", line=token.line)

        if token.kind is TokenKind.PREFIX:
            return self._read_prefixed(tokens, index)

        if token.kind is TokenKind.STRING:
            kind = NodeKind.STRING
        elif token.kind is TokenKind.REGEX:
            kind = NodeKind.REGEX
        elif token.kind is TokenKind.CHAR:
            kind = NodeKind.CHAR
        else:
            kind = _atom_kind(token.text)

        node = Node(
            kind=kind,
            text=token.text,
            start=token.start,
            end=token.end,
            line=token.line,
            end_line=token.end_line,
        )
        return node, index + 1

    def _read_collection(self, tokens: List[Token], index: int) -> Tuple[Node, int]:
        opener = tokens[index]
        closer = _CLOSERS[opener.text[-1]]
        children: List[Node] = []

        index += 1
        while True:
            index = self._skip_trivia(tokens, index)
            if index >= len(tokens):
                raise ScholiaSyntaxError(
                    f"Unterminated {opener.text} opened here", line=opener.line
                )

            token = tokens[index]
            if token.kind is TokenKind.CLOSE:
                if token.text != closer:
                    raise ScholiaSyntaxError(
                        f"Mismatched delimiter: expected {closer} to close "
                        f"{opener.text} from line {opener.line}, found {token.text}",
                        line=token.line,
                    )
                node = Node(
                    kind=_collection_kind(opener.text),
                    text=opener.text,
                    start=opener.start,
                    end=token.end,
                    line=opener.line,
                    end_line=token.end_line,
                    children=tuple(children),
                )
                return node, index + 1

            child, index = self._read_datum(tokens, index, opener.line)
            children.append(child)

    def _read_prefixed(self, tokens: List[Token], index: int) -> Tuple[Node, int]:
        prefix = tokens[index]

        if prefix.text in ("^", "#^"):
            meta, index = self._read_datum(tokens, index + 1, prefix.line)
            target, index = self._read_datum(tokens, index, prefix.line)
            children: Tuple[Node, ...] = (meta, target)
            kind = NodeKind.META
        else:
            target, index = self._read_datum(tokens, index + 1, prefix.line)
            children = (target,)
            if prefix.text == "#_":
                kind = NodeKind.DISCARD
            elif prefix.text in _QUOTING_PREFIXES:
                kind = NodeKind.PREFIXED
            else:
                kind = NodeKind.TAGGED

        node = Node(
            kind=kind,
            text=prefix.text,
            start=prefix.start,
            end=target.end,
            line=prefix.line,
            end_line=target.end_line,
            children=children,
        )
        return node, index

    @staticmethod
    def _skip_trivia(tokens: List[Token], index: int) -> int:
        while index < len(tokens) and tokens[index].is_trivia:
            index += 1
        return index

    def _collapse_comments(self, items: List[Union[Token, Form]]) -> List[Form]:
        """Collapse runs of documentation comments into comment forms."""
        forms: List[Form] = []
        run: List[Token] = []

        def flush() -> None:
            if run:
                forms.append(self._comment_form(run))
                run.clear()

        for item in items:
            if isinstance(item, Form):
                flush()
                forms.append(item)
                continue
            if not is_doc_comment(item.text):
                flush()
                continue
            if run and item.line != run[-1].line + 1:
                flush()
            run.append(item)

        flush()
        return forms

    @staticmethod
    def _comment_form(run: List[Token]) -> Form:
        lines = tuple(strip_comment_marker(token.text) for token in run)
        return Form(
            kind=FormKind.COMMENT,
            raw_text="\n".join(lines),
            start_line=run[0].line,
            end_line=run[-1].line,
            start=run[0].start,
            end=run[-1].end,
            lines=lines,
        )


def read_forms(text: str) -> List[Form]:
    """Read the top-level forms of `text`."""
    return FormReader().read(text)
